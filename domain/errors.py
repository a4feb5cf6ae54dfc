class ScanChefError(Exception):
    pass


class BackendUnavailable(ScanChefError):
    """The backend is not configured."""


class Unauthenticated(ScanChefError):
    """Nobody is signed in."""


class InvalidRequest(ScanChefError):
    pass


class GenerationParseError(ScanChefError):
    """The model output is not a list of recipes."""


class TransportFailure(ScanChefError):
    pass


class RemoteFunctionError(TransportFailure):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
