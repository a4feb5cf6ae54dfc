"""Sessions and the notifications sent when they change."""

from enum import Enum
import logging
from typing import Callable
import uuid

from domain.models import User


logger = logging.getLogger(__name__)


class AuthEvent(Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


class Session:
    def __init__(self, *, user: User, access_token: str) -> None:
        self.user = user
        self.access_token = access_token

    def __repr__(self) -> str:
        return f"<Session(user={self.user.id})>"


type AuthHandler = Callable[[AuthEvent, Session | None], None]


class AuthClient:
    """Holds the current session and tells subscribers when it changes."""

    def __init__(self, session: Session | None = None) -> None:
        self.session = session
        self._handlers: list[AuthHandler] = []

    async def get_user(self) -> User | None:
        return None if self.session is None else self.session.user

    async def sign_in(self, user: User, access_token: str | None = None) -> Session:
        token = uuid.uuid4().hex if access_token is None else access_token
        self.session = Session(user=user, access_token=token)
        self._emit(AuthEvent.SIGNED_IN)
        return self.session

    async def sign_out(self) -> None:
        self.session = None
        self._emit(AuthEvent.SIGNED_OUT)

    async def refresh(self, access_token: str | None = None) -> Session:
        if self.session is None:
            raise ValueError("No session to refresh.")
        self.session.access_token = (
            uuid.uuid4().hex if access_token is None else access_token
        )
        self._emit(AuthEvent.TOKEN_REFRESHED)
        return self.session

    def on_auth_state_change(self, handler: AuthHandler) -> Callable[[], None]:
        """Register `handler`. Call the returned function to unsubscribe."""
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def _emit(self, event: AuthEvent) -> None:
        logger.info("Auth event %s", event.value)
        for handler in list(self._handlers):
            handler(event, self.session)
