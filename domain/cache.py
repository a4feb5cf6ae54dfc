from collections import Counter
from typing import Any, Awaitable, Callable, Hashable


type CacheKey = tuple[Hashable, ...]


class QueryCache:
    """Results of reads keyed by query. Entries are only ever dropped, never patched."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, Any] = {}
        self._generations: Counter[Hashable] = Counter()

    async def fetch[T](self, key: CacheKey, loader: Callable[[], Awaitable[T]]) -> T:
        if key in self._entries:
            return self._entries[key]
        generation = self._generations[key[0]]
        result = await loader()
        # An invalidation landed while loading, so the result may predate a write.
        if self._generations[key[0]] == generation:
            self._entries[key] = result
        return result

    def invalidate(self, name: Hashable) -> None:
        """Drop every entry whose key starts with `name`, including loads in flight."""
        self._generations[name] += 1
        for key in [k for k in self._entries if k[0] == name]:
            del self._entries[key]
