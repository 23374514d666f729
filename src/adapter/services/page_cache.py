"""Page Cache Implementations

Provides in-process and Redis backed caches for rendered dashboard views.
"""

import logging
import time
from typing import Dict, Optional, Tuple
from redis import asyncio as aioredis
from src.app.services.page_cache import PageCache

logger = logging.getLogger(__name__)


class InMemoryPageCache(PageCache):
    """
    Page cache held in process memory

    Useful for development and tests. Entries expire after ttl_seconds.
    """

    def __init__(self, ttl_seconds: float = 300):
        self.ttl_seconds = ttl_seconds
        self._entries: Dict[str, Tuple[str, float]] = {}

    async def get(self, path: str) -> Optional[str]:
        entry = self._entries.get(path)
        if entry is None:
            return None

        content, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._entries[path]
            return None
        return content

    async def set(self, path: str, content: str) -> None:
        self._entries[path] = (content, time.monotonic() + self.ttl_seconds)

    async def invalidate(self, path: str) -> None:
        self._entries.pop(path, None)
        logger.debug(f"Invalidated cached page {path}")


class RedisPageCache(PageCache):
    """
    Page cache stored in Redis

    Shared between worker processes, so an invalidation issued by one
    process is seen by all of them.
    """

    KEY_PREFIX = "page:"

    def __init__(self, client: aioredis.Redis, ttl_seconds: int = 300):
        """
        Initialize Redis page cache

        Args:
            client: redis.asyncio client (decode_responses=True)
            ttl_seconds: Expiry applied to every stored page
        """
        self.client = client
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_url(cls, url: str, ttl_seconds: int = 300) -> "RedisPageCache":
        return cls(aioredis.Redis.from_url(url, decode_responses=True), ttl_seconds)

    def _key(self, path: str) -> str:
        return f"{self.KEY_PREFIX}{path}"

    async def get(self, path: str) -> Optional[str]:
        return await self.client.get(self._key(path))

    async def set(self, path: str, content: str) -> None:
        await self.client.set(self._key(path), content, ex=self.ttl_seconds)

    async def invalidate(self, path: str) -> None:
        await self.client.delete(self._key(path))
        logger.debug(f"Invalidated cached page {path}")
