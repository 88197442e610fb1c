"""Principal Cache Implementations

In-process and Redis backed caches of authenticated principals.
"""

import json
import logging
import time
from typing import Dict, Optional, Tuple
import redis.asyncio as redis
from src.app.services.principal_cache import PrincipalCache
from src.domain.principal import Principal

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60


class InMemoryPrincipalCache(PrincipalCache):
    """
    Dict backed cache with per-entry expiry

    Entries live in the worker process only; use the Redis cache when
    running several workers.
    """

    def __init__(self, ttl_seconds: int = DEFAULT_TTL_SECONDS, clock=time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Principal]] = {}

    async def get(self, access_token: str) -> Optional[Principal]:
        entry = self._entries.get(access_token)
        if entry is None:
            return None
        expires_at, principal = entry
        if self._clock() >= expires_at:
            del self._entries[access_token]
            return None
        return principal

    async def put(self, access_token: str, principal: Principal) -> None:
        now = self._clock()
        self._sweep(now)
        self._entries[access_token] = (now + self.ttl_seconds, principal)

    def _sweep(self, now: float) -> None:
        expired = [token for token, (expires_at, _) in self._entries.items() if now >= expires_at]
        for token in expired:
            del self._entries[token]

    async def evict(self, access_token: str) -> None:
        self._entries.pop(access_token, None)


class RedisPrincipalCache(PrincipalCache):
    """Principals stored as JSON under principal:<token> with a TTL"""

    def __init__(self, redis_url: str, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        if not redis_url:
            raise RuntimeError("REDIS_URL is not set")
        self.ttl_seconds = ttl_seconds
        self._r = redis.from_url(redis_url, decode_responses=True)

    def _key(self, access_token: str) -> str:
        return f"principal:{access_token}"

    async def get(self, access_token: str) -> Optional[Principal]:
        raw = await self._r.get(self._key(access_token))
        if not raw:
            return None
        try:
            return Principal.model_validate(json.loads(raw))
        except ValueError as e:
            logger.warning(f"Dropping unreadable cached principal: {e}")
            await self.evict(access_token)
            return None

    async def put(self, access_token: str, principal: Principal) -> None:
        await self._r.set(
            self._key(access_token),
            principal.model_dump_json(),
            ex=self.ttl_seconds,
        )

    async def evict(self, access_token: str) -> None:
        await self._r.delete(self._key(access_token))


def create_principal_cache(
    backend: str,
    redis_url: Optional[str] = None,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> PrincipalCache:
    """
    Factory function to create the configured principal cache

    Args:
        backend: "memory" or "redis"
        redis_url: Redis URL, required for the redis backend
        ttl_seconds: Entry lifetime

    Returns:
        Configured PrincipalCache
    """
    if backend == "redis":
        return RedisPrincipalCache(redis_url, ttl_seconds=ttl_seconds)
    if backend == "memory":
        return InMemoryPrincipalCache(ttl_seconds=ttl_seconds)
    raise ValueError(f"Unknown principal cache backend: {backend}")
