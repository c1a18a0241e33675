"""Redis cache service for geocoding, routing and PSGC location lookups."""

import json
import logging
from typing import Any

import redis.asyncio as redis

from wanderer.config import settings

logger = logging.getLogger(__name__)

# TTLs in seconds
TTL_GEOCODE = 24 * 60 * 60        # 24 hours
TTL_ROUTE = 60 * 60               # 1 hour
TTL_LOCATIONS = 7 * 24 * 60 * 60  # 7 days; PSGC lists rarely change


class CacheService:
    """Redis-backed cache with typed TTLs."""

    def __init__(self):
        self._redis: redis.Redis | None = None

    async def _get_redis(self) -> redis.Redis | None:
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    settings.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, cache disabled: {e}")
                self._redis = None
                return None
        return self._redis

    async def get(self, key: str) -> Any | None:
        """Get a value from cache. Returns None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:
            return None

    async def set(self, key: str, value: Any, ttl: int = TTL_ROUTE) -> bool:
        """Set a value in cache with TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(key, json.dumps(value, default=str), ex=ttl)
            return True
        except Exception:
            return False

    # Typed helpers

    def geocode_key(self, query: str) -> str:
        return f"geocode:{query.strip().lower()}"

    def route_key(self, origin: tuple[float, float], destination: tuple[float, float]) -> str:
        return f"route:{origin[0]:.5f},{origin[1]:.5f}:{destination[0]:.5f},{destination[1]:.5f}"

    def municipalities_key(self, province_code: str) -> str:
        return f"psgc:municipalities:{province_code}"

    def barangays_key(self, code: str) -> str:
        return f"psgc:barangays:{code}"

    async def get_geocode(self, query: str) -> dict | None:
        return await self.get(self.geocode_key(query))

    async def set_geocode(self, query: str, data: dict):
        await self.set(self.geocode_key(query), data, TTL_GEOCODE)

    async def get_route(self, origin: tuple[float, float], destination: tuple[float, float]) -> dict | None:
        return await self.get(self.route_key(origin, destination))

    async def set_route(self, origin: tuple[float, float], destination: tuple[float, float], data: dict):
        await self.set(self.route_key(origin, destination), data, TTL_ROUTE)

    async def get_municipalities(self, province_code: str) -> list[dict] | None:
        return await self.get(self.municipalities_key(province_code))

    async def set_municipalities(self, province_code: str, data: list[dict]):
        await self.set(self.municipalities_key(province_code), data, TTL_LOCATIONS)

    async def get_barangays(self, code: str) -> list[dict] | None:
        return await self.get(self.barangays_key(code))

    async def set_barangays(self, code: str, data: list[dict]):
        await self.set(self.barangays_key(code), data, TTL_LOCATIONS)

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None


cache_service = CacheService()
