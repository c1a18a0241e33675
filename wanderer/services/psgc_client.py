"""PSGC API client — municipalities, cities and barangays for catalog forms."""

import asyncio
import logging

import httpx

from wanderer.config import settings
from wanderer.services.cache_service import cache_service

logger = logging.getLogger(__name__)


def _code_name_sorted(rows: list[dict]) -> list[dict]:
    return sorted(
        ({"code": r["code"], "name": r["name"]} for r in rows),
        key=lambda r: r["name"],
    )


class PSGCClient:
    """Adapter for the public PSGC API (psgc.gitlab.io)."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=settings.psgc_base_url,
                timeout=15.0,
                transport=self._transport,
            )
        return self._client

    async def _get_list(self, path: str) -> list[dict]:
        client = await self._get_client()
        resp = await client.get(path)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Unexpected PSGC payload for {path}")
        return data

    async def get_municipalities(self, province_code: str | None = None) -> list[dict]:
        """Municipalities and component cities of a province, merged and sorted by name."""
        province_code = province_code or settings.province_code

        cached = await cache_service.get_municipalities(province_code)
        if cached:
            return cached

        try:
            municipalities, cities = await asyncio.gather(
                self._get_list(f"/provinces/{province_code}/municipalities/"),
                self._get_list(f"/provinces/{province_code}/cities/"),
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"PSGC municipalities lookup failed for {province_code}: {e}")
            return []

        result = _code_name_sorted(municipalities + cities)
        await cache_service.set_municipalities(province_code, result)
        return result

    async def get_barangays(self, code: str) -> list[dict]:
        """Barangays of a municipality, falling back to the city endpoint."""
        cached = await cache_service.get_barangays(code)
        if cached:
            return cached

        rows: list[dict] | None = None
        for kind in ("municipalities", "cities"):
            try:
                rows = await self._get_list(f"/{kind}/{code}/barangays/")
                break
            except httpx.HTTPStatusError as e:
                logger.debug(f"PSGC {kind}/{code} barangays: HTTP {e.response.status_code}")
            except (httpx.RequestError, ValueError) as e:
                logger.error(f"PSGC barangays lookup failed for {code}: {e}")
                return []

        if rows is None:
            return []

        result = _code_name_sorted(rows)
        await cache_service.set_barangays(code, result)
        return result

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


psgc_client = PSGCClient()
