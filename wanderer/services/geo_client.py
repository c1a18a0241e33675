"""Geo client — Nominatim geocoding and OSRM driving routes."""

import logging
from dataclasses import asdict, dataclass

import httpx

from wanderer.config import settings
from wanderer.services.cache_service import cache_service

logger = logging.getLogger(__name__)

# Distance thresholds (km) for the transport suggestion
LOCAL_TRANSPORT_MAX_KM = 10
BUS_VAN_MAX_KM = 80


@dataclass
class GeocodeResult:
    latitude: float
    longitude: float
    display_name: str | None


@dataclass
class RouteResult:
    distance_km: float
    duration_min: float
    geometry: list[list[float]]  # [lat, lon] pairs
    recommendation: str


def transport_recommendation(distance_km: float) -> str:
    if distance_km < LOCAL_TRANSPORT_MAX_KM:
        return "Take a tricycle, jeepney, or walk if nearby. Quick and easy!"
    if distance_km < BUS_VAN_MAX_KM:
        return "Try taking a bus or van — affordable and frequent rides available."
    return "Best to drive your own vehicle or rent one for comfort and time efficiency."


class GeoClient:
    """Adapter for the public OpenStreetMap geocoding and routing services."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=15.0,
                headers={"User-Agent": settings.geo_user_agent},
                transport=self._transport,
            )
        return self._client

    async def geocode(self, query: str) -> GeocodeResult | None:
        """Resolve a free-text place to coordinates (first Nominatim hit)."""
        query = query.strip()
        if not query:
            return None

        cached = await cache_service.get_geocode(query)
        if cached:
            return GeocodeResult(**cached)

        try:
            client = await self._get_client()
            resp = await client.get(
                f"{settings.nominatim_base_url}/search",
                params={"format": "json", "q": query},
            )
            resp.raise_for_status()
            data = resp.json()
            if not data:
                return None
            hit = data[0]
            result = GeocodeResult(
                latitude=float(hit["lat"]),
                longitude=float(hit["lon"]),
                display_name=hit.get("display_name"),
            )
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Nominatim geocode failed for '{query}': {e}")
            return None

        await cache_service.set_geocode(query, asdict(result))
        return result

    async def route(
        self, origin: tuple[float, float], destination: tuple[float, float]
    ) -> RouteResult | None:
        """Driving route between two (lat, lon) points."""
        cached = await cache_service.get_route(origin, destination)
        if cached:
            return RouteResult(**cached)

        # OSRM expects lon,lat order
        coords = f"{origin[1]},{origin[0]};{destination[1]},{destination[0]}"
        try:
            client = await self._get_client()
            resp = await client.get(
                f"{settings.osrm_base_url}/route/v1/driving/{coords}",
                params={"overview": "full", "geometries": "geojson"},
            )
            resp.raise_for_status()
            routes = resp.json().get("routes") or []
            if not routes:
                return None
            best = routes[0]
            distance_km = best["distance"] / 1000
            result = RouteResult(
                distance_km=round(distance_km, 2),
                duration_min=round(best["duration"] / 60, 1),
                geometry=[[c[1], c[0]] for c in best.get("geometry", {}).get("coordinates", [])],
                recommendation=transport_recommendation(distance_km),
            )
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"OSRM route failed {origin} -> {destination}: {e}")
            return None

        await cache_service.set_route(origin, destination, asdict(result))
        return result

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None


geo_client = GeoClient()
