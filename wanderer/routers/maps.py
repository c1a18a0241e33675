"""Maps router — destination geocoding and driving directions."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Query

from wanderer.services.geo_client import geo_client

router = APIRouter()


@router.get("/geocode")
async def geocode(q: str = Query(..., min_length=1, description="Place name or address")):
    result = await geo_client.geocode(q)
    if result is None:
        raise HTTPException(status_code=404, detail="Destination not found.")
    return asdict(result)


@router.get("/route")
async def route(
    origin_lat: float = Query(..., ge=-90, le=90),
    origin_lon: float = Query(..., ge=-180, le=180),
    dest_lat: float = Query(..., ge=-90, le=90),
    dest_lon: float = Query(..., ge=-180, le=180),
):
    """Driving route with distance, duration and a transport suggestion."""
    result = await geo_client.route((origin_lat, origin_lon), (dest_lat, dest_lon))
    if result is None:
        raise HTTPException(status_code=502, detail="Could not calculate route. Please try again.")
    return asdict(result)
