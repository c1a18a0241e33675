from fastapi import APIRouter, Query

from wanderer.services.psgc_client import psgc_client

router = APIRouter()


@router.get("/municipalities")
async def list_municipalities(province_code: str | None = Query(None)):
    """Municipalities and cities of the province (Albay by default)."""
    return await psgc_client.get_municipalities(province_code)


@router.get("/municipalities/{code}/barangays")
async def list_barangays(code: str):
    return await psgc_client.get_barangays(code)
