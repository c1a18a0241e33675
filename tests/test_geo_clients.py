import httpx
import pytest

from wanderer.services.geo_client import GeoClient, transport_recommendation
from wanderer.services.psgc_client import PSGCClient


@pytest.mark.parametrize(
    "km, expected",
    [
        (2.5, "tricycle"),
        (9.99, "tricycle"),
        (10, "bus or van"),
        (79.9, "bus or van"),
        (80, "drive your own vehicle"),
        (250, "drive your own vehicle"),
    ],
)
def test_transport_recommendation(km, expected):
    assert expected in transport_recommendation(km)


class TestGeoClient:
    async def test_geocode_first_hit(self):
        def handler(request: httpx.Request):
            assert request.url.path == "/search"
            assert request.url.params["q"] == "Cagsawa Ruins"
            assert request.url.params["format"] == "json"
            return httpx.Response(200, json=[
                {"lat": "13.1660", "lon": "123.7018", "display_name": "Cagsawa Ruins, Daraga"},
                {"lat": "0", "lon": "0", "display_name": "Other"},
            ])

        client = GeoClient(transport=httpx.MockTransport(handler))
        result = await client.geocode("  Cagsawa Ruins ")
        await client.close()

        assert result.latitude == pytest.approx(13.166)
        assert result.longitude == pytest.approx(123.7018)
        assert result.display_name == "Cagsawa Ruins, Daraga"

    async def test_geocode_no_results(self):
        client = GeoClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
        assert await client.geocode("Atlantis") is None

    async def test_geocode_blank_query(self):
        def handler(request):
            raise AssertionError("no request expected")

        client = GeoClient(transport=httpx.MockTransport(handler))
        assert await client.geocode("   ") is None

    async def test_geocode_http_error_returns_none(self):
        client = GeoClient(transport=httpx.MockTransport(lambda r: httpx.Response(503)))
        assert await client.geocode("Legazpi") is None

    async def test_route(self):
        def handler(request: httpx.Request):
            # OSRM takes lon,lat pairs
            assert request.url.path == "/route/v1/driving/123.7018,13.166;123.6858,13.2548"
            assert request.url.params["geometries"] == "geojson"
            return httpx.Response(200, json={
                "routes": [{
                    "distance": 15234.0,
                    "duration": 1530.0,
                    "geometry": {"coordinates": [[123.7018, 13.166], [123.6858, 13.2548]]},
                }],
            })

        client = GeoClient(transport=httpx.MockTransport(handler))
        result = await client.route((13.166, 123.7018), (13.2548, 123.6858))

        assert result.distance_km == 15.23
        assert result.duration_min == 25.5
        assert result.geometry == [[13.166, 123.7018], [13.2548, 123.6858]]
        assert "bus or van" in result.recommendation

    async def test_route_without_routes(self):
        client = GeoClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"routes": []})))
        assert await client.route((13.0, 123.0), (13.1, 123.1)) is None

    @pytest.mark.parametrize(
        "reply",
        [
            httpx.Response(200, text="<html>rate limited</html>"),
            httpx.Response(200, json=[{"display_name": "No coordinates"}]),
            httpx.Response(200, json={"error": "Unable to geocode"}),
        ],
    )
    async def test_geocode_malformed_reply_returns_none(self, reply):
        client = GeoClient(transport=httpx.MockTransport(lambda r: reply))
        assert await client.geocode("Legazpi") is None

    @pytest.mark.parametrize(
        "reply",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"routes": [{"duration": 600}]}),
            httpx.Response(200, json=[]),
        ],
    )
    async def test_route_malformed_reply_returns_none(self, reply):
        client = GeoClient(transport=httpx.MockTransport(lambda r: reply))
        assert await client.route((13.166, 123.7018), (13.2548, 123.6858)) is None


class TestPSGCClient:
    async def test_municipalities_merged_and_sorted(self):
        def handler(request: httpx.Request):
            if request.url.path.endswith("/provinces/050500000/municipalities/"):
                return httpx.Response(200, json=[
                    {"code": "050503000", "name": "Camalig", "regionCode": "050000000"},
                    {"code": "050501000", "name": "Bacacay"},
                ])
            if request.url.path.endswith("/provinces/050500000/cities/"):
                return httpx.Response(200, json=[{"code": "050506000", "name": "City of Legazpi"}])
            return httpx.Response(404)

        client = PSGCClient(transport=httpx.MockTransport(handler))
        result = await client.get_municipalities()

        assert result == [
            {"code": "050501000", "name": "Bacacay"},
            {"code": "050503000", "name": "Camalig"},
            {"code": "050506000", "name": "City of Legazpi"},
        ]

    async def test_municipalities_error_returns_empty(self):
        client = PSGCClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
        assert await client.get_municipalities() == []

    async def test_barangays_falls_back_to_city(self):
        def handler(request: httpx.Request):
            if request.url.path.endswith("/municipalities/050506000/barangays/"):
                return httpx.Response(404)
            if request.url.path.endswith("/cities/050506000/barangays/"):
                return httpx.Response(200, json=[
                    {"code": "050506002", "name": "Bagumbayan"},
                    {"code": "050506001", "name": "Bitano"},
                ])
            return httpx.Response(404)

        client = PSGCClient(transport=httpx.MockTransport(handler))
        result = await client.get_barangays("050506000")
        assert [b["name"] for b in result] == ["Bagumbayan", "Bitano"]

    async def test_barangays_unknown_code(self):
        client = PSGCClient(transport=httpx.MockTransport(lambda r: httpx.Response(404)))
        assert await client.get_barangays("999999999") == []


async def test_geocode_served_from_cache(monkeypatch):
    from unittest.mock import AsyncMock

    from wanderer.services.cache_service import cache_service

    monkeypatch.setattr(
        cache_service,
        "get_geocode",
        AsyncMock(return_value={"latitude": 13.1, "longitude": 123.7, "display_name": "Legazpi"}),
    )

    def handler(request):
        raise AssertionError("cache hit should not reach Nominatim")

    client = GeoClient(transport=httpx.MockTransport(handler))
    result = await client.geocode("Legazpi")
    assert result.display_name == "Legazpi"


def test_cache_keys_normalised():
    from wanderer.services.cache_service import cache_service

    assert cache_service.geocode_key("  Mayon Volcano ") == "geocode:mayon volcano"
    assert cache_service.route_key((13.1, 123.7), (13.25, 123.68)) == (
        "route:13.10000,123.70000:13.25000,123.68000"
    )
