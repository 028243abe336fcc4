# This project was developed with assistance from AI tools.
import httpx
import pytest

from utils.geocoding import (
    CHECK_HAZARD_MAP,
    NOT_FOUND,
    UNAVAILABLE,
    GSIGeocoder,
    lookup_hazards,
)

ADDRESS = "京都府京都市南区西九条池ノ内町93"
SEARCH_URL = "https://geocoder.test/address-search/AddressSearch"


def _geocoder(handler) -> GSIGeocoder:
    return GSIGeocoder(url=SEARCH_URL, timeout=5, transport=httpx.MockTransport(handler))


def _found(request: httpx.Request) -> httpx.Response:
    assert request.url.params["q"] == ADDRESS
    return httpx.Response(200, json=[
        {"geometry": {"coordinates": [135.7512, 34.9812], "type": "Point"},
         "properties": {"title": "京都府京都市南区西九条池ノ内町"}},
        {"geometry": {"coordinates": [135.0, 35.0], "type": "Point"}, "properties": {"title": "other"}},
    ])


def test_geocode_returns_best_match() -> None:
    with _geocoder(_found) as geocoder:
        location = geocoder.geocode(ADDRESS)

    assert location.title == "京都府京都市南区西九条池ノ内町"
    assert (location.latitude, location.longitude) == (34.9812, 135.7512)


def test_geocode_without_match() -> None:
    with _geocoder(lambda request: httpx.Response(200, json=[])) as geocoder:
        assert geocoder.geocode(ADDRESS) is None


def test_geocode_malformed_response() -> None:
    with _geocoder(lambda request: httpx.Response(200, json=[{"geometry": {}}])) as geocoder:
        with pytest.raises(ValueError):
            geocoder.geocode(ADDRESS)


def test_lookup_hazards_found() -> None:
    report = lookup_hazards(ADDRESS, _geocoder(_found))

    assert report.address == ADDRESS
    assert report.latitude == 34.9812
    assert report.longitude == 135.7512
    assert "緯度34.9812" in report.flood_risk
    assert report.flood_risk.endswith(CHECK_HAZARD_MAP)
    assert report.landslide_risk == report.tsunami_risk == CHECK_HAZARD_MAP
    assert report.flood_map_image == ""


def test_lookup_hazards_not_found() -> None:
    report = lookup_hazards(ADDRESS, _geocoder(lambda request: httpx.Response(200, json=[])))

    assert report.flood_risk == report.landslide_risk == report.tsunami_risk == NOT_FOUND
    assert (report.latitude, report.longitude) == (0.0, 0.0)


@pytest.mark.parametrize("handler", [
    lambda request: httpx.Response(503, text="maintenance"),
    lambda request: httpx.Response(200, json=[{"geometry": {}}]),
    lambda request: httpx.Response(200, text="<html>not json</html>"),
])
def test_lookup_hazards_never_raises(handler) -> None:
    report = lookup_hazards(ADDRESS, _geocoder(handler))

    assert report.address == ADDRESS
    assert report.flood_risk == report.landslide_risk == report.tsunami_risk == UNAVAILABLE


def test_lookup_hazards_transport_error() -> None:
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert lookup_hazards(ADDRESS, _geocoder(unreachable)).flood_risk == UNAVAILABLE
