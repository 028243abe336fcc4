# This project was developed with assistance from AI tools.
"""
GSI (国土地理院) address search client and hazard narratives.

The address search endpoint returns a GeoJSON-like list:
    [{"geometry": {"coordinates": [lon, lat]}, "properties": {"title": ...}}]

Hazard narratives point the reader to the municipal hazard map; they never
claim a risk level. lookup_hazards never raises: any failure becomes a
"要確認" narrative so the rest of the pipeline keeps going.
"""
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from config import config
from models import HazardReport

logger = logging.getLogger(__name__)

CHECK_HAZARD_MAP = "市区町村のハザードマップで要確認。"
NOT_FOUND = "住所から位置情報を取得できませんでした。要確認。"
UNAVAILABLE = "要確認"


# =============================================================================
# Data Models
# =============================================================================

@dataclass
class GeocodedAddress:
    """Geocoded address with coordinates."""
    title: str
    latitude: float
    longitude: float

    def format_display(self) -> str:
        return f"{self.title} (緯度{self.latitude:.4f}, 経度{self.longitude:.4f})"


# =============================================================================
# API Client
# =============================================================================

class GSIGeocoder:
    """Client for the GSI address search API."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.url = url or config.GEOCODER_URL
        self._client = httpx.Client(
            timeout=timeout if timeout is not None else config.GEOCODER_TIMEOUT,
            transport=transport,
        )

    def _request(self, address: str) -> Any:
        try:
            response = self._client.get(self.url, params={"q": address})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"GSI address search error: {e.response.status_code}")
            raise
        except httpx.RequestError as e:
            logger.error(f"GSI address search failed: {e}")
            raise

    def geocode(self, address: str) -> GeocodedAddress | None:
        """
        Convert an address to coordinates.

        Returns:
            GeocodedAddress for the best match, or None if nothing matched

        Raises:
            httpx.HTTPError: On transport or HTTP status failures
            ValueError: On a malformed response
        """
        return self._parse(self._request(address))

    @staticmethod
    def _parse(result: Any) -> GeocodedAddress | None:
        if not result:
            return None
        try:
            best = result[0]
            lon, lat = best["geometry"]["coordinates"][:2]
            title = best.get("properties", {}).get("title", "")
            return GeocodedAddress(title=title, latitude=float(lat), longitude=float(lon))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ValueError(f"Unexpected address search response: {e}") from e

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


# =============================================================================
# Module-level functions
# =============================================================================

def hazard_narratives(location: GeocodedAddress | None) -> dict[str, str]:
    if location is None:
        return {"flood_risk": NOT_FOUND, "landslide_risk": NOT_FOUND, "tsunami_risk": NOT_FOUND}
    return {
        "flood_risk": f"緯度{location.latitude:.4f}, 経度{location.longitude:.4f}付近。{CHECK_HAZARD_MAP}",
        "landslide_risk": CHECK_HAZARD_MAP,
        "tsunami_risk": CHECK_HAZARD_MAP,
    }


def lookup_hazards(address: str, geocoder: GSIGeocoder | None = None) -> HazardReport:
    """
    Geocode ``address`` and build the hazard report narratives.

    Map images are left empty; they are supplied by the caller when available.
    """
    own_client = geocoder is None
    geocoder = geocoder or GSIGeocoder()
    try:
        location = geocoder.geocode(address)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Hazard lookup failed for {address!r}: {e}")
        return HazardReport(
            address=address,
            flood_risk=UNAVAILABLE,
            landslide_risk=UNAVAILABLE,
            tsunami_risk=UNAVAILABLE,
        )
    finally:
        if own_client:
            geocoder.close()

    if location is None:
        logger.info(f"No geocoding match for {address!r}")
    report = HazardReport(address=address, **hazard_narratives(location))
    if location is not None:
        report.latitude = location.latitude
        report.longitude = location.longitude
    return report
