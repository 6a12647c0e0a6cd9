"""
OpenStreetMap Nominatim client for reverse geocoding.
Free, no API key required (an identifying User-Agent is mandatory).
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

# Address fields tried in order when picking a city label
CITY_FIELDS = ("city", "town", "village", "suburb", "state", "county")


class NominatimGeocoder:
    """
    Resolve coordinates into a city label using Nominatim.

    Lookup failures are logged and reported as ``None`` so callers can fall
    back to a manually entered city.
    """

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "ecotrip/1.0",
        timeout: float = 8.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json", "User-Agent": user_agent},
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def test_connection(self) -> bool:
        """Test API connectivity."""
        try:
            result = await self.reverse_geocode(51.5074, -0.1278)  # London
            return bool(result.get("address"))
        except Exception:
            return False

    async def reverse_geocode(self, lat: float, lon: float) -> dict:
        """
        Look up the address at a point.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Raw Nominatim JSON payload

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses
        """
        url = f"{self.base_url}/reverse"
        params = {"lat": lat, "lon": lon, "format": "json"}

        response = await self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def resolve_city(self, lat: float, lon: float) -> Optional[str]:
        """
        Best city-like label for a point, or None if it cannot be resolved.
        """
        try:
            data = await self.reverse_geocode(lat, lon)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Reverse geocoding failed for ({lat:.2f}, {lon:.2f}): {e}")
            return None

        address = data.get("address") if isinstance(data, dict) else None
        if not isinstance(address, dict):
            address = {}

        for field in CITY_FIELDS:
            if address.get(field):
                return address[field]

        logger.info(f"No city-like field in address for ({lat:.2f}, {lon:.2f})")
        return None
