"""API clients for external services."""

from .nominatim import NominatimGeocoder

__all__ = [
    "NominatimGeocoder",
]
