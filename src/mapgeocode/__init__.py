"""mapgeocode: resolve addresses to coordinates with the Google Maps geocoder."""

from mapgeocode.client import GeocodingClient
from mapgeocode.exceptions import (
    GeocoderError,
    InvalidFormat,
    MalformedResponse,
)
from mapgeocode.models import GeocodeResponse, LatLng

__all__ = [
    "GeocodingClient",
    "GeocodeResponse",
    "LatLng",
    "GeocoderError",
    "InvalidFormat",
    "MalformedResponse",
]
