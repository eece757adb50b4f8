"""Typed result models for mapgeocode."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from mapgeocode.exceptions import MalformedResponse

STATUS_OK = "OK"


@dataclass(frozen=True)
class LatLng:
    """A single WGS84 coordinate pair."""

    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class GeocodeResponse:
    """
    Outcome of one geocode request.

    A non-OK status is ordinary data here, not an error: callers check
    ``ok`` (or ``status``) before trusting ``results``.
    """

    raw: str
    status: str
    results: tuple = field(default_factory=tuple)
    error_message: Optional[str] = None
    output_format: str = "json"

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def lat_lng(self) -> Optional[list[LatLng]]:
        """
        Return one LatLng per result, in provider order.

        Returns None when the status is not OK.
        Raises MalformedResponse if a result has no geometry location.
        """
        if not self.ok:
            return None
        return [_location_of(result, self.raw) for result in self.results]

    def has_multiple_results(self) -> bool:
        return self.ok and len(self.results) > 1

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "status": self.status,
            "error_message": self.error_message,
            "results": list(self.results),
        }


def _location_of(result: Mapping[str, Any], raw: str) -> LatLng:
    try:
        location = result["geometry"]["location"]
        return LatLng(lat=float(location["lat"]), lng=float(location["lng"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedResponse(
            raw, f"result without usable geometry.location ({exc!r})"
        ) from exc
