"""GeocodingClient, the main entry point for the library."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from mapgeocode._transport import _HttpTransport
from mapgeocode.exceptions import MalformedResponse
from mapgeocode.models import GeocodeResponse, LatLng
from mapgeocode.request import build_request_url, redact
from mapgeocode.response import parse_response

logger = logging.getLogger(__name__)


class GeocodingClient:
    """
    Synchronous client for the Google Maps geocoding endpoint.

    Every call to geocode() returns an immutable GeocodeResponse and
    also keeps it as ``last_response`` for the convenience helpers.
    Instances are not safe to share between threads.
    """

    def __init__(
        self, api_key: str = "", session: Optional[requests.Session] = None
    ):
        self._api_key = api_key
        self._transport = _HttpTransport(session)
        self._last_response: Optional[GeocodeResponse] = None

    # ── Public API ────────────────────────────────────────────────

    def geocode(
        self, address: str, region: str = "", output_format: str = "json"
    ) -> GeocodeResponse:
        """
        Query the provider for *address*.

        Returns the decoded GeocodeResponse; ``response.raw`` holds the
        body exactly as received. A non-OK status is returned, not raised.
        Raises InvalidFormat (before any request is sent) or
        MalformedResponse, which also clears ``last_response``; requests
        exceptions propagate unchanged.
        """
        url = build_request_url(address, region, output_format, self._api_key)
        logger.debug("GET %s", redact(url, self._api_key))

        raw = self._transport.get_text(url)
        try:
            response = parse_response(raw, output_format)
        except MalformedResponse:
            self._last_response = None
            raise
        if not response.ok:
            if response.error_message:
                logger.info(
                    "Geocode status %s for '%s': %s",
                    response.status,
                    address,
                    response.error_message,
                )
            else:
                logger.info(
                    "Geocode status %s for '%s'", response.status, address
                )

        self._last_response = response
        return response

    def get_lat_lng(self, address: str) -> Optional[list[LatLng]]:
        """
        Geocode *address* and return its coordinate pairs in result order.

        Returns None when the provider status is not OK.
        """
        return self.geocode(address).lat_lng()

    def is_address_valid(self, address: str, region: str = "") -> bool:
        """
        Check if the address exists.

        The provider answers 'ZERO_RESULTS' for addresses it cannot find,
        so anything other than 'OK' counts as invalid.
        """
        return self.geocode(address, region).ok

    def has_multiple_results(self) -> bool:
        """True if the last geocode call returned more than one result."""
        if self._last_response is None:
            return False
        return self._last_response.has_multiple_results()

    def close(self) -> None:
        """Close the underlying HTTP session if the client owns it."""
        self._transport.close()

    def __enter__(self) -> GeocodingClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Accessors ─────────────────────────────────────────────────

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value

    @property
    def last_response(self) -> Optional[GeocodeResponse]:
        return self._last_response

    @property
    def raw_response(self) -> Optional[str]:
        return self._last_response.raw if self._last_response else None

    @property
    def status(self) -> Optional[str]:
        return self._last_response.status if self._last_response else None

    @property
    def error_message(self) -> Optional[str]:
        if self._last_response is None:
            return None
        return self._last_response.error_message

    @property
    def results(self) -> Optional[tuple]:
        return self._last_response.results if self._last_response else None
