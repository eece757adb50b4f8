"""Shared test fixtures: a fake HTTP session serving canned provider bodies."""

import json

import pytest
import requests

OK_SINGLE = {
    "status": "OK",
    "results": [{"geometry": {"location": {"lat": 1.5, "lng": 2.5}}}],
}

OK_MULTIPLE = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Springfield, IL, USA",
            "geometry": {"location": {"lat": 39.7817, "lng": -89.6501}},
        },
        {
            "formatted_address": "Springfield, MO, USA",
            "geometry": {"location": {"lat": 37.2090, "lng": -93.2923}},
        },
    ],
}

ZERO_RESULTS = {"status": "ZERO_RESULTS", "results": []}

REQUEST_DENIED = {
    "status": "REQUEST_DENIED",
    "results": [],
    "error_message": "The provided API key is invalid.",
}

XML_OK = """\
<?xml version="1.0" encoding="UTF-8"?>
<GeocodeResponse>
 <status>OK</status>
 <result>
  <type>street_address</type>
  <formatted_address>1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA</formatted_address>
  <address_component>
   <long_name>1600</long_name>
   <short_name>1600</short_name>
   <type>street_number</type>
  </address_component>
  <address_component>
   <long_name>Mountain View</long_name>
   <short_name>Mountain View</short_name>
   <type>locality</type>
   <type>political</type>
  </address_component>
  <geometry>
   <location>
    <lat>37.4224764</lat>
    <lng>-122.0842499</lng>
   </location>
   <location_type>ROOFTOP</location_type>
  </geometry>
  <partial_match>true</partial_match>
  <place_id>ChIJ2eUgeAK6j4ARbn5u_wAGqWA</place_id>
 </result>
</GeocodeResponse>
"""

XML_ZERO_RESULTS = """\
<?xml version="1.0" encoding="UTF-8"?>
<GeocodeResponse>
 <status>ZERO_RESULTS</status>
</GeocodeResponse>
"""


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session; records every URL requested."""

    def __init__(self, body="", status_code: int = 200):
        self.urls: list[str] = []
        self.closed = False
        self.error = None
        self.set_body(body, status_code)

    def set_body(self, body, status_code: int = 200) -> None:
        if isinstance(body, dict):
            body = json.dumps(body)
        self._body = body
        self._status_code = status_code

    def get(self, url: str) -> FakeResponse:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return FakeResponse(self._body, self._status_code)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession(OK_SINGLE)


@pytest.fixture()
def client(session: FakeSession):
    """Create a GeocodingClient backed by the fake session."""
    from mapgeocode import GeocodingClient

    c = GeocodingClient(session=session)
    yield c
    c.close()
