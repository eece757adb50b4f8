"""Decode provider bodies into GeocodeResponse values."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any

from mapgeocode.exceptions import InvalidFormat, MalformedResponse
from mapgeocode.models import GeocodeResponse
from mapgeocode.request import validate_output_format

# XML repeats an element where JSON uses a plural list key
_XML_LIST_TAGS = {
    "type": "types",
    "address_component": "address_components",
    "postcode_locality": "postcode_localities",
}
_XML_FLOAT_TAGS = {"lat", "lng"}
_XML_BOOL_TAGS = {"partial_match"}


def parse_response(raw: str, output_format: str = "json") -> GeocodeResponse:
    """
    Decode *raw* (a provider body in *output_format*) into a GeocodeResponse.

    Raises InvalidFormat for an unknown format and MalformedResponse if
    the body is undecodable or lacks 'status' / 'results'.
    """
    if not validate_output_format(output_format):
        raise InvalidFormat(output_format)
    if output_format == "xml":
        payload = _decode_xml(raw)
    else:
        payload = _decode_json(raw)
    return _build(raw, payload, output_format)


def _decode_json(raw: str) -> dict:
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise MalformedResponse(raw, f"invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise MalformedResponse(raw, "top-level JSON value is not an object")
    return payload


def _decode_xml(raw: str) -> dict:
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        raise MalformedResponse(raw, f"invalid XML ({exc})") from exc
    if root.tag != "GeocodeResponse":
        raise MalformedResponse(raw, f"unexpected root element <{root.tag}>")

    payload: dict[str, Any] = {"results": []}
    try:
        for child in root:
            if child.tag == "result":
                payload["results"].append(_xml_to_value(child))
            else:
                payload[child.tag] = _xml_to_value(child)
    except ValueError as exc:
        raise MalformedResponse(raw, f"bad coordinate value ({exc})") from exc
    return payload


def _xml_to_value(elem: ET.Element) -> Any:
    """Convert *elem* to the shape the JSON endpoint uses for it."""
    children = list(elem)
    if not children:
        text = (elem.text or "").strip()
        if elem.tag in _XML_FLOAT_TAGS:
            return float(text)
        if elem.tag in _XML_BOOL_TAGS:
            return text == "true"
        return text

    value: dict[str, Any] = {}
    for child in children:
        plural = _XML_LIST_TAGS.get(child.tag)
        if plural is not None:
            value.setdefault(plural, []).append(_xml_to_value(child))
        else:
            value[child.tag] = _xml_to_value(child)
    return value


def _build(raw: str, payload: dict, output_format: str) -> GeocodeResponse:
    status = payload.get("status")
    if not isinstance(status, str):
        raise MalformedResponse(raw, "missing 'status' field")
    if "results" not in payload:
        raise MalformedResponse(raw, "missing 'results' field")
    results = payload["results"]
    if not isinstance(results, list):
        raise MalformedResponse(raw, "'results' is not a list")

    return GeocodeResponse(
        raw=raw,
        status=status,
        results=tuple(results),
        error_message=payload.get("error_message"),
        output_format=output_format,
    )
