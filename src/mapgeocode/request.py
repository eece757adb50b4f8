"""Output-format validation and request URL construction."""

from urllib.parse import quote

from mapgeocode.exceptions import InvalidFormat

API_URL = "https://maps.google.com/maps/api/geocode"
VALID_OUTPUT_FORMATS = ("json", "xml")


def validate_output_format(output_format: str) -> bool:
    """Return True if *output_format* is served by the provider."""
    return output_format in VALID_OUTPUT_FORMATS


def build_request_url(
    address: str,
    region: str = "",
    output_format: str = "json",
    api_key: str = "",
) -> str:
    """
    Build the provider URL for *address*, e.g.
    '.../geocode/json?address=1600%20Amphitheatre%20Pkwy&region=us&key=ABC'.

    Region and key are only appended when non-empty.
    Raises InvalidFormat if *output_format* is not 'json' or 'xml'.
    """
    if not validate_output_format(output_format):
        raise InvalidFormat(output_format)

    url = f"{API_URL}/{output_format}?address={quote(address, safe='')}"
    if region:
        url += f"&region={quote(region, safe='')}"
    if api_key:
        url += f"&key={quote(api_key, safe='')}"
    return url


def redact(url: str, api_key: str) -> str:
    """Hide *api_key* in *url* so it can be logged."""
    if not api_key:
        return url
    return url.replace(f"&key={quote(api_key, safe='')}", "&key=***")
