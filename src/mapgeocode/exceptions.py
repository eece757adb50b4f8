"""Custom exception hierarchy for mapgeocode."""


class GeocoderError(Exception):
    """Base exception for all mapgeocode errors."""


class InvalidFormat(GeocoderError, ValueError):
    """The requested output format is not one the provider serves."""

    def __init__(self, output_format: str):
        self.output_format = output_format
        super().__init__(f"'{output_format}' is not a valid format")


class MalformedResponse(GeocoderError):
    """The provider returned a body that cannot be read as a geocode response."""

    def __init__(self, raw: str, detail: str):
        self.raw = raw
        self.detail = detail
        super().__init__(f"Malformed geocode response: {detail}")
