"""
Geocode Lookup: Interactive CLI
===============================
Thin wrapper around the mapgeocode library.

Usage:
    mapgeocode                                  # interactive mode
    mapgeocode "1600 Amphitheatre Pkwy"         # single lookup
    mapgeocode "1600 Amphitheatre Pkwy" us      # single lookup, region bias
    mapgeocode -v ...                           # debug logging

The API key is read from the environment:
    GOOGLE_MAPS_API_KEY   Google Maps API key (optional)
"""

import logging
import os
import sys

import requests

from mapgeocode import GeocodingClient
from mapgeocode.exceptions import GeocoderError
from mapgeocode.models import GeocodeResponse

_API_KEY_ENV = "GOOGLE_MAPS_API_KEY"

_BANNER = """\
╔══════════════════════════════════════╗
║           Geocode Lookup             ║
║      Address → Latitude/Longitude    ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _print_response(response: GeocodeResponse) -> None:
    if not response.ok:
        print(f"  ✗ Status: {response.status}")
        if response.error_message:
            print(f"    {response.error_message}")
        return

    points = response.lat_lng()
    count = len(points)
    print(f"  ✓ {count} result{'s' if count != 1 else ''}")
    for result, point in zip(response.results, points):
        label = result.get("formatted_address", "")
        print(f"    {point.lat:>12.7f}, {point.lng:<12.7f} {label}")


def _run_interactive(client: GeocodingClient) -> None:
    print(_BANNER)

    while True:
        try:
            raw_address = input("\nAddress:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw_address.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw_address:
            print("  ✗ Address is required.")
            continue

        try:
            region = input("Region (optional):  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        try:
            response = client.geocode(raw_address, region)
            _print_response(response)
        except requests.RequestException as exc:
            print(f"  ✗ Request failed: {exc}")
        except GeocoderError as exc:
            print(f"  ✗ Error: {exc}")


def main(argv=None) -> None:
    """Entry point; supports both CLI args and interactive mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    # Only a leading -v is a flag; later ones are address text
    verbose = bool(args) and args[0] == "-v"
    if verbose:
        args = args[1:]

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if len(args) > 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)

    with GeocodingClient(api_key=os.environ.get(_API_KEY_ENV, "")) as client:
        if not args:
            _run_interactive(client)
            return

        # Single-shot mode
        address = args[0]
        region = args[1] if len(args) == 2 else ""
        try:
            response = client.geocode(address, region)
            _print_response(response)
        except requests.RequestException as exc:
            print(f"Request failed: {exc}", file=sys.stderr)
            sys.exit(2)
        except GeocoderError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(2)

        if not response.ok:
            sys.exit(1)


if __name__ == "__main__":
    main()
