"""Command-line interface: distance between two places."""

import argparse
import asyncio
import json
import logging
import math
import sys
from typing import Any, NoReturn

import aiohttp
from pydantic import ValidationError

from city_distance.adapters.config import AppConfig
from city_distance.adapters.google_api import GoogleGeocoder
from city_distance.application.services import CityDistanceService
from city_distance.domain.errors import CityDistanceError, InvalidUsageError
from city_distance.domain.models import DistanceResult, DistanceUnit

logger = logging.getLogger(__name__)

HELP_FLAGS = ("--help", "-h")


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports problems as InvalidUsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise InvalidUsageError(message)


def _setup_argparse(default_unit: str = "km") -> _UsageParser:
    """Set up and configure argument parser."""
    parser = _UsageParser(
        prog="city-distance",
        usage="%(prog)s [OPTIONS] PLACE-A PLACE-B\n       %(prog)s [ --help ]",
        description="Find the distance between two places.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        epilog="""
Examples:
  city-distance "London" "Paris"
  city-distance --unit miles "New York" "Los Angeles"
  city-distance --json "Munich" "Berlin"

Set GOOGLE_API_KEY to authenticate against the Google Geocoding API.
        """,
    )
    parser.add_argument("places", nargs="*", metavar="PLACE", help="Two place names")
    parser.add_argument(
        "--unit",
        default=default_unit,
        help=f"Unit to display distance: km or miles (default: {default_unit})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Deadline for both lookups in seconds (0 disables, default from config)",
    )
    parser.add_argument("--json", action="store_true", help="Output matched places as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log resolved addresses")
    parser.add_argument("--help", "-h", action="store_true", help="Print usage")
    return parser


def _wants_help(argv: list[str]) -> bool:
    """Check for a help flag before any other validation."""
    for token in argv:
        if token == "--":
            return False
        if token in HELP_FLAGS:
            return True
    return False


def _validate_places(places: list[str]) -> tuple[str, str]:
    """Require exactly two non-empty place names."""
    if len(places) != 2:
        raise InvalidUsageError(f"expected two places, got {len(places)}")
    place_a, place_b = places
    if not place_a.strip() or not place_b.strip():
        raise InvalidUsageError("place names must not be empty")
    return place_a, place_b


def _configure_logging(level: str) -> None:
    """Send log records to stderr so stdout only carries the result."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def _measure(
    config: AppConfig,
    place_a: str,
    place_b: str,
    unit: DistanceUnit,
    timeout_seconds: float | None,
) -> DistanceResult:
    """Resolve both places with one shared HTTP session and measure the distance."""
    async with aiohttp.ClientSession() as session:
        geocoder = GoogleGeocoder(
            session, api_key=config.google_api_key, base_url=config.geocoding_url
        )
        service = CityDistanceService(geocoder, timeout_seconds=timeout_seconds)
        return await service.measure(place_a, place_b, unit)


def _print_result(result: DistanceResult, output_json: bool) -> None:
    """Print the distance, or the full result as JSON."""
    if output_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return
    print(f"{result.distance:f}")


def _parse_args(parser: _UsageParser, argv: list[str]) -> tuple[Any, DistanceUnit, str, str]:
    """Parse and validate arguments in a single pass."""
    args = parser.parse_intermixed_args(argv)
    unit = DistanceUnit.from_token(args.unit)
    place_a, place_b = _validate_places(args.places)
    if args.timeout is not None and (not math.isfinite(args.timeout) or args.timeout < 0):
        raise InvalidUsageError("timeout must be a finite, non-negative number of seconds")
    return args, unit, place_a, place_b


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    argv = sys.argv[1:] if argv is None else argv

    # Help must not depend on a loadable configuration.
    if _wants_help(argv):
        _setup_argparse().print_help(sys.stdout)
        return 0

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    parser = _setup_argparse(config.default_unit)

    try:
        args, unit, place_a, place_b = _parse_args(parser, argv)
    except InvalidUsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help(sys.stdout)
        return 1

    _configure_logging("INFO" if args.verbose else config.log_level)
    timeout_seconds = config.timeout if args.timeout is None else (args.timeout or None)

    try:
        result = asyncio.run(_measure(config, place_a, place_b, unit, timeout_seconds))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 1
    except CityDistanceError as e:
        logger.debug("Distance lookup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_result(result, args.json)
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(run())


if __name__ == "__main__":
    cli_main()
