"""Command line interface for coordinate parsing and polygon containment."""

import argparse
import json
import logging
import sys
from typing import Any

from geo_polygon.adapters.config import AppConfig, PolygonConfigurationLoader
from geo_polygon.application.services import GeofenceService
from geo_polygon.domain.errors import GeoError
from geo_polygon.domain.models import Coordinate, Polygon

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _handle_parse_command(text: str, revert: bool, as_json: bool) -> None:
    """Handle the parse command."""
    coordinate = Coordinate.from_string(text, revert=revert)
    if as_json:
        print(json.dumps({"latitude": coordinate.latitude, "longitude": coordinate.longitude}))
    else:
        print(coordinate)


def _handle_contains_command(
    point_text: str, vertices: list[str], revert: bool, check_vertex: bool
) -> None:
    """Handle the contains command."""
    point = Coordinate.from_string(point_text, revert=revert)
    polygon = Polygon(vertices, revert=revert)
    logger.info(f"Testing {point} against polygon with {len(polygon)} vertices")
    result = polygon.contain_point(point, check_vertex=check_vertex)
    print(result.name)


def _handle_locate_command(point_text: str, config: AppConfig, as_json: bool) -> None:
    """Handle the locate command."""
    polygons = PolygonConfigurationLoader.load(config)
    if not polygons:
        print(f"No polygons configured in {config.config_file}", file=sys.stderr)
        sys.exit(1)

    point = Coordinate.from_string(point_text, revert=config.revert)
    service = GeofenceService(polygons, check_vertex=config.check_vertex)
    results = service.classify(point)

    if as_json:
        print(json.dumps({name: result.name for name, result in results.items()}, indent=2))
        return
    for name, result in results.items():
        print(f"{name}: {result.name}")


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Geographic coordinate parser and point-in-polygon tester",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Normalize a coordinate
  geo-polygon parse "40:26:46N, 079:56:55W"

  # Longitude-first input
  geo-polygon parse --revert "-79.948862, 40.446195"

  # Test a point against an ad-hoc polygon (repeat the first vertex to close it)
  geo-polygon contains "5, 5" -v "0, 0" -v "0, 10" -v "10, 10" -v "10, 0" -v "0, 0"

  # Test a point against the polygons of a TOML config file
  geo-polygon locate "48.137, 11.575" --config polygons.toml
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    parse_parser = subparsers.add_parser("parse", help="Parse and normalize a coordinate")
    parse_parser.add_argument("text", help="Coordinate in any supported notation")
    parse_parser.add_argument("--revert", action="store_true", help="Input is longitude-first")
    parse_parser.add_argument("--json", action="store_true", help="Output as JSON")

    contains_parser = subparsers.add_parser(
        "contains", help="Classify a point against a polygon given on the command line"
    )
    contains_parser.add_argument("point", help="Point to classify")
    contains_parser.add_argument(
        "-v",
        "--vertex",
        action="append",
        default=[],
        dest="vertices",
        help="Polygon vertex, in order (repeat for each vertex)",
    )
    contains_parser.add_argument("--revert", action="store_true", help="Input is longitude-first")
    contains_parser.add_argument(
        "--no-vertex-check",
        action="store_true",
        help="Don't report points on a vertex as VERTEX",
    )

    locate_parser = subparsers.add_parser(
        "locate", help="Classify a point against the configured polygons"
    )
    locate_parser.add_argument("point", help="Point to classify")
    locate_parser.add_argument("--config", help="TOML file with [[polygons]] definitions")
    locate_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _execute_command(args: Any, config: AppConfig) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "parse":
        _handle_parse_command(args.text, args.revert or config.revert, args.json)
    elif args.command == "contains":
        _handle_contains_command(
            args.point,
            args.vertices,
            args.revert or config.revert,
            config.check_vertex and not args.no_vertex_check,
        )
    elif args.command == "locate":
        if args.config:
            config.config_file = args.config
        _handle_locate_command(args.point, config, args.json)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        _configure_logging(config.log_level)
        _execute_command(args, config)
    except (GeoError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
