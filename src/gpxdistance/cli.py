#!/usr/bin/env python3
"""
GPX (GPS Exchange Format) Distance Calculator
This script reads a GPX file and prints the shortest and longest distance
between a given point and the track points of the file as a CSV line.

Requirements:
    pip install gpxpy

"""

from typing import List, Optional
import argparse
import logging
import sys

from . import __version__
from .config import CoordinateError, DistanceConfig, ProgramInfo
from .distance_range import DistanceRange, find_distance_range
from .track import GpxParseError, GpxReadError, load_gpx

# Configure logging
logger = logging.getLogger("gpxdistance")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# (flag, help) for the required options, in usage order
REQUIRED_OPTIONS = [
    ("gpxfile", "GPX file to parse"),
    ("lat", "latitude (decimal degrees) of given point"),
    ("lon", "longitude (decimal degrees) of given point"),
]


class UsageError(Exception):
    """Raised when the command line can't be parsed."""

    pass


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that leaves usage reporting to the caller."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def create_argument_parser(info: ProgramInfo) -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Options take one or two dashes and accept both "-lat=55.05" and "-lat 55.05".

    Returns:
        Configured ArgumentParser instance
    """
    parser = UsageArgumentParser(
        prog=info.name,
        description=info.purpose,
        add_help=False,
        allow_abbrev=False,
    )
    for name, help_text in REQUIRED_OPTIONS:
        parser.add_argument(
            f"-{name}", f"--{name}", type=str, default="", help=help_text
        )
    parser.add_argument(
        "-loglevel",
        "--loglevel",
        type=str,
        default="WARNING",
        choices=LOG_LEVELS,
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "-h",
        "-help",
        "--help",
        dest="help",
        action="store_true",
        help="Print this usage text",
    )
    parser.add_argument(
        "-version",
        "--version",
        action="version",
        version=f"{info.name} {info.version}",
    )
    return parser


def print_usage(info: ProgramInfo) -> None:
    """Print the usage text to stdout."""
    print()
    print("Program:")
    print(f"  Name    : {info.name}")
    print(f"  Release : {info.version} - {info.release_date}")
    print(f"  Purpose : {info.purpose}")
    print(f"  Info    : {info.info}")

    print()
    print("Usage:")
    print(f"  {info.name} -gpxfile=filename -lat=latitude -lon=longitude")

    print()
    print("Example:")
    print(f"  {info.name} -gpxfile=ellenbogen.gpx -lat=55.05 -lon=8.41")

    print()
    print("Options:")
    for name, help_text in REQUIRED_OPTIONS:
        print(f"  -{name} string")
        print(f"        {help_text}")
    print("  -loglevel string")
    print(f"        logging level: {', '.join(LOG_LEVELS)} (default \"WARNING\")")
    print("  -version")
    print("        print the program version")

    print()
    print("Output:")
    print("  gpxfile,lat,lon,shortest,longest")

    print()
    print("Example:")
    print('  "ellenbogen.gpx",55.05,8.41,1066,3425')
    print()


def setup_logging(log_level: str) -> None:
    """Setup logging configuration."""
    level = getattr(logging, log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d %(filename)s:%(lineno)d: %(levelname)s: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.set_name("gpxdistance")
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if handler.get_name() == "gpxdistance":
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def format_result(config: DistanceConfig, distance_range: DistanceRange) -> str:
    """
    Format the result as a CSV line.

    The lat/lon fields echo the command-line strings verbatim. An empty range
    is written with the int32 sentinels.
    """
    return (
        f'"{config.gpxfile}",{config.lat},{config.lon},'
        f"{distance_range.shortest_or_sentinel()},{distance_range.longest_or_sentinel()}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, loads the GPX file and prints the
    shortest and longest distance to the given point.
    """
    info = ProgramInfo(name="gpxdistance", version=__version__)
    parser = create_argument_parser(info)

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"{info.name}: {e}", file=sys.stderr)
        print_usage(info)
        sys.exit(1)

    if args.help or not (args.gpxfile and args.lat and args.lon):
        print_usage(info)
        sys.exit(1)

    # Setup logging
    setup_logging(args.loglevel)

    try:
        config = DistanceConfig.from_args(args)
        gpx_data = load_gpx(config.gpxfile)
    except (CoordinateError, GpxReadError, GpxParseError) as e:
        logger.critical(str(e))
        sys.exit(1)

    distance_range = find_distance_range(config.reference, gpx_data.tracks)
    if distance_range.is_empty:
        logger.warning(f"No track points found in GPX file: {config.gpxfile}")

    # print results (csv format)
    print(format_result(config, distance_range))


if __name__ == "__main__":
    main()
