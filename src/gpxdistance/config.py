#!/usr/bin/env python3
"""
Program metadata and command-line configuration.
"""

import argparse
import math
import re
from dataclasses import dataclass

from .geometry import Position

# Plain base-10 decimal number, optional sign and exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class CoordinateError(ValueError):
    """Raised when a latitude or longitude argument is not a finite number."""

    pass


@dataclass(frozen=True)
class ProgramInfo:
    """Program metadata shown in the usage text."""

    name: str
    version: str
    release_date: str = "2026/10/17"
    purpose: str = "GPX (GPS Exchange Format) Distance Calculator (distances in meters)"
    info: str = "Shortest, longest distance between a given point and the GPX points."


def parse_coordinate(name: str, value: str) -> float:
    """
    Parse a decimal degrees argument.

    Only plain decimal notation is accepted: no surrounding whitespace,
    no digit separators, no hexadecimal, nan or inf.

    Args:
        name: Argument name used in the error message
        value: Raw argument string

    Returns:
        The parsed value

    Raises:
        CoordinateError: If value is not a finite base-10 number
    """
    if not DECIMAL_PATTERN.fullmatch(value):
        raise CoordinateError(
            f"error <not a base-10 number> parsing -{name}; value = <{value}>"
        )
    number = float(value)
    if not math.isfinite(number):
        raise CoordinateError(f"-{name} must be a finite number; value = <{value}>")
    return number


@dataclass
class DistanceConfig:
    """Configuration for the gpxdistance CLI."""

    gpxfile: str
    lat: str
    lon: str
    reference: Position

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "DistanceConfig":
        """
        Build the configuration from parsed command-line arguments.

        The raw lat/lon strings are kept for echoing in the output line.

        Raises:
            CoordinateError: If lat or lon can't be parsed
        """
        latitude = parse_coordinate("lat", args.lat)
        longitude = parse_coordinate("lon", args.lon)
        return cls(
            gpxfile=args.gpxfile,
            lat=args.lat,
            lon=args.lon,
            reference=Position(latitude=latitude, longitude=longitude),
        )
