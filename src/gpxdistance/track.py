#!/usr/bin/env python3
"""
GPX file loading for distance analysis.
"""

import logging
import gpxpy
import gpxpy.gpx

logger = logging.getLogger(__name__)


class GpxReadError(Exception):
    """Raised when a GPX file cannot be read from disk."""

    def __init__(self, filename: str, error: OSError):
        super().__init__(f"error <{error}> reading GPX file; filename = <{filename}>")
        self.filename = filename
        self.error = error


class GpxParseError(Exception):
    """Raised when GPX data is malformed."""

    pass


def parse_gpx(text: str) -> gpxpy.gpx.GPX:
    """
    Parse GPX data.

    Args:
        text: GPX document as a string

    Returns:
        Parsed GPX document

    Raises:
        GpxParseError: If the GPX data is malformed
    """
    try:
        gpx_data = gpxpy.parse(text)
    except gpxpy.gpx.GPXException as e:
        raise GpxParseError(f"error <{e}> parsing GPX data") from e

    point_count = sum(
        len(segment.points) for track in gpx_data.tracks for segment in track.segments
    )
    logger.debug(
        f"Parsed {len(gpx_data.tracks)} tracks with {point_count} track points"
    )
    return gpx_data


def load_gpx(filename: str) -> gpxpy.gpx.GPX:
    """
    Load and parse a GPX file.

    The file is read completely and closed before parsing.

    Args:
        filename: Path to GPX file

    Returns:
        Parsed GPX document

    Raises:
        GpxReadError: If the file doesn't exist or can't be read
        GpxParseError: If the file is not valid UTF-8 or not valid GPX
    """
    logger.debug(f"Reading GPX file: {filename}")
    try:
        with open(filename, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise GpxParseError(f"error <{e}> decoding GPX file; filename = <{filename}>") from e
    except OSError as e:
        raise GpxReadError(filename, e) from e

    return parse_gpx(text)
