#!/usr/bin/env python3
"""
Shortest/longest distance reduction over the track points of a GPX file.
"""

from typing import Iterable, Iterator, NamedTuple, Optional
import logging
import math
import gpxpy.gpx

from .geometry import Position, haversine_distance

logger = logging.getLogger(__name__)

# Printed in place of a distance when no track point was found
SHORTEST_SENTINEL = 2**31 - 1
LONGEST_SENTINEL = -(2**31)


class DistanceRange(NamedTuple):
    """Shortest and longest distance in whole meters, None until a point is seen."""

    shortest: Optional[int] = None
    longest: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return self.shortest is None

    def shortest_or_sentinel(self) -> int:
        return SHORTEST_SENTINEL if self.shortest is None else self.shortest

    def longest_or_sentinel(self) -> int:
        return LONGEST_SENTINEL if self.longest is None else self.longest

    def include(self, distance: int) -> "DistanceRange":
        """Return the range widened to contain the given distance."""
        shortest, longest = self
        if shortest is None or distance < shortest:
            shortest = distance
        if longest is None or distance > longest:
            longest = distance
        return DistanceRange(shortest, longest)


def round_meters(distance: float) -> int:
    """Round a non-negative distance to the nearest meter, halves rounding up."""
    return int(math.floor(distance + 0.5))


def iter_track_positions(tracks: Iterable[gpxpy.gpx.GPXTrack]) -> Iterator[Position]:
    """
    Yield every track point as a Position, in document order.

    Args:
        tracks: Tracks of a parsed GPX document

    Yields:
        Position of each point of each segment of each track
    """
    for track in tracks:
        for segment in track.segments:
            for point in segment.points:
                yield Position(latitude=point.latitude, longitude=point.longitude)


def find_distance_range(
    reference: Position, tracks: Iterable[gpxpy.gpx.GPXTrack]
) -> DistanceRange:
    """
    Find the shortest and longest distance between a reference position
    and the track points of a GPX document.

    Every point is visited exactly once. Distances are rounded to whole meters
    before they are compared.

    Args:
        reference: Position to measure from
        tracks: Tracks of a parsed GPX document

    Returns:
        DistanceRange with both bounds None if the tracks contain no points
    """
    distance_range = DistanceRange()
    count = 0

    for position in iter_track_positions(tracks):
        distance = round_meters(haversine_distance(reference, position))
        distance_range = distance_range.include(distance)
        count += 1

    logger.debug(
        f"Measured {count} track points: shortest={distance_range.shortest}, longest={distance_range.longest}"
    )
    return distance_range
