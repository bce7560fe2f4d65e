#!/usr/bin/env python3
"""
Great-circle distance calculation on a spherical Earth.
"""

from typing import NamedTuple
import math

# Equatorial radius in meters, rounded to 100 m
EARTH_RADIUS = 6378100.0


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


def haversine_distance(origin: Position, target: Position) -> float:
    """
    Calculate Haversine distance between two coordinates.

    Uses the Haversine formula for great circle distance along a sphere of
    radius EARTH_RADIUS. Identical positions yield exactly 0.0, antipodal
    positions yield pi * EARTH_RADIUS.

    Args:
        origin: Reference position in decimal degrees
        target: Target position in decimal degrees

    Returns:
        Distance in meters
    """
    lat1, lon1 = math.radians(origin.latitude), math.radians(origin.longitude)
    lat2, lon2 = math.radians(target.latitude), math.radians(target.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )

    # Rounding can push a slightly outside the domain of sqrt/asin
    a = min(1.0, max(0.0, a))

    return 2 * EARTH_RADIUS * math.asin(math.sqrt(a))
