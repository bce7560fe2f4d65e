#!/usr/bin/env python3
"""
gpxdistance - Shortest and longest distance between a point and a GPX track.

This package computes great-circle distances from a given location to every
track point of a GPX file and reports the nearest and farthest of them.
"""
import importlib.metadata

__version__ = importlib.metadata.version("gpxdistance")

# Import main classes for public API
from .geometry import EARTH_RADIUS, Position, haversine_distance
from .distance_range import DistanceRange, find_distance_range, iter_track_positions

__all__ = [
    "EARTH_RADIUS",
    "Position",
    "haversine_distance",
    "DistanceRange",
    "find_distance_range",
    "iter_track_positions",
]
