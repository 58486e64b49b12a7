"""
Ground Module

This module provides ground-track projection, coverage geometry and
ground-station access analysis.
"""

from .ground_track import GeoCoordinate, GroundTrack
from .ground_station import (
    AccessStatistics,
    AccessWindow,
    GroundStation,
    GroundStationAccess,
    GroundStationPresets,
)

__all__ = [
    "GeoCoordinate", "GroundTrack", "AccessStatistics", "AccessWindow",
    "GroundStation", "GroundStationAccess", "GroundStationPresets",
]
