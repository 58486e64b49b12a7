"""
Ground Station Access Module

This module computes look angles (elevation, azimuth, range) from a fixed
surface station to a satellite and extracts access windows, the intervals
during which the satellite is above the station's minimum elevation, from a
complete trajectory.

Access windows are resolved at the trajectory's sampling step; crossings
between samples are not interpolated.

References:
- Vallado, "Fundamentals of Astrodynamics and Applications", Sec. 4.4 (SEZ frame)
- "Space Mission Analysis and Design" by Larson & Wertz, Sec. 5.3
"""

import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..core.constants import CentralBody, EARTH
from ..core.state import Trajectory
from ..core.vector import UNIT_Z, Vector3
from ..orbital.orbital_elements import safe_asin
from .ground_track import GeoCoordinate, GroundTrack

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class GroundStation:
    """Fixed ground station"""
    name: str
    code: str  # e.g. "JPL", "MAD", "USD"
    location: GeoCoordinate
    min_elevation: float = 5.0  # degrees
    color: RGB = (255, 255, 255)
    visible: bool = True


@dataclass(frozen=True)
class AccessWindow:
    """Interval during which a satellite is above a station's minimum elevation"""
    start_time: float  # s
    end_time: float  # s
    max_elevation: float  # degrees
    start_frame: int
    end_frame: int

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class AccessStatistics:
    """Access windows and aggregate pass statistics for a satellite-station pair"""
    windows: Tuple[AccessWindow, ...] = field(default_factory=tuple)
    passes_per_orbit: int = 0
    total_access_time: float = 0.0  # s
    average_pass_duration: float = 0.0  # s
    longest_pass: float = 0.0  # s
    shortest_pass: float = 0.0  # s

    @classmethod
    def from_windows(cls, windows: Sequence[AccessWindow]) -> "AccessStatistics":
        """
        Aggregate pass statistics over a list of windows

        Args:
            windows: Access windows in chronological order

        Returns:
            AccessStatistics; all figures are zero when there are no windows
        """
        windows = tuple(windows)
        if not windows:
            return cls()

        durations = [w.duration for w in windows]
        total = sum(durations)

        return cls(
            windows=windows,
            passes_per_orbit=len(windows),
            total_access_time=total,
            average_pass_duration=total / len(windows),
            longest_pass=max(durations),
            shortest_pass=min(durations)
        )


class GroundStationAccess:
    """Look angles and access windows between stations and satellites"""

    @staticmethod
    def _station_frame(station: GroundStation, body_radius: float, time: float,
                       body: CentralBody) -> Tuple[Vector3, Vector3]:
        station_eci = GroundTrack.lat_lon_to_eci(station.location, time,
                                                 replace(body, radius=body_radius))
        return station_eci, station_eci.normalized()

    @staticmethod
    def calculate_elevation(sat_position: Vector3, station: GroundStation,
                            body_radius: float, time: float = 0.0,
                            body: CentralBody = EARTH) -> float:
        """
        Elevation of a satellite above a station's local horizon

        Args:
            sat_position: Satellite position (km)
            station: Ground station
            body_radius: Radius of the central body (km)
            time: Seconds since epoch
            body: Central body constants (rotation rate)

        Returns:
            Elevation in degrees
        """
        station_eci, local_vertical = GroundStationAccess._station_frame(
            station, body_radius, time, body)
        to_sat = sat_position - station_eci
        return math.degrees(safe_asin(to_sat.normalized().dot(local_vertical)))

    @staticmethod
    def calculate_azimuth(sat_position: Vector3, station: GroundStation,
                          body_radius: float, time: float = 0.0,
                          body: CentralBody = EARTH) -> float:
        """
        Azimuth of a satellite from a station, clockwise from north

        Args:
            sat_position: Satellite position (km)
            station: Ground station
            body_radius: Radius of the central body (km)
            time: Seconds since epoch
            body: Central body constants (rotation rate)

        Returns:
            Azimuth in degrees, in [0, 360)
        """
        station_eci, local_vertical = GroundStationAccess._station_frame(
            station, body_radius, time, body)
        to_sat = sat_position - station_eci

        east = UNIT_Z.cross(local_vertical).normalized()
        north = local_vertical.cross(east).normalized()

        horizontal = (to_sat - local_vertical * to_sat.dot(local_vertical)).normalized()

        azimuth = math.degrees(math.atan2(horizontal.dot(east), horizontal.dot(north)))
        if azimuth < 0.0:
            azimuth += 360.0
        return azimuth % 360.0

    @staticmethod
    def calculate_range(sat_position: Vector3, station: GroundStation,
                        body_radius: float, time: float = 0.0,
                        body: CentralBody = EARTH) -> float:
        """Slant range from station to satellite (km)"""
        station_eci, _ = GroundStationAccess._station_frame(station, body_radius, time, body)
        return sat_position.distance(station_eci)

    @staticmethod
    def is_visible(sat_position: Vector3, station: GroundStation, body_radius: float,
                   time: float = 0.0, body: CentralBody = EARTH) -> bool:
        elevation = GroundStationAccess.calculate_elevation(
            sat_position, station, body_radius, time, body)
        return elevation >= station.min_elevation

    @staticmethod
    def calculate_access_windows(trajectory: Trajectory, station: GroundStation,
                                 body_radius: float,
                                 body: CentralBody = EARTH) -> AccessStatistics:
        """
        Extract access windows from a complete trajectory

        A window still open at the last sample is closed there.

        Args:
            trajectory: Propagated trajectory
            station: Ground station
            body_radius: Radius of the central body (km)
            body: Central body constants (rotation rate)

        Returns:
            AccessStatistics for the satellite-station pair
        """
        if not trajectory:
            return AccessStatistics()

        windows: List[AccessWindow] = []
        in_access = False
        start_time = 0.0
        start_frame = 0
        max_elevation = 0.0

        for i, state in enumerate(trajectory):
            elevation = GroundStationAccess.calculate_elevation(
                state.position, station, body_radius, state.time, body)
            visible = elevation >= station.min_elevation

            if visible and not in_access:
                in_access = True
                start_time = state.time
                start_frame = i
                max_elevation = elevation
            elif visible:
                max_elevation = max(max_elevation, elevation)
            elif in_access:
                in_access = False
                previous = trajectory[i - 1]
                windows.append(AccessWindow(start_time, previous.time, max_elevation,
                                            start_frame, i - 1))

        if in_access:
            windows.append(AccessWindow(start_time, trajectory.final.time, max_elevation,
                                        start_frame, len(trajectory) - 1))

        logger.debug(f"{station.code}: {len(windows)} access windows over "
                     f"{len(trajectory)} samples")
        return AccessStatistics.from_windows(windows)


class StationPreset(str, Enum):
    """Preset ground stations"""
    NASA_JPL = "NASA_JPL"
    ESA_MADRID = "ESA_MADRID"
    JAXA_USUDA = "JAXA_USUDA"
    NASA_WALLOPS = "NASA_WALLOPS"
    ESA_KOUROU = "ESA_KOUROU"


class GroundStationPresets:
    """Factory for well-known tracking stations"""

    _STATIONS = {
        # Goldstone, CA (Deep Space Network)
        StationPreset.NASA_JPL: ("NASA JPL", "JPL", 35.4, -116.9, (100, 200, 255)),
        # Cebreros, Spain
        StationPreset.ESA_MADRID: ("ESA Madrid", "MAD", 40.4, -4.4, (255, 200, 100)),
        StationPreset.JAXA_USUDA: ("JAXA Usuda", "USD", 36.1, 138.4, (255, 100, 100)),
        StationPreset.NASA_WALLOPS: ("NASA Wallops", "WLP", 37.9, -75.5, (100, 255, 100)),
        # French Guiana
        StationPreset.ESA_KOUROU: ("ESA Kourou", "KOU", 5.2, -52.8, (200, 100, 255)),
    }

    @staticmethod
    def create_station(preset: StationPreset, min_elevation: float = 5.0) -> GroundStation:
        name, code, lat, lon, color = GroundStationPresets._STATIONS[StationPreset(preset)]
        return GroundStation(name, code, GeoCoordinate(lat, lon, 0.0), min_elevation, color)

    @staticmethod
    def get_all_stations() -> List[GroundStation]:
        return [GroundStationPresets.create_station(p) for p in StationPreset]

    @staticmethod
    def get_station_name(preset: StationPreset) -> str:
        entry: Optional[tuple] = GroundStationPresets._STATIONS.get(preset)
        return entry[0] if entry else "Unknown"
