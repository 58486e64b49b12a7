"""
Ground Track Module

Conversion between inertial positions and geocentric latitude, longitude and
altitude on the rotating central body, plus sensor coverage geometry. The
rotating frame coincides with the inertial frame at t = 0 and turns about +z
at the body's rotation rate.

References:
- Vallado, "Fundamentals of Astrodynamics and Applications", Sec. 3.4
- Wertz, "Spacecraft Attitude Determination and Control", Ch. 5
"""

import math
from dataclasses import dataclass, replace
from typing import List, Sequence

import numpy as np

from ..core.constants import CentralBody, EARTH
from ..core.state import State, Trajectory
from ..core.vector import Vector3
from ..orbital.orbital_elements import safe_acos, safe_asin


def normalize_longitude(lon: float) -> float:
    """Wrap a longitude in degrees into (-180, 180]"""
    lon = math.fmod(lon, 360.0)
    if lon > 180.0:
        lon -= 360.0
    elif lon <= -180.0:
        lon += 360.0
    return lon


@dataclass(frozen=True)
class GeoCoordinate:
    """Geocentric coordinates; longitude is normalized on construction"""
    latitude: float = 0.0  # degrees
    longitude: float = 0.0  # degrees
    altitude: float = 0.0  # km above the surface

    def __post_init__(self):
        object.__setattr__(self, 'longitude', normalize_longitude(self.longitude))


class GroundTrack:
    """Inertial / body-fixed coordinate conversions and coverage geometry"""

    @staticmethod
    def eci_to_lat_lon(eci_position: Vector3, time: float,
                       body: CentralBody = EARTH) -> GeoCoordinate:
        """
        Convert an inertial position to latitude, longitude and altitude

        Args:
            eci_position: Position in the inertial frame (km)
            time: Seconds since epoch, for body rotation
            body: Central body constants

        Returns:
            GeoCoordinate under the position
        """
        r = eci_position.magnitude()

        latitude = math.degrees(safe_asin(eci_position.z / r))
        longitude = math.degrees(math.atan2(eci_position.y, eci_position.x))
        rotation = math.degrees(body.rotation_rate * time)

        return GeoCoordinate(latitude, longitude - rotation, r - body.radius)

    @staticmethod
    def lat_lon_to_eci(coord: GeoCoordinate, time: float,
                       body: CentralBody = EARTH) -> Vector3:
        """
        Convert latitude, longitude and altitude to an inertial position

        Args:
            coord: Geocentric coordinates
            time: Seconds since epoch, for body rotation
            body: Central body constants

        Returns:
            Position in the inertial frame (km)
        """
        r = body.radius + coord.altitude
        lat = math.radians(coord.latitude)
        lon = math.radians(coord.longitude) + body.rotation_rate * time

        return Vector3(
            r * math.cos(lat) * math.cos(lon),
            r * math.cos(lat) * math.sin(lon),
            r * math.sin(lat)
        )

    @staticmethod
    def get_subsatellite_point(state: State, body: CentralBody = EARTH) -> GeoCoordinate:
        return GroundTrack.eci_to_lat_lon(state.position, state.time, body)

    @staticmethod
    def calculate_ground_track(trajectory: Trajectory, samples_per_orbit: int = 360,
                               body: CentralBody = EARTH) -> List[GeoCoordinate]:
        """
        Subsample a trajectory into ground-track points

        Args:
            trajectory: Propagated trajectory
            samples_per_orbit: Target number of points
            body: Central body constants

        Returns:
            Ground-track coordinates in trajectory order
        """
        if not trajectory:
            return []

        stride = max(1, len(trajectory) // max(1, samples_per_orbit))
        return [GroundTrack.get_subsatellite_point(trajectory[i], body)
                for i in range(0, len(trajectory), stride)]

    @staticmethod
    def get_ground_track_segment(trajectory: Trajectory, start_frame: int,
                                 end_frame: int,
                                 body: CentralBody = EARTH) -> List[GeoCoordinate]:
        """Ground-track points for frames start..end inclusive, end clamped to the trajectory"""
        if not trajectory or start_frame >= len(trajectory):
            return []
        end_frame = min(end_frame, len(trajectory) - 1)
        return [GroundTrack.get_subsatellite_point(trajectory[i], body)
                for i in range(start_frame, end_frame + 1)]

    @staticmethod
    def calculate_coverage_radius(altitude: float, min_elevation_deg: float = 5.0,
                                  body: CentralBody = EARTH) -> float:
        """
        Surface radius visible from a satellite above a minimum elevation

        Args:
            altitude: Satellite altitude (km)
            min_elevation_deg: Minimum elevation at the ground (degrees)
            body: Central body constants

        Returns:
            Coverage radius as surface arc length (km)
        """
        elev = math.radians(min_elevation_deg)
        # Earth central angle to the edge of coverage
        rho = safe_acos(body.radius / (body.radius + altitude) * math.cos(elev)) - elev
        return body.radius * rho

    @staticmethod
    def is_ground_point_visible(sat_position: Vector3, ground_point: GeoCoordinate,
                                body_radius: float, min_elevation_deg: float = 5.0,
                                time: float = 0.0, body: CentralBody = EARTH) -> bool:
        """
        Check whether a satellite is above a ground point's minimum elevation

        Args:
            sat_position: Satellite position (km)
            ground_point: Ground location
            body_radius: Radius of the central body (km)
            min_elevation_deg: Minimum elevation (degrees)
            time: Seconds since epoch
            body: Central body constants

        Returns:
            True if visible
        """
        ground_eci = GroundTrack.lat_lon_to_eci(ground_point, time,
                                                replace(body, radius=body_radius))
        to_sat = sat_position - ground_eci
        local_vertical = ground_eci.normalized()

        elevation = math.degrees(safe_asin(to_sat.normalized().dot(local_vertical)))
        return elevation >= min_elevation_deg


def ground_track_to_array(track: Sequence[GeoCoordinate]) -> np.ndarray:
    """Ground track as an (N, 3) array of latitude, longitude, altitude"""
    return np.array([[c.latitude, c.longitude, c.altitude] for c in track]).reshape(-1, 3)
