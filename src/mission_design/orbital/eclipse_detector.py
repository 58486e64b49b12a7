"""
Eclipse Detector Module

This module determines whether a satellite lies in the central body's umbral
(total) or penumbral (partial) shadow for a given sun direction. The sun is
treated as infinitely distant with a fixed apparent angular radius.

References:
- "Fundamentals of Astrodynamics and Applications" by Vallado, Sec. 5.3
- "Space Mission Analysis and Design" by Larson & Wertz
"""

import math
from dataclasses import dataclass
from typing import Dict

from ..core.constants import SUN_ANGULAR_RADIUS
from ..core.state import Trajectory
from ..core.vector import Vector3
from .orbital_elements import safe_acos, safe_asin


@dataclass(frozen=True)
class EclipseStatus:
    """Shadow status of a satellite"""
    in_umbra: bool = False
    in_penumbra: bool = False
    sun_angle: float = 0.0  # degrees, sun-to-satellite angle at the body centre

    @property
    def eclipse_type(self) -> str:
        if self.in_umbra:
            return "umbra"
        if self.in_penumbra:
            return "penumbra"
        return "none"


class EclipseDetector:
    """
    Conical shadow model for a spherical central body.

    Umbra is a subset of penumbra: a satellite in full shadow reports both
    flags.
    """

    @staticmethod
    def check_eclipse(sat_position: Vector3, sun_direction: Vector3,
                      body_radius: float,
                      sun_angular_radius: float = SUN_ANGULAR_RADIUS) -> EclipseStatus:
        """
        Determine eclipse status at a satellite position

        Args:
            sat_position: Satellite position relative to the body centre (km)
            sun_direction: Direction from the body centre to the sun
            body_radius: Radius of the occulting body (km)
            sun_angular_radius: Apparent solar radius (radians)

        Returns:
            EclipseStatus for the position
        """
        sun_norm = sun_direction.normalized()
        sat_norm = sat_position.normalized()
        sat_distance = sat_position.magnitude()

        cos_angle = sat_norm.dot(sun_norm)
        sun_angle = math.degrees(safe_acos(cos_angle))

        # Sun-facing hemisphere is always lit
        if cos_angle > 0:
            return EclipseStatus(sun_angle=sun_angle)

        body_angular_radius = safe_asin(body_radius / sat_distance)
        angle_from_anti_sun = safe_acos(-cos_angle)

        if angle_from_anti_sun < body_angular_radius - sun_angular_radius:
            return EclipseStatus(in_umbra=True, in_penumbra=True, sun_angle=sun_angle)
        if angle_from_anti_sun < body_angular_radius + sun_angular_radius:
            return EclipseStatus(in_penumbra=True, sun_angle=sun_angle)
        return EclipseStatus(sun_angle=sun_angle)

    @staticmethod
    def eclipse_fraction(trajectory: Trajectory, sun_direction: Vector3,
                         body_radius: float) -> Dict[str, float]:
        """
        Fraction of trajectory samples spent in shadow

        Args:
            trajectory: Propagated trajectory
            sun_direction: Direction from the body centre to the sun
            body_radius: Radius of the occulting body (km)

        Returns:
            Dictionary with umbra, penumbra-only and sunlit fractions
        """
        total = len(trajectory)
        if total == 0:
            return {'umbra': 0.0, 'penumbra_only': 0.0, 'sunlit': 0.0}

        umbra = 0
        penumbra_only = 0
        for state in trajectory:
            status = EclipseDetector.check_eclipse(state.position, sun_direction, body_radius)
            if status.in_umbra:
                umbra += 1
            elif status.in_penumbra:
                penumbra_only += 1

        return {
            'umbra': umbra / total,
            'penumbra_only': penumbra_only / total,
            'sunlit': (total - umbra - penumbra_only) / total
        }
