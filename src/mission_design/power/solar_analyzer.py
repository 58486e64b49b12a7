"""
Solar Analyzer Module

This module estimates solar-panel pointing geometry and power efficiency for
a sun-tracking array. Efficiency follows the beta angle (sun elevation above
the orbital plane) with fixed derating in penumbra and at high beta.

References:
- "Space Mission Analysis and Design" by Larson & Wertz, Sec. 11.4
- Patel, "Spacecraft Power Systems"
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..core.constants import (
    HIGH_BETA_THRESHOLD_DEG,
    SOLAR_EFFICIENCY_HIGH_BETA,
    SOLAR_EFFICIENCY_PENUMBRA,
)
from ..core.state import Trajectory
from ..core.vector import Vector3
from ..orbital.eclipse_detector import EclipseDetector, EclipseStatus
from ..orbital.orbital_elements import safe_asin


@dataclass(frozen=True)
class SolarPanelAnalysis:
    """Solar panel geometry and efficiency at one instant"""
    beta_angle: float = 0.0  # degrees
    sun_elevation: float = 0.0  # degrees above the orbital plane
    efficiency: float = 0.0  # 0-1
    sun_vector: Vector3 = Vector3()
    in_sunlight: bool = True

    @property
    def power_status(self) -> str:
        if not self.in_sunlight:
            return "Battery Mode"
        if self.efficiency > 0.8:
            return "Optimal Generation"
        if self.efficiency > 0.5:
            return "Good Generation"
        return "Limited Generation"


class SolarAnalyzer:
    """Solar geometry and tracking-panel efficiency"""

    @staticmethod
    def analyze(position: Vector3, velocity: Vector3, sun_direction: Vector3,
                eclipse: EclipseStatus) -> SolarPanelAnalysis:
        """
        Analyze solar conditions for a satellite

        Args:
            position: Satellite position (km)
            velocity: Satellite velocity (km/s)
            sun_direction: Direction from the body centre to the sun
            eclipse: Eclipse status at the position

        Returns:
            SolarPanelAnalysis with beta angle and efficiency
        """
        sun_norm = sun_direction.normalized()

        if eclipse.in_umbra:
            return SolarPanelAnalysis(sun_vector=sun_norm, in_sunlight=False)

        orbital_normal = position.cross(velocity).normalized()
        beta_angle = math.degrees(safe_asin(sun_norm.dot(orbital_normal)))

        efficiency = abs(math.cos(math.radians(beta_angle)))
        if eclipse.in_penumbra:
            efficiency *= SOLAR_EFFICIENCY_PENUMBRA
        elif abs(beta_angle) > HIGH_BETA_THRESHOLD_DEG:
            # Thermal and tracking losses at extreme beta
            efficiency *= SOLAR_EFFICIENCY_HIGH_BETA

        efficiency = min(1.0, max(0.0, efficiency))

        return SolarPanelAnalysis(
            beta_angle=beta_angle,
            sun_elevation=beta_angle,
            efficiency=efficiency,
            sun_vector=sun_norm,
            in_sunlight=True
        )

    @staticmethod
    def analyze_trajectory(trajectory: Trajectory, sun_direction: Vector3,
                           body_radius: float) -> Tuple[List[SolarPanelAnalysis], float]:
        """
        Analyze every sample of a trajectory

        Args:
            trajectory: Propagated trajectory
            sun_direction: Direction from the body centre to the sun
            body_radius: Radius of the occulting body (km)

        Returns:
            Tuple of (per-sample analyses, orbit-average efficiency)
        """
        analyses = []
        for state in trajectory:
            eclipse = EclipseDetector.check_eclipse(state.position, sun_direction, body_radius)
            analyses.append(SolarAnalyzer.analyze(state.position, state.velocity,
                                                  sun_direction, eclipse))

        if not analyses:
            return analyses, 0.0

        average = float(np.mean([a.efficiency for a in analyses]))
        return analyses, average
