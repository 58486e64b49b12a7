"""
Satellite Module

Bundles an orbit preset with its propagated trajectory and summary
statistics used for labelling (apsis altitudes, speeds, orbit family).
"""

from dataclasses import dataclass

import numpy as np

from .core.constants import (
    CentralBody,
    EARTH,
    LEO_MAX_ALTITUDE,
    MEO_MAX_ALTITUDE,
)
from .core.state import State, Trajectory
from .orbital.orbital_elements import OrbitalElements
from .orbital.presets import OrbitPreset


@dataclass(frozen=True)
class OrbitStatistics:
    """Trajectory-derived orbit statistics"""
    periapsis_alt: float  # km
    apoapsis_alt: float  # km
    periapsis_vel: float  # km/s
    apoapsis_vel: float  # km/s
    mean_altitude: float  # km
    orbit_family: str  # LEO / MEO / HEO / GEO


def classify_orbit_family(periapsis_alt: float, apoapsis_alt: float) -> str:
    """
    Classify an orbit by altitude band

    Args:
        periapsis_alt: Lowest altitude (km)
        apoapsis_alt: Highest altitude (km)

    Returns:
        "LEO", "MEO", "HEO" or "GEO"
    """
    mean_altitude = (periapsis_alt + apoapsis_alt) / 2.0
    if mean_altitude < LEO_MAX_ALTITUDE:
        return "LEO"
    if mean_altitude < MEO_MAX_ALTITUDE:
        return "MEO"
    if apoapsis_alt > MEO_MAX_ALTITUDE and periapsis_alt < MEO_MAX_ALTITUDE:
        return "HEO"
    return "GEO"


class Satellite:
    """A propagated orbit with its labelling metadata"""

    def __init__(self, preset: OrbitPreset, trajectory: Trajectory,
                 body: CentralBody = EARTH):
        """
        Initialize satellite

        Args:
            preset: Orbit preset (name, description, colour, period)
            trajectory: Propagated trajectory, at least one sample
            body: Central body constants
        """
        self.preset = preset
        self.trajectory = trajectory
        self.body = body
        self.stats = self.calculate_statistics(body.radius)

    @property
    def name(self) -> str:
        return self.preset.name

    def calculate_statistics(self, body_radius: float) -> OrbitStatistics:
        """Apsis statistics from the extreme-radius samples of the trajectory"""
        radii = self.trajectory.radii()
        peri_idx = int(np.argmin(radii))
        apo_idx = int(np.argmax(radii))

        periapsis_alt = float(radii[peri_idx]) - body_radius
        apoapsis_alt = float(radii[apo_idx]) - body_radius

        return OrbitStatistics(
            periapsis_alt=periapsis_alt,
            apoapsis_alt=apoapsis_alt,
            periapsis_vel=self.trajectory[peri_idx].speed,
            apoapsis_vel=self.trajectory[apo_idx].speed,
            mean_altitude=(periapsis_alt + apoapsis_alt) / 2.0,
            orbit_family=classify_orbit_family(periapsis_alt, apoapsis_alt)
        )

    def state_at(self, frame: int) -> State:
        """State at a frame index, wrapped to the trajectory length"""
        return self.trajectory[frame % len(self.trajectory)]

    def elements_at(self, frame: int = 0) -> OrbitalElements:
        return OrbitalElements.from_state(self.state_at(frame), self.body.mu)
