"""
Orbit Presets Module

Reference orbits (ISS, GEO, Molniya, GPS, sun-synchronous, polar) with their
initial states. Name, description, period and display colour are metadata for
labelling only.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.constants import CentralBody, EARTH
from ..core.state import State
from ..core.vector import Vector3

RGB = Tuple[int, int, int]

SIDEREAL_DAY = 86164.0  # s


class PresetType(str, Enum):
    """Available preset orbits"""
    ISS = "ISS"
    GEO = "GEO"
    MOLNIYA = "MOLNIYA"
    GPS = "GPS"
    SUN_SYNC = "SUN_SYNC"
    POLAR = "POLAR"


@dataclass(frozen=True)
class OrbitPreset:
    """Preset orbit with labelling metadata (type is None for custom orbits)"""
    type: Optional[PresetType]
    name: str
    description: str
    initial_state: State
    period: float  # s (nominal)
    color: RGB


def create_state_from_orbital_params(altitude: float, inclination_deg: float,
                                     eccentricity: float, arg_periapsis_deg: float,
                                     mu: float, body: CentralBody = EARTH) -> State:
    """
    Build the state at periapsis for an orbit with zero RAAN

    Args:
        altitude: Altitude above the surface (km); periapsis altitude when eccentric
        inclination_deg: Inclination (degrees)
        eccentricity: Eccentricity, 0 <= e < 1
        arg_periapsis_deg: Argument of periapsis (degrees)
        mu: Gravitational parameter (km^3/s^2)
        body: Central body constants

    Returns:
        State at t = 0
    """
    inc = math.radians(inclination_deg)
    omega = math.radians(arg_periapsis_deg)

    rp = body.radius + altitude
    a = rp / (1.0 - eccentricity) if eccentricity > 0.0 else rp
    r = a * (1.0 - eccentricity)

    # Vis-viva at periapsis
    v = math.sqrt(mu * (2.0 / r - 1.0 / a))

    cos_omega, sin_omega = math.cos(omega), math.sin(omega)
    cos_inc, sin_inc = math.cos(inc), math.sin(inc)

    # Rotate the periapsis frame by omega in-plane, then by inclination about x
    px, py = r * cos_omega, r * sin_omega
    vx, vy = -v * sin_omega, v * cos_omega

    position = Vector3(px, py * cos_inc, py * sin_inc)
    velocity = Vector3(vx, vy * cos_inc, vy * sin_inc)

    return State(position, velocity, 0.0)


def _circular_period(altitude: float, mu: float, body: CentralBody) -> float:
    a = body.radius + altitude
    return 2.0 * math.pi * math.sqrt(a ** 3 / mu)


class OrbitPresets:
    """Factory for the reference orbits"""

    NAMES = {
        PresetType.ISS: "ISS",
        PresetType.GEO: "GEO",
        PresetType.MOLNIYA: "Molniya",
        PresetType.GPS: "GPS",
        PresetType.SUN_SYNC: "Sun-Sync",
        PresetType.POLAR: "Polar",
    }

    @staticmethod
    def create_preset(preset_type: PresetType, mu: float = EARTH.mu,
                      body: CentralBody = EARTH) -> OrbitPreset:
        """
        Create a preset orbit

        Args:
            preset_type: Which reference orbit
            mu: Gravitational parameter (km^3/s^2)
            body: Central body constants

        Returns:
            OrbitPreset with initial state and nominal period
        """
        preset_type = PresetType(preset_type)
        name = OrbitPresets.NAMES[preset_type]

        if preset_type == PresetType.GEO:
            state = create_state_from_orbital_params(35786.0, 0.0, 0.0, 0.0, mu, body)
            return OrbitPreset(preset_type, name,
                               "Geostationary Orbit, 35,786 km altitude, 0° inclination",
                               state, SIDEREAL_DAY, (255, 161, 0))

        if preset_type == PresetType.MOLNIYA:
            # Periapsis ~500 km, apoapsis ~39,900 km
            state = create_state_from_orbital_params(500.0, 63.4, 0.737, 270.0, mu, body)
            a = (body.radius + 500.0 + body.radius + 39900.0) / 2.0
            period = 2.0 * math.pi * math.sqrt(a ** 3 / mu)
            return OrbitPreset(preset_type, name,
                               "Highly elliptical, 500-39,900 km, 63.4° inclination",
                               state, period, (230, 41, 55))

        if preset_type == PresetType.GPS:
            state = create_state_from_orbital_params(20200.0, 55.0, 0.0, 0.0, mu, body)
            return OrbitPreset(preset_type, name,
                               "Medium Earth Orbit, 20,200 km altitude, 55° inclination",
                               state, _circular_period(20200.0, mu, body), (0, 228, 48))

        if preset_type == PresetType.SUN_SYNC:
            state = create_state_from_orbital_params(600.0, 98.0, 0.0, 0.0, mu, body)
            return OrbitPreset(preset_type, name,
                               "Sun-Synchronous, 600 km altitude, 98° inclination",
                               state, _circular_period(600.0, mu, body), (102, 191, 255))

        if preset_type == PresetType.POLAR:
            state = create_state_from_orbital_params(600.0, 90.0, 0.0, 0.0, mu, body)
            return OrbitPreset(preset_type, name,
                               "Polar Orbit, 600 km altitude, 90° inclination",
                               state, _circular_period(600.0, mu, body), (200, 122, 255))

        state = create_state_from_orbital_params(400.0, 51.6, 0.0, 0.0, mu, body)
        return OrbitPreset(PresetType.ISS, name,
                           "Low Earth Orbit, 400 km altitude, 51.6° inclination",
                           state, _circular_period(400.0, mu, body), (253, 249, 0))

    @staticmethod
    def get_all_presets(mu: float = EARTH.mu, body: CentralBody = EARTH) -> List[OrbitPreset]:
        return [OrbitPresets.create_preset(t, mu, body) for t in PresetType]

    @staticmethod
    def get_preset_name(preset_type: PresetType) -> str:
        return OrbitPresets.NAMES.get(preset_type, "Unknown")
