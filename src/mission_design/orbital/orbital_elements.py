"""
Orbital Elements Module

Conversion of a Cartesian state to the classical (Keplerian) orbital
elements, with defined fallbacks for the singular circular and equatorial
geometries.

References:
- Vallado, "Fundamentals of Astrodynamics and Applications", Algorithm 9 (RV2COE)
- Curtis, "Orbital Mechanics for Engineering Students", Sec. 4.4
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from ..core.state import State
from ..core.vector import UNIT_Z

# Below this, node vector or eccentricity is treated as zero
SINGULARITY_THRESHOLD = 1e-10

# Orbit classification by eccentricity
CIRCULAR_ECCENTRICITY = 0.01
PARABOLIC_TOLERANCE = 0.01

TWO_PI = 2.0 * math.pi


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def safe_acos(value: float) -> float:
    """acos with the argument clamped to [-1, 1]"""
    return math.acos(_clamp_unit(value))


def safe_asin(value: float) -> float:
    """asin with the argument clamped to [-1, 1]"""
    return math.asin(_clamp_unit(value))


@dataclass(frozen=True)
class OrbitalElements:
    """Classical orbital elements (angles in radians, distances in km)"""
    semi_major_axis: float
    eccentricity: float
    inclination: float
    raan: float
    argument_of_periapsis: float
    true_anomaly: float
    periapsis: float  # km (radius)
    apoapsis: float  # km (radius)
    period: float  # s

    @classmethod
    def from_state(cls, state: State, mu: float) -> "OrbitalElements":
        """
        Compute orbital elements from a Cartesian state

        Unbound orbits report an infinite period and apoapsis. For circular
        orbits the true anomaly is the argument of latitude, or the true
        longitude when the orbit is also equatorial.

        Args:
            state: Cartesian state in the inertial frame
            mu: Gravitational parameter (km^3/s^2)

        Returns:
            OrbitalElements for the state
        """
        r = state.position
        v = state.velocity
        r_mag = r.magnitude()
        v_mag = v.magnitude()

        h = r.cross(v)
        h_mag = h.magnitude()

        # Node vector points to the ascending node
        n = UNIT_Z.cross(h)
        n_mag = n.magnitude()

        e_vec = v.cross(h) / mu - r.normalized()
        e = e_vec.magnitude()

        energy = v_mag * v_mag / 2.0 - mu / r_mag
        a = -mu / (2.0 * energy) if energy != 0.0 else math.inf

        inclination = safe_acos(h.z / h_mag) if h_mag > 0.0 else 0.0

        if n_mag > SINGULARITY_THRESHOLD:
            raan = safe_acos(n.x / n_mag)
            if n.y < 0.0:
                raan = TWO_PI - raan
        else:
            raan = 0.0

        if n_mag > SINGULARITY_THRESHOLD and e > SINGULARITY_THRESHOLD:
            arg_periapsis = safe_acos(n.dot(e_vec) / (n_mag * e))
            if e_vec.z < 0.0:
                arg_periapsis = TWO_PI - arg_periapsis
        else:
            arg_periapsis = 0.0

        if e > SINGULARITY_THRESHOLD:
            true_anomaly = safe_acos(e_vec.dot(r) / (e * r_mag))
            if r.dot(v) < 0.0:
                true_anomaly = TWO_PI - true_anomaly
        elif n_mag > SINGULARITY_THRESHOLD:
            true_anomaly = safe_acos(n.dot(r) / (n_mag * r_mag))
            if r.z < 0.0:
                true_anomaly = TWO_PI - true_anomaly
        else:
            true_anomaly = math.atan2(r.y, r.x)
            if true_anomaly < 0.0:
                true_anomaly += TWO_PI

        bound = 0.0 < a < math.inf and e < 1.0
        if bound:
            periapsis = a * (1.0 - e)
            apoapsis = a * (1.0 + e)
            period = TWO_PI * math.sqrt(a ** 3 / mu)
        else:
            # Semi-latus rectum stays finite for parabolic and hyperbolic orbits
            periapsis = (h_mag * h_mag / mu) / (1.0 + e)
            apoapsis = math.inf
            period = math.inf

        return cls(
            semi_major_axis=a,
            eccentricity=e,
            inclination=inclination,
            raan=raan,
            argument_of_periapsis=arg_periapsis,
            true_anomaly=true_anomaly,
            periapsis=periapsis,
            apoapsis=apoapsis,
            period=period
        )

    @property
    def inclination_deg(self) -> float:
        return math.degrees(self.inclination)

    @property
    def raan_deg(self) -> float:
        return math.degrees(self.raan)

    @property
    def argument_of_periapsis_deg(self) -> float:
        return math.degrees(self.argument_of_periapsis)

    @property
    def true_anomaly_deg(self) -> float:
        return math.degrees(self.true_anomaly)

    def orbit_type(self) -> str:
        """Classify the orbit by eccentricity"""
        if self.eccentricity < CIRCULAR_ECCENTRICITY:
            return "Circular"
        if self.eccentricity < 1.0:
            return "Elliptical"
        if abs(self.eccentricity - 1.0) < PARABOLIC_TOLERANCE:
            return "Parabolic"
        return "Hyperbolic"

    def summary(self) -> Dict[str, Any]:
        """Elements in display units (degrees, km, minutes)"""
        return {
            'orbit_type': self.orbit_type(),
            'semi_major_axis_km': self.semi_major_axis,
            'eccentricity': self.eccentricity,
            'inclination_deg': self.inclination_deg,
            'raan_deg': self.raan_deg,
            'argument_of_periapsis_deg': self.argument_of_periapsis_deg,
            'true_anomaly_deg': self.true_anomaly_deg,
            'periapsis_km': self.periapsis,
            'apoapsis_km': self.apoapsis,
            'period_min': self.period / 60.0
        }
