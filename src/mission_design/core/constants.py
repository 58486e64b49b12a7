"""
Physical Constants Module

Central-body constants are grouped in a frozen CentralBody record that is
passed into each computation, so the same functions work for alternate bodies.

References:
- WGS-84 Earth parameters
- Vallado, "Fundamentals of Astrodynamics and Applications"
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CentralBody:
    """Physical constants of the primary body"""
    name: str
    mu: float  # km^3/s^2 (gravitational parameter)
    radius: float  # km (equatorial radius)
    j2: float  # oblateness coefficient
    rotation_rate: float  # rad/s


EARTH = CentralBody(
    name="Earth",
    mu=398600.4418,
    radius=6378.137,
    j2=1.08262668e-3,
    rotation_rate=7.2921159e-5
)


# Apparent angular radius of the Sun seen from 1 AU
SUN_ANGULAR_RADIUS = math.radians(0.267)  # radians

# Magnitude below which a vector is treated as zero
NORMALIZE_EPSILON = 1e-10

# Solar panel derating
SOLAR_EFFICIENCY_PENUMBRA = 0.5
SOLAR_EFFICIENCY_HIGH_BETA = 0.7
HIGH_BETA_THRESHOLD_DEG = 75.0

# Altitude thresholds for orbit family classification (km)
LEO_MAX_ALTITUDE = 2000.0
MEO_MAX_ALTITUDE = 35000.0
GEO_ALTITUDE = 35786.0
