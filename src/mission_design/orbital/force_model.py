"""
Force Model Module

Selects the gravitational effects acting on a satellite and assembles the
resulting acceleration.

References:
- Vallado, "Fundamentals of Astrodynamics and Applications", Sec. 8.7
"""

import logging
from dataclasses import dataclass, fields
from typing import List

from ..core.constants import CentralBody, EARTH
from ..core.vector import Vector3

logger = logging.getLogger(__name__)

# Terms that are accepted by the model but not yet included in the acceleration
RESERVED_TERMS = (
    "j3_perturbation",
    "j4_perturbation",
    "atmospheric_drag",
    "solar_radiation",
    "third_body_moon",
    "third_body_sun",
)


@dataclass(frozen=True)
class ForceModel:
    """Force model toggles (central point mass is always on)"""
    point_mass: bool = True
    j2_perturbation: bool = False
    j3_perturbation: bool = False
    j4_perturbation: bool = False
    atmospheric_drag: bool = False
    solar_radiation: bool = False
    third_body_moon: bool = False
    third_body_sun: bool = False

    def __post_init__(self):
        for name in RESERVED_TERMS:
            if getattr(self, name):
                logger.warning(f"Force term '{name}' is not modelled and has no effect")

    def active_terms(self) -> List[str]:
        """Names of the enabled force terms"""
        return [f.name for f in fields(self) if getattr(self, f.name)]


def point_mass_gravity(position: Vector3, mu: float) -> Vector3:
    r = position.magnitude()
    return position * (-mu / (r * r * r))


def j2_perturbation(position: Vector3, mu: float, body: CentralBody = EARTH) -> Vector3:
    """
    Acceleration due to the body's oblateness (J2 zonal harmonic)

    Args:
        position: Satellite position (km)
        mu: Gravitational parameter (km^3/s^2)
        body: Central body supplying radius and J2

    Returns:
        Perturbing acceleration (km/s^2)
    """
    x, y, z = position
    r2 = position.magnitude_squared()
    r = r2 ** 0.5
    z2_r2 = z * z / r2

    factor = 1.5 * body.j2 * mu * body.radius * body.radius / (r2 * r2 * r)

    return Vector3(
        x * factor * (5.0 * z2_r2 - 1.0),
        y * factor * (5.0 * z2_r2 - 1.0),
        z * factor * (5.0 * z2_r2 - 3.0)
    )


def compute_acceleration(position: Vector3, mu: float, forces: ForceModel,
                         body: CentralBody = EARTH) -> Vector3:
    """Sum of the accelerations of all enabled force terms"""
    total = Vector3()

    if forces.point_mass:
        total = total + point_mass_gravity(position, mu)

    if forces.j2_perturbation:
        total = total + j2_perturbation(position, mu, body)

    return total
