"""
Integrators Module

Fixed-step integration strategies used by the orbit propagator. Both are
stateless: a step depends only on its arguments.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..core.constants import CentralBody, EARTH
from ..core.state import State
from .force_model import ForceModel, compute_acceleration


class IntegratorType(str, Enum):
    """Supported integration methods"""
    EULER = "euler"
    RK4 = "rk4"


class Integrator(ABC):
    """Advances a state by one timestep under a force model"""

    name: str = ""

    @abstractmethod
    def step(self, state: State, h: float, mu: float, forces: ForceModel,
             body: CentralBody = EARTH) -> State:
        """
        Advance the state by h seconds

        Args:
            state: Current state
            h: Timestep (s)
            mu: Gravitational parameter (km^3/s^2)
            forces: Active force terms
            body: Central body constants

        Returns:
            State at time state.time + h
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EulerIntegrator(Integrator):
    """First-order explicit Euler. Energy drifts with step count."""

    name = IntegratorType.EULER.value

    def step(self, state: State, h: float, mu: float, forces: ForceModel,
             body: CentralBody = EARTH) -> State:
        acceleration = compute_acceleration(state.position, mu, forces, body)

        position = state.position + state.velocity * h
        velocity = state.velocity + acceleration * h

        return State(position, velocity, state.time + h)


class RK4Integrator(Integrator):
    """Classic fourth-order Runge-Kutta"""

    name = IntegratorType.RK4.value

    def step(self, state: State, h: float, mu: float, forces: ForceModel,
             body: CentralBody = EARTH) -> State:
        half = h / 2.0

        k1_v = state.velocity
        k1_a = compute_acceleration(state.position, mu, forces, body)

        k2_v = state.velocity + k1_a * half
        k2_a = compute_acceleration(state.position + k1_v * half, mu, forces, body)

        k3_v = state.velocity + k2_a * half
        k3_a = compute_acceleration(state.position + k2_v * half, mu, forces, body)

        k4_v = state.velocity + k3_a * h
        k4_a = compute_acceleration(state.position + k3_v * h, mu, forces, body)

        position = state.position + (k1_v + k2_v * 2.0 + k3_v * 2.0 + k4_v) * (h / 6.0)
        velocity = state.velocity + (k1_a + k2_a * 2.0 + k3_a * 2.0 + k4_a) * (h / 6.0)

        return State(position, velocity, state.time + h)


def create_integrator(kind) -> Integrator:
    """
    Build an integrator from its type name

    Args:
        kind: IntegratorType or its string value ("euler", "rk4")

    Returns:
        Integrator instance
    """
    kind = IntegratorType(kind)
    if kind == IntegratorType.EULER:
        return EulerIntegrator()
    return RK4Integrator()
