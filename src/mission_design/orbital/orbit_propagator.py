"""
Orbit Propagator Module

This module implements numerical orbit propagation. A configurable
integration strategy (RK4 by default, Euler as a baseline) is stepped at a
constant timestep under the selected force model, producing a fully
materialized trajectory.

References:
- Vallado, "Fundamentals of Astrodynamics and Applications"
- Montenbruck & Gill, "Satellite Orbits", Ch. 4
"""

import logging
import math
from typing import List, Optional, Sequence

from ..core.constants import CentralBody, EARTH
from ..core.state import State, Trajectory
from .force_model import ForceModel
from .integrators import Integrator, RK4Integrator
from .presets import OrbitPreset

logger = logging.getLogger(__name__)

STEP_COUNT_TOLERANCE = 1e-9


class OrbitPropagator:
    """
    Fixed-step numerical orbit propagator.

    Features:
    - Runtime-swappable integration strategy
    - Point-mass gravity with optional J2 perturbation
    - Single-step interface for incremental callers
    """

    def __init__(self, mu: Optional[float] = None, body: CentralBody = EARTH,
                 integrator: Optional[Integrator] = None,
                 force_model: Optional[ForceModel] = None):
        """
        Initialize orbit propagator

        Args:
            mu: Gravitational parameter (km^3/s^2), defaults to body.mu
            body: Central body constants
            integrator: Integration strategy, defaults to RK4
            force_model: Active force terms, defaults to point mass only
        """
        self.body = body
        self.mu = body.mu if mu is None else mu
        self._integrator: Integrator = integrator or RK4Integrator()
        self._force_model: ForceModel = force_model or ForceModel()

    @property
    def integrator(self) -> Integrator:
        return self._integrator

    def set_integrator(self, integrator: Integrator) -> None:
        """Replace the integration strategy; the force model is kept"""
        self._integrator = integrator

    @property
    def force_model(self) -> ForceModel:
        return self._force_model

    def set_force_model(self, force_model: ForceModel) -> None:
        self._force_model = force_model

    def propagate(self, initial_state: State, duration: float,
                  timestep: float) -> Trajectory:
        """
        Propagate an initial state over a duration

        A non-positive timestep or a duration shorter than one step yields a
        trajectory holding only the initial state. The step count is
        floor(duration / timestep) with a 1e-9 step tolerance, so a
        duration within that tolerance below an exact multiple of the
        timestep gains the final step and ends fractionally past duration.

        Args:
            initial_state: State at the start of propagation
            duration: Total duration (s)
            timestep: Constant integration step (s)

        Returns:
            Trajectory of floor(duration / timestep) + 1 states
        """
        if timestep <= 0 or duration < timestep:
            logger.debug(f"Degenerate propagation request (duration={duration}, "
                         f"timestep={timestep}); returning initial state only")
            return Trajectory([initial_state])

        # Tolerance absorbs rounding when duration is an exact multiple of timestep
        num_steps = int(math.floor(duration / timestep + STEP_COUNT_TOLERANCE))
        logger.debug(f"Propagating {num_steps} steps of {timestep:.3f} s with "
                     f"{self._integrator.name}")

        states = [initial_state]
        current = initial_state
        for _ in range(num_steps):
            current = self._integrator.step(current, timestep, self.mu,
                                            self._force_model, self.body)
            states.append(current)

        return Trajectory(states)

    def step(self, current: State, timestep: float) -> State:
        """Advance a state by a single timestep"""
        return self._integrator.step(current, timestep, self.mu,
                                     self._force_model, self.body)

    def propagate_preset(self, preset: OrbitPreset, samples_per_orbit: int = 360,
                         orbits: float = 1.0) -> Trajectory:
        """
        Propagate a preset orbit at a resolution tied to its period

        Args:
            preset: Orbit preset with initial state and nominal period
            samples_per_orbit: Number of steps per orbital period
            orbits: Number of periods to cover

        Returns:
            Trajectory for the preset
        """
        timestep = preset.period / samples_per_orbit
        return self.propagate(preset.initial_state, preset.period * orbits, timestep)

    def propagate_presets(self, presets: Sequence[OrbitPreset],
                          samples_per_orbit: int = 360,
                          orbits: float = 1.0) -> List[Trajectory]:
        """
        Propagate several presets

        Args:
            presets: Presets to propagate
            samples_per_orbit: Number of steps per orbital period
            orbits: Number of periods to cover

        Returns:
            Trajectories in the same order as the presets
        """
        trajectories: List[Trajectory] = []
        for preset in presets:
            trajectory = self.propagate_preset(preset, samples_per_orbit, orbits)
            logger.info(f"  {preset.name}: {len(trajectory)} points")
            trajectories.append(trajectory)
        return trajectories

    def get_orbital_period(self, semi_major_axis: float) -> float:
        """
        Calculate orbital period in seconds

        Args:
            semi_major_axis: Semi-major axis (km)

        Returns:
            Orbital period in seconds
        """
        return 2.0 * math.pi * math.sqrt(semi_major_axis ** 3 / self.mu)
