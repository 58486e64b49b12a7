"""
State Module

Timestamped Cartesian state and the materialized trajectory produced by the
orbit propagator.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

import numpy as np
import pandas as pd

from .vector import Vector3


@dataclass(frozen=True)
class State:
    """Position (km), velocity (km/s) and time (s since epoch) in the inertial frame"""
    position: Vector3
    velocity: Vector3
    time: float = 0.0

    @property
    def radius(self) -> float:
        return self.position.magnitude()

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()

    def orbital_energy(self, mu: float) -> float:
        """Specific orbital energy v^2/2 - mu/r (km^2/s^2)"""
        return self.speed ** 2 / 2.0 - mu / self.radius

    def angular_momentum(self) -> Vector3:
        """Specific angular momentum r x v (km^2/s)"""
        return self.position.cross(self.velocity)

    def altitude(self, body_radius: float) -> float:
        return self.radius - body_radius


class Trajectory:
    """
    Ordered, fully materialized sequence of states.

    The first sample is the initial state and samples are separated by a
    constant timestep. Instances are never modified after construction.
    """

    def __init__(self, states: Iterable[State]):
        self._states: Tuple[State, ...] = tuple(states)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Trajectory(self._states[index])
        return self._states[index]

    def __bool__(self) -> bool:
        return bool(self._states)

    def __repr__(self) -> str:
        return f"Trajectory(samples={len(self)}, timestep={self.timestep})"

    @property
    def initial(self) -> State:
        return self._states[0]

    @property
    def final(self) -> State:
        return self._states[-1]

    @property
    def timestep(self) -> float:
        """Spacing between samples (0.0 for fewer than two samples)"""
        if len(self._states) < 2:
            return 0.0
        return self._states[1].time - self._states[0].time

    @property
    def duration(self) -> float:
        if not self._states:
            return 0.0
        return self._states[-1].time - self._states[0].time

    def times(self) -> np.ndarray:
        return np.array([s.time for s in self._states])

    def positions(self) -> np.ndarray:
        """Positions as an (N, 3) array in km"""
        return np.array([s.position.to_array() for s in self._states]).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        """Velocities as an (N, 3) array in km/s"""
        return np.array([s.velocity.to_array() for s in self._states]).reshape(-1, 3)

    def radii(self) -> np.ndarray:
        return np.linalg.norm(self.positions(), axis=1)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate the trajectory for display

        Returns:
            DataFrame with one row per sample
        """
        positions = self.positions()
        velocities = self.velocities()
        return pd.DataFrame({
            'time_s': self.times(),
            'x_km': positions[:, 0],
            'y_km': positions[:, 1],
            'z_km': positions[:, 2],
            'vx_km_s': velocities[:, 0],
            'vy_km_s': velocities[:, 1],
            'vz_km_s': velocities[:, 2],
            'radius_km': np.linalg.norm(positions, axis=1),
            'speed_km_s': np.linalg.norm(velocities, axis=1)
        })
