"""
Tests for the vector, state and trajectory primitives.
"""

import math
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mission_design.core import EARTH, State, Trajectory, Vector3


class TestVector3:
    """Test 3-D vector algebra"""

    def test_arithmetic(self):
        """Test addition, subtraction and scaling"""
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, -5.0, 6.0)

        assert a + b == Vector3(5.0, -3.0, 9.0)
        assert a - b == Vector3(-3.0, 7.0, -3.0)
        assert a * 2.0 == Vector3(2.0, 4.0, 6.0)
        assert 2.0 * a == Vector3(2.0, 4.0, 6.0)
        assert a / 2.0 == Vector3(0.5, 1.0, 1.5)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_dot_and_cross(self):
        """Test dot and cross products"""
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)

        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)
        assert Vector3(1.0, 2.0, 3.0).dot(Vector3(4.0, 5.0, 6.0)) == 32.0

    def test_magnitude_and_normalization(self):
        """Test magnitude and unit vectors"""
        v = Vector3(3.0, 4.0, 12.0)

        assert v.magnitude() == pytest.approx(13.0)
        assert v.magnitude_squared() == pytest.approx(169.0)
        assert v.normalized().magnitude() == pytest.approx(1.0)
        assert v.distance(Vector3()) == pytest.approx(13.0)

    def test_normalize_near_zero_returns_zero_vector(self):
        """Test normalization never divides by a vanishing magnitude"""
        assert Vector3().normalized() == Vector3()
        assert Vector3(1e-12, 0.0, 0.0).normalized() == Vector3()

    def test_numpy_interop(self):
        """Test conversion to and from numpy arrays"""
        v = Vector3(1.0, 2.0, 3.0)

        np.testing.assert_array_equal(v.to_array(), np.array([1.0, 2.0, 3.0]))
        assert Vector3.from_array(np.array([1.0, 2.0, 3.0])) == v
        assert tuple(v) == (1.0, 2.0, 3.0)


class TestState:
    """Test state derived quantities"""

    def test_circular_orbit_energy(self):
        """Test specific energy of a circular orbit equals -mu/2r"""
        r = 7000.0
        v = math.sqrt(EARTH.mu / r)
        state = State(Vector3(r, 0.0, 0.0), Vector3(0.0, v, 0.0), 0.0)

        assert state.orbital_energy(EARTH.mu) == pytest.approx(-EARTH.mu / (2.0 * r))
        assert state.altitude(EARTH.radius) == pytest.approx(r - EARTH.radius)
        assert state.speed == pytest.approx(v)
        assert state.angular_momentum() == Vector3(0.0, 0.0, r * v)

    def test_state_is_immutable(self):
        """Test states cannot be modified after construction"""
        state = State(Vector3(7000.0, 0.0, 0.0), Vector3(0.0, 7.5, 0.0))

        with pytest.raises(Exception):
            state.time = 10.0


class TestTrajectory:
    """Test trajectory container"""

    def _make_trajectory(self, n=5, dt=10.0):
        return Trajectory(
            State(Vector3(7000.0 + i, 0.0, 0.0), Vector3(0.0, 7.5, 0.0), i * dt)
            for i in range(n)
        )

    def test_sequence_behaviour(self):
        """Test length, indexing, slicing and iteration"""
        trajectory = self._make_trajectory()

        assert len(trajectory) == 5
        assert trajectory[0] is trajectory.initial
        assert trajectory[-1] is trajectory.final
        assert len(trajectory[1:3]) == 2
        assert [s.time for s in trajectory] == [0.0, 10.0, 20.0, 30.0, 40.0]
        assert trajectory.timestep == 10.0
        assert trajectory.duration == 40.0

    def test_array_views(self):
        """Test numpy position and velocity arrays"""
        trajectory = self._make_trajectory()

        assert trajectory.positions().shape == (5, 3)
        assert trajectory.velocities().shape == (5, 3)
        np.testing.assert_allclose(trajectory.radii(), [7000.0, 7001.0, 7002.0, 7003.0, 7004.0])

    def test_to_dataframe(self):
        """Test tabulation for display"""
        df = self._make_trajectory().to_dataframe()

        assert len(df) == 5
        assert list(df.columns[:4]) == ['time_s', 'x_km', 'y_km', 'z_km']
        assert df['speed_km_s'].iloc[0] == pytest.approx(7.5)

    def test_empty_trajectory(self):
        """Test an empty trajectory is falsy and has empty arrays"""
        trajectory = Trajectory([])

        assert not trajectory
        assert trajectory.positions().shape == (0, 3)
        assert trajectory.timestep == 0.0
