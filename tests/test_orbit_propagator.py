"""
Tests for force models, integrators and the orbit propagator.
"""

import logging
import math
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mission_design.core import EARTH, State, Vector3
from mission_design.orbital import (
    EulerIntegrator,
    ForceModel,
    OrbitPresets,
    OrbitPropagator,
    PresetType,
    IntegratorType,
    RK4Integrator,
    create_integrator,
    create_state_from_orbital_params,
)
from mission_design.orbital.force_model import (
    compute_acceleration,
    j2_perturbation,
    point_mass_gravity,
)

LEO_RADIUS = EARTH.radius + 400.0


def circular_state(radius=LEO_RADIUS):
    """Circular equatorial state at +x"""
    v = math.sqrt(EARTH.mu / radius)
    return State(Vector3(radius, 0.0, 0.0), Vector3(0.0, v, 0.0), 0.0)


def circular_period(radius=LEO_RADIUS):
    return 2.0 * math.pi * math.sqrt(radius ** 3 / EARTH.mu)


class TestForceModel:
    """Test acceleration terms"""

    def test_point_mass_points_inward(self):
        """Test point-mass gravity magnitude and direction"""
        acc = point_mass_gravity(Vector3(7000.0, 0.0, 0.0), EARTH.mu)

        assert acc.x == pytest.approx(-EARTH.mu / 7000.0 ** 2)
        assert acc.y == 0.0
        assert acc.z == 0.0

    def test_j2_at_equator_and_pole(self):
        """Test J2 pulls inward at the equator and pushes outward at the pole"""
        r = 7000.0
        scale = EARTH.j2 * EARTH.mu * EARTH.radius ** 2 / r ** 4

        equator = j2_perturbation(Vector3(r, 0.0, 0.0), EARTH.mu, EARTH)
        pole = j2_perturbation(Vector3(0.0, 0.0, r), EARTH.mu, EARTH)

        assert equator.x == pytest.approx(-1.5 * scale)
        assert equator.z == 0.0
        assert pole.z == pytest.approx(3.0 * scale)

    def test_j2_only_when_enabled(self):
        """Test the J2 toggle changes the total acceleration"""
        position = Vector3(5000.0, 3000.0, 4000.0)
        plain = compute_acceleration(position, EARTH.mu, ForceModel())
        with_j2 = compute_acceleration(position, EARTH.mu, ForceModel(j2_perturbation=True))

        assert plain == point_mass_gravity(position, EARTH.mu)
        assert with_j2.distance(plain) > 0.0

    def test_active_terms(self):
        """Test active term listing"""
        assert ForceModel().active_terms() == ['point_mass']
        assert ForceModel(j2_perturbation=True).active_terms() == ['point_mass', 'j2_perturbation']

    def test_reserved_terms_warn(self, caplog):
        """Test enabling an unmodelled term logs a warning"""
        with caplog.at_level(logging.WARNING):
            ForceModel(atmospheric_drag=True)

        assert 'atmospheric_drag' in caplog.text


class TestIntegrators:
    """Test integration strategies"""

    def test_factory(self):
        """Test integrator creation by name"""
        assert isinstance(create_integrator("euler"), EulerIntegrator)
        assert isinstance(create_integrator("rk4"), RK4Integrator)
        assert create_integrator("euler").name == "euler"
        assert create_integrator(IntegratorType.RK4).name == "rk4"
        with pytest.raises(ValueError):
            create_integrator("leapfrog")

    def test_step_advances_time(self):
        """Test both integrators advance time by exactly h"""
        state = circular_state()
        for integrator in (EulerIntegrator(), RK4Integrator()):
            next_state = integrator.step(state, 10.0, EARTH.mu, ForceModel())
            assert next_state.time == 10.0
            assert next_state.position != state.position

    def test_euler_step_is_first_order(self):
        """Test Euler uses the velocity and acceleration at the start of the step"""
        state = circular_state()
        next_state = EulerIntegrator().step(state, 10.0, EARTH.mu, ForceModel())

        assert next_state.position == state.position + state.velocity * 10.0


class TestOrbitPropagator:
    """Test orbit propagation"""

    def test_rk4_conserves_energy(self):
        """Test RK4 specific energy stays within 1e-6 relative over one orbit"""
        state = circular_state()
        propagator = OrbitPropagator()

        trajectory = propagator.propagate(state, circular_period(), 10.0)

        e0 = state.orbital_energy(EARTH.mu)
        for s in trajectory:
            assert abs((s.orbital_energy(EARTH.mu) - e0) / e0) < 1e-6

    def test_rk4_orbit_closes(self):
        """Test RK4 returns close to the start after one period"""
        state = circular_state()
        period = circular_period()
        propagator = OrbitPropagator()

        trajectory = propagator.propagate(state, period, period / 600)

        assert len(trajectory) == 601
        assert trajectory.final.time == pytest.approx(period)
        assert trajectory.final.position.distance(state.position) < 0.1

    def test_euler_drifts_more_than_rk4(self):
        """Test the first-order baseline accumulates far more error"""
        state = circular_state()
        period = circular_period()

        rk4 = OrbitPropagator(integrator=RK4Integrator()).propagate(state, period, 10.0)
        euler = OrbitPropagator(integrator=EulerIntegrator()).propagate(state, period, 10.0)

        rk4_error = abs(rk4.final.radius - LEO_RADIUS)
        euler_error = abs(euler.final.radius - LEO_RADIUS)
        assert euler_error > 100 * rk4_error
        assert euler.final.orbital_energy(EARTH.mu) > state.orbital_energy(EARTH.mu)

    def test_step_count(self):
        """Test floor(duration / timestep) steps plus the initial state"""
        propagator = OrbitPropagator()
        state = circular_state()

        assert len(propagator.propagate(state, 100.0, 10.0)) == 11
        assert len(propagator.propagate(state, 105.0, 10.0)) == 11

        times = propagator.propagate(state, 50.0, 10.0).times()
        assert list(times) == pytest.approx([0.0, 10.0, 20.0, 30.0, 40.0, 50.0])

    @pytest.mark.parametrize("duration,timestep", [
        (100.0, 0.0),
        (100.0, -5.0),
        (5.0, 10.0),
        (0.0, 10.0),
    ])
    def test_degenerate_requests(self, duration, timestep):
        """Test degenerate requests return only the initial state"""
        state = circular_state()
        trajectory = OrbitPropagator().propagate(state, duration, timestep)

        assert len(trajectory) == 1
        assert trajectory.initial is state

    def test_propagation_logs_integrator_name(self, caplog):
        """Test the debug log names the active integrator"""
        propagator = OrbitPropagator(integrator=EulerIntegrator())

        with caplog.at_level(logging.DEBUG, logger="mission_design.orbital.orbit_propagator"):
            propagator.propagate(circular_state(), 30.0, 10.0)

        assert "3 steps" in caplog.text
        assert "euler" in caplog.text

    def test_single_step_matches_propagation(self):
        """Test the single-step interface agrees with full propagation"""
        propagator = OrbitPropagator()
        state = circular_state()

        trajectory = propagator.propagate(state, 30.0, 10.0)

        assert propagator.step(state, 10.0) == trajectory[1]

    def test_set_integrator_keeps_force_model(self):
        """Test swapping the integrator preserves the force model"""
        propagator = OrbitPropagator(force_model=ForceModel(j2_perturbation=True))
        propagator.set_integrator(EulerIntegrator())

        assert isinstance(propagator.integrator, EulerIntegrator)
        assert propagator.force_model.j2_perturbation

    def test_j2_perturbs_inclined_orbit(self):
        """Test J2 measurably shifts an inclined orbit after one period"""
        state = create_state_from_orbital_params(400.0, 51.6, 0.0, 0.0, EARTH.mu)
        period = circular_period()

        plain = OrbitPropagator().propagate(state, period, 10.0)
        perturbed = OrbitPropagator(force_model=ForceModel(j2_perturbation=True)).propagate(
            state, period, 10.0)

        assert perturbed.final.position.distance(plain.final.position) > 1.0

    def test_orbital_period(self):
        """Test Kepler's third law"""
        propagator = OrbitPropagator()

        assert propagator.get_orbital_period(LEO_RADIUS) == pytest.approx(circular_period())


class TestPresetPropagation:
    """Test preset orbits and their propagation"""

    def test_all_presets(self):
        """Test all six reference orbits are available"""
        presets = OrbitPresets.get_all_presets()

        assert [p.name for p in presets] == ['ISS', 'GEO', 'Molniya', 'GPS', 'Sun-Sync', 'Polar']
        assert all(p.period > 0 for p in presets)

    def test_preset_initial_altitude(self):
        """Test preset states start at their nominal altitude"""
        iss = OrbitPresets.create_preset(PresetType.ISS)
        geo = OrbitPresets.create_preset(PresetType.GEO)

        assert iss.initial_state.altitude(EARTH.radius) == pytest.approx(400.0)
        assert geo.initial_state.altitude(EARTH.radius) == pytest.approx(35786.0)
        assert geo.period == 86164.0

    def test_propagate_preset_resolution(self):
        """Test samples-per-orbit sets the trajectory length"""
        preset = OrbitPresets.create_preset(PresetType.ISS)
        trajectory = OrbitPropagator().propagate_preset(preset, samples_per_orbit=90)

        assert len(trajectory) == 91
        assert trajectory.timestep == pytest.approx(preset.period / 90)

    def test_propagate_presets_in_order(self):
        """Test batch propagation returns one trajectory per preset, in order"""
        presets = [OrbitPresets.create_preset(t)
                   for t in (PresetType.ISS, PresetType.POLAR, PresetType.ISS)]
        trajectories = OrbitPropagator().propagate_presets(presets, samples_per_orbit=36)

        assert len(trajectories) == 3
        assert all(len(t) == 37 for t in trajectories)
        for preset, trajectory in zip(presets, trajectories):
            assert trajectory.initial is preset.initial_state
