"""
Tests for eclipse detection and solar panel efficiency.
"""

import math
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mission_design.core import EARTH, State, Trajectory, Vector3
from mission_design.orbital import EclipseDetector, EclipseStatus, OrbitPropagator
from mission_design.power import SolarAnalyzer, SolarPanelAnalysis

R = EARTH.radius
SUN = Vector3(1.0, 0.0, 0.0)


def off_axis_position(distance, angle_deg):
    """Position at an angle from the anti-sun axis"""
    angle = math.radians(angle_deg)
    return Vector3(-distance * math.cos(angle), distance * math.sin(angle), 0.0)


class TestEclipseDetector:
    """Test conical shadow model"""

    def test_sunlit_side(self):
        """Test the sun-facing hemisphere is lit"""
        status = EclipseDetector.check_eclipse(Vector3(7000.0, 0.0, 0.0), SUN, R)

        assert not status.in_umbra
        assert not status.in_penumbra
        assert status.sun_angle == pytest.approx(0.0)
        assert status.eclipse_type == "none"

    def test_umbra_behind_body(self):
        """Test a point just behind the body is in full shadow"""
        status = EclipseDetector.check_eclipse(Vector3(-(R + 1.0), 0.0, 0.0), SUN, R)

        assert status.in_umbra
        assert status.in_penumbra
        assert status.sun_angle == pytest.approx(180.0)
        assert status.eclipse_type == "umbra"

    def test_penumbra_at_shadow_edge(self):
        """Test the shadow edge is penumbra only"""
        # Body angular radius is exactly 30 degrees at twice the radius
        status = EclipseDetector.check_eclipse(off_axis_position(2.0 * R, 30.0), SUN, R)

        assert status.in_penumbra
        assert not status.in_umbra
        assert status.eclipse_type == "penumbra"

    def test_far_off_axis_is_lit(self):
        """Test a distant point off the anti-sun axis is outside the cone"""
        status = EclipseDetector.check_eclipse(off_axis_position(20000.0, 30.0), SUN, R)

        assert not status.in_penumbra
        assert not status.in_umbra

    def test_shadow_shrinks_with_distance(self):
        """Test penumbra never reappears once left along a fixed off-axis ray"""
        left_shadow = False
        for distance in range(7000, 50001, 500):
            status = EclipseDetector.check_eclipse(
                off_axis_position(float(distance), 30.0), SUN, R)
            if left_shadow:
                assert not status.in_penumbra
            if not status.in_penumbra:
                left_shadow = True

        assert left_shadow

    def test_sun_direction_need_not_be_unit(self):
        """Test sun direction is normalized internally"""
        status = EclipseDetector.check_eclipse(
            Vector3(-7000.0, 0.0, 0.0), Vector3(5.0, 0.0, 0.0), R)

        assert status.in_umbra

    def test_eclipse_fraction_leo(self):
        """Test shadow fraction for an equatorial LEO orbit"""
        radius = R + 400.0
        v = math.sqrt(EARTH.mu / radius)
        period = 2.0 * math.pi * math.sqrt(radius ** 3 / EARTH.mu)
        trajectory = OrbitPropagator().propagate(
            State(Vector3(radius, 0.0, 0.0), Vector3(0.0, v, 0.0)), period, period / 360)

        fractions = EclipseDetector.eclipse_fraction(trajectory, SUN, R)

        assert 0.3 < fractions['umbra'] < 0.45
        assert fractions['umbra'] + fractions['penumbra_only'] + fractions['sunlit'] == \
            pytest.approx(1.0)

    def test_eclipse_fraction_empty(self):
        """Test empty trajectories have zero fractions"""
        fractions = EclipseDetector.eclipse_fraction(Trajectory([]), SUN, R)

        assert fractions == {'umbra': 0.0, 'penumbra_only': 0.0, 'sunlit': 0.0}


class TestSolarAnalyzer:
    """Test solar panel efficiency"""

    position = Vector3(7000.0, 0.0, 0.0)
    velocity = Vector3(0.0, 7.5, 0.0)  # orbit normal is +z

    def _sun_at_beta(self, beta_deg):
        beta = math.radians(beta_deg)
        return Vector3(math.cos(beta), 0.0, math.sin(beta))

    def test_umbra_is_battery_mode(self):
        """Test zero efficiency in full shadow"""
        analysis = SolarAnalyzer.analyze(self.position, self.velocity, SUN,
                                         EclipseStatus(in_umbra=True, in_penumbra=True))

        assert analysis.efficiency == 0.0
        assert not analysis.in_sunlight
        assert analysis.power_status == "Battery Mode"

    def test_zero_beta(self):
        """Test full efficiency with the sun in the orbital plane"""
        analysis = SolarAnalyzer.analyze(self.position, self.velocity, SUN, EclipseStatus())

        assert analysis.beta_angle == pytest.approx(0.0)
        assert analysis.efficiency == pytest.approx(1.0)
        assert analysis.power_status == "Optimal Generation"

    def test_moderate_beta(self):
        """Test efficiency follows cos(beta) below the high-beta threshold"""
        analysis = SolarAnalyzer.analyze(self.position, self.velocity,
                                         self._sun_at_beta(60.0), EclipseStatus())

        assert analysis.beta_angle == pytest.approx(60.0)
        assert analysis.efficiency == pytest.approx(0.5)

    def test_high_beta_derating(self):
        """Test extra derating beyond 75 degrees"""
        analysis = SolarAnalyzer.analyze(self.position, self.velocity,
                                         self._sun_at_beta(80.0), EclipseStatus())

        assert analysis.efficiency == pytest.approx(math.cos(math.radians(80.0)) * 0.7)

    def test_negative_beta(self):
        """Test a sun below the orbital plane gives a negative beta angle"""
        analysis = SolarAnalyzer.analyze(self.position, self.velocity,
                                         self._sun_at_beta(-30.0), EclipseStatus())

        assert analysis.beta_angle == pytest.approx(-30.0)
        assert analysis.efficiency == pytest.approx(math.cos(math.radians(30.0)))
        assert analysis.power_status == "Optimal Generation"

    def test_penumbra_derating(self):
        """Test penumbra halves efficiency and takes precedence over high beta"""
        penumbra = EclipseStatus(in_penumbra=True)

        low = SolarAnalyzer.analyze(self.position, self.velocity, SUN, penumbra)
        high = SolarAnalyzer.analyze(self.position, self.velocity,
                                     self._sun_at_beta(80.0), penumbra)

        assert low.efficiency == pytest.approx(0.5)
        assert high.efficiency == pytest.approx(math.cos(math.radians(80.0)) * 0.5)

    def test_default_analysis(self):
        """Test the default record is a lit, zero-efficiency sample"""
        analysis = SolarPanelAnalysis()

        assert analysis.in_sunlight
        assert analysis.power_status == "Limited Generation"

    def test_analyze_trajectory(self):
        """Test per-sample analyses and the orbit average"""
        radius = R + 400.0
        v = math.sqrt(EARTH.mu / radius)
        trajectory = OrbitPropagator().propagate(
            State(Vector3(radius, 0.0, 0.0), Vector3(0.0, v, 0.0)), 5400.0, 60.0)

        analyses, average = SolarAnalyzer.analyze_trajectory(trajectory, SUN, R)

        assert len(analyses) == len(trajectory)
        assert 0.0 < average < 1.0
        assert any(not a.in_sunlight for a in analyses)
