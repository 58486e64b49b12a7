"""
Mission Design Analysis - Main Interface

This module provides the main interface for the orbit and access analysis
system. It integrates all modules and provides a high-level API for loading
scenarios, running the batch analysis, and tabulating results for the
display layer.

Usage:
    from mission_design.main import MissionAnalysisModel

    model = MissionAnalysisModel()
    model.create_scenario_from_template('All_Presets')
    results = model.run_analysis()
    summary = model.get_summary()
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from .config.scenario_config import AnalysisConfig, ScenarioConfig
from .core.constants import CentralBody
from .core.vector import Vector3
from .ground.ground_station import AccessStatistics, GroundStation, GroundStationAccess
from .ground.ground_track import GeoCoordinate, GroundTrack
from .orbital.eclipse_detector import EclipseDetector
from .orbital.integrators import create_integrator
from .orbital.orbit_propagator import OrbitPropagator
from .orbital.orbital_elements import OrbitalElements
from .power.solar_analyzer import SolarAnalyzer
from .satellite import Satellite


# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class MissionAnalysisModel:
    """
    Main interface for orbit, eclipse, power and access analysis.

    Every trajectory and access statistic is computed once per scenario in a
    single batch pass; results are read-only afterwards.

    Features:
    - Scenario loading from files or templates
    - Trajectory propagation for every configured satellite
    - Orbital elements, eclipse and solar summaries
    - Ground-station access statistics per satellite-station pair
    - Tabulated results for display
    """

    def __init__(self, config: Optional[AnalysisConfig] = None,
                 log_level: str = "INFO"):
        """
        Initialize mission analysis model

        Args:
            config: Analysis configuration
            log_level: Logging level
        """
        logger.setLevel(getattr(logging, log_level.upper()))

        self.config = config
        self.scenario_manager = ScenarioConfig()

        # Configured when a scenario is loaded
        self.body: Optional[CentralBody] = None
        self.propagator: Optional[OrbitPropagator] = None
        self.sun_direction: Optional[Vector3] = None
        self.stations: List[GroundStation] = []

        self.results: Dict[str, Any] = {}
        self.analysis_time: Optional[float] = None

        self.is_initialized = False
        self.is_analysis_complete = False

        if config:
            self._configure_modules()
            self.is_initialized = True

    def load_scenario(self, filepath: str) -> bool:
        """
        Load analysis scenario from file

        Args:
            filepath: Path to configuration file

        Returns:
            True if successful
        """
        try:
            logger.info(f"Loading scenario from {filepath}")
            self.config = self.scenario_manager.load_config(filepath)
            self._configure_modules()
            self.is_initialized = True
            logger.info("Scenario loaded successfully")
            return True

        except Exception as e:
            logger.error(f"Failed to load scenario: {e}")
            return False

    def create_scenario_from_template(self, template_name: str, **kwargs) -> bool:
        """
        Create scenario from predefined template

        Args:
            template_name: Name of template
            **kwargs: Configuration overrides

        Returns:
            True if successful
        """
        try:
            logger.info(f"Creating scenario from template: {template_name}")
            self.config = self.scenario_manager.create_from_template(template_name, **kwargs)
            self._configure_modules()
            self.is_initialized = True
            logger.info("Scenario created successfully")
            return True

        except Exception as e:
            logger.error(f"Failed to create scenario: {e}")
            return False

    def _configure_modules(self):
        """Configure the propagator and analysis inputs from the current configuration"""
        if not self.config:
            raise ValueError("No configuration loaded")

        logger.info("Configuring analysis modules...")

        self.body = self.config.body.to_body()
        self.propagator = OrbitPropagator(
            mu=self.body.mu,
            body=self.body,
            integrator=create_integrator(self.config.propagation.integrator),
            force_model=self.config.force_model.to_force_model()
        )
        self.sun_direction = self.config.sun_vector()
        self.stations = [s.to_station() for s in self.config.ground_stations]

        self.results = {}
        self.is_analysis_complete = False

        logger.info("All modules configured successfully")

    def run_analysis(self) -> Dict[str, Any]:
        """
        Run the complete batch analysis

        Returns:
            Analysis results keyed by satellite name
        """
        if not self.is_initialized:
            raise ValueError("Model not initialized. Load a scenario first.")

        duplicates = self.config.duplicate_satellite_names()
        if duplicates:
            raise ValueError(f"Duplicate satellite names: {', '.join(duplicates)}")

        logger.info("Starting analysis...")
        start_time = datetime.now()

        try:
            satellites = self._propagate_satellites()

            per_satellite = {}
            for satellite in satellites:
                per_satellite[satellite.name] = self._analyze_satellite(satellite)

            end_time = datetime.now()
            self.analysis_time = (end_time - start_time).total_seconds()

            self.results = {
                'satellites': per_satellite,
                'analysis_metadata': {
                    'config': self.scenario_manager.generate_config_summary(self.config),
                    'analysis_time_seconds': self.analysis_time,
                    'start_time': start_time.isoformat(),
                    'end_time': end_time.isoformat(),
                    'total_data_points': sum(len(s.trajectory) for s in satellites)
                }
            }

            self.is_analysis_complete = True
            logger.info(f"Analysis completed in {self.analysis_time:.2f} seconds")

            return self.results

        except Exception as e:
            logger.error(f"Analysis failed: {e}")
            raise

    def _propagate_satellites(self) -> List[Satellite]:
        """Propagate every configured satellite"""
        propagation = self.config.propagation
        presets = [s.to_preset(self.body) for s in self.config.satellites]

        logger.info("Generating orbits...")
        trajectories = self.propagator.propagate_presets(
            presets, propagation.samples_per_orbit, propagation.orbits)

        return [Satellite(preset, trajectory, self.body)
                for preset, trajectory in zip(presets, trajectories)]

    def _analyze_satellite(self, satellite: Satellite) -> Dict[str, Any]:
        """Derive elements, shadow, power and access results for one satellite"""
        trajectory = satellite.trajectory
        elements = OrbitalElements.from_state(trajectory.initial, self.propagator.mu)

        _, average_efficiency = SolarAnalyzer.analyze_trajectory(
            trajectory, self.sun_direction, self.body.radius)

        access = {
            station.code: GroundStationAccess.calculate_access_windows(
                trajectory, station, self.body.radius, self.body)
            for station in self.stations
        }

        ground_track = GroundTrack.calculate_ground_track(
            trajectory, self.config.propagation.samples_per_orbit, self.body)

        return {
            'satellite': satellite,
            'elements': elements,
            'eclipse': EclipseDetector.eclipse_fraction(
                trajectory, self.sun_direction, self.body.radius),
            'average_solar_efficiency': average_efficiency,
            'coverage_radius_km': GroundTrack.calculate_coverage_radius(
                satellite.stats.mean_altitude, body=self.body),
            'ground_track': ground_track,
            'access': access
        }

    def validate_configuration(self) -> Dict[str, Any]:
        """
        Validate current configuration

        Returns:
            Validation results
        """
        if not self.config:
            return {"feasible": False, "issues": ["No configuration loaded"],
                    "warnings": [], "recommendations": []}

        return self.scenario_manager.validate_mission_feasibility(self.config)

    def list_available_templates(self) -> List[str]:
        return self.scenario_manager.list_templates()

    def get_configuration_info(self) -> Dict[str, Any]:
        """Summary of the loaded configuration"""
        if not self.config:
            raise ValueError("No configuration loaded")
        return self.scenario_manager.generate_config_summary(self.config)

    def get_access_statistics(self, satellite_name: str,
                              station_code: str) -> Optional[AccessStatistics]:
        """Access statistics for one satellite-station pair, if analysed"""
        entry = self.results.get('satellites', {}).get(satellite_name)
        if entry is None:
            return None
        return entry['access'].get(station_code)

    def get_ground_track(self, satellite_name: str) -> List[GeoCoordinate]:
        entry = self.results.get('satellites', {}).get(satellite_name)
        return entry['ground_track'] if entry else []

    def get_summary(self) -> pd.DataFrame:
        """
        Tabulate per-satellite results

        Returns:
            DataFrame with one row per satellite
        """
        if not self.is_analysis_complete:
            raise ValueError("No results available. Run the analysis first.")

        rows = []
        for name, entry in self.results['satellites'].items():
            satellite = entry['satellite']
            elements = entry['elements']
            rows.append({
                'satellite': name,
                'orbit_family': satellite.stats.orbit_family,
                'orbit_type': elements.orbit_type(),
                'semi_major_axis_km': elements.semi_major_axis,
                'eccentricity': elements.eccentricity,
                'inclination_deg': elements.inclination_deg,
                'period_min': elements.period / 60.0,
                'periapsis_alt_km': satellite.stats.periapsis_alt,
                'apoapsis_alt_km': satellite.stats.apoapsis_alt,
                'umbra_fraction': entry['eclipse']['umbra'],
                'average_solar_efficiency': entry['average_solar_efficiency'],
                'coverage_radius_km': entry['coverage_radius_km'],
                'total_passes': sum(s.passes_per_orbit for s in entry['access'].values())
            })

        return pd.DataFrame(rows)

    def get_access_table(self) -> pd.DataFrame:
        """
        Tabulate every access window

        Returns:
            DataFrame with one row per satellite-station window
        """
        if not self.is_analysis_complete:
            raise ValueError("No results available. Run the analysis first.")

        columns = ['satellite', 'station', 'start_time_s', 'end_time_s', 'duration_s',
                   'max_elevation_deg', 'start_frame', 'end_frame']
        rows = []
        for name, entry in self.results['satellites'].items():
            for code, stats in entry['access'].items():
                for window in stats.windows:
                    rows.append({
                        'satellite': name,
                        'station': code,
                        'start_time_s': window.start_time,
                        'end_time_s': window.end_time,
                        'duration_s': window.duration,
                        'max_elevation_deg': window.max_elevation,
                        'start_frame': window.start_frame,
                        'end_frame': window.end_frame
                    })

        return pd.DataFrame(rows, columns=columns)


def main():
    """Command line interface for the mission analysis model"""
    import argparse

    parser = argparse.ArgumentParser(description="Mission Design Analysis")
    parser.add_argument("config", nargs="?", help="Configuration file path")
    parser.add_argument("--template", help="Create scenario from template")
    parser.add_argument("--list-templates", action="store_true", help="List available templates")
    parser.add_argument("--access", action="store_true", help="Print every access window")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    model = MissionAnalysisModel(log_level=args.log_level)

    # List templates
    if args.list_templates:
        print("Available templates:")
        for template in model.list_available_templates():
            print(f"  - {template}")
        return

    if args.template:
        success = model.create_scenario_from_template(args.template)
    elif args.config:
        success = model.load_scenario(args.config)
    else:
        parser.error("a configuration file or --template is required")

    if not success:
        print("Failed to load configuration")
        return

    validation = model.validate_configuration()
    if not validation['feasible']:
        print("Configuration validation failed:")
        for issue in validation['issues']:
            print(f"  - {issue}")
        return
    for warning in validation['warnings']:
        print(f"Warning: {warning}")

    print("Running analysis...")
    model.run_analysis()

    print("\nSatellite Summary:")
    print(model.get_summary().to_string(index=False))

    if args.access:
        print("\nAccess Windows:")
        print(model.get_access_table().to_string(index=False))


if __name__ == "__main__":
    main()
