"""
Scenario Configuration Module

This module handles scenario configuration, validation, and management for
orbit and access analysis. It provides structured configuration schemas,
validation, and template generation for different mission scenarios.

References:
- JSON Schema validation standards
- Pydantic configuration management
"""

import copy
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..core.constants import CentralBody, EARTH
from ..core.vector import Vector3
from ..ground.ground_station import GroundStation, GroundStationPresets, StationPreset
from ..ground.ground_track import GeoCoordinate
from ..orbital.force_model import RESERVED_TERMS, ForceModel
from ..orbital.integrators import IntegratorType
from ..orbital.presets import (
    OrbitPreset,
    OrbitPresets,
    PresetType,
    create_state_from_orbital_params,
)


class CentralBodyConfig(BaseModel):
    """Central body constants"""
    name: str = Field(EARTH.name, description="Body name")
    mu: float = Field(EARTH.mu, gt=0, description="Gravitational parameter (km^3/s^2)")
    radius_km: float = Field(EARTH.radius, gt=0, description="Equatorial radius")
    j2: float = Field(EARTH.j2, description="J2 oblateness coefficient")
    rotation_rate_rad_s: float = Field(EARTH.rotation_rate, description="Rotation rate")

    def to_body(self) -> CentralBody:
        return CentralBody(
            name=self.name,
            mu=self.mu,
            radius=self.radius_km,
            j2=self.j2,
            rotation_rate=self.rotation_rate_rad_s
        )


class ForceModelConfig(BaseModel):
    """Force model toggles"""
    j2_perturbation: bool = Field(False, description="Include J2 oblateness")
    j3_perturbation: bool = Field(False, description="Reserved")
    j4_perturbation: bool = Field(False, description="Reserved")
    atmospheric_drag: bool = Field(False, description="Reserved")
    solar_radiation: bool = Field(False, description="Reserved")
    third_body_moon: bool = Field(False, description="Reserved")
    third_body_sun: bool = Field(False, description="Reserved")

    def to_force_model(self) -> ForceModel:
        return ForceModel(**self.model_dump())

    def active_terms(self) -> List[str]:
        """Enabled terms, point mass first, without building a ForceModel"""
        return ["point_mass"] + [name for name, enabled in self.model_dump().items() if enabled]


class PropagationConfig(BaseModel):
    """Propagation settings"""
    integrator: IntegratorType = Field(IntegratorType.RK4, description="Integration method")
    samples_per_orbit: int = Field(360, ge=1, le=100000, description="Steps per orbital period")
    orbits: float = Field(1.0, gt=0, description="Number of orbital periods to propagate")


class SatelliteConfig(BaseModel):
    """Satellite definition: a preset, or custom orbit parameters"""
    preset: Optional[PresetType] = Field(None, description="Preset orbit")
    name: Optional[str] = Field(None, description="Display name (custom orbits)")
    description: str = Field("", description="Display description")
    altitude_km: Optional[float] = Field(None, gt=0, description="(Periapsis) altitude")
    inclination_deg: float = Field(0.0, ge=0, le=180, description="Orbital inclination")
    eccentricity: float = Field(0.0, ge=0, lt=1, description="Orbital eccentricity")
    arg_periapsis_deg: float = Field(0.0, description="Argument of periapsis")
    color: List[int] = Field(default_factory=lambda: [255, 255, 255],
                             description="Display colour (RGB)")

    @model_validator(mode="after")
    def validate_definition(self):
        """Custom orbits need a name and an altitude"""
        if self.preset is None:
            if self.altitude_km is None:
                raise ValueError("Custom satellites require altitude_km")
            if not self.name:
                raise ValueError("Custom satellites require a name")
        return self

    @property
    def display_name(self) -> str:
        """Name the satellite is reported under"""
        if self.preset is not None:
            return OrbitPresets.get_preset_name(self.preset)
        return self.name

    def to_preset(self, body: CentralBody) -> OrbitPreset:
        """Build the orbit preset for this satellite"""
        if self.preset is not None:
            return OrbitPresets.create_preset(self.preset, body.mu, body)

        state = create_state_from_orbital_params(
            self.altitude_km, self.inclination_deg, self.eccentricity,
            self.arg_periapsis_deg, body.mu, body
        )
        rp = body.radius + self.altitude_km
        a = rp / (1.0 - self.eccentricity)
        period = 2.0 * math.pi * math.sqrt(a ** 3 / body.mu)
        return OrbitPreset(None, self.name, self.description, state,
                           period, tuple(self.color))


class GroundStationConfig(BaseModel):
    """Ground station definition: a preset, or an explicit location"""
    preset: Optional[StationPreset] = Field(None, description="Preset station")
    name: Optional[str] = Field(None, description="Station name")
    code: Optional[str] = Field(None, description="Short station code")
    latitude_deg: float = Field(0.0, ge=-90, le=90, description="Latitude")
    longitude_deg: float = Field(0.0, description="Longitude")
    altitude_km: float = Field(0.0, ge=0, description="Altitude above the surface")
    min_elevation_deg: float = Field(5.0, ge=-90, le=90, description="Minimum elevation")
    visible: bool = Field(True, description="Shown by the display layer")

    @model_validator(mode="after")
    def validate_definition(self):
        if self.preset is None and not (self.name and self.code):
            raise ValueError("Custom ground stations require a name and code")
        return self

    def to_station(self) -> GroundStation:
        if self.preset is not None:
            return GroundStationPresets.create_station(self.preset, self.min_elevation_deg)
        return GroundStation(
            name=self.name,
            code=self.code,
            location=GeoCoordinate(self.latitude_deg, self.longitude_deg, self.altitude_km),
            min_elevation=self.min_elevation_deg,
            visible=self.visible
        )


class AnalysisConfig(BaseModel):
    """Complete analysis scenario"""
    model_config = ConfigDict(extra="forbid")

    scenario_name: str = Field(..., description="Scenario name")
    description: Optional[str] = Field(None, description="Scenario description")
    version: str = Field("1.0", description="Configuration version")
    body: CentralBodyConfig = Field(default_factory=CentralBodyConfig)
    force_model: ForceModelConfig = Field(default_factory=ForceModelConfig)
    propagation: PropagationConfig = Field(default_factory=PropagationConfig)
    sun_direction: List[float] = Field(default_factory=lambda: [1.0, 0.0, 0.0],
                                       description="Sun direction in the inertial frame")
    satellites: List[SatelliteConfig] = Field(..., min_length=1)
    ground_stations: List[GroundStationConfig] = Field(
        default_factory=lambda: [GroundStationConfig(preset=p) for p in StationPreset])

    @field_validator("sun_direction")
    @classmethod
    def validate_sun_direction(cls, v):
        if len(v) != 3:
            raise ValueError("sun_direction must have three components")
        if sum(c * c for c in v) == 0.0:
            raise ValueError("sun_direction must be non-zero")
        return v

    def sun_vector(self) -> Vector3:
        return Vector3.from_array(self.sun_direction).normalized()

    def duplicate_satellite_names(self) -> List[str]:
        """Display names shared by more than one satellite"""
        names = [s.display_name for s in self.satellites]
        return sorted({n for n in names if names.count(n) > 1})


class ScenarioConfig:
    """
    Scenario configuration management system.

    Features:
    - JSON/YAML configuration loading and validation
    - Pre-defined mission templates
    - Configuration summaries
    """

    def __init__(self):
        """Initialize scenario configuration manager"""
        self.config: Optional[AnalysisConfig] = None
        self.templates = self._load_default_templates()

    def load_config(self, filepath: str) -> AnalysisConfig:
        """
        Load configuration from file

        Args:
            filepath: Path to a JSON or YAML configuration file

        Returns:
            Validated analysis configuration
        """
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        try:
            with open(path, 'r') as f:
                if path.suffix.lower() in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)

            self.config = AnalysisConfig(**data)
            return self.config

        except Exception as e:
            raise ValueError(f"Error loading configuration: {e}") from e

    def save_config(self, config: AnalysisConfig, filepath: str, format: str = "json"):
        """
        Save configuration to file

        Args:
            config: Configuration to save
            filepath: Output file path
            format: Output format ("json" or "yaml")
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = config.model_dump(mode="json")

        try:
            with open(path, 'w') as f:
                if format.lower() in ['yaml', 'yml']:
                    yaml.dump(data, f, default_flow_style=False, indent=2, sort_keys=False)
                else:
                    json.dump(data, f, indent=2)

        except Exception as e:
            raise ValueError(f"Error saving configuration: {e}") from e

    def create_from_template(self, template_name: str, **kwargs) -> AnalysisConfig:
        """
        Create configuration from predefined template

        Args:
            template_name: Name of template
            **kwargs: Parameters to override (nested dictionaries are merged)

        Returns:
            Configured analysis scenario
        """
        if template_name not in self.templates:
            raise ValueError(f"Template not found: {template_name}")

        template_data = copy.deepcopy(self.templates[template_name])
        self._deep_update(template_data, kwargs)

        return AnalysisConfig(**template_data)

    def validate_config(self, config_data: Dict) -> AnalysisConfig:
        return AnalysisConfig(**config_data)

    def get_config_schema(self) -> Dict:
        """JSON schema for the configuration"""
        return AnalysisConfig.model_json_schema()

    def list_templates(self) -> List[str]:
        return list(self.templates.keys())

    def _load_default_templates(self) -> Dict[str, Dict]:
        """Load default mission templates"""
        return {
            "All_Presets": {
                "scenario_name": "All_Presets",
                "description": "Every reference orbit against the preset ground network",
                "satellites": [{"preset": p.value} for p in PresetType],
                "propagation": {
                    "integrator": "rk4",
                    "samples_per_orbit": 360
                }
            },

            "ISS_Like": {
                "scenario_name": "ISS_Like_Mission",
                "description": "International Space Station-like LEO mission",
                "satellites": [{"preset": "ISS"}],
                "force_model": {
                    "j2_perturbation": True
                },
                "propagation": {
                    "integrator": "rk4",
                    "samples_per_orbit": 360,
                    "orbits": 3.0
                }
            },

            "Polar_Imaging": {
                "scenario_name": "Polar_Imaging",
                "description": "Sun-synchronous and polar imagers with a high-latitude station",
                "satellites": [{"preset": "SUN_SYNC"}, {"preset": "POLAR"}],
                "ground_stations": [
                    {"name": "Svalbard", "code": "SVB", "latitude_deg": 78.2,
                     "longitude_deg": 15.4, "min_elevation_deg": 5.0},
                    {"preset": "ESA_KOUROU"}
                ],
                "propagation": {
                    "integrator": "rk4",
                    "samples_per_orbit": 720
                }
            },

            "Euler_Baseline": {
                "scenario_name": "Euler_Baseline",
                "description": "ISS orbit with the first-order integrator for comparison",
                "satellites": [{"preset": "ISS"}],
                "propagation": {
                    "integrator": "euler",
                    "samples_per_orbit": 360
                }
            }
        }

    def _deep_update(self, base_dict: Dict, update_dict: Dict):
        """Deep update dictionary"""
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def generate_config_summary(self, config: AnalysisConfig) -> Dict[str, Any]:
        """
        Generate configuration summary

        Args:
            config: Analysis configuration

        Returns:
            Configuration summary dictionary
        """
        return {
            'scenario_name': config.scenario_name,
            'description': config.description,
            'central_body': config.body.name,
            'integrator': config.propagation.integrator.value,
            'samples_per_orbit': config.propagation.samples_per_orbit,
            'orbits': config.propagation.orbits,
            'force_terms': config.force_model.active_terms(),
            'satellites': [s.display_name for s in config.satellites],
            'ground_stations': [g.preset.value if g.preset else g.code
                                for g in config.ground_stations],
            'sun_direction': list(config.sun_direction)
        }

    def validate_mission_feasibility(self, config: AnalysisConfig) -> Dict[str, Any]:
        """
        Check a scenario for problems before running it

        Args:
            config: Analysis configuration

        Returns:
            Feasibility analysis and recommendations
        """
        issues = []
        warnings = []
        recommendations = []

        # Results are keyed by satellite display name and station code
        duplicates = config.duplicate_satellite_names()
        if duplicates:
            issues.append(f"Duplicate satellites: {', '.join(duplicates)}")

        codes = [g.to_station().code for g in config.ground_stations]
        duplicate_codes = sorted({c for c in codes if codes.count(c) > 1})
        if duplicate_codes:
            issues.append(f"Duplicate ground station codes: {', '.join(duplicate_codes)}")

        if not config.ground_stations:
            warnings.append("No ground stations configured - access analysis will be empty")

        if config.propagation.integrator == IntegratorType.EULER:
            warnings.append("Euler integrator accumulates energy drift over each orbit")
            recommendations.append("Use the rk4 integrator for analysis runs")

        if config.propagation.samples_per_orbit < 180:
            warnings.append("Coarse sampling may miss short ground-station passes")
            recommendations.append("Use at least 180 samples per orbit for access analysis")

        reserved = [t for t in RESERVED_TERMS if getattr(config.force_model, t)]
        if reserved:
            warnings.append(f"Force terms not modelled: {', '.join(reserved)}")

        if config.force_model.j2_perturbation and config.body.j2 == 0.0:
            warnings.append("J2 perturbation enabled but the central body J2 is zero")

        for satellite in config.satellites:
            if satellite.preset is None and satellite.altitude_km < 300.0:
                warnings.append(f"{satellite.name}: low altitude, drag decay is not modelled")

        total_samples = (int(config.propagation.samples_per_orbit * config.propagation.orbits) + 1) \
            * len(config.satellites)

        return {
            "feasible": len(issues) == 0,
            "issues": issues,
            "warnings": warnings,
            "recommendations": recommendations,
            "estimated_samples": total_samples
        }
