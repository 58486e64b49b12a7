"""
Orbital Mechanics Module

This module provides tools for numerical orbit propagation, orbital element
conversion, reference orbits and eclipse detection.
"""

from .force_model import ForceModel
from .integrators import EulerIntegrator, RK4Integrator, IntegratorType, create_integrator
from .orbit_propagator import OrbitPropagator
from .orbital_elements import OrbitalElements
from .eclipse_detector import EclipseDetector, EclipseStatus
from .presets import OrbitPreset, OrbitPresets, PresetType, create_state_from_orbital_params

__all__ = [
    "ForceModel", "EulerIntegrator", "RK4Integrator", "IntegratorType", "create_integrator",
    "OrbitPropagator", "OrbitalElements", "EclipseDetector", "EclipseStatus",
    "OrbitPreset", "OrbitPresets", "PresetType", "create_state_from_orbital_params",
]
