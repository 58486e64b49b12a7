"""
Core Module

This module provides the vector and state primitives shared by every analysis
component, together with the physical constants of the central body.
"""

from .constants import CentralBody, EARTH
from .vector import Vector3
from .state import State, Trajectory

__all__ = ["CentralBody", "EARTH", "Vector3", "State", "Trajectory"]
