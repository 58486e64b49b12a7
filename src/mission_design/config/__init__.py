"""
Configuration Module

This module provides tools for handling scenario configuration and input
validation.
"""

from .scenario_config import AnalysisConfig, ScenarioConfig

__all__ = ["AnalysisConfig", "ScenarioConfig"]
