"""
Power Module

This module provides solar-panel geometry and efficiency estimation.
"""

from .solar_analyzer import SolarAnalyzer, SolarPanelAnalysis

__all__ = ["SolarAnalyzer", "SolarPanelAnalysis"]
