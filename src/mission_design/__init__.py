"""
Mission Design Core
===================

Orbital-mechanics engine for mission design and visualization tools.
This package propagates satellite trajectories and derives the geometric
quantities a display layer presents: orbital elements, eclipse status,
solar-panel efficiency, ground tracks and ground-station access windows.

Main Components:
- Vector and state primitives
- Numerical orbit propagation (Euler, RK4) with optional J2
- Cartesian to Keplerian element conversion
- Eclipse and solar-panel analysis
- Ground track projection and coverage geometry
- Ground-station visibility and access statistics

Usage:
    >>> from mission_design.main import MissionAnalysisModel
    >>> model = MissionAnalysisModel()
    >>> model.create_scenario_from_template('All_Presets')
    >>> results = model.run_analysis()
    >>> model.get_summary()
"""

__version__ = "1.0.0"
