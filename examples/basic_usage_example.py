#!/usr/bin/env python3
"""
Basic Usage Example for the Mission Design Core

This example runs every reference orbit against the preset ground-station
network and prints the per-satellite and access summaries.
"""

import sys
from pathlib import Path

# Add the src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mission_design.main import MissionAnalysisModel
import logging

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Main example function"""
    print("=" * 60)
    print("Mission Design Core - Basic Usage Example")
    print("=" * 60)

    print("\n1. Creating mission analysis model...")
    model = MissionAnalysisModel()

    print("\n2. Available scenario templates:")
    for template in model.list_available_templates():
        print(f"   - {template}")

    print("\n3. Creating all-presets scenario...")
    success = model.create_scenario_from_template(
        "All_Presets",
        scenario_name="Example_Presets",
        description="Every reference orbit, J2 enabled",
        force_model={"j2_perturbation": True}
    )

    if not success:
        print("Failed to create scenario")
        return

    print("\n4. Configuration summary:")
    config_info = model.get_configuration_info()
    print(f"   Integrator: {config_info['integrator']}")
    print(f"   Force terms: {', '.join(config_info['force_terms'])}")
    print(f"   Satellites: {', '.join(config_info['satellites'])}")
    print(f"   Ground stations: {', '.join(config_info['ground_stations'])}")

    print("\n5. Running analysis...")
    model.run_analysis()

    print("\n6. Satellite summary:")
    print(model.get_summary().to_string(index=False))

    print("\n7. Access windows:")
    access = model.get_access_table()
    if access.empty:
        print("   No access windows")
    else:
        print(access.groupby(['satellite', 'station'])['duration_s']
              .agg(['count', 'sum', 'max']).to_string())

    print("\nExample complete.")


if __name__ == "__main__":
    main()
