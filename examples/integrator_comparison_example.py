#!/usr/bin/env python3
"""
Integrator Comparison Example

Propagates one circular orbit with Euler and RK4 at the same timestep and
reports closure and energy drift for each.
"""

import math
import sys
from pathlib import Path

# Add the src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mission_design.core import EARTH, State, Vector3
from mission_design.orbital import EulerIntegrator, OrbitPropagator, RK4Integrator


def main():
    """Main example function"""
    r = EARTH.radius + 400.0
    v = math.sqrt(EARTH.mu / r)
    period = 2.0 * math.pi * math.sqrt(r ** 3 / EARTH.mu)
    initial = State(Vector3(r, 0.0, 0.0), Vector3(0.0, v, 0.0), 0.0)

    propagator = OrbitPropagator()
    timestep = period / 360.0

    print(f"Orbit radius: {r:.3f} km, period: {period / 60.0:.2f} min")
    print(f"Timestep: {timestep:.3f} s\n")

    for integrator in (EulerIntegrator(), RK4Integrator()):
        propagator.set_integrator(integrator)
        trajectory = propagator.propagate(initial, period, timestep)
        final = trajectory.final

        e0 = initial.orbital_energy(EARTH.mu)
        e1 = final.orbital_energy(EARTH.mu)

        print(f"{type(integrator).__name__}:")
        print(f"   Samples: {len(trajectory)}")
        print(f"   Position error: {final.position.distance(initial.position):.6f} km")
        print(f"   Velocity error: {final.velocity.distance(initial.velocity):.9f} km/s")
        print(f"   Energy drift: {(e1 - e0) / e0 * 100.0:.8f} %\n")


if __name__ == "__main__":
    main()
