"""Great-circle navigation engine for simulated ships and aircraft.

The package models Earth as a sphere and moves agents along great circles
in fixed time steps:

    - geonav.unit: SI-backed float units (meters, seconds, degrees, ...)
    - geonav.geo: GeoPoint, navigation math and polygon sampling
    - geonav.state: Validated state machines for agent phases
    - geonav.vehicles: Cruising and routed agents
    - geonav.simulator: SimulationClock driving agents tick by tick
    - geonav.fleet: Seeding helpers and the demo population

Example:
    >>> import numpy as np
    >>> from geonav import SimulationClock, build_default_fleet
    >>> clock = SimulationClock(build_default_fleet(np.random.default_rng(1), ships=10))
    >>> clock.run(5)
    >>> len(clock.snapshots())
    19
"""

from .errors import DegeneratePolygon, GeoNavError, InvalidAgentConfig
from .fleet import build_default_fleet, seed_route, seed_ships
from .geo import GeoPoint, Polygon, destination, distance, initial_bearing, sample_uniform
from .simulator import SimulationClock
from .vehicles import AgentSnapshot, CruisingAgent, NavigatingAgent, RoutedAgent

__all__ = [
    "GeoPoint",
    "Polygon",
    "destination",
    "initial_bearing",
    "distance",
    "sample_uniform",
    "NavigatingAgent",
    "CruisingAgent",
    "RoutedAgent",
    "AgentSnapshot",
    "SimulationClock",
    "seed_ships",
    "seed_route",
    "build_default_fleet",
    "GeoNavError",
    "InvalidAgentConfig",
    "DegeneratePolygon",
]
