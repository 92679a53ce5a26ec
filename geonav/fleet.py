"""Fleet seeding and the demo population.

Builds agent populations from a random generator so that a fixed seed gives
the same fleet every run:

- Ships are scattered uniformly over a sea polygon with a random course and
  a slow random speed.
- Aircraft fly routes between named places, several per route, each with a
  slightly jittered start and its own speed.

Example:
    >>> import numpy as np
    >>> fleet = build_default_fleet(np.random.default_rng(42), ships=5, aircraft_per_route=1)
    >>> len(fleet)
    8
"""

from collections.abc import Sequence
import logging
from typing import NamedTuple

import numpy as np

from geonav.geo import GeoPoint, Polygon, sample_points
from geonav.vehicles import AgentKind, CruisingAgent, NavigatingAgent, RoutedAgent

logger = logging.getLogger(__name__)

SHIP_SPEED_RANGE = (1.0, 5.0)
AIRCRAFT_SPEED_RANGE = (150.0, 250.0)
START_JITTER_DEG = 0.01

# Sea area off the US west coast, from Vancouver Island down to Point
# Conception, as (lat, lng) degrees.
PACIFIC_COAST = Polygon.from_deg(
    [
        (48.0193, -126.3427),
        (46.4681, -125.8593),
        (43.8662, -125.9472),
        (40.9135, -126.1230),
        (38.3761, -125.6835),
        (36.1023, -124.4531),
        (34.2708, -123.2226),
        (33.6512, -121.8603),
        (34.3252, -120.5969),
        (35.0389, -120.8276),
        (35.7465, -121.5637),
        (36.2354, -121.9702),
        (36.7740, -122.2338),
        (37.6577, -122.7722),
        (38.0653, -123.3105),
        (38.9252, -124.1894),
        (39.4277, -124.2004),
        (39.7578, -124.1235),
        (39.9602, -124.3103),
        (40.2459, -124.6069),
        (40.6806, -124.4311),
        (41.3355, -124.2004),
        (41.8040, -124.4531),
        (42.3179, -124.5849),
        (43.0046, -124.6289),
        (44.0086, -124.3762),
        (45.4138, -124.1894),
        (46.8752, -124.3212),
        (47.6209, -124.7387),
        (48.0046, -126.3208),
    ]
)

SEATTLE = GeoPoint.from_deg(47.6062, -122.3321)
HONOLULU = GeoPoint.from_deg(21.3069, -157.8583)
LOS_ANGELES = GeoPoint.from_deg(34.0522, -118.2437)
SAN_FRANCISCO = GeoPoint.from_deg(37.7749, -122.4194)
FRESNO = GeoPoint.from_deg(36.7378, -119.7871)


class Route(NamedTuple):
    """A named one-way corridor flown by routed agents."""

    name: str
    start: GeoPoint
    end: GeoPoint


DEFAULT_ROUTES: tuple[Route, ...] = (
    Route("SEA-HNL", SEATTLE, HONOLULU),
    Route("LAX-SFO", LOS_ANGELES, SAN_FRANCISCO),
    Route("FAT-LAX", FRESNO, LOS_ANGELES),
)


def _check_range(name: str, bounds: Sequence[float]) -> tuple[float, float]:
    low, high = (float(b) for b in bounds)
    if not 0 <= low <= high:
        msg = f"{name} must satisfy 0 <= low <= high, got {tuple(bounds)}"
        raise ValueError(msg)
    return low, high


def seed_ships(
    polygon: Polygon,
    count: int,
    rng: np.random.Generator,
    speed_range: Sequence[float] = SHIP_SPEED_RANGE,
) -> list[CruisingAgent]:
    """Scatter ``count`` cruising ships over ``polygon``.

    Each ship gets a uniform random course in [0, 360) and a uniform random
    speed in ``speed_range`` (m/s).

    Raises:
        ValueError: For a negative count or an invalid speed range.
        DegeneratePolygon: If the polygon cannot be sampled.
    """
    low, high = _check_range("speed_range", speed_range)
    positions = sample_points(polygon, count, rng)
    ships = [
        CruisingAgent(
            position,
            course=rng.uniform(0.0, 360.0),
            speed=rng.uniform(low, high),
            kind=AgentKind.SHIP,
        )
        for position in positions
    ]
    logger.debug("Seeded %d ships", len(ships))
    return ships


def seed_route(
    start: GeoPoint,
    end: GeoPoint,
    count: int,
    rng: np.random.Generator,
    speed_range: Sequence[float] = AIRCRAFT_SPEED_RANGE,
    jitter_deg: float = START_JITTER_DEG,
    spacing: float = 0.0,
    label: str = "",
) -> list[RoutedAgent]:
    """Create ``count`` routed aircraft flying from ``start`` to ``end``.

    Args:
        start: Nominal route start.
        end: Route end, shared by every agent.
        count: Number of agents.
        rng: Source of randomness.
        speed_range: Uniform speed range in m/s.
        jitter_deg: Each agent's origin is moved by up to ``jitter_deg / 2``
            degrees in latitude and in longitude so that agents on the same
            route do not overlap exactly.
        spacing: Meters between consecutive agents along the corridor.
            Agent ``i`` starts ``i * spacing`` meters along its route,
            wrapped to the route length.
        label: Prefix for agent labels; agents are named ``label-i``.

    Raises:
        ValueError: For a negative count, jitter or spacing, or an invalid
            speed range.
        InvalidAgentConfig: If a jittered origin coincides with ``end``.
    """
    if count < 0:
        msg = f"count must be non-negative, got {count}"
        raise ValueError(msg)
    if jitter_deg < 0 or spacing < 0:
        msg = f"jitter_deg and spacing must be non-negative, got {jitter_deg}, {spacing}"
        raise ValueError(msg)
    low, high = _check_range("speed_range", speed_range)

    agents = []
    for i in range(count):
        origin = GeoPoint.from_deg(
            start.lat_deg + (rng.random() - 0.5) * jitter_deg,
            start.lon_deg + (rng.random() - 0.5) * jitter_deg,
        )
        speed = rng.uniform(low, high)
        offset = 0.0
        if spacing > 0:
            offset = (i * spacing) % float(origin.distance_to(end))
        agents.append(
            RoutedAgent.spawn_with_offset(
                origin,
                end,
                speed,
                offset,
                kind=AgentKind.AIRCRAFT,
                label=f"{label}-{i + 1}" if label else "",
            )
        )
    return agents


def build_default_fleet(
    rng: np.random.Generator,
    ships: int = 100,
    aircraft_per_route: int = 3,
) -> list[NavigatingAgent]:
    """The demo population: ships off the west coast and aircraft on
    :data:`DEFAULT_ROUTES`."""
    fleet: list[NavigatingAgent] = list(seed_ships(PACIFIC_COAST, ships, rng))
    for route in DEFAULT_ROUTES:
        fleet.extend(seed_route(route.start, route.end, aircraft_per_route, rng, label=route.name))
    logger.info(
        "Built fleet of %d ships and %d aircraft on %d routes",
        ships,
        aircraft_per_route * len(DEFAULT_ROUTES),
        len(DEFAULT_ROUTES),
    )
    return fleet
