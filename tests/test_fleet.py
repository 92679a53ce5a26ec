"""
Tests for fleet seeding.
"""

import unittest

import numpy as np

from geonav.fleet import (
    DEFAULT_ROUTES,
    FRESNO,
    LOS_ANGELES,
    PACIFIC_COAST,
    SEATTLE,
    build_default_fleet,
    seed_route,
    seed_ships,
)
from geonav.geo import distance
from geonav.vehicles import AgentKind, CruisingAgent, RoutedAgent


def describe(fleet):
    return [(a.kind, a.position, a.course.degrees, float(a.speed)) for a in fleet]


class TestSeedShips(unittest.TestCase):
    """Test ship seeding inside a polygon."""

    def test_ships_inside_polygon(self):
        """Seeded ships start inside the region at 1 to 5 m/s."""
        ships = seed_ships(PACIFIC_COAST, 50, np.random.default_rng(1))
        self.assertEqual(len(ships), 50)
        for ship in ships:
            self.assertIsInstance(ship, CruisingAgent)
            self.assertEqual(ship.kind, AgentKind.SHIP)
            self.assertTrue(PACIFIC_COAST.contains(ship.position))
            self.assertGreaterEqual(float(ship.speed), 1.0)
            self.assertLessEqual(float(ship.speed), 5.0)
            self.assertGreaterEqual(ship.course.degrees, 0.0)
            self.assertLess(ship.course.degrees, 360.0)

    def test_custom_speed_range(self):
        """Ship speeds follow a custom range."""
        ships = seed_ships(PACIFIC_COAST, 10, np.random.default_rng(1), speed_range=(7, 7))
        self.assertTrue(all(float(s.speed) == 7.0 for s in ships))

    def test_invalid_speed_range(self):
        """A reversed speed range is rejected."""
        with self.assertRaises(ValueError):
            seed_ships(PACIFIC_COAST, 1, np.random.default_rng(), speed_range=(5, 1))


class TestSeedRoute(unittest.TestCase):
    """Test routed aircraft seeding."""

    def test_jitter_and_speed(self):
        """Aircraft start within the jitter box at 150 to 250 m/s."""
        aircraft = seed_route(SEATTLE, LOS_ANGELES, 20, np.random.default_rng(3))
        self.assertEqual(len(aircraft), 20)
        for plane in aircraft:
            self.assertIsInstance(plane, RoutedAgent)
            self.assertEqual(plane.destination, LOS_ANGELES)
            self.assertLessEqual(abs(plane.origin.lat_deg - SEATTLE.lat_deg), 0.005 + 1e-9)
            self.assertLessEqual(abs(plane.origin.lon_deg - SEATTLE.lon_deg), 0.005 + 1e-9)
            self.assertGreaterEqual(float(plane.speed), 150.0)
            self.assertLessEqual(float(plane.speed), 250.0)

    def test_no_jitter(self):
        """Without jitter every aircraft starts on the route."""
        aircraft = seed_route(FRESNO, LOS_ANGELES, 2, np.random.default_rng(3), jitter_deg=0)
        for plane in aircraft:
            self.assertAlmostEqual(plane.origin.lat_deg, FRESNO.lat_deg, places=12)
            self.assertAlmostEqual(plane.origin.lon_deg, FRESNO.lon_deg, places=12)

    def test_spacing(self):
        """Aircraft are spaced evenly along the route."""
        aircraft = seed_route(
            FRESNO, LOS_ANGELES, 3, np.random.default_rng(3), spacing=20_000, label="FAT-LAX"
        )
        for i, plane in enumerate(aircraft):
            self.assertAlmostEqual(distance(plane.origin, plane.position), i * 20_000, places=3)
        self.assertEqual([p.label for p in aircraft], ["FAT-LAX-1", "FAT-LAX-2", "FAT-LAX-3"])

    def test_spacing_wraps_route_length(self):
        """Spacing longer than the route wraps around."""
        # Fresno to Los Angeles is about 300 km.
        aircraft = seed_route(FRESNO, LOS_ANGELES, 2, np.random.default_rng(3), spacing=1_000_000)
        plane = aircraft[1]
        route = distance(plane.origin, LOS_ANGELES)
        self.assertAlmostEqual(distance(plane.origin, plane.position), 1_000_000 % route, places=3)

    def test_negative_count(self):
        """A negative count is rejected."""
        with self.assertRaises(ValueError):
            seed_route(FRESNO, LOS_ANGELES, -1, np.random.default_rng())


class TestDefaultFleet(unittest.TestCase):
    """Test the demo population."""

    def test_composition(self):
        """The default fleet holds ships and aircraft on every route."""
        fleet = build_default_fleet(np.random.default_rng(0))
        ships = [a for a in fleet if a.kind is AgentKind.SHIP]
        aircraft = [a for a in fleet if a.kind is AgentKind.AIRCRAFT]
        self.assertEqual(len(ships), 100)
        self.assertEqual(len(aircraft), 3 * len(DEFAULT_ROUTES))

    def test_same_seed_same_fleet(self):
        """The same seed builds the same fleet."""
        a = build_default_fleet(np.random.default_rng(42), ships=20)
        b = build_default_fleet(np.random.default_rng(42), ships=20)
        self.assertEqual(describe(a), describe(b))

    def test_different_seed_different_fleet(self):
        """Different seeds build different fleets."""
        a = build_default_fleet(np.random.default_rng(1), ships=5, aircraft_per_route=0)
        b = build_default_fleet(np.random.default_rng(2), ships=5, aircraft_per_route=0)
        self.assertNotEqual(describe(a), describe(b))


if __name__ == "__main__":
    unittest.main()
