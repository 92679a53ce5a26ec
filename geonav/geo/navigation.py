"""Degree-based navigation helpers.

Thin wrappers over :class:`~geonav.geo.GeoPoint` for callers that work in
plain numbers: bearings in degrees, distances in meters. They are the
functions a renderer or a measuring tool calls; agents use the unit-typed
``GeoPoint`` methods directly.
"""

from geonav.unit import Meter

from .geo_point import GeoPoint, normalize_bearing


def destination(origin: GeoPoint, bearing: float, distance: float) -> GeoPoint:
    """Point ``distance`` meters from ``origin`` along initial ``bearing`` degrees."""
    return origin.forward(normalize_bearing(bearing), Meter(distance))


def initial_bearing(start: GeoPoint, end: GeoPoint) -> float:
    """Initial great-circle bearing in degrees, in [0, 360).

    Coincident points return 0.
    """
    return start.bearing_to(end).degrees


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in meters; 0 for identical points, symmetric."""
    return float(a.distance_to(b))
