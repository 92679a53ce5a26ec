"""Geographic primitives for the navigation engine.

Earth is modelled as a sphere of radius ``geonav.config.EARTH_RADIUS``.
Distances use the haversine formula, destinations the spherical law of
cosines, so results are exact for the sphere and free of planar
approximations everywhere except the polygon membership test.

Components:
    GeoPoint: Immutable latitude/longitude value with navigation methods
    Latitude, Longitude: Coordinate units (radians inside, degrees shown)
    Bearing: Compass bearing normalized to [0, 360)
    destination, initial_bearing, distance: Degree-based helpers
    Polygon, BoundingBox: Sampling regions
    contains, bounding_box, sample_uniform, sample_points: Region sampling
    heading_triangle: Footprint geometry for renderers

Typical Usage:
    >>> from geonav.geo import GeoPoint, destination, distance, initial_bearing
    >>> seattle = GeoPoint.from_deg(47.6062, -122.3321)
    >>> honolulu = GeoPoint.from_deg(21.3069, -157.8583)
    >>> course = initial_bearing(seattle, honolulu)
    >>> leg = distance(seattle, honolulu)
    >>> arrival = destination(seattle, course, leg)
    >>> round(distance(arrival, honolulu)) < 1
    True
"""

from .geo_point import Bearing, GeoPoint, Latitude, Longitude, normalize_bearing
from .navigation import destination, distance, initial_bearing
from .polygon import (
    BoundingBox,
    Polygon,
    bounding_box,
    contains,
    sample_points,
    sample_uniform,
)
from .shapes import heading_triangle

__all__ = [
    "GeoPoint",
    "Latitude",
    "Longitude",
    "Bearing",
    "normalize_bearing",
    "destination",
    "initial_bearing",
    "distance",
    "Polygon",
    "BoundingBox",
    "contains",
    "bounding_box",
    "sample_uniform",
    "sample_points",
    "heading_triangle",
]
