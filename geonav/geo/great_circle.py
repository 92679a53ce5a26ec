"""Great-circle navigation on a spherical Earth.

Raw formulas shared by every agent kind. All angles are radians (the SI
storage of :mod:`geonav.unit`), distances are meters. Each function accepts
Python floats or NumPy arrays of matching shape, so one call can advance a
single agent or a whole fleet; scalar inputs produce ``float`` results.

Functions:
    forward: Destination reached from a start point along an initial
        bearing (spherical law of cosines).
    initial_bearing: Initial great-circle bearing between two points.
    haversine: Great-circle distance between two points.
    wrap_longitude: Normalize longitudes into ``[-pi, pi)``.
    normalize_azimuth: Normalize bearings into ``[0, 2*pi)``.

The functions are total over finite inputs: arguments to ``arcsin`` and the
haversine term are clipped to their domains so rounding near the poles or
for antipodal points can not produce NaN.

Example:
    >>> from math import radians, degrees
    >>> lat, lon = forward(radians(47.6062), radians(-122.3321), radians(180), 111_320)
    >>> round(degrees(lat), 1), round(degrees(lon), 4)
    (46.6, -122.3321)
"""

import numpy as np

from geonav.config import BASE_TYPE, EARTH_RADIUS

TWO_PI = 2.0 * np.pi


def _scalar(value):
    if np.ndim(value) == 0:
        return float(value)
    return value


def wrap_longitude(lon: BASE_TYPE) -> BASE_TYPE:
    """Normalize longitudes to ``[-pi, pi)``.

    Values already inside the range are returned untouched so that repeated
    normalization never accumulates rounding error.
    """
    lon = np.asarray(lon, dtype=float)
    wrapped = np.mod(lon + np.pi, TWO_PI) - np.pi
    # np.mod can round up to exactly 2*pi for tiny negative arguments.
    wrapped = np.where(wrapped >= np.pi, wrapped - TWO_PI, wrapped)
    in_range = (lon >= -np.pi) & (lon < np.pi)
    return _scalar(np.where(in_range, lon, wrapped))


def normalize_azimuth(azimuth: BASE_TYPE) -> BASE_TYPE:
    """Map any angle in radians into ``[0, 2*pi)``."""
    azimuth = np.mod(np.asarray(azimuth, dtype=float), TWO_PI)
    # Same rounding hazard as in wrap_longitude.
    return _scalar(np.where(azimuth >= TWO_PI, 0.0, azimuth))


def forward(
    lat: BASE_TYPE,
    lon: BASE_TYPE,
    azimuth: BASE_TYPE,
    distance: BASE_TYPE,
    radius: float = EARTH_RADIUS,
) -> tuple[BASE_TYPE, BASE_TYPE]:
    """Point reached by travelling ``distance`` along initial bearing ``azimuth``.

    Args:
        lat: Start latitude in radians.
        lon: Start longitude in radians.
        azimuth: Initial bearing in radians, clockwise from north.
        distance: Distance along the great circle in meters.
        radius: Sphere radius in meters.

    Returns:
        tuple: ``(lat2, lon2)`` in radians, ``lon2`` in ``[-pi, pi)``. A zero
        distance returns the start point itself.
    """
    lat = np.asarray(lat, dtype=float)
    lon = np.asarray(lon, dtype=float)
    azimuth = np.asarray(azimuth, dtype=float)
    delta = np.asarray(distance, dtype=float) / float(radius)

    sin_lat, cos_lat = np.sin(lat), np.cos(lat)
    sin_delta, cos_delta = np.sin(delta), np.cos(delta)

    sin_lat2 = sin_lat * cos_delta + cos_lat * sin_delta * np.cos(azimuth)
    lat2 = np.arcsin(np.clip(sin_lat2, -1.0, 1.0))
    dlon = np.arctan2(
        np.sin(azimuth) * sin_delta * cos_lat,
        cos_delta - sin_lat * np.sin(lat2),
    )

    stationary = delta == 0
    lat2 = np.where(stationary, lat, lat2)
    lon2 = np.where(stationary, lon, lon + dlon)
    return _scalar(lat2), wrap_longitude(lon2)


def initial_bearing(
    lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE
) -> BASE_TYPE:
    """Initial great-circle bearing from point 1 toward point 2.

    Returns:
        Bearing in radians within ``[0, 2*pi)``. Coincident points have no
        defined bearing; they yield exactly ``0`` (due north).
    """
    lat1 = np.asarray(lat1, dtype=float)
    lon1 = np.asarray(lon1, dtype=float)
    lat2 = np.asarray(lat2, dtype=float)
    lon2 = np.asarray(lon2, dtype=float)

    dlon = lon2 - lon1
    cos_lat2 = np.cos(lat2)
    y = np.sin(dlon) * cos_lat2
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * cos_lat2 * np.cos(dlon)

    bearing = normalize_azimuth(np.arctan2(y, x))
    same = (lat1 == lat2) & (lon1 == lon2)
    return _scalar(np.where(same, 0.0, bearing))


def haversine(
    lat1: BASE_TYPE,
    lon1: BASE_TYPE,
    lat2: BASE_TYPE,
    lon2: BASE_TYPE,
    radius: float = EARTH_RADIUS,
) -> BASE_TYPE:
    """Great-circle distance in meters (haversine formula).

    Exactly ``0`` for identical points and symmetric in its two points:
    the half-angle differences enter only through their absolute value and
    the cosine product is commutative.
    """
    lat1 = np.asarray(lat1, dtype=float)
    lon1 = np.asarray(lon1, dtype=float)
    lat2 = np.asarray(lat2, dtype=float)
    lon2 = np.asarray(lon2, dtype=float)

    half_dlat = np.abs(lat2 - lat1) / 2.0
    half_dlon = np.abs(lon2 - lon1) / 2.0
    a = np.sin(half_dlat) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(half_dlon) ** 2
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return _scalar(float(radius) * c)
