"""Heading footprints for rendering agents.

Renderers draw an aircraft as a small triangle pointing along its course.
The vertices are placed on the sphere with the same forward formula the
agents move with, so the shape stays correct at any latitude.
"""

from math import atan2, degrees, hypot

from geonav.unit import Degree, Meter

from .geo_point import Bearing, GeoPoint, normalize_bearing

# Tip ahead of the centroid; the base sits half that distance behind it.
TIP_DISTANCE = Meter(666.67)
HALF_BASE_WIDTH = Meter(300)


def _offset(center: GeoPoint, course: Bearing, ahead: float, right: float) -> GeoPoint:
    """Point ``ahead`` meters along ``course`` and ``right`` meters to starboard."""
    relative = degrees(atan2(right, ahead))
    azimuth = normalize_bearing(course.degrees + relative)
    return center.forward(azimuth, Meter(hypot(ahead, right)))


def heading_triangle(
    center: GeoPoint,
    course: Bearing | Degree,
    tip_distance: Meter = TIP_DISTANCE,
    half_base_width: Meter = HALF_BASE_WIDTH,
) -> tuple[GeoPoint, GeoPoint, GeoPoint]:
    """Vertices ``(tip, left, right)`` of a triangle centred on ``center``.

    ``center`` is the triangle's centroid. The tip lies ``tip_distance``
    ahead along ``course``; the base lies ``tip_distance / 2`` behind with
    half-width ``half_base_width``.
    """
    course = normalize_bearing(course)
    d = float(tip_distance)
    e = d / 2.0
    f = float(half_base_width)
    return (
        _offset(center, course, d, 0.0),
        _offset(center, course, -e, -f),
        _offset(center, course, -e, f),
    )
