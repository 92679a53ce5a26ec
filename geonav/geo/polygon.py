"""Polygon regions and uniform point sampling.

Regions used to seed agent populations are simple polygons given as an
ordered ring of :class:`~geonav.geo.GeoPoint` vertices. Membership uses the
even-odd (ray casting) rule with longitude as *x* and latitude as *y*.

Scope:
    The test is planar in degrees. It is accurate for regional polygons that
    stay away from the poles and do not straddle the antimeridian; larger
    regions should be split before sampling.

Boundary convention:
    A point lying exactly on an edge is classified by the half-open crossing
    rule: edges on the minimum-latitude and minimum-longitude side of the
    region count as inside, edges on the maximum side as outside. For an
    axis-aligned box ``[0, 1] x [0, 1]`` the corner ``(0, 0)`` is inside and
    ``(1, 1)`` is outside. The rule does not depend on where the ring starts.

Sampling:
    :func:`sample_uniform` draws candidates uniformly in the bounding box and
    keeps the first one inside the polygon. Accepted points are uniform over
    the polygon in degree space. The loop is capped by ``max_attempts``.

Example:
    >>> import numpy as np
    >>> square = Polygon.from_deg([(0, 0), (0, 1), (1, 1), (1, 0)])
    >>> square.contains(GeoPoint.from_deg(0.5, 0.5))
    True
    >>> point = sample_uniform(square, np.random.default_rng(7))
    >>> square.contains(point)
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging
from typing import NamedTuple

import numpy as np

from geonav.config import DEFAULT_MAX_ATTEMPTS
from geonav.errors import DegeneratePolygon

from .geo_point import GeoPoint

logger = logging.getLogger(__name__)


class BoundingBox(NamedTuple):
    """Axis-aligned box in degrees."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_span(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lng_span(self) -> float:
        return self.max_lng - self.min_lng


@dataclass(frozen=True)
class Polygon:
    """A simple closed ring of at least three vertices.

    The closing vertex is implicit. If the last vertex repeats the first it
    is dropped on construction.

    Attributes:
        vertices (tuple[GeoPoint, ...]): Ring in order, first vertex not repeated.

    Raises:
        DegeneratePolygon: If fewer than three distinct vertices remain.
    """

    vertices: tuple[GeoPoint, ...]

    def __post_init__(self):
        vertices = tuple(self.vertices)
        if len(vertices) > 1 and vertices[0] == vertices[-1]:
            vertices = vertices[:-1]
        if len(set(vertices)) < 3:
            msg = f"polygon needs at least 3 distinct vertices, got {len(set(vertices))}"
            raise DegeneratePolygon(msg)
        object.__setattr__(self, "vertices", vertices)

        # Degree arrays used by the membership test, x = lng and y = lat.
        object.__setattr__(self, "_xs", np.array([v.lon_deg for v in vertices]))
        object.__setattr__(self, "_ys", np.array([v.lat_deg for v in vertices]))

    @classmethod
    def from_deg(cls, coords: Iterable[Sequence[float]]) -> Polygon:
        """Build a polygon from ``(lat, lng)`` pairs in degrees."""
        return cls(tuple(GeoPoint.from_deg(lat, lng) for lat, lng in coords))

    def __len__(self) -> int:
        return len(self.vertices)

    def contains(self, point: GeoPoint) -> bool:
        """Even-odd membership test. See the module docstring for edge cases."""
        x, y = point.lon_deg, point.lat_deg
        xs, ys = self._xs, self._ys
        inside = False
        j = len(xs) - 1
        for i in range(len(xs)):
            xi, yi = xs[i], ys[i]
            xj, yj = xs[j], ys[j]
            # (yi > y) != (yj > y) excludes horizontal edges before the division.
            if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
                inside = not inside
            j = i
        return inside

    def bounding_box(self) -> BoundingBox:
        """Tight box over all vertices."""
        return BoundingBox(
            float(self._ys.min()),
            float(self._ys.max()),
            float(self._xs.min()),
            float(self._xs.max()),
        )

    def area_deg2(self) -> float:
        """Planar (shoelace) area in square degrees."""
        xs, ys = self._xs, self._ys
        return float(abs(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))) / 2.0)


def contains(point: GeoPoint, polygon: Polygon) -> bool:
    """Return True if ``point`` lies inside ``polygon`` (even-odd rule)."""
    return polygon.contains(point)


def bounding_box(polygon: Polygon) -> BoundingBox:
    """``(min_lat, max_lat, min_lng, max_lng)`` over the polygon's vertices."""
    return polygon.bounding_box()


def sample_uniform(
    polygon: Polygon,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeoPoint:
    """Draw one point uniformly from inside ``polygon`` by rejection.

    Args:
        polygon: Region to sample.
        rng: Source of randomness. A seeded generator makes the result
            reproducible.
        max_attempts: Candidates to try before giving up.

    Returns:
        GeoPoint: A point for which ``polygon.contains(point)`` is True.

    Raises:
        DegeneratePolygon: If the polygon has zero area or no candidate was
            accepted within ``max_attempts`` draws.
    """
    if polygon.area_deg2() == 0.0:
        msg = "polygon has zero area"
        raise DegeneratePolygon(msg)

    box = polygon.bounding_box()
    for attempt in range(1, max_attempts + 1):
        lat = rng.random() * box.lat_span + box.min_lat
        lng = rng.random() * box.lng_span + box.min_lng
        candidate = GeoPoint.from_deg(lat, lng)
        if polygon.contains(candidate):
            if attempt > 1:
                logger.debug("sample accepted after %d attempts", attempt)
            return candidate

    msg = f"no point accepted in {max_attempts} attempts; polygon area is too small to sample"
    raise DegeneratePolygon(msg)


def sample_points(
    polygon: Polygon,
    count: int,
    rng: np.random.Generator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> list[GeoPoint]:
    """Draw ``count`` independent points from inside ``polygon``.

    Raises:
        ValueError: If ``count`` is negative.
        DegeneratePolygon: As :func:`sample_uniform`.
    """
    if count < 0:
        msg = f"count must be non-negative, got {count}"
        raise ValueError(msg)
    return [sample_uniform(polygon, rng, max_attempts) for _ in range(count)]
