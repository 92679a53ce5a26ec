"""Geographic points, coordinate units and bearings.

Coordinates extend the angle unit system: a :class:`Latitude` or
:class:`Longitude` is stored in radians and displayed in degrees. Latitude
and longitude are separate unit families, so mixing them up in arithmetic
raises ``TypeError``.

:class:`GeoPoint` is an immutable value. Navigation never moves a point in
place; it returns the next point, and agents replace their position with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, pi

from geonav.unit import Angle, Degree, Length, Meter, Radian

from . import great_circle


class Latitude(Degree):
    """Latitude in degrees, -90 (south pole) to +90 (north pole).

    Example:
        >>> print(Latitude(47.6062))
        47.6062 °N/S
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, normalized to [-180, 180) by the engine.

    Example:
        >>> print(Longitude(-122.3321))
        -122.332 °E/W
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


class Bearing(Degree):
    """Compass bearing: degrees clockwise from north, always in [0, 360).

    Construction and :meth:`from_si` both normalize, so every bearing the
    engine hands out is already in range.

    Example:
        >>> print(Bearing(-90))
        270 °
        >>> print(Bearing(720))
        0 °
    """

    SYMBOL = "°"

    def __new__(cls, value: float):
        return cls.from_si(float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> Bearing:
        return float.__new__(cls, great_circle.normalize_azimuth(float(si_value)))

    @property
    def degrees(self) -> float:
        """Bearing as a plain float in degrees, in [0, 360)."""
        deg = self.to(Degree)
        # Radians just below 2*pi can round up to 360.0 on conversion.
        return 0.0 if deg >= 360.0 else deg


def normalize_bearing(angle: Angle | float) -> Bearing:
    """Normalize an angle into a :class:`Bearing`.

    Args:
        angle: An angle unit, or a plain number interpreted as degrees.
    """
    if isinstance(angle, Radian):
        return Bearing.from_si(float(angle))
    return Bearing(angle)


@dataclass(frozen=True)
class GeoPoint:
    """A position on the sphere.

    Attributes:
        latitude (Latitude): North/south coordinate.
        longitude (Longitude): East/west coordinate.

    Example:
        >>> seattle = GeoPoint.from_deg(47.6062, -122.3321)
        >>> south = seattle.forward(Bearing(180), Meter(111_320))
        >>> round(south.lat_deg, 1)
        46.6
        >>> round(float(seattle.distance_to(south)))
        111320
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from decimal degrees.

        The longitude is normalized to [-180, 180); the latitude is stored as
        given. Use :meth:`is_valid` to check a point built from untrusted input.
        """
        lon_rad = great_circle.wrap_longitude(float(lon) * Longitude.SCALE_TO_SI)
        return cls(Latitude(lat), Longitude.from_si(lon_rad))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a point from radians, normalizing the longitude."""
        return cls(Latitude.from_si(lat), Longitude.from_si(great_circle.wrap_longitude(float(lon))))

    @property
    def lat_deg(self) -> float:
        return self.latitude.to(Latitude)

    @property
    def lon_deg(self) -> float:
        return self.longitude.to(Longitude)

    def as_tuple(self) -> tuple[float, float]:
        """``(lat, lng)`` in degrees, the pair renderers place markers at."""
        return self.lat_deg, self.lon_deg

    def is_valid(self) -> bool:
        """True if both coordinates are finite and the latitude is within ±90°."""
        lat, lon = float(self.latitude), float(self.longitude)
        return isfinite(lat) and isfinite(lon) and -pi / 2 <= lat <= pi / 2

    def forward(self, azimuth: Angle, distance: Length) -> GeoPoint:
        """Point reached by travelling ``distance`` along initial bearing ``azimuth``.

        Args:
            azimuth (Angle): Bearing from north, clockwise.
            distance (Length): Great-circle distance to travel.

        Returns:
            GeoPoint: The destination. A zero distance returns an equal point.

        Raises:
            TypeError: If ``azimuth`` is not an angle or ``distance`` not a length.
        """
        Radian._check_same_root(type(azimuth))
        Meter._check_same_root(type(distance))
        lat, lon = great_circle.forward(
            float(self.latitude),
            float(self.longitude),
            float(azimuth),
            float(distance),
        )
        return GeoPoint(Latitude.from_si(lat), Longitude.from_si(lon))

    def bearing_to(self, other: GeoPoint) -> Bearing:
        """Initial great-circle bearing toward ``other`` (0° if the points coincide)."""
        azimuth = great_circle.initial_bearing(
            float(self.latitude),
            float(self.longitude),
            float(other.latitude),
            float(other.longitude),
        )
        return Bearing.from_si(azimuth)

    def distance_to(self, other: GeoPoint) -> Meter:
        """Haversine distance to ``other``."""
        dist = great_circle.haversine(
            float(self.latitude),
            float(self.longitude),
            float(other.latitude),
            float(other.longitude),
        )
        return Meter(dist)

    def __str__(self) -> str:
        return f"({self.lat_deg:.4f}, {self.lon_deg:.4f})"
