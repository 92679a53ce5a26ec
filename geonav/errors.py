"""Exception types raised by the navigation engine.

Both concrete errors derive from ``ValueError`` as well, so callers that
already guard configuration parsing with ``except ValueError`` keep working.
"""


class GeoNavError(Exception):
    """Base class for engine errors."""


class InvalidAgentConfig(GeoNavError, ValueError):
    """An agent was constructed with unusable kinematic state.

    Raised for non-finite or out-of-range coordinates, negative or
    non-finite speeds and invalid along-route offsets. Only construction
    raises it; ``advance`` assumes a validated agent.
    """


class DegeneratePolygon(GeoNavError, ValueError):
    """A polygon cannot be sampled or is not a valid ring.

    Raised for rings with fewer than three distinct vertices, rings with
    zero area, and when rejection sampling exhausts its attempt cap.
    """
