"""Agents that shuttle along a fixed route.

A :class:`RoutedAgent` flies from its origin toward its destination on the
course computed at the origin. When the destination is closer than one
step, the agent is put back at the origin and the course is recomputed.
Whether it ever gets that close depends on the route (see Course).

Arrival policy:
    Arrival is declared when the remaining distance after a move is smaller
    than the step just taken (``speed * dt``). The threshold scales with the
    step, so a faster agent or a longer tick arrives "earlier". The agent
    then jumps straight back to its origin; there is no turnaround leg.

Course:
    The course is the initial great-circle bearing from the origin and is
    not recomputed while en route, so the agent follows a constant-bearing
    track. Away from the equator and the meridians that track leaves the
    great circle. On the default routes the destination is missed by
    kilometers, far more than one step, so the arrival check never fires.
    The agent keeps its course past the destination and spirals toward a
    pole, and ``legs_completed`` stays at 0. Routes along the equator or a
    meridian, where the constant-bearing track is the great circle, loop
    forever. So do routes whose miss distance stays under one step.

State machine:
    EN_ROUTE -> ARRIVED -> EN_ROUTE, where the second transition's effect
    performs the reset. ``ARRIVED`` never survives past the end of
    ``advance``.
"""

from __future__ import annotations

import logging

from geonav.errors import InvalidAgentConfig
from geonav.geo import GeoPoint
from geonav.state import Action
from geonav.unit import Length, Meter, Velocity

from .agent import (
    AgentKind,
    AgentState,
    NavigatingAgent,
    _require_non_negative,
    _require_point,
)

logger = logging.getLogger(__name__)


class RoutedAgent(NavigatingAgent):
    """Agent travelling repeatedly from ``origin`` to ``destination``.

    Attributes:
        origin (GeoPoint): Where the agent restarts after each arrival.
        destination (GeoPoint): Route end.

    Example:
        >>> agent = RoutedAgent(GeoPoint.from_deg(0, 0), GeoPoint.from_deg(0, 1), speed=200)
        >>> round(agent.course.degrees)
        90
    """

    origin: GeoPoint
    destination: GeoPoint
    _legs_completed: int

    def __init__(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        speed: Velocity | float,
        offset: Length | float = 0.0,
        kind: AgentKind = AgentKind.AIRCRAFT,
        label: str = "",
    ):
        """Create an agent at ``origin``, or ``offset`` meters along its route.

        Args:
            origin: Route start and reset point.
            destination: Route end.
            speed: Speed; plain numbers are meters per second.
            offset: Distance along the initial course at which to start.
            kind: Rendering hint.
            label: Display name.

        Raises:
            InvalidAgentConfig: For invalid points or speed, a zero-length
                route, or an offset that is negative, non-finite or not
                shorter than the route.
        """
        _require_point("origin", origin)
        _require_point("destination", destination)
        route_length = float(origin.distance_to(destination))
        if route_length == 0.0:
            msg = f"route from {origin} to {destination} has zero length"
            raise InvalidAgentConfig(msg)

        offset_m = _require_non_negative("offset", offset, Meter)
        if offset_m >= route_length:
            msg = f"offset {offset_m:.1f} m is not shorter than the route ({route_length:.1f} m)"
            raise InvalidAgentConfig(msg)

        course = origin.bearing_to(destination)
        position = origin.forward(course, Meter(offset_m)) if offset_m > 0 else origin
        super().__init__(position, course, speed, kind, label)

        self.origin = origin
        self.destination = destination
        self._legs_completed = 0
        self.init_state_machine(
            AgentState.EN_ROUTE,
            {
                AgentState.EN_ROUTE: {Action(AgentState.ARRIVED)},
                AgentState.ARRIVED: {Action(AgentState.EN_ROUTE, self._reset_to_origin)},
            },
        )

    @classmethod
    def spawn_with_offset(
        cls,
        origin: GeoPoint,
        destination: GeoPoint,
        speed: Velocity | float,
        offset: Length | float,
        **kwargs,
    ) -> RoutedAgent:
        """Create an agent already ``offset`` meters along its route.

        Used to space several agents along one corridor so they do not start
        on top of each other.
        """
        return cls(origin, destination, speed, offset=offset, **kwargs)

    @property
    def legs_completed(self) -> int:
        return self._legs_completed

    @property
    def remaining(self) -> Meter:
        """Great-circle distance left to the destination."""
        return self._position.distance_to(self.destination)

    def vehicle_update(self, step: Meter) -> None:
        if float(self.remaining) < float(step):
            self.transition_to(AgentState.ARRIVED)
            self.transition_to(AgentState.EN_ROUTE)

    def _reset_to_origin(self) -> None:
        self._position = self.origin
        self._course = self.origin.bearing_to(self.destination)
        self._legs_completed += 1
        logger.debug("%s reached destination, restarting leg %d", self.label, self._legs_completed + 1)
