"""Agents that hold a constant course forever."""

from geonav.geo import GeoPoint
from geonav.unit import Angle, Meter, Velocity

from .agent import AgentKind, AgentState, NavigatingAgent


class CruisingAgent(NavigatingAgent):
    """Agent with no destination, e.g. a ship on patrol.

    The course is fixed at construction and the agent never terminates. On
    long runs it follows its great circle around the globe.

    Example:
        >>> ship = CruisingAgent(GeoPoint.from_deg(40.0, -125.0), course=270, speed=5)
        >>> ship.advance(1.0)
        >>> ship.current_state.name
        'CRUISING'
    """

    def __init__(
        self,
        position: GeoPoint,
        course: Angle | float,
        speed: Velocity | float,
        kind: AgentKind = AgentKind.SHIP,
        label: str = "",
    ):
        super().__init__(position, course, speed, kind, label)
        self.init_state_machine(AgentState.CRUISING, {AgentState.CRUISING: set()})

    def vehicle_update(self, step: Meter) -> None:
        pass
