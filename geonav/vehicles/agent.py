"""Navigating agent base class.

Every simulated ship and aircraft is a :class:`NavigatingAgent`: a position,
a course and a constant speed, advanced along a great circle once per
simulation tick. Agent kinds differ only in what happens *after* the move
(nothing for cruising agents, arrival handling for routed ones) and in the
rendering hints they carry.

Execution model:
    ``advance(dt)`` is the only mutating entry point. It
        1. moves the agent ``speed * dt`` meters along its course, then
        2. calls :meth:`vehicle_update` with the step length so the concrete
           kind can apply its arrival policy.
    Each call is a complete transition: the agent is never observable half
    way through a step.

Validation:
    Constructors check coordinates and speed and raise
    :class:`~geonav.errors.InvalidAgentConfig`. After construction the state is
    trusted and ``advance`` does no further checking beyond ``dt``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from itertools import count
from math import isfinite

from geonav.errors import InvalidAgentConfig
from geonav.geo import Bearing, GeoPoint, heading_triangle, normalize_bearing
from geonav.state import StateGraph, StateMachine
from geonav.unit import Angle, Meter, MeterPerSecond, Radian, Time, Unit, Velocity

_agent_ids = count(1)


class AgentKind(Enum):
    """Rendering hint: what the agent looks like on a map."""

    SHIP = "ship"
    AIRCRAFT = "aircraft"


class AgentState(IntEnum):
    """Navigation phases.

    CRUISING: Constant course with no destination.
    EN_ROUTE: Travelling from origin toward destination.
    ARRIVED: Transient; destination reached within one step, reset pending.
    """

    CRUISING = auto()
    EN_ROUTE = auto()
    ARRIVED = auto()


@dataclass(frozen=True)
class AgentSnapshot:
    """Read-only view of an agent after a tick.

    Attributes:
        id (int): Agent identifier.
        kind (AgentKind): Rendering hint.
        label (str): Free-form display name.
        position (GeoPoint): Current position.
        course (float): Course in degrees, [0, 360).
        speed (float): Speed in meters per second.
        state (AgentState): Navigation phase.
        legs_completed (int): Resets performed so far (routed agents).
    """

    id: int
    kind: AgentKind
    label: str
    position: GeoPoint
    course: float
    speed: float
    state: AgentState
    legs_completed: int = 0

    def describe(self) -> str:
        """Information callout text, as shown when an agent is selected."""
        lat, lng = self.position.as_tuple()
        title = "Aircraft Information" if self.kind is AgentKind.AIRCRAFT else "Ship Information"
        return (
            f"{title}\n"
            f"Speed: {self.speed:.2f} m/s\n"
            f"Course: {self.course:.2f}°\n"
            f"Position: ({lat:.4f}, {lng:.4f})"
        )


def _require_point(name: str, point: GeoPoint) -> GeoPoint:
    if not isinstance(point, GeoPoint):
        msg = f"{name} must be a GeoPoint, got {type(point).__name__}"
        raise InvalidAgentConfig(msg)
    if not point.is_valid():
        msg = f"{name} has non-finite or out-of-range coordinates: {point!r}"
        raise InvalidAgentConfig(msg)
    return point


def _require_non_negative(name: str, value: Unit | float, unit: type[Unit]) -> float:
    if isinstance(value, Unit):
        try:
            unit._check_same_root(type(value))
        except TypeError as e:
            raise InvalidAgentConfig(f"{name}: {e}") from e
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidAgentConfig(f"{name} must be a number, got {value!r}") from e
    if not isfinite(number) or number < 0:
        msg = f"{name} must be finite and non-negative, got {value!r}"
        raise InvalidAgentConfig(msg)
    return number


def _require_course(course: Angle | float) -> Bearing:
    if isinstance(course, Unit) and not isinstance(course, Radian):
        msg = f"course must be an angle, got {course!r}"
        raise InvalidAgentConfig(msg)
    try:
        bearing = normalize_bearing(course)
    except (TypeError, ValueError) as e:
        raise InvalidAgentConfig(f"course must be an angle, got {course!r}") from e
    if not isfinite(float(bearing)):
        msg = f"course must be finite, got {course!r}"
        raise InvalidAgentConfig(msg)
    return bearing


class NavigatingAgent(ABC):
    """Abstract base for agents moving on great circles.

    Attributes:
        id (int): Unique, increasing identifier.
        kind (AgentKind): Rendering hint.
        label (str): Display name.
        origin (GeoPoint): Starting position.
        destination (GeoPoint | None): Route end, None for agents that cruise
            indefinitely.
    """

    id: int
    origin: GeoPoint
    destination: GeoPoint | None = None
    kind: AgentKind
    label: str
    _position: GeoPoint
    _course: Bearing
    _speed: MeterPerSecond
    _state_machine: StateMachine | None = None

    def __init__(
        self,
        position: GeoPoint,
        course: Angle | float,
        speed: Velocity | float,
        kind: AgentKind = AgentKind.SHIP,
        label: str = "",
    ):
        """Validate and store the initial kinematic state.

        Args:
            position: Starting position.
            course: Initial course; plain numbers are degrees.
            speed: Speed; plain numbers are meters per second.
            kind: Rendering hint.
            label: Display name. Defaults to ``"<kind>-<id>"``.

        Raises:
            InvalidAgentConfig: For invalid coordinates, course or speed.
        """
        self.id = next(_agent_ids)
        self._position = _require_point("position", position)
        self.origin = self._position
        self._course = _require_course(course)
        self._speed = MeterPerSecond.from_si(_require_non_negative("speed", speed, MeterPerSecond))
        self.kind = kind
        self.label = label or f"{kind.value}-{self.id}"

    def init_state_machine(self, initial_state: AgentState, nodes_graph: StateGraph) -> None:
        self._state_machine = StateMachine(initial_state, nodes_graph)

    def transition_to(self, next_state: AgentState, *args, **kwargs):
        """Request a validated state transition, running its effect."""
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.request_transition(next_state, *args, **kwargs)

    @property
    def current_state(self) -> AgentState:
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.current

    def state_list(self) -> list[AgentState]:
        if not self._state_machine:
            msg = "Subclasses must initialize the state_machine"
            raise NotImplementedError(msg)
        return self._state_machine.get_state_list()

    @property
    def position(self) -> GeoPoint:
        return self._position

    @property
    def course(self) -> Bearing:
        return self._course

    @property
    def speed(self) -> MeterPerSecond:
        return self._speed

    @property
    def legs_completed(self) -> int:
        return 0

    def advance(self, dt: Time | float) -> None:
        """Move one simulation step of ``dt`` seconds, then apply arrival policy.

        Raises:
            ValueError: If ``dt`` is negative or not finite.
        """
        seconds = float(dt)
        if not isfinite(seconds) or seconds < 0:
            msg = f"dt must be finite and non-negative, got {dt!r}"
            raise ValueError(msg)

        step = Meter(float(self._speed) * seconds)
        self._position = self._position.forward(self._course, step)
        self.vehicle_update(step)

    @abstractmethod
    def vehicle_update(self, step: Meter) -> None:
        """Kind-specific handling after the agent moved ``step`` meters."""

    def snapshot(self) -> AgentSnapshot:
        return AgentSnapshot(
            id=self.id,
            kind=self.kind,
            label=self.label,
            position=self._position,
            course=self._course.degrees,
            speed=float(self._speed),
            state=self.current_state,
            legs_completed=self.legs_completed,
        )

    def footprint(self) -> tuple[GeoPoint, GeoPoint, GeoPoint]:
        """Heading triangle around the current position for renderers."""
        return heading_triangle(self._position, self._course)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, position={self._position}, "
            f"course={self._course.degrees:.2f}, speed={float(self._speed):.2f})"
        )
