"""Finite state machine with validated transitions.

Agents describe their navigation phases as an ``Enum`` and a graph of
allowed transitions. Each transition is an :class:`Action` that may carry an
effect, run when the transition is taken; a routed agent uses the effect of
its ``ARRIVED -> EN_ROUTE`` transition to jump back to its origin.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

State = TypeVar("State", bound=Enum)
"""Type variable for state enumerations."""

ActionFn = Callable[..., Any]
"""Effect run when a transition is taken."""

StateGraph = dict[Enum, set["Action"]]
"""Mapping from each state to the actions allowed out of it."""


@dataclass(frozen=True)
class Action:
    """A transition to ``state`` with an optional effect.

    Attributes:
        state: Target state.
        effect: Callable run when the transition happens.
    """

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        if self.effect:
            return self.effect(*args, **kwargs)
        return None


class StateMachine:
    """Tracks the current state and enforces the transition graph.

    Attributes:
        _state: Current state.
        _allowed: Allowed transitions per state.
    """

    _allowed: StateGraph
    _state: Enum

    def __init__(self, initial_state: Enum, nodes_graph: StateGraph):
        self._state = initial_state
        self._allowed = nodes_graph

    @property
    def current(self) -> Enum:
        """The current state."""
        return self._state

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the transition's effect.

        The state changes before the effect runs, so an effect observes the
        machine already in its target state.

        Returns:
            Whatever the effect returns, or None.

        Raises:
            ValueError: If the graph has no transition from the current state
                to ``next_state``.
        """
        action = self._validate_transition(self._state, next_state)
        self._state = action.state
        return action(*args, **kwargs)

    def can_transition(self, next_state: Enum) -> bool:
        """True if the graph allows moving from the current state to ``next_state``."""
        return any(action.state == next_state for action in self._allowed.get(self._state, set()))

    def get_state_list(self) -> list[Enum]:
        """All states that appear in the graph, as sources or targets."""
        states = set(self._allowed)
        for actions in self._allowed.values():
            states.update(action.state for action in actions)
        return sorted(states, key=lambda s: s.value)

    def _validate_transition(self, frm: Enum, to: Enum) -> Action:
        for action in self._allowed.get(frm, set()):
            if action.state == to:
                return action

        msg = f"Illegal transition {frm.name} -> {to.name}"
        raise ValueError(msg)
