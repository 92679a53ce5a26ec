"""State management for navigating agents.

Exports:
    StateMachine: Finite state machine with transition validation
    State: Type variable for state enumerations
    Action: State transition with an optional effect
    StateGraph: Type alias for transition graphs
    ActionFn: Type alias for effect callables
"""

from .state_machine import Action, ActionFn, State, StateGraph, StateMachine

__all__ = ["StateMachine", "State", "Action", "StateGraph", "ActionFn"]
