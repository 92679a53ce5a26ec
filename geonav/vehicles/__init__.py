"""Navigating agents.

Exports:
    NavigatingAgent: Abstract base with the shared great-circle step
    CruisingAgent: Constant course, no destination (ships)
    RoutedAgent: Origin to destination with reset on arrival (aircraft)
    AgentSnapshot: Read-only per-tick view for observers
    AgentKind: Rendering hint
    AgentState: Navigation phases
"""

from .agent import AgentKind, AgentSnapshot, AgentState, NavigatingAgent
from .cruising import CruisingAgent
from .routed import RoutedAgent

__all__ = [
    "NavigatingAgent",
    "CruisingAgent",
    "RoutedAgent",
    "AgentSnapshot",
    "AgentKind",
    "AgentState",
]
