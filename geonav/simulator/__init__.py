"""Simulation clock driving navigating agents."""

from .clock import EventHandler, SimulationClock

__all__ = ["SimulationClock", "EventHandler"]
