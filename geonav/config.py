"""Global constants and configuration for the navigation engine.

Constants:
    EARTH_RADIUS: Mean Earth radius used by every great-circle formula. The
        engine models Earth as a sphere of this radius.
    DEFAULT_TICK_PERIOD: Nominal simulation step handed to every agent.
    DEFAULT_MAX_ATTEMPTS: Rejection-sampling cap for polygon seeding.
    BASE_TYPE: Numeric types accepted by the raw math functions. Scalars and
        NumPy arrays are both valid, so the same code advances one agent or
        a whole vectorized fleet.

Example:
    >>> from geonav.config import ClockConfig
    >>> from geonav.unit import Second
    >>> config = ClockConfig(tick_period=Second(0.5), max_workers=4)
"""

from dataclasses import dataclass

from numpy import ndarray

from geonav.unit import Meter, Second, Time

BASE_TYPE = int | float | ndarray

EARTH_RADIUS = Meter(6_371_000)
DEFAULT_TICK_PERIOD = Second(1)
DEFAULT_MAX_ATTEMPTS = 10_000


@dataclass
class ClockConfig:
    """Configuration for :class:`~geonav.simulator.SimulationClock`.

    Attributes:
        tick_period (Time): Nominal step passed to every ``advance`` call.
            Also the wall-clock pause between ticks when ``realtime`` is set.
        max_workers (int): Worker threads used to advance agents. ``1`` keeps
            updates on the ticking thread.
        batch_size (int): Agents handed to one worker per submission.
        realtime (bool): Pace background ticks to wall time. When False the
            background loop ticks back to back.
    """

    tick_period: Time = DEFAULT_TICK_PERIOD
    max_workers: int = 1
    batch_size: int = 100
    realtime: bool = True

    def __post_init__(self):
        if not float(self.tick_period) > 0:
            msg = f"tick_period must be positive, got {self.tick_period}"
            raise ValueError(msg)
        if self.max_workers < 1:
            msg = f"max_workers must be at least 1, got {self.max_workers}"
            raise ValueError(msg)
        if self.batch_size < 1:
            msg = f"batch_size must be at least 1, got {self.batch_size}"
            raise ValueError(msg)
