"""Tick-driven simulation clock.

The clock owns a collection of :class:`~geonav.vehicles.NavigatingAgent` and
advances every one of them by the same nominal period on each tick. Ticks
can be driven manually (``tick``/``run``) or by a background thread
(``start``/``stop``); both paths share one lock, so at most one tick is in
progress at any time and a manual tick never interleaves with a timer tick.

Threading Architecture:
    - Ticking thread: the caller of ``tick`` or the background loop started
      by ``start``. Owns the tick lock for the whole tick.
    - Worker threads: with ``max_workers > 1`` agents are advanced in
      batches on a ``ThreadPoolExecutor``. The tick waits on every batch
      before publishing, so workers never outlive their tick.

Observers:
    After each tick a tuple of :class:`~geonav.vehicles.AgentSnapshot` is
    published atomically; ``snapshots()`` returns the last one. Event
    handlers registered with ``register_event_handler`` are called
    synchronously on the ticking thread with ``(event_name, data)``.

Events:
    tick: ``{"tick": int, "elapsed": float, "snapshots": tuple}``
    clock_started: ``{"config": ClockConfig}``
    clock_stopped: ``{"tick": int, "elapsed": float}``
    clock_error: ``{"tick": int, "error": Exception}``
"""

from collections.abc import Callable, Iterable
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
import logging
import threading
from typing import Any

from geonav.config import ClockConfig
from geonav.unit import Time
from geonav.vehicles import AgentSnapshot, NavigatingAgent

logger = logging.getLogger(__name__)

EventHandler = Callable[[str, Any], None]


class SimulationClock:
    """Advances a set of agents in fixed steps.

    Attributes:
        config (ClockConfig): Tick period, worker count and pacing.
        last_error (Exception | None): Error that stopped the background
            loop, if any.

    Example:
        >>> from geonav.geo import GeoPoint
        >>> from geonav.vehicles import RoutedAgent
        >>> clock = SimulationClock([
        ...     RoutedAgent(GeoPoint.from_deg(0, 0), GeoPoint.from_deg(0, 1), speed=200)
        ... ])
        >>> clock.run(10)
        >>> clock.tick_count, clock.elapsed
        (10, 10.0)
    """

    config: ClockConfig
    last_error: Exception | None

    def __init__(
        self,
        agents: Iterable[NavigatingAgent] | None = None,
        config: ClockConfig | None = None,
    ):
        self.config = config or ClockConfig()
        self.last_error = None

        self._agents: list[NavigatingAgent] = []
        self._lock = threading.RLock()
        self._snapshots: tuple[AgentSnapshot, ...] = ()
        self._elapsed = 0.0
        self._tick_count = 0

        self._executor: ThreadPoolExecutor | None = None
        self._thread: threading.Thread | None = None
        self._shutdown_event = threading.Event()
        self._tick_owner: threading.Thread | None = None
        self.event_handlers: dict[str, list[EventHandler]] = {}

        if agents is not None:
            self.add_agents(agents)

    # Agent management
    def add_agent(self, agent: NavigatingAgent) -> None:
        """Add one agent. Takes effect from the next tick."""
        self.add_agents([agent])

    def add_agents(self, agents: Iterable[NavigatingAgent]) -> None:
        with self._lock:
            for agent in agents:
                if not isinstance(agent, NavigatingAgent):
                    msg = f"expected a NavigatingAgent, got {type(agent).__name__}"
                    raise TypeError(msg)
                self._agents.append(agent)
            self._publish()

    @property
    def agents(self) -> tuple[NavigatingAgent, ...]:
        with self._lock:
            return tuple(self._agents)

    @property
    def elapsed(self) -> float:
        """Simulated seconds since construction."""
        return self._elapsed

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def snapshots(self) -> tuple[AgentSnapshot, ...]:
        """Snapshots published by the last tick, in agent insertion order."""
        return self._snapshots

    # Ticking
    def tick(self) -> tuple[AgentSnapshot, ...]:
        """Advance every agent exactly once by ``config.tick_period``.

        Returns:
            The snapshots published by this tick.

        Raises:
            Exception: Whatever an agent update raised. The tick is not
                published in that case.
        """
        dt = self.config.tick_period
        with self._lock:
            owner, self._tick_owner = self._tick_owner, threading.current_thread()
            try:
                self._execute_parallel(self._advance_batch, dt)
                self._elapsed += float(dt)
                self._tick_count += 1
                snapshots = self._publish()
                self.emit_event(
                    "tick",
                    {"tick": self._tick_count, "elapsed": self._elapsed, "snapshots": snapshots},
                )
            finally:
                self._tick_owner = owner
        return snapshots

    def run(self, ticks: int) -> None:
        """Run ``ticks`` ticks synchronously on the calling thread."""
        if ticks < 0:
            msg = f"ticks must be non-negative, got {ticks}"
            raise ValueError(msg)
        for _ in range(ticks):
            self.tick()

    def start(self, max_ticks: int | None = None) -> None:
        """Start ticking on a background thread.

        With ``config.realtime`` the loop waits one ``tick_period`` of wall
        time between ticks; the simulated step stays the nominal period
        regardless of how long a tick took. Calling ``start`` while the loop
        is running does nothing.

        Args:
            max_ticks: Stop on its own after this many ticks. Runs until
                ``stop`` when None.
        """
        with self._lock:
            if self.is_running:
                return
            self._shutdown_event = threading.Event()
            self.last_error = None
            self._thread = threading.Thread(
                target=self._run_loop,
                args=(max_ticks, self._shutdown_event),
                name="GeoNavClock",
                daemon=True,
            )
            self._thread.start()

        logger.info(
            "Clock started: %d agents, tick period %s, %d worker(s)",
            len(self._agents),
            self.config.tick_period,
            self.config.max_workers,
        )
        self.emit_event("clock_started", {"config": self.config})

    def stop(self) -> None:
        """Signal the background loop and wait for it to finish its tick.

        Called from inside a tick (an event handler, or the loop itself) the
        loop is only signalled: it cannot finish while this thread holds the
        tick lock. It runs no further ticks either way.
        """
        thread = self._thread
        if thread is None:
            return

        self._shutdown_event.set()
        current = threading.current_thread()
        if thread is not current and self._tick_owner is not current:
            thread.join()
        self._thread = None

        logger.info("Clock stopped after %d ticks (%.1f s simulated)", self._tick_count, self._elapsed)
        self.emit_event("clock_stopped", {"tick": self._tick_count, "elapsed": self._elapsed})

    def join(self, timeout: float | None = None) -> bool:
        """Wait for a background loop started with ``max_ticks`` to finish.

        Returns:
            True if the loop is no longer running.
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.is_running

    def close(self) -> None:
        """Stop the loop and release worker threads."""
        self.stop()
        with self._lock:
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _run_loop(self, max_ticks: int | None, shutdown: threading.Event) -> None:
        period = float(self.config.tick_period)
        ticks = 0
        while not shutdown.is_set():
            if max_ticks is not None and ticks >= max_ticks:
                break
            try:
                with self._lock:
                    # stop() may have been called while this thread waited.
                    if shutdown.is_set():
                        break
                    self.tick()
            except Exception as e:
                self.last_error = e
                logger.exception("Tick %d failed, stopping clock", self._tick_count + 1)
                self.emit_event("clock_error", {"tick": self._tick_count + 1, "error": e})
                break
            ticks += 1
            if self.config.realtime:
                shutdown.wait(period)

    # Parallel agent updates
    def _get_executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.config.max_workers, thread_name_prefix="GeoNavWorker"
            )
        return self._executor

    def _execute_parallel(self, fn: Callable, *args) -> None:
        batch_size = self.config.batch_size
        batches = [
            self._agents[i : i + batch_size]
            for i in range(0, len(self._agents), batch_size)
        ]
        if self.config.max_workers == 1:
            for batch in batches:
                fn(batch, *args)
            return

        executor = self._get_executor()
        futures = [executor.submit(fn, batch, *args) for batch in batches]
        done, _ = wait(futures, return_when=ALL_COMPLETED)
        for future in done:
            future.result()

    @staticmethod
    def _advance_batch(batch: list[NavigatingAgent], dt: Time) -> None:
        for agent in batch:
            agent.advance(dt)

    def _publish(self) -> tuple[AgentSnapshot, ...]:
        self._snapshots = tuple(agent.snapshot() for agent in self._agents)
        return self._snapshots

    # Event System
    def register_event_handler(self, event_name: str, handler: EventHandler) -> None:
        """Call ``handler(event_name, data)`` whenever ``event_name`` is emitted."""
        self.event_handlers.setdefault(event_name, []).append(handler)

    def emit_event(self, event_name: str, data: Any) -> None:
        """Call every handler registered for ``event_name``.

        A failing handler is logged and does not prevent the others from
        running or affect the tick that emitted the event.
        """
        for handler in list(self.event_handlers.get(event_name, ())):
            try:
                handler(event_name, data)
            except Exception:
                logger.exception("Error in event handler for %s", event_name)
