"""Command-line demo: run the default fleet and watch it in a live table.

Usage:
    geonav --ticks 120 --dt 1 --seed 42
    python -m geonav --realtime --ships 20
"""

import argparse
import logging
from collections.abc import Sequence

import numpy as np
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from geonav.config import ClockConfig
from geonav.fleet import build_default_fleet
from geonav.log import CONSOLE, setup_logging
from geonav.simulator import SimulationClock
from geonav.unit import ClockTime, Second
from geonav.vehicles import AgentSnapshot, AgentState

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geonav",
        description="Simulate ships and aircraft moving on great circles",
    )
    parser.add_argument("--ships", type=int, default=100, help="ships scattered off the west coast")
    parser.add_argument(
        "--aircraft-per-route", type=int, default=3, help="aircraft on each default route"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible fleet")
    parser.add_argument("--ticks", type=int, default=60, help="number of ticks to run")
    parser.add_argument("--dt", type=float, default=1.0, help="tick period in seconds")
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="pace ticks to wall time instead of running as fast as possible",
    )
    parser.add_argument("-j", "--workers", type=int, default=1, help="worker threads per tick")
    parser.add_argument("--batch-size", type=int, default=100, help="agents per worker batch")
    parser.add_argument("--rows", type=int, default=20, help="agents shown in the live table")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="log level for the geonav logger",
    )
    return parser


def render(snapshots: Sequence[AgentSnapshot], tick: int, elapsed: float, rows: int = 20) -> Panel:
    """Live view: per-state counts followed by the first ``rows`` agents."""
    counts = dict.fromkeys(AgentState, 0)
    legs = 0
    for snap in snapshots:
        counts[snap.state] += 1
        legs += snap.legs_completed

    summary = Table.grid(padding=(0, 2))
    summary.add_row("[b]Tick[/b]: ", str(tick))
    summary.add_row("[b]Simulated Time[/b]: ", str(ClockTime(elapsed)))
    for state, n in counts.items():
        summary.add_row(f"[b]Agents - {state.name}[/b]: ", str(n))
    summary.add_row("[b]Legs Completed[/b]: ", str(legs))

    agents = Table(expand=True)
    agents.add_column("Agent")
    agents.add_column("Kind")
    agents.add_column("State")
    agents.add_column("Latitude", justify="right")
    agents.add_column("Longitude", justify="right")
    agents.add_column("Course (°)", justify="right")
    agents.add_column("Speed (m/s)", justify="right")
    for snap in snapshots[:rows]:
        lat, lng = snap.position.as_tuple()
        agents.add_row(
            snap.label,
            snap.kind.value,
            snap.state.name,
            f"{lat:.4f}",
            f"{lng:.4f}",
            f"{snap.course:.2f}",
            f"{snap.speed:.2f}",
        )

    grid = Table.grid()
    grid.add_row(summary)
    grid.add_row(agents)
    return Panel(grid, title="Current States", padding=(1, 2))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.ticks < 0:
        logger.error("--ticks must be non-negative, got %d", args.ticks)
        return 2

    try:
        config = ClockConfig(
            tick_period=Second(args.dt),
            max_workers=args.workers,
            batch_size=args.batch_size,
            realtime=args.realtime,
        )
        fleet = build_default_fleet(
            np.random.default_rng(args.seed),
            ships=args.ships,
            aircraft_per_route=args.aircraft_per_route,
        )
    except ValueError as e:
        logger.error("%s", e)
        return 2

    with SimulationClock(fleet, config) as clock:
        panel = render(clock.snapshots(), 0, 0.0, args.rows)
        with Live(panel, console=CONSOLE, auto_refresh=False) as live:

            def on_tick(_event: str, data: dict) -> None:
                live.update(render(data["snapshots"], data["tick"], data["elapsed"], args.rows), refresh=True)

            clock.register_event_handler("tick", on_tick)
            try:
                if args.realtime:
                    clock.start(max_ticks=args.ticks)
                    while not clock.join(timeout=0.5):
                        pass
                else:
                    clock.run(args.ticks)
            except KeyboardInterrupt:
                logger.warning("Interrupted at tick %d", clock.tick_count)
            finally:
                clock.stop()

        if clock.last_error is not None:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
