# MIT License (see LICENSE)
"""
Command-line entry point.

Run a simulation headlessly and print a summary:
    physics-lab run pendulum-motion --duration 5 --set length=2 --set dampingFactor=0
    physics-lab run projectile-motion --speed 2 --output flight.json --history
    physics-lab list
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from dataclasses import replace

from .catalog import UNITS
from .config import load_settings
from .io.json_io import load_simulation, save_simulation
from .logging_config import setup_logging
from .loop import FrameLoop
from .profiler import Profiler
from .renderer.adapter import DebugRenderer
from .simulations.registry import SIMULATIONS, create_simulation

logger = logging.getLogger(__name__)


def _parse_assignment(text: str) -> tuple[str, float]:
    """Parse "id=value" from --set."""
    key, sep, raw = text.partition("=")
    if not sep or not key:
        raise ValueError(f"Expected id=value, got {text!r}")
    try:
        return key.strip(), float(raw)
    except ValueError:
        raise ValueError(f"Value for {key!r} is not a number: {raw!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="physics-lab", description="Headless physics simulations")
    parser.add_argument("--log-level", default=None, help="Override PHYSICS_LAB_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List physics units, topics and simulations")

    run = sub.add_parser("run", help="Run a simulation and print a summary")
    run.add_argument("simulation", nargs="?", choices=sorted(SIMULATIONS), help="Simulation id")
    run.add_argument("--preset", help="Load simulation and parameters from a JSON file")
    run.add_argument("--duration", type=float, default=5.0, help="Wall-clock seconds to simulate")
    run.add_argument("--fps", type=float, default=None, help="Frames per second (default: simulation time step)")
    run.add_argument("--speed", type=float, default=None, help="Playback speed multiplier")
    run.add_argument("--set", action="append", default=[], metavar="ID=VALUE", help="Set a parameter")
    run.add_argument("--output", help="Write the final state to a JSON file")
    run.add_argument("--history", action="store_true", help="Include sample history in --output")
    run.add_argument("--render", action="store_true", help="Print every frame as text")
    run.add_argument("--profile", action="store_true", help="Print step/render timings")
    return parser


def _cmd_list() -> int:
    for unit in UNITS:
        print(f"{unit.name} [{unit.id}]")
        for topic in unit.topics:
            print(f"  {topic.name} [{topic.id}]")
            for info in topic.simulations:
                mark = "*" if info.id in SIMULATIONS else " "
                print(f"   {mark} {info.id:<28} {info.path}")
    return 0


def _cmd_run(args: argparse.Namespace, max_frame_delta: float | None) -> int:
    if args.preset:
        sim = load_simulation(args.preset)
        if args.simulation and args.simulation != sim.id:
            raise ValueError(f"--preset holds {sim.id!r} but {args.simulation!r} was requested")
    elif args.simulation:
        sim = create_simulation(args.simulation)
    else:
        raise ValueError("Give a simulation id or --preset")

    if args.speed is not None:
        sim.set_speed(args.speed)
    for assignment in args.set:
        pid, value = _parse_assignment(assignment)
        stored = sim.set_parameter(pid, value)
        if stored != value:
            logger.warning("%s=%s is out of range, using %s", pid, value, stored)

    renderer = DebugRenderer() if args.render else None
    profiler = Profiler() if args.profile else None
    loop = FrameLoop(sim, renderer=renderer, profiler=profiler, max_delta=max_frame_delta)
    frames = loop.run(args.duration, fps=args.fps)
    sim.pause()

    print(f"{sim.id}: {frames} frames, t={sim.current_time:.4f} s")
    print(json.dumps(sim.state_dict(), indent=2))
    if profiler is not None:
        print(json.dumps(profiler.stats.summary(), indent=2))
    if args.output:
        save_simulation(sim, args.output, include_history=args.history)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.log_level:
            settings = replace(settings, log_level=args.log_level)
        setup_logging(settings.log_level_value, settings.log_file)

        if args.command == "list":
            return _cmd_list()
        return _cmd_run(args, settings.max_frame_delta)
    except (ValueError, KeyError, OSError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"physics-lab: error: {msg}", file=sys.stderr)
        return 2
