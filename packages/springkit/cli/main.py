"""Command-line interface for springkit.

Browse timing presets and sample spring motion from the terminal.
"""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from springkit.core.config.loader import (
    build_preset_registry,
    configure_logging,
    load_app_config,
)
from springkit.core.config.models import AppConfig, LoggingConfig
from springkit.core.curves.keyframes import keyframe_fractions, sample_keyframes
from springkit.core.curves.timing import SpringTimingFunction
from springkit.core.spring.engine import SpringInterpolation
from springkit.core.spring.models import SpringConfiguration
from springkit.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_POINTS = 11
DEFAULT_STEP = 1.0 / 60.0
DEFAULT_MAX_TIME = 3.0


def _load_app_config(args: argparse.Namespace) -> AppConfig:
    app_config = load_app_config(args.app_config)
    if args.log_level:
        level = LoggingConfig.model_validate(
            {**app_config.logging.model_dump(), "level": args.log_level.upper()}
        )
        app_config = app_config.model_copy(update={"logging": level})
    configure_logging(app_config)
    return app_config


def _format_duration(seconds: float) -> str:
    return "inf" if math.isinf(seconds) else f"{seconds:.3f}s"


def run_presets(args: argparse.Namespace, app_config: AppConfig) -> int:
    """List the available timing presets."""
    registry = build_preset_registry(app_config)

    table = Table(title="Spring timing presets")
    table.add_column("Preset", no_wrap=True)
    table.add_column("Damping", justify="right")
    table.add_column("Duration", justify="right")
    table.add_column("Settling", justify="right")
    table.add_column("Description")

    for definition in registry.definitions():
        table.add_row(
            definition.name,
            f"{definition.damping_ratio:.2f}",
            _format_duration(definition.duration),
            _format_duration(definition.configuration().settling_duration),
            definition.description or "",
        )

    console.print(table)
    return 0


def _timing_from_args(args: argparse.Namespace, app_config: AppConfig) -> SpringTimingFunction:
    sample_count = (
        args.samples if args.samples is not None else app_config.timing.sample_count
    )
    if args.preset:
        registry = build_preset_registry(app_config)
        return registry.resolve(args.preset, sample_count=sample_count)
    return SpringTimingFunction.from_damping_ratio(
        args.damping_ratio,
        duration=(
            args.duration if args.duration is not None else app_config.timing.default_duration
        ),
        sample_count=sample_count,
    )


def run_curve(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Print (and optionally export) a sampled timing curve."""
    timing = _timing_from_args(args, app_config)

    points: list[dict[str, float]] = [
        {
            "fraction": fraction,
            "time": fraction * timing.duration,
            "value": timing.value_at(fraction),
        }
        for fraction in keyframe_fractions(args.points)
    ]

    table = Table(
        title=(
            f"damping {timing.configuration.damping_ratio:.2f}, "
            f"duration {_format_duration(timing.duration)}"
        )
    )
    table.add_column("Fraction", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Value", justify="right")
    for point in points:
        table.add_row(f"{point['fraction']:.3f}", f"{point['time']:.3f}", f"{point['value']:.5f}")
    console.print(table)

    if args.json:
        write_json(
            args.json,
            {
                "configuration": timing.configuration.model_dump(),
                "duration": timing.duration,
                "sample_count": timing.sample_count,
                "settling_duration": timing.configuration.settling_duration,
                "points": points,
                "keyframes": sample_keyframes(
                    timing, args.start, args.end, app_config.timing.keyframe_count
                ),
            },
        )
        console.print(f"[green]Curve written to[/green] {args.json}")

    return 0


def simulate(
    config: SpringConfiguration,
    start: float,
    target: float,
    delta_time: float,
    max_time: float,
) -> list[dict[str, Any]]:
    """Step a spring from start toward target and record each frame.

    Stops early once the spring has come to rest on the target.
    """
    spring = SpringInterpolation(config, current_pos=start, target_pos=target)
    rows: list[dict[str, Any]] = [
        {"time": 0.0, "position": spring.value, "velocity": spring.current_vel, "acceleration": 0.0}
    ]
    if delta_time <= 0.0:
        return rows

    steps = math.ceil(max_time / delta_time)
    for index in range(1, steps + 1):
        spring.step(delta_time)
        rows.append(
            {
                "time": index * delta_time,
                "position": spring.value,
                "velocity": spring.current_vel,
                "acceleration": spring.acceleration,
            }
        )
        if spring.completed and spring.current_vel == 0.0:
            break
    return rows


def run_simulate(args: argparse.Namespace, app_config: AppConfig) -> int:
    """Print (and optionally export) a stepped spring trajectory."""
    config = SpringConfiguration(
        angular_frequency=args.angular_frequency,
        damping_ratio=args.damping_ratio,
        threshold=args.threshold,
        stop_when_hit_target=args.stop,
    )
    rows = simulate(config, args.start, args.target, args.dt, args.max_time)

    table = Table(title=f"omega {config.angular_frequency:g}, zeta {config.damping_ratio:g}")
    for column in ("Time", "Position", "Velocity", "Acceleration"):
        table.add_column(column, justify="right")
    for row in rows:
        table.add_row(
            f"{row['time']:.4f}",
            f"{row['position']:.6f}",
            f"{row['velocity']:.6f}",
            f"{row['acceleration']:.4f}",
        )
    console.print(table)
    console.print(f"Estimated settling duration: {_format_duration(config.settling_duration)}")

    if args.json:
        write_json(args.json, {"configuration": config.model_dump(), "frames": rows})
        console.print(f"[green]Trajectory written to[/green] {args.json}")

    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="springkit",
        description="springkit - closed-form spring timing curves",
    )
    p.add_argument(
        "--app-config",
        default=None,
        help="Path to app config (.yaml/.yml/.json, default: springkit.yaml)",
    )
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("presets", help="List timing presets")

    curve = sub.add_parser("curve", help="Sample a timing curve")
    source = curve.add_mutually_exclusive_group(required=True)
    source.add_argument("--preset", help="Preset name (see `springkit presets`)")
    source.add_argument("--damping-ratio", type=float, help="Damping ratio of the spring")
    curve.add_argument("--duration", type=float, default=None, help="Duration in seconds")
    curve.add_argument("--samples", type=int, default=None, help="Timing table size")
    curve.add_argument(
        "--points", type=int, default=DEFAULT_POINTS, help="Number of points to print"
    )
    curve.add_argument("--start", type=float, default=0.0, help="Exported keyframe start value")
    curve.add_argument("--end", type=float, default=1.0, help="Exported keyframe end value")
    curve.add_argument("--json", type=Path, default=None, help="Write the curve to a JSON file")

    sim = sub.add_parser("simulate", help="Step a spring and print its trajectory")
    sim.add_argument("--angular-frequency", type=float, default=10.0)
    sim.add_argument("--damping-ratio", type=float, default=0.75)
    sim.add_argument("--threshold", type=float, default=0.0001)
    sim.add_argument("--stop", action="store_true", help="Stop when the target is reached")
    sim.add_argument("--start", type=float, default=0.0)
    sim.add_argument("--target", type=float, default=1.0)
    sim.add_argument("--dt", type=float, default=DEFAULT_STEP, help="Step length in seconds")
    sim.add_argument("--max-time", type=float, default=DEFAULT_MAX_TIME)
    sim.add_argument("--json", type=Path, default=None, help="Write frames to a JSON file")

    return p


_COMMANDS = {
    "presets": run_presets,
    "curve": run_curve,
    "simulate": run_simulate,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        app_config = _load_app_config(args)
        return _COMMANDS[args.cmd](args, app_config)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
