#!/usr/bin/env python3
"""
apngspec: resolve an APNG build spec (JSON or XML) into its ordered frame list.

Prints the animation settings and a table of every resolved frame with its
delay, optionally writes the resolved spec as JSON and checks that every
frame file exists.
"""

from __future__ import annotations

# Standard library imports
import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

# Third-party imports
from rich.console import Console
from rich.table import Table

# Local application imports
from ..config import AppConfig, create_config_from_env
from ..core.errors import SpecError
from ..core.types import BuildSpec
from ..output.logger import SimpleLogger
from ..reader import load_spec
from ..utils.json import write_json


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    p = argparse.ArgumentParser(
        prog="apngspec",
        description="Resolve an APNG build spec into its ordered frame list.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("spec", type=Path, help="Spec file (.json selects JSON, anything else XML)")
    p.add_argument("--json", dest="json_out", type=Path, help="Write the resolved spec as JSON to this path")
    p.add_argument("--check-files", action="store_true", help="Fail if any resolved frame file does not exist")
    p.add_argument("--strict", action="store_true", help="Require a 'delays' list in the spec")
    p.add_argument("--log-file", type=Path, help="Append log output to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Log each frame declaration as it is resolved")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Create the configuration from the environment plus CLI overrides."""
    config = create_config_from_env()
    if args.strict:
        reader = config.reader.model_copy(update={"require_delays": True})
        config = config.model_copy(update={"reader": reader})
    return config


def frames_table(spec: BuildSpec, base_dir: Path) -> Table:
    """Render the frame list, paths shown relative to the spec directory where possible."""
    table = Table(title=f"{len(spec)} frame(s)")
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Delay", justify="right")
    table.add_column("Seconds", justify="right")

    for idx, frame in enumerate(spec.frames):
        try:
            shown = os.path.relpath(frame.file_path, base_dir)
        except ValueError:
            shown = frame.file_path
        table.add_row(f"{idx:03d}", shown, str(frame.delay), f"{frame.delay.seconds:.3f}")
    return table


def missing_files(spec: BuildSpec) -> list[str]:
    """Return resolved frame paths that are not existing files."""
    return [path for path in spec.frame_paths if not os.path.isfile(path)]


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    config = build_config(args)
    logger = SimpleLogger(args.log_file, verbose=args.verbose)
    console = console or Console()

    logger.info(f"Loading {args.spec}")
    try:
        spec = load_spec(args.spec, config, logger)
    except FileNotFoundError as ex:
        logger.error(f"Spec not found: {ex}")
        return 1
    except SpecError as ex:
        logger.error(f"{type(ex).__name__}: {ex}")
        return 1

    logger.section(f"Spec: {args.spec.name}")
    rows = [
        ["Name", spec.name or "(unnamed)"],
        ["Loops", "infinite" if spec.loops == 0 else str(spec.loops)],
        ["Skip first", "yes" if spec.skip_first else "no"],
        ["Frames", str(len(spec))],
        ["Duration", f"{spec.total_duration:.3f}s"],
    ]
    logger.table(["Setting", "Value"], rows)

    if spec.frames:
        console.print(frames_table(spec, args.spec.absolute().parent))
    else:
        logger.warning("Spec resolved to no frames")

    if args.json_out:
        write_json(args.json_out, spec.model_dump(mode="json"))
        logger.success(f"Wrote {args.json_out}")

    if args.check_files:
        missing = missing_files(spec)
        for path in missing:
            logger.error(f"Missing frame file: {path}")
        if missing:
            return 1
        logger.success("All frame files exist")

    return 0


if __name__ == "__main__":
    sys.exit(main())
