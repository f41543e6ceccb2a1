"""
Frame list construction.

Turns format-neutral frame declarations plus the positional delay list into
the final ordered FrameInfo sequence. Both the JSON and the XML readers feed
this module, so delay precedence is defined in exactly one place:

1. an inline delay on the declaration,
2. else the positional delay at the declaration's index,
3. else the spec's default delay.

The positional index advances once per declaration, never per expanded file.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from ..config import AppConfig, app_config
from ..core.types import BuildSpec, Delay, FrameDeclaration, FrameInfo
from ..output.logger import SimpleLogger
from ..utils.path import resolve_paths
from .delay import parse_delay, parse_uint


def build_frame_infos(
    declarations: Iterable[FrameDeclaration],
    delays: Sequence[Delay],
    default_delay: Delay,
    base_dir: str | Path,
    *,
    image_extension: str,
    fallback: Delay | None = None,
    logger: SimpleLogger | None = None,
) -> list[FrameInfo]:
    """Resolve declarations into frames.

    Args:
        declarations: Frame declarations in document order
        delays: Positional delays, matched to declarations by index
        default_delay: Delay for bare declarations past the end of `delays`
        base_dir: Directory relative path specs are resolved against
        image_extension: Image extension for path resolution
        fallback: Defaults for malformed inline delay tokens
        logger: Optional logger for declarations that match nothing

    Returns:
        list[FrameInfo]: Frames in declaration order, wildcard matches sorted.
    """
    frames: list[FrameInfo] = []

    for index, declaration in enumerate(declarations):
        if declaration.is_bare:
            delay = delays[index] if index < len(delays) else default_delay
        else:
            delay = parse_delay(declaration.delay_token, fallback)

        files = resolve_paths(declaration.path_spec, base_dir, image_extension)
        if not files and logger:
            logger.warning(f"Frame #{index} '{declaration.path_spec}' matched no files")

        for file_path in files:
            frames.append(FrameInfo(file_path=file_path, delay=delay))

        if logger:
            logger.debug(f"Frame #{index} '{declaration.path_spec}' -> {len(files)} file(s) @ {delay}")

    return frames


def assemble_build_spec(
    *,
    name: str | None,
    loops: str | None,
    skip_first: bool,
    default_delay_token: str | None,
    delay_tokens: Sequence[str | None],
    declarations: Sequence[FrameDeclaration],
    base_dir: str | Path,
    config: AppConfig | None = None,
    logger: SimpleLogger | None = None,
) -> BuildSpec:
    """Parse top-level values, build the frame list and freeze the result.

    Args:
        name: Animation name text, None when absent
        loops: Loop count text, None when absent; malformed values mean 0
        skip_first: Already interpreted skip-first flag
        default_delay_token: Default delay token, None when absent
        delay_tokens: Positional delay tokens
        declarations: Frame declarations
        base_dir: The spec file's directory
        config: Configuration (defaults to the process-wide instance)
        logger: Optional logger

    Returns:
        BuildSpec: The immutable result.
    """
    cfg = config or app_config
    num, den = cfg.default_delay_values()
    fallback = Delay(numerator=num, denominator=den)

    default_delay = parse_delay(default_delay_token, fallback)
    delays = [parse_delay(token, fallback) for token in delay_tokens]

    frames = build_frame_infos(
        declarations,
        delays,
        default_delay,
        base_dir,
        image_extension=cfg.paths.image_extension,
        fallback=fallback,
        logger=logger,
    )

    return BuildSpec(
        name=name or "",
        loops=parse_uint(loops, 0),
        skip_first=skip_first,
        frames=tuple(frames),
    )
