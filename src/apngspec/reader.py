"""
Entry point for reading build specs.

`load_spec` returns the immutable BuildSpec; `SpecReader` wraps one load and
exposes its name, loop count, skip-first flag and frame list.
"""

from __future__ import annotations

from pathlib import Path

from .config import AppConfig
from .core.types import BuildSpec, FrameInfo
from .output.logger import SimpleLogger
from .readers.format import SpecFormat


def load_spec(
    file_path: str | Path, config: AppConfig | None = None, logger: SimpleLogger | None = None
) -> BuildSpec:
    """Load and fully resolve a build spec.

    Relative frame paths are resolved against the spec file's directory. The
    process working directory is neither consulted for that nor changed.

    Args:
        file_path: Spec document; a .json suffix selects JSON, anything else XML
        config: Optional configuration override
        logger: Optional logger for warnings and debug output

    Returns:
        BuildSpec: The resolved spec.

    Raises:
        FileNotFoundError: If the spec file doesn't exist
        SpecDecodeError: If the document cannot be decoded
        SpecStructureError: If required structure is missing
    """
    path = Path(file_path)
    fmt = SpecFormat.from_path(path, config)
    if logger:
        logger.debug(f"Reading {fmt.value.upper()} spec {path}")
    return fmt.builder(config, logger).load(path)


class SpecReader:
    """Read-only view over one loaded build spec."""

    def __init__(
        self, file_path: str | Path, config: AppConfig | None = None, logger: SimpleLogger | None = None
    ):
        self.file_path = Path(file_path)
        self.format = SpecFormat.from_path(self.file_path, config)
        self._spec = load_spec(self.file_path, config, logger)

    @property
    def spec(self) -> BuildSpec:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def loops(self) -> int:
        """Loop count, 0 means infinite."""
        return self._spec.loops

    @property
    def skip_first(self) -> bool:
        return self._spec.skip_first

    @property
    def frame_infos(self) -> tuple[FrameInfo, ...]:
        return self._spec.frames
