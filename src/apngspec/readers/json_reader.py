"""
JSON build spec reader.

Document layout::

    {
      "name": "walk",
      "loops": 0,
      "skip_first": false,
      "default_delay": "1/20",
      "delays": ["1/10", "2/10"],
      "frames": ["idle.png", {"walk_*.png": "3/30"}, "end"]
    }

A frame entry is either a bare path string, whose delay is taken positionally
from "delays", or a single-key object mapping a path to its own delay token.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..config import AppConfig, app_config
from ..core.errors import SpecStructureError
from ..core.types import BuildSpec, FrameDeclaration
from ..output.logger import SimpleLogger
from ..processing.frames import assemble_build_spec
from ..utils.json import load_json
from ..utils.values import parse_flag, scalar_text


class JsonSpecBuilder:
    """Builds a BuildSpec from a decoded JSON document."""

    def __init__(self, config: AppConfig | None = None, logger: SimpleLogger | None = None):
        self.config = config or app_config
        self.logger = logger

    def load(self, path: Path) -> BuildSpec:
        """Decode `path` and build it with the file's own directory as base."""
        root = load_json(path)
        return self.build(root, path.absolute().parent, source=path)

    def build(self, root: Any, base_dir: str | Path, source: Path | None = None) -> BuildSpec:
        """Build from an already decoded document.

        Raises:
            SpecStructureError: If the root is not an object, "frames" is missing,
                "delays" is missing in strict mode, or a frame entry is malformed.
        """
        if not isinstance(root, dict):
            raise SpecStructureError("document root must be an object", source)

        if "frames" not in root:
            raise SpecStructureError("missing required 'frames' list", source)
        frames = root["frames"]
        if not isinstance(frames, list):
            raise SpecStructureError("'frames' must be a list", source)

        if "delays" in root:
            # null counts as present but empty
            delays = root["delays"] if root["delays"] is not None else []
            if not isinstance(delays, list):
                raise SpecStructureError("'delays' must be a list", source)
        elif self.config.reader.require_delays:
            raise SpecStructureError("missing required 'delays' list", source)
        else:
            delays = []

        declarations = [self._declaration(index, entry, source) for index, entry in enumerate(frames)]

        return assemble_build_spec(
            name=scalar_text(root.get("name")),
            loops=scalar_text(root.get("loops")),
            skip_first=parse_flag(root.get("skip_first"), False),
            default_delay_token=scalar_text(root.get("default_delay")),
            delay_tokens=[scalar_text(token) for token in delays],
            declarations=declarations,
            base_dir=base_dir,
            config=self.config,
            logger=self.logger,
        )

    def _declaration(self, index: int, entry: Any, source: Path | None) -> FrameDeclaration:
        if isinstance(entry, dict):
            if not entry:
                raise SpecStructureError(f"frame #{index} is an empty object", source)
            if len(entry) > 1 and self.logger:
                self.logger.warning(f"Frame #{index} has {len(entry)} keys, only the first is used")
            path_spec, token = next(iter(entry.items()))
            return FrameDeclaration(path_spec=path_spec, delay_token=scalar_text(token) or "")

        path_spec = scalar_text(entry)
        if path_spec is None:
            raise SpecStructureError(
                f"frame #{index} must be a path string or a {{path: delay}} object, got {type(entry).__name__}",
                source,
            )
        return FrameDeclaration(path_spec=path_spec)
