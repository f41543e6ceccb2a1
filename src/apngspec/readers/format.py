"""Spec document formats and the builder each one uses."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from ..config import AppConfig, app_config
from ..output.logger import SimpleLogger
from .json_reader import JsonSpecBuilder
from .xml_reader import XmlSpecBuilder


class SpecFormat(str, Enum):
    """Supported spec document formats."""

    JSON = "json"
    XML = "xml"

    @classmethod
    def from_path(cls, path: str | Path, config: AppConfig | None = None) -> SpecFormat:
        """Pick the format from the filename alone: the JSON suffix selects JSON, anything else XML."""
        cfg = config or app_config
        if cfg.is_json_spec(Path(path).name):
            return cls.JSON
        return cls.XML

    def builder(
        self, config: AppConfig | None = None, logger: SimpleLogger | None = None
    ) -> JsonSpecBuilder | XmlSpecBuilder:
        """Create the builder for this format."""
        if self == SpecFormat.JSON:
            return JsonSpecBuilder(config, logger)

        if self == SpecFormat.XML:
            return XmlSpecBuilder(config, logger)

        raise ValueError(f"Unsupported SpecFormat: {self}")
