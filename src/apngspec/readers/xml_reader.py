"""
XML build spec reader.

Document layout::

    <animation name="walk" loops="0" skip_first="false" default_delay="1/20">
      <delays>
        <delay>1/10</delay>
        <delay>2/10</delay>
      </delays>
      <frames>
        <frame>idle.png</frame>
        <frame delay="3/30">walk_*.png</frame>
        <frame src="end"/>
      </frames>
    </animation>

Top-level values are attributes of <animation>. A <frame> without a delay
attribute takes its delay positionally from <delays>. The path comes from the
src attribute when present, otherwise from the element text.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from ..config import AppConfig, app_config
from ..core.errors import SpecDecodeError, SpecReadError, SpecStructureError
from ..core.types import BuildSpec, FrameDeclaration
from ..output.logger import SimpleLogger
from ..processing.frames import assemble_build_spec
from ..utils.values import parse_flag

ROOT_TAG = "animation"


class XmlSpecBuilder:
    """Builds a BuildSpec from an XML document."""

    def __init__(self, config: AppConfig | None = None, logger: SimpleLogger | None = None):
        self.config = config or app_config
        self.logger = logger

    def load(self, path: Path) -> BuildSpec:
        """Parse `path` and build it with the file's own directory as base."""
        if not path.exists():
            raise FileNotFoundError(f"XML file not found: {path}")

        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise SpecDecodeError(f"invalid XML: {e}", path) from e
        except OSError as e:
            raise SpecReadError(f"cannot read: {e.strerror or e}", path) from e

        return self.build(root, path.absolute().parent, source=path)

    def build(self, root: ET.Element, base_dir: str | Path, source: Path | None = None) -> BuildSpec:
        """Build from a parsed <animation> element.

        Raises:
            SpecStructureError: On a wrong root tag, a missing <frames> element,
                a missing <delays> element in strict mode, or a frame without a path.
        """
        if root.tag != ROOT_TAG:
            raise SpecStructureError(f"root element must be <{ROOT_TAG}>, got <{root.tag}>", source)

        frames_el = root.find("frames")
        if frames_el is None:
            raise SpecStructureError("missing required <frames> element", source)

        delays_el = root.find("delays")
        if delays_el is None and self.config.reader.require_delays:
            raise SpecStructureError("missing required <delays> element", source)

        delay_tokens = []
        if delays_el is not None:
            delay_tokens = [(el.text or "").strip() for el in delays_el.findall("delay")]

        declarations = [
            self._declaration(index, frame_el, source)
            for index, frame_el in enumerate(frames_el.findall("frame"))
        ]

        return assemble_build_spec(
            name=root.get("name"),
            loops=_stripped(root.get("loops")),
            skip_first=parse_flag(root.get("skip_first"), False),
            default_delay_token=_stripped(root.get("default_delay")),
            delay_tokens=delay_tokens,
            declarations=declarations,
            base_dir=base_dir,
            config=self.config,
            logger=self.logger,
        )

    @staticmethod
    def _declaration(index: int, frame_el: ET.Element, source: Path | None) -> FrameDeclaration:
        path_spec = frame_el.get("src")
        if path_spec is None:
            path_spec = frame_el.text or ""
        path_spec = path_spec.strip()
        if not path_spec:
            raise SpecStructureError(f"<frame> #{index} has no path", source)

        return FrameDeclaration(path_spec=path_spec, delay_token=_stripped(frame_el.get("delay")))


def _stripped(value: str | None) -> str | None:
    return value.strip() if value is not None else None
