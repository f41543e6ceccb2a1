"""
Core data types for apngspec.

Delay, FrameInfo and BuildSpec are frozen pydantic models: a BuildSpec is
built once per spec load and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_FRAME_DENOMINATOR, DEFAULT_FRAME_NUMERATOR, UINT_MAX

# fcTL: a zero denominator means 1/100 second units
ZERO_DENOMINATOR_SUBSTITUTE = 100


class Delay(BaseModel):
    """Display duration of one frame, numerator/denominator seconds."""

    model_config = ConfigDict(frozen=True)

    numerator: Annotated[int, Field(ge=0, le=UINT_MAX)] = DEFAULT_FRAME_NUMERATOR
    denominator: Annotated[int, Field(ge=0, le=UINT_MAX)] = DEFAULT_FRAME_DENOMINATOR

    @property
    def seconds(self) -> float:
        """Duration in seconds."""
        den = self.denominator or ZERO_DENOMINATOR_SUBSTITUTE
        return self.numerator / den

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


class FrameInfo(BaseModel):
    """One resolved image file and the delay it is shown for."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    delay: Delay


class BuildSpec(BaseModel):
    """Fully resolved animation build description."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    loops: Annotated[int, Field(ge=0, le=UINT_MAX)] = 0  # 0 = infinite
    skip_first: bool = False
    frames: tuple[FrameInfo, ...] = ()

    def __len__(self) -> int:
        """Return number of resolved frames."""
        return len(self.frames)

    @property
    def frame_paths(self) -> tuple[str, ...]:
        return tuple(frame.file_path for frame in self.frames)

    @property
    def total_duration(self) -> float:
        """Sum of all frame durations in seconds."""
        return sum(frame.delay.seconds for frame in self.frames)


@dataclass(frozen=True)
class FrameDeclaration:
    """One entry of a spec's frame list, independent of document format.

    Attributes:
        path_spec (str): Literal or wildcarded path, relative to the spec file.
        delay_token (Optional[str]): Inline delay token, or None for a bare path
            that takes its delay positionally.
    """

    path_spec: str
    delay_token: str | None = None

    @property
    def is_bare(self) -> bool:
        return self.delay_token is None
