"""
Core data types for renderconv.

Filesystem-level records passed between scanning, orchestration and the
conversion backends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class SourceEntry:
    """One single image discovered in the source directory."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class FrameSequence:
    """Frames of one animation, already in playback order."""

    dir_path: Path
    frames: list[Path] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frames)


class ConversionOptions(BaseModel):
    """Options forwarded to the conversion capability.

    ``delay`` is expressed in 1/100 s ticks and ``loop`` is an iteration
    count where 0 means loop forever. ``None`` leaves the capability default.
    """

    delay: Annotated[int | None, Field(ge=0)] = None
    loop: Annotated[int | None, Field(ge=0)] = None

    class Config:
        frozen = True

    @property
    def is_animation(self) -> bool:
        return self.delay is not None or self.loop is not None


@dataclass
class ConversionResult:
    """Outcome of one conversion invocation."""

    ok: bool
    output: Path
    returncode: int = 0
    message: str = ""
