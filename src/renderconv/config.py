"""
Configuration for renderconv.

All run settings live in a handful of Pydantic models, aggregated by a frozen
``Config``. The defaults reproduce the fixed layout the renderer writes to:
stills in ``./output``, animation frames in ``./output/clockframes`` and
converted images in ``./images``.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# PATH SETTINGS
# =============================================================================

DEFAULT_SOURCE_DIR = Path("output")
DEFAULT_FRAMES_SUBDIR = Path("clockframes")
DEFAULT_DESTINATION_DIR = Path("images")


class PathSettings(BaseModel):
    """Source and destination directories."""

    source_dir: Annotated[Path, Field(
        description="Directory holding the single rendered images"
    )] = DEFAULT_SOURCE_DIR

    frames_subdir: Annotated[Path, Field(
        description="Subdirectory of source_dir holding animation frames"
    )] = DEFAULT_FRAMES_SUBDIR

    destination_dir: Annotated[Path, Field(
        description="Existing directory that receives every converted file"
    )] = DEFAULT_DESTINATION_DIR

    class Config:
        frozen = True

    @property
    def frames_dir(self) -> Path:
        return self.source_dir / self.frames_subdir


# =============================================================================
# FILE EXTENSIONS
# =============================================================================

DEFAULT_INPUT_EXT = ".ppm"
DEFAULT_TARGET_EXT = "png"
DEFAULT_ANIMATION_EXT = "gif"


class FileExtensions(BaseModel):
    """Input filter and output extensions."""

    input_ext: Annotated[str, Field(
        description="Suffix a source file must end with to be converted"
    )] = DEFAULT_INPUT_EXT

    target_ext: Annotated[str, Field(
        description="Extension appended to every converted still"
    )] = DEFAULT_TARGET_EXT

    animation_ext: Annotated[str, Field(
        description="Extension of the assembled animation"
    )] = DEFAULT_ANIMATION_EXT

    class Config:
        frozen = True

    @field_validator('input_ext')
    @classmethod
    def validate_input_ext(cls, v):
        """Ensure the input filter starts with a dot."""
        v = v.strip()
        if not v:
            raise ValueError("input_ext cannot be empty")
        return v if v.startswith('.') else f".{v}"

    @field_validator('target_ext', 'animation_ext')
    @classmethod
    def validate_output_ext(cls, v):
        """Output extensions are stored without the leading dot."""
        v = v.strip().lstrip('.')
        if not v:
            raise ValueError("output extension cannot be empty")
        return v


# =============================================================================
# ANIMATION SETTINGS
# =============================================================================

FRAME_DELAY_TICKS = 20  # 1/100 s per tick, so 200 ms per frame
LOOP_FOREVER = 0
DEFAULT_ANIMATION_NAME = "clock"


class FrameOrder(str, Enum):
    """How frames inside the frames directory are ordered for playback."""

    NATURAL = "natural"
    NAME = "name"


class AnimationSettings(BaseModel):
    """Frame-sequence assembly parameters."""

    output_name: Annotated[str, Field(
        description="Base name of the animation written to destination_dir"
    )] = DEFAULT_ANIMATION_NAME

    delay_ticks: Annotated[int, Field(
        ge=0,
        description="Per-frame delay in 1/100 s ticks"
    )] = FRAME_DELAY_TICKS

    loop: Annotated[int, Field(
        ge=0,
        description="Animation iterations, 0 loops forever"
    )] = LOOP_FOREVER

    frame_order: FrameOrder = FrameOrder.NATURAL

    class Config:
        frozen = True

    @field_validator('output_name')
    @classmethod
    def validate_output_name(cls, v):
        if not v.strip():
            raise ValueError("output_name cannot be empty")
        return v


# =============================================================================
# CONVERTER SETTINGS
# =============================================================================

DEFAULT_MAGICK_BINARY = "convert"
MAX_WORKER_CAP = 8


class ConverterBackend(str, Enum):
    """Which conversion capability performs the pixel work."""

    MAGICK = "magick"
    PILLOW = "pillow"


class ConverterSettings(BaseModel):
    """External conversion capability settings."""

    backend: ConverterBackend = ConverterBackend.MAGICK

    magick_binary: Annotated[str, Field(
        description="ImageMagick executable, 'convert' (IM6) or 'magick' (IM7)"
    )] = DEFAULT_MAGICK_BINARY

    workers: Annotated[int, Field(
        ge=1,
        le=MAX_WORKER_CAP,
        description="Parallel still conversions (1 runs sequentially)"
    )] = 1

    timeout_sec: Annotated[int | None, Field(
        gt=0,
        description="Optional per-invocation timeout in seconds"
    )] = None

    class Config:
        frozen = True


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

class Config(BaseModel):
    """Complete run configuration passed explicitly to every component."""

    paths: PathSettings = PathSettings()
    extensions: FileExtensions = FileExtensions()
    animation: AnimationSettings = AnimationSettings()
    converter: ConverterSettings = ConverterSettings()

    class Config:
        frozen = True

    @property
    def animation_output(self) -> Path:
        """Fixed destination of the assembled animation."""
        return self.paths.destination_dir / f"{self.animation.output_name}.{self.extensions.animation_ext}"

    def is_source_file(self, path: Path) -> bool:
        """Check whether a directory entry is a single image to convert.

        Hidden names are skipped the same way a shell glob skips them.
        """
        name = path.name
        return not name.startswith(".") and name.endswith(self.extensions.input_ext) and path.is_file()


# Default configuration instance
default_config = Config()
