"""
Frame-sequence assembly into one looping animation.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..core.exceptions import AnimationAssemblyError, ScanError
from ..core.types import ConversionOptions, ConversionResult
from ..output.logger import SimpleLogger
from ..utils.path import collect_frames
from .converter import ImageConverter


class AnimationAssembler:
    """Build the animation when the frames directory exists."""

    def __init__(self, config: Config, converter: ImageConverter, logger: SimpleLogger):
        self.config = config
        self.converter = converter
        self.logger = logger

    @property
    def output_path(self) -> Path:
        return self.config.animation_output

    def options(self) -> ConversionOptions:
        return ConversionOptions(delay=self.config.animation.delay_ticks, loop=self.config.animation.loop)

    def run(self) -> ConversionResult | None:
        """Assemble the animation.

        Returns:
            The conversion result, or None when there is no frames directory.

        Raises:
            AnimationAssemblyError: When the frames cannot be read, there are
                none, or the conversion fails.
        """
        try:
            sequence = collect_frames(self.config)
        except ScanError as ex:
            raise AnimationAssemblyError(str(ex)) from ex

        if sequence is None:
            return None

        self.logger.section(f"Converting {len(sequence)} frames in {sequence.dir_path} to {self.output_path}")
        if not sequence.frames:
            raise AnimationAssemblyError(f"No frames found in {sequence.dir_path}")

        try:
            result = self.converter.convert(sequence.frames, self.output_path, self.options())
        except Exception as ex:
            raise AnimationAssemblyError(f"Animation assembly failed: {type(ex).__name__}: {ex}") from ex
        if not result.ok:
            raise AnimationAssemblyError(f"Animation assembly failed: {result.message}")

        self.logger.success(f"    -> {self.output_path}")
        return result
