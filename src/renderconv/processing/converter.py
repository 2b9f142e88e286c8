"""
Conversion capability backends.

The orchestration code only depends on the ``ImageConverter`` protocol:
``convert(inputs, output, options) -> ConversionResult``. Two backends
implement it: ImageMagick through a subprocess (the default) and Pillow
in-process.
"""

from __future__ import annotations

import contextlib
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from PIL import Image

from ..config import Config, ConverterBackend
from ..core.types import ConversionOptions, ConversionResult
from ..utils.subprocess import run_subprocess
from .commands import MagickCommandBuilder

TICK_MS = 10


class ImageConverter(Protocol):
    """Anything able to turn input images into one output file."""

    def convert(
        self, inputs: Sequence[Path], output: Path, options: ConversionOptions
    ) -> ConversionResult: ...


class MagickConverter:
    """Run ImageMagick for every conversion."""

    def __init__(self, binary: str = "convert", timeout_sec: int | None = None):
        self.binary = binary
        self.timeout_sec = timeout_sec

    def convert(self, inputs: Sequence[Path], output: Path, options: ConversionOptions) -> ConversionResult:
        if not inputs:
            return ConversionResult(ok=False, output=output, returncode=-1, message="no input images")

        cmd = MagickCommandBuilder.build_cmd(self.binary, inputs, output, options)
        code, stderr = run_subprocess(cmd, timeout=self.timeout_sec)
        if code != 0:
            return ConversionResult(ok=False, output=output, returncode=code, message=f"{self.binary} failed({code}): {stderr}")
        return ConversionResult(ok=True, output=output, message=f"ok {output.name}")


class PillowConverter:
    """Convert with Pillow; the output format follows the output suffix."""

    def convert(self, inputs: Sequence[Path], output: Path, options: ConversionOptions) -> ConversionResult:
        if not inputs:
            return ConversionResult(ok=False, output=output, returncode=-1, message="no input images")

        try:
            with contextlib.ExitStack() as stack:
                images = [stack.enter_context(Image.open(p)) for p in inputs]
                if len(images) == 1 and not options.is_animation:
                    images[0].save(output)
                else:
                    images[0].save(output, save_all=True, append_images=images[1:], **self._animation_params(options))
        except (OSError, ValueError) as ex:
            return ConversionResult(ok=False, output=output, returncode=1, message=f"{type(ex).__name__}: {ex}")

        return ConversionResult(ok=True, output=output, message=f"ok {output.name}")

    @staticmethod
    def _animation_params(options: ConversionOptions) -> dict[str, int]:
        params: dict[str, int] = {}
        if options.delay is not None:
            params["duration"] = options.delay * TICK_MS
        if options.loop is not None:
            params["loop"] = options.loop
        return params


def create_converter(config: Config) -> ImageConverter:
    """Build the converter selected by the configuration."""
    settings = config.converter
    if settings.backend is ConverterBackend.PILLOW:
        return PillowConverter()
    return MagickConverter(settings.magick_binary, settings.timeout_sec)
