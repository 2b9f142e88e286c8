"""
ImageMagick command building for renderconv.

Keeps argument layout in one place, separate from process execution.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.types import ConversionOptions


class MagickCommandBuilder:
    """Builder class for constructing ImageMagick commands."""

    @staticmethod
    def build_option_args(options: ConversionOptions) -> list[str]:
        """Settings that must precede the input images they apply to."""
        args: list[str] = []
        if options.delay is not None:
            args += ["-delay", str(options.delay)]
        if options.loop is not None:
            args += ["-loop", str(options.loop)]
        return args

    @staticmethod
    def build_single_cmd(binary: str, src: Path, dst: Path) -> list[str]:
        """Create a command converting one image; format follows the dst suffix."""
        return [binary, str(src), str(dst)]

    @staticmethod
    def build_cmd(binary: str, inputs: Sequence[Path], dst: Path, options: ConversionOptions) -> list[str]:
        """Create a command for any number of inputs.

        For a frame sequence this is
        ``convert -delay 20 -loop 0 frame1 frame2 ... out.gif``.
        """
        if len(inputs) == 1 and not options.is_animation:
            return MagickCommandBuilder.build_single_cmd(binary, inputs[0], dst)
        return [binary, *MagickCommandBuilder.build_option_args(options), *(str(p) for p in inputs), str(dst)]
