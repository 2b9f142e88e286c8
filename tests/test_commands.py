from pathlib import Path

from renderconv.core.types import ConversionOptions
from renderconv.processing.commands import MagickCommandBuilder


def test_single_command():
    cmd = MagickCommandBuilder.build_cmd("convert", [Path("output/a.ppm")], Path("images/a.ppm.png"), ConversionOptions())
    assert cmd == ["convert", "output/a.ppm", "images/a.ppm.png"]


def test_animation_command_puts_options_before_frames():
    frames = [Path(f"output/clockframes/{i:04d}.ppm") for i in range(1, 4)]
    cmd = MagickCommandBuilder.build_cmd("magick", frames, Path("images/clock.gif"), ConversionOptions(delay=20, loop=0))
    assert cmd == [
        "magick", "-delay", "20", "-loop", "0",
        "output/clockframes/0001.ppm",
        "output/clockframes/0002.ppm",
        "output/clockframes/0003.ppm",
        "images/clock.gif",
    ]


def test_single_frame_animation_keeps_options():
    cmd = MagickCommandBuilder.build_cmd("convert", [Path("f1.ppm")], Path("out.gif"), ConversionOptions(loop=0))
    assert cmd == ["convert", "-loop", "0", "f1.ppm", "out.gif"]
