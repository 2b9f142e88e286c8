import pytest
from pydantic import ValidationError

from renderconv.config import AnimationSettings, ConverterSettings, FileExtensions
from renderconv.core.types import ConversionOptions


def test_extensions_are_normalized():
    ext = FileExtensions(input_ext="ppm", target_ext=".png", animation_ext="gif")
    assert ext.input_ext == ".ppm"
    assert ext.target_ext == "png"
    assert ext.animation_ext == "gif"


def test_empty_extension_rejected():
    with pytest.raises(ValidationError):
        FileExtensions(target_ext=".")


def test_negative_delay_rejected():
    with pytest.raises(ValidationError):
        AnimationSettings(delay_ticks=-1)
    with pytest.raises(ValidationError):
        ConversionOptions(loop=-1)


def test_workers_bounds():
    with pytest.raises(ValidationError):
        ConverterSettings(workers=0)


def test_blank_animation_name_rejected():
    with pytest.raises(ValidationError):
        AnimationSettings(output_name="  ")


def test_options_mark_animation():
    assert not ConversionOptions().is_animation
    assert ConversionOptions(delay=20, loop=0).is_animation
