from __future__ import annotations

from pathlib import Path

import pytest

from renderconv.config import Config, PathSettings
from renderconv.core.types import ConversionOptions, ConversionResult
from renderconv.output.logger import SimpleLogger


class RecordingConverter:
    """Fake capability: records calls and writes a deterministic output."""

    def __init__(self, fail_names: set[str] | None = None):
        self.calls: list[tuple[list[Path], Path, ConversionOptions]] = []
        self.fail_names = fail_names or set()

    def convert(self, inputs, output, options):
        inputs = list(inputs)
        self.calls.append((inputs, output, options))
        if any(p.name in self.fail_names for p in inputs):
            return ConversionResult(ok=False, output=output, returncode=1, message="convert: improper image header")
        payload = b"".join(b"converted:" + p.read_bytes() for p in inputs)
        output.write_bytes(payload)
        return ConversionResult(ok=True, output=output)


@pytest.fixture
def layout(tmp_path: Path) -> tuple[Path, Path]:
    source = tmp_path / "output"
    dest = tmp_path / "images"
    source.mkdir()
    dest.mkdir()
    return source, dest


@pytest.fixture
def config(layout) -> Config:
    source, dest = layout
    return Config(paths=PathSettings(source_dir=source, destination_dir=dest))


@pytest.fixture
def make_converter():
    return RecordingConverter


class EventLogger(SimpleLogger):
    """Logger that also records every line in a shared event list."""

    def __init__(self, events: list):
        super().__init__()
        self.events = events

    def log(self, message, prefix="", error=False, style=None):
        self.events.append(("log", message))
        super().log(message, prefix=prefix, error=error, style=style)


class EventConverter(RecordingConverter):
    """Recording converter that marks each call in the shared event list."""

    def __init__(self, events: list, **kwargs):
        super().__init__(**kwargs)
        self.events = events

    def convert(self, inputs, output, options):
        self.events.append(("convert", [p.name for p in inputs]))
        return super().convert(inputs, output, options)


@pytest.fixture
def events() -> list:
    return []


@pytest.fixture
def event_logger(events) -> EventLogger:
    return EventLogger(events)


@pytest.fixture
def event_converter(events) -> EventConverter:
    return EventConverter(events)


def first_index(events: list, predicate) -> int:
    return next(i for i, event in enumerate(events) if predicate(event))


@pytest.fixture
def index_of():
    return first_index
