"""
Path and file system utilities for renderconv.

This module handles:
- Discovery of single images in the source directory
- Output path derivation for converted stills
- Frame collection and playback ordering
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config import Config, FrameOrder
from ..core.exceptions import ScanError
from ..core.types import FrameSequence, SourceEntry


def natural_key(s: str) -> list[object]:
    """Convert string to list of mixed integers and strings for natural sorting."""
    return [int(c) if c.isdecimal() else c for c in re.split(r"(\d+)", s)]


def name_key(name: str) -> tuple[list[object], str]:
    """Natural sort key with the plain name as tie-breaker, so ordering is total."""
    return natural_key(name), name


def list_dir(path: Path) -> list[Path]:
    """List the direct children of a directory.

    Raises:
        ScanError: When the directory cannot be listed.
    """
    try:
        return list(path.iterdir())
    except OSError as e:
        raise ScanError(f"Cannot list {path}: {e.strerror or e}") from e


def scan_source_entries(config: Config) -> list[SourceEntry]:
    """Find the single images to convert, non-recursively.

    A missing source directory yields no entries. A path that exists but is
    not a listable directory raises ScanError.

    Args:
        config: Run configuration

    Returns:
        Entries sorted by natural filename order
    """
    source = config.paths.source_dir
    if not source.exists():
        return []

    entries = [SourceEntry(p) for p in list_dir(source) if config.is_source_file(p)]
    entries.sort(key=lambda e: name_key(e.name))
    return entries


def output_target(entry: SourceEntry, config: Config) -> Path:
    """Destination of a converted still.

    The original extension is kept and the target extension appended,
    so ``a.ppm`` becomes ``a.ppm.png``.
    """
    return config.paths.destination_dir / f"{entry.name}.{config.extensions.target_ext}"


def sort_frames(frames: list[Path], order: FrameOrder) -> list[Path]:
    """Return frames in playback order."""
    if order is FrameOrder.NAME:
        return sorted(frames, key=lambda p: p.name)
    return sorted(frames, key=lambda p: name_key(p.name))


def collect_frames(config: Config) -> FrameSequence | None:
    """Collect animation frames, or None when the frames directory is absent.

    Every visible entry of the directory counts as a frame; no extension
    filter is applied.
    """
    frames_dir = config.paths.frames_dir
    if not frames_dir.is_dir():
        return None

    frames = [p for p in list_dir(frames_dir) if not p.name.startswith(".")]
    return FrameSequence(dir_path=frames_dir, frames=sort_frames(frames, config.animation.frame_order))
