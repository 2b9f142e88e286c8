"""Exceptions raised for failures that end a run."""

from __future__ import annotations


class RenderConvError(Exception):
    """Base class for fatal renderconv errors."""


class ScanError(RenderConvError):
    """The source directory exists but cannot be listed."""


class AnimationAssemblyError(RenderConvError):
    """The frame sequence could not be turned into an animation."""
