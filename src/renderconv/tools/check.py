"""
External tool validation utilities for renderconv.
"""

from __future__ import annotations

from shutil import which


def check_tools(binary: str = "convert") -> tuple[bool, list[str]]:
    """Check availability of the ImageMagick executable.

    Args:
        binary: Executable name or path to look up

    Returns:
        Tuple[bool, List[str]]: (all_ok, problems). If `all_ok` is False, problems lists the issues.
    """
    problems: list[str] = []
    if which(binary) is None:
        problems.append(f"{binary} not found in PATH")
    return (len(problems) == 0, problems)
