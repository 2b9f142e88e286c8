"""Subprocess and external command utilities."""

import subprocess


def run_subprocess(cmd: list[str], *, timeout: int | None = None) -> tuple[int, str]:
    """Run subprocess command with proper error handling.

    Args:
        cmd: Command and arguments list
        timeout: Optional timeout in seconds

    Returns:
        Tuple of (return_code, stderr_output)
    """
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        return result.returncode, result.stderr.strip()
    except subprocess.TimeoutExpired:
        return -1, f"Command timed out after {timeout} seconds"
    except OSError as e:
        return -1, str(e)
