"""
Console and file logging for renderconv runs.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

LEVEL_STYLES = {
    "[INFO]": "cyan",
    "[SUCCESS]": "green",
    "[WARNING]": "yellow",
    "[ERROR]": "bold red",
}
BANNER = "=" * 60


class SimpleLogger:
    """Logger that writes timestamped lines to the console and an optional file.

    The console copy is styled through rich; the file copy stays plain text.
    """

    def __init__(self, log_file: Path | None = None):
        self.log_file = log_file
        self.console = Console(highlight=False, soft_wrap=True)
        self.err_console = Console(stderr=True, highlight=False, soft_wrap=True)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._append("", BANNER, f"Session started: {datetime.now().isoformat()}", BANNER)

    def _append(self, *lines: str) -> None:
        if not self.log_file:
            return
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.writelines(line + '\n' for line in lines)
        except OSError:
            pass  # Don't fail a run on logging errors

    def log(self, message: str, prefix: str = "", error: bool = False, style: str | None = None) -> None:
        """Log a message to console and file.

        Args:
            message: The message to log
            prefix: Optional prefix like [INFO], [ERROR], etc.
            error: Whether to write to stderr instead of stdout
            style: Optional rich style for the message body
        """
        stamp = f"[{datetime.now().strftime('%H:%M:%S')}] "
        head = f"{stamp}{prefix} " if prefix else stamp

        text = Text(head + message)
        if prefix in LEVEL_STYLES:
            text.stylize(LEVEL_STYLES[prefix], len(stamp), len(stamp) + len(prefix))
        if style:
            text.stylize(style, len(head))

        (self.err_console if error else self.console).print(text)
        self._append(text.plain)

    def section(self, title: str) -> None:
        """Start a new phase: a rule and a bold title line."""
        self.console.print(Rule(style="dim"))
        self._append("", BANNER)
        self.log(title, style="bold")
        self._append(BANNER)

    def success(self, message: str) -> None:
        self.log(message, prefix="[SUCCESS]")

    def error(self, message: str) -> None:
        self.log(message, prefix="[ERROR]", error=True)

    def warning(self, message: str) -> None:
        self.log(message, prefix="[WARNING]")

    def info(self, message: str) -> None:
        self.log(message, prefix="[INFO]")
