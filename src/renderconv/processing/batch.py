"""
Single-image batch conversion.

Every matching file directly inside the source directory is converted into
the destination directory. Each entry is an independent unit of work: a
failed conversion is logged and the batch moves on.
"""

from __future__ import annotations

import concurrent.futures as futures

from ..config import Config
from ..core.types import ConversionOptions, ConversionResult, SourceEntry
from ..output.logger import SimpleLogger
from ..utils.path import output_target, scan_source_entries
from .converter import ImageConverter


class BatchConverter:
    """Convert source stills to the target format."""

    def __init__(self, config: Config, converter: ImageConverter, logger: SimpleLogger):
        self.config = config
        self.converter = converter
        self.logger = logger

    def run(self) -> list[ConversionResult]:
        """Convert every source entry.

        Returns:
            One result per entry, in scan order.

        Raises:
            ScanError: When the source directory exists but cannot be listed.
        """
        entries = scan_source_entries(self.config)
        self.logger.section(
            f"Converting individual {self.config.extensions.input_ext} files in {self.config.paths.source_dir}"
        )
        if not entries:
            return []

        if self.config.converter.workers > 1:
            return self._run_parallel(entries)

        results = []
        for i, entry in enumerate(entries, 1):
            self._announce(i, len(entries), entry)
            results.append(self._report(entry, self._convert_entry(entry)))
        return results

    def _run_parallel(self, entries: list[SourceEntry]) -> list[ConversionResult]:
        with futures.ThreadPoolExecutor(max_workers=self.config.converter.workers) as pool:
            fut_list = []
            for i, entry in enumerate(entries, 1):
                self._announce(i, len(entries), entry)
                fut_list.append((entry, pool.submit(self._convert_entry, entry)))
            return [self._report(entry, fut.result()) for entry, fut in fut_list]

    def _announce(self, i: int, total: int, entry: SourceEntry) -> None:
        self.logger.info(f"[{i:02d}/{total}] {entry.path}")

    def _convert_entry(self, entry: SourceEntry) -> ConversionResult:
        target = output_target(entry, self.config)
        try:
            return self.converter.convert([entry.path], target, ConversionOptions())
        except Exception as ex:
            return ConversionResult(ok=False, output=target, returncode=-1, message=f"Exception: {type(ex).__name__}: {ex}")

    def _report(self, entry: SourceEntry, result: ConversionResult) -> ConversionResult:
        if not result.ok:
            self.logger.error(f"    -> {entry.name}: {result.message}")
        return result
