"""Bootstrap pipeline: discover files, extract them concurrently, build the
corpus and open the readiness gate.

A failure on one file is logged and skipped; it never stops the others.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from docgrep.exceptions import ConfigError
from docgrep.models import BootstrapReport, Document, ExtractionFailure, ExtractionOutcome
from docgrep.parsers import ParserRegistry
from docgrep.readiness import ReadinessGate
from docgrep.reporting import ErrorReporter
from docgrep.search import IndexBuilder

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".pdf", ".md", ".mdx", ".html", ".htm", ".txt")


def discover_files(directory: Path, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> List[Path]:
    """List regular files in ``directory`` with an accepted extension, sorted by name."""
    if not directory.is_dir():
        raise ConfigError(f"Corpus directory not found: {directory}")
    accepted = {e.lower() for e in extensions}
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in accepted),
        key=lambda p: p.name,
    )


class ExtractionPipeline:
    """Turns a directory of source files into Documents."""

    def __init__(
        self,
        *,
        registry: Optional[ParserRegistry] = None,
        reporter: Optional[ErrorReporter] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        concurrency: int = 8,
    ) -> None:
        if concurrency < 1:
            raise ConfigError("Extraction concurrency must be at least 1")
        self._registry = registry or ParserRegistry()
        self._reporter = reporter or ErrorReporter()
        self._extensions = tuple(extensions)
        self._concurrency = concurrency

    async def extract_file(self, path: Path) -> ExtractionOutcome:
        try:
            parsed = await asyncio.to_thread(self._registry.parse, path)
        except Exception as e:
            failure = ExtractionFailure(file=path.name, cause=e)
            self._reporter.report_extraction_failure(failure)
            return failure
        return Document.from_text(path.name, parsed.text)

    async def extract_directory(self, directory: Path) -> List[ExtractionOutcome]:
        """Extract every accepted file; outcomes are returned in discovery order."""
        paths = await asyncio.to_thread(discover_files, directory, self._extensions)
        logger.info("Extracting %d files from %s", len(paths), directory)
        sem = asyncio.Semaphore(self._concurrency)

        async def worker(path: Path) -> ExtractionOutcome:
            async with sem:
                return await self.extract_file(path)

        return list(await asyncio.gather(*(worker(p) for p in paths)))

    async def bootstrap(self, directory: Path, gate: ReadinessGate) -> BootstrapReport:
        """Extract, index and publish the corpus.

        The gate opens once every file has resolved. `IndexInsertionConflict`
        propagates and leaves the gate closed.
        """
        outcomes = await self.extract_directory(directory)
        builder = IndexBuilder()
        report = BootstrapReport()
        for outcome in outcomes:
            if isinstance(outcome, ExtractionFailure):
                report.failures.append(outcome)
                continue
            builder.add_document(outcome)
            report.documents += 1
        gate.mark_ready(builder.build())
        logger.info(
            "Bootstrap complete: %d documents indexed, %d files skipped",
            report.documents,
            len(report.failures),
        )
        return report
