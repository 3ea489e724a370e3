"""Caller-facing search operation.

`SearchService.search` always returns a payload: results on success, a
classified `ErrorPayload` on failure. Transports relay it as-is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from docgrep.config import Settings
from docgrep.engine import QueryEngine
from docgrep.exceptions import SearchError
from docgrep.models import BootstrapReport, FieldWeights
from docgrep.pipeline import ExtractionPipeline
from docgrep.readiness import ReadinessGate
from docgrep.reporting import ErrorReporter, SearchPayload


class SearchService:
    """Wires the readiness gate, the bootstrap pipeline and the query engine."""

    def __init__(
        self,
        corpus_path: Path,
        *,
        gate: Optional[ReadinessGate] = None,
        pipeline: Optional[ExtractionPipeline] = None,
        reporter: Optional[ErrorReporter] = None,
        weights: Optional[FieldWeights] = None,
    ) -> None:
        self.corpus_path = corpus_path
        self.gate = gate or ReadinessGate()
        self.reporter = reporter or ErrorReporter()
        self.pipeline = pipeline or ExtractionPipeline(reporter=self.reporter)
        self.engine = QueryEngine(self.gate, weights)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchService":
        reporter = ErrorReporter(verbose=settings.app.debug)
        pipeline = ExtractionPipeline(
            reporter=reporter,
            extensions=settings.corpus.extension_set(),
            concurrency=settings.corpus.concurrency,
        )
        return cls(
            Path(settings.corpus.path),
            pipeline=pipeline,
            reporter=reporter,
            weights=settings.search.weights(),
        )

    async def bootstrap(self) -> BootstrapReport:
        return await self.pipeline.bootstrap(self.corpus_path, self.gate)

    async def search(self, query_text: str) -> SearchPayload:
        try:
            results = await self.engine.search(query_text)
        except SearchError as e:
            return self.reporter.report_search_failure(e)
        return self.reporter.success(results)
