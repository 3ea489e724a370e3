"""Failure classification and routing.

Every failure goes to the internal channel (the module logger). Search-time
failures additionally become an `ErrorPayload` for the caller. Underlying
details reach either channel only in verbose mode.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from docgrep.exceptions import SearchError
from docgrep.models import ExtractionFailure, SearchResult

logger = logging.getLogger(__name__)


class ResultItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str
    score: float
    matching_lines: List[str] = Field(alias="matchingLines")

    @classmethod
    def from_result(cls, result: SearchResult) -> "ResultItem":
        return cls(
            ref=result.ref, score=result.score, matching_lines=list(result.matching_lines)
        )


class SuccessPayload(BaseModel):
    results: List[ResultItem] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ErrorPayload(BaseModel):
    error: str
    kind: str
    retryable: bool = False
    details: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


SearchPayload = Union[SuccessPayload, ErrorPayload]


def _describe(exc: BaseException) -> str:
    parts = [f"{type(exc).__name__}: {exc}"]
    cause = exc.__cause__
    while cause is not None:
        parts.append(f"{type(cause).__name__}: {cause}")
        cause = cause.__cause__
    return " <- ".join(parts)


class ErrorReporter:
    """Routes failures to the log and, for search errors, to the caller."""

    _MESSAGES = {
        "service_not_ready": "Search index is not ready yet, retry later",
        "query_execution_fault": "Search failed due to an internal error",
    }

    def __init__(self, *, verbose: bool = False) -> None:
        self.verbose = verbose

    def report_extraction_failure(self, failure: ExtractionFailure) -> None:
        """Log a per-file failure; never surfaced to search callers."""
        if self.verbose:
            logger.warning(
                "Skipping %s: extraction failed (%s)",
                failure.file,
                _describe(failure.cause),
                exc_info=failure.cause,
            )
        else:
            logger.warning("Skipping %s: extraction failed", failure.file)

    def report_search_failure(self, exc: SearchError) -> ErrorPayload:
        message = self._MESSAGES.get(exc.kind, "Search failed")
        details = _describe(exc) if self.verbose else None
        level = logging.INFO if exc.retryable else logging.ERROR
        if self.verbose:
            logger.log(level, "Search failed: %s (%s)", exc.kind, details, exc_info=exc)
        else:
            logger.log(level, "Search failed: %s", exc.kind)
        return ErrorPayload(
            error=message, kind=exc.kind, retryable=exc.retryable, details=details
        )

    def success(self, results: List[SearchResult]) -> SuccessPayload:
        return SuccessPayload(results=[ResultItem.from_result(r) for r in results])
