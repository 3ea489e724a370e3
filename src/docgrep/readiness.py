"""One-shot lifecycle gate between bootstrap and query serving.

The gate starts `NotReady` and moves to `Ready(corpus)` exactly once, after
every discovered file has been processed and the corpus frozen. Readers never
observe a partially built corpus.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Union

from docgrep.exceptions import ServiceNotReady
from docgrep.search import Corpus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotReady:
    """Bootstrap is still running."""


@dataclass(frozen=True)
class Ready:
    """Bootstrap finished; the corpus is read-only from here on."""

    corpus: Corpus


ReadinessState = Union[NotReady, Ready]


class ReadinessGate:
    """Holds the lifecycle state shared by the bootstrap task and all callers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._state: ReadinessState = NotReady()

    @property
    def state(self) -> ReadinessState:
        with self._lock:
            return self._state

    @property
    def is_ready(self) -> bool:
        return isinstance(self.state, Ready)

    def mark_ready(self, corpus: Corpus) -> None:
        with self._lock:
            if isinstance(self._state, Ready):
                raise RuntimeError("Readiness gate can only be opened once")
            self._state = Ready(corpus)
        logger.info("Search is ready (%d documents)", len(corpus))

    def require_ready(self) -> Corpus:
        """Return the corpus, or raise `ServiceNotReady` while bootstrapping."""
        state = self.state
        if isinstance(state, Ready):
            return state.corpus
        raise ServiceNotReady()
