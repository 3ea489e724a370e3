"""Inverted index and corpus construction."""

from .base_search import BaseSearch, RankedHit
from .corpus import Corpus, IndexBuilder
from .whoosh_index import WhooshIndex

__all__ = ["BaseSearch", "Corpus", "IndexBuilder", "RankedHit", "WhooshIndex"]
