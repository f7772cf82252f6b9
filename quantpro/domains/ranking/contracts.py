"""
Ranking Contracts - Interfaces for ranking domain.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models import CorpusIndex, ScoredDocument


@runtime_checkable
class Ranker(Protocol):
    """Contract for lexical ranking implementations."""

    def fit(self, documents: Sequence[str]) -> CorpusIndex:
        """Build an index over the documents, replacing any previous one."""
        ...

    def score(self, query: str) -> list[ScoredDocument]:
        """Score every fitted document against the query, in corpus order."""
        ...
