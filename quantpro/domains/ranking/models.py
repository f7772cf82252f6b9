"""
Ranking Models - Data types for ranking domain.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoredDocument:
    """Relevance of one corpus document to a query."""

    index: int  # Position in the fitted corpus
    score: float  # 0.0 means no vocabulary overlap


@dataclass(frozen=True)
class CorpusIndex:
    """
    Statistics derived from one fitted document collection.

    Built from scratch by ``BM25Ranker.fit`` and never mutated afterwards.
    """

    doc_lengths: tuple[int, ...] = ()
    avgdl: float = 0.0
    doc_freqs: dict[str, int] = field(default_factory=dict)
    idf: dict[str, float] = field(default_factory=dict)
    term_freqs: tuple[Counter[str], ...] = ()

    @property
    def size(self) -> int:
        """Number of documents in the corpus."""
        return len(self.doc_lengths)

    @property
    def vocabulary_size(self) -> int:
        return len(self.idf)

    @classmethod
    def empty(cls) -> CorpusIndex:
        return cls()
