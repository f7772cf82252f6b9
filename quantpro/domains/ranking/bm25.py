"""
BM25 Ranker - Okapi BM25 scoring over an in-memory corpus.

Features:
- Smoothed IDF that stays positive for terms present in most documents
- Term-frequency saturation (k1) and length normalization (b)
- Separate fit/score so one index can serve repeated queries
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Sequence

from .models import CorpusIndex, ScoredDocument
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

__all__ = ["BM25Ranker", "inverse_document_frequency"]


def inverse_document_frequency(n_docs: int, doc_freq: int) -> float:
    """
    Smoothed BM25 IDF.

    ``ln((N - df + 0.5) / (df + 0.5) + 1)``, positive for every ``df <= N``.
    """
    return math.log((n_docs - doc_freq + 0.5) / (doc_freq + 0.5) + 1.0)


class BM25Ranker:
    """
    Okapi BM25 ranker.

    Example:
        >>> ranker = BM25Ranker()
        >>> _ = ranker.fit(["RSI momentum oscillator", "Bollinger Bands volatility"])
        >>> [round(r.score, 3) for r in ranker.score("rsi")]
        [0.693, 0.0]
    """

    def __init__(self, k1: float = 1.5, b: float = 0.75) -> None:
        """
        Initialize ranker.

        Args:
            k1: Term-frequency saturation (typical 1.2-2.0)
            b: Length-normalization strength (0-1)
        """
        if k1 < 0:
            raise ValueError(f"k1 must be non-negative, got {k1}")
        if not 0.0 <= b <= 1.0:
            raise ValueError(f"b must be between 0 and 1, got {b}")

        self._k1 = k1
        self._b = b
        self._index: CorpusIndex | None = None

    @property
    def k1(self) -> float:
        return self._k1

    @property
    def b(self) -> float:
        return self._b

    @property
    def index(self) -> CorpusIndex | None:
        """The fitted index, or None before ``fit``."""
        return self._index

    def fit(self, documents: Sequence[str]) -> CorpusIndex:
        """
        Build the index from raw documents.

        Args:
            documents: Document texts in corpus order

        Returns:
            The new index (also held for subsequent ``score`` calls)
        """
        if not documents:
            self._index = CorpusIndex.empty()
            return self._index

        corpus = [tokenize(doc) for doc in documents]
        doc_lengths = tuple(len(tokens) for tokens in corpus)
        avgdl = sum(doc_lengths) / len(corpus)

        # Each document counts once per distinct term
        doc_freqs: Counter[str] = Counter()
        for tokens in corpus:
            doc_freqs.update(set(tokens))

        n_docs = len(corpus)
        idf = {
            term: inverse_document_frequency(n_docs, freq)
            for term, freq in doc_freqs.items()
        }

        self._index = CorpusIndex(
            doc_lengths=doc_lengths,
            avgdl=avgdl,
            doc_freqs=dict(doc_freqs),
            idf=idf,
            term_freqs=tuple(Counter(tokens) for tokens in corpus),
        )

        logger.debug(
            "BM25 index fitted: docs=%d, vocabulary=%d, avgdl=%.2f",
            n_docs,
            len(idf),
            avgdl,
        )
        return self._index

    def score(self, query: str) -> list[ScoredDocument]:
        """
        Score every document against the query.

        Query tokens missing from the vocabulary contribute nothing, and a
        repeated query token counts once.

        Returns:
            One entry per document in corpus order; empty when unfitted
        """
        index = self._index
        if index is None or index.size == 0:
            return []

        # Vocabulary hits only; sorted for a stable summation order
        terms = sorted({token for token in tokenize(query) if token in index.idf})

        results = []
        for position, (doc_len, freqs) in enumerate(
            zip(index.doc_lengths, index.term_freqs)
        ):
            score = 0.0
            for term in terms:
                tf = freqs.get(term, 0)
                if tf == 0:
                    continue
                norm = self._k1 * (1.0 - self._b + self._b * doc_len / index.avgdl)
                score += index.idf[term] * tf * (self._k1 + 1.0) / (tf + norm)
            results.append(ScoredDocument(index=position, score=score))

        return results
