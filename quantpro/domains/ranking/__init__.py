"""
Ranking Domain - Lexical relevance ranking.

This domain handles:
- Tokenization
- BM25 index construction (document frequencies, IDF)
- Query scoring against a fitted corpus

It knows nothing about domains or record schemas.
"""

from .bm25 import BM25Ranker, inverse_document_frequency
from .contracts import Ranker
from .models import CorpusIndex, ScoredDocument
from .tokenizer import tokenize

__all__ = [
    "Ranker",
    "CorpusIndex",
    "ScoredDocument",
    "BM25Ranker",
    "inverse_document_frequency",
    "tokenize",
]
