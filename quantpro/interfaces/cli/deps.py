"""
Dependencies - Wire domain services from settings.
"""

from __future__ import annotations

from functools import partial

from quantpro.adapters.tabular import CSVRecordStore
from quantpro.config import Settings, get_settings
from quantpro.domains.ranking import BM25Ranker
from quantpro.domains.search import DEFAULT_CATALOG, DomainCatalog, DomainSearchService


def get_record_store() -> CSVRecordStore:
    return CSVRecordStore()


def get_search_service(
    settings: Settings | None = None,
    catalog: DomainCatalog = DEFAULT_CATALOG,
) -> DomainSearchService:
    """Build a search service using the configured BM25 constants."""
    settings = settings or get_settings()
    return DomainSearchService(
        record_store=get_record_store(),
        catalog=catalog,
        ranker_factory=partial(BM25Ranker, k1=settings.bm25_k1, b=settings.bm25_b),
    )
