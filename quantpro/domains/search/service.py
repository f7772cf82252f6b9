"""
Domain Search Service - BM25 search over one domain's dataset.

Pipeline per call:
1. Resolve the domain (explicit or auto-detected)
2. Load the domain's records from the record store
3. Concatenate each record's searchable fields into one document
4. Fit a fresh ranker and score the query
5. Drop non-positive scores, sort, truncate, project output fields

Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from quantpro.domains.ranking import BM25Ranker, Ranker, ScoredDocument

from .catalog import DEFAULT_CATALOG, DomainCatalog
from .contracts import RecordStore
from .models import DomainSchema, Record, SearchResponse
from .resolver import DomainResolver

logger = logging.getLogger(__name__)

__all__ = ["DomainSearchService", "build_document", "project_record"]


def build_document(record: Record, fields: Sequence[str]) -> str:
    """Join the record's values for ``fields`` in order; missing fields are skipped."""
    return " ".join(record[name] for name in fields if name in record)


def project_record(record: Record, fields: Sequence[str]) -> Record:
    """Keep only ``fields`` present in the record, in ``fields`` order."""
    return {name: record[name] for name in fields if name in record}


class DomainSearchService:
    """
    Search a curated knowledge base partitioned into domains.

    Example:
        >>> service = DomainSearchService(record_store=CSVRecordStore())
        >>> response = service.search("data", "rsi bollinger", domain="indicator", max_results=2)
        >>> response.count
        2
    """

    def __init__(
        self,
        record_store: RecordStore,
        catalog: DomainCatalog = DEFAULT_CATALOG,
        ranker_factory: Callable[[], Ranker] = BM25Ranker,
    ) -> None:
        """
        Initialize search service.

        Args:
            record_store: Loader for domain datasets
            catalog: Domain schemas and trigger keywords
            ranker_factory: Builds a fresh ranker for every search
        """
        self._store = record_store
        self._catalog = catalog
        self._resolver = DomainResolver(catalog)
        self._ranker_factory = ranker_factory

    @property
    def catalog(self) -> DomainCatalog:
        return self._catalog

    @property
    def resolver(self) -> DomainResolver:
        return self._resolver

    def dataset_path(self, data_dir: str | Path, domain: str) -> Path:
        """Path of a domain's dataset inside ``data_dir``."""
        return Path(data_dir) / self._catalog.get(domain).dataset

    def search(
        self,
        data_dir: str | Path,
        query: str,
        domain: str | None = None,
        max_results: int = 3,
    ) -> SearchResponse:
        """
        Execute a domain search.

        Args:
            data_dir: Directory holding the domain datasets
            query: Free-text query
            domain: Domain to search; empty or None to auto-detect
            max_results: Upper bound on returned records (<= 0 returns none)

        Returns:
            Search response; zero results when nothing overlaps the query

        Raises:
            ConfigurationError: If ``domain`` is given but unknown
            SourceUnavailableError: If the dataset cannot be read
            SourceMalformedError: If the dataset lacks a header plus one row
        """
        name = self._resolver.resolve(query, domain)
        schema = self._catalog.get(name)

        records = self._store.load_records(self.dataset_path(data_dir, name))
        ranked = self._rank(schema, records, query)

        results = [
            project_record(records[hit.index], schema.output_fields)
            for hit in ranked[: max(max_results, 0)]
        ]

        logger.info(
            "Domain search: domain=%s query='%s' -> %d results (of %d records)",
            name,
            query[:50],
            len(results),
            len(records),
        )

        return SearchResponse(
            domain=name,
            query=query,
            dataset=schema.dataset,
            count=len(results),
            results=results,
        )

    def _rank(
        self,
        schema: DomainSchema,
        records: Sequence[Record],
        query: str,
    ) -> list[ScoredDocument]:
        """Positive-scoring documents, best first, ties in record order."""
        documents = [build_document(record, schema.search_fields) for record in records]

        ranker = self._ranker_factory()
        ranker.fit(documents)

        positive = [hit for hit in ranker.score(query) if hit.score > 0]
        # sorted() is stable, so equal scores keep corpus order
        return sorted(positive, key=lambda hit: hit.score, reverse=True)
