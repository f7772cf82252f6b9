"""
Search Contracts - Interfaces for search domain.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from .models import Record, SearchResponse


@runtime_checkable
class RecordStore(Protocol):
    """Contract for dataset loaders."""

    def load_records(self, path: str | Path) -> list[Record]:
        """Load every record of a dataset, in file order."""
        ...


@runtime_checkable
class SearchService(Protocol):
    """Contract for domain search implementations."""

    def search(
        self,
        data_dir: str | Path,
        query: str,
        domain: str | None = None,
        max_results: int = 3,
    ) -> SearchResponse:
        """Execute search and return projected results."""
        ...
