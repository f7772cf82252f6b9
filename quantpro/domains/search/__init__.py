"""
Search Domain - Domain-partitioned knowledge search.

This domain handles:
- Domain schemas and trigger keywords (catalog)
- Domain auto-detection from query text
- Per-record document building and BM25 ranking
- Projection of ranked records into output fields
"""

from .catalog import DEFAULT_CATALOG, DomainCatalog
from .contracts import RecordStore, SearchService
from .models import DomainSchema, Record, SearchResponse
from .resolver import DomainResolver
from .service import DomainSearchService, build_document, project_record

__all__ = [
    # Contracts
    "RecordStore",
    "SearchService",
    # Models
    "Record",
    "DomainSchema",
    "SearchResponse",
    # Configuration
    "DomainCatalog",
    "DEFAULT_CATALOG",
    # Implementations
    "DomainResolver",
    "DomainSearchService",
    "build_document",
    "project_record",
]
