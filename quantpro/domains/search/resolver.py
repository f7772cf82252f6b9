"""
Domain Resolver - Pick the dataset partition a query should search.

Explicit domain names are validated against the catalog. Otherwise each
domain scores one point per trigger keyword found anywhere in the
lower-cased query (substring containment, so multi-word keywords and
fragments match). Highest score wins, ties go to the domain declared
first, and a query with no hits falls back to the catalog default.
"""

from __future__ import annotations

import logging

from .catalog import DEFAULT_CATALOG, DomainCatalog

logger = logging.getLogger(__name__)

__all__ = ["DomainResolver"]


class DomainResolver:
    """
    Resolve explicit or auto-detected domains.

    Example:
        >>> resolver = DomainResolver()
        >>> resolver.detect("kelly position sizing")
        'risk'
    """

    def __init__(self, catalog: DomainCatalog = DEFAULT_CATALOG) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> DomainCatalog:
        return self._catalog

    def resolve(self, query: str, explicit_domain: str | None = None) -> str:
        """
        Resolve the domain to search.

        Args:
            query: Free-text query
            explicit_domain: Caller-selected domain, empty or None to auto-detect

        Returns:
            Domain name present in the catalog

        Raises:
            ConfigurationError: If an explicit domain is not in the catalog
        """
        name = (explicit_domain or "").strip().lower()
        if name:
            return self._catalog.get(name).name
        return self.detect(query)

    def keyword_hits(self, query: str) -> dict[str, int]:
        """Count trigger keywords contained in the query, per domain in priority order."""
        text = query.lower()
        return {
            name: sum(1 for keyword in self._catalog.keywords_for(name) if keyword in text)
            for name in self._catalog.names
        }

    def detect(self, query: str) -> str:
        """Auto-detect the most relevant domain for a query."""
        hits = self.keyword_hits(query)

        best_domain = self._catalog.fallback
        best_score = 0
        # Strict > keeps the earliest declared domain on ties
        for name in self._catalog.names:
            if hits[name] > best_score:
                best_domain = name
                best_score = hits[name]

        if best_score == 0:
            logger.debug(
                "No trigger keywords in query '%s', using fallback domain %s",
                query[:50],
                best_domain,
            )
        else:
            logger.debug("Detected domain %s (hits=%s)", best_domain, hits)

        return best_domain
