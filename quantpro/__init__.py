"""
QuantPro - Offline quantitative trading knowledge search.

Example:
    >>> from quantpro.adapters import CSVRecordStore
    >>> from quantpro.domains.search import DomainSearchService
    >>> service = DomainSearchService(record_store=CSVRecordStore())
    >>> response = service.search("data", "rsi bollinger", domain="indicator")
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
