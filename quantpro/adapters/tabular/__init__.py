"""
Tabular Adapter - CSV datasets with a header row.
"""

from .store import CSVRecordStore

__all__ = ["CSVRecordStore"]
