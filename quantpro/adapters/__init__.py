"""
Adapters - External storage integrations.

All file access is wrapped here to isolate domains from storage formats.
"""

from .tabular import CSVRecordStore

__all__ = ["CSVRecordStore"]
