"""
CSV Record Store - Load domain datasets from CSV files.

The first row names the fields; every following row becomes one record.
Short rows simply lack the trailing fields and surplus cells are ignored.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from quantpro.config.errors import SourceMalformedError, SourceUnavailableError

logger = logging.getLogger(__name__)

__all__ = ["CSVRecordStore"]


class CSVRecordStore:
    """
    Read-only CSV record store.

    Example:
        >>> store = CSVRecordStore()
        >>> records = store.load_records("data/indicators.csv")
        >>> records[0]["Indicator Name"]
        'RSI'
    """

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        """
        Initialize record store.

        Args:
            encoding: File encoding (default tolerates a UTF-8 BOM)
        """
        self._encoding = encoding

    def load_records(self, path: str | Path) -> list[dict[str, str]]:
        """
        Load every record of a CSV dataset.

        Args:
            path: CSV file path

        Returns:
            Records in file order, keyed by header names

        Raises:
            SourceUnavailableError: If the file is missing or unreadable
            SourceMalformedError: If the file has no data row or bad CSV syntax
        """
        path = Path(path)
        rows = self._read_rows(path)

        if len(rows) < 2:
            raise SourceMalformedError(
                path, "expected a header row and at least one data row", rows=len(rows)
            )

        header, *body = rows
        records = [dict(zip(header, row)) for row in body]

        logger.debug("Loaded %d records from %s", len(records), path)
        return records

    def _read_rows(self, path: Path) -> list[list[str]]:
        try:
            with open(path, newline="", encoding=self._encoding) as f:
                # Blank lines come back as empty rows
                return [row for row in csv.reader(f, strict=True) if row]
        except csv.Error as e:
            raise SourceMalformedError(path, str(e)) from e
        except UnicodeDecodeError as e:
            raise SourceMalformedError(path, f"not valid {self._encoding} text") from e
        except OSError as e:
            raise SourceUnavailableError(path, e.strerror or str(e)) from e
