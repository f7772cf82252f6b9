"""
Search Models - Data types for search domain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# One dataset row: field name -> value, in header order
Record = dict[str, str]


class DomainSchema(BaseModel):
    """Static description of one searchable domain."""

    name: str = Field(..., min_length=1)
    dataset: str = Field(..., min_length=1)  # File name inside the data directory
    search_fields: tuple[str, ...]
    output_fields: tuple[str, ...]
    title_field: str = ""  # Primary display field for terminal output
    summary_fields: tuple[str, ...] = ()

    model_config = {"frozen": True}


class SearchResponse(BaseModel):
    """Result of one domain search."""

    domain: str
    query: str
    dataset: str
    count: int = 0
    results: list[Record] = Field(default_factory=list)
