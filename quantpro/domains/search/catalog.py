"""
Domain Catalog - Immutable domain configuration.

The catalog pairs every domain schema with its auto-detection trigger
keywords. Declaration order of ``domains`` is the tie-break priority used
when two domains match a query equally well.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, field_validator, model_validator

from quantpro.config.errors import ConfigurationError

from .models import DomainSchema

__all__ = ["DomainCatalog", "DEFAULT_CATALOG"]


class DomainCatalog(BaseModel):
    """Domain schemas, trigger keywords, and the fallback domain."""

    domains: tuple[DomainSchema, ...]
    keywords: Mapping[str, tuple[str, ...]]
    fallback: str

    model_config = {"frozen": True}

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(
        cls, value: Mapping[str, tuple[str, ...]]
    ) -> Mapping[str, tuple[str, ...]]:
        # Read-only view; trigger tables never change after construction
        return MappingProxyType(
            {
                name: tuple(keyword.lower() for keyword in keywords if keyword)
                for name, keywords in value.items()
            }
        )

    @model_validator(mode="after")
    def _check_consistency(self) -> DomainCatalog:
        names = [schema.name for schema in self.domains]
        if not names:
            raise ValueError("catalog needs at least one domain")
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate domain names: {names}")
        if set(names) != set(self.keywords):
            raise ValueError(
                "every domain needs both a schema and trigger keywords: "
                f"schemas={sorted(names)}, keywords={sorted(self.keywords)}"
            )
        if self.fallback not in names:
            raise ValueError(f"fallback domain '{self.fallback}' is not in the catalog")
        return self

    @property
    def names(self) -> list[str]:
        """Domain names in priority order."""
        return [schema.name for schema in self.domains]

    def contains(self, name: str) -> bool:
        return any(schema.name == name for schema in self.domains)

    def get(self, name: str) -> DomainSchema:
        """
        Look up a domain schema.

        Raises:
            ConfigurationError: If the domain is not in the catalog
        """
        for schema in self.domains:
            if schema.name == name:
                return schema
        raise ConfigurationError(name, known=self.names)

    def keywords_for(self, name: str) -> tuple[str, ...]:
        return self.keywords.get(name, ())


DEFAULT_CATALOG = DomainCatalog(
    domains=(
        DomainSchema(
            name="strategy",
            dataset="strategies.csv",
            search_fields=(
                "Strategy Name",
                "Category",
                "Keywords",
                "Best For",
                "Data Requirements",
            ),
            output_fields=(
                "Strategy Name",
                "Category",
                "Keywords",
                "Data Requirements",
                "Time Horizon",
                "Best For",
                "Complexity",
                "Key Parameters",
                "Performance Characteristics",
                "Market Conditions",
                "Capital Requirements",
                "Avoid For",
            ),
            title_field="Strategy Name",
            summary_fields=(
                "Category",
                "Time Horizon",
                "Complexity",
                "Best For",
                "Capital Requirements",
            ),
        ),
        DomainSchema(
            name="indicator",
            dataset="indicators.csv",
            search_fields=("Indicator Name", "Category", "Keywords", "Best For"),
            output_fields=(
                "Indicator Name",
                "Category",
                "Keywords",
                "Formula/Description",
                "Time-Domain",
                "Best For",
                "Parameters",
                "Interpretation",
                "Limitations",
                "Combine With",
                "Avoid For",
            ),
            title_field="Indicator Name",
            summary_fields=("Category", "Formula/Description", "Parameters", "Best For"),
        ),
        DomainSchema(
            name="risk",
            dataset="risk-management.csv",
            search_fields=("Risk Control", "Category", "Keywords", "Description", "Best For"),
            output_fields=(
                "Risk Control",
                "Category",
                "Keywords",
                "Description",
                "Parameters",
                "Best For",
                "Implementation",
                "Advantages",
                "Disadvantages",
                "Critical For",
            ),
            title_field="Risk Control",
            summary_fields=("Category", "Description", "Best For", "Critical For"),
        ),
        DomainSchema(
            name="data",
            dataset="data-sources.csv",
            search_fields=("Data Type", "Source", "Keywords", "Description", "Best For"),
            output_fields=(
                "Data Type",
                "Source",
                "Keywords",
                "Description",
                "Format",
                "Frequency",
                "Best For",
                "Requirements",
                "Typical Cost",
            ),
            title_field="Data Type",
            summary_fields=("Source", "Frequency", "Best For", "Typical Cost"),
        ),
        DomainSchema(
            name="anti-pattern",
            dataset="anti-patterns.csv",
            search_fields=("Category", "Issue", "Keywords", "Description"),
            output_fields=(
                "Category",
                "Issue",
                "Keywords",
                "Description",
                "Do",
                "Don't",
                "Severity",
                "Platform",
            ),
            title_field="Issue",
            summary_fields=("Category", "Severity", "Don't", "Do"),
        ),
    ),
    keywords={
        "strategy": (
            "strategy", "trading", "algorithm", "arbitrage", "ofi", "hawkes",
            "kalman", "momentum", "mean-reversion", "pairs", "market-making",
            "statistical", "execution", "vwap", "ml", "backtest",
        ),
        "indicator": (
            "indicator", "ema", "sma", "rsi", "macd", "bollinger", "atr",
            "stochastic", "adx", "vwap", "obv", "tci", "signal", "oscillator",
            "moving average",
        ),
        "risk": (
            "risk", "position", "sizing", "kelly", "stop", "loss", "drawdown",
            "var", "cvar", "leverage", "margin", "hedge", "portfolio", "limit",
            "exposure",
        ),
        "data": (
            "data", "tick", "order book", "l2", "ohlcv", "bars", "futures",
            "options", "on-chain", "news", "sentiment", "fundamental", "volume",
            "feed", "api",
        ),
        "anti-pattern": (
            "mistake", "error", "avoid", "don't", "anti-pattern", "pitfall",
            "bias", "overfitting", "look-ahead", "survivorship", "slippage",
            "bug", "wrong",
        ),
    },
    fallback="strategy",
)
