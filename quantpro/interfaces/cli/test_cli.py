"""Tests for the CLI."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from quantpro import __version__
from quantpro.config import get_settings
from quantpro.config.settings import BUNDLED_DATA_DIR

from .main import app
from .render import summary_lines, truncate

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point the CLI at the bundled knowledge base."""
    monkeypatch.setenv("QUANTPRO_DATA_DIR", str(BUNDLED_DATA_DIR))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# --- search ---


def test_search_explicit_domain() -> None:
    """Test the RSI/Bollinger scenario end to end."""
    result = runner.invoke(app, ["search", "rsi", "bollinger", "-d", "indicator", "-n", "2"])

    assert result.exit_code == 0, result.output
    assert "Domain: indicator" in result.output
    assert "Found 2 results" in result.output
    assert "RSI" in result.output
    assert "Bollinger Bands" in result.output


def test_search_json_output() -> None:
    result = runner.invoke(app, ["search", "rsi bollinger", "-d", "indicator", "-n", "2", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["domain"] == "indicator"
    assert payload["dataset"] == "indicators.csv"
    assert payload["count"] == 2
    assert [r["Indicator Name"] for r in payload["results"]] == ["RSI", "Bollinger Bands"]


def test_search_auto_detects_domain() -> None:
    result = runner.invoke(app, ["search", "kelly position sizing", "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["domain"] == "risk"
    assert payload["results"][0]["Risk Control"] == "Kelly Criterion"


def test_search_default_max_results() -> None:
    """Test the default limit comes from settings."""
    result = runner.invoke(app, ["search", "trend", "-d", "indicator", "--json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["count"] <= 3


def test_search_no_results() -> None:
    result = runner.invoke(app, ["search", "zzz_no_such_term"])

    assert result.exit_code == 0, result.output
    assert "Found 0 results" in result.output
    assert "No results found" in result.output


def test_search_unknown_domain() -> None:
    result = runner.invoke(app, ["search", "rsi", "-d", "nonexistent"])

    assert result.exit_code == 1
    assert "unknown domain: nonexistent" in result.output


def test_search_unknown_domain_json() -> None:
    result = runner.invoke(app, ["search", "rsi", "-d", "nonexistent", "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["error"]["code"] == "CONFIG_UNKNOWN_DOMAIN"


def test_search_missing_data_dir(tmp_path: Path) -> None:
    result = runner.invoke(app, ["search", "rsi", "--data-dir", str(tmp_path / "missing")])

    assert result.exit_code == 1
    assert "dataset unreadable" in result.output


def test_search_header_only_dataset(tmp_path: Path) -> None:
    (tmp_path / "indicators.csv").write_text("Indicator Name\n", encoding="utf-8")
    result = runner.invoke(
        app, ["search", "rsi", "-d", "indicator", "--data-dir", str(tmp_path), "--json"]
    )

    assert result.exit_code == 1
    assert json.loads(result.stdout)["error"]["code"] == "SOURCE_MALFORMED"


def test_search_rejects_non_positive_limit() -> None:
    result = runner.invoke(app, ["search", "rsi", "-n", "0"])
    assert result.exit_code == 2


def test_search_requires_query() -> None:
    result = runner.invoke(app, ["search"])
    assert result.exit_code == 2


# --- init ---


def test_init_scaffolds_project(tmp_path: Path) -> None:
    result = runner.invoke(app, ["init", "--ai", "antigravity", "--dir", str(tmp_path)])

    assert result.exit_code == 0, result.output
    shared = tmp_path / ".shared" / "quant-trading-pro"
    assert (shared / "data" / "indicators.csv").is_file()
    assert (shared / "SKILL.md").is_file()
    workflow = tmp_path / ".agent" / "workflows" / "use-quant-skill.md"
    assert "AI Agent: antigravity" in workflow.read_text(encoding="utf-8")
    assert "Copied: 5 CSV files" in result.output


def test_init_requires_ai(tmp_path: Path) -> None:
    result = runner.invoke(app, ["init", "--dir", str(tmp_path)])
    assert result.exit_code == 2


def test_init_missing_source_data(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["init", "--ai", "agent", "--dir", str(tmp_path), "--data-dir", str(tmp_path / "empty")],
    )

    assert result.exit_code == 1
    assert "datasets not found" in result.output


# --- domains / version ---


def test_domains_lists_catalog() -> None:
    result = runner.invoke(app, ["domains"])

    assert result.exit_code == 0, result.output
    for name in ("strategy", "indicator", "risk", "data", "anti-pattern"):
        assert name in result.output


def test_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


# --- rendering helpers ---


def test_truncate() -> None:
    assert truncate("short") == "short"
    assert truncate("x" * 120) == "x" * 100 + "..."


def test_summary_lines_skip_empty_and_title() -> None:
    from quantpro.domains.search import DEFAULT_CATALOG

    schema = DEFAULT_CATALOG.get("anti-pattern")
    record = {
        "Issue": "Overfitting",
        "Category": "Overfitting",
        "Severity": "",
        "Don't": "Optimize dozens of parameters",
        "Do": "Walk-forward tests",
    }

    assert summary_lines(record, schema) == [
        ("Don't", "Optimize dozens of parameters"),
        ("Do", "Walk-forward tests"),
    ]
