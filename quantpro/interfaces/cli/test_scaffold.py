"""Tests for project scaffolding."""

from __future__ import annotations

from pathlib import Path

import pytest

from quantpro.config.errors import ScaffoldError
from quantpro.config.settings import BUNDLED_DATA_DIR
from quantpro.domains.search import DEFAULT_CATALOG

from .scaffold import WORKFLOW_FILENAME, initialize_project, render_skill_doc


def test_initialize_project_copies_every_dataset(tmp_path: Path) -> None:
    report = initialize_project(tmp_path, "antigravity", BUNDLED_DATA_DIR, DEFAULT_CATALOG)

    assert len(report.datasets) == len(DEFAULT_CATALOG.domains)
    for schema in DEFAULT_CATALOG.domains:
        copied = report.data_dir / schema.dataset
        assert copied.read_bytes() == (BUNDLED_DATA_DIR / schema.dataset).read_bytes()

    assert report.workflow_path == tmp_path / ".agent" / "workflows" / WORKFLOW_FILENAME
    assert report.skill_path.is_file()


def test_initialize_project_is_repeatable(tmp_path: Path) -> None:
    """Test re-running init over an existing project succeeds."""
    initialize_project(tmp_path, "agent-a", BUNDLED_DATA_DIR, DEFAULT_CATALOG)
    report = initialize_project(tmp_path, "agent-b", BUNDLED_DATA_DIR, DEFAULT_CATALOG)

    assert "AI Agent: agent-b" in report.workflow_path.read_text(encoding="utf-8")


def test_initialize_project_custom_shared_dir(tmp_path: Path) -> None:
    report = initialize_project(
        tmp_path, "agent", BUNDLED_DATA_DIR, DEFAULT_CATALOG, shared_dir_name="kb"
    )
    assert report.shared_dir == tmp_path / ".shared" / "kb"


def test_initialize_project_missing_datasets(tmp_path: Path) -> None:
    source = tmp_path / "source"
    source.mkdir()
    (source / "indicators.csv").write_text("Indicator Name\nRSI\n", encoding="utf-8")

    with pytest.raises(ScaffoldError) as exc_info:
        initialize_project(tmp_path / "project", "agent", source, DEFAULT_CATALOG)

    assert "strategies.csv" in exc_info.value.details["missing"]
    assert "indicators.csv" not in exc_info.value.details["missing"]
    assert not (tmp_path / "project").exists()


def test_initialize_project_requires_agent_name(tmp_path: Path) -> None:
    with pytest.raises(ScaffoldError):
        initialize_project(tmp_path, "  ", BUNDLED_DATA_DIR, DEFAULT_CATALOG)


def test_skill_doc_lists_domains() -> None:
    doc = render_skill_doc(DEFAULT_CATALOG, "quant-trading-pro")
    for schema in DEFAULT_CATALOG.domains:
        assert schema.dataset in doc
    assert "`strategy`" in doc
