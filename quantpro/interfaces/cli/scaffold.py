"""
Project Scaffolding - Install the knowledge base into a project for an AI agent.

Creates:
    <target>/.agent/workflows/use-quant-skill.md
    <target>/.shared/<shared_dir_name>/data/<dataset>.csv
    <target>/.shared/<shared_dir_name>/SKILL.md
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from quantpro.config.errors import ScaffoldError
from quantpro.domains.search import DomainCatalog

logger = logging.getLogger(__name__)

__all__ = [
    "ScaffoldReport",
    "initialize_project",
    "render_skill_doc",
    "render_workflow",
    "WORKFLOW_FILENAME",
]

WORKFLOW_FILENAME = "use-quant-skill.md"


@dataclass
class ScaffoldReport:
    """Paths produced by one initialization."""

    agent_dir: Path
    shared_dir: Path
    data_dir: Path
    workflow_path: Path
    skill_path: Path
    datasets: list[Path] = field(default_factory=list)


def initialize_project(
    target_dir: Path,
    ai_name: str,
    source_data_dir: Path,
    catalog: DomainCatalog,
    shared_dir_name: str = "quant-trading-pro",
) -> ScaffoldReport:
    """
    Scaffold agent workflow docs and copy every catalog dataset.

    Args:
        target_dir: Project root to initialize
        ai_name: Name of the AI agent the workflow is written for
        source_data_dir: Directory holding the datasets to copy
        catalog: Domains whose datasets are copied and documented
        shared_dir_name: Folder name under ``.shared``

    Returns:
        Report of created paths

    Raises:
        ScaffoldError: If a dataset is missing or a file cannot be written
    """
    if not ai_name.strip():
        raise ScaffoldError("AI agent name must not be empty")

    missing = [
        schema.dataset
        for schema in catalog.domains
        if not (source_data_dir / schema.dataset).is_file()
    ]
    if missing:
        raise ScaffoldError(
            f"datasets not found in {source_data_dir}: {', '.join(missing)}",
            {"source_data_dir": str(source_data_dir), "missing": missing},
        )

    agent_dir = target_dir / ".agent" / "workflows"
    shared_dir = target_dir / ".shared" / shared_dir_name
    data_dir = shared_dir / "data"

    report = ScaffoldReport(
        agent_dir=agent_dir,
        shared_dir=shared_dir,
        data_dir=data_dir,
        workflow_path=agent_dir / WORKFLOW_FILENAME,
        skill_path=shared_dir / "SKILL.md",
    )

    try:
        agent_dir.mkdir(parents=True, exist_ok=True)
        data_dir.mkdir(parents=True, exist_ok=True)

        for schema in catalog.domains:
            destination = data_dir / schema.dataset
            shutil.copyfile(source_data_dir / schema.dataset, destination)
            report.datasets.append(destination)

        report.workflow_path.write_text(
            render_workflow(ai_name, catalog, shared_dir_name), encoding="utf-8"
        )
        report.skill_path.write_text(
            render_skill_doc(catalog, shared_dir_name), encoding="utf-8"
        )
    except OSError as e:
        raise ScaffoldError(
            f"failed to initialize {target_dir}: {e}", {"target_dir": str(target_dir)}
        ) from e

    logger.info(
        "Initialized %s for agent %s (%d datasets)",
        target_dir,
        ai_name,
        len(report.datasets),
    )
    return report


def _domain_lines(catalog: DomainCatalog) -> str:
    return "\n".join(
        f"- **{schema.name}** (`{schema.dataset}`)" for schema in catalog.domains
    )


def render_workflow(ai_name: str, catalog: DomainCatalog, shared_dir_name: str) -> str:
    """Workflow document telling the agent how to call the CLI."""
    return f"""---
description: How to use the QuantPro skill for quantitative trading research
---

# Using QuantPro Skill

AI Agent: {ai_name}

## Quick Start

```bash
# Auto-detect domain
quantpro search "order flow crypto"

# Search specific domain
quantpro search "stop loss kelly" -d risk

# Get more results
quantpro search "rsi bollinger" -d indicator -n 5

# Machine-readable output
quantpro search "overfitting backtest" --json
```

## Available Domains

{_domain_lines(catalog)}

## Documentation

See .shared/{shared_dir_name}/SKILL.md for complete documentation.
"""


def render_skill_doc(catalog: DomainCatalog, shared_dir_name: str) -> str:
    """Reference document describing the installed knowledge base."""
    names = ", ".join(catalog.names)
    tree = "\n".join(
        f"{'└──' if i == len(catalog.domains) - 1 else '├──'} {schema.dataset}"
        for i, schema in enumerate(catalog.domains)
    )
    return f"""# QuantPro Skill Documentation

## Overview

QuantPro searches a curated quantitative trading knowledge base split
into {len(catalog.domains)} domains:

{_domain_lines(catalog)}

## Usage

```bash
quantpro search "query"                       # auto-detect domain
quantpro search "query" -d <domain>           # domain-specific search
quantpro search "query" -d <domain> -n 5      # more results
quantpro search "query" --data-dir /path      # custom data path
```

Domains: {names}

When no domain is given, the query is matched against each domain's
trigger keywords; with no match the search uses `{catalog.fallback}`.

## Search

- BM25 ranking over each record's searchable fields
- Only records sharing at least one term with the query are returned

## Data Location

```
.shared/{shared_dir_name}/data/
{tree}
```
"""
