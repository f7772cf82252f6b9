"""
CLI Main - Typer-based command-line interface.

Usage:
    quantpro search "order flow crypto"
    quantpro search "stop loss kelly" -d risk
    quantpro search "rsi bollinger" -d indicator -n 5
    quantpro init --ai antigravity
    quantpro domains
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quantpro.config import QuantProError, find_data_dir, get_settings

app = typer.Typer(
    name="quantpro",
    help="QuantPro - Quantitative trading knowledge base search",
    add_completion=False,
)
console = Console()


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Search strategies, indicators, risk controls, data sources, and pitfalls."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(
        logging, settings.log_level.upper(), logging.WARNING
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@app.command()
def search(
    query: list[str] = typer.Argument(..., help="Search query"),
    domain: str | None = typer.Option(
        None,
        "--domain",
        "-d",
        help="Domain to search (strategy, indicator, risk, data, anti-pattern)",
    ),
    max_results: int | None = typer.Option(
        None, "--max-results", "-n", min=1, help="Maximum number of results"
    ),
    data_dir: Path | None = typer.Option(None, "--data-dir", help="Path to data directory"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Search the quantitative trading knowledge base."""
    from quantpro.interfaces.cli.deps import get_search_service
    from quantpro.interfaces.cli.render import print_response

    settings = get_settings()
    service = get_search_service(settings)
    text = " ".join(query)
    limit = max_results or settings.default_max_results
    directory = data_dir or find_data_dir(settings)

    try:
        response = service.search(directory, text, domain, limit)
    except QuantProError as e:
        if as_json:
            typer.echo(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(response.model_dump_json(indent=2))
        return

    print_response(console, response, service.catalog.get(response.domain))


@app.command()
def init(
    ai: str = typer.Option(..., "--ai", help="AI agent name"),
    target_dir: Path = typer.Option(Path("."), "--dir", help="Target project directory"),
    data_dir: Path | None = typer.Option(
        None, "--data-dir", help="Directory holding the datasets to copy"
    ),
) -> None:
    """Initialize the QuantPro skill in a project."""
    from quantpro.domains.search import DEFAULT_CATALOG
    from quantpro.interfaces.cli.scaffold import initialize_project

    settings = get_settings()
    source = data_dir or find_data_dir(settings)

    console.rule(f"[bold cyan]QuantPro Initialization - AI Agent: {escape(ai)}")

    try:
        report = initialize_project(
            target_dir=target_dir,
            ai_name=ai,
            source_data_dir=source,
            catalog=DEFAULT_CATALOG,
            shared_dir_name=settings.shared_dir_name,
        )
    except QuantProError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Created:[/green] {report.agent_dir}")
    console.print(f"[green]Created:[/green] {report.shared_dir}")
    console.print(f"[green]Copied:[/green] {len(report.datasets)} CSV files")
    console.print(f"[green]Created:[/green] {report.workflow_path}")
    console.print(f"[green]Created:[/green] {report.skill_path}")

    console.rule("[bold cyan]Initialization Complete")
    console.print("\n[bold]Quick Start:[/bold]")
    console.print('   quantpro search "order flow crypto"')
    console.print('   quantpro search "stop loss" -d risk')
    console.print(f"\n[dim]See {report.skill_path} for full documentation[/dim]")


@app.command()
def domains(
    data_dir: Path | None = typer.Option(None, "--data-dir", help="Path to data directory"),
) -> None:
    """List searchable domains and their trigger keywords."""
    from quantpro.domains.search import DEFAULT_CATALOG
    from quantpro.interfaces.cli.deps import get_record_store

    settings = get_settings()
    catalog = DEFAULT_CATALOG
    store = get_record_store()
    directory = data_dir or find_data_dir(settings)

    table = Table(title=f"Domains ({directory})")
    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Dataset")
    table.add_column("Records", justify="right", style="green")
    table.add_column("Trigger Keywords", style="dim")

    for schema in catalog.domains:
        try:
            records = str(len(store.load_records(directory / schema.dataset)))
        except QuantProError as e:
            records = f"[red]{e.code.value}[/red]"
        name = schema.name
        if name == catalog.fallback:
            name = f"{name} (default)"
        table.add_row(
            escape(name),
            schema.dataset,
            records,
            escape(", ".join(catalog.keywords_for(schema.name))),
        )

    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from quantpro import __version__

    console.print(f"QuantPro v{__version__}")


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
