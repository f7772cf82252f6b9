"""
Terminal rendering for search results.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from quantpro.domains.search import DomainSchema, Record, SearchResponse

MAX_VALUE_LENGTH = 100
MAX_SUMMARY_FIELDS = 4


def truncate(value: str, limit: int = MAX_VALUE_LENGTH) -> str:
    """Cut ``value`` to ``limit`` characters, marking the cut with '...'."""
    if len(value) <= limit:
        return value
    return value[:limit] + "..."


def summary_lines(record: Record, schema: DomainSchema) -> list[tuple[str, str]]:
    """Up to four non-empty secondary fields, skipping repeats of the title."""
    title = record.get(schema.title_field, "")
    lines = []
    for name in schema.summary_fields:
        if len(lines) >= MAX_SUMMARY_FIELDS:
            break
        value = record.get(name, "")
        if value and value != title:
            lines.append((name, truncate(value)))
    return lines


def print_response(console: Console, response: SearchResponse, schema: DomainSchema) -> None:
    """Print a search response for humans."""
    console.print(Rule(style="cyan"))
    console.print(f"[bold cyan]QUERY:[/bold cyan] {escape(response.query)}")
    console.print(Rule(style="cyan"))

    console.print(f"\n[yellow]Domain:[/yellow] {response.domain}")
    console.print(f"[yellow]Found {response.count} results:[/yellow]\n")

    if response.count == 0:
        console.print("[yellow]No results found. Try a different query or domain.[/yellow]")
        return

    for i, record in enumerate(response.results, 1):
        title = record.get(schema.title_field) or "Unknown"
        console.print(f"[green]{i}.[/green] [bold]{escape(title)}[/bold]")
        for name, value in summary_lines(record, schema):
            console.print(f"   [dim]{escape(name)}:[/dim] {escape(value)}")
        console.print()

    console.print(
        "[cyan]Tip: Use -d flag to specify domain, -n flag to get more results[/cyan]"
    )
