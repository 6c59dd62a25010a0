"""RAG commands.

The embedding store lives in memory for the duration of one command, so each
command ingests the repository data source before querying it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scout_core.errors import ScoutError

from ..util import load_config

app = typer.Typer(help="Embedding and RAG retrieval")
console = Console()

_REPOS_OPTION_HELP = "Scraped repositories JSON (list or {'repos': [...]})"


def _open_session(repos: Path, threshold: Optional[float] = None):
    from scout_ops.session import ScoutSession

    config = load_config()
    if threshold is not None:
        config.retrieval.threshold = threshold
    session = ScoutSession(config)
    result = session.ingest_file(repos)
    console.print(
        f"[green]✓ Embedded {result.added} chunk(s)[/green] from {result.repos_processed} repo(s)"
        + (f", [red]{result.failed} failed[/red]" if result.failed else "")
    )
    return session


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text query"),
    repos: Path = typer.Option(..., "--repos", help=_REPOS_OPTION_HELP, exists=True, dir_okay=False),
    limit: Optional[int] = typer.Option(None, "--limit", "-k", min=1, help="Max matches (overrides config)"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", min=-1.0, max=1.0, help="Similarity cutoff (overrides config)"
    ),
):
    """Embed the data source, then retrieve context and sources for QUERY."""
    try:
        session = _open_session(repos, threshold)
        result = session.retrieve(query, limit)
    except ScoutError as e:
        console.print(f"[red]❌ Search failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if result.is_empty:
        console.print("[yellow]No results found[/yellow]")
        return

    console.print(f"\n[bold]Found {len(result.context)} relevant document(s)[/bold]")
    console.print("\n[bold]Relevant context[/bold]")
    for i, text in enumerate(result.context, 1):
        snippet = text[:100] + ("..." if len(text) > 100 else "")
        console.print(f"[cyan][{i}][/cyan] {escape(snippet)}")

    if result.sources:
        table = Table(title="Source repositories")
        table.add_column("Rank", style="cyan", width=6)
        table.add_column("Source", style="magenta", width=40)
        table.add_column("Path", style="white", width=30)
        table.add_column("Relevance", style="green", width=10)
        for i, source in enumerate(result.sources, 1):
            table.add_row(
                str(i),
                f"{source.repo_name}/{source.file_name}",
                source.file_path,
                f"{source.relevance * 100:.1f}%",
            )
        console.print(table)

    stats = session.retriever.stats
    console.print(f"\n[dim]Search completed in {stats.average_ms:.1f}ms[/dim]")


@app.command()
def stats(
    repos: Path = typer.Option(..., "--repos", help=_REPOS_OPTION_HELP, exists=True, dir_okay=False),
):
    """Embed the data source and show vector statistics."""
    try:
        session = _open_session(repos)
    except ScoutError as e:
        console.print(f"[red]❌ Embedding failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    s = session.stats()
    console.print(f"Total vectors: {s.total_vectors}")
    console.print(f"Total repositories: {s.total_repositories}")

    for title, rows in (("Top languages", s.top_languages), ("Top repositories", s.top_repositories)):
        table = Table(title=title)
        table.add_column("#", style="cyan", width=4)
        table.add_column("Name", style="magenta", width=30)
        table.add_column("Vectors", style="green", width=8)
        for i, (name, count) in enumerate(rows, 1):
            table.add_row(str(i), name, str(count))
        console.print(table)
