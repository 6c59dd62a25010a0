"""Repository relevance commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scout_core.errors import ScoutError
from scout_core.keywords import build_keywords
from scout_core.models import RepositoryCandidate
from scout_core.relevance import ScoredRepository, score_repositories

from ..util import load_config

app = typer.Typer(help="Repository relevance scoring")
console = Console()


def _print_ranking(scored: List[ScoredRepository], output_format: str) -> None:
    if output_format == "json":
        payload = [
            {
                "id": s.repository.id,
                "full_name": s.repository.display_name,
                "url": s.repository.url,
                "stars": s.repository.stars,
                "relevance_score": round(s.relevance_score, 4),
            }
            for s in scored
        ]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    if not scored:
        console.print("[yellow]No results found[/yellow]")
        return

    table = Table(title=f"Relevant repositories ({len(scored)})")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Repository", style="magenta", width=36)
    table.add_column("Language", style="white", width=12)
    table.add_column("Stars", style="yellow", width=8)
    table.add_column("Score", style="green", width=8)
    for i, s in enumerate(scored, 1):
        repo = s.repository
        table.add_row(
            str(i),
            repo.display_name,
            repo.language or "-",
            str(repo.stars),
            f"{s.relevance_score:.2f}",
        )
    console.print(table)


@app.command()
def score(
    file_path: Path = typer.Argument(
        ..., help="JSON list of GitHub search items (or {'items': [...]})", exists=True, dir_okay=False
    ),
    tech: Optional[List[str]] = typer.Option(None, "--tech", "-t", help="Tech stack term (repeatable)"),
    project_type: Optional[str] = typer.Option(None, "--project-type", "-p", help="Project archetype"),
    query: str = typer.Option("", "--query", "-q", help="Free-text project description"),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json"),
):
    """Dedupe, score and rank repositories already fetched from GitHub."""
    try:
        load_config()
    except ScoutError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Invalid JSON in {file_path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    items = data.get("items") if isinstance(data, dict) else data
    if not isinstance(items, list):
        console.print(f"[red]❌ Expected a list of repositories in {file_path}[/red]")
        raise typer.Exit(1)

    candidates: List[RepositoryCandidate] = []
    for i, item in enumerate(items):
        try:
            candidates.append(RepositoryCandidate.from_github(item))
        except (ValidationError, AttributeError) as e:
            console.print(f"[yellow]Skipping item {i}: {escape(str(e))}[/yellow]")

    tech_stack = tech or []
    keywords = build_keywords(query, project_type, tech_stack)
    scored = score_repositories(candidates, keywords, tech_stack, project_type)
    _print_ranking(scored, output_format)


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text project description"),
    tech: Optional[List[str]] = typer.Option(None, "--tech", "-t", help="Tech stack term (repeatable)"),
    project_type: Optional[str] = typer.Option(None, "--project-type", "-p", help="Project archetype"),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json"),
):
    """Search GitHub per keyword and rank the combined hits."""
    from scout_ops.github_search import GitHubSearchClient, search_relevant_repositories

    try:
        config = load_config()
        client = GitHubSearchClient.from_settings(config.github)
        outcome = search_relevant_repositories(
            query,
            project_type,
            tech or [],
            client=client,
            max_results=config.github.max_results,
        )
    except ScoutError as e:
        console.print(f"[red]❌ Repository search failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if outcome.failed_keywords and output_format != "json":
        console.print(
            f"[yellow]{len(outcome.failed_keywords)} keyword search(es) failed:[/yellow] "
            + ", ".join(outcome.failed_keywords)
        )
    _print_ranking(outcome.repos, output_format)
