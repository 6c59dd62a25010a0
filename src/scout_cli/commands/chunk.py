"""Chunk preview command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scout_core.chunking import chunk_text
from scout_core.errors import ScoutError

from ..util import load_config

console = Console()


def chunk(
    file_path: Path = typer.Argument(..., help="Text file to chunk", exists=True, dir_okay=False, readable=True),
    max_chunk_size: Optional[int] = typer.Option(
        None, "--max-chunk-size", "-m", min=1, help="Characters per chunk (overrides config)"
    ),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json"),
):
    """Split a text file into sentence-aligned chunks."""
    try:
        config = load_config()
    except ScoutError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    size = max_chunk_size or config.chunking.max_chunk_size
    chunks = chunk_text(file_path.read_text(encoding="utf-8"), size)

    if output_format == "json":
        typer.echo(json.dumps({"max_chunk_size": size, "chunks": chunks}, indent=2, ensure_ascii=False))
        return

    if not chunks:
        console.print("[yellow]No chunks produced[/yellow]")
        return

    table = Table(title=f"Chunks of {file_path.name} (max {size} chars)")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Chars", style="green", width=6)
    table.add_column("Text", style="white", width=70)
    for i, text in enumerate(chunks, 1):
        preview = text[:100] + "..." if len(text) > 100 else text
        table.add_row(str(i), str(len(text)), preview)
    console.print(table)
