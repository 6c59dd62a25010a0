from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape

from scout_core.errors import ScoutError

from ..util import load_config

app = typer.Typer(help="Config inspection")
console = Console()


@app.command()
def show():
    """Print the effective configuration as JSON, secrets masked."""
    try:
        config = load_config()
    except ScoutError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)
    typer.echo(json.dumps(config.to_display_dict(), indent=2, ensure_ascii=False))
