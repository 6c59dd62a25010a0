from __future__ import annotations

from pathlib import Path
from typing import Optional
import typer

from scout_core import __version__

from .util import configure_stdio, set_global_config_file, set_verbose

app = typer.Typer(help=f"scout {__version__}: repository relevance ranking and RAG search")


@app.callback()
def _init(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        help="Path to config file (defaults to .scout/config.toml)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_stdio()
    set_verbose(verbose)

    # Store the config file path globally for use by utility functions
    set_global_config_file(config_file)


from .commands import chunk as chunk_cmd  # noqa: E402
from .commands import rag as rag_cmd  # noqa: E402
from .commands import repos as repos_cmd  # noqa: E402
from .commands import config_cmd as config_cmd  # noqa: E402

app.command(name="chunk")(chunk_cmd.chunk)
app.add_typer(rag_cmd.app, name="rag", help="Embedding and RAG retrieval")
app.add_typer(repos_cmd.app, name="repos", help="Repository relevance scoring")
app.add_typer(config_cmd.app, name="config", help="Config inspection")


def main():
    app()
