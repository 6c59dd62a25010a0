from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from scout_core.config import ConfigLoader, ScoutConfig

# Global variable to store custom config file path
_global_config_file: Optional[Path] = None
_verbose: bool = False


def set_global_config_file(config_file: Optional[Path]) -> None:
    """Set (or reset) the global config file path for use by utility functions."""
    global _global_config_file
    _global_config_file = config_file.resolve() if config_file else None


def get_global_config_file() -> Optional[Path]:
    """Get the global config file path if set."""
    return _global_config_file


def set_verbose(verbose: bool) -> None:
    global _verbose
    _verbose = verbose


def configure_stdio() -> None:
    """Make CLI output robust across Windows console encodings.

    Some Windows terminals use a non-UTF8 encoding (e.g., cp1252). Printing
    Unicode glyphs would raise UnicodeEncodeError and abort the command, so
    stdout/stderr replace unencodable characters instead.
    """

    if os.name != "nt":
        return

    for stream in (sys.stdout, sys.stderr):
        try:
            stream.reconfigure(errors="replace")
        except AttributeError:
            continue


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if _verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def load_config() -> ScoutConfig:
    """Load the effective config and apply its log level."""
    config = ConfigLoader.load(config_file=get_global_config_file())
    configure_logging(config.log.level)
    return config
