"""Exception taxonomy for scout-core."""

from pathlib import Path


class ScoutError(Exception):
    """Base exception for all repo-scout errors."""

    pass


# Config errors


class ConfigError(ScoutError):
    """Configuration is missing, malformed or names an unknown provider."""

    pass


# Embedding errors


class EmbeddingUnavailable(ScoutError):
    """Embedding provider is not configured or the provider call failed."""

    pass


# Store errors


class DuplicateIdError(ScoutError):
    """Strict insert found a document with the same id already stored."""

    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        super().__init__(f"Document id already present: {doc_id}")


# Data source errors


class DataSourceError(ScoutError):
    """Repository data source could not be read or parsed."""

    def __init__(self, path: Path, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Data source error in {path}: {details}")
