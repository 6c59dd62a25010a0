from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DocumentMetadata:
    """Provenance of an embedded chunk. Every attribute is optional."""

    repo_id: Optional[str] = None
    repo_name: Optional[str] = None
    file_path: Optional[str] = None
    file_name: Optional[str] = None
    language: Optional[str] = None
    type: Optional[str] = None

    # Scraped records use camelCase keys.
    _ALIASES = {
        "repoId": "repo_id",
        "repoName": "repo_name",
        "filePath": "file_path",
        "fileName": "file_name",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DocumentMetadata":
        if not data:
            return cls()
        values: Dict[str, Optional[str]] = {}
        for key, value in data.items():
            name = cls._ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = None if value is None else str(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class EmbeddedDocument:
    """A chunk of text with its embedding vector."""

    id: str
    text: str
    embedding: List[float]
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class ScoredDocument:
    """A stored document matched by a similarity query."""

    document: EmbeddedDocument
    score: float

    @property
    def id(self) -> str:
        return self.document.id
