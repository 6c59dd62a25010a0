"""Pydantic models for repository search hits and scraped repositories."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RepositoryFile(BaseModel):
    """A scraped file that may be chunked and embedded."""

    name: str
    path: str = ""
    content: Optional[str] = None
    language: Optional[str] = None


class RepositoryCandidate(BaseModel):
    """A repository returned by a search or read from a scraped data source.

    Relevance is not an attribute of the repository; it is computed per query
    by ``scout_core.relevance``.
    """

    id: str = Field(..., description="Unique repository identifier")
    name: str
    full_name: Optional[str] = Field(None, description="owner/name")
    owner: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    stars: int = 0
    topics: List[str] = Field(default_factory=list)
    updated_at: Optional[datetime] = None
    readme: Optional[str] = None
    files: List[RepositoryFile] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> str:
        if v is None or str(v).strip() == "":
            raise ValueError("repository id must be non-empty")
        return str(v)

    @field_validator("stars", mode="before")
    @classmethod
    def _coerce_stars(cls, v: Any) -> int:
        return int(v or 0)

    @field_validator("topics", mode="before")
    @classmethod
    def _coerce_topics(cls, v: Any) -> List[str]:
        return list(v or [])

    @field_validator("updated_at")
    @classmethod
    def _assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def display_name(self) -> str:
        return self.full_name or self.name

    @classmethod
    def from_github(cls, item: Dict[str, Any]) -> "RepositoryCandidate":
        """Parse an item of the GitHub ``/search/repositories`` response."""
        owner = item.get("owner") or {}
        return cls(
            id=item.get("id"),
            name=item.get("name") or "",
            full_name=item.get("full_name"),
            owner=owner.get("login") if isinstance(owner, dict) else owner,
            url=item.get("html_url"),
            description=item.get("description"),
            language=item.get("language"),
            stars=item.get("stargazers_count"),
            topics=item.get("topics"),
            updated_at=item.get("updated_at"),
        )

    @classmethod
    def from_scraped(cls, record: Dict[str, Any]) -> "RepositoryCandidate":
        """Parse a scraped-repository record (README and files included)."""
        full_name = record.get("full_name")
        owner = record.get("owner")
        return cls(
            id=record.get("id") or full_name or record.get("name"),
            name=record.get("name") or "",
            full_name=full_name,
            owner=owner.get("login") if isinstance(owner, dict) else owner,
            url=record.get("url"),
            description=record.get("description"),
            language=record.get("language"),
            stars=record.get("stars"),
            topics=record.get("topics"),
            updated_at=record.get("updated_at"),
            readme=record.get("readme"),
            files=record.get("files") or [],
        )
