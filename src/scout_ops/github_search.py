"""GitHub repository discovery ranked by relevance to a project."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
import logging

import requests
from pydantic import ValidationError

from scout_core.config import GitHubSettings
from scout_core.embedding.factory import resolve_env_ref
from scout_core.errors import ConfigError
from scout_core.keywords import build_keywords
from scout_core.models import RepositoryCandidate
from scout_core.relevance import ScoredRepository, score_repositories

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github.v3+json"


class GitHubSearchClient:
    """Thin client for ``GET /search/repositories``."""

    def __init__(
        self,
        token: Optional[str],
        *,
        session: Optional[requests.Session] = None,
        api_url: str = GITHUB_API_URL,
        per_page: int = 5,
        timeout: float = 15.0,
    ):
        if not token:
            raise ConfigError("GitHub token not configured")
        self._token = token
        self._session = session or requests.Session()
        self._api_url = api_url.rstrip("/")
        self._per_page = per_page
        self._timeout = timeout

    @classmethod
    def from_settings(
        cls, settings: GitHubSettings, *, session: Optional[requests.Session] = None
    ) -> "GitHubSearchClient":
        return cls(
            resolve_env_ref(settings.token),
            session=session,
            api_url=settings.api_url,
            per_page=settings.per_page,
            timeout=settings.timeout,
        )

    def search(self, keyword: str) -> List[Dict[str, Any]]:
        """Return raw search items for one keyword, most starred first."""
        response = self._session.get(
            f"{self._api_url}/search/repositories",
            params={"q": keyword, "sort": "stars", "order": "desc", "per_page": self._per_page},
            headers={
                "Authorization": f"Bearer {self._token}",
                "Accept": GITHUB_ACCEPT,
            },
            timeout=self._timeout,
        )
        response.raise_for_status()
        return list(response.json().get("items") or [])


@dataclass
class RepoSearchOutcome:
    repos: List[ScoredRepository] = field(default_factory=list)
    total: int = 0
    keywords: List[str] = field(default_factory=list)
    failed_keywords: List[str] = field(default_factory=list)


def search_relevant_repositories(
    query: str,
    project_type: Optional[str],
    tech_stack: Sequence[str],
    *,
    client: GitHubSearchClient,
    max_results: int = 20,
    now: Optional[datetime] = None,
) -> RepoSearchOutcome:
    """Search GitHub once per keyword, then dedupe, score and rank the hits.

    A keyword whose search fails is logged and skipped.
    """
    keywords = build_keywords(query, project_type, tech_stack)
    outcome = RepoSearchOutcome(keywords=keywords)

    candidates: List[RepositoryCandidate] = []
    for keyword in keywords:
        try:
            items = client.search(keyword)
        except requests.RequestException as e:
            logger.warning("GitHub search failed for keyword %r: %s", keyword, e)
            outcome.failed_keywords.append(keyword)
            continue
        for item in items:
            try:
                candidates.append(RepositoryCandidate.from_github(item))
            except ValidationError as e:
                logger.warning("Ignoring malformed search item for %r: %s", keyword, e)

    scored = score_repositories(candidates, keywords, tech_stack, project_type, now=now)
    outcome.total = len(scored)
    outcome.repos = scored[:max_results]
    return outcome
