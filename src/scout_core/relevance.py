"""Heuristic relevance scoring for repository search hits.

Scores are additive and capped at 1.0:

- tech stack term in name +0.30, in description +0.20, equal to the primary
  language +0.25, contained in any topic +0.15
- keyword in name +0.10, in description +0.08
- stars: ``min(stars / 10000, 0.20)``
- updated within the last six calendar months: +0.10

The score depends on the query inputs and on ``now``; it is never stored on
the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Union

from .keywords import ProjectType
from .models import RepositoryCandidate

TECH_NAME_WEIGHT = 0.30
TECH_DESCRIPTION_WEIGHT = 0.20
TECH_LANGUAGE_WEIGHT = 0.25
TECH_TOPIC_WEIGHT = 0.15
KEYWORD_NAME_WEIGHT = 0.10
KEYWORD_DESCRIPTION_WEIGHT = 0.08
STAR_DIVISOR = 10000
STAR_CAP = 0.20
RECENCY_BONUS = 0.10
RECENCY_MONTHS = 6
MAX_SCORE = 1.0


@dataclass(frozen=True)
class ScoredRepository:
    repository: RepositoryCandidate
    relevance_score: float


def months_before(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` back by calendar months, same time of day.

    A day past the end of the target month rolls over into the next month:
    31 August minus six months is 2 March in a leap year.
    """
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    first = moment.replace(year=year, month=month, day=1)
    return first + timedelta(days=moment.day - 1)


def dedupe_repositories(repos: Iterable[RepositoryCandidate]) -> List[RepositoryCandidate]:
    """Drop repeated repositories by id, keeping the first occurrence."""
    seen = set()
    unique: List[RepositoryCandidate] = []
    for repo in repos:
        if repo.id in seen:
            continue
        seen.add(repo.id)
        unique.append(repo)
    return unique


def score_repository(
    repo: RepositoryCandidate,
    keywords: Iterable[str],
    tech_stack: Sequence[str],
    *,
    now: datetime,
) -> float:
    name = (repo.name or "").lower()
    description = (repo.description or "").lower()
    language = (repo.language or "").lower()
    topics = [t.lower() for t in repo.topics]

    score = 0.0
    for tech in tech_stack:
        term = tech.lower()
        if term in name:
            score += TECH_NAME_WEIGHT
        if term in description:
            score += TECH_DESCRIPTION_WEIGHT
        if language == term:
            score += TECH_LANGUAGE_WEIGHT
        if any(term in topic for topic in topics):
            score += TECH_TOPIC_WEIGHT

    for keyword in keywords:
        term = keyword.lower()
        if term in name:
            score += KEYWORD_NAME_WEIGHT
        if term in description:
            score += KEYWORD_DESCRIPTION_WEIGHT

    score += min(max(repo.stars, 0) / STAR_DIVISOR, STAR_CAP)

    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if repo.updated_at is not None and repo.updated_at > months_before(now, RECENCY_MONTHS):
        score += RECENCY_BONUS

    return min(score, MAX_SCORE)


def score_repositories(
    repos: Iterable[RepositoryCandidate],
    keywords: Iterable[str],
    tech_stack: Sequence[str],
    project_type: Union[str, ProjectType, None] = None,
    *,
    now: Optional[datetime] = None,
) -> List[ScoredRepository]:
    """Dedupe, score and rank repositories, best first.

    ``project_type`` reaches the score through its keyword bundle, which the
    caller folds into ``keywords`` (see ``scout_core.keywords.build_keywords``).
    """
    if now is None:
        now = datetime.now(timezone.utc)
    keyword_list = list(keywords)

    scored = [
        ScoredRepository(
            repository=repo,
            relevance_score=score_repository(repo, keyword_list, tech_stack, now=now),
        )
        for repo in dedupe_repositories(repos)
    ]
    scored.sort(key=lambda s: s.relevance_score, reverse=True)
    return scored
