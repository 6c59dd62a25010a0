"""Embedding store statistics."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Tuple

from scout_core.vector import VectorIndex


@dataclass
class StoreStats:
    total_vectors: int = 0
    total_repositories: int = 0
    top_repositories: List[Tuple[str, int]] = field(default_factory=list)
    top_languages: List[Tuple[str, int]] = field(default_factory=list)


def collect_stats(index: VectorIndex, top_n: int = 4) -> StoreStats:
    """Count vectors per repository and per language."""
    repos: Counter = Counter()
    languages: Counter = Counter()
    total = 0
    for doc in index.scan_all():
        total += 1
        if doc.metadata.repo_name:
            repos[doc.metadata.repo_name] += 1
        if doc.metadata.language:
            languages[doc.metadata.language] += 1

    return StoreStats(
        total_vectors=total,
        total_repositories=len(repos),
        top_repositories=repos.most_common(top_n),
        top_languages=languages.most_common(top_n),
    )
