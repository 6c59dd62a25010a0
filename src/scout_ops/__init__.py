"""
scout_ops - Use-case functions for repo-scout.

CLI commands delegate to these functions; they wire scout_core primitives to
external collaborators (scraped data files, the GitHub search API).

Modules:
    ingest: chunk -> embed -> insert pipeline
    stats: embedding store statistics
    github_search: GitHub discovery with relevance ranking
    session: store/embedder/retriever wiring from configuration
"""

from .ingest import IngestResult, embed_repositories, load_repositories
from .stats import StoreStats, collect_stats
from .github_search import GitHubSearchClient, RepoSearchOutcome, search_relevant_repositories
from .session import ScoutSession

__all__ = [
    "IngestResult",
    "embed_repositories",
    "load_repositories",
    "StoreStats",
    "collect_stats",
    "GitHubSearchClient",
    "RepoSearchOutcome",
    "search_relevant_repositories",
    "ScoutSession",
]
