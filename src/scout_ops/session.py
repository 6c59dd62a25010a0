"""Wiring of one store, one embedder and one retriever from configuration."""

from pathlib import Path
from typing import List, Optional, Union
import logging

from scout_core.config import ScoutConfig
from scout_core.embedding import EmbeddingAdapter, resolve_embedder
from scout_core.retrieval import RagResult, RagRetriever, search
from scout_core.vector import InMemoryEmbeddingStore, ScoredDocument, VectorIndex

from .ingest import IngestResult, embed_repositories, load_repositories
from .stats import StoreStats, collect_stats

logger = logging.getLogger(__name__)


class ScoutSession:
    """Owns the embedding store for one process and the pipeline around it.

    Resolving the embedder happens once here, so a misconfigured provider
    fails at construction rather than per document.
    """

    def __init__(
        self,
        config: ScoutConfig,
        *,
        index: Optional[VectorIndex] = None,
        embedder: Optional[EmbeddingAdapter] = None,
    ):
        self.config = config
        self.index = index if index is not None else InMemoryEmbeddingStore()
        self.embedder = embedder if embedder is not None else resolve_embedder(config.embedder_config())
        self.retriever = RagRetriever(
            self.index, self.embedder, threshold=config.retrieval.threshold
        )

    def ingest_file(self, path: Union[str, Path]) -> IngestResult:
        repos = load_repositories(path)
        return embed_repositories(
            repos,
            self.index,
            self.embedder,
            max_chunk_size=self.config.chunking.max_chunk_size,
        )

    def retrieve(self, query_text: str, limit: Optional[int] = None) -> RagResult:
        return self.retriever.retrieve(query_text, limit or self.config.retrieval.limit)

    def search(self, query_text: str, limit: Optional[int] = None) -> List[ScoredDocument]:
        """Raw ranked matches for ``query_text``; embedding errors propagate."""
        return search(
            self.index,
            self.embedder.embed(query_text),
            limit=limit or self.config.retrieval.search_limit,
            threshold=self.config.retrieval.threshold,
        )

    def stats(self) -> StoreStats:
        return collect_stats(self.index)

    def reset(self) -> None:
        self.index.clear()
