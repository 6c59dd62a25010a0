"""Similarity search and retrieval-augmented context assembly.

``search`` is the ranking primitive: a full scan over a ``VectorIndex``,
filtered by a similarity threshold, sorted descending and truncated.
``RagRetriever`` embeds a query, runs ``search`` and projects the matches into
context passages plus citable sources.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Sequence

from .embedding import EmbeddingAdapter
from .errors import EmbeddingUnavailable
from .similarity import cosine_similarity
from .vector import ScoredDocument, VectorIndex

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_RAG_LIMIT = 5
DEFAULT_THRESHOLD = 0.7

UNKNOWN_FILE_PATH = "unknown"


def search(
    index: VectorIndex,
    query_embedding: Sequence[float],
    limit: int = DEFAULT_SEARCH_LIMIT,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[ScoredDocument]:
    """Rank stored documents by cosine similarity to ``query_embedding``.

    Only documents scoring strictly above ``threshold`` are kept. Equal scores
    keep the store's insertion order.
    """
    if limit <= 0:
        return []

    matches: List[ScoredDocument] = []
    for doc in index.scan_all():
        score = cosine_similarity(query_embedding, doc.embedding)
        if score > threshold:
            matches.append(ScoredDocument(document=doc, score=score))

    matches.sort(key=lambda m: m.score, reverse=True)
    return matches[:limit]


@dataclass(frozen=True)
class RagSource:
    """Citation for a matched chunk with complete provenance."""

    repo_name: str
    file_path: str
    file_name: str
    relevance: float


@dataclass
class RagResult:
    """Context passages and their citable sources for one query."""

    context: List[str] = field(default_factory=list)
    sources: List[RagSource] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.context


@dataclass
class RetrievalStats:
    query_count: int = 0
    total_ms: float = 0.0

    @property
    def average_ms(self) -> float:
        if not self.query_count:
            return 0.0
        return self.total_ms / self.query_count

    def record(self, elapsed_ms: float) -> None:
        self.query_count += 1
        self.total_ms += elapsed_ms


class RagRetriever:
    """Retrieve grounding context for a free-text query."""

    def __init__(
        self,
        index: VectorIndex,
        embedder: EmbeddingAdapter,
        *,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self._index = index
        self._embedder = embedder
        self._threshold = threshold
        self.stats = RetrievalStats()

    @property
    def index(self) -> VectorIndex:
        return self._index

    def retrieve(self, query_text: str, limit: int = DEFAULT_RAG_LIMIT) -> RagResult:
        """Embed ``query_text`` and return matching context and sources.

        Any failure while embedding the query degrades to an empty result.
        """
        t0 = time.perf_counter()
        try:
            query_embedding = self._embedder.embed(query_text)
        except EmbeddingUnavailable as e:
            logger.warning("RAG retrieval skipped, embedding unavailable: %s", e)
            self.stats.record((time.perf_counter() - t0) * 1000)
            return RagResult()
        except Exception as e:
            logger.warning("RAG retrieval failed while embedding query: %s", e, exc_info=True)
            self.stats.record((time.perf_counter() - t0) * 1000)
            return RagResult()

        matches = search(self._index, query_embedding, limit=limit, threshold=self._threshold)

        result = RagResult()
        for match in matches:
            doc = match.document
            result.context.append(doc.text)

            meta = doc.metadata
            if meta.repo_name and meta.file_name:
                result.sources.append(
                    RagSource(
                        repo_name=meta.repo_name,
                        file_path=meta.file_path or UNKNOWN_FILE_PATH,
                        file_name=meta.file_name,
                        relevance=match.score,
                    )
                )

        elapsed_ms = (time.perf_counter() - t0) * 1000
        self.stats.record(elapsed_ms)
        logger.info(
            "RAG retrieval matched %d chunk(s), %d cited, in %.1fms",
            len(result.context),
            len(result.sources),
            elapsed_ms,
        )
        return result
