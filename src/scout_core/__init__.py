"""Scout Core - repository relevance scoring and RAG similarity search."""

from .__version__ import __version__, __version_info__

from .config import ConfigLoader, ScoutConfig
from .chunking import DEFAULT_MAX_CHUNK_SIZE, chunk_text, split_sentences
from .similarity import cosine_similarity
from .vector import (
    DocumentMetadata,
    EmbeddedDocument,
    InMemoryEmbeddingStore,
    ScoredDocument,
    VectorIndex,
)
from .retrieval import RagResult, RagRetriever, RagSource, search
from .keywords import GENERIC_KEYWORDS, PROJECT_TYPE_KEYWORDS, ProjectType, build_keywords
from .models import RepositoryCandidate, RepositoryFile
from .relevance import ScoredRepository, dedupe_repositories, score_repositories
from .errors import (
    ConfigError,
    DataSourceError,
    DuplicateIdError,
    EmbeddingUnavailable,
    ScoutError,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Config
    "ConfigLoader",
    "ScoutConfig",
    # Chunking
    "DEFAULT_MAX_CHUNK_SIZE",
    "chunk_text",
    "split_sentences",
    # Similarity and store
    "cosine_similarity",
    "DocumentMetadata",
    "EmbeddedDocument",
    "InMemoryEmbeddingStore",
    "ScoredDocument",
    "VectorIndex",
    # Retrieval
    "RagResult",
    "RagRetriever",
    "RagSource",
    "search",
    # Relevance
    "GENERIC_KEYWORDS",
    "PROJECT_TYPE_KEYWORDS",
    "ProjectType",
    "build_keywords",
    "RepositoryCandidate",
    "RepositoryFile",
    "ScoredRepository",
    "dedupe_repositories",
    "score_repositories",
    # Errors
    "ConfigError",
    "DataSourceError",
    "DuplicateIdError",
    "EmbeddingUnavailable",
    "ScoutError",
]
