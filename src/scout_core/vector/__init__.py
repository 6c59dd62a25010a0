from .adapter import VectorIndex
from .factory import get_backend
from .memory_backend import InMemoryEmbeddingStore
from .types import DocumentMetadata, EmbeddedDocument, ScoredDocument

__all__ = [
    "VectorIndex",
    "DocumentMetadata",
    "EmbeddedDocument",
    "ScoredDocument",
    "InMemoryEmbeddingStore",
    "get_backend",
]
