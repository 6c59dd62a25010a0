from .adapter import EmbeddingAdapter
from .factory import resolve_embedder
from .noop import NoOpEmbeddingAdapter
from .types import EmbeddingResult, EmbeddingTelemetry

__all__ = [
    "EmbeddingAdapter",
    "EmbeddingResult",
    "EmbeddingTelemetry",
    "NoOpEmbeddingAdapter",
    "resolve_embedder",
]
