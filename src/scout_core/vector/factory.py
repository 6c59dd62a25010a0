from __future__ import annotations

from typing import Any, Dict

from .adapter import VectorIndex


def get_backend(config: Dict[str, Any]) -> VectorIndex:
    """Factory for embedding stores."""

    backend_type = str(config.get("backend", "memory")).strip().lower()

    if backend_type == "memory":
        from .memory_backend import InMemoryEmbeddingStore

        return InMemoryEmbeddingStore()

    raise ValueError(f"Unknown vector backend: {backend_type}")
