from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from .types import EmbeddedDocument


class VectorIndex(ABC):
    """Abstract base class for embedding stores.

    The retrieval ranker depends only on this interface, so an indexed
    backend can replace the flat in-memory store without touching it.
    """

    @abstractmethod
    def insert(self, doc: EmbeddedDocument) -> None:
        """Insert or overwrite a document by id."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every document."""
        pass

    @abstractmethod
    def scan_all(self) -> Iterator[EmbeddedDocument]:
        """Iterate over every stored document."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass
