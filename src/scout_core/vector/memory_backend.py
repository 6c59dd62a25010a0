"""Flat in-memory embedding store.

Documents live in an insertion-ordered dict keyed by id. Queries are a full
linear scan; there is no index structure.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterator, Optional

from ..errors import DuplicateIdError
from .adapter import VectorIndex
from .types import EmbeddedDocument

logger = logging.getLogger(__name__)


class InMemoryEmbeddingStore(VectorIndex):
    """Embedding store backed by a plain dict, one lock per operation."""

    def __init__(self) -> None:
        self._docs: Dict[str, EmbeddedDocument] = {}
        self._lock = threading.Lock()

    def insert(self, doc: EmbeddedDocument) -> None:
        with self._lock:
            if doc.id in self._docs:
                logger.debug("Overwriting document %s", doc.id)
            self._docs[doc.id] = doc

    def insert_unique(self, doc: EmbeddedDocument) -> None:
        """Insert ``doc``; raise DuplicateIdError if its id is taken."""
        with self._lock:
            if doc.id in self._docs:
                raise DuplicateIdError(doc.id)
            self._docs[doc.id] = doc

    def get(self, doc_id: str) -> Optional[EmbeddedDocument]:
        with self._lock:
            return self._docs.get(doc_id)

    def clear(self) -> None:
        with self._lock:
            count = len(self._docs)
            self._docs.clear()
        logger.info("Cleared %d document(s) from in-memory store", count)

    def scan_all(self) -> Iterator[EmbeddedDocument]:
        with self._lock:
            snapshot = list(self._docs.values())
        return iter(snapshot)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
