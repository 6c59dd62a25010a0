"""Sentence-bounded chunking primitives.

Text is split on sentence-terminal punctuation and packed greedily into
chunks of at most ``max_chunk_size`` characters:
- Punctuation runs (``.``, ``!``, ``?``) are sentence boundaries and are discarded
- Sentences are joined with single spaces inside a chunk
- A sentence longer than the budget becomes its own oversized chunk; it is
  never split mid-sentence
"""

from __future__ import annotations

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHUNK_SIZE = 1000

_SENT_END_RE = re.compile(r"[.!?]+")


def split_sentences(text: str) -> List[str]:
    """Return the non-empty, stripped sentences of ``text`` in order."""
    if not text:
        return []
    sentences: List[str] = []
    for piece in _SENT_END_RE.split(text):
        sentence = piece.strip()
        if sentence:
            sentences.append(sentence)
    return sentences


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> List[str]:
    """Split ``text`` into sentence-aligned chunks.

    Args:
        text: Raw input text.
        max_chunk_size: Character budget per chunk.

    Returns:
        Chunks in source order. Every chunk fits the budget unless it consists
        of a single sentence that is longer than the budget on its own.
    """
    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be positive")

    chunks: List[str] = []
    buffer = ""
    for sentence in split_sentences(text):
        if not buffer:
            buffer = sentence
            continue
        if len(buffer) + 1 + len(sentence) > max_chunk_size:
            chunks.append(buffer)
            buffer = sentence
        else:
            buffer = f"{buffer} {sentence}"

    if buffer:
        chunks.append(buffer)

    oversized = sum(1 for c in chunks if len(c) > max_chunk_size)
    if oversized:
        logger.debug("chunk_text emitted %d oversized single-sentence chunk(s)", oversized)
    return chunks
