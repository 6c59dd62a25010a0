import hashlib
import time
from typing import List

from .adapter import EmbeddingAdapter
from .types import EmbeddingResult, EmbeddingTelemetry


def _digest_stream(text: str, size: int) -> bytes:
    """``size`` bytes of sha256(text || block index), block after block."""
    data = text.encode("utf-8")
    out = bytearray()
    block = 0
    while len(out) < size:
        out.extend(hashlib.sha256(data + block.to_bytes(4, "big")).digest())
        block += 1
    return bytes(out[:size])


class NoOpEmbeddingAdapter(EmbeddingAdapter):
    """Offline embedder: each text maps to a fixed pseudo-random vector.

    Identical texts get identical vectors (cosine 1.0); distinct texts are
    close to orthogonal. No semantic similarity is captured.
    """

    def __init__(self, model_name: str = "noop-embedding", dimension: int = 1536):
        super().__init__(model_name)
        if dimension <= 0:
            raise ValueError("dimension must be positive")
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed_batch(self, texts: List[str]) -> List[EmbeddingResult]:
        results: List[EmbeddingResult] = []
        for text in texts:
            started = time.perf_counter()
            raw = _digest_stream(text, self._dimension)
            vector = [b / 127.5 - 1.0 for b in raw]
            results.append(
                EmbeddingResult(
                    vector=vector,
                    telemetry=EmbeddingTelemetry(
                        provider_id="noop",
                        model_name=self.model_name,
                        dimension=self._dimension,
                        duration_ms=(time.perf_counter() - started) * 1000,
                    ),
                )
            )
        return results
