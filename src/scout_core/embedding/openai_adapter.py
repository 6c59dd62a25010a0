"""OpenAI embedding adapter implementation."""

from typing import List, Optional
import logging
import time

from ..errors import ConfigError, EmbeddingUnavailable
from .adapter import EmbeddingAdapter
from .types import EmbeddingResult, EmbeddingTelemetry

logger = logging.getLogger(__name__)


class OpenAIEmbeddingAdapter(EmbeddingAdapter):
    """Embedding adapter for OpenAI models."""

    def __init__(
        self,
        model_name: str = "text-embedding-3-small",
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        dimension: Optional[int] = None,
    ):
        super().__init__(model_name)
        self._api_key = api_key
        self._base_url = base_url
        if dimension:
            self._dimension = int(dimension)
        else:
            self._dimension = 1536 if "small" in model_name or "ada" in model_name else 3072
        self._client = self._build_client()

    @property
    def dimension(self) -> int:
        return self._dimension

    def _build_client(self):
        """Create the SDK client; missing SDK or credentials are config errors."""
        try:
            import openai
        except ImportError:
            raise ConfigError(
                "openai package required for OpenAI embeddings. Install with: pip install openai"
            )

        try:
            # Falls back to the OPENAI_API_KEY environment variable.
            return openai.OpenAI(api_key=self._api_key, base_url=self._base_url)
        except openai.OpenAIError as e:
            raise ConfigError(f"OpenAI client not configured: {e}")

    def embed_batch(self, texts: List[str]) -> List[EmbeddingResult]:
        t0 = time.perf_counter()

        try:
            response = self._client.embeddings.create(
                model=self.model_name,
                input=texts,
                encoding_format="float",
            )
        except Exception as e:
            logger.warning("OpenAI embedding call failed: %s", e)
            raise EmbeddingUnavailable(f"OpenAI embedding failed: {e}")

        duration_ms = (time.perf_counter() - t0) * 1000
        per_item_ms = duration_ms / max(1, len(texts))

        results = []
        for embedding_data in response.data:
            telemetry = EmbeddingTelemetry(
                provider_id="openai",
                model_name=self.model_name,
                dimension=len(embedding_data.embedding),
                duration_ms=per_item_ms,
            )
            results.append(EmbeddingResult(vector=list(embedding_data.embedding), telemetry=telemetry))

        return results
