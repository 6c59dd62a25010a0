from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class EmbeddingTelemetry:
    """Telemetry data for an embedding operation."""

    provider_id: str
    model_name: str
    dimension: int
    duration_ms: float = 0.0


@dataclass(frozen=True)
class EmbeddingResult:
    """Result of an embedding operation for a single text."""

    vector: List[float]
    telemetry: EmbeddingTelemetry
