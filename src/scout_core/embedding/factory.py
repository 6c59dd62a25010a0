from __future__ import annotations

import os
from typing import Any, Dict

from ..errors import ConfigError
from .adapter import EmbeddingAdapter
from .noop import NoOpEmbeddingAdapter

ENV_REF_PREFIX = "env:"

_DEFAULT_MODELS = {
    "noop": "noop-embedding",
    "openai": "text-embedding-3-small",
}


def resolve_env_ref(value: Any) -> Any:
    """Resolve an ``env:NAME`` secret reference; other values pass through."""
    if not isinstance(value, str) or not value.strip().startswith(ENV_REF_PREFIX):
        return value
    name = value.strip()[len(ENV_REF_PREFIX) :].strip()
    if not name:
        raise ConfigError(f"Secret reference {value!r} names no environment variable")
    secret = os.environ.get(name, "").strip()
    if not secret:
        raise ConfigError(f"Environment variable {name} for secret reference is unset or empty")
    return secret


def resolve_embedder(config: Dict[str, Any]) -> EmbeddingAdapter:
    """Resolve embedding adapter from configuration."""

    provider = str(config.get("provider", "noop")).strip().lower()
    model_name = str(config.get("model") or _DEFAULT_MODELS.get(provider, "")).strip()

    if provider == "noop":
        dimension = int(config.get("dimension", 1536))
        return NoOpEmbeddingAdapter(model_name=model_name, dimension=dimension)

    if provider == "openai":
        api_key = resolve_env_ref(config.get("api_key"))
        base_url = resolve_env_ref(config.get("base_url"))
        dimension = config.get("dimension")
        from .openai_adapter import OpenAIEmbeddingAdapter

        return OpenAIEmbeddingAdapter(
            model_name=model_name,
            api_key=api_key,
            base_url=base_url,
            dimension=dimension,
        )

    raise ConfigError(f"Unknown embedding provider: {provider}")
