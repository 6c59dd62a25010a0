"""Configuration resolution for repo-scout.

Layer order (later wins):
1) System defaults (the pydantic model defaults below)
2) <project_root>/.scout/config.toml, or an explicit config file
3) Environment overrides: SCOUT_EMBEDDING_PROVIDER, SCOUT_GITHUB_TOKEN,
   SCOUT_LOG_LEVEL

Secrets may be written as ``env:NAME`` references; they are resolved when the
embedding adapter or GitHub client is built, not at load time.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

# Conditional TOML import: stdlib tomllib (3.11+) or fallback tomli (<3.11)
try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".scout"
CONFIG_FILENAME = "config.toml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_SECRET_MASK = "***"


class EmbeddingSettings(BaseModel):
    provider: str = Field("noop", description="noop|openai")
    model: Optional[str] = Field(None, description="Provider default when unset")
    dimension: int = Field(1536, gt=0)
    api_key: Optional[str] = Field(None, description="Literal key or env:NAME")
    base_url: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("provider")
    @classmethod
    def _normalize_provider(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("embedding provider cannot be empty")
        return v


class RetrievalSettings(BaseModel):
    limit: int = Field(5, gt=0, description="RAG context size")
    search_limit: int = Field(10, gt=0, description="Raw similarity search size")
    threshold: float = Field(0.7, ge=-1.0, le=1.0)

    model_config = ConfigDict(extra="forbid")


class ChunkingSettings(BaseModel):
    max_chunk_size: int = Field(1000, gt=0)

    model_config = ConfigDict(extra="forbid")


class GitHubSettings(BaseModel):
    token: Optional[str] = Field(None, description="Literal token or env:NAME")
    api_url: str = "https://api.github.com"
    per_page: int = Field(5, ge=1, le=100)
    max_results: int = Field(20, gt=0)
    timeout: float = Field(15.0, gt=0)

    model_config = ConfigDict(extra="forbid")


class LogSettings(BaseModel):
    level: str = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {sorted(_LOG_LEVELS)}")
        return level


class ScoutConfig(BaseModel):
    """Effective configuration after layering."""

    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    chunking: ChunkingSettings = Field(default_factory=ChunkingSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = ConfigDict(extra="forbid")

    def embedder_config(self) -> Dict[str, Any]:
        """Config dict in the shape ``resolve_embedder`` expects."""
        return self.embedding.model_dump(exclude_none=True)

    def to_display_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        if data["embedding"].get("api_key"):
            data["embedding"]["api_key"] = _SECRET_MASK
        if data["github"].get("token"):
            data["github"]["token"] = _SECRET_MASK
        return data


class ConfigLoader:
    """Load and resolve repo-scout configuration."""

    ENV_OVERRIDES: Dict[str, tuple] = {
        "SCOUT_EMBEDDING_PROVIDER": ("embedding", "provider"),
        "SCOUT_GITHUB_TOKEN": ("github", "token"),
        "SCOUT_LOG_LEVEL": ("log", "level"),
    }

    @staticmethod
    def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    @staticmethod
    def _read_toml_optional(path: Path) -> Dict[str, Any]:
        """Read TOML config file; return {} if not found."""
        if not path.exists():
            return {}
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except Exception as e:
            raise ConfigError(f"Failed to load TOML from {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config TOML must be a table: {path}")
        return data

    @staticmethod
    def _env_overrides() -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for var, (section, key) in ConfigLoader.ENV_OVERRIDES.items():
            value = os.environ.get(var)
            if value is None or not value.strip():
                continue
            overrides.setdefault(section, {})[key] = value.strip()
        return overrides

    @staticmethod
    def default_config_path(project_root: Path) -> Path:
        return project_root / CONFIG_DIRNAME / CONFIG_FILENAME

    @staticmethod
    def load_raw(
        project_root: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> Dict[str, Any]:
        """Return the merged, unvalidated config dictionary."""
        if config_file is not None:
            if not config_file.exists():
                raise ConfigError(f"Config file not found: {config_file}")
            file_data = ConfigLoader._read_toml_optional(config_file)
        else:
            root = project_root if project_root is not None else Path.cwd()
            path = ConfigLoader.default_config_path(root)
            file_data = ConfigLoader._read_toml_optional(path)
            if file_data:
                logger.debug("Loaded config from %s", path)
        return ConfigLoader._deep_merge(file_data, ConfigLoader._env_overrides())

    @staticmethod
    def load(
        project_root: Optional[Path] = None,
        config_file: Optional[Path] = None,
    ) -> ScoutConfig:
        """Load and validate the effective configuration."""
        raw = ConfigLoader.load_raw(project_root, config_file)
        try:
            return ScoutConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}")
