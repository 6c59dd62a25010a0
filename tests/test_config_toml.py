"""Tests for layered TOML config loading."""

from pathlib import Path

import pytest

from scout_core.config import ConfigLoader, ScoutConfig
from scout_core.errors import ConfigError

from conftest import write_scout_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for var in ConfigLoader.ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)


def test_defaults_without_config_file(tmp_path: Path):
    config = ConfigLoader.load(project_root=tmp_path)

    assert config == ScoutConfig()
    assert config.embedding.provider == "noop"
    assert config.retrieval.limit == 5
    assert config.retrieval.search_limit == 10
    assert config.retrieval.threshold == 0.7
    assert config.chunking.max_chunk_size == 1000
    assert config.github.per_page == 5
    assert config.github.max_results == 20
    assert config.log.level == "WARNING"


def test_project_config_overrides_defaults(tmp_path: Path):
    write_scout_config(
        tmp_path,
        """
[embedding]
provider = "OpenAI"
model = "text-embedding-3-large"

[retrieval]
threshold = 0.5

[chunking]
max_chunk_size = 400
""",
    )
    config = ConfigLoader.load(project_root=tmp_path)

    assert config.embedding.provider == "openai"
    assert config.embedding.model == "text-embedding-3-large"
    assert config.retrieval.threshold == 0.5
    assert config.retrieval.limit == 5
    assert config.chunking.max_chunk_size == 400


def test_explicit_config_file_wins_over_project_file(tmp_path: Path):
    write_scout_config(tmp_path, "[retrieval]\nlimit = 3\n")
    explicit = tmp_path / "other.toml"
    explicit.write_text("[retrieval]\nlimit = 9\n", encoding="utf-8")

    config = ConfigLoader.load(project_root=tmp_path, config_file=explicit)
    assert config.retrieval.limit == 9


def test_env_overrides_win(tmp_path: Path, monkeypatch):
    write_scout_config(tmp_path, '[embedding]\nprovider = "noop"\n\n[log]\nlevel = "info"\n')
    monkeypatch.setenv("SCOUT_EMBEDDING_PROVIDER", "openai")
    monkeypatch.setenv("SCOUT_GITHUB_TOKEN", "ghp_secret")
    monkeypatch.setenv("SCOUT_LOG_LEVEL", "debug")

    config = ConfigLoader.load(project_root=tmp_path)

    assert config.embedding.provider == "openai"
    assert config.github.token == "ghp_secret"
    assert config.log.level == "DEBUG"


def test_missing_explicit_file_is_config_error(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        ConfigLoader.load(config_file=tmp_path / "nope.toml")


def test_malformed_toml_is_config_error(tmp_path: Path):
    write_scout_config(tmp_path, "[retrieval\nlimit = ")
    with pytest.raises(ConfigError, match="Failed to load TOML"):
        ConfigLoader.load(project_root=tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        "[retrieval]\nthreshold = 1.5\n",
        "[chunking]\nmax_chunk_size = 0\n",
        "[log]\nlevel = \"LOUD\"\n",
        "[unknown]\nkey = 1\n",
    ],
)
def test_invalid_values_are_config_errors(tmp_path: Path, content: str):
    write_scout_config(tmp_path, content)
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigLoader.load(project_root=tmp_path)


def test_display_dict_masks_secrets():
    config = ScoutConfig.model_validate(
        {"embedding": {"api_key": "sk-live"}, "github": {"token": "env:GITHUB_TOKEN"}}
    )
    shown = config.to_display_dict()

    assert shown["embedding"]["api_key"] == "***"
    assert shown["github"]["token"] == "***"
    assert config.embedding.api_key == "sk-live"


def test_embedder_config_omits_unset_values():
    assert ScoutConfig().embedder_config() == {"provider": "noop", "dimension": 1536}
