"""CLI tests using typer's CliRunner."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from scout_cli.cli import app
from scout_core.config import ConfigLoader

from conftest import github_item, write_repos_file, write_scout_config

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ConfigLoader.ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_chunk_json(tmp_path: Path):
    text_file = tmp_path / "doc.txt"
    text_file.write_text("One. Two! Three?", encoding="utf-8")

    result = runner.invoke(app, ["chunk", str(text_file), "--max-chunk-size", "7", "--format", "json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload == {"max_chunk_size": 7, "chunks": ["One Two", "Three"]}


def test_chunk_uses_configured_size(tmp_path: Path):
    write_scout_config(tmp_path, "[chunking]\nmax_chunk_size = 3\n")
    text_file = tmp_path / "doc.txt"
    text_file.write_text("One. Two.", encoding="utf-8")

    result = runner.invoke(app, ["chunk", str(text_file), "--format", "json"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["chunks"] == ["One", "Two"]


def test_rag_search_finds_exact_chunk(tmp_path: Path):
    repos = write_repos_file(
        tmp_path / "repos.json",
        [{"id": 1, "name": "notes", "full_name": "someone/notes", "readme": "Plain notes. Nothing else."}],
    )

    result = runner.invoke(app, ["rag", "search", "Plain notes Nothing else", "--repos", str(repos)])

    assert result.exit_code == 0, result.output
    assert "Embedded 1 chunk(s)" in result.output
    assert "Found 1 relevant document" in result.output
    assert "Plain notes Nothing else" in result.output


def test_rag_search_no_results(tmp_path: Path):
    repos = write_repos_file(tmp_path / "repos.json", [])

    result = runner.invoke(app, ["rag", "search", "anything", "--repos", str(repos)])

    assert result.exit_code == 0, result.output
    assert "No results found" in result.output


def test_rag_search_bad_data_source_exits_1(tmp_path: Path):
    bad = tmp_path / "repos.json"
    bad.write_text("{oops", encoding="utf-8")

    result = runner.invoke(app, ["rag", "search", "q", "--repos", str(bad)])

    assert result.exit_code == 1
    assert "Search failed" in result.output


def test_rag_stats(tmp_path: Path):
    repos = write_repos_file(
        tmp_path / "repos.json",
        [
            {"id": 1, "name": "alpha", "language": "Go", "readme": "One. Two."},
            {"id": 2, "name": "beta", "language": "Rust", "readme": "Three."},
        ],
    )

    result = runner.invoke(app, ["rag", "stats", "--repos", str(repos)])

    assert result.exit_code == 0, result.output
    assert "Total vectors: 2" in result.output
    assert "Total repositories: 2" in result.output


def test_repos_score_json(tmp_path: Path):
    items = [
        github_item(1, "plain", stars=10),
        github_item(2, "react-kit", language="JavaScript", stars=100),
        github_item(1, "plain", stars=10),
    ]
    items_file = tmp_path / "items.json"
    items_file.write_text(json.dumps({"items": items}), encoding="utf-8")

    result = runner.invoke(
        app, ["repos", "score", str(items_file), "--tech", "react", "--format", "json"]
    )

    assert result.exit_code == 0, result.output
    ranked = json.loads(result.stdout)
    assert [r["id"] for r in ranked] == ["2", "1"]
    assert ranked[0]["full_name"] == "octo/react-kit"


def test_repos_search_without_token_exits_1():
    result = runner.invoke(app, ["repos", "search", "auth app"])

    assert result.exit_code == 1
    assert "GitHub token not configured" in result.output


def test_config_show_masks_secrets(tmp_path: Path, monkeypatch):
    config_file = tmp_path / "custom.toml"
    config_file.write_text('[embedding]\napi_key = "sk-live"\n\n[retrieval]\nlimit = 8\n', encoding="utf-8")
    monkeypatch.setenv("SCOUT_GITHUB_TOKEN", "ghp_secret")

    result = runner.invoke(app, ["--config-file", str(config_file), "config", "show"])

    assert result.exit_code == 0, result.output
    shown = json.loads(result.stdout)
    assert shown["retrieval"]["limit"] == 8
    assert shown["embedding"]["api_key"] == "***"
    assert shown["github"]["token"] == "***"
    assert "sk-live" not in result.output


def test_invalid_config_exits_1(tmp_path: Path):
    write_scout_config(tmp_path, "[retrieval]\nlimit = 0\n")

    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_rag_search_with_unconfigured_openai_exits_1(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    write_scout_config(tmp_path, '[embedding]\nprovider = "openai"\n')
    repos = write_repos_file(
        tmp_path / "repos.json", [{"id": 1, "name": "notes", "readme": "One. Two. Three."}]
    )

    result = runner.invoke(app, ["rag", "search", "anything", "--repos", str(repos)])

    assert result.exit_code == 1
    assert "Search failed" in result.output
    assert "Embedded" not in result.output
