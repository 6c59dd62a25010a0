import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from hypothesis import settings

from scout_core.embedding import EmbeddingAdapter, EmbeddingResult, EmbeddingTelemetry
from scout_core.errors import EmbeddingUnavailable

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("scout-tests", database=None)
settings.load_profile("scout-tests")


class FakeEmbedder(EmbeddingAdapter):
    """Embedder returning fixed vectors for known texts.

    Unknown texts map to ``default``; texts listed in ``failing`` raise
    EmbeddingUnavailable.
    """

    def __init__(
        self,
        vectors: Optional[Mapping[str, Sequence[float]]] = None,
        *,
        default: Sequence[float] = (0.0, 0.0, 1.0),
        failing: Sequence[str] = (),
    ):
        super().__init__("fake-embedding")
        self.vectors = dict(vectors or {})
        self.default = list(default)
        self.failing = set(failing)
        self.calls: List[str] = []

    @property
    def dimension(self) -> int:
        return len(self.default)

    def embed_batch(self, texts: List[str]) -> List[EmbeddingResult]:
        results = []
        for text in texts:
            self.calls.append(text)
            if text in self.failing:
                raise EmbeddingUnavailable(f"fake failure for {text!r}")
            vector = list(self.vectors.get(text, self.default))
            telemetry = EmbeddingTelemetry(
                provider_id="fake", model_name=self.model_name, dimension=len(vector)
            )
            results.append(EmbeddingResult(vector=vector, telemetry=telemetry))
        return results


def write_scout_config(project_root: Path, content: str) -> Path:
    """Write ``.scout/config.toml`` under ``project_root`` and return its path."""
    scout_dir = project_root / ".scout"
    scout_dir.mkdir(parents=True, exist_ok=True)
    path = scout_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_repos_file(path: Path, repos: List[Dict[str, Any]], *, wrapped: bool = False) -> Path:
    """Write a scraped-repository data source as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload: Any = {"repos": repos} if wrapped else repos
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def github_item(
    repo_id: int,
    name: str,
    *,
    description: Optional[str] = None,
    language: Optional[str] = None,
    stars: int = 0,
    topics: Optional[List[str]] = None,
    updated_at: Optional[str] = None,
    owner: str = "octo",
) -> Dict[str, Any]:
    """Build an item shaped like a GitHub /search/repositories hit."""
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner},
        "html_url": f"https://github.com/{owner}/{name}",
        "description": description,
        "language": language,
        "stargazers_count": stars,
        "topics": topics or [],
        "updated_at": updated_at,
    }
