"""Bulk chunk -> embed -> insert pipeline for scraped repositories."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union
import json
import logging
import time

from pydantic import ValidationError

from scout_core.chunking import DEFAULT_MAX_CHUNK_SIZE, chunk_text
from scout_core.embedding import EmbeddingAdapter
from scout_core.errors import DataSourceError, EmbeddingUnavailable
from scout_core.models import RepositoryCandidate
from scout_core.vector import DocumentMetadata, EmbeddedDocument, VectorIndex

logger = logging.getLogger(__name__)

README_FILE_NAME = "README.md"
DOC_TYPE_DOCUMENTATION = "documentation"
DOC_TYPE_CODE = "code"
UNKNOWN_LANGUAGE = "unknown"


@dataclass
class IngestResult:
    """Result of embedding a batch of repositories."""
    repos_processed: int = 0
    chunks_generated: int = 0
    added: int = 0
    failed: int = 0
    duration_ms: float = 0.0
    errors: List[str] = field(default_factory=list)


def load_repositories(path: Union[str, Path]) -> List[RepositoryCandidate]:
    """Read a scraped-repository JSON file.

    Accepts a bare list of records or an object with a ``repos`` list.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DataSourceError(path, "file not found")
    except json.JSONDecodeError as e:
        raise DataSourceError(path, f"invalid JSON: {e}")

    records = data.get("repos") if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise DataSourceError(path, "expected a list of repositories or an object with 'repos'")

    repos: List[RepositoryCandidate] = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise DataSourceError(path, f"record {i} is not an object")
        try:
            repos.append(RepositoryCandidate.from_scraped(record))
        except ValidationError as e:
            raise DataSourceError(path, f"record {i}: {e}")
    return repos


def build_document_id(repo: RepositoryCandidate, source: str, chunk_index: int) -> str:
    """Collision-free id for one chunk of one source file of one repository."""
    return f"{repo.display_name}:{source}:{chunk_index}"


def _embed_chunks(
    repo: RepositoryCandidate,
    source: str,
    text: str,
    metadata: DocumentMetadata,
    index: VectorIndex,
    embedder: EmbeddingAdapter,
    max_chunk_size: int,
    result: IngestResult,
) -> None:
    chunks = chunk_text(text, max_chunk_size)
    result.chunks_generated += len(chunks)
    for chunk_index, chunk in enumerate(chunks):
        doc_id = build_document_id(repo, source, chunk_index)
        try:
            vector = embedder.embed(chunk)
        except EmbeddingUnavailable as e:
            logger.warning("Skipping %s: embedding failed: %s", doc_id, e)
            result.failed += 1
            result.errors.append(f"{doc_id}: {e}")
            continue
        index.insert(EmbeddedDocument(id=doc_id, text=chunk, embedding=vector, metadata=metadata))
        result.added += 1


def embed_repositories(
    repos: List[RepositoryCandidate],
    index: VectorIndex,
    embedder: EmbeddingAdapter,
    *,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
) -> IngestResult:
    """Chunk, embed and store every README and scraped file with content.

    Embedding is sequential, one provider call per chunk. A chunk whose
    embedding fails is logged and skipped; the batch continues.
    """
    t0 = time.perf_counter()
    result = IngestResult()

    for repo in repos:
        result.repos_processed += 1
        language = repo.language or UNKNOWN_LANGUAGE

        if repo.readme:
            metadata = DocumentMetadata(
                repo_id=repo.id,
                repo_name=repo.name,
                file_path="",
                file_name=README_FILE_NAME,
                language=language,
                type=DOC_TYPE_DOCUMENTATION,
            )
            _embed_chunks(
                repo, README_FILE_NAME, repo.readme, metadata, index, embedder, max_chunk_size, result
            )

        for scraped in repo.files:
            if not scraped.content:
                continue
            metadata = DocumentMetadata(
                repo_id=repo.id,
                repo_name=repo.name,
                file_path=scraped.path,
                file_name=scraped.name,
                language=scraped.language or language,
                type=DOC_TYPE_CODE,
            )
            _embed_chunks(
                repo,
                scraped.path or scraped.name,
                scraped.content,
                metadata,
                index,
                embedder,
                max_chunk_size,
                result,
            )

    result.duration_ms = (time.perf_counter() - t0) * 1000
    logger.info(
        "Embedded %d chunk(s) from %d repo(s), %d failed, in %.1fms",
        result.added,
        result.repos_processed,
        result.failed,
        result.duration_ms,
    )
    return result
