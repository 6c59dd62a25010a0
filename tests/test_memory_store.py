import threading

import pytest

from scout_core.errors import DuplicateIdError
from scout_core.vector import (
    DocumentMetadata,
    EmbeddedDocument,
    InMemoryEmbeddingStore,
    get_backend,
)


def _doc(doc_id: str, text: str = "text", embedding=(1.0, 0.0), **meta) -> EmbeddedDocument:
    return EmbeddedDocument(
        id=doc_id, text=text, embedding=list(embedding), metadata=DocumentMetadata(**meta)
    )


def test_insert_is_upsert_last_write_wins():
    store = InMemoryEmbeddingStore()
    store.insert(_doc("a", text="first"))
    store.insert(_doc("a", text="second"))

    assert len(store) == 1
    assert store.get("a").text == "second"


def test_insert_unique_rejects_existing_id():
    store = InMemoryEmbeddingStore()
    store.insert_unique(_doc("a"))

    with pytest.raises(DuplicateIdError) as exc:
        store.insert_unique(_doc("a", text="other"))

    assert exc.value.doc_id == "a"
    assert store.get("a").text == "text"


def test_scan_all_keeps_insertion_order():
    store = InMemoryEmbeddingStore()
    for doc_id in ("c", "a", "b"):
        store.insert(_doc(doc_id))
    assert [d.id for d in store.scan_all()] == ["c", "a", "b"]


def test_scan_all_is_a_snapshot():
    store = InMemoryEmbeddingStore()
    store.insert(_doc("a"))
    it = store.scan_all()
    store.insert(_doc("b"))
    assert [d.id for d in it] == ["a"]


def test_clear_empties_store():
    store = InMemoryEmbeddingStore()
    store.insert(_doc("a"))
    store.insert(_doc("b"))
    store.clear()

    assert len(store) == 0
    assert list(store.scan_all()) == []
    assert "a" not in store


def test_concurrent_inserts_are_all_kept():
    store = InMemoryEmbeddingStore()

    def worker(prefix: str) -> None:
        for i in range(200):
            store.insert(_doc(f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(str(n),)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 800


def test_metadata_from_dict_accepts_camel_case():
    meta = DocumentMetadata.from_dict(
        {"repoName": "demo", "filePath": "src/a.ts", "fileName": "a.ts", "language": "TypeScript", "stars": 3}
    )
    assert meta.repo_name == "demo"
    assert meta.file_path == "src/a.ts"
    assert meta.file_name == "a.ts"
    assert meta.to_dict() == {
        "repo_name": "demo",
        "file_path": "src/a.ts",
        "file_name": "a.ts",
        "language": "TypeScript",
    }


def test_metadata_from_empty_dict():
    assert DocumentMetadata.from_dict(None) == DocumentMetadata()


def test_get_backend_memory_and_unknown():
    assert isinstance(get_backend({"backend": "memory"}), InMemoryEmbeddingStore)
    assert isinstance(get_backend({}), InMemoryEmbeddingStore)
    with pytest.raises(ValueError):
        get_backend({"backend": "faiss"})
