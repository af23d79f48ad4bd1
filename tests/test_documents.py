"""Tests for the document model and collection loader."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from postprose.documents import Document, DocumentCollection, find_documents, load_collection
from postprose.errors import CollectionError, DuplicateDocumentError, FrontMatterError

FIXTURES = Path(__file__).parent / "fixtures"


class TestDocument:
    def test_title_from_metadata(self):
        doc = Document(id="a.md", metadata={"title": "Hello"})
        assert doc.title == "Hello"

    def test_title_falls_back_to_stem(self):
        assert Document(id="posts/a-post.md").title == "a-post"

    def test_categories_list(self):
        doc = Document(id="a.md", metadata={"categories": ["Rust", "API"]})
        assert doc.categories == ["Rust", "API"]

    def test_categories_string(self):
        doc = Document(id="a.md", metadata={"categories": "Rust, TypeScript"})
        assert doc.categories == ["Rust", "TypeScript"]

    def test_categories_missing(self):
        assert Document(id="a.md").categories == []
        assert not Document(id="a.md").has_front_matter

    def test_metadata_is_read_only(self):
        source = {"title": "Hello"}
        doc = Document(id="a.md", metadata=source)
        with pytest.raises(TypeError):
            doc.metadata["title"] = "Changed"
        source["title"] = "Changed"
        assert doc.title == "Hello"

    def test_hashable(self):
        doc = Document(id="a.md", metadata={"title": "Hello"})
        assert doc in {doc}


class TestDocumentCollection:
    def test_unique_ids(self):
        collection = DocumentCollection([Document(id="a.md")])
        with pytest.raises(DuplicateDocumentError):
            collection.add(Document(id="a.md", body="other"))
        assert len(collection) == 1

    def test_order_and_lookup(self):
        collection = DocumentCollection([Document(id="b.md"), Document(id="a.md")])
        assert collection.ids() == ["b.md", "a.md"]
        assert "a.md" in collection
        assert collection.get("missing.md") is None
        assert collection[-1].id == "a.md"
        assert collection["b.md"].id == "b.md"
        with pytest.raises(KeyError):
            collection["missing.md"]

    def test_filter_by_category(self):
        collection = DocumentCollection(
            [
                Document(id="a.md", metadata={"categories": ["Rust"]}),
                Document(id="b.md", metadata={"categories": "TypeScript"}),
            ]
        )
        assert [d.id for d in collection.filter(category="Rust")] == ["a.md"]
        assert len(collection.filter()) == 2


class TestLoader:
    def test_fixture_collection(self):
        collection = load_collection(FIXTURES)
        assert len(collection) == 2
        first = collection[0]
        assert first.id == "2021-01-04-pathbuf-file-name.md"
        assert first.title == "Rust: Getting a file name from a PathBuf"
        assert first.categories == ["Rust"]
        assert first.path == FIXTURES / first.id

    def test_logs_loaded_count(self, caplog):
        caplog.set_level(logging.INFO, logger="postprose.documents.loader")
        load_collection(FIXTURES)
        assert "Loaded 2 documents" in caplog.text

    def test_body_matches_file_tail(self):
        doc = load_collection(FIXTURES)[1]
        raw = (FIXTURES / doc.id).read_text(encoding="utf-8")
        assert raw.endswith(doc.body)
        assert doc.body.startswith("\n# Union to intersection")

    def test_skips_other_extensions(self, tmp_path: Path):
        (tmp_path / "a.md").write_text("A.", encoding="utf-8")
        (tmp_path / "b.txt").write_text("B.", encoding="utf-8")
        (tmp_path / "README").write_text("no extension", encoding="utf-8")
        (tmp_path / "dir.md").mkdir()
        assert [p.name for p in find_documents(tmp_path)] == ["a.md"]

    def test_extension_with_dot(self, tmp_path: Path):
        (tmp_path / "a.markdown").write_text("A.", encoding="utf-8")
        assert len(load_collection(tmp_path, extension=".markdown")) == 1

    def test_recursive(self, tmp_path: Path):
        (tmp_path / "2021").mkdir()
        (tmp_path / "2021" / "a.md").write_text("A.", encoding="utf-8")
        (tmp_path / "b.md").write_text("B.", encoding="utf-8")
        assert load_collection(tmp_path).ids() == ["b.md"]
        assert load_collection(tmp_path, recursive=True).ids() == ["2021/a.md", "b.md"]

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(CollectionError):
            load_collection(tmp_path / "nope")

    def test_strict_raises_on_bad_front_matter(self, tmp_path: Path):
        (tmp_path / "bad.md").write_text("---\ntitle: A\ntitle: B\n---\n", encoding="utf-8")
        with pytest.raises(FrontMatterError):
            load_collection(tmp_path)

    def test_lenient_skips_bad_front_matter(self, tmp_path: Path, caplog):
        (tmp_path / "bad.md").write_text("---\nunclosed\n", encoding="utf-8")
        (tmp_path / "good.md").write_text("---\ntitle: Good\n---\nOk.", encoding="utf-8")
        collection = load_collection(tmp_path, strict=False)
        assert collection.ids() == ["good.md"]
        assert "Skipping" in caplog.text

    def test_invalid_utf8(self, tmp_path: Path):
        (tmp_path / "bin.md").write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(CollectionError):
            load_collection(tmp_path)
