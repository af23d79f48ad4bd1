"""Load a directory of Markdown posts into a DocumentCollection."""

from __future__ import annotations

import logging
from pathlib import Path

from postprose.documents.front_matter import parse_document
from postprose.documents.model import Document, DocumentCollection
from postprose.errors import CollectionError, FrontMatterError

logger = logging.getLogger(__name__)


def _normalize_extension(extension: str) -> str:
    return "." + extension.lstrip(".").lower()


def find_documents(root: Path, extension: str = "md", recursive: bool = False) -> list[Path]:
    """Return post files under root with the given extension, sorted by relative path."""
    if not root.is_dir():
        raise CollectionError(f"Not a directory: {root}")

    suffix = _normalize_extension(extension)
    candidates = root.rglob("*") if recursive else root.iterdir()
    files = [p for p in candidates if p.is_file() and p.suffix.lower() == suffix]
    return sorted(files, key=lambda p: p.relative_to(root).as_posix())


def load_document(path: Path, root: Path) -> Document:
    """Read one post. The id is the path relative to root."""
    doc_id = path.relative_to(root).as_posix()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CollectionError(f"Failed to read {path}: {e}") from e
    return parse_document(text, doc_id, path=path)


def load_collection(
    root: Path,
    extension: str = "md",
    recursive: bool = False,
    strict: bool = True,
) -> DocumentCollection:
    """Load every post under root.

    With strict=False, posts with malformed front-matter are logged and skipped.
    """
    root = Path(root)
    try:
        paths = find_documents(root, extension, recursive)
    except OSError as e:
        raise CollectionError(f"Failed to scan {root}: {e}") from e

    collection = DocumentCollection()
    skipped = 0
    for path in paths:
        try:
            doc = load_document(path, root)
        except FrontMatterError as e:
            if strict:
                raise
            logger.warning("Skipping %s: %s", path, e)
            skipped += 1
            continue
        collection.add(doc)

    logger.info("Loaded %d documents from %s (%d skipped)", len(collection), root, skipped)
    return collection
