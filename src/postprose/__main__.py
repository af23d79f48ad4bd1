"""Entry point: python -m postprose [sentences|list|show]

- No args / "sentences": Print numbered sentences of a post (default: the last one)
- "list":                One line per post: id, title, categories
- "show":                Print a post's metadata and body
"""

from __future__ import annotations

import logging
import sys

from postprose.config import PostproseConfig, load_config
from postprose.documents import DocumentCollection, load_collection
from postprose.errors import DocumentError
from postprose.sentences import extract_sentences

logger = logging.getLogger("postprose")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load(config: PostproseConfig) -> DocumentCollection:
    return load_collection(
        config.posts_dir,
        extension=config.extension,
        recursive=config.recursive,
        strict=config.strict,
    )


def _run_sentences(collection: DocumentCollection, doc_id: str | None) -> None:
    if doc_id is None:
        if not len(collection):
            raise DocumentError("No documents found")
        doc = collection[-1]
    else:
        doc = collection.get(doc_id)
        if doc is None:
            raise DocumentError(f"Unknown document: {doc_id}")

    for i, sentence in enumerate(extract_sentences(doc)):
        print(f"{i}, {sentence}")


def _run_list(collection: DocumentCollection) -> None:
    for doc in collection:
        categories = ", ".join(doc.categories)
        print(f"{doc.id}\t{doc.title}\t{categories}")


def _run_show(collection: DocumentCollection, doc_id: str) -> None:
    doc = collection.get(doc_id)
    if doc is None:
        raise DocumentError(f"Unknown document: {doc_id}")
    for key, value in doc.metadata.items():
        print(f"{key}: {value}")
    print()
    sys.stdout.write(doc.body)


def _usage() -> None:
    print("Usage: python -m postprose [sentences [DOC_ID]|list|show DOC_ID]")
    print("  sentences  — Numbered sentences of a post (default: last post)")
    print("  list       — Posts with title and categories")
    print("  show       — Metadata and body of a post")


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    cmd = args[0] if args else "sentences"
    rest = args[1:]

    if cmd not in ("sentences", "list", "show") or (cmd == "show" and not rest):
        _usage()
        sys.exit(1)

    config = load_config()
    _setup_logging(config.log_level)

    try:
        collection = _load(config)
        if cmd == "sentences":
            _run_sentences(collection, rest[0] if rest else None)
        elif cmd == "list":
            _run_list(collection)
        else:
            _run_show(collection, rest[0])
    except DocumentError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
