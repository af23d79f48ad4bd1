"""Post collection — Markdown files with optional YAML front-matter.

Layout:
    posts/
    ├── 2021-01-04-pathbuf-to-string.md    # ---\ntitle: ...\n---\nbody
    └── 2021-02-10-typescript-unions.md

A document id is the file path relative to the collection root.
"""

from postprose.documents.front_matter import (
    parse_document,
    parse_front_matter,
    split_front_matter,
)
from postprose.documents.loader import find_documents, load_collection, load_document
from postprose.documents.model import Document, DocumentCollection

__all__ = [
    "Document",
    "DocumentCollection",
    "find_documents",
    "load_collection",
    "load_document",
    "parse_document",
    "parse_front_matter",
    "split_front_matter",
]
