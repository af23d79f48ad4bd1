"""postprose — Markdown post collection with front-matter and sentence extraction."""

from postprose.documents import Document, DocumentCollection, load_collection
from postprose.sentences import extract_sentences, split_sentences

__all__ = [
    "Document",
    "DocumentCollection",
    "extract_sentences",
    "load_collection",
    "split_sentences",
]

__version__ = "0.1.0"
