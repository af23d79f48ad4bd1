"""Exceptions raised while reading the post collection."""

from __future__ import annotations


class DocumentError(Exception):
    """Base class for document and collection errors."""


class FrontMatterError(DocumentError):
    """Raised when a document's front-matter block cannot be parsed."""

    def __init__(self, message: str, doc_id: str | None = None) -> None:
        self.doc_id = doc_id
        if doc_id:
            message = f"{doc_id}: {message}"
        super().__init__(message)


class DuplicateDocumentError(DocumentError):
    """Raised when a document id is already present in a collection."""

    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        super().__init__(f"Duplicate document id: {doc_id}")


class CollectionError(DocumentError):
    """Raised when the post directory cannot be read."""
