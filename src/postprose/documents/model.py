"""Document and DocumentCollection types."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from postprose.errors import DuplicateDocumentError


@dataclass(frozen=True, eq=False)
class Document:
    """A single post: id, front-matter metadata and body text.

    Metadata is stored as a read-only mapping.
    """

    id: str
    metadata: Mapping[str, Any] = field(default_factory=dict)
    body: str = ""
    path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def title(self) -> str:
        """The `title` metadata value, falling back to the file stem."""
        title = self.metadata.get("title")
        if title is None:
            return Path(self.id).stem
        return str(title)

    @property
    def categories(self) -> list[str]:
        """The `categories` metadata value as a list of strings.

        Accepts a YAML list or a single comma/space separated string.
        """
        raw = self.metadata.get("categories")
        if raw is None:
            return []
        if isinstance(raw, (list, tuple)):
            return [str(c) for c in raw]
        return [c for c in str(raw).replace(",", " ").split() if c]

    @property
    def has_front_matter(self) -> bool:
        return bool(self.metadata)


class DocumentCollection:
    """Ordered collection of documents keyed by id. Ids are unique."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._docs: dict[str, Document] = {}
        for doc in documents or []:
            self.add(doc)

    def add(self, doc: Document) -> None:
        if doc.id in self._docs:
            raise DuplicateDocumentError(doc.id)
        self._docs[doc.id] = doc

    def get(self, doc_id: str) -> Document | None:
        return self._docs.get(doc_id)

    def ids(self) -> list[str]:
        return list(self._docs)

    def filter(self, category: str | None = None) -> list[Document]:
        """Documents in collection order, optionally restricted to a category."""
        if category is None:
            return list(self._docs.values())
        return [d for d in self._docs.values() if category in d.categories]

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._docs.values())

    def __getitem__(self, key: int | str) -> Document:
        """Look up by id (str) or by position (int)."""
        if isinstance(key, str):
            return self._docs[key]
        return list(self._docs.values())[key]
