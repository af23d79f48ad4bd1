"""Front-matter parsing.

A document may start with a YAML block bounded by `---` lines:

    ---
    title: Extracting file names
    categories: rust
    ---
    Body text...

Everything after the closing delimiter line is the body, kept byte-for-byte.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import frontmatter
import yaml
from yaml.constructor import ConstructorError

from postprose.documents.model import Document
from postprose.errors import FrontMatterError

logger = logging.getLogger(__name__)

_HANDLER = frontmatter.YAMLHandler()


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate mapping keys instead of keeping the last.

    Keys are compared after str() coercion.
    """

    def construct_mapping(self, node, deep=False):
        seen = set()
        for key_node, _ in node.value:
            # keys are exposed as strings, so 1 and "1" collide
            key = str(self.construct_object(key_node, deep=deep))
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _split_lines(text: str) -> list[str]:
    """Split on newline characters only, keeping line endings."""
    return [line for line in re.split(r"(?<=\n)", text) if line]


def _is_delimiter(line: str) -> bool:
    return _HANDLER.FM_BOUNDARY.fullmatch(line.rstrip("\r\n")) is not None


def split_front_matter(text: str, doc_id: str | None = None) -> tuple[str | None, str]:
    """Split text into (raw front-matter block, body).

    Returns (None, text) when the first line is not a delimiter.
    """
    lines = _split_lines(text)
    if not lines or not _is_delimiter(lines[0]):
        return None, text

    for i in range(1, len(lines)):
        if _is_delimiter(lines[i]):
            block = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            return block, body

    raise FrontMatterError("front-matter block is not closed", doc_id)


def parse_front_matter(text: str, doc_id: str | None = None) -> tuple[dict[str, Any], str]:
    """Parse the front-matter block into a mapping and return it with the body."""
    block, body = split_front_matter(text, doc_id)
    if block is None:
        return {}, body

    try:
        data = _HANDLER.load(block, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"invalid front-matter: {e}", doc_id) from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"front-matter must be a mapping, got {type(data).__name__}", doc_id
        )
    return {str(k): v for k, v in data.items()}, body


def parse_document(text: str, doc_id: str, path: Path | None = None) -> Document:
    """Build a Document from raw file text."""
    metadata, body = parse_front_matter(text, doc_id)
    logger.debug("Parsed %s (%d metadata keys, %d chars)", doc_id, len(metadata), len(body))
    return Document(id=doc_id, metadata=metadata, body=body, path=path)
