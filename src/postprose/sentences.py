"""Split article bodies into prose sentences and code snippets.

Headlines and blank lines are dropped. A fenced code block is kept as a
single snippet. Prose is split on ". " inside a line and on lines ending
with a period; lines in between are joined with a space.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from postprose.documents.model import Document, DocumentCollection

logger = logging.getLogger(__name__)

FENCE = "```"
HEADLINE = "#"
SENTENCE_BREAK = ". "


@dataclass(frozen=True)
class Segment:
    """One extracted unit: a prose sentence or a code snippet."""

    kind: Literal["prose", "code"]
    text: str


class _Splitter:
    def __init__(self) -> None:
        self.segments: list[Segment] = []
        self._prose: list[str] = []
        self._code: list[str] | None = None

    def feed(self, line: str) -> None:
        if self._code is not None:
            if line.startswith(FENCE):
                self._flush_code()
            else:
                self._code.append(line.rstrip())
            return

        if line.startswith(FENCE):
            self._flush_prose()
            self._code = []
            return

        line = line.strip()
        if not line or line.startswith(HEADLINE):
            return

        if SENTENCE_BREAK in line:
            parts = line.split(SENTENCE_BREAK)
            last = len(parts) - 1
            for idx, part in enumerate(parts):
                if not part:
                    continue
                if idx < last:
                    self._prose.append(part + ".")
                    self._flush_prose()
                else:
                    self._prose.append(part)
                    if part.endswith("."):
                        self._flush_prose()
            return

        self._prose.append(line)
        if line.endswith("."):
            self._flush_prose()

    def close(self) -> list[Segment]:
        if self._code is not None:
            logger.debug("Unclosed code fence at end of body")
            self._flush_code()
        self._flush_prose()
        return self.segments

    def _flush_prose(self) -> None:
        text = " ".join(self._prose).strip()
        self._prose = []
        if text:
            self.segments.append(Segment("prose", text))

    def _flush_code(self) -> None:
        text = "\n".join(self._code or []).strip("\n")
        self._code = None
        if text.strip():
            self.segments.append(Segment("code", text))


def split_segments(body: str) -> list[Segment]:
    """Split a body into prose and code segments, in order of appearance."""
    splitter = _Splitter()
    for line in body.split("\n"):
        splitter.feed(line)
    return splitter.close()


def split_sentences(body: str) -> list[str]:
    """Split a body into sentences. Code blocks count as one sentence each."""
    return [s.text for s in split_segments(body)]


def extract_sentences(doc: Document) -> list[str]:
    return split_sentences(doc.body)


def extract_collection(collection: DocumentCollection) -> dict[str, list[str]]:
    """Sentences per document id, in collection order."""
    result = {doc.id: extract_sentences(doc) for doc in collection}
    logger.info(
        "Extracted %d sentences from %d documents",
        sum(len(s) for s in result.values()),
        len(result),
    )
    return result
