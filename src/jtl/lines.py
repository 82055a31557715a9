"""Line classification and declaration splitting for JTL documents."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from .base import (
    BEGIN_MARKER,
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    DECLARATION_DELIMITER,
    DOCTYPE_MARKER,
    END_MARKER,
    ENV_MARKER,
    LINE_COMMENT,
    MissingDoctypeError,
)


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT_OPEN = "comment-open"
    COMMENT_CLOSE = "comment-close"
    COMMENT_LINE = "comment-line"
    ENV_BEGIN = "env-begin"
    BODY_BEGIN = "body-begin"
    BODY_END = "body-end"
    CONTENT = "content"

    @property
    def discarded(self) -> bool:
        return self in _DISCARDED

    @property
    def is_marker(self) -> bool:
        return self in _MARKERS


_DISCARDED = frozenset(
    {LineKind.BLANK, LineKind.COMMENT_OPEN, LineKind.COMMENT_CLOSE, LineKind.COMMENT_LINE}
)
_MARKERS = frozenset({LineKind.ENV_BEGIN, LineKind.BODY_BEGIN, LineKind.BODY_END})
_MARKER_KINDS = {
    ENV_MARKER: LineKind.ENV_BEGIN,
    BEGIN_MARKER: LineKind.BODY_BEGIN,
    END_MARKER: LineKind.BODY_END,
}


def classify_line(line: str) -> LineKind:
    """Classify a trimmed line without regard to the current section."""

    if not line:
        return LineKind.BLANK
    if line.startswith(BLOCK_COMMENT_OPEN):
        return LineKind.COMMENT_OPEN
    if line.startswith(BLOCK_COMMENT_CLOSE):
        return LineKind.COMMENT_CLOSE
    if line.startswith(LINE_COMMENT):
        return LineKind.COMMENT_LINE
    return _MARKER_KINDS.get(line, LineKind.CONTENT)


def document_lines(text: str) -> list[str]:
    """Return the document's lines after checking the doctype on the first one.

    Only line feeds end a line and one trailing carriage return is dropped.
    Form feeds and Unicode line separators stay inside the line.
    """

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if not lines or DOCTYPE_MARKER not in lines[0]:
        raise MissingDoctypeError()
    return lines


def split_declarations(line: str) -> Iterator[str]:
    """Yield the trimmed, non-empty, non-comment declarations held by ``line``."""

    for raw in line.split(DECLARATION_DELIMITER):
        declaration = raw.strip()
        if not declaration or declaration.startswith(LINE_COMMENT):
            continue
        yield declaration


__all__ = [
    "LineKind",
    "classify_line",
    "document_lines",
    "split_declarations",
]
