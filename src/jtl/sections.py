"""Section state machine driving which declarations a scan accepts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .lines import LineKind, classify_line, document_lines, split_declarations

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    PREAMBLE = "preamble"
    ENV = "env"
    BODY = "body"
    CLOSED = "closed"


# Marker kinds mapped to the legal (from -> to) transitions they trigger.
_TRANSITIONS: dict[LineKind, dict[Mode, Mode]] = {
    LineKind.ENV_BEGIN: {Mode.PREAMBLE: Mode.ENV},
    LineKind.BODY_BEGIN: {Mode.PREAMBLE: Mode.BODY, Mode.ENV: Mode.BODY},
    LineKind.BODY_END: {Mode.BODY: Mode.CLOSED},
}


@dataclass(slots=True)
class SectionState:
    """Tracks the current section for one scan of one document."""

    mode: Mode = Mode.PREAMBLE

    def advance(self, marker: LineKind) -> Mode:
        """Apply a section marker and return the resulting mode.

        Markers without a legal transition from the current mode are consumed
        and leave the mode unchanged; nothing re-enters ``BODY`` once closed.
        """

        if not marker.is_marker:
            raise ValueError(f"'{marker.value}' is not a section marker")
        target = _TRANSITIONS[marker].get(self.mode)
        if target is None:
            logger.debug("Ignoring %s marker in %s section", marker.value, self.mode.value)
            return self.mode
        logger.debug("Section transition %s -> %s", self.mode.value, target.value)
        self.mode = target
        return target

    @property
    def accepts_declarations(self) -> bool:
        return self.mode in (Mode.ENV, Mode.BODY)


def iter_declarations(text: str, *, stop_at_body: bool = False) -> Iterator[tuple[Mode, str]]:
    """Yield ``(mode, declaration)`` for every declaration inside an open section.

    Raises ``MissingDoctypeError`` before scanning when the first line lacks the
    doctype marker. With ``stop_at_body`` the scan ends at the body marker.
    """

    state = SectionState()
    for raw_line in document_lines(text):
        line = raw_line.strip()
        kind = classify_line(line)
        if kind.discarded:
            continue
        if kind.is_marker:
            if stop_at_body and kind is LineKind.BODY_BEGIN:
                return
            state.advance(kind)
            continue
        if not state.accepts_declarations:
            continue
        for declaration in split_declarations(line):
            yield state.mode, declaration


__all__ = ["Mode", "SectionState", "iter_declarations"]
