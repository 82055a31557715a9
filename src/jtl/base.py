"""Core JTL constants, data models, and error types."""

from __future__ import annotations

from dataclasses import dataclass, field

DOCTYPE_MARKER = "DOCTYPE=JTL"
ENV_MARKER = ">>>ENV;"
BEGIN_MARKER = ">>>BEGIN;"
END_MARKER = ">>>END;"
ENV_PREFIX = ">>>"
ELEMENT_PREFIX = ">"
LINE_COMMENT = ">//>"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
ENV_REFERENCE = "$env:"
DECLARATION_DELIMITER = ";"

RESERVED_KEYS = ("KEY", "Content", "Contents")
MIN_ELEMENT_LENGTH = 5

ElementRecord = dict[str, str]
EnvironmentMap = dict[str, str]


class JTLError(RuntimeError):
    """Raised when a JTL document cannot be parsed."""

    message = "invalid JTL document"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingDoctypeError(JTLError):
    message = "invalid JTL document: missing DOCTYPE"


class ElementTooShortError(JTLError):
    message = "invalid element format: too short"


class MissingPrefixError(JTLError):
    message = "invalid element format: missing '>' prefix"


class MissingSeparatorError(JTLError):
    message = "invalid element format: missing separator"


class NoAttributesFoundError(JTLError):
    message = "invalid element format: no attributes found"


class MalformedContentError(JTLError):
    message = "invalid element format: malformed content"


class PatternEngineError(JTLError):
    message = "attribute pattern failed to compile"


class EncodingError(JTLError):
    message = "failed to encode parsed document"


@dataclass(slots=True)
class ParsedJTL:
    """Element records and environment bindings read from one source."""

    source: str
    records: list[ElementRecord] = field(default_factory=list)
    env: EnvironmentMap = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.records


__all__ = [
    "DOCTYPE_MARKER",
    "ENV_MARKER",
    "BEGIN_MARKER",
    "END_MARKER",
    "ENV_PREFIX",
    "ELEMENT_PREFIX",
    "LINE_COMMENT",
    "BLOCK_COMMENT_OPEN",
    "BLOCK_COMMENT_CLOSE",
    "ENV_REFERENCE",
    "DECLARATION_DELIMITER",
    "RESERVED_KEYS",
    "MIN_ELEMENT_LENGTH",
    "ElementRecord",
    "EnvironmentMap",
    "JTLError",
    "MissingDoctypeError",
    "ElementTooShortError",
    "MissingPrefixError",
    "MissingSeparatorError",
    "NoAttributesFoundError",
    "MalformedContentError",
    "PatternEngineError",
    "EncodingError",
    "ParsedJTL",
]
