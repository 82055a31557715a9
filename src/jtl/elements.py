"""Body element declarations and their attribute extraction."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Mapping, Pattern

from .base import (
    DECLARATION_DELIMITER,
    ELEMENT_PREFIX,
    ENV_REFERENCE,
    MIN_ELEMENT_LENGTH,
    ElementRecord,
    ElementTooShortError,
    MalformedContentError,
    MissingPrefixError,
    MissingSeparatorError,
    NoAttributesFoundError,
    PatternEngineError,
)

ATTRIBUTE_PATTERN = r'(\w+)="([^"]+)"'
_SEPARATOR = ">"


@lru_cache(maxsize=16)
def compile_attribute_pattern(pattern: str = ATTRIBUTE_PATTERN) -> Pattern[str]:
    """Compile an attribute pattern capturing ``(name, value)`` groups."""

    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise PatternEngineError(f"attribute pattern failed to compile: {exc}") from exc
    if compiled.groups < 2:
        raise PatternEngineError(
            f"attribute pattern must capture name and value groups: {pattern!r}"
        )
    return compiled


def extract_attributes(text: str, *, pattern: str = ATTRIBUTE_PATTERN) -> ElementRecord:
    """Collect every ``name="value"`` pair in ``text``; later names win."""

    attributes: ElementRecord = {}
    for match in compile_attribute_pattern(pattern).finditer(text):
        attributes[match.group(1)] = match.group(2)
    return attributes


def resolve_content(content: str, env: Mapping[str, str]) -> str:
    """Substitute a ``$env:name`` reference, leaving unknown names untouched.

    Every leading ``$env:`` is stripped, so ``$env:$env:name`` looks up ``name``.
    """

    name = content
    while name.startswith(ENV_REFERENCE):
        name = name[len(ENV_REFERENCE):]
    if name == content:
        return content
    return env.get(name, content)


def parse_element(
    declaration: str,
    env: Mapping[str, str],
    *,
    attribute_pattern: str = ATTRIBUTE_PATTERN,
) -> ElementRecord:
    """Parse ``>{attrs}>{id}>{content}`` into a flat element record.

    Attributes are matched across the whole declaration tail, including the id
    and content, and the reserved ``KEY``/``Content``/``Contents`` keys are
    written last so they always take precedence.
    """

    if len(declaration) < MIN_ELEMENT_LENGTH:
        raise ElementTooShortError()
    if not declaration.startswith(ELEMENT_PREFIX):
        raise MissingPrefixError()
    remainder = declaration[len(ELEMENT_PREFIX):]
    if _SEPARATOR not in remainder:
        raise MissingSeparatorError()

    record = extract_attributes(remainder, pattern=attribute_pattern)
    if not record:
        raise NoAttributesFoundError()

    content_part = remainder.split(_SEPARATOR, 1)[1]
    if content_part.endswith(DECLARATION_DELIMITER):
        content_part = content_part[:-1]

    element_id, separator, content = content_part.partition(_SEPARATOR)
    if not separator or not element_id or not content:
        raise MalformedContentError()

    content = resolve_content(content, env)
    record["KEY"] = element_id
    record["Content"] = content
    record["Contents"] = content
    return record


__all__ = [
    "ATTRIBUTE_PATTERN",
    "compile_attribute_pattern",
    "extract_attributes",
    "resolve_content",
    "parse_element",
]
