"""Document-level JTL parsing."""

from __future__ import annotations

import logging
from pathlib import Path

from .base import ELEMENT_PREFIX, ElementRecord, EnvironmentMap, ParsedJTL
from .elements import ATTRIBUTE_PATTERN, parse_element
from .env import extract_env, parse_env_declaration
from .sections import Mode, iter_declarations

logger = logging.getLogger(__name__)


def parse(text: str, *, attribute_pattern: str = ATTRIBUTE_PATTERN) -> list[ElementRecord]:
    """Parse a JTL document into element records in document order.

    The first error aborts the whole parse; no partial result is returned.
    """

    env: EnvironmentMap = {}
    records: list[ElementRecord] = []
    for mode, declaration in iter_declarations(text):
        if mode is Mode.ENV:
            parse_env_declaration(declaration, env)
        elif declaration.startswith(ELEMENT_PREFIX):
            records.append(parse_element(declaration, env, attribute_pattern=attribute_pattern))
        else:
            logger.debug("Ignoring body declaration without '>' prefix: %r", declaration)
    return records


def parse_text(source: str, text: str) -> ParsedJTL:
    """Parse ``text`` into a ``ParsedJTL`` carrying its records and environment."""

    return ParsedJTL(source=source, records=parse(text), env=extract_env(text))


def parse_file(path: str | Path) -> ParsedJTL:
    """Read a UTF-8 JTL file from disk and parse it."""

    resolved = Path(path).expanduser().resolve()
    return parse_text(str(resolved), resolved.read_text(encoding="utf-8"))


__all__ = ["parse", "parse_text", "parse_file"]
