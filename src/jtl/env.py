"""Environment declarations: parsing single bindings and extracting the ENV section."""

from __future__ import annotations

import logging
from typing import MutableMapping

from .base import ENV_PREFIX, EnvironmentMap
from .sections import iter_declarations

logger = logging.getLogger(__name__)


def parse_env_declaration(declaration: str, env: MutableMapping[str, str]) -> bool:
    """Bind ``name=value`` from a ``>>>`` declaration into ``env``.

    Returns ``False`` when the declaration is not an env binding. Later
    bindings of the same name replace earlier ones.
    """

    if not declaration.startswith(ENV_PREFIX):
        return False
    name, separator, value = declaration[len(ENV_PREFIX):].partition("=")
    if not separator:
        logger.debug("Ignoring env declaration without '=': %r", declaration)
        return False
    env[name.strip()] = value.strip()
    return True


def extract_env(text: str) -> EnvironmentMap:
    """Return the variables declared in the document's ENV section."""

    env: EnvironmentMap = {}
    for _mode, declaration in iter_declarations(text, stop_at_body=True):
        parse_env_declaration(declaration, env)
    return env


__all__ = ["parse_env_declaration", "extract_env"]
