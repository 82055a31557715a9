"""Serialization of parsed JTL records to JSON or YAML text."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from .base import ElementRecord, EncodingError, EnvironmentMap

FORMAT_JSON = "json"
FORMAT_YAML = "yaml"
SUPPORTED_FORMATS = (FORMAT_JSON, FORMAT_YAML)

_COMPACT_SEPARATORS = (",", ":")


def stringify(records: Sequence[ElementRecord], *, indent: int | None = None) -> str:
    """Encode the element records as a JSON array of objects."""

    return _dump_json(list(records), indent=indent)


def stringify_env(env: EnvironmentMap, *, indent: int | None = None) -> str:
    """Encode an environment map as a JSON object."""

    return _dump_json(dict(env), indent=indent)


def render(data: Sequence[ElementRecord] | Mapping[str, Any], *, fmt: str = FORMAT_JSON, indent: int | None = None) -> str:
    if fmt == FORMAT_JSON:
        return _dump_json(data if isinstance(data, Mapping) else list(data), indent=indent)
    if fmt == FORMAT_YAML:
        return _dump_yaml(data, indent=indent)
    raise ValueError(f"Unsupported output format '{fmt}'")


def _dump_json(payload: Any, *, indent: int | None) -> str:
    separators = _COMPACT_SEPARATORS if indent is None else None
    try:
        return json.dumps(payload, ensure_ascii=False, indent=indent, separators=separators)
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"failed to encode JSON: {exc}") from exc


def _dump_yaml(payload: Any, *, indent: int | None) -> str:
    if not isinstance(payload, Mapping):
        payload = [dict(item) for item in payload]
    else:
        payload = dict(payload)
    try:
        return yaml.safe_dump(
            payload,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
            indent=indent,
        )
    except yaml.YAMLError as exc:
        raise EncodingError(f"failed to encode YAML: {exc}") from exc


__all__ = [
    "FORMAT_JSON",
    "FORMAT_YAML",
    "SUPPORTED_FORMATS",
    "stringify",
    "stringify_env",
    "render",
]
