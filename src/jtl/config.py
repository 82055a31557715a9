"""YAML configuration for converting JTL files on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .serializer import FORMAT_JSON, SUPPORTED_FORMATS

DEFAULT_CONFIG_PATH = Path("config/jtl.yaml")
DEFAULT_SUFFIXES = (".jtl",)
OUTPUT_DIR_VARIABLE = "JTL_OUTPUT_DIR"


@dataclass(slots=True)
class JTLConfig:
    output_root: Path
    format: str = FORMAT_JSON
    indent: int | None = None
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    recursive: bool = True

    @classmethod
    def default(cls) -> "JTLConfig":
        return cls(output_root=default_output_root(base=None))

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, base_path: Path | None) -> "JTLConfig":
        raw_root = payload.get("output_root")
        if raw_root is None:
            output_root = default_output_root(base=base_path)
        else:
            output_root = _anchor(Path(str(raw_root)), base_path)

        fmt = str(payload.get("format") or FORMAT_JSON).strip().lower()
        if fmt not in SUPPORTED_FORMATS:
            raise ValueError(
                f"JTL config format must be one of {', '.join(SUPPORTED_FORMATS)}; got '{fmt}'"
            )

        return cls(
            output_root=output_root,
            format=fmt,
            indent=validate_indent(payload.get("indent")),
            suffixes=_suffixes(payload.get("suffixes")),
            recursive=bool(payload.get("recursive", True)),
        )


def validate_indent(value: Any) -> int | None:
    """Accept ``None`` or a non-negative integer indent width."""

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("indent must be a non-negative integer or null")
    return value


def default_output_root(*, base: Path | None) -> Path:
    override = os.getenv(OUTPUT_DIR_VARIABLE)
    if override:
        return Path(override).expanduser().resolve()
    return _anchor(Path("parsed"), base)


def load_jtl_config(config_path: Path | None) -> JTLConfig:
    """Load configuration from ``config_path``, ``config/jtl.yaml``, or defaults."""

    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return JTLConfig.default()
        config_path = DEFAULT_CONFIG_PATH

    resolved = Path(config_path).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"JTL config '{resolved}' does not exist")
    data = yaml.safe_load(resolved.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError("JTL config must be a mapping")
    return JTLConfig.from_dict(data, base_path=resolved.parent)


def _suffixes(values: Any) -> tuple[str, ...]:
    if isinstance(values, str):
        values = [values]
    suffixes: list[str] = []
    for value in values or ():
        token = str(value).strip().lower()
        if not token:
            continue
        token = token if token.startswith(".") else f".{token}"
        if token not in suffixes:
            suffixes.append(token)
    return tuple(suffixes) or DEFAULT_SUFFIXES


def _anchor(path: Path, base: Path | None) -> Path:
    path = path.expanduser()
    if base is not None and not path.is_absolute():
        path = base / path
    return path.resolve()


__all__ = [
    "JTLConfig",
    "DEFAULT_SUFFIXES",
    "load_jtl_config",
    "validate_indent",
]
