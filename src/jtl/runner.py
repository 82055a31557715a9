"""Convert JTL files on disk into serialized element-record artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .base import JTLError
from .config import DEFAULT_SUFFIXES
from .parser import parse_file
from .serializer import FORMAT_JSON, render

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversionResult:
    source: Path
    status: str
    artifact: Path | None = None
    record_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "error"


def artifact_path_for(source: Path, output_root: Path, *, fmt: str, base: Path | None = None) -> Path:
    """Map ``source`` to its artifact, mirroring its location under ``base``."""

    relative = source.relative_to(base) if base is not None else Path(source.name)
    return output_root / relative.with_suffix(f".{fmt}")


def convert_file(
    source: str | Path,
    output_root: Path,
    *,
    fmt: str = FORMAT_JSON,
    indent: int | None = None,
    base: Path | None = None,
) -> ConversionResult:
    """Parse one file and write its records; failures become an ``error`` result."""

    path = Path(source).expanduser().resolve()
    try:
        document = parse_file(path)
        payload = render(document.records, fmt=fmt, indent=indent)
        artifact = artifact_path_for(path, output_root, fmt=fmt, base=base)
        artifact.parent.mkdir(parents=True, exist_ok=True)
        staging = artifact.with_name(artifact.name + ".tmp")
        staging.write_text(payload, encoding="utf-8")
        staging.replace(artifact)
    except (JTLError, OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to convert %s: %s", path, exc)
        return ConversionResult(source=path, status="error", error=str(exc))

    logger.info("Wrote %d record(s) from %s to %s", len(document.records), path, artifact)
    return ConversionResult(
        source=path,
        status="empty" if document.is_empty() else "converted",
        artifact=artifact,
        record_count=len(document.records),
    )


def find_documents(
    root: str | Path,
    *,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
    recursive: bool = True,
    exclude_root: Path | None = None,
) -> list[Path]:
    """List JTL files under ``root``, skipping anything inside ``exclude_root``."""

    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        raise FileNotFoundError(f"Scan root '{root_path}' does not exist")

    wanted = {suffix.lower() for suffix in suffixes}
    entries = root_path.rglob("*") if recursive else root_path.iterdir()
    found = []
    for entry in entries:
        if not entry.is_file() or entry.suffix.lower() not in wanted:
            continue
        if exclude_root is not None and entry.resolve().is_relative_to(exclude_root):
            continue
        found.append(entry.resolve())
    return sorted(found)


def convert_tree(
    root: str | Path,
    output_root: Path,
    *,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
    recursive: bool = True,
    fmt: str = FORMAT_JSON,
    indent: int | None = None,
    limit: int | None = None,
) -> list[ConversionResult]:
    """Convert every JTL file under ``root``; one failing file does not stop the rest."""

    base = Path(root).expanduser().resolve()
    output_root = Path(output_root).expanduser().resolve()
    documents = find_documents(base, suffixes=suffixes, recursive=recursive, exclude_root=output_root)
    if limit is not None and limit >= 0:
        documents = documents[:limit]
    return [
        convert_file(path, output_root, fmt=fmt, indent=indent, base=base)
        for path in documents
    ]


__all__ = [
    "ConversionResult",
    "artifact_path_for",
    "convert_file",
    "find_documents",
    "convert_tree",
]
