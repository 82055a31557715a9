"""Tests for JSON and YAML serialization of parsed records."""

from __future__ import annotations

import json

import pytest
import yaml

from src.jtl.base import EncodingError
from src.jtl.parser import parse
from src.jtl.serializer import render, stringify, stringify_env

SAMPLE_JTL = (
    "DOCTYPE=JTL\n>>>ENV;\n>>>foo=bar;\n>>>BEGIN;\n"
    '>element_id key="value">element_id>$env:foo;\n>>>END;\n'
)


def test_stringify_is_compact_and_ordered() -> None:
    assert stringify(parse(SAMPLE_JTL)) == (
        '[{"key":"value","KEY":"element_id","Content":"bar","Contents":"bar"}]'
    )


def test_stringify_output_decodes_back_to_records() -> None:
    assert json.loads(stringify(parse(SAMPLE_JTL))) == parse(SAMPLE_JTL)


def test_stringify_with_indent_decodes_to_same_records() -> None:
    records = parse(SAMPLE_JTL)

    assert json.loads(stringify(records, indent=2)) == records


def test_stringify_empty_sequence() -> None:
    assert stringify([]) == "[]"


def test_stringify_keeps_non_ascii() -> None:
    assert "é" in stringify([{"Content": "é"}])


def test_stringify_env() -> None:
    assert stringify_env({"foo": "bar"}) == '{"foo":"bar"}'


def test_render_yaml_preserves_records() -> None:
    records = parse(SAMPLE_JTL)

    rendered = render(records, fmt="yaml")

    assert yaml.safe_load(rendered) == records
    assert rendered.index("key:") < rendered.index("KEY:")


def test_render_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        render([], fmt="xml")


def test_encoding_failures_surface_as_encoding_error() -> None:
    with pytest.raises(EncodingError):
        stringify([{"bad": object()}])  # type: ignore[dict-item]
