"""Tests for JTL configuration loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from src.jtl.config import JTLConfig, load_jtl_config


def test_defaults_without_config_file(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JTL_OUTPUT_DIR", raising=False)

    config = load_jtl_config(None)

    assert config.output_root == (tmp_path / "parsed").resolve()
    assert config.format == "json"
    assert config.indent is None
    assert config.suffixes == (".jtl",)
    assert config.recursive is True


def test_output_dir_environment_variable(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("JTL_OUTPUT_DIR", str(tmp_path / "data"))

    config = JTLConfig.default()

    assert config.output_root == (tmp_path / "data").resolve()


def test_load_explicit_config(tmp_path) -> None:
    config_path = tmp_path / "settings" / "jtl.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        textwrap.dedent(
            """\
            output_root: out
            format: YAML
            indent: 2
            suffixes: [jtl, ".TXT", ".jtl", "  "]
            recursive: false
            """
        ),
        encoding="utf-8",
    )

    config = load_jtl_config(config_path)

    assert config.output_root == (tmp_path / "settings" / "out").resolve()
    assert config.format == "yaml"
    assert config.indent == 2
    assert config.suffixes == (".jtl", ".txt")
    assert config.recursive is False


def test_default_config_path_is_used_when_present(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JTL_OUTPUT_DIR", raising=False)
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "jtl.yaml").write_text("indent: 4\nsuffixes: jtlx\n", encoding="utf-8")

    config = load_jtl_config(None)

    assert config.indent == 4
    assert config.suffixes == (".jtlx",)
    assert config.output_root == (config_dir / "parsed").resolve()


def test_missing_explicit_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_jtl_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "format: xml\n", "indent: -1\n", "indent: true\n", "indent: '2'\n"],
)
def test_invalid_config_values_raise(tmp_path, content: str) -> None:
    config_path = tmp_path / "jtl.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_jtl_config(config_path)


def test_empty_config_file_uses_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("JTL_OUTPUT_DIR", raising=False)
    config_path = tmp_path / "jtl.yaml"
    config_path.write_text("", encoding="utf-8")

    config = load_jtl_config(Path(config_path))

    assert config.format == "json"
    assert config.suffixes == (".jtl",)
    assert config.output_root == (tmp_path / "parsed").resolve()
