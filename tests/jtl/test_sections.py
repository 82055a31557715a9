"""Tests for the section state machine."""

from __future__ import annotations

import textwrap

import pytest

from src.jtl.base import MissingDoctypeError
from src.jtl.lines import LineKind
from src.jtl.sections import Mode, SectionState, iter_declarations


def test_state_starts_in_preamble() -> None:
    assert SectionState().mode is Mode.PREAMBLE


def test_full_section_walk() -> None:
    state = SectionState()

    assert state.advance(LineKind.ENV_BEGIN) is Mode.ENV
    assert state.advance(LineKind.BODY_BEGIN) is Mode.BODY
    assert state.advance(LineKind.BODY_END) is Mode.CLOSED


def test_body_may_start_without_env_section() -> None:
    state = SectionState()

    assert state.advance(LineKind.BODY_BEGIN) is Mode.BODY


def test_closed_body_is_never_reentered() -> None:
    state = SectionState(mode=Mode.CLOSED)

    assert state.advance(LineKind.BODY_BEGIN) is Mode.CLOSED
    assert state.advance(LineKind.ENV_BEGIN) is Mode.CLOSED
    assert not state.accepts_declarations


def test_env_marker_inside_body_is_ignored() -> None:
    state = SectionState(mode=Mode.BODY)

    assert state.advance(LineKind.ENV_BEGIN) is Mode.BODY


def test_end_marker_outside_body_is_ignored() -> None:
    state = SectionState(mode=Mode.ENV)

    assert state.advance(LineKind.BODY_END) is Mode.ENV


def test_advance_rejects_non_marker_kinds() -> None:
    with pytest.raises(ValueError):
        SectionState().advance(LineKind.CONTENT)


SAMPLE = textwrap.dedent(
    """\
    DOCTYPE=JTL
    >>>ignored=preamble;
    >>>ENV;
    >>>foo=bar; >>>baz=qux;
    >>>BEGIN;
    >a="1">one>first;
    >>>END;
    >a="2">two>second;
    """
)


def test_iter_declarations_yields_only_open_sections() -> None:
    assert list(iter_declarations(SAMPLE)) == [
        (Mode.ENV, ">>>foo=bar"),
        (Mode.ENV, ">>>baz=qux"),
        (Mode.BODY, '>a="1">one>first'),
    ]


def test_iter_declarations_can_stop_at_body() -> None:
    declarations = list(iter_declarations(SAMPLE, stop_at_body=True))

    assert [mode for mode, _decl in declarations] == [Mode.ENV, Mode.ENV]


def test_iter_declarations_checks_doctype_first() -> None:
    with pytest.raises(MissingDoctypeError):
        list(iter_declarations(">>>ENV;\n>>>foo=bar;\n"))
