"""
Tests for figma_text/richtext/tags.py

Covers markup forms, the declaration order and every branch of the
TagState open/close/value contract.
"""

import pytest

from figma_text.richtext.tags import (
    TAG_ORDER,
    TagKind,
    TagSet,
    TagState,
    close_markup,
    open_markup,
)


@pytest.fixture
def sink() -> list[str]:
    return []


# ---------- MARKUP ----------


def test_markup_forms() -> None:
    assert open_markup("b") == "<b>"
    assert open_markup("b", None) == "<b>"
    assert open_markup("color", "") == "<color>"
    assert open_markup("size", "14") == "<size=14>"
    assert close_markup("font-weight") == "</font-weight>"


def test_declaration_order() -> None:
    assert [kind.token for kind in TAG_ORDER] == [
        "b",
        "i",
        "u",
        "strikethrough",
        "color",
        "size",
        "font-weight",
        "indent",
    ]
    assert set(TAG_ORDER) == set(TagKind)


# ---------- ENSURE(REQUIRED) ----------


def test_open_once(sink: list[str]) -> None:
    tag = TagState(TagKind.BOLD, sink)
    tag.ensure(True)
    tag.ensure(True)
    assert sink == ["<b>"]
    assert tag.is_open


def test_close_once(sink: list[str]) -> None:
    tag = TagState(TagKind.ITALIC, sink)
    tag.ensure(False)
    assert sink == []
    tag.ensure(True)
    tag.ensure(False)
    tag.ensure(False)
    assert sink == ["<i>", "</i>"]
    assert not tag.is_open


def test_not_required_clears_value(sink: list[str]) -> None:
    tag = TagState(TagKind.COLOR, sink)
    tag.ensure(True, "#FF0000FF")
    assert tag.value == "#FF0000FF"
    tag.ensure(False)
    assert tag.value is None


# ---------- ENSURE(REQUIRED, VALUE) ----------


def test_value_change_closes_and_reopens(sink: list[str]) -> None:
    tag = TagState(TagKind.FONT_SIZE, sink)
    tag.ensure(True, "12")
    tag.ensure(True, "14")
    assert sink == ["<size=12>", "</size>", "<size=14>"]
    assert tag.value == "14"


def test_same_value_keeps_tag_open(sink: list[str]) -> None:
    tag = TagState(TagKind.FONT_WEIGHT, sink)
    tag.ensure(True, "700")
    tag.ensure(True, "700")
    assert sink == ["<font-weight=700>"]


def test_closed_and_not_required_is_noop(sink: list[str]) -> None:
    tag = TagState(TagKind.COLOR, sink)
    tag.ensure(False, "#000000FF")
    assert sink == []
    assert tag.value is None


def test_open_and_not_required_closes(sink: list[str]) -> None:
    tag = TagState(TagKind.COLOR, sink)
    tag.ensure(True, "#000000FF")
    tag.ensure(False, "#FFFFFFFF")
    assert sink == ["<color=#000000FF>", "</color>"]
    assert tag.value is None


def test_value_set_on_tag_opened_without_value(sink: list[str]) -> None:
    tag = TagState(TagKind.INDENT, sink)
    tag.ensure(True)
    tag.ensure(True, "10")
    assert sink == ["<indent>"]
    assert tag.value == "10"
    tag.ensure(True, "20")
    assert sink == ["<indent>", "</indent>", "<indent=20>"]


def test_empty_value_opens_bare_tag(sink: list[str]) -> None:
    tag = TagState(TagKind.COLOR, sink)
    tag.ensure(True, "")
    assert sink == ["<color>"]


# ---------- TAG SET ----------


def test_close_all_follows_declaration_order(sink: list[str]) -> None:
    tags = TagSet(sink)
    for kind in reversed(TAG_ORDER):
        tags[kind].ensure(True)
    sink.clear()

    tags.close_all()

    assert sink == [close_markup(kind.token) for kind in TAG_ORDER]
    assert tags.open_kinds == ()


def test_open_kinds(sink: list[str]) -> None:
    tags = TagSet(sink)
    tags[TagKind.INDENT].ensure(True, "10")
    tags[TagKind.BOLD].ensure(True)
    assert tags.open_kinds == (TagKind.BOLD, TagKind.INDENT)
    assert [state.kind for state in tags] == list(TAG_ORDER)


def test_tag_states_share_sink(sink: list[str]) -> None:
    tags = TagSet(sink)
    tags[TagKind.UNDERLINE].ensure(True)
    tags[TagKind.STRIKETHROUGH].ensure(True)
    assert sink == ["<u>", "<strikethrough>"]
