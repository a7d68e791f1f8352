"""
Tests for figma_text/preprocess.py
"""

import copy
from typing import Any

import pytest

from figma_text.exceptions import NodeFormatError
from figma_text.preprocess import (
    apply_rich_text,
    is_text_node,
    iter_nodes,
    needs_rich_text,
    render_text_nodes,
)


def text_node(node_id: str, characters: str, **fields: Any) -> dict[str, Any]:
    node = {"id": node_id, "type": "TEXT", "characters": characters}
    node.update(fields)
    return node


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "name": "Sample",
        "document": {
            "id": "0:0",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "type": "CANVAS",
                    "children": [
                        text_node(
                            "1:1",
                            "X\nY",
                            lineTypes=["ORDERED", "ORDERED"],
                            lineIndentations=[0, 0],
                        ),
                        {
                            "id": "1:2",
                            "type": "FRAME",
                            "children": [
                                text_node(
                                    "2:1",
                                    "AB",
                                    characterStyleOverrides=[0, 1],
                                    styleOverrideTable={"1": {"italic": True}},
                                ),
                                text_node("2:2", "plain", style={"fontWeight": 700}),
                            ],
                        },
                    ],
                }
            ],
        },
    }


# ---------- TRAVERSAL ----------


def test_iter_nodes_is_depth_first_parents_first(document: dict[str, Any]) -> None:
    ids = [node["id"] for node in iter_nodes(document["document"])]
    assert ids == ["0:0", "0:1", "1:1", "1:2", "2:1", "2:2"]


def test_iter_nodes_skips_non_object_children() -> None:
    root = {"id": "r", "children": ["junk", None, {"id": "c"}]}
    assert [node["id"] for node in iter_nodes(root)] == ["r", "c"]


# ---------- SELECTION ----------


def test_is_text_node() -> None:
    assert is_text_node({"type": "TEXT"})
    assert not is_text_node({"type": "FRAME"})
    assert not is_text_node({})


@pytest.mark.parametrize(
    "node, expected",
    [
        (text_node("a", "x\ny", lineTypes=["ORDERED", "NONE"]), True),
        (text_node("a", "x\ny", lineTypes=["NONE", "UNORDERED"]), True),
        (text_node("a", "x", lineTypes=["ORDERED"]), False),
        (text_node("a", "x\ny", lineTypes=["NONE", "NONE"]), False),
        (text_node("a", "x", styleOverrideTable={"1": {}}), True),
        (text_node("a", "x", styleOverrideTable={}), False),
        (text_node("a", "x"), False),
        ({"type": "FRAME", "styleOverrideTable": {"1": {}}}, False),
    ],
)
def test_needs_rich_text(node: dict[str, Any], expected: bool) -> None:
    assert needs_rich_text(node) is expected


# ---------- RENDERING ----------


def test_render_text_nodes_does_not_modify(document: dict[str, Any]) -> None:
    snapshot = copy.deepcopy(document)

    rendered = render_text_nodes(document)

    assert rendered == {"1:1": "1. X\n2. Y", "2:1": "A<i>B</i>"}
    assert document == snapshot


def test_render_all_text_nodes(document: dict[str, Any]) -> None:
    rendered = render_text_nodes(document, only_needed=False)
    assert rendered["2:2"] == "<b><font-weight=700>plain</b></font-weight>"
    assert list(rendered) == ["1:1", "2:1", "2:2"]


def test_render_accepts_subtree(document: dict[str, Any]) -> None:
    frame = document["document"]["children"][0]["children"][1]
    assert render_text_nodes(frame) == {"2:1": "A<i>B</i>"}


# ---------- APPLYING ----------


def test_apply_rich_text_rewrites_in_place(document: dict[str, Any]) -> None:
    count = apply_rich_text(document)

    canvas = document["document"]["children"][0]
    assert count == 2
    assert canvas["children"][0]["characters"] == "1. X\n2. Y"
    assert canvas["children"][1]["children"][0]["characters"] == "A<i>B</i>"
    assert canvas["children"][1]["children"][1]["characters"] == "plain"


def test_apply_rich_text_all_nodes(document: dict[str, Any]) -> None:
    assert apply_rich_text(document, only_needed=False) == 3


def test_apply_rich_text_without_text_nodes() -> None:
    document = {"document": {"id": "0:0", "type": "DOCUMENT", "children": []}}
    assert apply_rich_text(document) == 0


def test_apply_rich_text_failure_leaves_document_unchanged(document: dict[str, Any]) -> None:
    frame = document["document"]["children"][0]["children"][1]
    frame["children"].append(
        text_node("2:3", "bad", lineTypes=["ORDERED", "ORDERED"], lineIndentations=[-1])
    )
    snapshot = copy.deepcopy(document)

    with pytest.raises(NodeFormatError) as exc_info:
        apply_rich_text(document)

    assert exc_info.value.context["node_id"] == "2:3"
    assert document == snapshot
