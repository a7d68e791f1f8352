import pytest

from figma_text.model.enums import (
    BOLD_WEIGHT_THRESHOLD,
    DEFAULT_LINE_TYPE,
    DEFAULT_TEXT_DECORATION,
    FontWeight,
    LineType,
    NodeType,
    PaintType,
    TextDecoration,
    is_bold_weight,
)


def test_linetype_is_list_and_localization() -> None:
    assert not LineType.NONE.is_list
    assert LineType.ORDERED.is_list
    assert LineType.UNORDERED.is_list
    assert LineType.ORDERED.localized_name("ru").startswith("Нумерованный")
    assert LineType.UNORDERED.localized_name("en") == "Unordered list"
    assert LineType.NONE.localized_name() == "Plain line"


def test_enum_values_match_export_names() -> None:
    assert LineType("ORDERED") is LineType.ORDERED
    assert TextDecoration("STRIKETHROUGH") is TextDecoration.STRIKETHROUGH
    assert NodeType("TEXT") is NodeType.TEXT
    assert PaintType("IMAGE") is PaintType.IMAGE
    with pytest.raises(ValueError):
        LineType("BULLETED")


def test_paint_type_gradient_classification() -> None:
    gradients = {p for p in PaintType if p.is_gradient}
    assert gradients == {
        PaintType.GRADIENT_LINEAR,
        PaintType.GRADIENT_RADIAL,
        PaintType.GRADIENT_ANGULAR,
        PaintType.GRADIENT_DIAMOND,
    }
    assert not PaintType.SOLID.is_gradient


def test_font_weight_scale() -> None:
    assert [w.value for w in FontWeight] == list(range(100, 1000, 100))
    assert BOLD_WEIGHT_THRESHOLD == FontWeight.BOLD == 700


@pytest.mark.parametrize(
    "weight, expected",
    [(None, False), (400, False), (699.5, False), (700, True), (700.0, True), (900, True)],
)
def test_is_bold_weight(weight: float | None, expected: bool) -> None:
    assert is_bold_weight(weight) is expected


def test_defaults() -> None:
    assert DEFAULT_LINE_TYPE is LineType.NONE
    assert DEFAULT_TEXT_DECORATION is TextDecoration.NONE
