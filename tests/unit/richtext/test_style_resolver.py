import pytest

from figma_text.model.enums import PaintType
from figma_text.model.paint import RGBA, GradientPaint, SolidPaint
from figma_text.model.style import TextStyle
from figma_text.richtext.style_resolver import StyleResolver, format_number, solid_color_hex

BASE = TextStyle(font_size=12)
BOLD = TextStyle(font_weight=700)


@pytest.fixture
def resolver() -> StyleResolver:
    return StyleResolver(BASE, (0, 1, 7, 0), {0: TextStyle(italic=True), 1: BOLD})


def test_override_id_past_end_is_zero(resolver: StyleResolver) -> None:
    assert resolver.override_id(1) == 1
    assert resolver.override_id(4) == 0
    assert resolver.override_id(-1) == 0


def test_resolve(resolver: StyleResolver) -> None:
    assert resolver.resolve(0) is BASE
    assert resolver.resolve(1) is BOLD
    assert resolver.resolve(10) is BASE


def test_unknown_override_id_resolves_to_base(resolver: StyleResolver) -> None:
    assert resolver.resolve(2) is BASE


def test_override_id_zero_ignores_table_entry(resolver: StyleResolver) -> None:
    assert resolver.resolve(3) is BASE


def test_solid_color_hex() -> None:
    assert solid_color_hex(TextStyle()) is None
    assert solid_color_hex(TextStyle(fills=(SolidPaint(RGBA(0, 0, 0, 0.5)),))) == "#00000080"
    gradient_only = TextStyle(fills=(GradientPaint(kind=PaintType.GRADIENT_DIAMOND),))
    assert solid_color_hex(gradient_only) is None


@pytest.mark.parametrize(
    "value, expected",
    [(None, None), (14, "14"), (14.0, "14"), (14.5, "14.5"), (700, "700"), (0.25, "0.25")],
)
def test_format_number(value: float | None, expected: str | None) -> None:
    assert format_number(value) == expected
