"""
Per-character style resolution and tag value formatting.
"""

from typing import Mapping, Optional, Sequence

from figma_text.model.style import TextStyle


class StyleResolver:
    """
    Effective style of each character of a run.

    An index past the end of ``override_ids`` counts as override id 0.
    Id 0 and ids missing from ``override_table`` resolve to ``base_style``.
    """

    __slots__ = ("_base_style", "_override_ids", "_override_table")

    def __init__(
        self,
        base_style: TextStyle,
        override_ids: Sequence[int],
        override_table: Mapping[int, TextStyle],
    ) -> None:
        self._base_style = base_style
        self._override_ids = override_ids
        self._override_table = override_table

    def override_id(self, index: int) -> int:
        return self._override_ids[index] if 0 <= index < len(self._override_ids) else 0

    def resolve(self, index: int) -> TextStyle:
        override_id = self.override_id(index)
        if override_id == 0:
            return self._base_style
        return self._override_table.get(override_id, self._base_style)


def solid_color_hex(style: TextStyle) -> Optional[str]:
    """
    Colour tag value of ``style``: ``#RRGGBBAA`` of its first solid fill.

    Returns ``None`` when the style has no solid fill.

    Example:
        >>> solid_color_hex(TextStyle(fills=(SolidPaint(RGBA(1, 0, 0, 1)),)))
        '#FF0000FF'
    """
    paint = style.solid_fill
    if paint is None:
        return None
    return "#" + paint.color.to_hex()


def format_number(value: Optional[float]) -> Optional[str]:
    """
    Decimal string of a numeric style value; integral values lose ``.0``.

    Example:
        >>> format_number(14.0), format_number(14.5), format_number(700)
        ('14', '14.5', '700')
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["StyleResolver", "solid_color_hex", "format_number"]
