"""
Модель стиля текста (TextStyle).

Text style record of a design-tool TEXT node. Serves both as the node's
base style and as the entries of its style override table. Every field is
optional: an empty ``TextStyle()`` is the placeholder base style under
which no formatting tag is required.

Module: figma_text/model/style.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from figma_text.exceptions import NodeFormatError
from figma_text.model.enums import TextDecoration, is_bold_weight
from figma_text.model.paint import Paint, SolidPaint, first_solid_paint, paint_from_dict


def _optional_number(data: dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NodeFormatError(
            f"Style field '{key}' must be a number",
            context={"field": key, "value": value},
        )
    return value


@dataclass(frozen=True, slots=True)
class TextStyle:
    """
    Character-level style of a text node.

    Attributes:
        font_weight: Numeric weight (100..900); ``None`` when unset.
        italic: Italic flag; ``None`` when unset.
        text_decoration: Underline / strikethrough / none.
        fills: Paint entries; only the first solid paint is significant.
        font_size: Font size in pixels; ``None`` when unset.
        font_family: Descriptive, not serialized into markup.
        letter_spacing: Descriptive, not serialized into markup.
        line_height_px: Descriptive, not serialized into markup.

    Example:
        >>> style = TextStyle.from_dict({"fontWeight": 700, "fontSize": 14})
        >>> style.is_bold
        True
    """

    font_weight: Optional[int] = None
    italic: Optional[bool] = None
    text_decoration: TextDecoration = TextDecoration.NONE
    fills: tuple[Paint, ...] = ()
    font_size: Optional[float] = None

    font_family: Optional[str] = None
    letter_spacing: Optional[float] = None
    line_height_px: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.fills, tuple):
            object.__setattr__(self, "fills", tuple(self.fills or ()))

    @property
    def is_bold(self) -> bool:
        return is_bold_weight(self.font_weight)

    @property
    def solid_fill(self) -> Optional[SolidPaint]:
        return first_solid_paint(self.fills)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.font_family is not None:
            data["fontFamily"] = self.font_family
        if self.font_weight is not None:
            data["fontWeight"] = self.font_weight
        if self.italic is not None:
            data["italic"] = self.italic
        if self.font_size is not None:
            data["fontSize"] = self.font_size
        if self.text_decoration is not TextDecoration.NONE:
            data["textDecoration"] = self.text_decoration.value
        if self.letter_spacing is not None:
            data["letterSpacing"] = self.letter_spacing
        if self.line_height_px is not None:
            data["lineHeightPx"] = self.line_height_px
        if self.fills:
            data["fills"] = [paint.to_dict() for paint in self.fills]
        return data

    @staticmethod
    def from_dict(data: Optional[dict[str, Any]]) -> "TextStyle":
        """
        Deserialize a style object from the design tool's JSON.

        ``None`` and ``{}`` both give the empty placeholder style.

        Raises:
            NodeFormatError: On non-object input, an unknown decoration
                name, a non-boolean italic flag or a non-numeric weight/size.
        """
        if data is None:
            return TextStyle()
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"Style must be an object, got {type(data).__name__}",
                context={"value": data},
            )

        decoration_name = data.get("textDecoration") or TextDecoration.NONE.value
        try:
            decoration = TextDecoration(decoration_name)
        except ValueError as exc:
            raise NodeFormatError(
                f"Unknown text decoration {decoration_name!r}",
                context={"field": "textDecoration"},
            ) from exc

        italic = data.get("italic")
        if italic is not None and not isinstance(italic, bool):
            raise NodeFormatError(
                "Style field 'italic' must be a boolean",
                context={"field": "italic", "value": italic},
            )
        font_weight = _optional_number(data, "fontWeight")

        return TextStyle(
            font_weight=int(font_weight) if font_weight is not None else None,
            italic=italic,
            text_decoration=decoration,
            fills=tuple(paint_from_dict(p) for p in data.get("fills") or ()),
            font_size=_optional_number(data, "fontSize"),
            font_family=data.get("fontFamily"),
            letter_spacing=_optional_number(data, "letterSpacing"),
            line_height_px=_optional_number(data, "lineHeightPx"),
        )


EMPTY_STYLE = TextStyle()

__all__ = ["TextStyle", "EMPTY_STYLE"]
