"""
model/enums.py

(Краткое RU: Перечисления модели текстового узла дизайн-документа.)

EN: Domain enums for design-tool text nodes: line (list) types, text
decoration, font weight scale, paint kinds and node kinds. Enum values
match the names used in the design tool's JSON export.
NO serialization logic here!

See Also:
    - figma_text/richtext (for markup generation)
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final, Literal


class LineType(str, Enum):
    """Per-line list classification."""

    NONE = "NONE"
    ORDERED = "ORDERED"
    UNORDERED = "UNORDERED"

    @property
    def is_list(self) -> bool:
        return self is not LineType.NONE

    def localized_name(self, lang: Literal["ru", "en"] = "en") -> str:
        names_ru = {
            LineType.NONE: "Обычная строка",
            LineType.ORDERED: "Нумерованный список",
            LineType.UNORDERED: "Маркированный список",
        }
        names_en = {
            LineType.NONE: "Plain line",
            LineType.ORDERED: "Ordered list",
            LineType.UNORDERED: "Unordered list",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class TextDecoration(str, Enum):
    NONE = "NONE"
    UNDERLINE = "UNDERLINE"
    STRIKETHROUGH = "STRIKETHROUGH"


class FontWeight(IntEnum):
    """Numeric font weight scale; BOLD is the bold-tag threshold."""

    THIN = 100
    EXTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMI_BOLD = 600
    BOLD = 700
    EXTRA_BOLD = 800
    BLACK = 900


class PaintType(str, Enum):
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    EMOJI = "EMOJI"

    @property
    def is_gradient(self) -> bool:
        return self.value.startswith("GRADIENT_")


class NodeType(str, Enum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    SLICE = "SLICE"
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT_SET = "COMPONENT_SET"
    COMPONENT = "COMPONENT"
    INSTANCE = "INSTANCE"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    VECTOR = "VECTOR"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    SECTION = "SECTION"


# === DEFAULTS ===
DEFAULT_LINE_TYPE: Final[LineType] = LineType.NONE
DEFAULT_TEXT_DECORATION: Final[TextDecoration] = TextDecoration.NONE
BOLD_WEIGHT_THRESHOLD: Final[int] = int(FontWeight.BOLD)


def is_bold_weight(weight: int | float | None) -> bool:
    return weight is not None and weight >= BOLD_WEIGHT_THRESHOLD


__all__ = [
    "LineType",
    "TextDecoration",
    "FontWeight",
    "PaintType",
    "NodeType",
    "DEFAULT_LINE_TYPE",
    "DEFAULT_TEXT_DECORATION",
    "BOLD_WEIGHT_THRESHOLD",
    "is_bold_weight",
]
