"""
Модель текстового узла (TextRun) для сериализации в разметку.

Immutable snapshot of a design-tool TEXT node: the characters, a base
style, a sparse per-character style override array with its lookup table,
and per-line list types and indent levels. Arrays may be shorter than the
text (or the line count); missing entries mean "no override", a plain line
and indent level 0.

Preconditions are checked here, at construction time, so that the
serializer never fails mid-way.

Module: figma_text/model/text_run.py
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Final, Mapping, Optional

from figma_text.exceptions import InvalidTextRunError, NodeFormatError
from figma_text.model.enums import LineType
from figma_text.model.style import EMPTY_STYLE, TextStyle

logger: Final = logging.getLogger(__name__)

LINE_BREAK: Final[str] = "\n"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class TextRun:
    """
    Represents one text node ready for serialization.

    Attributes:
        characters: Text to serialize; ``"\\n"`` separates lines.
        base_style: Style used where no override applies.
        style_override_ids: One override id per character; may be shorter
            than ``characters``. Id 0 means "use ``base_style``".
        style_override_table: Override id -> style.
        line_types: One list type per line; may be shorter than the line count.
        line_indent_levels: One non-negative indent level per line; may be
            shorter than the line count.

    Example:
        >>> run = TextRun(
        ...     characters="X\\nY",
        ...     line_types=(LineType.ORDERED, LineType.ORDERED),
        ... )
        >>> run.line_count
        2
    """

    characters: str
    base_style: TextStyle = EMPTY_STYLE
    style_override_ids: tuple[int, ...] = ()
    style_override_table: Mapping[int, TextStyle] = field(default_factory=dict)
    line_types: tuple[LineType, ...] = ()
    line_indent_levels: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """
        Normalize containers to tuples/dicts and validate preconditions.

        Raises:
            InvalidTextRunError: If any precondition does not hold.
        """
        if self.base_style is None:
            object.__setattr__(self, "base_style", EMPTY_STYLE)
        object.__setattr__(self, "style_override_ids", tuple(self.style_override_ids or ()))
        object.__setattr__(self, "style_override_table", dict(self.style_override_table or {}))
        object.__setattr__(self, "line_indent_levels", tuple(self.line_indent_levels or ()))

        line_types = []
        for index, value in enumerate(self.line_types or ()):
            try:
                line_types.append(LineType(value))
            except ValueError as exc:
                raise InvalidTextRunError(
                    f"Unknown line type {value!r}",
                    context={"line": index},
                ) from exc
        object.__setattr__(self, "line_types", tuple(line_types))

        self.validate()

    def validate(self) -> None:
        """
        Validate run content.

        Raises:
            InvalidTextRunError: If characters are not a string, an override
                id or table key is not an integer, a table value is not a
                TextStyle, or an indent level is negative or not an integer.
        """
        if not isinstance(self.characters, str):
            raise InvalidTextRunError(
                f"characters must be str, got {type(self.characters).__name__}"
            )

        if not isinstance(self.base_style, TextStyle):
            raise InvalidTextRunError(
                f"base_style must be TextStyle, got {type(self.base_style).__name__}"
            )

        for index, override_id in enumerate(self.style_override_ids):
            if not _is_int(override_id):
                raise InvalidTextRunError(
                    "Style override ids must be integers",
                    context={"index": index, "value": override_id},
                )

        for key, style in self.style_override_table.items():
            if not _is_int(key):
                raise InvalidTextRunError(
                    "Style override table keys must be integers",
                    context={"key": key},
                )
            if not isinstance(style, TextStyle):
                raise InvalidTextRunError(
                    f"Style override {key} must be TextStyle, got {type(style).__name__}",
                    context={"key": key},
                )

        for line, level in enumerate(self.line_indent_levels):
            if not _is_int(level):
                raise InvalidTextRunError(
                    "Indent levels must be integers",
                    context={"line": line, "value": level},
                )
            if level < 0:
                raise InvalidTextRunError(
                    "Indent levels must be non-negative",
                    context={"line": line, "value": level},
                )

    @property
    def line_count(self) -> int:
        return self.characters.count(LINE_BREAK) + 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the design tool's TEXT node fields."""
        data: dict[str, Any] = {
            "characters": self.characters,
            "style": self.base_style.to_dict(),
            "characterStyleOverrides": list(self.style_override_ids),
            "styleOverrideTable": {
                str(key): style.to_dict() for key, style in self.style_override_table.items()
            },
        }
        if self.line_types:
            data["lineTypes"] = [line_type.value for line_type in self.line_types]
        if self.line_indent_levels:
            data["lineIndentations"] = list(self.line_indent_levels)
        return data

    @staticmethod
    def from_node(node: dict[str, Any]) -> "TextRun":
        """
        Build a run from a TEXT node dict of the design tool's JSON export.

        Override table keys may be strings (as in JSON) or integers;
        override ids may be integral floats.

        Raises:
            NodeFormatError: If the node cannot be converted; the original
                error is chained and ``context["node_id"]`` is set.
        """
        if not isinstance(node, dict):
            raise NodeFormatError(f"Node must be an object, got {type(node).__name__}")

        node_id: Optional[str] = node.get("id")

        try:
            table: dict[int, TextStyle] = {}
            for key, style_data in (node.get("styleOverrideTable") or {}).items():
                table[_parse_override_key(key)] = TextStyle.from_dict(style_data)

            run = TextRun(
                characters=node.get("characters") or "",
                base_style=TextStyle.from_dict(node.get("style")),
                style_override_ids=tuple(
                    _parse_override_key(value)
                    for value in node.get("characterStyleOverrides") or ()
                ),
                style_override_table=table,
                line_types=tuple(node.get("lineTypes") or ()),
                line_indent_levels=tuple(node.get("lineIndentations") or ()),
            )
        except NodeFormatError as exc:
            exc.context.setdefault("node_id", node_id)
            raise
        except (InvalidTextRunError, AttributeError, TypeError, ValueError) as exc:
            raise NodeFormatError(
                f"Cannot convert text node: {exc}",
                context={"node_id": node_id},
            ) from exc

        logger.debug(
            "Text node %s converted: chars=%d, overrides=%d, lines=%d",
            node_id,
            len(run.characters),
            len(run.style_override_table),
            len(run.line_types),
        )
        return run

    def __repr__(self) -> str:
        preview = self.characters[:20]
        return (
            f"TextRun(chars={len(self.characters)}, overrides={len(self.style_override_table)}, "
            f"lines={len(self.line_types)}, text={preview!r})"
        )


def _parse_override_key(value: Any) -> int:
    """Parse an override id or table key: int, integral float or decimal string."""
    if _is_int(value):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"Invalid style override id {value!r}")


__all__ = ["TextRun", "LINE_BREAK"]
