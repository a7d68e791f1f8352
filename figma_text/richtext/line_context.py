"""
Line-level context: indent levels, list types and ordered-list numbering.

Lookups past the end of the per-line arrays give indent level 0 and
``LineType.NONE``.
"""

from dataclasses import dataclass
from typing import Final, Sequence

from figma_text.model.enums import LineType

INDENT_STEP: Final[int] = 10
UNORDERED_MARKER: Final[str] = "• "


@dataclass(frozen=True, slots=True)
class LineInfo:
    indent_level: int = 0
    line_type: LineType = LineType.NONE

    @property
    def indent_value(self) -> str:
        """Indent tag value for this line: ``10 × level``."""
        return str(INDENT_STEP * self.indent_level)

    @property
    def needs_indent(self) -> bool:
        return self.indent_level > 0 and self.line_type is not LineType.NONE


class LineContext:
    """Per-line lookups over a run's ``line_types`` and ``line_indent_levels``."""

    __slots__ = ("_line_types", "_indent_levels")

    def __init__(self, line_types: Sequence[LineType], indent_levels: Sequence[int]) -> None:
        self._line_types = line_types
        self._indent_levels = indent_levels

    def at_line(self, index: int) -> LineInfo:
        indent_level = self._indent_levels[index] if 0 <= index < len(self._indent_levels) else 0
        line_type = self._line_types[index] if 0 <= index < len(self._line_types) else LineType.NONE
        return LineInfo(indent_level=indent_level, line_type=line_type)


class ListCounter:
    """
    Running ordinal of the current ordered-list block.

    Scoped to a single serialization call. Plain and unordered lines reset
    the counter; ordered lines pre-increment it.

    Example:
        >>> counter = ListCounter()
        >>> counter.prefix_for(LineType.ORDERED), counter.prefix_for(LineType.ORDERED)
        ('1. ', '2. ')
        >>> counter.prefix_for(LineType.NONE), counter.prefix_for(LineType.ORDERED)
        ('', '1. ')
    """

    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value = 0

    def prefix_for(self, line_type: LineType) -> str:
        """Update the counter for a new line and return its literal list prefix."""
        if line_type is LineType.NONE or line_type is LineType.UNORDERED:
            self.value = 0

        if line_type is LineType.ORDERED:
            self.value += 1
            return f"{self.value}. "
        if line_type is LineType.UNORDERED:
            return UNORDERED_MARKER
        return ""


__all__ = ["INDENT_STEP", "UNORDERED_MARKER", "LineInfo", "LineContext", "ListCounter"]
