"""
Исключения пакета figma-text.

Typed exception hierarchy for the model boundary and the node
preprocessing pass. The serializer itself never raises for a valid
``TextRun``: short override/line arrays, unknown override ids and
non-solid paints are absorbed into defaults instead.

Иерархия:
    RichTextError (базовое)
    ├── InvalidTextRunError
    └── NodeFormatError

Example:
    >>> from figma_text.exceptions import RichTextError
    >>> try:
    ...     apply_rich_text(document)
    ... except RichTextError as e:
    ...     logger.error("Preprocessing failed: %s", e)
    ...     print(e.context.get("node_id"))
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "RichTextError",
    "InvalidTextRunError",
    "NodeFormatError",
]


class RichTextError(Exception):
    """
    Base exception for every error raised by the package.

    Attributes:
        message: Human-readable description
        context: Extra debugging context (node id, field name, value)

    Example:
        >>> raise RichTextError("Bad input", context={"field": "lineTypes"})
    """

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """
        Returns:
            ``ClassName: message (k=v, ...)``
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


class InvalidTextRunError(RichTextError):
    """
    A TextRun violates a construction-time precondition.

    Raised for negative indent levels, non-integer override ids,
    non-integer override table keys and non-string characters.
    """

    pass


class NodeFormatError(RichTextError):
    """
    A design-document node cannot be converted into model objects.

    Raised for non-dict nodes, unknown enum names and malformed colour
    channels. ``context["node_id"]`` names the offending node when known.
    """

    pass
