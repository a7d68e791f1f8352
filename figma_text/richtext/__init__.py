"""
Rich-text markup generation for design-tool text nodes.

Module Structure:
    richtext/
    ├── __init__.py          # This file (public API exports)
    ├── tags.py              # Tag kinds, declaration order, TagState
    ├── line_context.py      # Per-line indent/list lookups, list counter
    ├── style_resolver.py    # Per-character style, colour and number values
    └── builder.py           # TextSerializer orchestrator

Usage:
    >>> from figma_text.richtext import build_rich_text
    >>> markup = build_rich_text(run)

Public API:
    All names are re-exported from this package for convenience.
    Import either from specific modules or from this package root.
"""

from figma_text.richtext.builder import TextSerializer, build_rich_text
from figma_text.richtext.line_context import (
    INDENT_STEP,
    UNORDERED_MARKER,
    LineContext,
    LineInfo,
    ListCounter,
)
from figma_text.richtext.style_resolver import StyleResolver, format_number, solid_color_hex
from figma_text.richtext.tags import (
    TAG_ORDER,
    TagKind,
    TagSet,
    TagState,
    close_markup,
    open_markup,
)

__all__ = [
    # Orchestrator
    "TextSerializer",
    "build_rich_text",
    # Tags
    "TAG_ORDER",
    "TagKind",
    "TagSet",
    "TagState",
    "open_markup",
    "close_markup",
    # Lines
    "INDENT_STEP",
    "UNORDERED_MARKER",
    "LineContext",
    "LineInfo",
    "ListCounter",
    # Styles
    "StyleResolver",
    "solid_color_hex",
    "format_number",
]
