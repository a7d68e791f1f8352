"""
Rich-text preprocessing of a design-document node tree.

Walks a document (or any subtree), picks TEXT nodes that need markup and
replaces their plain ``characters`` with the serialized rich text. A node
needs markup when it has list lines (more than one line type, at least one
ordered or unordered) or a non-empty style override table; other text
nodes are left as plain text unless ``only_needed=False``.
"""

from typing import Any, Dict, Iterator

from figma_text import get_logger
from figma_text.model.enums import LineType, NodeType
from figma_text.model.text_run import TextRun
from figma_text.richtext.builder import build_rich_text

logger = get_logger(__name__)

_LIST_LINE_TYPES = frozenset({LineType.ORDERED.value, LineType.UNORDERED.value})


def iter_nodes(root: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
    """Yield ``root`` and all of its descendants, depth-first, parents first."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        children = node.get("children") or ()
        stack.extend(reversed([child for child in children if isinstance(child, dict)]))


def is_text_node(node: Dict[str, Any]) -> bool:
    return node.get("type") == NodeType.TEXT.value


def needs_rich_text(node: Dict[str, Any]) -> bool:
    """Whether a TEXT node carries list lines or style overrides."""
    if not is_text_node(node):
        return False

    line_types = node.get("lineTypes") or ()
    if len(line_types) > 1 and any(line_type in _LIST_LINE_TYPES for line_type in line_types):
        return True

    return bool(node.get("styleOverrideTable"))


def _document_root(document: Dict[str, Any]) -> Dict[str, Any]:
    # Whole file payloads wrap the tree in a "document" key.
    root = document.get("document")
    return root if isinstance(root, dict) else document


def render_text_nodes(root: Dict[str, Any], *, only_needed: bool = True) -> Dict[str, str]:
    """
    Serialize the TEXT nodes under ``root`` without modifying them.

    Args:
        root: Document payload or node.
        only_needed: Skip text nodes for which ``needs_rich_text`` is false.

    Returns:
        Node id -> markup, in tree order.

    Raises:
        NodeFormatError: If a selected node cannot be converted.
    """
    rendered: Dict[str, str] = {}
    for node in iter_nodes(_document_root(root)):
        if not is_text_node(node):
            continue
        if only_needed and not needs_rich_text(node):
            continue
        rendered[node.get("id", "")] = build_rich_text(TextRun.from_node(node))
    return rendered


def apply_rich_text(document: Dict[str, Any], *, only_needed: bool = True) -> int:
    """
    Replace ``characters`` of selected TEXT nodes with their markup, in place.

    Returns:
        Number of rewritten nodes.

    Raises:
        NodeFormatError: If a selected node cannot be converted. The
            document is left unchanged in that case.
    """
    updates = [
        (node, build_rich_text(TextRun.from_node(node)))
        for node in iter_nodes(_document_root(document))
        if is_text_node(node) and (not only_needed or needs_rich_text(node))
    ]
    for node, markup in updates:
        node["characters"] = markup

    logger.info("Rich text applied to %d text node(s)", len(updates))
    return len(updates)


__all__ = [
    "iter_nodes",
    "is_text_node",
    "needs_rich_text",
    "render_text_nodes",
    "apply_rich_text",
]
