"""
Rich-text serializer (TextSerializer).

Turns a ``TextRun`` into a single markup string in one pass over its
characters:

    1. At the start of every line: drive the indent tag, update the
       ordered-list counter and emit the list prefix.
    2. On a line break: force-close all tags, copy the break.
    3. Otherwise: resolve the character's style, drive the seven
       character-level tags, copy the character.
    4. At the end: force-close all tags.

The serializer owns its output buffer, its tag states and its list
counter; nothing outlives a ``build()`` call, so independent runs can be
serialized concurrently.

Note:
    Tags are closed in ``TAG_ORDER`` (size before font-weight) and driven
    in the explicit order of ``_apply_style`` (font-weight before size).
    When several value-carrying tags change on the same character the
    resulting close/reopen pairs may overlap instead of nesting; consumers
    must not assume well-nested XML.
"""

import logging
from typing import Final

from figma_text.model.enums import TextDecoration
from figma_text.model.style import TextStyle
from figma_text.model.text_run import LINE_BREAK, TextRun
from figma_text.richtext.line_context import LineContext, LineInfo, ListCounter
from figma_text.richtext.style_resolver import StyleResolver, format_number, solid_color_hex
from figma_text.richtext.tags import TagKind, TagSet

logger: Final = logging.getLogger(__name__)


class TextSerializer:
    """
    Serializes one ``TextRun`` into markup.

    Example:
        >>> run = TextRun(characters="Hi\\nBye", line_types=(LineType.NONE, LineType.NONE))
        >>> TextSerializer(run).build()
        'Hi\\nBye'
    """

    def __init__(self, run: TextRun) -> None:
        self.run = run

    def build(self) -> str:
        run = self.run
        text = run.characters

        out: list[str] = []
        tags = TagSet(out)
        lines = LineContext(run.line_types, run.line_indent_levels)
        styles = StyleResolver(run.base_style, run.style_override_ids, run.style_override_table)
        counter = ListCounter()

        line = 0
        for i, ch in enumerate(text):
            if i == 0 or text[i - 1] == LINE_BREAK:
                line = 0 if i == 0 else line + 1
                self._start_line(lines.at_line(line), tags, counter, out)

            if ch == LINE_BREAK:
                tags.close_all()
                out.append(LINE_BREAK)
                continue

            self._apply_style(styles.resolve(i), tags)
            out.append(ch)

        tags.close_all()

        result = "".join(out)
        logger.debug(
            "Serialized text run: chars=%d, lines=%d, markup=%d",
            len(text),
            run.line_count if text else 0,
            len(result),
        )
        return result

    @staticmethod
    def _start_line(info: LineInfo, tags: TagSet, counter: ListCounter, out: list[str]) -> None:
        indent = tags[TagKind.INDENT]
        for _ in range(info.indent_level):
            indent.ensure(info.needs_indent, info.indent_value)

        prefix = counter.prefix_for(info.line_type)
        if prefix:
            out.append(prefix)

    @staticmethod
    def _apply_style(style: TextStyle, tags: TagSet) -> None:
        tags[TagKind.BOLD].ensure(style.is_bold)
        tags[TagKind.ITALIC].ensure(style.italic is True)
        tags[TagKind.UNDERLINE].ensure(style.text_decoration is TextDecoration.UNDERLINE)
        tags[TagKind.STRIKETHROUGH].ensure(style.text_decoration is TextDecoration.STRIKETHROUGH)

        color = solid_color_hex(style)
        tags[TagKind.COLOR].ensure(color is not None, color)
        tags[TagKind.FONT_WEIGHT].ensure(style.font_weight is not None, format_number(style.font_weight))
        tags[TagKind.FONT_SIZE].ensure(style.font_size is not None, format_number(style.font_size))


def build_rich_text(run: TextRun) -> str:
    """
    Serialize ``run`` into rich-text markup.

    Example:
        >>> build_rich_text(TextRun("X\\nY", line_types=(LineType.ORDERED, LineType.ORDERED)))
        '1. X\\n2. Y'
    """
    return TextSerializer(run).build()


__all__ = ["TextSerializer", "build_rich_text"]
