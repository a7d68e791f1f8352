"""
Formatting tags of the rich-text markup.

Contains the eight tag kinds (bold, italic, underline, strikethrough, color,
size, font-weight, indent), their markup tokens, their fixed declaration
order and the per-kind open/closed state machine.

Markup forms:
    <token>          opening tag without a value
    <token=value>    opening tag with a value
    </token>         closing tag

Force-closing at a line break and at end of input walks ``TAG_ORDER``.
Per-character driving lists its calls explicitly and drives font-weight
before size. When several value-carrying tags change on the same
character, the close/reopen pairs follow the driving order, so the output
is not guaranteed to be strictly nested.
"""

from enum import Enum
from typing import Any, Final, MutableSequence, Optional

__all__ = [
    "TagKind",
    "TAG_ORDER",
    "TagState",
    "TagSet",
    "open_markup",
    "close_markup",
]


class TagKind(str, Enum):
    """Tag kind; the value is the markup token."""

    BOLD = "b"
    ITALIC = "i"
    UNDERLINE = "u"
    STRIKETHROUGH = "strikethrough"
    COLOR = "color"
    FONT_SIZE = "size"
    FONT_WEIGHT = "font-weight"
    INDENT = "indent"

    @property
    def token(self) -> str:
        return self.value


TAG_ORDER: Final[tuple[TagKind, ...]] = (
    TagKind.BOLD,
    TagKind.ITALIC,
    TagKind.UNDERLINE,
    TagKind.STRIKETHROUGH,
    TagKind.COLOR,
    TagKind.FONT_SIZE,
    TagKind.FONT_WEIGHT,
    TagKind.INDENT,
)
"""Declaration order of all tag kinds; output byte-stability depends on it."""

_NO_VALUE: Final = object()


def open_markup(token: str, value: Optional[str] = None) -> str:
    """
    Build an opening tag.

    Example:
        >>> open_markup("b")
        '<b>'
        >>> open_markup("color", "#FF0000FF")
        '<color=#FF0000FF>'
    """
    return f"<{token}>" if not value else f"<{token}={value}>"


def close_markup(token: str) -> str:
    return f"</{token}>"


class TagState:
    """
    Open/closed state of one tag kind, writing markup into a shared sink.

    The remembered value is ``None`` while unset. Value changes on an open
    tag always produce a ``</token><token=new>`` pair; an open tag is never
    mutated in place.

    Example:
        >>> out = []
        >>> tag = TagState(TagKind.COLOR, out)
        >>> tag.ensure(True, "#FF0000FF")
        >>> tag.ensure(True, "#00FF00FF")
        >>> tag.ensure(False)
        >>> "".join(out)
        '<color=#FF0000FF></color><color=#00FF00FF></color>'
    """

    __slots__ = ("kind", "_sink", "_value", "_active")

    def __init__(self, kind: TagKind, sink: MutableSequence[str]) -> None:
        self.kind = kind
        self._sink = sink
        self._value: Optional[str] = None
        self._active = False

    @property
    def is_open(self) -> bool:
        return self._active

    @property
    def value(self) -> Optional[str]:
        return self._value

    def ensure(self, required: bool, value: Any = _NO_VALUE) -> None:
        """
        Make the tag open (``required``) or closed, emitting markup as needed.

        ``ensure(required)`` opens a closed tag when required and closes an
        open tag when not required; whenever ``required`` is false the
        remembered value is cleared.

        ``ensure(required, value)`` additionally handles values:
          1. open, required, remembered value set and different from
             ``value``: close, remember ``value``, reopen;
          2. closed and not required: nothing;
          3. otherwise: remember ``value`` and fall back to ``ensure(required)``.
        """
        if value is not _NO_VALUE:
            self._ensure_value(required, value)
        else:
            self._ensure(required)

    def _ensure(self, required: bool) -> None:
        if not self._active and required:
            self._open()
        if self._active and not required:
            self._close()

        if not required:
            self._value = None

    def _ensure_value(self, required: bool, value: Optional[str]) -> None:
        if required and self._active and self._value != value and self._value is not None:
            self._close()
            self._value = value
            self._open()
            return

        if not required and not self._active:
            return

        self._value = value
        self._ensure(required)

    def _open(self) -> None:
        self._sink.append(open_markup(self.kind.token, self._value))
        self._active = True

    def _close(self) -> None:
        self._sink.append(close_markup(self.kind.token))
        self._active = False

    def __repr__(self) -> str:
        return f"TagState({self.kind.name}, open={self._active}, value={self._value!r})"


class TagSet:
    """All eight tag states of one serialization call, in ``TAG_ORDER``."""

    __slots__ = ("_states",)

    def __init__(self, sink: MutableSequence[str]) -> None:
        self._states: dict[TagKind, TagState] = {kind: TagState(kind, sink) for kind in TAG_ORDER}

    def __getitem__(self, kind: TagKind) -> TagState:
        return self._states[kind]

    def __iter__(self):
        return (self._states[kind] for kind in TAG_ORDER)

    def close_all(self) -> None:
        """Force-close every tag in declaration order."""
        for kind in TAG_ORDER:
            self._states[kind].ensure(False)

    @property
    def open_kinds(self) -> tuple[TagKind, ...]:
        return tuple(kind for kind in TAG_ORDER if self._states[kind].is_open)
