"""
Модель заливок (Paint) текстового стиля.

Paint entries of a text style as exported by the design tool. Only solid
paints carry a colour the serializer can use; gradient, image and unknown
paints are modelled so they can be recognised and skipped.

Module: figma_text/model/paint.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Final, Optional, Union

from figma_text.exceptions import NodeFormatError
from figma_text.model.enums import PaintType

logger: Final = logging.getLogger(__name__)


def _channel(data: dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NodeFormatError(
            f"Colour channel '{key}' must be a number",
            context={"channel": key, "value": value},
        )
    return float(value)


@dataclass(frozen=True, slots=True)
class RGBA:
    """Colour with four floating-point channels in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_bytes(self) -> tuple[int, int, int, int]:
        """
        Convert channels to 0..255 integers.

        Each channel is clamped to 0..1, scaled by 255 and rounded
        half-to-even.
        """
        return tuple(round(min(max(c, 0.0), 1.0) * 255) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def to_hex(self) -> str:
        """Return ``RRGGBBAA`` in upper case, without a leading ``#``."""
        return "".join(f"{c:02X}" for c in self.to_bytes())

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "RGBA":
        if not isinstance(data, dict):
            raise NodeFormatError(
                f"Colour must be an object, got {type(data).__name__}",
                context={"value": data},
            )
        return RGBA(
            r=_channel(data, "r", 0.0),
            g=_channel(data, "g", 0.0),
            b=_channel(data, "b", 0.0),
            a=_channel(data, "a", 1.0),
        )


@dataclass(frozen=True, slots=True)
class SolidPaint:
    color: RGBA
    opacity: float = 1.0
    visible: bool = True

    @property
    def type(self) -> PaintType:
        return PaintType.SOLID

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": PaintType.SOLID.value,
            "color": self.color.to_dict(),
            "opacity": self.opacity,
            "visible": self.visible,
        }


@dataclass(frozen=True, slots=True)
class GradientStop:
    position: float
    color: RGBA


@dataclass(frozen=True, slots=True)
class GradientPaint:
    kind: PaintType
    stops: tuple[GradientStop, ...] = ()
    opacity: float = 1.0
    visible: bool = True

    @property
    def type(self) -> PaintType:
        return self.kind

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "gradientStops": [
                {"position": s.position, "color": s.color.to_dict()} for s in self.stops
            ],
            "opacity": self.opacity,
            "visible": self.visible,
        }


@dataclass(frozen=True, slots=True)
class ImagePaint:
    image_ref: Optional[str] = None
    scale_mode: Optional[str] = None
    opacity: float = 1.0
    visible: bool = True

    @property
    def type(self) -> PaintType:
        return PaintType.IMAGE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": PaintType.IMAGE.value,
            "opacity": self.opacity,
            "visible": self.visible,
        }
        if self.image_ref is not None:
            data["imageRef"] = self.image_ref
        if self.scale_mode is not None:
            data["scaleMode"] = self.scale_mode
        return data


@dataclass(frozen=True, slots=True)
class OpaquePaint:
    """Paint of a kind this package does not model (kept verbatim)."""

    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> Optional[str]:
        return self.raw.get("type")

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)


Paint = Union[SolidPaint, GradientPaint, ImagePaint, OpaquePaint]


def paint_from_dict(data: dict[str, Any]) -> Paint:
    """
    Build a paint from its JSON form.

    Raises:
        NodeFormatError: If ``data`` is not an object or a colour is malformed.
    """
    if not isinstance(data, dict):
        raise NodeFormatError(
            f"Paint must be an object, got {type(data).__name__}",
            context={"value": data},
        )

    type_name = data.get("type")
    try:
        paint_type = PaintType(type_name)
    except ValueError:
        logger.debug("Unknown paint type %r kept as opaque paint", type_name)
        return OpaquePaint(raw=dict(data))

    opacity = float(data.get("opacity", 1.0))
    visible = bool(data.get("visible", True))

    if paint_type is PaintType.SOLID:
        return SolidPaint(
            color=RGBA.from_dict(data.get("color", {})),
            opacity=opacity,
            visible=visible,
        )

    if paint_type.is_gradient:
        stops = tuple(
            GradientStop(
                position=float(stop.get("position", 0.0)),
                color=RGBA.from_dict(stop.get("color", {})),
            )
            for stop in data.get("gradientStops") or ()
        )
        return GradientPaint(kind=paint_type, stops=stops, opacity=opacity, visible=visible)

    if paint_type is PaintType.IMAGE:
        return ImagePaint(
            image_ref=data.get("imageRef"),
            scale_mode=data.get("scaleMode"),
            opacity=opacity,
            visible=visible,
        )

    return OpaquePaint(raw=dict(data))


def first_solid_paint(fills: tuple[Paint, ...]) -> Optional[SolidPaint]:
    """Return the first solid paint among ``fills``, skipping every other kind."""
    for paint in fills:
        if isinstance(paint, SolidPaint):
            return paint
    return None


__all__ = [
    "RGBA",
    "SolidPaint",
    "GradientStop",
    "GradientPaint",
    "ImagePaint",
    "OpaquePaint",
    "Paint",
    "paint_from_dict",
    "first_solid_paint",
]
