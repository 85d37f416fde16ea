"""Pango attribute kinds and the native attribute record decoder.

A Pango attribute in memory is a ``PangoAttribute`` header::

    struct PangoAttribute { const PangoAttrClass *klass; guint start_index; guint end_index; };

followed by a kind-specific payload (``int value`` for ``PangoAttrInt``,
``double value`` for ``PangoAttrFloat``, ...). This module is the only place
that knows that layout; everything downstream works with ``AttributeRecord``.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

# Mirrors the PANGO_SCALE define: Pango units per point.
PANGO_SCALE = 1024.0


class AttrType(IntEnum):
    """Native ``PangoAttrType`` values."""

    LANGUAGE = 1
    FAMILY = 2
    STYLE = 3
    WEIGHT = 4
    VARIANT = 5
    STRETCH = 6
    SIZE = 7
    FONT_DESC = 8
    FOREGROUND = 9
    BACKGROUND = 10
    UNDERLINE = 11
    STRIKETHROUGH = 12
    RISE = 13
    SHAPE = 14
    SCALE = 15
    FALLBACK = 16
    LETTER_SPACING = 17
    UNDERLINE_COLOR = 18
    ABSOLUTE_SIZE = 19
    GRAVITY = 20
    GRAVITY_HINT = 21


class Payload(Enum):
    """C struct that carries an attribute's value."""

    LANGUAGE = "PangoAttrLanguage"
    STRING = "PangoAttrString"
    INT = "PangoAttrInt"
    SIZE = "PangoAttrSize"
    FONT_DESC = "PangoAttrFontDesc"
    COLOR = "PangoAttrColor"
    SHAPE = "PangoAttrShape"
    FLOAT = "PangoAttrFloat"
    FALLBACK = "PangoAttrFallback"


ATTR_PAYLOADS: dict[AttrType, Payload] = {
    AttrType.LANGUAGE: Payload.LANGUAGE,
    AttrType.FAMILY: Payload.STRING,
    AttrType.STYLE: Payload.INT,
    AttrType.WEIGHT: Payload.INT,
    AttrType.VARIANT: Payload.INT,
    AttrType.STRETCH: Payload.INT,
    AttrType.SIZE: Payload.SIZE,
    AttrType.FONT_DESC: Payload.FONT_DESC,
    AttrType.FOREGROUND: Payload.COLOR,
    AttrType.BACKGROUND: Payload.COLOR,
    AttrType.UNDERLINE: Payload.INT,
    AttrType.STRIKETHROUGH: Payload.INT,
    AttrType.RISE: Payload.INT,
    AttrType.SHAPE: Payload.SHAPE,
    AttrType.SCALE: Payload.FLOAT,
    AttrType.FALLBACK: Payload.FALLBACK,
    AttrType.LETTER_SPACING: Payload.INT,
    AttrType.UNDERLINE_COLOR: Payload.COLOR,
    AttrType.ABSOLUTE_SIZE: Payload.SIZE,
    AttrType.GRAVITY: Payload.INT,
    AttrType.GRAVITY_HINT: Payload.INT,
}


class Style(IntEnum):
    """``PangoStyle`` values."""

    NORMAL = 0
    OBLIQUE = 1
    ITALIC = 2


class Weight(IntEnum):
    """``PangoWeight`` values (CSS-like 100-1000 scale)."""

    THIN = 100
    ULTRALIGHT = 200
    LIGHT = 300
    BOOK = 380
    NORMAL = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    ULTRABOLD = 800
    HEAVY = 900
    ULTRAHEAVY = 1000


class StyleAttribute(Enum):
    """Formatting dimensions carried through to SVG.

    The value is the matching ``StyleState`` field name.
    """

    RISE = "rise"
    SCALE = "scale"
    STYLE = "style"
    WEIGHT = "weight"


STYLE_ATTRIBUTES: dict[AttrType, StyleAttribute] = {
    AttrType.RISE: StyleAttribute.RISE,
    AttrType.SCALE: StyleAttribute.SCALE,
    AttrType.STYLE: StyleAttribute.STYLE,
    AttrType.WEIGHT: StyleAttribute.WEIGHT,
}

AttrValue = Union[int, float, None]


@dataclass(frozen=True)
class AttributeRecord:
    """One decoded attribute: ``kind`` applied to bytes ``[start, end)`` of the plain text."""

    kind: AttrType | int
    start: int
    end: int
    value: AttrValue = None

    @property
    def style_attribute(self) -> StyleAttribute | None:
        """The modeled dimension this record sets, if any."""
        return STYLE_ATTRIBUTES.get(self.kind)


# Native layouts: header word, two guint offsets, then the payload.
_HEADER = struct.Struct("@PII")
_RECORD_LAYOUTS: dict[Payload, struct.Struct] = {
    Payload.INT: struct.Struct("@PIIi"),
    Payload.FLOAT: struct.Struct("@PIId"),
}


def _coerce_kind(kind: AttrType | int) -> AttrType | int:
    try:
        return AttrType(kind)
    except ValueError:
        return kind


def _layout_for(kind: AttrType | int) -> struct.Struct | None:
    payload = ATTR_PAYLOADS.get(kind)  # unknown ints map to None
    return _RECORD_LAYOUTS.get(payload) if payload is not None else None


def record_size(kind: AttrType | int) -> int:
    """Number of bytes ``decode_attribute`` reads for ``kind``."""
    layout = _layout_for(_coerce_kind(kind))
    return (layout or _HEADER).size


def decode_attribute(raw: bytes | bytearray | memoryview, kind: AttrType | int) -> AttributeRecord:
    """Decode one native attribute record.

    Int kinds yield a signed 32-bit value and float kinds a double. Kinds
    whose payload is not understood are decoded with ``value=None``.

    ``raw`` must hold at least ``record_size(kind)`` bytes laid out as the
    C struct; malformed input is not checked for.
    """
    kind = _coerce_kind(kind)
    layout = _layout_for(kind)
    if layout is None:
        _klass, start, end = _HEADER.unpack_from(raw)
        return AttributeRecord(kind, start, end)

    _klass, start, end, value = layout.unpack_from(raw)
    return AttributeRecord(kind, start, end, value)
