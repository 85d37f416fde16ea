"""Serialize plain text and style runs as SVG ``<tspan>`` markup."""

from __future__ import annotations

import io
import math
from collections.abc import Sequence
from decimal import Context, Decimal
from xml.sax.saxutils import escape as xml_escape

from svg_markup2tspan.markup.attributes import PANGO_SCALE, Style
from svg_markup2tspan.markup.runs import StyleRun, StyleState
from svg_markup2tspan.units import from_points

OPEN_TAG_START = '<tspan style="dominant-baseline:inherit"'
CLOSE_TAG = "</tspan>"

_EIGHTEEN_PLACES = Decimal(1).scaleb(-18)

FONT_STYLE_NAMES = {
    Style.NORMAL: "normal",
    Style.OBLIQUE: "oblique",
    Style.ITALIC: "italic",
}


def fmt_float(x: float) -> str:
    """Format a float in fixed notation without trailing zeros.

    Values below 0.1 get up to 18 decimals so tiny shifts do not round to
    zero; they start from the shortest repr so binary noise is not printed.
    Infinities and NaN print as ``%f`` does.
    """
    if not math.isfinite(x):
        return "%f" % x
    if x < 0.1:
        d = Decimal(repr(float(x)))
        # integer digits, 18 places and one for a rounding carry
        context = Context(prec=max(d.adjusted() + 20, 1))
        a = format(d.quantize(_EIGHTEEN_PLACES, context=context), "f")
    else:
        a = "%f" % x

    a = a.rstrip("0")
    if a.endswith("."):
        a = a[:-1]
    if a in ("", "-", "-0"):
        return "0"
    return a


def open_tag(state: StyleState, unit: str = "mm") -> str:
    """Opening ``<tspan>`` for a non-empty state.

    Attributes come in a fixed order: dy, font-size, font-style, font-weight.
    """
    # baseline-shift would be the natural mapping for rise, but Firefox
    # and IE do not support it, so rise becomes a dy offset.
    out = [OPEN_TAG_START]
    if state.rise is not None:
        # Pango rise is up-positive, SVG dy is down-positive.
        dy = -from_points(state.rise / PANGO_SCALE, unit)
        out.append(' dy="%s"' % fmt_float(dy))
    if state.scale is not None:
        out.append(' font-size="%s%%"' % fmt_float(100.0 * state.scale))
    if state.style is not None and state.style in FONT_STYLE_NAMES:
        out.append(' font-style="%s"' % FONT_STYLE_NAMES[Style(state.style)])
    if state.weight is not None:
        out.append(' font-weight="%d"' % state.weight)
    out.append(">")
    return "".join(out)


def serialize(
    text: bytes | str,
    runs: Sequence[StyleRun],
    *,
    unit: str = "mm",
    escape: bool = False,
    close_trailing: bool = True,
) -> str:
    """Interleave ``text`` with tspan tags described by ``runs``.

    Args:
        text: Plain text. Run offsets are UTF-8 byte offsets into it. Bytes
            that are not valid UTF-8 become lone surrogates, so encoding the
            result with ``surrogateescape`` gives them back unchanged.
        runs: Style runs in increasing offset order.
        unit: Length unit for ``dy`` values.
        escape: XML-escape the copied text.
        close_trailing: Close a tag still open at the end of the text.

    Returns:
        The tagged text. Removing every tag gives back ``text``.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)

    def chunk(start: int, end: int | None = None) -> str:
        s = data[start:end].decode("utf-8", "surrogateescape")
        return xml_escape(s) if escape else s

    last_idx = 0
    tag_open = False
    out = io.StringIO()
    for start, state in runs:
        out.write(chunk(last_idx, start))
        last_idx = start

        if tag_open:
            out.write(CLOSE_TAG)

        if state.is_empty():
            tag_open = False
            continue

        out.write(open_tag(state, unit))
        tag_open = True

    out.write(chunk(last_idx))
    if tag_open and close_trailing:
        out.write(CLOSE_TAG)

    return out.getvalue()
