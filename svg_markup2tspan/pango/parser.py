"""Pango markup parsing through libpango."""

from __future__ import annotations

import ctypes
import logging
from dataclasses import replace

from svg_markup2tspan.exceptions import MarkupParseError
from svg_markup2tspan.interfaces import MarkupParser
from svg_markup2tspan.markup.attributes import AttributeRecord, AttrType, decode_attribute, record_size
from svg_markup2tspan.pango._lib import GError, PangoLib, load_pango

logger = logging.getLogger(__name__)


class PangoMarkupParser(MarkupParser):
    """Parse Pango markup with ``pango_parse_markup``.

    Records are produced per attribute-iterator segment: each attribute
    Pango reports as active over a segment becomes a record spanning exactly
    that segment, so overlapping and nested tags arrive already resolved and
    ordered by start offset.
    """

    def __init__(self, lib: PangoLib | None = None) -> None:
        self._lib = lib

    @property
    def lib(self) -> PangoLib:
        if self._lib is None:
            self._lib = load_pango()
        return self._lib

    def parse(self, markup: str) -> tuple[bytes, list[AttributeRecord]]:
        lib = self.lib
        data = markup.encode("utf-8")
        attr_list = ctypes.c_void_p()
        text = ctypes.c_void_p()
        error = ctypes.POINTER(GError)()

        ok = lib.pango.pango_parse_markup(
            data, len(data), 0, ctypes.byref(attr_list), ctypes.byref(text), None, ctypes.byref(error)
        )
        if not ok:
            message = "unknown error"
            if error:
                message = error.contents.message.decode("utf-8", errors="replace")
                lib.glib.g_error_free(error)
            raise MarkupParseError(f"Could not parse pango markup: {message}", markup=markup)

        try:
            plain = ctypes.string_at(text.value) if text.value else b""
            records = self._read_attributes(attr_list.value) if attr_list.value else []
        finally:
            lib.glib.g_free(text)
            if attr_list.value:
                lib.pango.pango_attr_list_unref(attr_list)

        logger.debug("Parsed markup into %d bytes of text and %d records", len(plain), len(records))
        return plain, records

    def _read_attributes(self, attr_list: int) -> list[AttributeRecord]:
        pango = self.lib.pango
        records: list[AttributeRecord] = []
        start, end = ctypes.c_int(), ctypes.c_int()

        it = pango.pango_attr_list_get_iterator(attr_list)
        try:
            while True:
                pango.pango_attr_iterator_range(it, ctypes.byref(start), ctypes.byref(end))
                if end.value > start.value:
                    for kind in AttrType:
                        ptr = pango.pango_attr_iterator_get(it, int(kind))
                        if not ptr:
                            continue
                        raw = ctypes.string_at(ptr, record_size(kind))
                        record = decode_attribute(raw, kind)
                        records.append(replace(record, start=start.value, end=end.value))
                if not pango.pango_attr_iterator_next(it):
                    break
        finally:
            pango.pango_attr_iterator_destroy(it)

        return records
