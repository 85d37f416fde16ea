"""ctypes bindings for the GLib/Pango calls used to read parsed markup.

The attribute decoder needs raw PangoAttribute memory, which the
introspection bindings do not expose.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import sys
from functools import lru_cache

from svg_markup2tspan.exceptions import PangoLibraryError

LIBNAMES: dict[str, dict[str, str]] = {
    "glib": {
        "linux": "libglib-2.0.so.0",
        "darwin": "libglib-2.0.0.dylib",
        "win32": "libglib-2.0-0.dll",
    },
    "pango": {
        "linux": "libpango-1.0.so.0",
        "darwin": "libpango-1.0.dylib",
        "win32": "libpango-1.0-0.dll",
    },
}

# ctypes.util.find_library names
_SHORT_NAMES = {
    "glib": "glib-2.0",
    "pango": "pango-1.0",
}


class GError(ctypes.Structure):
    _fields_ = [
        ("domain", ctypes.c_uint32),
        ("code", ctypes.c_int),
        ("message", ctypes.c_char_p),
    ]


def _platform() -> str:
    if sys.platform.startswith("linux") or "bsd" in sys.platform:
        return "linux"
    return sys.platform


def _load(name: str) -> ctypes.CDLL:
    candidates = [LIBNAMES[name].get(_platform())]
    candidates.append(ctypes.util.find_library(_SHORT_NAMES[name]))
    errors = []
    for candidate in candidates:
        if not candidate:
            continue
        try:
            return ctypes.CDLL(candidate)
        except OSError as e:
            errors.append(str(e))
    raise PangoLibraryError(f"Could not load {name}: {'; '.join(errors) or 'not found'}")


class PangoLib:
    """Loaded libraries with argument and return types declared."""

    def __init__(self) -> None:
        self.glib = _load("glib")
        self.pango = _load("pango")

        vp = ctypes.c_void_p

        self.glib.g_free.argtypes = [vp]
        self.glib.g_free.restype = None
        self.glib.g_error_free.argtypes = [ctypes.POINTER(GError)]
        self.glib.g_error_free.restype = None

        p = self.pango
        p.pango_parse_markup.argtypes = [
            ctypes.c_char_p,
            ctypes.c_int,
            ctypes.c_uint32,
            ctypes.POINTER(vp),
            ctypes.POINTER(vp),
            ctypes.POINTER(ctypes.c_uint32),
            ctypes.POINTER(ctypes.POINTER(GError)),
        ]
        p.pango_parse_markup.restype = ctypes.c_int
        p.pango_attr_list_unref.argtypes = [vp]
        p.pango_attr_list_unref.restype = None
        p.pango_attr_list_get_iterator.argtypes = [vp]
        p.pango_attr_list_get_iterator.restype = vp
        p.pango_attr_iterator_next.argtypes = [vp]
        p.pango_attr_iterator_next.restype = ctypes.c_int
        p.pango_attr_iterator_range.argtypes = [
            vp,
            ctypes.POINTER(ctypes.c_int),
            ctypes.POINTER(ctypes.c_int),
        ]
        p.pango_attr_iterator_range.restype = None
        p.pango_attr_iterator_get.argtypes = [vp, ctypes.c_int]
        p.pango_attr_iterator_get.restype = vp
        p.pango_attr_iterator_destroy.argtypes = [vp]
        p.pango_attr_iterator_destroy.restype = None


@lru_cache(maxsize=1)
def load_pango() -> PangoLib:
    """Load the native libraries once per process.

    Raises:
        PangoLibraryError: If any library is missing.
    """
    return PangoLib()
