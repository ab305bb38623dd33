"""
Built-in transformation table for field-sanitizer.

Maps a fixed set of names to unary functions (value -> value). The table is
built once at import time and exposed read-only as ``BUILTIN_SANITIZERS``.

Two naming families live side by side:

- PHP-style string helpers (``strtolower``, ``trim``, ``ucwords``, ...),
  so rule strings such as ``"strtolower|trim"`` read the way they always have.
  These accept any value and convert it to a string first, so ``42`` under
  ``trim`` becomes ``"42"``.
- Python-style names (``lower``, ``strip``, ``title``, ``int``, ...) that
  map straight onto the equivalent ``str`` methods and builtins, and so
  expect a ``str`` where the method does.

Lookup is by exact, case-sensitive name. Custom sanitizers registered on a
``Sanitizer`` instance are always consulted before this table.
"""

from __future__ import annotations

import base64
import hashlib
import html
import re
from types import MappingProxyType
from typing import Any, Callable
from urllib.parse import quote, quote_plus, unquote_plus

SanitizerFn = Callable[[Any], Any]

# Characters stripped by trim/ltrim/rtrim: space, \t, \n, \r, NUL, vertical tab
TRIM_CHARS = " \t\n\r\0\x0b"

_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])(\S)")
_TAG = re.compile(r"<[^>]*>")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# PHP-style helpers
#
# Non-string input is converted first: None -> "", True -> "1",
# False -> "", anything else via str().
# ---------------------------------------------------------------------------

def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def strtolower(value: Any) -> str:
    return _to_str(value).lower()


def strtoupper(value: Any) -> str:
    return _to_str(value).upper()


def strlen(value: Any) -> int:
    return len(_to_str(value))


def trim(value: Any) -> str:
    return _to_str(value).strip(TRIM_CHARS)


def ltrim(value: Any) -> str:
    return _to_str(value).lstrip(TRIM_CHARS)


def rtrim(value: Any) -> str:
    return _to_str(value).rstrip(TRIM_CHARS)


def ucfirst(value: Any) -> str:
    value = _to_str(value)
    return value[:1].upper() + value[1:]


def lcfirst(value: Any) -> str:
    value = _to_str(value)
    return value[:1].lower() + value[1:]


def ucwords(value: Any) -> str:
    """Upper-case the first character of each whitespace-delimited word.

    Unlike ``str.title`` the remaining characters are left untouched, so
    ``"mcDonald's"`` becomes ``"McDonald's"``, not ``"Mcdonald'S"``.
    """
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), _to_str(value))


def strrev(value: Any) -> str:
    return _to_str(value)[::-1]


def strip_tags(value: Any) -> str:
    return _TAG.sub("", _to_str(value))


def htmlspecialchars(value: Any) -> str:
    return html.escape(_to_str(value), quote=True)


def html_entity_decode(value: Any) -> str:
    return html.unescape(_to_str(value))


def addslashes(value: Any) -> str:
    out = _to_str(value).replace("\\", "\\\\")
    for ch in ("'", '"'):
        out = out.replace(ch, "\\" + ch)
    return out.replace("\0", "\\0")


def stripslashes(value: Any) -> str:
    # "\\0" -> NUL, "\\x" -> "x"
    return re.sub(
        r"\\(.?)", lambda m: "\0" if m.group(1) == "0" else m.group(1), _to_str(value)
    )


def nl2br(value: Any) -> str:
    return re.sub(r"(\r\n|\n\r|\n|\r)", r"<br />\1", _to_str(value))


def urlencode(value: Any) -> str:
    return quote_plus(_to_str(value))


def rawurlencode(value: Any) -> str:
    return quote(_to_str(value), safe="-_.~")


def urldecode(value: Any) -> str:
    return unquote_plus(_to_str(value))


def base64_encode(value: Any) -> str:
    return base64.b64encode(_to_str(value).encode("utf-8")).decode("ascii")


def base64_decode(value: Any) -> str:
    return base64.b64decode(_to_str(value)).decode("utf-8")


def md5(value: Any) -> str:
    return hashlib.md5(_to_str(value).encode("utf-8")).hexdigest()


def sha1(value: Any) -> str:
    return hashlib.sha1(_to_str(value).encode("utf-8")).hexdigest()


def strval(value: Any) -> str:
    return _to_str(value)


def intval(value: Any) -> int:
    """Integer value of *value*; strings use their leading digits, else ``0``."""
    if isinstance(value, str):
        m = _INT_PREFIX.match(value)
        return int(m.group(0)) if m else 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def floatval(value: Any) -> float:
    """Float value of *value*; strings use their leading number, else ``0.0``."""
    if isinstance(value, str):
        m = _FLOAT_PREFIX.match(value)
        return float(m.group(0)) if m else 0.0
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


def boolval(value: Any) -> bool:
    # "0" is falsy, like an empty string
    if value == "0":
        return False
    return bool(value)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------

_TABLE: dict[str, SanitizerFn] = {
    # PHP-style
    "strtolower": strtolower,
    "strtoupper": strtoupper,
    "trim": trim,
    "ltrim": ltrim,
    "rtrim": rtrim,
    "ucfirst": ucfirst,
    "lcfirst": lcfirst,
    "ucwords": ucwords,
    "strrev": strrev,
    "strlen": strlen,
    "strip_tags": strip_tags,
    "htmlspecialchars": htmlspecialchars,
    "html_entity_decode": html_entity_decode,
    "addslashes": addslashes,
    "stripslashes": stripslashes,
    "nl2br": nl2br,
    "urlencode": urlencode,
    "rawurlencode": rawurlencode,
    "urldecode": urldecode,
    "base64_encode": base64_encode,
    "base64_decode": base64_decode,
    "md5": md5,
    "sha1": sha1,
    "intval": intval,
    "floatval": floatval,
    "boolval": boolval,
    "strval": strval,

    # Python-style
    "lower": str.lower,
    "upper": str.upper,
    "strip": str.strip,
    "lstrip": str.lstrip,
    "rstrip": str.rstrip,
    "title": str.title,
    "capitalize": str.capitalize,
    "swapcase": str.swapcase,
    "casefold": str.casefold,
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "abs": abs,
    "len": len,
}

BUILTIN_SANITIZERS: MappingProxyType[str, SanitizerFn] = MappingProxyType(_TABLE)
