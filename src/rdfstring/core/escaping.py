"""Escaping of literal values and IRIs in the string term encoding.

Escaped characters:
    - backslash, double quote, tab, newline, carriage return, backspace and
      form feed use their two-character escapes (``\\\\``, ``\\"``, ``\\t``,
      ``\\n``, ``\\r``, ``\\b``, ``\\f``)
    - other control characters U+0000..U+0019 become ``\\uXXXX``
    - characters outside the Basic Multilingual Plane (a UTF-16 surrogate
      pair) become ``\\UXXXXXXXX``

Hex digits are lower-case and zero-padded. Everything else, including the
line and paragraph separators U+2028/U+2029, passes through unchanged.
"""

from __future__ import annotations

import re
from typing import Final

ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    '["\\\\\t\n\r\b\f\u0000-\u0019]|[\U00010000-\U0010ffff]'
)

UNESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'\\(?:(?P<char>[\\"tnrbf])|u(?P<u4>[0-9A-Fa-f]{4})|U(?P<u8>[0-9A-Fa-f]{8}))'
)

ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}

UNESCAPES: Final[dict[str, str]] = {escape[1]: char for char, escape in ESCAPES.items()}


def _replace_escaped_character(match: re.Match[str]) -> str:
    character = match.group(0)
    escape = ESCAPES.get(character)
    if escape is not None:
        return escape
    code = ord(character)
    if code > 0xFFFF:
        return f"\\U{code:08x}"
    return f"\\u{code:04x}"


def escape_string(value: str) -> str:
    """Escape a literal value for use between double quotes."""
    if not ESCAPE_PATTERN.search(value):
        return value
    return ESCAPE_PATTERN.sub(_replace_escaped_character, value)


def escape_iri(value: str) -> str:
    """Escape an IRI for use between angle brackets."""
    return ESCAPE_PATTERN.sub(_replace_escaped_character, value)


def _replace_escape_sequence(match: re.Match[str]) -> str:
    char = match.group("char")
    if char is not None:
        return UNESCAPES[char]
    code = int(match.group("u4") or match.group("u8"), 16)
    if code > 0x10FFFF:
        return match.group(0)
    return chr(code)


def unescape_string(value: str) -> str:
    """Resolve the escape sequences produced by ``escape_string``.

    Unknown or out-of-range escape sequences are left untouched.
    """
    if "\\" not in value:
        return value
    return UNESCAPE_PATTERN.sub(_replace_escape_sequence, value)
