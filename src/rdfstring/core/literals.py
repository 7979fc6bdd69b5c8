"""Literal metadata extraction.

A literal is encoded as a double-quoted value followed by at most one
annotation:

    "value"
    "value"^^<datatype IRI>
    "value"@language
    "value"@language--direction

``parse_literal`` reads all four parts in one match. The ``get_literal_*``
helpers return a single part and raise the same errors.
"""

from __future__ import annotations

import re
from typing import Final, NamedTuple

from rdfstring.core.errors import InvalidDirectionError, InvalidLiteralError
from rdfstring.core.escaping import unescape_string
from rdfstring.core.vocabulary import DIRECTIONS, RDF_LANG_STRING, XSD_STRING

# The value runs to the last quote: neither annotation may contain a quote,
# and a language tag may not contain another @.
LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r'"(?P<value>.*)"'
    r'(?:\^\^<(?P<datatype>[^"]+)>|@(?P<language>[^@"]+))?',
    re.DOTALL,
)

DIRECTION_MARKER: Final[str] = "--"


class LiteralParts(NamedTuple):
    """The components of a string-encoded literal."""

    value: str
    datatype: str
    language: str
    direction: str


def parse_literal(literal: str) -> LiteralParts:
    """Split a string-encoded literal into value, datatype, language and direction.

    Args:
        literal: An encoded literal, starting with a double quote

    Returns:
        The unescaped value, the datatype IRI, the lower-cased language
        (empty if none) and the base direction (empty if none)

    Raises:
        InvalidLiteralError: If the envelope or annotation is malformed
        InvalidDirectionError: If a direction other than ltr/rtl follows ``--``
    """
    match = LITERAL_PATTERN.fullmatch(literal)
    if match is None:
        raise InvalidLiteralError(literal)

    value = unescape_string(match.group("value"))
    datatype = match.group("datatype")
    annotation = match.group("language")

    if datatype is not None:
        return LiteralParts(value, datatype, "", "")
    if annotation is None:
        return LiteralParts(value, XSD_STRING, "", "")

    language, marker, direction = annotation.partition(DIRECTION_MARKER)
    if not language:
        raise InvalidLiteralError(literal)
    if marker and direction not in DIRECTIONS:
        raise InvalidDirectionError(literal)
    return LiteralParts(value, RDF_LANG_STRING, language.lower(), direction)


def get_literal_value(literal: str) -> str:
    """Return the unescaped value of a string-encoded literal."""
    return parse_literal(literal).value


def get_literal_type(literal: str) -> str:
    """Return the datatype IRI of a string-encoded literal.

    Language-tagged literals report ``rdf:langString``; literals without an
    annotation report ``xsd:string``.
    """
    return parse_literal(literal).datatype


def get_literal_language(literal: str) -> str:
    """Return the lower-cased language of a literal, or an empty string."""
    return parse_literal(literal).language


def get_literal_direction(literal: str) -> str:
    """Return the base direction (``ltr``/``rtl``) of a literal, or an empty string."""
    return parse_literal(literal).direction
