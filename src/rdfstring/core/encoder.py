"""Term to string encoding.

Terms are encoded as follows:
    - Named nodes: ``<http://example.org>``
    - Blank nodes: ``_:b1``
    - Variables: ``?v1``
    - Default graph: the empty string
    - Literals: ``"abc"``, ``"abc"@en-us``, ``"abc"@en-us--ltr``,
      ``"<p>e</p>"^^<http://www.w3.org/1999/02/22-rdf-syntax-ns#HTML>``
    - Quads: ``<<<ex:s> <ex:p> <ex:o>>>`` or ``<<<ex:s> <ex:p> <ex:o> <ex:g>>>``

Example:
    from rdfstring.core.encoder import term_to_string
    from rdfstring.core.model import Literal

    term_to_string(Literal(value="abc", language="en", direction="ltr"))
    # '"abc"@en--ltr'
"""

from __future__ import annotations

from typing import Any

from rdfstring.core.errors import UnsupportedTermError
from rdfstring.core.escaping import escape_iri, escape_string
from rdfstring.core.vocabulary import IMPLICIT_DATATYPES


def term_to_string(term: Any) -> str | None:
    """Encode a term as a string.

    Accepts any object exposing ``term_type`` and the attributes of its
    kind, so terms from custom data factories encode as well.

    Args:
        term: The term to encode, or None

    Returns:
        The string encoding, or None when no term was given. The default
        graph encodes to the empty string, which is distinct from None.

    Raises:
        UnsupportedTermError: If the object is not a known term kind
    """
    if term is None:
        return None

    term_type = getattr(term, "term_type", None)
    if term_type == "NamedNode":
        return f"<{escape_iri(term.value)}>"
    if term_type == "BlankNode":
        return f"_:{term.value}"
    if term_type == "Variable":
        return f"?{term.value}"
    if term_type == "DefaultGraph":
        return ""
    if term_type == "Literal":
        return _literal_to_string(term)
    if term_type == "Quad":
        return _quad_to_string(term)
    raise UnsupportedTermError(term)


def _literal_to_string(literal: Any) -> str:
    result = f'"{escape_string(literal.value)}"'
    datatype = literal.datatype
    if datatype is not None and datatype.value not in IMPLICIT_DATATYPES:
        result += f"^^<{datatype.value}>"
    language = getattr(literal, "language", "")
    if language:
        result += f"@{language}"
    direction = getattr(literal, "direction", "")
    if direction:
        result += f"--{direction}"
    return result


def _quad_to_string(quad: Any) -> str:
    parts = [
        term_to_string(quad.subject),
        term_to_string(quad.predicate),
        term_to_string(quad.object),
    ]
    if quad.graph.term_type != "DefaultGraph":
        parts.append(term_to_string(quad.graph))
    return f"<<{' '.join(parts)}>>"
