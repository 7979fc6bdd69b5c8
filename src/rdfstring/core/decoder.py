"""String to term decoding.

The first character of the string selects the term kind:
    - empty string: default graph
    - ``_``: blank node
    - ``?``: variable
    - ``"``: literal
    - ``<<`` ... ``>>``: quad, components decoded recursively
    - ``<`` ... ``>``: named node

All terms are allocated through a data factory (``TermFactory`` unless one
is passed), which is also used for every component of a nested quad.

Example:
    from rdfstring.core.decoder import string_to_term

    quad = string_to_term("<<<ex:s> <ex:p> <ex:o>>>")
    quad.subject.value  # 'ex:s'
"""

from __future__ import annotations

import logging
from typing import Any

from rdfstring.core.errors import (
    InvalidIriError,
    MissingCapabilityError,
    NestedQuadArityError,
    NestedQuadSyntaxError,
    UnbalancedTagError,
)
from rdfstring.core.escaping import unescape_string
from rdfstring.core.factory import DataFactory, get_default_factory, supports_variables
from rdfstring.core.literals import parse_literal

logger = logging.getLogger(__name__)


def string_to_term(value: str | None, data_factory: DataFactory | None = None) -> Any:
    """Decode a string-encoded term.

    Args:
        value: The encoded term; None or "" decode to the default graph
        data_factory: Factory used to construct the terms

    Returns:
        The term built by the data factory

    Raises:
        InvalidLiteralError: If a literal is malformed
        InvalidDirectionError: If a literal has an invalid base direction
        InvalidIriError: If a named node is not wrapped in ``<>``
        UnbalancedTagError: If a nested quad has unbalanced ``<``/``>``
        NestedQuadArityError: If a nested quad has other than 3 or 4 components
        MissingCapabilityError: If a variable is decoded with a factory
            that cannot build variables
    """
    if data_factory is None:
        data_factory = get_default_factory()

    if not value:
        return data_factory.default_graph()

    first = value[0]
    if first == "_":
        return data_factory.blank_node(value[2:])
    if first == "?":
        if not supports_variables(data_factory):
            raise MissingCapabilityError(value, "variable")
        return data_factory.variable(value[1:])  # type: ignore[attr-defined]
    if first == '"':
        parts = parse_literal(value)
        if parts.language:
            return data_factory.literal(
                parts.value, language=parts.language, direction=parts.direction
            )
        return data_factory.literal(parts.value, data_factory.named_node(parts.datatype))

    if value.startswith("<<") and value.endswith(">>"):
        components = [
            string_to_term(component, data_factory) for component in split_nested_quad(value)
        ]
        return data_factory.quad(*components)

    if not value.startswith("<") or not value.endswith(">"):
        logger.debug("Rejected named node without angle brackets: %r", value)
        raise InvalidIriError(value)
    return data_factory.named_node(unescape_string(value[1:-1]))


def split_nested_quad(value: str) -> list[str]:
    """Split a ``<<...>>`` nested quad into its string-encoded components.

    Spaces separate components only outside angle brackets. The bracket
    depth counts every ``<`` and ``>`` alike, so the ``<``/``>`` of a named
    node and the ``<<``/``>>`` of a nested quad both balance out.

    Args:
        value: The encoded quad, including the outer ``<<`` and ``>>``

    Returns:
        Three components (triple) or four (quad with a graph)

    Raises:
        NestedQuadSyntaxError: If the value is not wrapped in ``<<`` and ``>>``
        UnbalancedTagError: If the brackets do not pair up
        NestedQuadArityError: If there are not 3 or 4 components
    """
    if len(value) < 4 or not value.startswith("<<") or not value.endswith(">>"):
        logger.debug("Nested quad without << >> wrapper: %r", value)
        raise NestedQuadSyntaxError(value, f"Nested quad must be wrapped in << >>: {value}")
    inner = value[2:-2]
    components: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(inner):
        if char == "<":
            depth += 1
        elif char == ">":
            if depth == 0:
                logger.debug("Unbalanced '>' at offset %d in %r", index + 2, value)
                raise UnbalancedTagError(value, closing=True)
            depth -= 1
        elif char == " " and depth == 0:
            components.append(inner[start:index])
            start = index + 1
    if depth != 0:
        logger.debug("Unclosed '<' (depth %d) in %r", depth, value)
        raise UnbalancedTagError(value, closing=False)
    components.append(inner[start:])

    if len(components) not in (3, 4):
        logger.debug("Nested quad with %d components: %r", len(components), value)
        raise NestedQuadArityError(value, len(components))
    return components
