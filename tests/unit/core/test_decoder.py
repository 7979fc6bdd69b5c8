"""Tests for string to term decoding."""

from typing import Any

import pytest

from rdfstring.core.decoder import split_nested_quad, string_to_term
from rdfstring.core.errors import (
    InvalidDirectionError,
    InvalidIriError,
    InvalidLiteralError,
    MissingCapabilityError,
    NestedQuadArityError,
    NestedQuadSyntaxError,
    UnbalancedTagError,
)
from rdfstring.core.factory import TermFactory
from rdfstring.core.model import (
    DEFAULT_GRAPH,
    BlankNode,
    Literal,
    NamedNode,
    Quad,
    Variable,
)


class NoVariableFactory:
    """Factory without variable support."""

    def named_node(self, value: str) -> Any:
        return NamedNode(value=value)

    def blank_node(self, value: str | None = None) -> Any:
        return BlankNode(value=value or "b")

    def literal(
        self, value: str, datatype: Any = None, language: str = "", direction: str = ""
    ) -> Any:
        return TermFactory().literal(value, datatype, language, direction)

    def default_graph(self) -> Any:
        return DEFAULT_GRAPH

    def quad(self, subject: Any, predicate: Any, object: Any, graph: Any = None) -> Any:
        return TermFactory().quad(subject, predicate, object, graph)


class RecordingFactory(TermFactory):
    """Factory recording which constructors were called."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def named_node(self, value: str) -> NamedNode:
        self.calls.append("named_node")
        return super().named_node(value)

    def quad(self, subject: Any, predicate: Any, object: Any, graph: Any = None) -> Quad:
        self.calls.append("quad")
        return super().quad(subject, predicate, object, graph)


class TestStringToTerm:
    """Test decoding of each term kind."""

    def test_empty_string(self) -> None:
        """Empty string is the default graph."""
        assert string_to_term("") == DEFAULT_GRAPH

    def test_none(self) -> None:
        """None is the default graph."""
        assert string_to_term(None) == DEFAULT_GRAPH

    def test_blank_node(self) -> None:
        """_: prefix is a blank node."""
        assert string_to_term("_:b1") == BlankNode(value="b1")

    def test_variable(self) -> None:
        """? prefix is a variable."""
        assert string_to_term("?v1") == Variable(value="v1")

    def test_named_node(self) -> None:
        """<...> is a named node."""
        assert string_to_term("<http://example.org>") == NamedNode(value="http://example.org")

    def test_named_node_unescaped(self) -> None:
        """Escapes in IRIs are resolved."""
        node = string_to_term("<http://example.org/\\U0001f600>")
        assert node == NamedNode(value="http://example.org/\U0001f600")

    def test_named_node_without_opening_bracket(self) -> None:
        """Missing < is an error naming the input."""
        with pytest.raises(InvalidIriError) as exc_info:
            string_to_term("http://example.org>")
        assert str(exc_info.value) == (
            "Detected invalid iri for named node (must be wrapped in <>): http://example.org>"
        )

    def test_named_node_without_closing_bracket(self) -> None:
        """Missing > is an error naming the input."""
        with pytest.raises(InvalidIriError, match="<http://example.org$") as exc_info:
            string_to_term("<http://example.org")
        assert exc_info.value.value == "<http://example.org"


class TestStringToLiteral:
    """Test decoding of literals."""

    def test_plain(self) -> None:
        """Plain literal."""
        assert string_to_term('"abc"') == Literal(value="abc")

    def test_escaped_quotes(self) -> None:
        """Escaped quotes are resolved."""
        assert string_to_term('"a\\"b\\"c"') == Literal(value='a"b"c')

    def test_datatype(self) -> None:
        """Typed literal."""
        term = string_to_term('"abc"^^<http://blabla>')
        assert term == Literal(value="abc", datatype=NamedNode(value="http://blabla"))
        assert term != Literal(value="abc")

    def test_language(self) -> None:
        """Language-tagged literal."""
        term = string_to_term('"abc"@en')
        assert term == Literal(value="abc", language="en")
        assert term != Literal(value="abc")

    def test_language_and_direction(self) -> None:
        """Directional language-tagged literal."""
        term = string_to_term('"abc"@en--ltr')
        assert term.language == "en"
        assert term.direction == "ltr"
        assert term == Literal(value="abc", language="en", direction="ltr")
        assert term != Literal(value="abc", language="en", direction="rtl")

    def test_region_language_and_direction(self) -> None:
        """Language with a region subtag and direction."""
        assert string_to_term('"abc"@en-us--ltr') == Literal(
            value="abc", language="en-us", direction="ltr"
        )
        assert string_to_term('"---"@en-us--ltr') == Literal(
            value="---", language="en-us", direction="ltr"
        )

    def test_language_lower_cased(self) -> None:
        """Language is lower-cased on decoding."""
        assert string_to_term('"abc"@EN').language == "en"

    def test_invalid_direction(self) -> None:
        """Unknown direction is an error."""
        with pytest.raises(InvalidDirectionError):
            string_to_term('"abc"@en--bla')

    def test_invalid_literal(self) -> None:
        """Malformed literal is an error."""
        with pytest.raises(InvalidLiteralError):
            string_to_term('"abc')


class TestStringToQuad:
    """Test decoding of nested quads."""

    def test_quad_with_graph(self) -> None:
        """Four components give a quad in a named graph."""
        assert string_to_term("<<<ex:s> <ex:p> <ex:o> <ex:g>>>") == Quad(
            subject=NamedNode(value="ex:s"),
            predicate=NamedNode(value="ex:p"),
            object=NamedNode(value="ex:o"),
            graph=NamedNode(value="ex:g"),
        )

    def test_quad_default_graph(self, triple: Quad) -> None:
        """Three components give a quad in the default graph."""
        assert string_to_term("<<<ex:s> <ex:p> <ex:o>>>") == triple

    def test_nested_quad(self, triple: Quad) -> None:
        """Quad as subject."""
        assert string_to_term("<<<<<ex:s> <ex:p> <ex:o>>> <ex:p> <ex:o>>>") == Quad(
            subject=triple,
            predicate=NamedNode(value="ex:p"),
            object=NamedNode(value="ex:o"),
        )

    def test_nested_quads(self, triple: Quad) -> None:
        """Quads as subject and object."""
        term = string_to_term("<<<<<ex:s> <ex:p> <ex:o>>> <ex:p> <<<ex:s> <ex:p> <ex:o>>>>>")
        assert term == Quad(
            subject=triple,
            predicate=NamedNode(value="ex:p"),
            object=triple,
        )

    def test_mixed_components(self) -> None:
        """Blank nodes, variables and literals inside a quad."""
        assert string_to_term('<<_:b0 ?p "x"@en>>') == Quad(
            subject=BlankNode(value="b0"),
            predicate=Variable(value="p"),
            object=Literal(value="x", language="en"),
        )

    def test_unclosed_tag(self) -> None:
        """Unbalanced < is an error."""
        with pytest.raises(UnbalancedTagError) as exc_info:
            string_to_term("<<<>>")
        assert str(exc_info.value) == "Found opening tag without closing tag in <<<>>"

    def test_unopened_tag(self) -> None:
        """Unbalanced > is an error."""
        with pytest.raises(UnbalancedTagError) as exc_info:
            string_to_term("<<>>>")
        assert str(exc_info.value) == "Found closing tag without opening tag in <<>>>"

    def test_wrong_component_count(self) -> None:
        """Two components is an error."""
        with pytest.raises(NestedQuadArityError) as exc_info:
            string_to_term("<<a b>>")
        assert str(exc_info.value) == "Nested quad syntax error <<a b>>"
        assert exc_info.value.count == 2

    def test_too_many_components(self) -> None:
        """Five components is an error."""
        with pytest.raises(NestedQuadSyntaxError):
            string_to_term("<<<a> <b> <c> <d> <e>>>")


class TestSplitNestedQuad:
    """Test the bracket-depth scanner."""

    def test_triple(self) -> None:
        """Three top-level components."""
        assert split_nested_quad("<<<ex:s> <ex:p> <ex:o>>>") == ["<ex:s>", "<ex:p>", "<ex:o>"]

    def test_nested_components_kept_whole(self) -> None:
        """Spaces inside nested quads do not split."""
        assert split_nested_quad("<<<<<ex:s> <ex:p> <ex:o>>> <ex:p> <ex:o> <ex:g>>>") == [
            "<<<ex:s> <ex:p> <ex:o>>>",
            "<ex:p>",
            "<ex:o>",
            "<ex:g>",
        ]

    @pytest.mark.parametrize("value", ["<ex:s> <ex:p> <ex:o>", "<<<ex:s> <ex:p> <ex:o>", "<<>"])
    def test_missing_wrapper(self, value: str) -> None:
        """Values without the << >> wrapper are rejected before scanning."""
        with pytest.raises(NestedQuadSyntaxError, match="must be wrapped") as exc_info:
            split_nested_quad(value)
        assert not isinstance(exc_info.value, NestedQuadArityError)
        assert exc_info.value.value == value

    def test_error_is_value_error(self) -> None:
        """Grammar errors are ValueErrors."""
        with pytest.raises(ValueError):
            split_nested_quad("<<<a> <b>>>")


class TestDataFactory:
    """Test decoding with custom data factories."""

    def test_custom_factory_used(self) -> None:
        """All terms, including nested ones, come from the given factory."""
        factory = RecordingFactory()
        string_to_term("<<<<<ex:s> <ex:p> <ex:o>>> <ex:p> <ex:o>>>", factory)
        assert factory.calls.count("quad") == 2
        assert factory.calls.count("named_node") == 5

    def test_factory_without_variables(self) -> None:
        """Variables need a factory that can build them."""
        with pytest.raises(MissingCapabilityError) as exc_info:
            string_to_term("?v1", NoVariableFactory())
        assert str(exc_info.value) == "Missing 'variable()' method on the given DataFactory"

    def test_factory_without_variables_other_terms(self) -> None:
        """Other terms decode fine without variable support."""
        assert string_to_term("<ex:s>", NoVariableFactory()) == NamedNode(value="ex:s")
        assert string_to_term("", NoVariableFactory()) == DEFAULT_GRAPH

    def test_explicit_default_factory(self, factory: TermFactory) -> None:
        """Passing the default factory explicitly gives the same terms."""
        assert string_to_term('"abc"@en', factory) == string_to_term('"abc"@en')
