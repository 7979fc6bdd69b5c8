"""Namespace and datatype IRIs used by the term codec.

Only the handful of IRIs the codec treats specially live here: the
plain-string datatype and the two language-string datatypes, which are
implied by the literal syntax and therefore never written out.
"""

from typing import Final

# Standard namespaces
XSD_NAMESPACE: Final[str] = "http://www.w3.org/2001/XMLSchema#"
RDF_NAMESPACE: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

XSD_STRING: Final[str] = f"{XSD_NAMESPACE}string"
RDF_LANG_STRING: Final[str] = f"{RDF_NAMESPACE}langString"
RDF_DIR_LANG_STRING: Final[str] = f"{RDF_NAMESPACE}dirLangString"

# Datatypes the literal syntax expresses without a ^^<...> suffix
IMPLICIT_DATATYPES: Final[frozenset[str]] = frozenset(
    {XSD_STRING, RDF_LANG_STRING, RDF_DIR_LANG_STRING}
)

# Allowed base directions for directional language-tagged strings
DIRECTIONS: Final[frozenset[str]] = frozenset({"ltr", "rtl"})
