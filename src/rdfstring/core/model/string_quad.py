"""String-keyed quad record used at serialization boundaries."""

from __future__ import annotations

from rdfstring.core.model import TermModel


class StringQuad(TermModel):
    """A quad whose four fields hold string-encoded terms.

    ``graph`` is optional; ``None`` and ``""`` both mean the default graph.
    """

    subject: str
    predicate: str
    object: str
    graph: str | None = None
