"""CLI command for decoding string-encoded terms.

Usage:
    rdfstring decode '<http://example.org>'
    rdfstring decode --indent '"abc"@en--ltr'
    rdfstring decode --quad '{"subject": "<ex:s>", "predicate": "<ex:p>", "object": "_:o"}'
    echo '<<<ex:s> <ex:p> <ex:o>>>' | rdfstring decode -
"""

from __future__ import annotations

import logging

import orjson
import typer

from rdfstring.cli.common import CODEC_ERRORS, dump_json, fail, read_input
from rdfstring.config import settings
from rdfstring.core.decoder import string_to_term
from rdfstring.core.quads import string_quad_to_quad

logger = logging.getLogger(__name__)

app = typer.Typer(help="Decode string-encoded terms to JSON")


@app.callback(invoke_without_command=True)
def decode(
    value: str = typer.Argument(
        ...,
        help="String-encoded term, or '-' to read standard input",
    ),
    quad: bool = typer.Option(
        False,
        "--quad",
        "-q",
        help="Read a JSON string quad and decode all four fields",
    ),
    indent: bool = typer.Option(
        settings.json_indent,
        "--indent",
        "-i",
        help="Pretty-print the JSON output",
    ),
) -> None:
    """Decode a string-encoded term and print it as JSON."""
    text = read_input(value)
    try:
        if quad:
            term = string_quad_to_quad(orjson.loads(text))
        else:
            term = string_to_term(text)
    except CODEC_ERRORS as exc:
        logger.debug("Decoding failed for %r", text, exc_info=True)
        raise fail(exc) from exc

    typer.echo(dump_json(term.model_dump(by_alias=True, mode="json"), indent))
