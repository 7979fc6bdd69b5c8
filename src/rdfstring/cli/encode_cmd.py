"""CLI command for encoding JSON terms as strings.

Usage:
    rdfstring encode '{"termType": "NamedNode", "value": "http://example.org"}'
    rdfstring encode --quad "$(cat quad.json)"
    cat term.json | rdfstring encode -
"""

from __future__ import annotations

import logging

import orjson
import typer

from rdfstring.cli.common import CODEC_ERRORS, dump_json, fail, read_input
from rdfstring.config import settings
from rdfstring.core.encoder import term_to_string
from rdfstring.core.model import Quad, TermAdapter
from rdfstring.core.quads import quad_to_string_quad

logger = logging.getLogger(__name__)

app = typer.Typer(help="Encode JSON terms as strings")


@app.callback(invoke_without_command=True)
def encode(
    value: str = typer.Argument(
        ...,
        help="JSON term, or '-' to read standard input",
    ),
    quad: bool = typer.Option(
        False,
        "--quad",
        "-q",
        help="Read a JSON quad and print a JSON string quad",
    ),
    indent: bool = typer.Option(
        settings.json_indent,
        "--indent",
        "-i",
        help="Pretty-print the JSON output (with --quad)",
    ),
) -> None:
    """Encode a JSON term and print its string form."""
    text = read_input(value)
    try:
        data = orjson.loads(text)
        if quad:
            string_quad = quad_to_string_quad(Quad.model_validate(data))
            typer.echo(dump_json(string_quad.model_dump(), indent))
            return
        encoded = term_to_string(TermAdapter.validate_python(data))
    except CODEC_ERRORS as exc:
        logger.debug("Encoding failed for %r", text, exc_info=True)
        raise fail(exc) from exc

    typer.echo(encoded)
