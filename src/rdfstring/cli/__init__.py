"""CLI commands for rdfstring.

Provides command-line interface using Typer:
- rdfstring decode: Decode a string-encoded term to JSON
- rdfstring encode: Encode a JSON term as a string

Usage:
    rdfstring --help
    rdfstring decode '<<<ex:s> <ex:p> <ex:o>>>'
    rdfstring encode '{"termType": "Literal", "value": "abc", "language": "en"}'
"""

import typer

from rdfstring.cli.decode_cmd import app as decode_app
from rdfstring.cli.encode_cmd import app as encode_app
from rdfstring.config import settings
from rdfstring.observability.logging import configure_logging

# Main CLI application
app = typer.Typer(
    name="rdfstring",
    help="rdfstring: convert RDF terms to and from their string encoding",
    no_args_is_help=True,
)

# Add subcommands
app.add_typer(decode_app, name="decode")
app.add_typer(encode_app, name="encode")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr",
    ),
) -> None:
    """rdfstring: convert RDF terms to and from their string encoding."""
    level = "DEBUG" if verbose else settings.log_level
    configure_logging(json_format=settings.log_json, level=level)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
