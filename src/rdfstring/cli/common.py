"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from typing import Any

import orjson
import typer
from pydantic import ValidationError

from rdfstring.core.errors import (
    MissingCapabilityError,
    TermSyntaxError,
    UnsupportedTermError,
)

# Errors reported as "Error: ..." with exit code 1 instead of a traceback
CODEC_ERRORS = (
    TermSyntaxError,
    MissingCapabilityError,
    UnsupportedTermError,
    ValidationError,
    orjson.JSONDecodeError,
)


def read_input(value: str) -> str:
    """Return the argument, or standard input without its trailing newline for '-'."""
    if value != "-":
        return value
    return sys.stdin.read().rstrip("\r\n")


def dump_json(data: Any, indent: bool) -> str:
    """Serialize data with orjson, optionally pretty-printed."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=option).decode("utf-8")


def fail(exc: Exception) -> typer.Exit:
    """Report an error on stderr and return the exit to raise."""
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)
