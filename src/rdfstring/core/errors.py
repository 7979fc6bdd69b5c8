"""Errors raised by the term codec.

Every error keeps the offending string on ``.value`` so callers can report
exactly which input was rejected.

Hierarchy:
    TermSyntaxError (ValueError)
        InvalidLiteralError
        InvalidDirectionError
        InvalidIriError
        NestedQuadSyntaxError
            UnbalancedTagError
            NestedQuadArityError
    MissingCapabilityError (TypeError)
    UnsupportedTermError (TypeError)
"""

from __future__ import annotations

from typing import Any


class TermSyntaxError(ValueError):
    """Raised when a string does not match the shape of the term it encodes."""

    def __init__(self, value: str, message: str) -> None:
        self.value = value
        super().__init__(message)


class InvalidLiteralError(TermSyntaxError):
    """Raised on a bad literal envelope or a malformed datatype/language suffix."""

    def __init__(self, value: str) -> None:
        super().__init__(value, f"{value} is not a literal")


class InvalidDirectionError(TermSyntaxError):
    """Raised when the base direction after ``--`` is not ``ltr`` or ``rtl``."""

    def __init__(self, value: str) -> None:
        super().__init__(value, f"{value} is not a literal with a valid direction")


class InvalidIriError(TermSyntaxError):
    """Raised when a named node is not wrapped in ``<>``."""

    def __init__(self, value: str) -> None:
        super().__init__(
            value, f"Detected invalid iri for named node (must be wrapped in <>): {value}"
        )


class NestedQuadSyntaxError(TermSyntaxError):
    """Base class for grammar errors in ``<<...>>`` nested quad syntax."""


class UnbalancedTagError(NestedQuadSyntaxError):
    """Raised when ``<`` and ``>`` inside a nested quad do not pair up."""

    def __init__(self, value: str, closing: bool) -> None:
        self.closing = closing
        if closing:
            message = f"Found closing tag without opening tag in {value}"
        else:
            message = f"Found opening tag without closing tag in {value}"
        super().__init__(value, message)


class NestedQuadArityError(NestedQuadSyntaxError):
    """Raised when a nested quad does not have 3 or 4 components."""

    def __init__(self, value: str, count: int) -> None:
        self.count = count
        super().__init__(value, f"Nested quad syntax error {value}")


class MissingCapabilityError(TypeError):
    """Raised when the data factory cannot construct a requested term kind."""

    def __init__(self, value: str, method: str = "variable") -> None:
        self.value = value
        self.method = method
        super().__init__(f"Missing '{method}()' method on the given DataFactory")


class UnsupportedTermError(TypeError):
    """Raised when an object is not a term the target model can represent."""

    def __init__(self, term: Any, reason: str = "") -> None:
        self.value = term
        message = f"Unsupported term: {term!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
