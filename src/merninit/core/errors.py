"""Error types raised by the template registry and the code renderer."""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for template registry failures."""


class TemplateNotFound(TemplateError, KeyError):
    """Raised when a template key is not registered."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No template registered under {key!r}.")
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class TemplateParseError(TemplateError):
    """Raised when a structured template body does not parse under its features."""

    def __init__(self, key: str, cause: Exception) -> None:
        super().__init__(f"Template {key!r} failed to parse: {cause}")
        self.key = key
        self.cause = cause


class SourceSyntaxError(ValueError):
    """Raised by the source parser. Line and column are 1-based."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} at line {line}, column {column}")
        self.line = line
        self.column = column
