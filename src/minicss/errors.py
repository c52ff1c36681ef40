"""Parser error types."""
from __future__ import annotations


class ParseError(Exception):
    """Raised when stylesheet source cannot be parsed.

    ``offset`` is the cursor position where the failure was detected.
    ``line`` and ``column`` are filled in when the error is reported, and
    ``diagnostics`` collects every rendered diagnostic emitted for it.
    """

    def __init__(self, message: str, *, offset: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.line: int | None = None
        self.column: int | None = None
        self.diagnostics: list[str] = []


class InvalidIdentifier(ParseError):
    """Expected a run of ASCII letters, found none."""

    def __init__(self, *, offset: int = 0) -> None:
        super().__init__("Expected valid identifier.", offset=offset)


class UnexpectedSyntax(ParseError):
    """Expected a specific character, found another one or end of input."""

    def __init__(self, expected: str, *, offset: int = 0) -> None:
        super().__init__(f"Expected syntax: '{expected}'.", offset=offset)
        self.expected = expected


class UnknownProperty(ParseError):
    """A well-formed declaration names an unsupported property."""

    def __init__(self, name: str, *, offset: int = 0) -> None:
        super().__init__(f"Unknown property: '{name}'.", offset=offset)
        self.name = name
