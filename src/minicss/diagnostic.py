"""Positioned diagnostics: line/column lookup and source excerpts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "Location",
    "diagnose",
    "line_text",
    "locate",
    "logging_sink",
]

DiagnosticSink = Callable[[str], None]

CARET_LABEL = "Near here."


@dataclass(frozen=True)
class Location:
    """A 1-based line and 0-based column."""

    line: int
    column: int


@dataclass(frozen=True)
class Diagnostic:
    """A message pointing at one position in the source.

    Attributes:
        line: 1-based line number.
        column: 0-based column within the line.
        message: Human-readable description of the problem.
        source_line: Full text of the offending line, without its terminator.
    """

    line: int
    column: int
    message: str
    source_line: str

    def render(self) -> str:
        return (
            f"Error at line {self.line}, column {self.column}. {self.message}\n"
            f"\n"
            f"{self.source_line}\n"
            f"{' ' * self.column}^ {CARET_LABEL}"
        )

    def __str__(self) -> str:
        return self.render()


def _clamp(source: str, offset: int) -> int:
    return max(0, min(offset, len(source)))


def locate(source: str, offset: int) -> Location:
    """Compute the line and column of ``offset`` within ``source``."""
    offset = _clamp(source, offset)
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Location(line=line, column=offset - line_start)


def line_text(source: str, offset: int) -> str:
    """Return the full line containing ``offset``."""
    offset = _clamp(source, offset)
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    return source[line_start:line_end].rstrip("\r")


def diagnose(source: str, offset: int, message: str, *args: Any) -> Diagnostic:
    """Build a Diagnostic for ``offset``, %-formatting ``args`` into ``message``."""
    if args:
        message = message % args
    location = locate(source, offset)
    return Diagnostic(
        line=location.line,
        column=location.column,
        message=message,
        source_line=line_text(source, offset),
    )


def logging_sink(logger: logging.Logger | None = None) -> DiagnosticSink:
    """Create a sink that logs each diagnostic at ERROR level."""
    log = logger or logging.getLogger("minicss")

    def sink(text: str) -> None:
        log.error("%s", text)

    return sink
