"""Hand-written recursive-descent parser for the stylesheet subset.

Syntax example:
    div { background: white; }
    p {
        color: red;
        background: blue;
    }

Grammar:
    sheet       := (ws* rule)* ws*
    rule        := identifier ws* '{' (ws* declaration)* ws* '}'
    declaration := identifier ws* ':' ws* identifier ';'

The first failure aborts the parse. Every error is written to the
diagnostic sink before it propagates.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NoReturn

from minicss.diagnostic import DiagnosticSink, diagnose, logging_sink
from minicss.errors import InvalidIdentifier, ParseError, UnknownProperty
from minicss.model import Property, Rule, Sheet
from minicss.properties import is_known_property, match_property
from minicss.scanner import expect_char, scan_identifier, skip_whitespace

__all__ = ["Parser", "parse", "parse_file"]

logger = logging.getLogger("minicss")


class Parser:
    """Parser state for a single pass over ``source``."""

    def __init__(self, source: str, sink: DiagnosticSink | None = None) -> None:
        self.source = source
        self.sink = sink or logging_sink(logger)

    # ---- reporting ----

    def _report(self, error: ParseError, offset: int, message: str, *args: Any) -> None:
        diagnostic = diagnose(self.source, offset, message, *args)
        if error.line is None:
            error.line = diagnostic.line
            error.column = diagnostic.column
        self._emit(error, diagnostic.render())

    def _emit(self, error: ParseError, text: str) -> None:
        error.diagnostics.append(text)
        self.sink(text)

    def _identifier(self, pos: int) -> tuple[str, int]:
        try:
            return scan_identifier(self.source, pos)
        except InvalidIdentifier as exc:
            self._report(exc, exc.offset, exc.message)
            raise

    def _expect(self, pos: int, char: str) -> int:
        try:
            return expect_char(self.source, pos, char)
        except ParseError as exc:
            self._report(exc, exc.offset, exc.message)
            raise

    def _unknown_property(self, name: str, start: int) -> NoReturn:
        exc = UnknownProperty(name, offset=start)
        self._report(exc, start, "Unknown property: '%s'.", name)
        raise exc

    # ---- productions ----

    def parse_property(self, start: int) -> tuple[Property, int]:
        """Parse one ``name: value;`` declaration beginning at ``start``."""
        pos = skip_whitespace(self.source, start)

        try:
            name, pos = self._identifier(pos)
        except InvalidIdentifier as exc:
            self._emit(exc, "Could not parse property name.")
            raise

        if not is_known_property(name):
            self._unknown_property(name, start)

        pos = skip_whitespace(self.source, pos)
        pos = self._expect(pos, ":")
        pos = skip_whitespace(self.source, pos)

        try:
            value, pos = self._identifier(pos)
        except InvalidIdentifier as exc:
            self._emit(exc, "Could not parse property value.")
            raise

        pos = self._expect(pos, ";")

        return match_property(name, value), pos

    def parse_rule(self, start: int) -> tuple[Rule, int]:
        """Parse a selector and its brace-delimited block."""
        source = self.source
        pos = skip_whitespace(source, start)

        selector, pos = self._identifier(pos)

        pos = skip_whitespace(source, pos)
        pos = self._expect(pos, "{")

        properties: list[Property] = []
        while True:
            pos = skip_whitespace(source, pos)
            if pos >= len(source) or source[pos] == "}":
                break
            prop, pos = self.parse_property(pos)
            properties.append(prop)

        pos = self._expect(pos, "}")

        logger.debug("Parsed rule %r with %d declaration(s)", selector, len(properties))
        return Rule(selector=selector, properties=tuple(properties)), pos

    def parse_sheet(self) -> Sheet:
        """Parse rules until the end of input."""
        rules: list[Rule] = []
        pos = skip_whitespace(self.source, 0)
        while pos < len(self.source):
            rule, pos = self.parse_rule(pos)
            rules.append(rule)
            pos = skip_whitespace(self.source, pos)
        logger.debug("Parsed sheet with %d rule(s)", len(rules))
        return Sheet(rules=tuple(rules))


def parse(source: str, *, sink: DiagnosticSink | None = None) -> Sheet:
    """Parse stylesheet source into a Sheet.

    Raises a ParseError subclass on the first error, after writing its
    diagnostics to ``sink`` (the ``minicss`` logger by default).
    """
    return Parser(source, sink).parse_sheet()


def parse_file(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    sink: DiagnosticSink | None = None,
) -> Sheet:
    """Read ``path`` and parse its contents."""
    source = Path(path).read_text(encoding=encoding)
    return parse(source, sink=sink)
