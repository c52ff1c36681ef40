"""minicss: a small CSS-subset parser with positioned diagnostics."""
from __future__ import annotations

__version__ = "0.1.0"

from minicss.config import MinicssConfig
from minicss.diagnostic import Diagnostic, DiagnosticSink, Location, diagnose, locate
from minicss.errors import InvalidIdentifier, ParseError, UnexpectedSyntax, UnknownProperty
from minicss.model import Property, PropertyName, Rule, Sheet
from minicss.parser import Parser, parse, parse_file
from minicss.properties import KNOWN_PROPERTIES, match_property

__all__ = [
    "__version__",
    # config
    "MinicssConfig",
    # model
    "PropertyName",
    "Property",
    "Rule",
    "Sheet",
    # errors
    "ParseError",
    "InvalidIdentifier",
    "UnexpectedSyntax",
    "UnknownProperty",
    # diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "Location",
    "diagnose",
    "locate",
    # parsing
    "KNOWN_PROPERTIES",
    "match_property",
    "Parser",
    "parse",
    "parse_file",
]
