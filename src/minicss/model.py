"""Stylesheet model: Property, Rule, and Sheet dataclasses."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PropertyName(StrEnum):
    """The closed set of supported property names."""

    COLOR = "color"
    BACKGROUND = "background"


@dataclass(frozen=True)
class Property:
    """One ``name: value;`` declaration. ``value`` is the raw source text."""

    name: PropertyName
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass(frozen=True)
class Rule:
    """A selector and its declarations, in source order (duplicates kept)."""

    selector: str
    properties: tuple[Property, ...] = ()

    def render(self) -> str:
        lines = [f"selector: {self.selector}\n"]
        lines.extend(f"  {prop}\n" for prop in self.properties)
        lines.append("\n")
        return "".join(lines)


@dataclass(frozen=True)
class Sheet:
    """All rules parsed from one input, in source order."""

    rules: tuple[Rule, ...] = ()

    @property
    def declaration_count(self) -> int:
        return sum(len(rule.properties) for rule in self.rules)

    def render(self) -> str:
        """Render the sheet as ``selector:`` lines with indented declarations."""
        return "".join(rule.render() for rule in self.rules)

    def __str__(self) -> str:
        return self.render()
