"""Property matcher: map a declaration name onto a supported property."""
from __future__ import annotations

from minicss.errors import UnknownProperty
from minicss.model import Property, PropertyName

__all__ = ["KNOWN_PROPERTIES", "is_known_property", "match_property"]

_BY_NAME: dict[str, PropertyName] = {member.value: member for member in PropertyName}

KNOWN_PROPERTIES: tuple[str, ...] = tuple(_BY_NAME)


def is_known_property(name: str) -> bool:
    return name in _BY_NAME


def match_property(name: str, value: str) -> Property:
    """Build a Property for ``name`` (exact, case-sensitive) carrying ``value``.

    Raises UnknownProperty when ``name`` is not supported. The caller is
    responsible for reporting.
    """
    try:
        kind = _BY_NAME[name]
    except KeyError:
        raise UnknownProperty(name) from None
    return Property(name=kind, value=value)
