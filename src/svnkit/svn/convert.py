"""Validated conversion of normalized report values.

Every helper takes whatever the XML normalizer produced (``None``, a string,
a node dict, or a list of those) and returns a value of the requested type,
falling back to an explicit default instead of letting ``None`` leak out.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from svnkit.svn.xml_tree import TEXT_KEY

E = TypeVar("E", bound=Enum)


def as_list(value: Any) -> List[Any]:
    """Return *value* as a list: ``None`` → ``[]``, scalar → ``[value]``."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def as_node(value: Any) -> Dict[str, Any]:
    """Return *value* as a node dict, taking the first item of a list."""
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        return value
    return {}


def text_of(value: Any) -> Optional[str]:
    """Return the text carried by *value*, or None when it has none."""
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, dict):
        value = value.get(TEXT_KEY)
    if value is None:
        return None
    return str(value)


def as_str(value: Any, default: str = "") -> str:
    text = text_of(value)
    return default if text is None else text


def as_optional_str(value: Any) -> Optional[str]:
    text = text_of(value)
    return text if text else None


def as_optional_int(value: Any) -> Optional[int]:
    """Parse an integer, or None on missing or non-numeric input."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = text_of(value)
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def as_int(value: Any, default: int = 0) -> int:
    parsed = as_optional_int(value)
    return default if parsed is None else parsed


def as_revision(value: Any) -> int:
    """Revisions are non-negative; anything else becomes 0."""
    rev = as_int(value, 0)
    return rev if rev >= 0 else 0


def as_enum(
    value: Any,
    enum_cls: Type[E],
    default: E,
    aliases: Optional[Mapping[str, E]] = None,
) -> E:
    """Map *value* onto *enum_cls*, falling back to *default*.

    *value* is matched against the enum values first, then *aliases*
    (case-insensitively). Unknown values are normalized, never rejected.
    """
    text = text_of(value)
    if text is None:
        return default
    # A whitespace-only value stays as is: " " is a real status symbol
    text = text.strip() or text
    try:
        return enum_cls(text)
    except ValueError:
        pass
    if aliases:
        alias = aliases.get(text.lower())
        if alias is not None:
            return alias
    return default


def first_present(node: Mapping[str, Any], *keys: str) -> Optional[str]:
    """Return the first non-empty text among *keys* of *node*, probed in order."""
    for key in keys:
        text = text_of(node.get(key))
        if text is not None and text.strip():
            return text
    return None
