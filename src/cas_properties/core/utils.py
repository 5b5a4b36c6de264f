"""Text helpers shared by the catalog reader and the result presenter."""

from __future__ import annotations

import re
from typing import Any, Optional

_SENTENCE_END_RE = re.compile(r"\.(?=\s|$)")


def normalize_space(text: Optional[str]) -> Optional[str]:
    """Trim and collapse every run of whitespace to a single space.

    Returns None unchanged so callers can tell "absent" from "empty".

    Examples:
        >>> normalize_space("  Accept   users\\n  list ")
        'Accept users list'
    """
    if text is None:
        return None
    return " ".join(str(text).split())


def property_group(key: str) -> str:
    """Return the dotted key with its last segment removed.

    A key without a dot is its own group.

    Examples:
        >>> property_group("cas.authn.accept.users")
        'cas.authn.accept'
        >>> property_group("server")
        'server'
    """
    head, sep, _ = key.rpartition(".")
    return head if sep else key


def extract_short_description(description: Optional[str]) -> Optional[str]:
    """First sentence of a description, or its first line when it has no period.

    Examples:
        >>> extract_short_description("Users to accept. Format is user::password.")
        'Users to accept.'
        >>> extract_short_description("Line one\\nline two")
        'Line one'
    """
    if description is None:
        return None
    text = str(description).strip()
    match = _SENTENCE_END_RE.search(text)
    if match:
        return normalize_space(text[: match.end()])
    return text.splitlines()[0].strip() if text else text


def format_value(value: Any) -> Optional[str]:
    """Render a metadata default value as text.

    JSON booleans stay lower case and lists are comma joined, the way the
    values read in the metadata documents.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if v is None else str(format_value(v)) for v in value)
    return str(value)
