from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional
import logging

from cas_properties.config import BLANK_DEFAULT_VALUE, NO_RESULTS_MESSAGE, SEP_LINE_LENGTH
from cas_properties.core.utils import format_value, normalize_space, property_group


logger = logging.getLogger(__name__)

DIVIDER = "-" * SEP_LINE_LENGTH


def _text(value: Optional[str]) -> str:
    return "" if value is None else value


def format_summary(results: Mapping[str, Any]) -> List[str]:
    """One ``key=default`` line per entry plus its short description, if any."""
    lines: List[str] = []
    for key, meta in results.items():
        lines.append(f"{key}={_text(format_value(meta.default_value))}")
        summary = normalize_space(meta.short_description)
        if summary:
            lines.append(summary)
        lines.append(DIVIDER)
    return lines


def format_details(results: Mapping[str, Any]) -> List[str]:
    """Multi-field block per entry, each followed by the divider."""
    lines: List[str] = []
    for key, meta in results.items():
        default_value = format_value(meta.default_value)
        lines.extend(
            [
                f"Property: {key}",
                f"Group: {property_group(key)}",
                f"Default Value: {BLANK_DEFAULT_VALUE if default_value is None else default_value}",
                f"Type: {_text(meta.type)}",
                f"Summary: {_text(normalize_space(meta.short_description))}",
                f"Description: {_text(normalize_space(meta.description))}",
                f"Deprecated: {'Yes' if meta.deprecated else 'No'}",
                DIVIDER,
            ]
        )
    return lines


def render_results(
    results: Mapping[str, Any],
    *,
    summary: bool = False,
    emit: Optional[Callable[[str], None]] = None,
) -> int:
    """Send formatted results line by line to `emit` (logger.info by default).

    Returns the number of rendered entries; an empty result emits a single
    "no results" line instead.
    """
    emit = emit or logger.info
    if not results:
        emit(NO_RESULTS_MESSAGE)
        return 0
    for line in format_summary(results) if summary else format_details(results):
        emit(line)
    return len(results)
