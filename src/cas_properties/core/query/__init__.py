"""Core query engine public API.

Exposes the functions used by the CLI layer. Implementations live in
sibling modules: relaxed-name expansion, pattern matching, query
construction, catalog loading, the search itself and result rendering.
"""

from .relaxed import expand, environment_variable_name, is_valid_property_key, to_hyphenated
from .patterns import PropertyPattern, compile_pattern, matches
from .plan import MatchQuery
from .catalog import MetadataRepository, PropertyMetadata, read_metadata_document
from .scan import find, find_by_property
from .present import format_details, format_summary, render_results

__all__ = [
    "expand",
    "environment_variable_name",
    "is_valid_property_key",
    "to_hyphenated",
    "PropertyPattern",
    "compile_pattern",
    "matches",
    "MatchQuery",
    "MetadataRepository",
    "PropertyMetadata",
    "read_metadata_document",
    "find",
    "find_by_property",
    "format_details",
    "format_summary",
    "render_results",
]
