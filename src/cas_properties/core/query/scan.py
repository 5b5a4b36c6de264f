from __future__ import annotations

from typing import Any, Dict, Iterable, Tuple, Union
import logging

from .catalog import MetadataRepository
from .patterns import matches
from .plan import MatchQuery
from .relaxed import expand


logger = logging.getLogger(__name__)

Catalog = Union[MetadataRepository, Dict[str, Any], Iterable[Tuple[str, Any]]]


def _iter_catalog(catalog: Catalog) -> Iterable[Tuple[str, Any]]:
    # Repositories and mappings expose items(); anything else is taken as pairs
    items = getattr(catalog, "items", None)
    return items() if callable(items) else catalog


def find(query: MatchQuery, catalog: Catalog) -> Dict[str, Any]:
    """Return catalog entries whose relaxed names satisfy `query`.

    Each key is expanded with `relaxed.expand`; the key is recorded on the
    first variant that matches. The result keeps catalog order, holds each
    key once (the first occurrence wins) and is never re-sorted.

    Errors raised while iterating the catalog propagate unchanged.
    """
    results: Dict[str, Any] = {}
    scanned = 0
    for key, metadata in _iter_catalog(catalog):
        scanned += 1
        if key in results:
            continue
        if any(matches(query.pattern, name, query.strict) for name in expand(key)):
            results[key] = metadata
    logger.debug(
        "Pattern %r (strict=%s) matched %d of %d properties",
        query.pattern.text,
        query.strict,
        len(results),
        scanned,
    )
    return results


def find_by_property(name: str, catalog: Catalog) -> Dict[str, Any]:
    """Non-strict search for `name`; shorthand for `find`."""
    return find(MatchQuery.build(name, strict=False), catalog)
