from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
import json
import logging

import yaml

from cas_properties.core.errors import CatalogAccessError
from cas_properties.core.utils import extract_short_description, normalize_space, property_group
from .relaxed import is_valid_property_key


logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yml", ".yaml"}


@dataclass(frozen=True)
class PropertyMetadata:
    """Metadata of one configuration property.

    Attributes:
        name: Canonical dotted key.
        type: Type descriptor, e.g. "java.lang.String".
        default_value: Default as read from the document (scalar or list).
        short_description: First sentence of the description.
        description: Full description.
        deprecated: True when the property carries a deprecation.
        deprecation_level: "warning" or "error" when deprecated.
        deprecation_reason: Free text reason, if given.
        deprecation_replacement: Key that replaces this one, if given.
        source_type: Class the property is bound to, if given.
    """

    name: str
    type: Optional[str] = None
    default_value: Any = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    deprecated: bool = False
    deprecation_level: Optional[str] = None
    deprecation_reason: Optional[str] = None
    deprecation_replacement: Optional[str] = None
    source_type: Optional[str] = None

    @property
    def group(self) -> str:
        return property_group(self.name)


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _parse_property(item: Any, source: Path) -> PropertyMetadata:
    if not isinstance(item, dict):
        raise CatalogAccessError(f"Property entry must be a mapping in {source}: {item!r}", path=source)
    name = item.get("name")
    if not name:
        raise CatalogAccessError(f"Property entry without a name in {source}: {item!r}", path=source)

    description = _optional_text(item.get("description"))
    short_description = item.get("shortDescription")
    if short_description is None:
        short_description = extract_short_description(description)

    deprecation = item.get("deprecation")
    if deprecation is not None and not isinstance(deprecation, dict):
        raise CatalogAccessError(
            f"'deprecation' of {name} must be a mapping in {source}", path=source
        )
    deprecation = deprecation or {}
    deprecated = item.get("deprecated") is True or item.get("deprecation") is not None

    return PropertyMetadata(
        name=str(name),
        type=_optional_text(item.get("type")),
        default_value=item.get("defaultValue"),
        short_description=normalize_space(_optional_text(short_description)),
        description=description,
        deprecated=deprecated,
        deprecation_level=_optional_text(deprecation.get("level", "warning" if deprecated else None)),
        deprecation_reason=_optional_text(deprecation.get("reason")),
        deprecation_replacement=_optional_text(deprecation.get("replacement")),
        source_type=_optional_text(item.get("sourceType")),
    )


def read_metadata_document(path: Path) -> List[PropertyMetadata]:
    """Read the ``properties`` of one metadata document, in document order.

    JSON is the Spring Boot ``spring-configuration-metadata.json`` layout;
    ``.yml``/``.yaml`` files hold the same structure as YAML.

    Raises:
        CatalogAccessError: If the file is missing, unreadable, malformed, or
            has entries that are not property definitions.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogAccessError(f"Metadata document not found: {path}", path=path)

    try:
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in _YAML_SUFFIXES:
                data = yaml.safe_load(f) or {}
            else:
                data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogAccessError(f"Failed to read metadata document {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise CatalogAccessError(f"Metadata document must be a mapping: {path}", path=path)
    entries = data.get("properties", []) or []
    if not isinstance(entries, list):
        raise CatalogAccessError(f"'properties' must be a list in {path}", path=path)

    return [_parse_property(item, path) for item in entries]


class MetadataRepository:
    """Ordered, read-only catalog of configuration properties."""

    def __init__(self, properties: Iterable[PropertyMetadata] = ()) -> None:
        self._properties: Dict[str, PropertyMetadata] = {}
        for prop in properties:
            if prop.name in self._properties:
                logger.warning("Ignoring duplicate definition of property %s", prop.name)
                continue
            if not is_valid_property_key(prop.name):
                logger.warning("Property key is not a dotted identifier: %r", prop.name)
            self._properties[prop.name] = prop

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> "MetadataRepository":
        """Build a repository from metadata documents read in the given order.

        The first definition of a key wins.
        """
        properties: List[PropertyMetadata] = []
        for path in paths:
            loaded = read_metadata_document(Path(path))
            logger.debug("Loaded %d properties from %s", len(loaded), path)
            properties.extend(loaded)
        return cls(properties)

    def all_properties(self) -> Mapping[str, PropertyMetadata]:
        """Return a copy of the key -> metadata mapping in catalog order."""
        return dict(self._properties)

    def items(self) -> Iterator[Tuple[str, PropertyMetadata]]:
        return iter(self._properties.items())

    def get(self, key: str) -> Optional[PropertyMetadata]:
        return self._properties.get(key)

    def __iter__(self) -> Iterator[Tuple[str, PropertyMetadata]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties
