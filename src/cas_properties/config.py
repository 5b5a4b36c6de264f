"""Search and presentation constants plus the catalog configuration loader.

The catalog configuration is a small YAML file naming the metadata
documents that make up the property catalog:

    metadata:
      - metadata/cas-configuration-metadata.json
      - metadata/extra-properties.yaml

Relative paths are resolved against the directory holding the YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

from cas_properties.core.errors import ConfigError

# ============================================================================
# SEARCH DEFAULTS
# ============================================================================

# Pattern used when the caller gives no name: matches every property
DEFAULT_NAME_PATTERN = ".+"

DEFAULT_CONFIG_PATH = Path("config/catalog.yaml")


# ============================================================================
# PRESENTATION
# ============================================================================

# Width of the divider printed after every result entry
SEP_LINE_LENGTH = 70

# Shown in detail mode when a property has no default value
BLANK_DEFAULT_VALUE = "[blank]"

NO_RESULTS_MESSAGE = "Could not find any results matching the criteria"


# ============================================================================
# CATALOG CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class CatalogConfig:
    """Resolved catalog configuration.

    Attributes:
        config_path: The YAML file the configuration was read from.
        metadata_paths: Metadata documents, in the order they are read.
    """

    config_path: Path
    metadata_paths: List[Path] = field(default_factory=list)


def load_catalog_config(config_path: Path) -> CatalogConfig:
    """Load the catalog configuration YAML.

    Args:
        config_path: Path to the YAML file.

    Returns:
        CatalogConfig with absolute metadata paths.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or its
            ``metadata`` entry is not a list of paths.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Catalog config not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read catalog config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Catalog config must be a mapping: {config_path}")

    entries = data.get("metadata", []) or []
    if not isinstance(entries, list):
        raise ConfigError(f"'metadata' must be a list of paths in {config_path}")

    base_dir = config_path.resolve().parent
    metadata_paths: List[Path] = []
    for item in entries:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"Invalid metadata entry {item!r} in {config_path}")
        path = Path(item)
        metadata_paths.append(path if path.is_absolute() else (base_dir / path).resolve())

    return CatalogConfig(config_path=config_path, metadata_paths=metadata_paths)
