"""Shared pytest fixtures for property catalog and search tests."""

import json
import logging
from pathlib import Path
from typing import Dict, List

import pytest

from cas_properties.core.query import MetadataRepository, PropertyMetadata


REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler/level changes made by the CLI's setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


def write_metadata(path: Path, properties: List[Dict]) -> Path:
    """Write a Spring-style metadata document with the given properties."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"groups": [], "properties": properties, "hints": []}), encoding="utf-8")
    return path


@pytest.fixture
def accept_users() -> PropertyMetadata:
    return PropertyMetadata(
        name="cas.authn.accept.users",
        type="java.lang.String",
        default_value="casuser::Mellon",
        short_description="Accepted users for authentication.",
        description="Accepted users for authentication.   Entries are\n separated by a comma.",
    )


@pytest.fixture
def server_name() -> PropertyMetadata:
    return PropertyMetadata(
        name="cas.server.name",
        type="java.lang.String",
        default_value="https://cas.example.org:8443",
        short_description="The CAS Server name.",
        description="The CAS Server name.",
    )


@pytest.fixture
def accept_name() -> PropertyMetadata:
    return PropertyMetadata(
        name="cas.authn.accept.name",
        type="java.lang.String",
        description="Name of the authentication handler.",
        short_description="Name of the authentication handler.",
    )


@pytest.fixture
def repository(accept_users, server_name, accept_name) -> MetadataRepository:
    """Three-entry catalog; the first and last keys contain 'accept'."""
    return MetadataRepository([accept_users, server_name, accept_name])


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    """Metadata document on disk mirroring the `repository` fixture plus a deprecated entry."""
    return write_metadata(
        tmp_path / "metadata" / "cas-configuration-metadata.json",
        [
            {
                "name": "cas.authn.accept.users",
                "type": "java.lang.String",
                "description": "Accepted users for authentication. Entries are separated by a comma.",
                "defaultValue": "casuser::Mellon",
            },
            {
                "name": "cas.server.name",
                "type": "java.lang.String",
                "description": "The CAS Server name.",
                "defaultValue": "https://cas.example.org:8443",
            },
            {
                "name": "cas.authn.accept.name",
                "type": "java.lang.String",
                "description": "Name of the authentication handler.",
            },
            {
                "name": "cas.tgc.name",
                "type": "java.lang.String",
                "description": "Name of the ticket-granting cookie.",
                "defaultValue": "TGC",
                "deprecation": {"level": "error", "replacement": "cas.tgc.cookie-name"},
            },
        ],
    )
