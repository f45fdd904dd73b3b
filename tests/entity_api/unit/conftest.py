"""Pytest fixtures for entity API tests."""

from unittest.mock import MagicMock

import pytest

from entity_api.context import EntityContext
from entity_api.entities import core_entity_info
from entity_api.registry import EntityInfoRegistry
from entity_api.types import SaveStatus


@pytest.fixture
def registry() -> EntityInfoRegistry:
    """Create a registry holding the core entity kinds."""
    return EntityInfoRegistry(core_entity_info())


@pytest.fixture
def mock_controller() -> MagicMock:
    """Create a mock storage controller."""
    mock = MagicMock()
    mock.save.return_value = SaveStatus.SAVED_NEW
    mock.delete.return_value = None
    mock.load.return_value = {}
    return mock


@pytest.fixture
def mock_fields() -> MagicMock:
    """Create a mock field provider that knows no fields."""
    mock = MagicMock()
    mock.get_items.return_value = None
    return mock


@pytest.fixture
def context(
    registry: EntityInfoRegistry, mock_controller: MagicMock, mock_fields: MagicMock
) -> EntityContext:
    """Create an entity context using the same mock controller for every core type."""
    return EntityContext(
        registry=registry,
        controllers={entity_type: mock_controller for entity_type in registry.entity_types()},
        fields=mock_fields,
    )
