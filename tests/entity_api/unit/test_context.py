"""Unit tests for EntityContext."""

from unittest.mock import MagicMock

import pytest

from entity_api.context import ContextConfig, EntityContext
from entity_api.entities import Node, User
from entity_api.null_field_provider import NullFieldProvider
from entity_api.registry import EntityInfoRegistry
from entity_api.types import EntityInfo, EntityMalformedError


@pytest.mark.unit
class TestEntityContext:
    """Tests for EntityContext."""

    def test_defaults(self, registry: EntityInfoRegistry) -> None:
        """Test a context without optional collaborators gets defaults."""
        context = EntityContext(registry=registry)

        assert isinstance(context.fields, NullFieldProvider)
        assert context.config == ContextConfig()

    def test_controller_lookup(self, context: EntityContext, mock_controller: MagicMock) -> None:
        """Test controllers are resolved by entity type."""
        assert context.controller("node") is mock_controller

    def test_unknown_controller_raises(self, registry: EntityInfoRegistry) -> None:
        """Test a type without controller is reported as malformed."""
        context = EntityContext(registry=registry)

        with pytest.raises(EntityMalformedError, match="'node'"):
            context.controller("node")

    def test_register_controller(self, registry: EntityInfoRegistry) -> None:
        """Test controllers can be registered after construction."""
        context = EntityContext(registry=registry)
        controller = MagicMock()

        context.register_controller("user", controller)

        assert context.controller("user") is controller

    def test_create_binds_entity(self, context: EntityContext) -> None:
        """Test create instantiates the registered class bound to the context."""
        node = context.create("node", {"type": "article", "title": "Hello"})

        assert isinstance(node, Node)
        assert node.context is context
        assert node.is_new() is True
        assert node.bundle() == "article"

    def test_create_without_values(self, context: EntityContext) -> None:
        """Test create accepts no initial values for types without required properties."""
        user = context.create("user")

        assert isinstance(user, User)
        assert user.is_new() is True

    def test_create_without_entity_class_raises(self) -> None:
        """Test create fails for metadata without entity class."""
        registry = EntityInfoRegistry([EntityInfo(entity_type="widget", id_key="id")])
        context = EntityContext(registry=registry)

        with pytest.raises(EntityMalformedError, match="no entity class"):
            context.create("widget", {})

    def test_load(self, context: EntityContext, mock_controller: MagicMock) -> None:
        """Test load delegates to the controller with a list of ids."""
        node = Node(nid=1, type="page", _context=context)
        mock_controller.load.return_value = {1: node}

        result = context.load("node", (1, 2))

        mock_controller.load.assert_called_once_with([1, 2])
        assert result == {1: node}

    def test_load_no_ids(self, context: EntityContext, mock_controller: MagicMock) -> None:
        """Test loading nothing does not reach the controller."""
        assert context.load("node", []) == {}
        mock_controller.load.assert_not_called()

    def test_load_one(self, context: EntityContext, mock_controller: MagicMock) -> None:
        """Test load_one returns the entity or None."""
        node = Node(nid=1, type="page", _context=context)
        mock_controller.load.return_value = {1: node}

        assert context.load_one("node", 1) is node

        mock_controller.load.return_value = {}

        assert context.load_one("node", 2) is None

    def test_loaded_entities_are_bound(
        self, context: EntityContext, mock_controller: MagicMock
    ) -> None:
        """Test entities built by the controller come back bound and deletable."""
        mock_controller.load.return_value = {1: Node(nid=1, type="page")}

        node = context.load_one("node", 1)

        assert node is not None
        assert node.context is context
        assert node.is_new() is False

        node.delete()

        mock_controller.delete.assert_called_once_with([1])
