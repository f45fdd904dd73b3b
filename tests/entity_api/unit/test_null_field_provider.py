"""Unit tests for NullFieldProvider."""

from unittest.mock import MagicMock

import pytest

from entity_api.null_field_provider import NullFieldProvider


@pytest.mark.unit
class TestNullFieldProvider:
    """Tests for NullFieldProvider."""

    def test_get_items_returns_none(self) -> None:
        """Test every field lookup returns None."""
        provider = NullFieldProvider()
        entity = MagicMock()

        assert provider.get_items("node", entity, "field_body") is None
        assert provider.get_items("node", entity, "field_body", "en") is None
