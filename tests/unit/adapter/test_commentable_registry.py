"""Unit tests for the host resource registry."""

from uuid import uuid4

import pytest

from agora.adapter.commentable import CommentableRegistry, RegistryCommentableRepository
from agora.adapter.error import RegistryError
from agora.domain.value import CommentableRef
from tests.conftest import make_resource


def registry_with(*resources) -> CommentableRegistry:
    """Registry with one dict-backed loader per resource type."""
    registry = CommentableRegistry()
    by_type: dict[str, dict] = {}
    for resource in resources:
        by_type.setdefault(resource.resource_type, {})[resource.id] = resource

    for resource_type, store in by_type.items():

        async def load(resource_id, store=store):
            return store.get(resource_id)

        registry.register(resource_type, load)
    return registry


class TestCommentableRegistry:
    """Tests for CommentableRegistry."""

    def test_register_enables_type(self):
        registry = registry_with(make_resource("proposal"))

        assert registry.supports("proposal")
        assert not registry.supports("debate")

    def test_comment_type_reserved(self):
        registry = CommentableRegistry()

        async def load(resource_id):
            return None

        with pytest.raises(RegistryError):
            registry.register("comment", load)

    def test_duplicate_registration_rejected(self):
        registry = registry_with(make_resource("proposal"))

        async def load(resource_id):
            return None

        with pytest.raises(RegistryError):
            registry.register("proposal", load)

    def test_resource_types_sorted(self):
        registry = registry_with(make_resource("proposal"), make_resource("debate"))

        assert registry.resource_types == ["debate", "proposal"]

    @pytest.mark.asyncio
    async def test_load_unknown_type_returns_none(self):
        registry = CommentableRegistry()

        assert await registry.load("proposal", uuid4()) is None


class TestRegistryCommentableRepository:
    """Tests for RegistryCommentableRepository."""

    @pytest.mark.asyncio
    async def test_finds_registered_resource(self):
        # Arrange
        resource = make_resource("proposal")
        repository = RegistryCommentableRepository(registry_with(resource))

        # Act
        found = await repository.find_by_ref(resource.commentable_ref)

        # Assert
        assert found == resource

    @pytest.mark.asyncio
    async def test_missing_resource_returns_none(self):
        # Arrange
        repository = RegistryCommentableRepository(
            registry_with(make_resource("proposal"))
        )

        # Act
        found = await repository.find_by_ref(
            CommentableRef.resource("proposal", uuid4())
        )

        # Assert
        assert found is None

    def test_supports_follows_registry(self):
        repository = RegistryCommentableRepository(
            registry_with(make_resource("debate"))
        )

        assert repository.supports("debate")
        assert not repository.supports("proposal")
