"""Unit tests for provider selection and container wiring."""

import pytest
from dishka import make_async_container

from agora.domain.content import CommentFormatter
from agora.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from agora.util.error import ConfigurationError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_selects_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_selects_mock_implementation(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_rejects_unknown_component(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"storage"})


class TestCommentFormatterProvider:
    """Tests for the formatter built from settings."""

    @pytest.mark.asyncio
    async def test_unknown_processor_rejected(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("COMMENTS__CONTENT_PROCESSORS", '["emoji"]')
        container = make_async_container(ProdConfigProvider())

        # Act & Assert
        with pytest.raises(ConfigurationError):
            await container.get(CommentFormatter)
        await container.close()

    @pytest.mark.asyncio
    async def test_configured_container_tag(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("COMMENTS__CONTAINER_TAG", "section")
        container = make_async_container(ProdConfigProvider())

        # Act
        formatter = await container.get(CommentFormatter)
        await container.close()

        # Assert
        assert formatter.format("hi") == "<section><p>hi</p></section>"
