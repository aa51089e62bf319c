"""Dependency injection wiring.

Providers come in two flavours:

- Concrete providers (config, domain, application) are used as they are.
- Component providers (persistence, commentables, notifications) are
  abstract bases with one production and one mock subclass each. Tests
  choose per component which of the two to install.
"""

from typing import Type

from agora.util.di.application import ProdApplicationProvider
from agora.util.di.base import Component, ProviderBase
from agora.util.di.core import ProdConfigProvider
from agora.util.di.domain import ProdDomainProvider
from agora.util.di.infrastructure import (
    CommentablesProvider,
    NotificationsProvider,
    PersistenceProvider,
    ProdCommentablesProvider,
    ProdNotificationsProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    CommentablesProvider,
    NotificationsProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock implementation of a component

    Returns:
        The base itself for concrete providers, otherwise the matching
        production or mock subclass

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = getattr(base, "__mock_component__", None) or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "PROVIDERS",
    "CommentablesProvider",
    "Component",
    "NotificationsProvider",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdCommentablesProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdNotificationsProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
