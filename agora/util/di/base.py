"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory implementations
Component = Literal["persistence", "commentables", "notifications"]


class ProviderBase(Provider):
    """Provider carrying the metadata get_provider selects on.

    Attributes:
        __mock_component__: Component a base provider stands for, None for
            concrete providers
        __is_mock__: Set on the in-memory implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
