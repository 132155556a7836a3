"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable implementations (production vs test double)
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all Circle providers.

    A provider class with subclasses is a mockable component: each subclass
    is one implementation, told apart by ``__is_mock__``. A provider class
    without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: True for the test double of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
