"""
Dependency Injection Integration

🔧 Pluggable Object Providers:
The dispatcher does not ship a container. It talks to whatever the host
application installs through one of two shapes:

- lookup style: an object with ``has(identifier)`` and ``get(identifier)``
- factory style: a callable ``provider(identifier, params)``

Both are wrapped in a ``ContainerHandler`` so the resolution order is fixed
up front instead of being guessed on every call.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .errors import ContainerHandlerError

logger = logging.getLogger(__name__)


class ContainerHandler(ABC):
    """Adapter between the dispatcher and an external object provider"""

    def __init__(self, provider: Any):
        self.provider = provider

    @abstractmethod
    def resolve(self, identifier: Any, params: List[Any]) -> Optional[Any]:
        """
        Obtain an instance for ``identifier``.

        Returns:
            The instance, or ``None`` when the provider declines
        """
        pass


class LookupContainerHandler(ContainerHandler):
    """
    Handler for containers exposing ``has``/``get``.

    When the container does not know the identifier and is itself callable,
    it gets a second chance as a factory.
    """

    def resolve(self, identifier: Any, params: List[Any]) -> Optional[Any]:
        if self.provider.has(identifier):
            logger.debug("Container lookup resolved %r", identifier)
            return self.provider.get(identifier)

        if callable(self.provider):
            logger.debug("Container factory called for %r", identifier)
            return self.provider(identifier, params)

        return None


class FactoryContainerHandler(ContainerHandler):
    """Handler for plain ``provider(identifier, params)`` callables"""

    def resolve(self, identifier: Any, params: List[Any]) -> Optional[Any]:
        logger.debug("Container factory called for %r", identifier)
        return self.provider(identifier, params)


def _is_lookup_container(provider: Any) -> bool:
    return callable(getattr(provider, "has", None)) and callable(getattr(provider, "get", None))


def make_container_handler(provider: Any) -> Optional[ContainerHandler]:
    """
    Wrap a provider in the matching handler.

    ``None`` means "no provider". An existing ``ContainerHandler`` is used as
    is. Anything that is neither a lookup container nor callable raises
    ``ContainerHandlerError``.
    """
    if provider is None:
        return None

    if isinstance(provider, ContainerHandler):
        return provider

    if _is_lookup_container(provider):
        return LookupContainerHandler(provider)

    if callable(provider):
        return FactoryContainerHandler(provider)

    raise ContainerHandlerError(
        f"Container handler must expose has()/get() or be callable, got {type(provider).__name__}"
    )


def resolve_container_class(
    container_handler: Any,
    identifier: Any,
    params: List[Any]
) -> Optional[Any]:
    """
    Ask a provider for an instance of ``identifier``.

    ``container_handler`` may be a raw provider or an already built handler.
    """
    handler = make_container_handler(container_handler)
    if handler is None:
        return None
    return handler.resolve(identifier, params)


# Export main components
__all__ = [
    "ContainerHandler", "LookupContainerHandler", "FactoryContainerHandler",
    "make_container_handler", "resolve_container_class"
]
