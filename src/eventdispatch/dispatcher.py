"""
Event Dispatcher - Central Event Coordination

🎯 Events with Filters:
Events are names bound to a function or a class method. Filters hooked on
an event run before and after it and may change the parameters going in
and the output coming out.

Flow of ``run(name, params)``:
1. BEFORE filters get ``(params, output)``
2. The target is resolved and called with ``params``
3. AFTER filters get ``(params, output)``
4. ``output.value`` is returned

Example:
    dispatcher = Dispatcher()
    dispatcher.set("greet", lambda name: f"hello {name}")
    dispatcher.hook("greet", FilterPhase.AFTER, lambda params, output: setattr(output, "value", output.value + "!"))
    dispatcher.run("greet", ["Ada"])  # "hello Ada!"
"""

import logging
import warnings
from typing import Any, Callable, Iterable, List, Optional

from .config import DispatcherConfig, get_config
from .container import ContainerHandler
from .errors import UnknownEventError
from .filters import OutputSlot, run_filters
from .registry import EventRegistry, FilterPhase, PhaseKey
from .resolver import CallableResolver
from .targets import Target, normalize_target, parse_string_class_and_method

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Maps event names to callbacks and runs them through their filters.

    The registry, container handler and configuration are injected, so
    several dispatchers can live side by side; an application normally
    keeps a single one.

    Args:
        registry: Event storage, a fresh ``EventRegistry`` when omitted
        container_handler: Optional dependency provider for method targets
        config: Dispatcher configuration, the global one when omitted
    """

    FILTER_BEFORE = FilterPhase.BEFORE
    FILTER_AFTER = FilterPhase.AFTER

    def __init__(
        self,
        registry: Optional[EventRegistry] = None,
        container_handler: Any = None,
        config: Optional[DispatcherConfig] = None
    ):
        self.config = config or get_config()
        self.registry = registry or EventRegistry(warn_on_invalid_phase=self.config.warn_on_invalid_phase)
        self.resolver = CallableResolver(container_handler, self.config)

    @property
    def container_handler(self) -> Optional[ContainerHandler]:
        return self.resolver.container_handler

    def set_container_handler(self, container_handler: Any) -> None:
        """
        Set the dependency injection provider.

        Accepts an object with ``has``/``get`` or a callable
        ``(identifier, params)``. Replaces any previous provider.
        """
        self.resolver.set_container_handler(container_handler)

    # ---- Dispatching ----

    def run(self, name: str, params: Optional[List[Any]] = None) -> Any:
        """
        Dispatch an event.

        Args:
            name: Event name
            params: Callback parameters, shared with the filters

        Returns:
            Output of the callback after the AFTER filters ran

        Raises:
            UnknownEventError: no callback is set for ``name``
        """
        if params is None:
            params = []

        logger.debug("Dispatching event '%s'", name)
        output = OutputSlot()

        self._run_pre_filters(name, params, output)
        output.value = self._run_event(name, params)
        self._run_post_filters(name, params, output)

        return output.value

    def _run_pre_filters(self, name: str, params: List[Any], output: OutputSlot) -> None:
        filters = self.registry.filters(name, FilterPhase.BEFORE)
        if filters:
            self.filter(filters, params, output)

    def _run_event(self, name: str, params: List[Any]) -> Any:
        target = self._get_target(name)
        return self.resolver.invoke_callable(target, params)

    def _run_post_filters(self, name: str, params: List[Any], output: OutputSlot) -> None:
        filters = self.registry.filters(name, FilterPhase.AFTER)
        if filters:
            self.filter(filters, params, output)

    def _get_target(self, name: str) -> Target:
        target = self.registry.resolved(name)
        if target is not None:
            return target

        callback = self.registry.get(name)
        if callback is None:
            raise UnknownEventError(name)

        target = normalize_target(callback)
        self.registry.remember(name, target)
        return target

    def filter(self, filters: Iterable[Callable], params: List[Any], output: OutputSlot) -> None:
        """
        Execute a chain of filters.

        Raises:
            InvalidFilterEntryError: ``filters`` contains a non-callable entry
        """
        run_filters(filters, params, output)

    def execute(self, callback: Any, params: Optional[List[Any]] = None) -> Any:
        """
        Execute a callback without registering it.

        ``callback`` can be a callable, a ``(class_or_instance, method)``
        pair, ``"Class::method"`` / ``"Class->method"`` or the import path of
        a function.
        """
        return self.resolver.execute(callback, params)

    def invoke_callable(self, callback: Any, params: Optional[List[Any]] = None) -> Any:
        """Invoke a function or a ``(class_or_instance, method)`` pair"""
        return self.execute(callback, params)

    def call_function(self, func: Callable, params: Optional[List[Any]] = None) -> Any:
        warnings.warn("call_function() is deprecated, use invoke_callable()", DeprecationWarning, stacklevel=2)
        return self.invoke_callable(func, params)

    def invoke_method(self, func: Any, params: Optional[List[Any]] = None) -> Any:
        warnings.warn("invoke_method() is deprecated, use invoke_callable()", DeprecationWarning, stacklevel=2)
        return self.invoke_callable(func, params)

    @staticmethod
    def parse_string_class_and_method(class_and_method: str):
        return parse_string_class_and_method(class_and_method)

    # ---- Registration ----

    def set(self, name: str, callback: Any) -> 'Dispatcher':
        """Assign a callback to an event"""
        self.registry.set(name, callback)
        return self

    def get(self, name: str) -> Optional[Any]:
        """Get the callback assigned to an event, ``None`` when there is none"""
        return self.registry.get(name)

    def has(self, name: str) -> bool:
        return self.registry.has(name)

    def clear(self, name: Optional[str] = None) -> None:
        """Clear an event and its filters. Without a name every event is removed."""
        self.registry.clear(name)

    def hook(self, name: str, phase: PhaseKey, callback: Callable) -> 'Dispatcher':
        """
        Hook a filter to an event.

        ``phase`` is ``"before"`` or ``"after"`` (or the ``FilterPhase``
        members). Other values trigger an ``InvalidFilterPhaseWarning`` and
        the filter is stored under that value anyway.
        """
        self.registry.hook(name, phase, callback, stacklevel=3)
        return self

    def reset(self) -> 'Dispatcher':
        """Remove all events and filters"""
        self.registry.reset()
        return self


# Export main components
__all__ = ["Dispatcher"]
