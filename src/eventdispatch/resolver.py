"""
Callable Resolver

Turns a registered callback into a call. Method targets may need an object
first: it comes from the configured container handler when there is one,
otherwise classes are built directly, provided their constructor needs no
arguments. The caller's params always go to the method, never to the
constructor.
"""

import inspect
import logging
import pkgutil
import weakref
from typing import Any, List, Optional

from .config import DispatcherConfig, get_config
from .container import ContainerHandler, make_container_handler
from .errors import InvalidCallbackError, UncallableStaticInvocationError, UnresolvableClassError
from .targets import FunctionTarget, MethodTarget, Target, normalize_target

logger = logging.getLogger(__name__)

_CONSTRUCTOR_PARAM_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


# Classes are held weakly so ones created at runtime can still be collected
_constructor_params: "weakref.WeakKeyDictionary[type, int]" = weakref.WeakKeyDictionary()


def required_constructor_params(cls: type) -> int:
    """Number of constructor parameters of ``cls`` that have no default, computed once per class"""
    cached = _constructor_params.get(cls)
    if cached is not None:
        return cached

    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature
        required = 0
    else:
        required = sum(
            1 for param in signature.parameters.values()
            if param.kind in _CONSTRUCTOR_PARAM_KINDS and param.default is inspect.Parameter.empty
        )

    _constructor_params[cls] = required
    return required


def resolve_class(identifier: Any) -> type:
    """Return the class named by ``identifier`` (a class or its import path)"""
    if inspect.isclass(identifier):
        return identifier

    try:
        resolved = pkgutil.resolve_name(identifier)
    except (ValueError, ImportError, AttributeError) as e:
        raise UnresolvableClassError(identifier, str(e)) from e

    if not inspect.isclass(resolved):
        raise UnresolvableClassError(identifier, f"resolves to {type(resolved).__name__}, not a class")

    return resolved


class CallableResolver:
    """
    Executes targets, building target objects when needed.

    Args:
        container_handler: Optional provider (lookup container, factory
            callable or ``ContainerHandler``) consulted for method targets
        config: Dispatcher configuration, the global one when omitted
    """

    def __init__(self, container_handler: Any = None, config: Optional[DispatcherConfig] = None):
        self.config = config or get_config()
        self.container_handler: Optional[ContainerHandler] = make_container_handler(container_handler)

    def set_container_handler(self, container_handler: Any) -> None:
        """Install or replace the provider; ``None`` removes it"""
        self.container_handler = make_container_handler(container_handler)
        logger.debug("Container handler set to %r", self.container_handler)

    def execute(self, callback: Any, params: Optional[List[Any]] = None) -> Any:
        """
        Execute a callback with positional params.

        Raises:
            InvalidCallbackError: the callback is not invocable
            UnresolvableClassError: a class identifier names no class
            UncallableStaticInvocationError: a class needs constructor arguments
        """
        if params is None:
            params = []
        return self.invoke_callable(normalize_target(callback), params)

    def invoke_callable(self, target: Target, params: List[Any]) -> Any:
        if isinstance(target, FunctionTarget):
            return target.func(*params)

        instance = self.resolve_instance(target, params)
        method = getattr(instance, target.method, None)

        if not callable(method):
            raise InvalidCallbackError(
                f"'{target.owner_name}' has no callable method '{target.method}'",
                callback=target
            )

        return method(*params)

    def resolve_instance(self, target: MethodTarget, params: List[Any]) -> Any:
        """Get the object a method target is called on"""
        owner = target.owner

        if self.container_handler is not None and (target.is_identifier or not self.config.is_internal(owner)):
            resolved = self.container_handler.resolve(owner, params)
            if resolved is not None:
                owner = resolved

        if isinstance(owner, str):
            owner = resolve_class(owner)

        if isinstance(owner, type):
            required = required_constructor_params(owner)
            if required > 0:
                raise UncallableStaticInvocationError(owner.__qualname__, target.method, required)

            logger.debug("Instantiating %s for method '%s'", owner.__qualname__, target.method)
            owner = owner()

        return owner


# Export main components
__all__ = ["CallableResolver", "required_constructor_params", "resolve_class"]
