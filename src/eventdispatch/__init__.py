"""
eventdispatch - In-process Event Dispatcher

🚀 Events, Filters and Pluggable Object Providers:
Bind names to functions or class methods, wrap them with BEFORE/AFTER
filters and let an external DI container supply the objects methods are
called on.

Quick Start:
    from eventdispatch import Dispatcher, FilterPhase

    dispatcher = Dispatcher()
    dispatcher.set("greet", lambda name: "hello " + name)

    def shout(params, output):
        params[0] = params[0].upper()

    dispatcher.hook("greet", FilterPhase.BEFORE, shout)
    dispatcher.run("greet", ["ada"])  # "hello ADA"
"""

from .config import DispatcherConfig, LoggingConfig, configure_logging, get_config, set_config
from .container import (
    ContainerHandler, FactoryContainerHandler, LookupContainerHandler,
    make_container_handler, resolve_container_class
)
from .dispatcher import Dispatcher
from .errors import (
    ContainerHandlerError, DispatcherError, InvalidCallbackError, InvalidFilterEntryError,
    InvalidFilterPhaseWarning, UncallableStaticInvocationError, UnknownEventError,
    UnresolvableClassError
)
from .filters import OutputSlot, run_filters
from .registry import EventRegistry, FilterPhase
from .resolver import CallableResolver
from .targets import FunctionTarget, MethodTarget, normalize_target, parse_string_class_and_method

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Dispatcher", "EventRegistry", "FilterPhase", "OutputSlot", "run_filters",

    # Targets and resolution
    "CallableResolver", "FunctionTarget", "MethodTarget",
    "normalize_target", "parse_string_class_and_method",

    # Dependency injection
    "ContainerHandler", "LookupContainerHandler", "FactoryContainerHandler",
    "make_container_handler", "resolve_container_class",

    # Configuration
    "DispatcherConfig", "LoggingConfig", "configure_logging", "get_config", "set_config",

    # Errors
    "DispatcherError", "UnknownEventError", "InvalidCallbackError", "InvalidFilterEntryError",
    "UncallableStaticInvocationError", "UnresolvableClassError", "ContainerHandlerError",
    "InvalidFilterPhaseWarning"
]
