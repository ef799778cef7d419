"""
Dispatcher Errors

Every failure raised by the dispatcher derives from ``DispatcherError``.
Failures raised by registered targets or filters are never wrapped and
propagate to the caller as-is.
"""

from typing import Any, Optional


class DispatcherError(Exception):
    """Base exception for dispatcher errors"""
    pass


class UnknownEventError(DispatcherError, LookupError):
    """Raised when ``run`` is called for a name without a registered target"""

    def __init__(self, name: str):
        super().__init__(f"Event '{name}' isn't found.")
        self.name = name


class InvalidCallbackError(DispatcherError, ValueError):
    """Raised when a target cannot be turned into something invocable"""

    def __init__(self, message: str = "Invalid callback specified.", callback: Any = None):
        super().__init__(message)
        self.callback = callback


class InvalidFilterEntryError(DispatcherError, TypeError):
    """Raised when a filter chain holds a non-callable entry"""

    def __init__(self, position: int, entry: Any = None):
        super().__init__(f"Invalid callable filters[{position}].")
        self.position = position
        self.entry = entry


class UncallableStaticInvocationError(DispatcherError, TypeError):
    """Raised when a class target needs constructor arguments nobody supplied"""

    def __init__(self, class_name: str, method: str, required: int):
        plural = "s" if required > 1 else ""
        super().__init__(
            f"Method '{class_name}::{method}' cannot be called statically. "
            f"{class_name}.__init__ requires {required} parameter{plural}"
        )
        self.class_name = class_name
        self.method = method
        self.required = required


class UnresolvableClassError(DispatcherError, LookupError):
    """Raised when a class identifier names no importable type"""

    def __init__(self, identifier: str, reason: Optional[str] = None):
        message = f"Class '{identifier}' could not be resolved"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.identifier = identifier


class ContainerHandlerError(DispatcherError, TypeError):
    """Raised when a dependency provider has neither supported shape"""
    pass


class InvalidFilterPhaseWarning(UserWarning):
    """Emitted when a filter is hooked under an unrecognized phase"""
    pass


# Export main components
__all__ = [
    "DispatcherError", "UnknownEventError", "InvalidCallbackError",
    "InvalidFilterEntryError", "UncallableStaticInvocationError",
    "UnresolvableClassError", "ContainerHandlerError", "InvalidFilterPhaseWarning"
]
