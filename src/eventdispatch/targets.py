"""
Invocation Targets

🎯 Tagged Target Variant:
Whatever was registered for an event (a function, a ``(class, method)``
pair, an ``"Class::method"`` / ``"Class->method"`` string or the import path
of a function) is normalized once into one of two models:

- ``FunctionTarget``: call ``func(*params)``
- ``MethodTarget``: obtain an object for ``owner`` and call ``method`` on it

``owner`` is either a class identifier (a class object or its import path)
or a live instance.
"""

import builtins
import pkgutil
from typing import Any, Callable, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidCallbackError

INSTANCE_DELIMITER = "->"
STATIC_DELIMITER = "::"

# Tried in this order when splitting a string target
CLASS_METHOD_DELIMITERS = (INSTANCE_DELIMITER, STATIC_DELIMITER)


class FunctionTarget(BaseModel):
    """A directly callable target"""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: Literal["function"] = "function"
    func: Callable[..., Any]


class MethodTarget(BaseModel):
    """A method to call on a class identifier or a live instance"""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    kind: Literal["method"] = "method"
    owner: Any
    method: str = Field(min_length=1)

    @field_validator("owner")
    @classmethod
    def _owner_not_blank(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("class side of a method target must not be empty")
        return value

    @property
    def is_identifier(self) -> bool:
        """True when ``owner`` still has to be turned into an instance"""
        return isinstance(self.owner, (str, type))

    @property
    def owner_name(self) -> str:
        if isinstance(self.owner, str):
            return self.owner
        if isinstance(self.owner, type):
            return self.owner.__qualname__
        return type(self.owner).__qualname__


Target = Union[FunctionTarget, MethodTarget]


def has_class_method_delimiter(value: str) -> bool:
    return any(delimiter in value for delimiter in CLASS_METHOD_DELIMITERS)


def parse_string_class_and_method(class_and_method: str) -> Tuple[str, str]:
    """
    Split ``"Class->method"`` or ``"Class::method"`` into its two parts.

    ``->`` is tried first; ``::`` is only used when the string holds no
    ``->``. Anything after a second delimiter is ignored.
    """
    class_parts = class_and_method.split(INSTANCE_DELIMITER)
    if len(class_parts) == 1:
        class_parts = class_parts[0].split(STATIC_DELIMITER)

    if len(class_parts) < 2:
        raise InvalidCallbackError(
            f"Expected 'Class::method' or 'Class->method', got '{class_and_method}'",
            callback=class_and_method
        )

    return class_parts[0].strip(), class_parts[1].strip()


def resolve_function_name(name: str) -> Callable:
    """
    Import a callable from its dotted path (``"os.path.join"`` or ``"pkg.mod:func"``).

    A bare name that is not importable is looked up among the builtins, so
    ``"len"`` works as well as ``"builtins.len"``.
    """
    try:
        func = pkgutil.resolve_name(name)
    except (ValueError, ImportError, AttributeError) as e:
        if not name.isidentifier() or not hasattr(builtins, name):
            raise InvalidCallbackError(callback=name) from e
        func = getattr(builtins, name)

    if not callable(func):
        raise InvalidCallbackError(callback=name)

    return func


def _method_target(owner: Any, method: Any, raw: Any) -> MethodTarget:
    try:
        return MethodTarget(owner=owner, method=method)
    except ValidationError as e:
        raise InvalidCallbackError(f"Invalid method callback {raw!r}: {e}", callback=raw) from e


def normalize_target(callback: Any) -> Target:
    """
    Turn a registered callback into a ``FunctionTarget`` or ``MethodTarget``.

    Raises:
        InvalidCallbackError: the callback cannot be invoked in any supported way
    """
    if isinstance(callback, (FunctionTarget, MethodTarget)):
        return callback

    if isinstance(callback, str):
        if has_class_method_delimiter(callback):
            owner, method = parse_string_class_and_method(callback)
            return _method_target(owner, method, callback)
        return FunctionTarget(func=resolve_function_name(callback))

    if isinstance(callback, (tuple, list)):
        if len(callback) != 2:
            raise InvalidCallbackError(
                f"Method callbacks must be (class, method) pairs, got {callback!r}",
                callback=callback
            )
        owner, method = callback
        return _method_target(owner, method, callback)

    if callable(callback):
        return FunctionTarget(func=callback)

    raise InvalidCallbackError(callback=callback)


# Export main components
__all__ = [
    "FunctionTarget", "MethodTarget", "Target",
    "INSTANCE_DELIMITER", "STATIC_DELIMITER", "CLASS_METHOD_DELIMITERS",
    "has_class_method_delimiter", "parse_string_class_and_method",
    "resolve_function_name", "normalize_target"
]
