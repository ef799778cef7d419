"""
Filter Chain Execution

Filters are called as ``callback(params, output)``. ``params`` is the list
the target will be (or was) called with and ``output`` is an ``OutputSlot``
holding the target's result. Returning ``False`` stops the rest of the chain.
"""

from typing import Any, Iterable, List

from .errors import InvalidFilterEntryError


class OutputSlot:
    """Mutable holder for a dispatch result, shared with filters"""

    __slots__ = ("value",)

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self) -> str:
        return f"OutputSlot({self.value!r})"


def run_filters(filters: Iterable[Any], params: List[Any], output: OutputSlot) -> None:
    """
    Execute a chain of filters in order.

    Raises:
        InvalidFilterEntryError: an entry in ``filters`` is not callable
    """
    for position, callback in enumerate(filters):
        if not callable(callback):
            raise InvalidFilterEntryError(position, callback)

        if callback(params, output) is False:
            break


# Export main components
__all__ = ["OutputSlot", "run_filters"]
