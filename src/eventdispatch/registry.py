"""
Event Registry

Maps event names to a single target and to the ordered BEFORE/AFTER filter
lists hooked on them.
"""

import logging
import warnings
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .errors import InvalidCallbackError, InvalidFilterPhaseWarning

logger = logging.getLogger(__name__)


class FilterPhase(str, Enum):
    """Filter execution points relative to the target"""
    BEFORE = "before"
    AFTER = "after"


FILTER_TYPES = tuple(phase.value for phase in FilterPhase)

PhaseKey = Union[FilterPhase, str]


def _phase_key(phase: PhaseKey) -> str:
    if isinstance(phase, FilterPhase):
        return phase.value
    return phase


class EventRegistry:
    """
    Storage for events and their filters.

    Targets are kept exactly as registered so ``get`` hands back what was
    passed to ``set``. The normalized form the resolver works with is cached
    next to it and dropped whenever the event changes.
    """

    def __init__(self, warn_on_invalid_phase: bool = True):
        self._events: Dict[str, Any] = {}
        self._filters: Dict[str, Dict[str, List[Callable]]] = {}
        self._resolved: Dict[str, Any] = {}
        self.warn_on_invalid_phase = warn_on_invalid_phase

    def set(self, name: str, target: Any) -> 'EventRegistry':
        """Assign a target to an event, replacing any previous one"""
        if target is None:
            raise InvalidCallbackError(f"Event '{name}' needs a callback, got None", callback=target)

        self._events[name] = target
        self._resolved.pop(name, None)
        logger.debug("Registered event '%s'", name)
        return self

    def get(self, name: str) -> Optional[Any]:
        return self._events.get(name)

    def has(self, name: str) -> bool:
        return name in self._events

    def names(self) -> List[str]:
        return list(self._events)

    def clear(self, name: Optional[str] = None) -> None:
        """Clear one event with its filters, or everything when no name is given"""
        if name is not None:
            self._events.pop(name, None)
            self._filters.pop(name, None)
            self._resolved.pop(name, None)
            logger.debug("Cleared event '%s'", name)
            return

        self._events.clear()
        self._filters.clear()
        self._resolved.clear()
        logger.debug("Cleared all events")

    def reset(self) -> 'EventRegistry':
        self.clear()
        return self

    def hook(
        self,
        name: str,
        phase: PhaseKey,
        callback: Callable,
        stacklevel: int = 2
    ) -> 'EventRegistry':
        """
        Append a filter to an event.

        An unknown phase is reported but the filter is still stored under the
        phase key exactly as given. ``stacklevel`` is forwarded to
        ``warnings.warn`` so wrappers can point the warning at their caller.
        """
        key = _phase_key(phase)

        if key not in FILTER_TYPES:
            message = f"Invalid filter type '{key}', use {'|'.join(FILTER_TYPES)}"
            logger.warning(message)
            if self.warn_on_invalid_phase:
                warnings.warn(message, InvalidFilterPhaseWarning, stacklevel=stacklevel)

        self._filters.setdefault(name, {}).setdefault(key, []).append(callback)
        logger.debug("Hooked %s filter on '%s'", key, name)
        return self

    def filters(self, name: str, phase: PhaseKey) -> List[Callable]:
        return list(self._filters.get(name, {}).get(_phase_key(phase), []))

    def resolved(self, name: str) -> Optional[Any]:
        return self._resolved.get(name)

    def remember(self, name: str, target: Any) -> None:
        if name in self._events:
            self._resolved[name] = target


# Export main components
__all__ = ["FilterPhase", "FILTER_TYPES", "EventRegistry"]
