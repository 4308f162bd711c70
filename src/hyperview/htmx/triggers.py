"""Client-side events raised through ``HX-Trigger`` response headers.

Events are grouped by when htmx should fire them: immediately on
receipt, after the swap, or after the settle step. Each non-empty group
renders to one header::

    triggers = Triggers()
    triggers.set("closeModal")
    triggers.set_after_settle("showToast", {"message": "Saved!"})
    triggers.headers()
    # {"HX-Trigger": "closeModal",
    #  "HX-Trigger-After-Settle": '{"showToast": {"message": "Saved!"}}'}

A group whose events carry no payload renders as a comma-separated list
of names; otherwise it renders as a JSON object.
"""

import json as json_module
from enum import Enum
from typing import Any

from hyperview.htmx.headers import HX_TRIGGER, HX_TRIGGER_AFTER_SETTLE, HX_TRIGGER_AFTER_SWAP


class TriggerTiming(Enum):
    """When htmx fires an event, keyed by the header that carries it."""

    IMMEDIATE = HX_TRIGGER
    AFTER_SETTLE = HX_TRIGGER_AFTER_SETTLE
    AFTER_SWAP = HX_TRIGGER_AFTER_SWAP


class Triggers:
    """Ordered trigger events, partitioned by timing.

    Setting an event twice in the same group replaces its payload but
    keeps its original position.
    """

    __slots__ = ("_events",)

    def __init__(self) -> None:
        self._events: dict[TriggerTiming, dict[str, Any]] = {timing: {} for timing in TriggerTiming}

    def set(self, event: str, value: Any = None) -> None:
        self._events[TriggerTiming.IMMEDIATE][event] = value

    def set_after_settle(self, event: str, value: Any = None) -> None:
        self._events[TriggerTiming.AFTER_SETTLE][event] = value

    def set_after_swap(self, event: str, value: Any = None) -> None:
        self._events[TriggerTiming.AFTER_SWAP][event] = value

    def events(self, timing: TriggerTiming) -> dict[str, Any]:
        """A copy of the events registered for *timing*."""
        return dict(self._events[timing])

    def headers(self) -> dict[str, str]:
        """Render every non-empty group to its header value."""
        result: dict[str, str] = {}
        for timing, events in self._events.items():
            if events:
                result[timing.value] = _encode(events)
        return result

    def __len__(self) -> int:
        return sum(len(events) for events in self._events.values())

    def __repr__(self) -> str:
        return f"Triggers({self.headers()!r})"


def _encode(events: dict[str, Any]) -> str:
    if all(value is None for value in events.values()):
        return ", ".join(events)
    return json_module.dumps(events)
