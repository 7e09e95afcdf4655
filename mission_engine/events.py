"""State-change notifications for missions.

Hosts subscribe callables on a Mission; every committed transition produces a
MissionStateChanged event that is delivered synchronously, in subscription
order, after the new state is in place. A transition triggered by a listener
is queued and delivered once every listener has seen the current event, so
all listeners observe transitions in the order they were committed.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Deque, List, Tuple

if TYPE_CHECKING:
    from .model import Mission, MissionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissionStateChanged:
    """A committed transition of a mission."""
    mission_id: str
    old_state: "MissionState"
    new_state: "MissionState"


Listener = Callable[[MissionStateChanged, "Mission"], None]


class ListenerRegistry:
    """Ordered set of state-change listeners."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._pending: Deque[Tuple[MissionStateChanged, "Mission"]] = deque()
        self._dispatching = False

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: Listener) -> bool:
        return listener in self._listeners

    def add(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Callable receiving (event, mission)

        Returns:
            A callable that removes the listener again
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        if listener not in self._listeners:
            self._listeners.append(listener)
        return lambda: self.remove(listener)

    def remove(self, listener: Listener) -> bool:
        """Unregister a listener. Returns False if it was not registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def clear(self) -> None:
        self._listeners.clear()

    def dispatch(self, event: MissionStateChanged, mission: "Mission") -> None:
        """Deliver an event to every listener.

        Events raised while listeners are running (a listener calling
        reset(), say) are queued and delivered in FIFO order after the
        current event has reached every listener.
        """
        self._pending.append((event, mission))
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                self._deliver(*self._pending.popleft())
        finally:
            self._pending.clear()
            self._dispatching = False

    def _deliver(self, event: MissionStateChanged, mission: "Mission") -> None:
        """Call each listener once. A failing listener is logged and skipped."""
        # Copy: listeners may unsubscribe themselves while being notified
        for listener in list(self._listeners):
            try:
                listener(event, mission)
            except Exception:
                logger.exception(
                    "Listener %r failed on %s: %s -> %s",
                    listener, event.mission_id, event.old_state.value, event.new_state.value,
                )
