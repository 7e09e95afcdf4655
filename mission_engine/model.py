"""Mission engine data models.

This module defines the Objective tracker and the Mission state machine.
Mission state only ever changes through start/complete/fail/reset and through
objective progress updates that complete the mission automatically.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence, Tuple

from .config import MIN_OBJECTIVE_TARGET, get_target_policy

from .errors import InvalidConfigurationError, ObjectiveIndexError
from .events import Listener, ListenerRegistry, MissionStateChanged
from .fsm import MissionState, can_complete, can_fail, can_start, next_state

logger = logging.getLogger(__name__)


class Objective:
    """A single objective within a mission.

    ``progress`` is always within [0, target] and ``completed`` is derived
    from it, so the two can never disagree. While the owning mission is
    COMPLETED the objective is locked and ignores updates and resets.
    """

    def __init__(self, description: str, target: int = 1):
        self.description = description
        self._target = _checked_target(description, target)
        self._progress = 0
        self._locked = False

    def __repr__(self) -> str:
        return f"Objective(description={self.description!r}, target={self._target}, progress={self._progress})"

    def __eq__(self, other):
        if not isinstance(other, Objective):
            return NotImplemented
        return (self.description, self._target, self._progress) == (
            other.description, other._target, other._progress
        )

    @property
    def target(self) -> int:
        return self._target

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def completed(self) -> bool:
        return self._progress >= self._target

    def update_progress(self, new_progress: int) -> None:
        """Set progress, clamped into [0, target].

        Out-of-range values are normalized, never rejected.
        """
        if self._locked:
            logger.debug("Objective '%s' is locked, progress update ignored", self.description)
            return
        self._progress = max(0, min(int(new_progress), self._target))

    def reset(self) -> None:
        if self._locked:
            logger.debug("Objective '%s' is locked, reset ignored", self.description)
            return
        self._progress = 0


def _checked_target(description: str, target) -> int:
    if isinstance(target, bool) or not isinstance(target, int):
        raise InvalidConfigurationError(
            f"Objective '{description}' target must be an integer, got {target!r}"
        )
    if target >= MIN_OBJECTIVE_TARGET:
        return target
    if get_target_policy() == "normalize":
        logger.warning(
            "Objective '%s' has target %d, normalized to %d",
            description, target, MIN_OBJECTIVE_TARGET,
        )
        return MIN_OBJECTIVE_TARGET
    raise InvalidConfigurationError(
        f"Objective '{description}' target must be >= {MIN_OBJECTIVE_TARGET}, got {target}"
    )


@dataclass
class Mission:
    """A mission made of ordered objectives, with a lifecycle state.

    The host builds a Mission fully populated, then drives it with
    start(), update_objective_progress(), complete(), fail() and reset().
    ``objectives`` is stored as a tuple; its order is fixed at construction.
    """
    id: str
    title: str
    description: str = ""
    objectives: Sequence[Objective] = field(default_factory=tuple)
    experience_reward: int = 0
    currency_reward: int = 0
    _state: MissionState = field(default=MissionState.NOT_STARTED, init=False, repr=False)
    _listeners: ListenerRegistry = field(
        default_factory=ListenerRegistry, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.objectives: Tuple[Objective, ...] = tuple(self.objectives)
        for name in ("experience_reward", "currency_reward"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidConfigurationError(
                    f"Mission '{self.id}' {name} must be a non-negative integer, got {value!r}"
                )

    @property
    def state(self) -> MissionState:
        return self._state

    # --- Transitions ---

    def start(self) -> bool:
        """Move NOT_STARTED -> IN_PROGRESS. No-op from any other state.

        Returns:
            True if the mission was started
        """
        if not can_start(self._state):
            logger.debug("Mission %s: start ignored in state %s", self.id, self._state.value)
            return False
        return self._transition("start")

    def complete(self) -> bool:
        """Move IN_PROGRESS -> COMPLETED when every objective is completed.

        Returns:
            True if the mission was completed
        """
        if not can_complete(self._state, self.are_all_objectives_completed()):
            logger.debug("Mission %s: complete ignored in state %s", self.id, self._state.value)
            return False
        return self._transition("complete")

    def fail(self) -> bool:
        """Move IN_PROGRESS -> FAILED regardless of objectives.

        Returns:
            True if the mission was failed
        """
        if not can_fail(self._state):
            logger.debug("Mission %s: fail ignored in state %s", self.id, self._state.value)
            return False
        return self._transition("fail")

    def reset(self) -> bool:
        """Return to NOT_STARTED and zero every objective.

        Rewards and metadata are left untouched.
        """
        self._lock_objectives(False)
        for objective in self.objectives:
            objective.reset()
        return self._transition("reset")

    def update_objective_progress(self, index: int, new_progress: int) -> None:
        """Update the progress of one objective.

        If the mission is IN_PROGRESS and this update leaves every objective
        completed, the mission completes as part of this call. Updates to a
        COMPLETED mission are ignored.

        Args:
            index: Position of the objective in ``objectives``
            new_progress: New progress value, clamped into [0, target]

        Raises:
            ObjectiveIndexError: If index does not address an objective
        """
        total = len(self.objectives)
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < total:
            logger.warning(
                "Mission %s: invalid objective index %r (objectives: %d)", self.id, index, total
            )
            raise ObjectiveIndexError(self.id, index, total)

        # Objectives of a completed mission stay frozen until reset
        if self._state is MissionState.COMPLETED:
            logger.debug("Mission %s: progress update ignored, mission completed", self.id)
            return

        objective = self.objectives[index]
        objective.update_progress(new_progress)
        logger.debug(
            "Mission %s: objective %d progress %d/%d",
            self.id, index, objective.progress, objective.target,
        )

        if self._state is MissionState.IN_PROGRESS and self.are_all_objectives_completed():
            self.complete()

    # --- Queries ---

    def are_all_objectives_completed(self) -> bool:
        """True if every objective is completed (vacuously true with none)."""
        return all(objective.completed for objective in self.objectives)

    def is_active(self) -> bool:
        return self._state is MissionState.IN_PROGRESS

    def completed_objective_count(self) -> int:
        return sum(1 for objective in self.objectives if objective.completed)

    def total_objective_count(self) -> int:
        return len(self.objectives)

    # --- Notifications ---

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state-change listener.

        Args:
            listener: Callable receiving (MissionStateChanged, Mission)

        Returns:
            Callable that unsubscribes the listener
        """
        return self._listeners.add(listener)

    def unsubscribe(self, listener: Listener) -> bool:
        return self._listeners.remove(listener)

    def _lock_objectives(self, locked: bool) -> None:
        for objective in self.objectives:
            objective._locked = locked

    def _transition(self, action: str) -> bool:
        target = next_state(action, self._state)
        if target is None:
            logger.debug("Mission %s: %s ignored in state %s", self.id, action, self._state.value)
            return False

        old_state = self._state
        self._state = target
        self._lock_objectives(target is MissionState.COMPLETED)
        if old_state is target:
            return True

        logger.debug("Mission %s: %s -> %s", self.id, old_state.value, target.value)
        self._listeners.dispatch(MissionStateChanged(self.id, old_state, target), self)
        return True
