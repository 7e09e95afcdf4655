"""Finite State Machine for mission progression.

This module holds the mission states and the transition table.
States: NOT_STARTED, IN_PROGRESS, COMPLETED, FAILED

    NOT_STARTED --start--> IN_PROGRESS --complete--> COMPLETED
                                       --fail------> FAILED
    (any) --reset--> NOT_STARTED

COMPLETED and FAILED are terminal until reset.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Optional, Set, Tuple


class MissionState(Enum):
    """Mission status values."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


TERMINAL_STATES: FrozenSet[MissionState] = frozenset({MissionState.COMPLETED, MissionState.FAILED})

# action -> (source states, target state)
TRANSITIONS: Dict[str, Tuple[FrozenSet[MissionState], MissionState]] = {
    "start": (frozenset({MissionState.NOT_STARTED}), MissionState.IN_PROGRESS),
    "complete": (frozenset({MissionState.IN_PROGRESS}), MissionState.COMPLETED),
    "fail": (frozenset({MissionState.IN_PROGRESS}), MissionState.FAILED),
    "reset": (frozenset(MissionState), MissionState.NOT_STARTED),
}


def next_state(action: str, current: MissionState) -> Optional[MissionState]:
    """Resolve the target of an action from the current state.

    Args:
        action: One of the keys of TRANSITIONS
        current: Current mission state

    Returns:
        Target state, or None if the action is not allowed from current

    Raises:
        KeyError: If the action is unknown
    """
    sources, target = TRANSITIONS[action]
    if current not in sources:
        return None
    return target


def can_start(current: MissionState) -> bool:
    return next_state("start", current) is not None


def can_complete(current: MissionState, objectives_done: bool) -> bool:
    """Check if a mission can complete.

    Completion needs both the IN_PROGRESS state and every objective done.
    """
    return objectives_done and next_state("complete", current) is not None


def can_fail(current: MissionState) -> bool:
    return next_state("fail", current) is not None


def is_terminal(state: MissionState) -> bool:
    return state in TERMINAL_STATES


def allowed_edges() -> Set[Tuple[MissionState, MissionState]]:
    """All (source, target) pairs that change state.

    Self-loops (reset on NOT_STARTED) are excluded since they do not
    change the state.
    """
    edges = set()
    for sources, target in TRANSITIONS.values():
        for source in sources:
            if source is not target:
                edges.add((source, target))
    return edges
