"""Mission engine package: objective tracking and the mission state machine."""

from .fsm import MissionState, TRANSITIONS, allowed_edges, is_terminal
from .model import Mission, Objective
from .events import MissionStateChanged
from .errors import MissionError, ObjectiveIndexError, InvalidConfigurationError, MissionDefinitionError
from .loader import load_missions, mission_from_dict, mission_to_dict
from .validator import validate_schema, check_invariants
from .schema import MISSION_DEFINITION_SCHEMA

__all__ = [
    'Mission', 'Objective', 'MissionState', 'MissionStateChanged',
    'TRANSITIONS', 'allowed_edges', 'is_terminal',
    'MissionError', 'ObjectiveIndexError', 'InvalidConfigurationError', 'MissionDefinitionError',
    'load_missions', 'mission_from_dict', 'mission_to_dict',
    'validate_schema', 'check_invariants',
    'MISSION_DEFINITION_SCHEMA',
]
