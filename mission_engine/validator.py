"""Mission definition and record validation.

Validates definitions against the JSON schema and checks that an in-memory
mission (for example one rebuilt by a host's save system) satisfies the
model invariants.
"""
from typing import List

import jsonschema

from .errors import MissionDefinitionError
from .fsm import MissionState
from .model import Mission
from .schema import MISSION_DEFINITION_SCHEMA

def validate_schema(payload: dict, schema: dict = MISSION_DEFINITION_SCHEMA) -> bool:
    """Validate payload against a mission schema.

    Raises:
        MissionDefinitionError: If the payload does not match the schema
    """
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise MissionDefinitionError(f"Invalid mission definition at {where}: {e.message}") from e
    return True

def check_invariants(mission: Mission) -> List[str]:
    """Check a mission record against the model invariants.

    Args:
        mission: Mission to inspect

    Returns:
        List of problem codes, empty if the record is consistent
    """
    problems = []

    for objective in mission.objectives:
        if objective.target < 1:
            problems.append("target_not_positive")
        if not 0 <= objective.progress <= objective.target:
            problems.append("progress_out_of_range")
        if objective.completed != (objective.progress >= objective.target):
            problems.append("objective_completed_mismatch")

    if mission.state is MissionState.COMPLETED and not mission.are_all_objectives_completed():
        problems.append("completed_with_open_objectives")

    if mission.experience_reward < 0 or mission.currency_reward < 0:
        problems.append("negative_reward")

    # One code per kind of problem, in first-seen order
    return list(dict.fromkeys(problems))
