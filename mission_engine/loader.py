"""Mission definition loader from structured JSON files.

This module turns mission definitions (dicts or JSON files) into Mission
objects in their initial NOT_STARTED form.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import MissionDefinitionError
from .model import Mission, Objective
from .schema import MISSION_DEFINITION_SCHEMA, MISSION_FILE_SCHEMA
from .validator import validate_schema

logger = logging.getLogger(__name__)


def load_missions(path: Union[str, Path]) -> List[Mission]:
    """Load missions from a JSON file.

    The file has the form ``{"missions": [<definition>, ...]}``.

    Args:
        path: Path to the missions JSON file

    Returns:
        List of Mission objects, in file order

    Raises:
        MissionDefinitionError: If the file is missing, is not valid JSON,
            fails schema validation or repeats a mission id
    """
    missions_path = Path(path)
    if not missions_path.exists():
        raise MissionDefinitionError(f"Missions file not found: {missions_path}")

    try:
        with open(missions_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise MissionDefinitionError(f"Invalid JSON in missions file {missions_path}: {e}") from e

    validate_schema(data, MISSION_FILE_SCHEMA)

    missions = []
    seen = set()
    for mission_data in data["missions"]:
        mission = mission_from_dict(mission_data)
        if mission.id in seen:
            raise MissionDefinitionError(f"Duplicate mission id '{mission.id}' in {missions_path}")
        seen.add(mission.id)
        missions.append(mission)

    logger.info("Loaded %d missions from %s", len(missions), missions_path)
    return missions


def mission_from_dict(data: Dict[str, Any]) -> Mission:
    """Build a Mission from a definition dict.

    Args:
        data: Mission definition matching MISSION_DEFINITION_SCHEMA

    Returns:
        Mission in NOT_STARTED state with zero progress
    """
    validate_schema(data, MISSION_DEFINITION_SCHEMA)

    objectives = [
        Objective(description=obj["description"], target=obj["target"])
        for obj in data["objectives"]
    ]
    return Mission(
        id=data["id"],
        title=data["title"],
        description=data.get("description", ""),
        objectives=objectives,
        experience_reward=data.get("experience_reward", 0),
        currency_reward=data.get("currency_reward", 0),
    )


def mission_to_dict(mission: Mission) -> Dict[str, Any]:
    """Export the definition part of a mission (no runtime state).

    The result validates against MISSION_DEFINITION_SCHEMA.
    """
    return {
        "id": mission.id,
        "title": mission.title,
        "description": mission.description,
        "objectives": [
            {"description": obj.description, "target": obj.target}
            for obj in mission.objectives
        ],
        "experience_reward": mission.experience_reward,
        "currency_reward": mission.currency_reward,
    }
