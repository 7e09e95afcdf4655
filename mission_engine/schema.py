"""JSON schema definition for mission definitions.

Describes the data a host authors for a mission (identity, metadata,
objectives, rewards). Runtime state is not part of a definition. Editor and
scripting tooling can consume this schema instead of reflecting on the types.
"""

OBJECTIVE_DEFINITION_SCHEMA = {
    "type": "object",
    "required": ["description", "target"],
    "properties": {
        "description": {"type": "string"},
        "target": {"type": "integer", "minimum": 1}
    },
    "additionalProperties": False
}

MISSION_DEFINITION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["id", "title", "objectives"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "title": {"type": "string", "minLength": 1},
        "description": {"type": "string", "default": ""},
        "objectives": {"type": "array", "items": OBJECTIVE_DEFINITION_SCHEMA},
        "experience_reward": {"type": "integer", "minimum": 0, "default": 0},
        "currency_reward": {"type": "integer", "minimum": 0, "default": 0}
    },
    "additionalProperties": False
}

MISSION_FILE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["missions"],
    "properties": {
        "missions": {"type": "array", "items": MISSION_DEFINITION_SCHEMA}
    }
}
