"""Exceptions raised by the mission engine."""


class MissionError(Exception):
    """Base exception for the mission engine."""


class ObjectiveIndexError(MissionError, IndexError):
    """Raised when an objective index does not address an existing objective."""

    def __init__(self, mission_id: str, index: int, total: int):
        self.mission_id = mission_id
        self.index = index
        self.total = total
        super().__init__(
            f"Mission '{mission_id}' has no objective at index {index} "
            f"(objectives: {total})"
        )


class InvalidConfigurationError(MissionError, ValueError):
    """Raised when an objective is built with a target lower than 1."""


class MissionDefinitionError(MissionError):
    """Raised when a mission definition is missing, malformed or fails schema validation."""
