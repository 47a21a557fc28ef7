"""Custom exceptions for the CRS estimator.

These exceptions provide clear error handling and enable testing of error paths.
Scoring and matching never raise; every error here belongs to a boundary
(profile construction, dataset loading, configuration).
"""

from __future__ import annotations


class CrsEstimatorError(Exception):
    """Base exception for all estimator errors."""

    pass


class InvalidProfileError(CrsEstimatorError):
    """Raised when a profile field is outside its defined domain."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(f"Invalid profile field {field_name}={value!r}: {reason}.")


class ScenarioNotFoundError(CrsEstimatorError):
    """Raised when a preset scenario name is unknown."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown scenario '{name}'. Available scenarios: {', '.join(available)}."
        )


class DrawDatasetError(CrsEstimatorError):
    """Raised when a draw dataset breaks its invariants."""

    pass


class DuplicateDrawIdError(DrawDatasetError):
    """Raised when two draws share the same id."""

    def __init__(self, draw_id: str) -> None:
        self.draw_id = draw_id
        super().__init__(f"Draw id '{draw_id}' appears more than once in the dataset.")


class NegativeDrawScoreError(DrawDatasetError):
    """Raised when a draw cutoff score is negative."""

    def __init__(self, draw_id: str, score: int) -> None:
        self.draw_id = draw_id
        self.score = score
        super().__init__(f"Draw '{draw_id}' has a negative cutoff score ({score}).")


class NegativeDrawInvitationsError(DrawDatasetError):
    """Raised when a draw reports a negative number of invitations."""

    def __init__(self, draw_id: str, invitations: int) -> None:
        self.draw_id = draw_id
        self.invitations = invitations
        super().__init__(f"Draw '{draw_id}' has a negative invitation count ({invitations}).")


class DrawDatasetFileNotFoundError(CrsEstimatorError):
    """Raised when a draw dataset file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Draw dataset file not found: {path}")


class DrawDatasetValidationError(CrsEstimatorError):
    """Raised when a draw dataset file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Draw dataset file is invalid: {path} ({detail})")


class ProfileFileNotFoundError(CrsEstimatorError):
    """Raised when a profile file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Profile file not found: {path}")


class ProfileFileValidationError(CrsEstimatorError):
    """Raised when a profile file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Profile file is invalid: {path} ({detail})")


class ConfigFileNotFoundError(CrsEstimatorError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(CrsEstimatorError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file could not be parsed: {path} ({detail})")


class ConfigFileValidationError(CrsEstimatorError):
    """Raised when a config file fails schema validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file is invalid: {path} ({detail})")
