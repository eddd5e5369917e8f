"""
moswarm exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All moswarm-specific exceptions inherit from MoswarmError for easy catching.
Invalid-argument failures (bad configuration, unsuitable problem or population)
also inherit from ValueError.

Example:
    try:
        pop = algo.evolve(pop)
    except InvalidArgumentError as e:
        logger.error("Evolution rejected: %s", e.message)
        logger.error("Suggestion: %s", e.suggestion)
"""

from __future__ import annotations

from typing import Any


class MoswarmError(Exception):
    """
    Base exception for all moswarm errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


class InvalidArgumentError(MoswarmError, ValueError):
    """Raised when an argument, a problem or a population is unsuitable."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(InvalidArgumentError):
    """Raised when an algorithm parameter is outside its domain."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
        suggestion: str | None = None,
    ) -> None:
        if suggestion is None and parameter is not None:
            suggestion = f"Check the value passed for '{parameter}'"
        super().__init__(message, suggestion, {"parameter": parameter, "value": value})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to the {config_class} configuration" if config_class else None
        super().__init__(message, parameter=field, suggestion=suggestion)


class InvalidAlgorithmError(ConfigurationError):
    """Raised when an unknown algorithm is requested."""

    def __init__(self, algorithm: str, available: list[str] | None = None) -> None:
        available = available or ["nspso", "aco"]
        message = f"Unknown algorithm '{algorithm}'."
        suggestion = f"Available algorithms: {', '.join(available)}"
        super().__init__(message, parameter="algorithm", value=algorithm, suggestion=suggestion)
        self.details["available"] = available


# =============================================================================
# Problem / Population Errors
# =============================================================================


class IncompatibleProblemError(InvalidArgumentError):
    """Raised when a problem or population does not meet an algorithm's preconditions."""

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if suggestion is None and algorithm:
            suggestion = f"Check the problem definition and population passed to {algorithm}"
        super().__init__(message, suggestion, {"algorithm": algorithm, **(details or {})})


class InfeasiblePopulationError(IncompatibleProblemError):
    """Raised when a population holds too few feasible individuals."""

    def __init__(self, message: str, n_feasible: int, required: int, algorithm: str | None = None) -> None:
        super().__init__(
            message,
            algorithm=algorithm,
            suggestion="Increase the population size, relax 'acc' or lower 'ker'",
            details={"n_feasible": n_feasible, "required": required},
        )


class BoundsError(InvalidArgumentError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure xl <= xu for all variables and bounds have correct shape"
        super().__init__(message, suggestion)


class InvalidProblemError(InvalidArgumentError):
    """Raised when an unknown problem is requested."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        message = f"Unknown problem '{problem}'."
        suggestion = f"Available problems: {', '.join(available)}" if available else None
        super().__init__(message, suggestion, {"problem": problem})


# =============================================================================
# Runtime Errors
# =============================================================================


class EvaluationError(MoswarmError):
    """Raised when a fitness vector does not match the problem dimensions."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check the lengths returned by objectives() and the constraint methods"
        super().__init__(message, suggestion, {"solution": solution})


class CheckpointError(MoswarmError):
    """Raised when a checkpoint cannot be read back."""

    def __init__(self, message: str, path: str | None = None) -> None:
        suggestion = "The checkpoint may be corrupted or written by another version."
        super().__init__(message, suggestion, {"path": path})


__all__ = [
    "MoswarmError",
    "InvalidArgumentError",
    "ConfigurationError",
    "MissingConfigError",
    "InvalidAlgorithmError",
    "IncompatibleProblemError",
    "InfeasiblePopulationError",
    "BoundsError",
    "InvalidProblemError",
    "EvaluationError",
    "CheckpointError",
]
