"""Custom exceptions for the landmark tour planner."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class TourPlannerError(Exception):
    """Base error for planning failures."""


class ValidationError(TourPlannerError):
    """Raised when inputs are invalid or incomplete."""


class MalformedInputError(ValidationError):
    """Raised when a record cannot be interpreted against the data model."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[Union[str, Path]] = None,
        line: Optional[int] = None,
    ) -> None:
        self.path = str(path) if path is not None else None
        self.line = line
        if self.path and line is not None:
            message = f"{self.path}:{line}: {message}"
        elif self.path:
            message = f"{self.path}: {message}"
        super().__init__(message)


class InputNotFoundError(ValidationError):
    """Raised when one or more input files do not exist."""

    def __init__(self, missing: list[Path]) -> None:
        self.missing = list(missing)
        names = ", ".join(str(path) for path in self.missing)
        super().__init__(f"One or more files do not exist: {names}")


class PreconditionMismatchError(ValidationError):
    """Raised when the expected landmark count differs from the discovered one."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Mismatch in number of landmarks: expected {expected} but found {found}")


class MissingIntermediateEdgeError(TourPlannerError):
    """Raised when the search needs a directed edge that the graph does not have."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"No edge from {source!r} to {target!r}; every landmark must be reachable")


class StepFailedError(TourPlannerError):
    """Raised when a pipeline step fails."""
