"""Exception hierarchy for the Freakend CLI.

Every error carries the process exit code the CLI should terminate with, so
the entry point can map failures to exit statuses without inspecting types.
"""

from __future__ import annotations

from pathlib import Path


class FreakendError(Exception):
    """Base class for all errors raised by Freakend commands."""

    exit_code: int = 2


class UsageError(FreakendError):
    """Raised when a required argument is missing or invalid."""

    exit_code = 1


class FeatureNotFoundError(UsageError):
    """Raised when no template tree exists for the requested feature."""

    def __init__(self, feature: str, framework: str) -> None:
        self.feature = feature
        self.framework = framework
        super().__init__(f"Feature '{feature}' not found in '{framework}'")


class FilesystemError(FreakendError):
    """Raised when a create/read/write/mkdir operation fails.

    Wraps the underlying ``OSError`` (available as ``__cause__``) and records
    which operation failed on which path.
    """

    def __init__(self, operation: str, path: str | Path, reason: str) -> None:
        self.operation = operation
        self.path = Path(path)
        super().__init__(f"Failed to {operation} {self.path}: {reason}")


class MarkerNotFoundError(FreakendError):
    """Raised when the server bootstrap document has no insertion marker."""

    def __init__(self, path: str | Path | None, marker: str) -> None:
        self.path = Path(path) if path is not None else None
        self.marker = marker
        where = f" in {self.path}" if self.path is not None else ""
        super().__init__(f"Insertion marker '{marker}' not found{where}")


class CommandError(FreakendError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr[:500]}" if stderr else ""
        super().__init__(f"Command '{command}' failed with exit code {returncode}{detail}")
