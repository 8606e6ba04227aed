"""Error types raised by the lifecycle dispatcher."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class LifecycleError(RuntimeError):
    """Base class for fatal lifecycle failures."""


class ExecutableResolutionError(LifecycleError):
    """Raised when the running program's file name cannot be determined."""

    @classmethod
    def no_path(cls, reason: str) -> "ExecutableResolutionError":
        """Create error for an unavailable executable path."""
        return cls(f"Unable to determine the current executable: {reason}")

    @classmethod
    def no_file_name(cls, path: Path) -> "ExecutableResolutionError":
        """Create error for a path without a file-name component."""
        return cls(f"Executable path {str(path)!r} has no file name")

    @classmethod
    def not_text(cls, path: Path) -> "ExecutableResolutionError":
        """Create error for a file name that is not valid text."""
        return cls(f"Executable name in {str(path)!r} is not representable as text")


class WorkloadError(LifecycleError):
    """Raised when the foreground workload fails."""

    @classmethod
    def failed(cls, app_name: str, cause: BaseException | None = None) -> "WorkloadError":
        """Create error for a workload that raised or reported failure."""
        msg = f"fail to start the app {app_name}"
        if cause is not None:
            msg += f": {cause}"
        return cls(msg)


class DaemonSpawnError(LifecycleError):
    """Raised when the detached child process cannot be launched."""

    @classmethod
    def spawn_failed(cls, command: Sequence[str], cause: BaseException) -> "DaemonSpawnError":
        """Create error for a failed child launch."""
        return cls(f"fail to start the app in daemon mode ({' '.join(command)}): {cause}")


class LogFileError(LifecycleError):
    """Raised when the daemon log file cannot be prepared."""

    @classmethod
    def open_failed(cls, log_path: Path, cause: BaseException) -> "LogFileError":
        """Create error for a log file that cannot be opened."""
        return cls(f"Unable to open daemon log file {log_path}: {cause}")


__all__ = [
    "DaemonSpawnError",
    "ExecutableResolutionError",
    "LifecycleError",
    "LogFileError",
    "WorkloadError",
]
