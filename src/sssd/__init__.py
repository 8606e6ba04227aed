"""Let an async application support ``./app status | start | stop | daemon``."""

from .errors import (
    DaemonSpawnError,
    ExecutableResolutionError,
    LifecycleError,
    LogFileError,
    WorkloadError,
)
from .lifecycle import create, dispatch, help_message, run
from .lifecycle_config import LifecycleConfig
from .lifecycle_helpers import Action, StatusReport, check_status, select_action

__all__ = [
    "Action",
    "DaemonSpawnError",
    "ExecutableResolutionError",
    "LifecycleConfig",
    "LifecycleError",
    "LogFileError",
    "StatusReport",
    "WorkloadError",
    "check_status",
    "create",
    "dispatch",
    "help_message",
    "run",
    "select_action",
]
