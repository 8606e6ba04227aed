"""Detect another running instance of the current executable."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ..process_helpers import ProcessSource, first_other_process

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusReport:
    message: str
    is_running: bool


def running_message(pid: int, name: str) -> str:
    return f'<{pid}> "{name}" is running.'


def stopped_message(app_name: str) -> str:
    return f"{app_name} is stopped!"


def check_status(app_name: str, process_source: ProcessSource, *, current_pid: Optional[int] = None) -> StatusReport:
    """
    Report whether a process other than the caller is running under *app_name*.

    Only the first match the snapshot yields is reported.

    Args:
        app_name: Exact process name to look for
        process_source: Snapshot provider
        current_pid: PID to ignore; defaults to this process

    Returns:
        StatusReport with a one-line message and the running flag
    """
    if current_pid is None:
        current_pid = os.getpid()

    other = first_other_process(process_source.find_by_name(app_name), current_pid)
    if other is None:
        logger.debug("No other %s process found (self pid %s)", app_name, current_pid)
        return StatusReport(stopped_message(app_name), False)

    logger.debug("Found running %s process with PID %s", app_name, other.pid)
    return StatusReport(running_message(other.pid, other.name), True)


__all__ = ["StatusReport", "check_status", "running_message", "stopped_message"]
