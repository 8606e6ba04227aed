"""Relaunch the executable detached, with output appended to a log file."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import DaemonSpawnError, LogFileError
from ..lifecycle_config import LifecycleConfig
from ..process_helpers import ProcessSource
from .console import console
from .status_checker import check_status

logger = logging.getLogger(__name__)

START_ARGUMENT = "start"


def build_daemon_command(executable_path: Path) -> List[str]:
    return [str(executable_path), START_ARGUMENT]


def ensure_log_directory(log_dir: Path) -> None:
    """Create *log_dir* if absent; creation failures surface when the file is opened."""
    try:
        log_dir.mkdir(exist_ok=True)
    except OSError as exc:  # Reported by open_log_handles  # policy_guard: allow-silent-handler
        logger.debug("Could not create log directory %s: %s", log_dir, exc)


def open_log_handles(log_path: Path):
    """Open two append-mode handles on *log_path*, one per output stream."""
    try:
        stdout = open(log_path, "ab")
    except OSError as exc:
        raise LogFileError.open_failed(log_path, exc) from exc
    try:
        stderr = open(log_path, "ab")
    except OSError as exc:
        stdout.close()
        raise LogFileError.open_failed(log_path, exc) from exc
    return stdout, stderr


def launch_daemon(
    app_name: str,
    executable_path: Path,
    process_source: ProcessSource,
    *,
    config: LifecycleConfig,
    current_pid: Optional[int] = None,
) -> Optional[int]:
    """Start ``<executable> start`` in a new session unless an instance is already running.

    Args:
        app_name: Process name used for the liveness check and the log file name
        executable_path: Program to relaunch
        process_source: Snapshot provider for the liveness check
        config: Supplies the log directory and console settings
        current_pid: PID to ignore in the liveness check

    Returns:
        PID of the spawned child, or ``None`` when an instance was already running

    Raises:
        LogFileError: If the log file cannot be opened
        DaemonSpawnError: If the child process cannot be started
    """
    report = check_status(app_name, process_source, current_pid=current_pid)
    if report.is_running:
        console(report.message, quiet=config.quiet)
        return None

    ensure_log_directory(config.log_dir)
    log_path = config.log_path(app_name)
    stdout, stderr = open_log_handles(log_path)

    command = build_daemon_command(executable_path)
    try:
        with stdout, stderr:
            child = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=stdout,
                stderr=stderr,
                start_new_session=True,
            )
    except OSError as exc:
        raise DaemonSpawnError.spawn_failed(command, exc) from exc

    logger.info("Started %s in daemon mode (PID %s), logging to %s", app_name, child.pid, log_path)
    return child.pid


__all__ = [
    "START_ARGUMENT",
    "build_daemon_command",
    "ensure_log_directory",
    "launch_daemon",
    "open_log_handles",
]
