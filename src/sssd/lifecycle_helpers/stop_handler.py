"""Request termination of other running instances."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import psutil

from ..process_helpers import ProcessSource, filter_processes_by_pid
from .console import console

logger = logging.getLogger(__name__)


def stopping_message(pid: int, name: str) -> str:
    return f'<{pid}> "{name}" is stopping...'


def stop_instances(
    app_name: str,
    process_source: ProcessSource,
    *,
    current_pid: Optional[int] = None,
    quiet: bool = False,
) -> List[int]:
    """
    Send a termination request to every other process named *app_name*.

    Termination is best-effort: nothing waits for exit and failures are only logged.

    Returns:
        PIDs whose termination request was delivered
    """
    if current_pid is None:
        current_pid = os.getpid()

    targets = filter_processes_by_pid(process_source.find_by_name(app_name), current_pid)
    signaled: List[int] = []
    for proc in targets:
        console(stopping_message(proc.pid, proc.name), quiet=quiet)
        try:
            proc.terminate()
        except psutil.NoSuchProcess:  # Process race condition  # policy_guard: allow-silent-handler
            logger.debug("%s process %s exited before termination request", app_name, proc.pid)
            continue
        except (psutil.AccessDenied, OSError) as exc:  # Best-effort termination  # policy_guard: allow-silent-handler
            logger.warning("Could not stop %s process %s: %s", app_name, proc.pid, exc)
            continue
        signaled.append(proc.pid)

    logger.debug("Sent termination to %d of %d %s processes", len(signaled), len(targets), app_name)
    return signaled


__all__ = ["stop_instances", "stopping_message"]
