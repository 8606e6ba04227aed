"""Filter helpers for process snapshots."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TypeVar


class _ProcessWithPID(Protocol):
    pid: Optional[int]


_ProcessLike = TypeVar("_ProcessLike", bound=_ProcessWithPID)


def filter_processes_by_pid(processes: Iterable[_ProcessLike], exclude_pid: Optional[int]) -> List[_ProcessLike]:
    """Return all processes except those matching the excluded PID."""
    if exclude_pid is None:
        return list(processes)
    return [proc for proc in processes if proc.pid != exclude_pid]


def first_other_process(processes: Iterable[_ProcessLike], exclude_pid: Optional[int]) -> Optional[_ProcessLike]:
    """Return the first process whose PID differs from *exclude_pid*."""
    for proc in processes:
        if exclude_pid is None or proc.pid != exclude_pid:
            return proc
    return None
