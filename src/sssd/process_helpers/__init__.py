"""Process enumeration helpers."""

from .process_discovery import PsutilProcessSource
from .process_filter import filter_processes_by_pid, first_other_process
from .process_models import ProcessHandle, ProcessSource, PsutilProcessHandle

__all__ = [
    "ProcessHandle",
    "ProcessSource",
    "PsutilProcessHandle",
    "PsutilProcessSource",
    "filter_processes_by_pid",
    "first_other_process",
]
