"""Resolve the file backing the running program."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import ExecutableResolutionError

logger = logging.getLogger(__name__)

# Linux stores at most 15 bytes of the process name (TASK_COMM_LEN - 1).
LINUX_PROCESS_NAME_LIMIT = 15

_NON_FILE_ARGV0 = {"", "-c", "-"}


def resolve_executable_path(
    argv: Optional[Sequence[str]] = None,
    *,
    frozen: Optional[bool] = None,
    executable: Optional[str] = None,
) -> Path:
    """Return the absolute path of the current program.

    Frozen bundles run from ``sys.executable``; scripts run from ``argv[0]``.

    Raises:
        ExecutableResolutionError: If no file path can be derived.
    """
    if frozen is None:
        frozen = bool(getattr(sys, "frozen", False))
    if argv is None:
        argv = sys.argv

    if frozen:
        raw = executable if executable is not None else sys.executable
        if not raw:
            raise ExecutableResolutionError.no_path("sys.executable is empty")
    else:
        raw = argv[0] if argv else ""
        if raw in _NON_FILE_ARGV0:
            raise ExecutableResolutionError.no_path(f"program was not started from a file (argv[0]={raw!r})")

    return Path(raw).absolute()


def executable_name_from_path(path: Path) -> str:
    """Return the base name of *path*, validating it as text."""
    name = path.name
    if not name:
        raise ExecutableResolutionError.no_file_name(path)
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ExecutableResolutionError.not_text(path) from exc
    return name


def resolve_executable_name(argv: Optional[Sequence[str]] = None, *, platform: Optional[str] = None) -> str:
    """Return the base name of the current program."""
    name = executable_name_from_path(resolve_executable_path(argv))
    warn_if_name_truncated(name, platform=platform)
    return name


def warn_if_name_truncated(name: str, *, platform: Optional[str] = None) -> bool:
    """Log a warning when the kernel will truncate *name* in the process table."""
    platform = platform if platform is not None else sys.platform
    if not platform.startswith("linux"):
        return False
    if len(name.encode("utf-8")) <= LINUX_PROCESS_NAME_LIMIT:
        return False
    logger.warning(
        "Executable name %r exceeds %d bytes; Linux truncates process names and instances may not be detected",
        name,
        LINUX_PROCESS_NAME_LIMIT,
    )
    return True


__all__ = [
    "LINUX_PROCESS_NAME_LIMIT",
    "executable_name_from_path",
    "resolve_executable_name",
    "resolve_executable_path",
    "warn_if_name_truncated",
]
