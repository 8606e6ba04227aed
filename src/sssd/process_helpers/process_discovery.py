"""Process discovery by executable name."""

from __future__ import annotations

import logging
import ntpath
import posixpath
import re
import time
from typing import List, Optional, Sequence

import psutil

from .process_models import ProcessHandle, PsutilProcessHandle

logger = logging.getLogger(__name__)

_INTERPRETER_NAME = re.compile(r"^(python|pypy)[0-9.]*[a-z]?(\.exe)?$", re.IGNORECASE)

# Interpreter options that consume the following argument.
_OPTIONS_WITH_VALUE = {"-W", "-X"}
# Interpreter options after which no script path follows.
_NON_SCRIPT_OPTIONS = {"-c", "-m"}


def _basename(path: str) -> str:
    return ntpath.basename(posixpath.basename(path))


def is_interpreter(proc_name: Optional[str], cmdline: Sequence[str]) -> bool:
    """Return True when the process looks like a Python interpreter."""
    candidates = [proc_name or ""]
    if cmdline:
        candidates.append(_basename(cmdline[0]))
    return any(_INTERPRETER_NAME.match(candidate) for candidate in candidates if candidate)


def interpreter_script(cmdline: Sequence[str]) -> Optional[str]:
    """Return the script path an interpreter command line runs, if any.

    ``python3 -u /opt/app start`` yields ``/opt/app``; ``python3 -m pkg`` yields ``None``.
    """
    args = iter(cmdline[1:])
    for arg in args:
        if arg == "--":
            return next(args, None)
        if arg in _NON_SCRIPT_OPTIONS or arg.startswith(("-c", "-m")):
            return None
        if arg in _OPTIONS_WITH_VALUE:
            next(args, None)
            continue
        if arg.startswith("-"):
            continue
        return arg
    return None


def process_matches(name: str, proc_name: Optional[str], cmdline: Sequence[str]) -> bool:
    """Match by process name, or by script name for interpreter-run programs."""
    if proc_name == name:
        return True
    if not is_interpreter(proc_name, cmdline):
        return False
    script = interpreter_script(cmdline)
    return script is not None and _basename(script) == name


class PsutilProcessSource:
    """Takes a fresh psutil snapshot on every lookup."""

    def find_by_name(self, name: str) -> List[ProcessHandle]:
        logger.debug("Scanning process table for %r", name)
        start_time = time.time()

        matches: List[ProcessHandle] = []
        for proc in psutil.process_iter(["pid", "name", "cmdline"]):
            try:
                proc_name = proc.info.get("name")
                cmdline = proc.info.get("cmdline") or []
                if not process_matches(name, proc_name, [str(arg) for arg in cmdline]):
                    continue
                matches.append(PsutilProcessHandle(pid=int(proc.info["pid"]), name=name, process=proc))
            except (psutil.NoSuchProcess, psutil.AccessDenied):  # policy_guard: allow-silent-handler
                continue

        scan_time = time.time() - start_time
        logger.debug("Process scan for %r completed in %.3fs, found %d", name, scan_time, len(matches))
        return matches


__all__ = ["PsutilProcessSource", "interpreter_script", "is_interpreter", "process_matches"]
