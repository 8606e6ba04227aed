from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Protocol


class ProcessHandle(Protocol):
    """Minimal contract for a process found in the snapshot."""

    pid: int
    name: str

    def terminate(self) -> None: ...


class ProcessSource(Protocol):
    """Anything that can enumerate processes by exact name."""

    def find_by_name(self, name: str) -> List[ProcessHandle]: ...


@dataclass
class PsutilProcessHandle:
    """Concrete handle backed by a ``psutil.Process``."""

    pid: int
    name: str
    process: Any = field(repr=False, compare=False)

    def terminate(self) -> None:
        self.process.terminate()
