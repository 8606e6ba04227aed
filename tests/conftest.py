"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import pytest

from sssd.lifecycle_config import APP_NAME_ENV, LOG_DIR_ENV, LOG_LEVEL_ENV, QUIET_ENV


class FakeProcess:
    """In-memory process handle for testing."""

    def __init__(self, pid: int, name: str, *, terminate_error: Optional[BaseException] = None):
        self.pid = pid
        self.name = name
        self.terminate_error = terminate_error
        self.terminate_calls = 0

    def terminate(self) -> None:
        self.terminate_calls += 1
        if self.terminate_error is not None:
            raise self.terminate_error


class FakeProcessSource:
    """Process table stub that records every lookup."""

    def __init__(self, processes: Iterable[FakeProcess] = ()):
        self.processes: List[FakeProcess] = list(processes)
        self.lookups: List[str] = []

    def add(self, pid: int, name: str, **kwargs) -> FakeProcess:
        proc = FakeProcess(pid, name, **kwargs)
        self.processes.append(proc)
        return proc

    def find_by_name(self, name: str) -> List[FakeProcess]:
        self.lookups.append(name)
        return [proc for proc in self.processes if proc.name == name]


@pytest.fixture(autouse=True)
def _isolate_sssd_env(monkeypatch):
    """Keep host SSSD_* settings out of tests."""
    for name in (APP_NAME_ENV, LOG_DIR_ENV, LOG_LEVEL_ENV, QUIET_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging so captured streams do not leak."""
    package_logger = logging.getLogger("sssd")
    level = package_logger.level
    yield
    for handler in list(package_logger.handlers):
        if handler.get_name() == "sssd-console":
            package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def process_source() -> FakeProcessSource:
    return FakeProcessSource()
