"""Run the host application's workload in the foreground."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from ..errors import WorkloadError

logger = logging.getLogger(__name__)

Workload = Callable[[], Awaitable[Any]]


async def run_workload(workload: Workload, *, app_name: str) -> None:
    """Await *workload*; an exception or an explicit ``False`` result is a failure.

    Raises:
        WorkloadError: If the workload fails
    """
    logger.debug("Starting workload for %s", app_name)
    try:
        result = await workload()
    except Exception as exc:
        raise WorkloadError.failed(app_name, exc) from exc

    if result is False:
        raise WorkloadError.failed(app_name)
    logger.debug("Workload for %s finished", app_name)


__all__ = ["Workload", "run_workload"]
