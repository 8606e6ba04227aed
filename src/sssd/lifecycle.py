"""
Lifecycle dispatcher

Gives a host application a ``status | start | stop | daemon`` command line.
The first recognized keyword in the arguments selects the action; anything else
prints a usage line.

Usage:
    import sssd

    async def main() -> None:
        ...

    if __name__ == "__main__":
        sssd.run(main)
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import ConfigurationError
from .errors import LifecycleError
from .executable import executable_name_from_path, resolve_executable_path, warn_if_name_truncated
from .lifecycle_config import LifecycleConfig
from .lifecycle_helpers import (
    Action,
    Workload,
    check_status,
    launch_daemon,
    run_workload,
    select_action,
    stop_instances,
)
from .lifecycle_helpers.console import console
from .logging_config import setup_logging
from .process_helpers import ProcessSource, PsutilProcessSource

logger = logging.getLogger(__name__)


def help_message(app_name: str) -> str:
    return f"Help: ./{app_name} status | start | stop | daemon"


async def dispatch(
    action: Action,
    workload: Workload,
    *,
    app_name: str,
    executable_path: Path,
    process_source: ProcessSource,
    config: LifecycleConfig,
) -> None:
    """Execute a single already-selected action.

    Raises:
        LifecycleError: On workload, log file or spawn failure
    """
    logger.debug("Dispatching %s for %s", action.value, app_name)

    if action is Action.STATUS:
        report = check_status(app_name, process_source)
        console(report.message, quiet=config.quiet)
    elif action is Action.STOP:
        stop_instances(app_name, process_source, quiet=config.quiet)
    elif action is Action.DAEMON:
        launch_daemon(app_name, executable_path, process_source, config=config)
    elif action is Action.START:
        await run_workload(workload, app_name=app_name)
    else:
        console(help_message(app_name), quiet=config.quiet)


def _fatal(exc: BaseException) -> SystemExit:
    message = str(exc)
    logger.debug("Fatal %s: %s", type(exc).__name__, message)
    sys.stderr.write(message + "\n")
    return SystemExit(1)


async def create(
    workload: Workload,
    argv: Optional[Sequence[str]] = None,
    *,
    process_source: Optional[ProcessSource] = None,
    config: Optional[LifecycleConfig] = None,
) -> None:
    """Resolve the executable, select the action from *argv* and run it.

    Fatal failures print a message to stderr and raise ``SystemExit(1)``.

    Args:
        workload: Zero-argument coroutine function run by ``start``
        argv: Full argument list including argv[0]; defaults to ``sys.argv``
        process_source: Process snapshot provider; defaults to psutil
        config: Settings; defaults to ``LifecycleConfig.from_env()``
    """
    if argv is None:
        argv = list(sys.argv)

    try:
        if config is None:
            config = LifecycleConfig.from_env()
        setup_logging(config.log_level)

        executable_path = resolve_executable_path(argv)
        app_name = config.app_name or executable_name_from_path(executable_path)
        warn_if_name_truncated(app_name)

        await dispatch(
            select_action(argv),
            workload,
            app_name=app_name,
            executable_path=executable_path,
            process_source=process_source if process_source is not None else PsutilProcessSource(),
            config=config,
        )
    except (LifecycleError, ConfigurationError) as exc:
        raise _fatal(exc) from exc


def run(
    workload: Workload,
    argv: Optional[Sequence[str]] = None,
    *,
    process_source: Optional[ProcessSource] = None,
    config: Optional[LifecycleConfig] = None,
) -> None:
    """Synchronous entry point that owns the event loop.

    Raises:
        RuntimeError: If called while an event loop is already running.
    """

    try:
        asyncio.get_running_loop()
    except RuntimeError:  # Expected when called from synchronous context  # policy_guard: allow-silent-handler
        pass
    else:
        raise RuntimeError("sssd.run cannot run inside an active event loop. Use the async sssd.create API instead.")

    try:
        asyncio.run(create(workload, argv, process_source=process_source, config=config))
    except KeyboardInterrupt:  # Expected exception in operation  # policy_guard: allow-silent-handler
        logger.info("Workload interrupted by user")


__all__ = ["create", "dispatch", "help_message", "run"]
