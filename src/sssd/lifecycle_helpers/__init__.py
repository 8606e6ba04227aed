"""Action handlers for the lifecycle dispatcher."""

from .action_selector import Action, select_action
from .daemon_launcher import launch_daemon
from .start_handler import Workload, run_workload
from .status_checker import StatusReport, check_status
from .stop_handler import stop_instances

__all__ = [
    "Action",
    "StatusReport",
    "Workload",
    "check_status",
    "launch_daemon",
    "run_workload",
    "select_action",
    "stop_instances",
]
