"""Map command-line arguments to a lifecycle action."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Action(str, Enum):
    STATUS = "status"
    START = "start"
    STOP = "stop"
    DAEMON = "daemon"
    HELP = "help"


KEYWORD_ACTIONS = {
    Action.STATUS.value: Action.STATUS,
    Action.START.value: Action.START,
    Action.STOP.value: Action.STOP,
    Action.DAEMON.value: Action.DAEMON,
}


def select_action(args: Iterable[str]) -> Action:
    """Return the action named by the first recognized keyword, or ``HELP``.

    argv[0] is scanned like any other token.
    """
    for arg in args:
        action = KEYWORD_ACTIONS.get(arg)
        if action is not None:
            return action
    return Action.HELP


__all__ = ["Action", "KEYWORD_ACTIONS", "select_action"]
