# runner.py
from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Sequence

from . import process
from .dsl import TaskTable
from .errors import UnknownTask
from .model import Action, Call, Cargo, Run, Vars
from .tasks import TASKS
from .ui.console import get_console


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def cargo_cmd(command: str, args: Sequence[str], vars: Vars) -> None:
    get_console().print_command(command, args)
    # global cargo flags go before the subcommand so plugins never see them
    process.invoke("cargo", [*vars.verbose_arg(), command, *args])


def _lookup(table: TaskTable, name: str) -> tuple[Action, ...]:
    actions = table.get(name)
    if actions is None:
        raise UnknownTask(name, table.names())
    return actions


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def seed_queue(task_names: Iterable[str], table: TaskTable = TASKS) -> Deque[Action]:
    """
    Build the initial work queue from the requested tasks, in order.

    Every name is resolved before anything runs; a typo fails the whole run
    up front.
    """
    queue: Deque[Action] = deque()
    for name in task_names:
        queue.extend(_lookup(table, name))
    return queue


def run_tasks(
    task_names: Iterable[str],
    vars: Vars,
    *,
    table: TaskTable = TASKS,
) -> None:
    """
    Run the requested tasks to completion, depth-first.

    A `Run` action is replaced by the referenced task's actions at the front
    of the queue, so it completes before its enclosing task continues. Nested
    references are only resolved when reached; the first failure propagates.
    """
    console = get_console()
    queue = seed_queue(task_names, table)

    while queue:
        action = queue.popleft()
        console.print_debug(action.describe())

        if isinstance(action, Cargo):
            cargo_cmd(action.command, action.args, vars)
        elif isinstance(action, Call):
            action.func(vars)
        elif isinstance(action, Run):
            console.print_task_start(action.task)
            queue.extendleft(reversed(_lookup(table, action.task)))
        else:
            raise TypeError(f"Unknown action: {action!r}")
