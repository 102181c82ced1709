# dsl.py
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .model import Action, Call, Cargo, Run, Vars


# ---------------------------------------------------------------------
# Action helpers
# ---------------------------------------------------------------------

def cargo(command: str, *args: str) -> Cargo:
    """cargo("build", "--workspace") -> `cargo build --workspace`"""
    return Cargo(command=command, args=tuple(args))


def call(name: str, func: Callable[[Vars], None]) -> Call:
    return Call(name=name, func=func)


def run(task: str) -> Run:
    return Run(task=task)


# ---------------------------------------------------------------------
# Task table
# ---------------------------------------------------------------------

Task = Tuple[str, Tuple[Action, ...]]


class TaskTable:
    """
    Ordered, immutable list of (name, actions) pairs.

    Lookup is by name equality and the first match wins; duplicate names are
    allowed and simply shadowed.
    """

    def __init__(self, entries: Iterable[Tuple[str, Sequence[Action]]]):
        self._entries: Tuple[Task, ...] = tuple(
            (name, tuple(actions)) for name, actions in entries
        )

    def get(self, name: str) -> Optional[Tuple[Action, ...]]:
        for task_name, actions in self._entries:
            if task_name == name:
                return actions
        return None

    def names(self) -> List[str]:
        return [name for name, _ in self._entries]

    def __contains__(self, name: object) -> bool:
        return any(task_name == name for task_name, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def table(*entries: Tuple[str, Sequence[Action]]) -> TaskTable:
    return TaskTable(entries)
