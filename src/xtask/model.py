# model.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Tuple, Union


@dataclass(frozen=True)
class Vars:
    """Execution context shared (read-only) by every action of a run."""
    cwd: Path
    target_dir: Path
    verbose: bool = False

    @classmethod
    def from_env(cls, *, verbose: bool = False) -> "Vars":
        """
        Resolve the context from the current process.

        `target_dir` comes from CARGO_TARGET_DIR, falling back to ./target.
        Both paths are made absolute; the target dir does not need to exist yet.
        """
        cwd = Path.cwd().resolve()
        target_dir = Path(os.environ.get("CARGO_TARGET_DIR") or "target")
        return cls(cwd=cwd, target_dir=(cwd / target_dir).resolve(), verbose=verbose)

    def verbose_arg(self) -> list[str]:
        return ["--verbose"] if self.verbose else []


@dataclass(frozen=True)
class Cargo:
    """Invoke a cargo subcommand with fixed arguments."""
    command: str
    args: Tuple[str, ...] = ()

    def describe(self) -> str:
        return " ".join(["cargo", self.command, *self.args])


@dataclass(frozen=True)
class Call:
    """Invoke a built-in leaf operation with the run's Vars."""
    name: str
    func: Callable[[Vars], None]

    def describe(self) -> str:
        return f"call {self.name}"


@dataclass(frozen=True)
class Run:
    """Expand another task in place."""
    task: str

    def describe(self) -> str:
        return f"run {self.task}"


Action = Union[Cargo, Call, Run]
