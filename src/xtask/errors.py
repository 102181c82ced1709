# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence


@dataclass
class XtaskError(Exception):
    """
    Structured error with enough context for:
      - clean CLI output
      - a remediation hint where we can guess one
    """
    kind: str
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        lines = [f"{self.kind}: {self.message}"]
        for k, v in self.details.items():
            lines.append(f"{k}={v}")
        return "\n".join(lines)

    @property
    def hint(self) -> Optional[str]:
        return self.details.get("hint")


class InvalidArgument(XtaskError):
    def __init__(self, argument: str):
        super().__init__(
            kind="invalid_argument",
            message=f"Invalid argument {argument!r}",
        )
        self.argument = argument


class UnknownTask(XtaskError):
    def __init__(self, name: str, known: Sequence[str] = ()):
        details = {"known": ", ".join(known)} if known else {}
        super().__init__(
            kind="unknown_task",
            message=f"Unknown task {name!r}",
            details=details,
        )
        self.name = name


class SubprocessFailure(XtaskError):
    def __init__(self, cmd: Sequence[str], exit_code: Optional[int], hint: Optional[str] = None):
        if exit_code is None:
            message = f"Failed to run {cmd[0]}"
        else:
            message = f"{cmd[0]} exited with status {exit_code}"
        details = {"cmd": " ".join(cmd)}
        if hint:
            details["hint"] = hint
        super().__init__(kind="subprocess_failed", message=message, details=details)
        self.cmd = list(cmd)
        self.exit_code = exit_code


class FilesystemFailure(XtaskError):
    def __init__(self, path: Path, reason: str):
        super().__init__(
            kind="filesystem_failed",
            message=f"Failed to delete {path}",
            details={"reason": reason},
        )
        self.path = path
