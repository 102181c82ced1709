"""Shared fixtures: a recording stand-in for process.invoke and a Vars."""

from __future__ import annotations

import pytest

from xtask import process
from xtask.errors import SubprocessFailure
from xtask.model import Vars


class InvokeRecorder:
    def __init__(self):
        self.calls: list[tuple[str, list[str], dict]] = []
        self.fail_on: dict[tuple[str, ...], int] = {}

    def __call__(self, command, args=(), env=None):
        cmd = (command, *args)
        self.calls.append((command, list(args), dict(env or {})))
        if cmd in self.fail_on:
            raise SubprocessFailure(list(cmd), self.fail_on[cmd])

    def cargo_args(self) -> list[list[str]]:
        return [args for command, args, _ in self.calls if command == "cargo"]

    def commands(self) -> list[str]:
        return [command for command, _, _ in self.calls]


@pytest.fixture
def invoke(monkeypatch):
    recorder = InvokeRecorder()
    monkeypatch.setattr(process, "invoke", recorder)
    return recorder


@pytest.fixture
def vars(tmp_path):
    return Vars(cwd=tmp_path, target_dir=tmp_path / "target")
