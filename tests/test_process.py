"""Tests for process.invoke, using the running interpreter as the child."""

import os
import sys

import pytest

from xtask import process
from xtask.errors import SubprocessFailure


def test_success():
    process.invoke(sys.executable, ["-c", "pass"])


def test_non_zero_exit_is_fatal():
    with pytest.raises(SubprocessFailure) as excinfo:
        process.invoke(sys.executable, ["-c", "import sys; sys.exit(3)"])
    assert excinfo.value.exit_code == 3
    assert excinfo.value.cmd[0] == sys.executable


def test_env_overrides_reach_child_without_touching_parent():
    assert "XTASK_PROBE" not in os.environ
    process.invoke(
        sys.executable,
        ["-c", "import os, sys; sys.exit(0 if os.environ['XTASK_PROBE'] == '1' else 5)"],
        env={"XTASK_PROBE": "1"},
    )
    assert "XTASK_PROBE" not in os.environ


def test_inherits_parent_environment(monkeypatch):
    monkeypatch.setenv("XTASK_INHERITED", "yes")
    process.invoke(
        sys.executable,
        ["-c", "import os, sys; sys.exit(0 if os.environ.get('XTASK_INHERITED') == 'yes' else 5)"],
    )


def test_missing_executable_has_hint():
    with pytest.raises(SubprocessFailure) as excinfo:
        process.invoke("grcov-definitely-not-installed", ["."])
    err = excinfo.value
    assert err.exit_code is None
    assert "Install grcov-definitely-not-installed" in err.hint


def test_missing_known_tool_uses_tool_hint(monkeypatch):
    monkeypatch.setenv("PATH", "")
    with pytest.raises(SubprocessFailure) as excinfo:
        process.invoke("grcov", ["."])
    assert excinfo.value.hint == process.TOOL_HINTS["grcov"]


@pytest.mark.parametrize(
    "cmd, hint",
    [
        (["cargo", "deny", "check"], "cargo install cargo-deny"),
        (["cargo", "--verbose", "semver-checks"], "cargo install cargo-semver-checks"),
        (["cargo", "outdated", "--exit-code", "1"], "cargo install cargo-outdated"),
    ],
)
def test_cargo_plugin_hints(cmd, hint):
    assert hint in process._hint_for(cmd, started=True)


def test_builtin_cargo_subcommand_has_no_hint():
    assert process._hint_for(["cargo", "build", "--workspace"], started=True) is None
