# process.py
# The single place that spawns external programs. Everything else calls
# invoke() so tests can swap it out in one spot.

from __future__ import annotations

import os
import subprocess
from typing import Mapping, Optional, Sequence

from .errors import SubprocessFailure


TOOL_HINTS = {
    "cargo": "Install Rust (https://rustup.rs) or fix PATH.",
    "grcov": "Perhaps you need to run 'cargo install grcov'.",
    "genhtml": "Install lcov (provides genhtml) or fix PATH.",
}

# cargo plugins that are not shipped with cargo itself
CARGO_PLUGIN_HINTS = {
    "deny": "Perhaps you need to run 'cargo install cargo-deny'.",
    "semver-checks": "Perhaps you need to run 'cargo install cargo-semver-checks'.",
    "outdated": "Perhaps you need to run 'cargo install cargo-outdated'.",
}


def _hint_for(cmd: Sequence[str], started: bool) -> Optional[str]:
    tool = cmd[0]
    if not started:
        return TOOL_HINTS.get(tool, f"Install {tool} or fix PATH.")
    if tool == "cargo":
        for arg in cmd[1:]:
            if not arg.startswith("-"):
                return CARGO_PLUGIN_HINTS.get(arg)
    return None


def invoke(
    command: str,
    args: Sequence[str] = (),
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Run `command args...` to completion, streaming its output to the terminal.

    Args:
        command: executable name, looked up on PATH
        args: arguments passed verbatim
        env: overrides merged on top of a copy of os.environ

    Raises:
        SubprocessFailure: the process could not be started or exited non-zero
    """
    cmd = [command, *args]

    full_env = os.environ.copy()
    full_env.update(env or {})

    try:
        proc = subprocess.run(cmd, shell=False, env=full_env)
    except OSError as e:
        raise SubprocessFailure(cmd, None, hint=_hint_for(cmd, started=False)) from e

    if proc.returncode != 0:
        raise SubprocessFailure(cmd, proc.returncode, hint=_hint_for(cmd, started=True))
