# tasks.py
from __future__ import annotations

from .dsl import call, cargo, run, table
from .step_workflows.coverage import run_html_coverage, run_lcov_coverage


TASKS = table(
    (
        "before-pr",
        [
            cargo("update"),
            run("lints"),
            run("build-all"),
            run("all-tests"),
            run("all-checks"),
        ],
    ),
    (
        "all-checks",
        [
            cargo("deny", "check"),
            cargo("semver-checks"),
            cargo("outdated", "--exit-code", "1"),
        ],
    ),
    (
        "lints",
        [
            cargo("fmt", "--check"),
            cargo("clippy", "--workspace"),
        ],
    ),
    (
        "build-all",
        [
            cargo("build", "--workspace"),
            cargo("build", "--workspace", "--tests"),
            cargo("build", "--workspace", "--release"),
        ],
    ),
    ("all-tests", [cargo("test", "--workspace")]),
    ("lcov-coverage", [call("lcov-coverage", run_lcov_coverage)]),
    ("html-coverage", [call("html-coverage", run_html_coverage)]),
)
