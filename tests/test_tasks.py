"""Tests for the task table and the action helpers."""

from xtask.dsl import TaskTable, call, cargo, run
from xtask.model import Call, Cargo, Run
from xtask.tasks import TASKS


class TestTaskTable:
    def test_names_in_table_order(self):
        assert TASKS.names() == [
            "before-pr",
            "all-checks",
            "lints",
            "build-all",
            "all-tests",
            "lcov-coverage",
            "html-coverage",
        ]

    def test_get_returns_actions(self):
        assert TASKS.get("lints") == (
            Cargo("fmt", ("--check",)),
            Cargo("clippy", ("--workspace",)),
        )

    def test_get_unknown_returns_none(self):
        assert TASKS.get("nope") is None
        assert "nope" not in TASKS
        assert "lints" in TASKS

    def test_before_pr_references_other_tasks(self):
        assert TASKS.get("before-pr") == (
            Cargo("update"),
            Run("lints"),
            Run("build-all"),
            Run("all-tests"),
            Run("all-checks"),
        )

    def test_all_checks(self):
        assert TASKS.get("all-checks") == (
            Cargo("deny", ("check",)),
            Cargo("semver-checks"),
            Cargo("outdated", ("--exit-code", "1")),
        )

    def test_coverage_tasks_are_leaf_calls(self):
        (lcov,) = TASKS.get("lcov-coverage")
        (html,) = TASKS.get("html-coverage")
        assert isinstance(lcov, Call) and lcov.name == "lcov-coverage"
        assert isinstance(html, Call) and html.name == "html-coverage"

    def test_first_match_wins_on_duplicate_names(self):
        t = TaskTable([("a", [cargo("first")]), ("a", [cargo("second")])])
        assert t.get("a") == (Cargo("first"),)
        assert t.names() == ["a", "a"]
        assert len(t) == 2


class TestHelpers:
    def test_cargo_collects_args(self):
        assert cargo("build", "--workspace", "--tests") == Cargo("build", ("--workspace", "--tests"))

    def test_describe(self):
        assert cargo("fmt", "--check").describe() == "cargo fmt --check"
        assert run("lints").describe() == "run lints"
        assert call("x", lambda v: None).describe() == "call x"
