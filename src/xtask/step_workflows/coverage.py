# step_workflows/coverage.py
from __future__ import annotations

import shutil
from pathlib import Path

from .. import process
from ..errors import FilesystemFailure
from ..model import Vars
from ..ui.console import get_console


# ---------------------------------------------------------------------
# grcov / genhtml helpers
# ---------------------------------------------------------------------

def grcov(target_dir: Path, fmt: str, build_type: str) -> None:
    """Aggregate raw profiles under `target_dir` into `<target_dir>/<fmt>`."""
    process.invoke(
        "grcov",
        [
            ".",
            "--binary-path", str(target_dir / build_type / "deps"),
            "-s", ".",
            "-t", fmt,
            "--branch",
            "--ignore-not-existing",
            "-o", str(target_dir / fmt),
            "--keep-only", "src/*",
            "--keep-only", "derive/src/*",
        ],
    )


def genhtml(target_dir: Path) -> None:
    process.invoke(
        "genhtml",
        [
            "-o", str(target_dir / "html2"),
            "--show-details",
            "--highlight",
            "--ignore-errors", "source",
            "--legend", str(target_dir / "lcov"),
        ],
    )


def _build_type_args(build_type: str) -> list[str]:
    if build_type == "release":
        return ["--release"]
    if build_type == "debug":
        return []
    raise ValueError(f"Unknown build type: {build_type!r}")


def _clean(target_dir: Path) -> None:
    if not target_dir.is_dir():
        return
    get_console().print_debug(f"Removing stale {target_dir}")
    try:
        shutil.rmtree(target_dir)
    except OSError as e:
        raise FilesystemFailure(target_dir, str(e)) from e


# ---------------------------------------------------------------------
# Coverage run
# ---------------------------------------------------------------------

def code_coverage(vars: Vars, fmt: str, build_type: str = "debug") -> None:
    """
    Run the workspace tests instrumented and turn the profiles into a report.

    Layout under <target>/coverage-<fmt>:
      - cargo build output and *.profraw files
      - lcov            (always)
      - html, html2     (html only: grcov's report and genhtml's report)
    """
    if fmt not in ("lcov", "html"):
        raise ValueError(f"Unknown format {fmt!r}")
    build_args = _build_type_args(build_type)

    console = get_console()
    target_dir = vars.target_dir / f"coverage-{fmt}"
    _clean(target_dir)

    test_args = ["--workspace", *build_args]
    console.print_command("test", test_args)
    process.invoke(
        "cargo",
        [*vars.verbose_arg(), "test", *test_args],
        env={
            "CARGO_TARGET_DIR": str(target_dir),
            "CARGO_INCREMENTAL": "0",
            "RUSTFLAGS": "-Cinstrument-coverage",
            "LLVM_PROFILE_FILE": str(target_dir / "cargo-test-%p-%m.profraw"),
        },
    )

    if fmt == "lcov":
        grcov(target_dir, "lcov", build_type)
        return

    grcov(target_dir, "html", build_type)
    grcov(target_dir, "lcov", build_type)
    genhtml(target_dir)

    report_root = vars.cwd / target_dir
    console.print_info("Now open:")
    console.print_info(f"  file://{report_root}/html/index.html")
    console.print_info(f"  file://{report_root}/html2/index.html")


def run_lcov_coverage(vars: Vars) -> None:
    code_coverage(vars, "lcov")


def run_html_coverage(vars: Vars) -> None:
    code_coverage(vars, "html")
