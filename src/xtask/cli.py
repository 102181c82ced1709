# cli.py
from __future__ import annotations

import sys

import click

from xtask.errors import InvalidArgument, SubprocessFailure, XtaskError
from xtask.model import Vars
from xtask.runner import run_tasks
from xtask.tasks import TASKS
from xtask.ui.console import Console, get_console, set_console


def _exit_code(error: XtaskError) -> int:
    """Propagate a child's exit status where there is a meaningful one."""
    if isinstance(error, SubprocessFailure) and error.exit_code and error.exit_code > 0:
        return error.exit_code
    return 1


def _report(error: XtaskError) -> None:
    details = [f"{k}: {v}" for k, v in error.details.items() if k != "hint"]
    get_console().print_error(
        error.kind.replace("_", " ").capitalize(),
        error.message,
        details=details or None,
        suggestion=error.hint,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, default=False, help="Pass --verbose to every cargo invocation")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.argument("tasks", nargs=-1)
def cli(verbose, debug, tasks):
    """Run project tasks: before-pr, lints, coverage and friends."""
    console = Console(debug=debug)
    set_console(console)

    for name in tasks:
        if name not in TASKS:
            _report(InvalidArgument(name))
            sys.exit(1)

    if not tasks:
        console.print_missing_action(TASKS.names())
        sys.exit(1)

    try:
        vars = Vars.from_env(verbose=verbose)
        console.print_debug(f"cwd={vars.cwd} target_dir={vars.target_dir}")
        run_tasks(tasks, vars)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except XtaskError as e:
        _report(e)
        if debug:
            console.print_exception(e)
        sys.exit(_exit_code(e))
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
