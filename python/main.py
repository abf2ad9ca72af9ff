#!/usr/bin/env python3
"""8-Puzzle Solution Viewer.

Replays the solutions in OUTPUT_FILE against the boards in INPUT_FILE,
animating every move and printing how many tests were solved.

Usage::

    python main.py tests.in solutions.out             # Rich terminal
    python main.py tests.in solutions.out -f vanilla  # plain ANSI output
    python main.py tests.in solutions.out --delay 0   # no pacing
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperCommand

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.suite import SuiteFormatError, load_suite  # noqa: E402

err_console = Console(stderr=True, highlight=False)

# Process exit statuses. A malformed test count or undecodable file is
# reported with its own status; bad boards only fail their own case.
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2
EXIT_BAD_SUITE = 3


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _usage(prog: str) -> None:
    err_console.print(
        f"[red]Usage:\n{escape(prog)} testinput.in testoutput.out[/red]"
    )


# -- CLI entry point ----------------------------------------------------------


class ViewerCommand(TyperCommand):
    """Reports every command-line mistake with the usage exit status."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = EXIT_USAGE
            raise


app = typer.Typer(add_completion=False)


@app.command(cls=ViewerCommand)
def main(
    files: Optional[list[Path]] = typer.Argument(
        None,
        metavar="INPUT_FILE OUTPUT_FILE",
        show_default=False,
        help="Test boards file and candidate solutions file.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Terminal frontend used for the animation.",
    ),
    delay: float = typer.Option(
        1.0, "-d", "--delay",
        min=0.0,
        envvar="PUZZLE_VIEWER_DELAY",
        help="Seconds to pause between animation frames.",
    ),
    verify_unsolvable: bool = typer.Option(
        False, "--verify-unsolvable",
        help="Reject 'unsolvable' answers for boards that can be solved.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every applied move to stderr.",
    ),
) -> None:
    """8-Puzzle Solution Viewer."""
    _configure_logging(verbose)

    if not files or len(files) != 2:
        _usage(Path(sys.argv[0]).name)
        raise typer.Exit(code=EXIT_USAGE)

    tests_path, solutions_path = files
    try:
        cases = load_suite(tests_path, solutions_path)
    except OSError as exc:
        err_console.print(f"Failed to open input and output files: {escape(str(exc))}")
        raise typer.Exit(code=EXIT_OPEN_FAILED)
    except SuiteFormatError as exc:
        err_console.print(f"[red]Malformed test file:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_BAD_SUITE)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(cases=cases, delay=delay, verify_unsolvable=verify_unsolvable)


if __name__ == "__main__":
    app()
