"""Rich terminal frontend — tables, colours, and in-place animation.

Uses the ``rich`` library for styled output. Each test's board is drawn
as a table inside a ``Live`` display that is refreshed after every move,
so the transcript keeps one final frame per test.
"""

from __future__ import annotations

from collections.abc import Iterable

import rich.box
from rich.console import Console, Group
from rich.live import Live
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from backend.engine.grader import GradeReport, Grader
from backend.models.board import BLANK, Board
from backend.models.puzzlecase import PuzzleCase

console = Console(highlight=False)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.tiles)):
        table.add_column(width=1, justify="center")

    for row in board.rows():
        cells: list[str] = []
        for symbol in row:
            if symbol == BLANK:
                cells.append("[dim]·[/dim]")
            else:
                cells.append(f"[bold white]{symbol}[/bold white]")
        table.add_row(*cells)

    return table


def _render_frame(board: Board, solution: str, applied: str) -> Group:
    trail = Text()
    trail.append("Applied: ", style="dim")
    trail.append(applied, style="bold yellow")
    return Group(
        _render_board(board),
        Text(solution, style="cyan"),
        trail,
    )


def _banner(title: str) -> Text:
    return Text(f"----------[{title}]----------", style="bold white on red")


class RichRenderer:
    """Animates a grading run on a Rich console."""

    def __init__(self, console: Console = console) -> None:
        self.console = console
        self._live: Live | None = None
        self._solution = ""
        self._applied = ""

    def _finish(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    # -- frames ---------------------------------------------------------------

    def header(self, number: int) -> None:
        self._finish()
        self.console.print(_banner(f"Test #{number}"))

    def setup(self, board: Board, solution: str) -> None:
        self._solution = solution
        self._applied = ""
        self._live = Live(
            _render_frame(board, solution, self._applied),
            console=self.console,
            auto_refresh=False,
        )
        self._live.start(refresh=True)

    def update(self, board: Board, move: str) -> None:
        self._applied += move
        if self._live is None:
            self.console.print(_render_frame(board, self._solution, self._applied))
            return
        self._live.update(
            _render_frame(board, self._solution, self._applied), refresh=True
        )

    # -- verdicts -------------------------------------------------------------

    def malformed(self, error: str) -> None:
        self._finish()
        self.console.print(
            f"[red]Malformed test: {escape(error)} Skipping test...[/red]"
        )

    def skipped(self) -> None:
        self._finish()
        self.console.print(
            "[blue]Your output says it doesn't have a solution. "
            "Skipping test...[/blue]"
        )

    def claim_rejected(self) -> None:
        self._finish()
        self.console.print(
            "[red]Your output says it doesn't have a solution, "
            "but this board is solvable.[/red]"
        )

    def invalid_move(self, move: str) -> None:
        self._finish()
        self.console.print(
            f"[red]Invalid move [bold]{escape(repr(move))}[/bold]! Ending this test...[/red]"
        )

    def completed(self) -> None:
        self._finish()
        self.console.print("[green]Test completed[/green]")

    def incomplete(self) -> None:
        self._finish()
        self.console.print("[blue]Test incompleted[/blue]")

    def results(self, correct: int, total: int) -> None:
        self._finish()
        if correct == total:
            style = "bold green"
        elif correct == 0:
            style = "bold red"
        else:
            style = "bold blue"
        self.console.print(_banner("Results"))
        self.console.print(
            Text(
                f"Your results: {correct}/{total} tests successfully completed",
                style=style,
            )
        )

    def close(self) -> None:
        """Stop any live display so the cursor is shown again."""
        self._finish()


# -- public entry point -------------------------------------------------------


def run(
    cases: Iterable[PuzzleCase],
    delay: float = 1.0,
    verify_unsolvable: bool = False,
) -> GradeReport:
    """Grade *cases* on the Rich console."""
    grader = Grader(
        RichRenderer(),
        delay=delay,
        verify_unsolvable=verify_unsolvable,
    )
    return grader.run(cases)
