"""Rich terminal frontend — menu, board, plan and statistics.

Mirrors the original menu program: pick an algorithm, pick a heuristic
for the informed ones, then see the board, the plan and a statistics
block with the search metrics, elapsed time and peak memory.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from collections.abc import Sequence
from dataclasses import dataclass

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.config import ALGORITHM_CHOICES, EXIT_CHOICE, SearchConfig
from npuzzle.engine.puzzle.heuristics import MENU_CHOICES
from npuzzle.engine.search.driver import SearchResult
from npuzzle.engine.search.strategies import get_strategy_class
from npuzzle.engine.solver import Solver
from npuzzle.errors import InvalidInput
from npuzzle.models import metrics as m
from npuzzle.models.board import Action, Board

logger = logging.getLogger(__name__)

console = Console()

NO_SOLUTION = "No solution available to be displayed."

_STAT_LABELS: dict[str, str] = {
    m.MAX_QUEUE_SIZE: "Maximum Queue Size",
    m.NODES_EXPANDED: "Nodes Expanded",
    m.PATH_COST: "Path Cost",
    m.QUEUE_SIZE: "Queue Size",
}


@dataclass
class RunReport:
    """A search result plus the resources it took."""

    result: SearchResult
    elapsed_ms: float
    memory_bytes: int


# -- helpers ------------------------------------------------------------------


def format_bytes(count: int, si: bool = True) -> str:
    """Render a byte count as ``"512 B"``, ``"1.5 kB"``, ``"2.0 MiB"`` …"""
    unit = 1000 if si else 1024
    if count < unit:
        return f"{count} B"
    prefixes = "kMGTPE" if si else "KMGTPE"
    value = float(count)
    exp = 0
    while value >= unit and exp < len(prefixes):
        value /= unit
        exp += 1
    suffix = prefixes[exp - 1] + ("" if si else "i")
    return f"{value:.1f} {suffix}B"


def timed_solve(board: Board, config: SearchConfig) -> RunReport:
    """Run the solver while measuring wall time and peak traced memory."""
    tracemalloc.start()
    start = time.perf_counter()
    try:
        result = Solver.solve(board, config)
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    return RunReport(result=result, elapsed_ms=elapsed_ms, memory_bytes=peak)


# -- rendering ----------------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _render_solution(actions: Sequence[Action], solved: bool) -> Panel:
    if not solved:
        body: Text | Table = Text(NO_SOLUTION, style="yellow")
    elif not actions:
        body = Text("Already solved.", style="green")
    else:
        body = Table(show_header=False, box=None, padding=(0, 1))
        body.add_column(justify="right", style="dim")
        body.add_column(style="bold cyan")
        for i, action in enumerate(actions, 1):
            body.add_row(f"{i}.", action.value)

    return Panel(body, title="[bold]Puzzle solution[/bold]", border_style="cyan", padding=(1, 2))


def _render_statistics(report: RunReport) -> Panel:
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")
    metrics = report.result.metrics
    for key in m.REPORTED_KEYS:
        table.add_row(_STAT_LABELS[key], metrics.get(key, "0"))
    table.add_row("Time Spent", f"{report.elapsed_ms:.0f} ms")
    table.add_row("Memory Usage", format_bytes(report.memory_bytes))
    return Panel(table, title="[bold]Statistics[/bold]", border_style="yellow", padding=(0, 2))


def show_report(board: Board, config: SearchConfig, report: RunReport) -> None:
    strategy = get_strategy_class(config.algorithm)
    title = strategy.description
    if strategy.informed and config.heuristic:
        title += f" · {config.heuristic}"

    console.print()
    console.print(
        Panel(
            Align.center(_render_board(board)),
            title=f"[bold cyan]{title}[/bold cyan]",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )
    console.print(_render_solution(report.result.actions, report.result.solved))
    console.print(_render_statistics(report))


def _draw_title() -> None:
    console.clear()
    console.print(
        Panel(
            Align.center(Text("N - P U Z Z L E", style="bold")),
            border_style="bright_blue",
        )
    )


# -- prompts ------------------------------------------------------------------


def _parse_choice(raw: str, valid: Sequence[str]) -> str:
    choice = raw.strip()
    if choice not in valid:
        raise InvalidInput(f"Invalid option {choice!r}.")
    return choice


def _read_choice(options: Sequence[str], question: str, valid: Sequence[str]) -> str:
    """Show *options* and re-prompt until one of *valid* is entered."""
    for line in options:
        console.print(f"  {line}")
    while True:
        try:
            return _parse_choice(console.input(f"\n  {question}"), valid)
        except InvalidInput:
            console.print("  [red]Invalid option. Try again![/red]")


def _algorithm_options() -> list[str]:
    lines = [
        f"[bold cyan]{key}[/bold cyan]  {get_strategy_class(name).description}"
        for key, name in ALGORITHM_CHOICES.items()
    ]
    lines.append(f"[bold cyan]{EXIT_CHOICE}[/bold cyan]  Exit")
    return lines


def _heuristic_options() -> list[str]:
    labels = {"misplaced": "Misplaced Pieces", "manhattan": "Manhattan Distance"}
    return [
        f"[bold cyan]{key}[/bold cyan]  {labels[name]}"
        for key, name in MENU_CHOICES.items()
    ]


# -- menu loop ----------------------------------------------------------------


def run_once(board: Board, config: SearchConfig) -> RunReport:
    report = timed_solve(board, config)
    show_report(board, config, report)
    return report


def menu_loop(board: Board, reference: bool = False) -> None:
    """Interactive loop; returns when the user picks *Exit*.

    Raises ``EOFError`` if stdin closes mid-prompt.
    """
    while True:
        _draw_title()
        console.print(Align.center(_render_board(board)))
        console.print()
        choice = _read_choice(
            _algorithm_options(),
            "Select an algorithm: ",
            [*ALGORITHM_CHOICES, EXIT_CHOICE],
        )
        if choice == EXIT_CHOICE:
            console.print("\n  [bold cyan]Goodbye![/bold cyan]\n")
            return

        algorithm = ALGORITHM_CHOICES[choice]
        heuristic = None
        if get_strategy_class(algorithm).informed:
            console.print("\n  [bold]Heuristic Functions[/bold]")
            heuristic = MENU_CHOICES[
                _read_choice(_heuristic_options(), "Select a heuristic: ", list(MENU_CHOICES))
            ]

        if reference:
            config = SearchConfig.reference(algorithm, heuristic)
        else:
            config = SearchConfig(algorithm=algorithm, heuristic=heuristic)
        logger.debug("Menu selection: %s", config)

        run_once(board, config)
        console.input("\n  [dim]Press Enter to continue ...[/dim]")
