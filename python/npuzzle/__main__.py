"""N-Puzzle solver.

Usage::

    npuzzle                         # interactive menu on the default board
    npuzzle -a astar -H manhattan   # one search, then exit
    npuzzle -p prob3 -a bfs         # named reference board
    npuzzle -g "1,2,3;4,5,6;7,0,8"  # custom board
    npuzzle --tree                  # tree search, best-cost pruning, blank counted
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler

from npuzzle.config import DEFAULT_PROBLEM, PROBLEMS, SearchConfig, parse_grid, problem_matrix
from npuzzle.errors import InvalidInput
from npuzzle.frontend.cli import app as cli
from npuzzle.models.board import Board


class Algorithm(StrEnum):
    bfs = "bfs"
    greedy = "greedy"
    astar = "astar"


class HeuristicName(StrEnum):
    misplaced = "misplaced"
    manhattan = "manhattan"


ProblemName = StrEnum("ProblemName", {name: name for name in PROBLEMS})


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=cli.console, show_path=False)],
        force=True,
    )


def _load_board(problem: str, grid: Optional[str]) -> Board:
    matrix = parse_grid(grid) if grid is not None else problem_matrix(problem)
    return Board.from_matrix(matrix)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search to run. Omit for the interactive menu.",
    ),
    heuristic: HeuristicName = typer.Option(
        HeuristicName.manhattan, "-H", "--heuristic",
        help="Heuristic for greedy and A*.",
    ),
    problem: ProblemName = typer.Option(  # type: ignore[valid-type]
        ProblemName(DEFAULT_PROBLEM), "-p", "--problem",
        help="Named reference board.",
    ),
    grid: Optional[str] = typer.Option(
        None, "-g", "--grid",
        help='Custom board, rows separated by ";" e.g. "1,2,3;5,0,6;4,7,8".',
    ),
    tree: bool = typer.Option(
        False, "--tree",
        help="Tree search with best-cost pruning and blank-counting heuristics.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve the N-puzzle with BFS, greedy best-first or A* search."""
    _configure_logging(verbose)

    try:
        board = _load_board(str(problem), grid)
    except InvalidInput as e:
        cli.console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    if algorithm is None:
        try:
            cli.menu_loop(board, reference=tree)
        except (EOFError, KeyboardInterrupt):
            cli.console.print("\n[red]Input closed.[/red]")
            raise typer.Exit(code=1)
        return

    name = str(algorithm)
    h = str(heuristic)
    config = SearchConfig.reference(name, h) if tree else SearchConfig(algorithm=name, heuristic=h)
    cli.run_once(board, config)


if __name__ == "__main__":
    app()
