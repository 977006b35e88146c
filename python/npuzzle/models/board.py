"""Board model for the N-puzzle.

The board is logically immutable: every move is applied to a fresh copy
via :meth:`Board.apply`, so a board can be shared freely between search
nodes, the frontier and the explored set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.errors import IllegalMove, InvalidInput


class Action(StrEnum):
    """Direction the *blank* moves in.

    ``UP`` decreases the blank's row, ``DOWN`` increases it, ``LEFT``
    decreases its column and ``RIGHT`` increases it.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


# (row delta, col delta) of the blank, in the order actions are offered.
OFFSETS: dict[Action, tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}


@dataclass(eq=False)
class Board:
    """Represents a sliding puzzle configuration.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    ``path_cost`` counts the moves made from the root board and takes no
    part in equality or hashing.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: tuple[int, int]
    path_cost: int = field(default=0)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_matrix(cls, matrix: list[list[int]] | tuple[tuple[int, ...], ...]) -> Board:
        """Create a root board (path cost 0) from a literal matrix.

        Example::

            Board.from_matrix([[1, 2, 3], [5, 0, 6], [4, 7, 8]])
        """
        size = len(matrix)
        if size < 2:
            raise InvalidInput(f"A board needs at least 2 rows, got {size}.")
        tiles: list[list[int]] = []
        for r, row in enumerate(matrix):
            if len(row) != size:
                raise InvalidInput(
                    f"Row {r} has {len(row)} cells; expected {size} for a "
                    f"{size}×{size} board."
                )
            for v in row:
                if not isinstance(v, int) or isinstance(v, bool):
                    raise InvalidInput(f"Row {r} holds {v!r}; cells must be integers.")
            tiles.append(list(row))

        flat = [v for row in tiles for v in row]
        if sorted(flat) != list(range(size * size)):
            raise InvalidInput(
                f"A {size}×{size} board must hold each of 0..{size * size - 1} "
                f"exactly once, got {flat}."
            )
        index = flat.index(0)
        return cls(size=size, tiles=tiles, blank_pos=divmod(index, size))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidInput(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_matrix([list(flat[r * size : (r + 1) * size]) for r in range(size)])

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board: tiles in order, blank bottom-right."""
        return cls.from_flat(size, goal_flat(size))

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def fingerprint(self) -> tuple[int, ...]:
        """Row-major tuple of the tile values; equal iff the grids are equal."""
        return tuple(v for row in self.tiles for v in row)

    def legal_actions(self) -> list[Action]:
        """Actions that keep the blank on the board, in UP/DOWN/LEFT/RIGHT order."""
        br, bc = self.blank_pos
        actions: list[Action] = []
        for action, (dr, dc) in OFFSETS.items():
            if 0 <= br + dr < self.size and 0 <= bc + dc < self.size:
                actions.append(action)
        return actions

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile (the blank included) is in its goal position."""
        return goal_position(self.tiles[row][col], self.size) == (row, col)

    # -- moves ----------------------------------------------------------------

    def apply(self, action: Action) -> Board:
        """Return a new board with the blank moved by *action*.

        Raises :class:`IllegalMove` if the blank would leave the board.
        """
        if action not in self.legal_actions():
            raise IllegalMove(
                f"{action} is not legal with the blank at {self.blank_pos}."
            )
        child = self.copy()
        child.path_cost = self.path_cost + 1
        child._move(action)
        return child

    def _move(self, action: Action) -> None:
        # Only ever called on a fresh copy that has not escaped yet.
        dr, dc = OFFSETS[action]
        br, bc = self.blank_pos
        tr, tc = br + dr, bc + dc
        self.tiles[br][bc], self.tiles[tr][tc] = (
            self.tiles[tr][tc],
            self.tiles[br][bc],
        )
        self.blank_pos = (tr, tc)

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
            path_cost=self.path_cost,
        )

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.fingerprint())

    def __str__(self) -> str:
        width = len(str(self.size * self.size - 1))
        return "\n".join(" ".join(f"{v:>{width}}" for v in row) for row in self.tiles)


# -- goal layout --------------------------------------------------------------


def goal_flat(size: int) -> list[int]:
    """Row-major goal layout ``[1, 2, …, size²−1, 0]``."""
    return list(range(1, size * size)) + [0]


def goal_position(value: int, size: int) -> tuple[int, int]:
    """(row, col) that *value* occupies on the solved board."""
    if value == 0:
        return (size - 1, size - 1)
    return divmod(value - 1, size)
