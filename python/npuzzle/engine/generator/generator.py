"""Generates solvable N-puzzle boards."""

from __future__ import annotations

import random

from npuzzle.models.board import Action, Board


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def scramble(
        board: Board,
        moves: int,
        rng: random.Random | None = None,
    ) -> tuple[Board, list[Action]]:
        """Apply *moves* random legal moves to *board*, never undoing the previous one.

        Returns the scrambled board (as a new root, path cost 0) together
        with the moves that were made.
        """
        rng = rng or random.Random()
        history: list[Action] = []
        prev_pos: tuple[int, int] | None = None

        for _ in range(moves):
            candidates = board.legal_actions()
            if len(candidates) > 1:
                candidates = [
                    a for a in candidates if board.apply(a).blank_pos != prev_pos
                ]
            action = rng.choice(candidates)
            prev_pos = board.blank_pos
            board = board.apply(action)
            history.append(action)

        scrambled = board.copy()
        scrambled.path_cost = 0
        return scrambled, history

    @staticmethod
    def generate(size: int, moves: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable*, unsolved board of the given size.

        *moves* defaults to ``size * size * 10`` scrambling moves.
        """
        rng = random.Random(seed)
        moves = size * size * 10 if moves is None else moves
        board, _ = GameGenerator.scramble(GameGenerator.solved(size), moves, rng)

        # Ensure the board is not already solved
        while moves > 0 and board.is_goal():
            board, _ = GameGenerator.scramble(board, moves, rng)

        return board
