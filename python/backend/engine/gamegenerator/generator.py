"""Generates starting boards: shuffled, ordered, or scrambled by moves."""

from __future__ import annotations

import logging
import random
import time

from backend.config import BOARD_HEIGHT, BOARD_WIDTH, alphabet
from backend.models.board import Board

logger = logging.getLogger(__name__)


def make_rng(seed: int | None) -> random.Random:
    """Return a private RNG; a missing seed is taken from the wall clock."""
    if seed is None:
        seed = time.time_ns()
    logger.debug("Seeding shuffle with %d", seed)
    return random.Random(seed)


class GameGenerator:
    """Creates starting layouts for a game session."""

    @staticmethod
    def ordered(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> Board:
        """Return the goal-state board (labels in order, blank bottom-right)."""
        return Board.from_labels(width, height, alphabet(width, height))

    @staticmethod
    def generate(
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        seed: int | None = None,
    ) -> Board:
        """Return a board with the labels in uniformly random order.

        Not every permutation is reachable from the goal state; use
        :meth:`generate_solvable` when that matters.
        """
        labels = alphabet(width, height)
        make_rng(seed).shuffle(labels)
        return Board.from_labels(width, height, labels)

    @staticmethod
    def scramble(board: Board, rng: random.Random) -> None:
        """Scramble *board* in-place using random valid moves."""
        num_shuffles = board.width * board.height * 100
        prev_pos: tuple[int, int] | None = None
        blank_pos = board.find_empty()

        for _ in range(num_shuffles):
            neighbors = GameGenerator._get_neighbors(board, blank_pos)
            if prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = blank_pos
            board.swap(*blank_pos, *target)
            blank_pos = target

    @staticmethod
    def generate_solvable(
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        seed: int | None = None,
    ) -> Board:
        """Return a random board reachable from the goal state."""
        rng = make_rng(seed)
        board = GameGenerator.ordered(width, height)
        GameGenerator.scramble(board, rng)

        # A scramble can wander back to the goal state
        while board.is_solved():
            GameGenerator.scramble(board, rng)

        return board

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _get_neighbors(
        board: Board, blank_pos: tuple[int, int]
    ) -> list[tuple[int, int]]:
        bx, by = blank_pos
        neighbors: list[tuple[int, int]] = []
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nx, ny = bx + dx, by + dy
            if board.in_bounds(nx, ny):
                neighbors.append((nx, ny))
        return neighbors
