"""Solvability check for sliding puzzle layouts."""

from __future__ import annotations

from bisect import bisect_left, insort

from backend.config import LABELS
from backend.models.board import Board


class Solver:
    """Stateless helpers — all methods are static."""

    @staticmethod
    def inversions(board: Board) -> int:
        """Count label pairs that appear out of goal order, ignoring the blank."""
        order = {label: i for i, label in enumerate(LABELS)}
        ranks = [order[label] for label in board.labels() if label in order]
        inv = 0
        seen: list[int] = []
        for v in ranks:
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        return inv

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        inv = Solver.inversions(board)
        if board.width % 2 == 1:
            return inv % 2 == 0
        _, blank_y = board.find_empty()
        blank_from_bottom = board.height - 1 - blank_y
        return (inv + blank_from_bottom) % 2 == 0
