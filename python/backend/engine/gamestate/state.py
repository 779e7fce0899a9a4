"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import Enum

from backend.models.board import Board


class Phase(Enum):
    PLAYING = "playing"
    WON = "won"


class GameState:
    """Holds the current board, the blank's position, and the game phase."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.empty_pos: tuple[int, int] = board.find_empty()
        self.moves: int = 0
        self.phase: Phase = Phase.PLAYING

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    # -- phase ----------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.phase is Phase.WON

    def mark_won(self) -> None:
        self.phase = Phase.WON
