"""Game session — arrow-key moves, the blank tracker, and the won phase."""

from __future__ import annotations

from collections import Counter

import pytest

from backend.config import BLANK
from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import Phase
from backend.models.board import Board, Direction


@pytest.mark.parametrize(
    ("direction", "blank_after", "moved_label"),
    [
        (Direction.UP, (1, 2), "I"),
        (Direction.DOWN, (1, 0), "B"),
        (Direction.LEFT, (2, 1), "F"),
        (Direction.RIGHT, (0, 1), "E"),
    ],
)
def test_tile_slides_toward_the_arrow(
    centre_blank_board: Board,
    direction: Direction,
    blank_after: tuple[int, int],
    moved_label: str,
) -> None:
    game = GamePlay.from_board(centre_blank_board)

    assert game.move(direction)
    assert game.state.empty_pos == blank_after
    assert centre_blank_board.find_empty() == blank_after
    assert centre_blank_board.get_tile(1, 1).label == moved_label


def test_up_then_down_restores_the_grid(centre_blank_board: Board) -> None:
    before = [row[:] for row in centre_blank_board.tiles]
    game = GamePlay.from_board(centre_blank_board)

    assert game.move(Direction.UP)
    assert game.move(Direction.DOWN)

    assert centre_blank_board.tiles == before
    assert all(
        a is b
        for row_before, row_after in zip(before, centre_blank_board.tiles)
        for a, b in zip(row_before, row_after)
    )
    assert game.state.empty_pos == (1, 1)


@pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
def test_moves_off_the_board_are_ignored(
    solved_board: Board, direction: Direction
) -> None:
    # The blank starts in the bottom-right corner: nothing below or right
    game = GamePlay.from_board(solved_board)
    before = solved_board.labels()

    assert not game.move(direction)
    assert solved_board.labels() == before
    assert game.state.moves == 0


def test_down_with_blank_in_top_row_is_ignored() -> None:
    labels = [" ", *"ABCDEFGHIJKLMNO"]
    board = Board.from_labels(4, 4, labels)
    game = GamePlay.from_board(board)

    assert not game.move(Direction.DOWN)
    assert board.labels() == labels


def test_every_move_keeps_a_single_blank(centre_blank_board: Board) -> None:
    game = GamePlay.from_board(centre_blank_board)
    sequence = [Direction.UP, Direction.UP, Direction.LEFT, Direction.DOWN,
                Direction.RIGHT, Direction.RIGHT, Direction.DOWN]

    for direction in sequence:
        game.move(direction)
        assert Counter(centre_blank_board.labels())[BLANK] == 1
        assert centre_blank_board.find_empty() == game.state.empty_pos


def test_winning_move_enters_won_phase(one_move_board: Board) -> None:
    game = GamePlay.from_board(one_move_board)
    assert not game.check_won()

    assert game.move(Direction.LEFT)
    assert game.check_won()
    assert game.state.phase is Phase.WON


def test_no_moves_after_winning(solved_board: Board) -> None:
    game = GamePlay.from_board(solved_board)
    assert game.check_won()

    assert not game.move(Direction.DOWN)
    assert solved_board.is_solved()


def test_won_phase_is_not_entered_until_checked(one_move_board: Board) -> None:
    game = GamePlay.from_board(one_move_board)
    game.move(Direction.LEFT)

    assert game.board.is_solved()
    assert not game.is_won


def test_new_session_tracks_the_generated_blank() -> None:
    game = GamePlay(seed=99)
    assert game.state.empty_pos == game.board.find_empty()
    assert game.state.phase is Phase.PLAYING


def test_solvable_session_starts_unsolved() -> None:
    game = GamePlay(seed=5, solvable=True)
    assert not game.board.is_solved()
