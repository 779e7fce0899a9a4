"""Shared fixtures: an in-memory screen and a few known boards."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from backend.config import BLANK, alphabet
from backend.models.board import Board
from frontend.cli.terminal.screen import Event, Key, KeyEvent, ResizeEvent


class FakeScreen:
    """Records drawn cells and replays a scripted list of events.

    Once the script runs out every poll returns Escape, so loops driven
    by this screen always terminate.
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 24,
        events: Iterable[Event | None] = (),
    ) -> None:
        self.width = width
        self.height = height
        self.events = list(events)
        self.cells: dict[tuple[int, int], str] = {}
        self.clears = 0
        self.shows = 0
        self.syncs = 0
        self.initialised = False
        self.finished = False

    def init(self) -> None:
        self.initialised = True

    def fini(self) -> None:
        self.finished = True

    def clear(self) -> None:
        self.cells.clear()
        self.clears += 1

    def set_content(self, x: int, y: int, ch: str, combining: str = "") -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = ch + combining

    def show(self) -> None:
        self.shows += 1

    def sync(self) -> None:
        self.syncs += 1

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def poll_event(self) -> Event | None:
        if not self.events:
            return KeyEvent(Key.ESCAPE)
        event = self.events.pop(0)
        if isinstance(event, ResizeEvent):
            self.width, self.height = event.width, event.height
        return event

    # -- inspection -----------------------------------------------------------

    def char_at(self, x: int, y: int) -> str:
        return self.cells.get((x, y), BLANK)

    def text_at(self, x: int, y: int, length: int) -> str:
        return "".join(self.char_at(x + i, y) for i in range(length))

    def contains(self, text: str) -> bool:
        return any(
            self.text_at(x, y, len(text)) == text
            for (x, y) in list(self.cells)
        )


@pytest.fixture
def make_screen() -> Callable[..., FakeScreen]:
    return FakeScreen


@pytest.fixture
def solved_board() -> Board:
    return Board.from_labels(4, 4, alphabet(4, 4))


@pytest.fixture
def one_move_board() -> Board:
    """Solved except that the blank and ``O`` are swapped."""
    labels = alphabet(4, 4)
    labels[-2], labels[-1] = labels[-1], labels[-2]
    return Board.from_labels(4, 4, labels)


@pytest.fixture
def centre_blank_board() -> Board:
    """Blank at (1, 1); every direction is a legal move."""
    labels = alphabet(4, 4)
    labels.remove(BLANK)
    labels.insert(5, BLANK)
    return Board.from_labels(4, 4, labels)
