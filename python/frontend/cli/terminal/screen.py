"""Cell-addressed terminal screen backed by ``curses``.

The rest of the terminal frontend talks to the :class:`Screen` protocol
only, so tests can swap in an in-memory screen.
"""

from __future__ import annotations

import curses
import locale
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from rich.cells import get_character_cell_size


class TerminalInitError(RuntimeError):
    """The terminal could not be put into full-screen mode."""


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class KeyEvent:
    key: Key


Event = ResizeEvent | KeyEvent


class Screen(Protocol):
    def init(self) -> None: ...

    def fini(self) -> None: ...

    def clear(self) -> None: ...

    def set_content(self, x: int, y: int, ch: str, combining: str = "") -> None: ...

    def show(self) -> None: ...

    def sync(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def poll_event(self) -> Event | None: ...


def emit_str(screen: Screen, x: int, y: int, text: str) -> None:
    """Write *text* from (x, y) rightwards, honouring wide characters."""
    for ch in text:
        width = get_character_cell_size(ch)
        if width == 0:
            screen.set_content(x, y, " ", combining=ch)
            width = 1
        else:
            screen.set_content(x, y, ch)
        x += width


# -- curses implementation ----------------------------------------------------

_ESCAPE = 27

_KEY_MAP: dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    _ESCAPE: Key.ESCAPE,
}


class CursesScreen:
    """:class:`Screen` over the process's controlling terminal."""

    def __init__(self) -> None:
        self._stdscr: curses.window | None = None

    @property
    def window(self) -> curses.window:
        if self._stdscr is None:
            raise RuntimeError("Screen used before init().")
        return self._stdscr

    # -- lifecycle ------------------------------------------------------------

    def init(self) -> None:
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error as exc:
            raise TerminalInitError(f"Cannot set terminal locale: {exc}") from exc
        try:
            stdscr = curses.initscr()
        except curses.error as exc:
            raise TerminalInitError(f"Cannot initialise terminal: {exc}") from exc

        self._stdscr = stdscr
        try:
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            curses.set_escdelay(25)
            if curses.has_colors():
                curses.start_color()
                curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLACK)
                stdscr.bkgd(" ", curses.color_pair(1))
            try:
                curses.curs_set(0)
            except curses.error:
                # Some terminals cannot hide the cursor
                pass
        except curses.error as exc:
            self.fini()
            raise TerminalInitError(f"Cannot configure terminal: {exc}") from exc

    def fini(self) -> None:
        if self._stdscr is None:
            return
        self._stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self._stdscr = None

    # -- drawing --------------------------------------------------------------

    def clear(self) -> None:
        self.window.erase()

    def set_content(self, x: int, y: int, ch: str, combining: str = "") -> None:
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            return
        try:
            self.window.addstr(y, x, ch + combining)
        except curses.error:
            # curses refuses to write the bottom-right cell, but draws it
            pass

    def show(self) -> None:
        self.window.refresh()

    def sync(self) -> None:
        curses.update_lines_cols()
        self.window.resize(curses.LINES, curses.COLS)

    def size(self) -> tuple[int, int]:
        height, width = self.window.getmaxyx()
        return width, height

    # -- input ----------------------------------------------------------------

    def poll_event(self) -> Event | None:
        """Block until the next key or resize; ``None`` if the wait was interrupted."""
        try:
            ch = self.window.get_wch()
        except curses.error:
            return None
        if ch == curses.KEY_RESIZE:
            curses.update_lines_cols()
            width, height = self.size()
            return ResizeEvent(width, height)
        code = ord(ch) if isinstance(ch, str) else ch
        return KeyEvent(_KEY_MAP.get(code, Key.OTHER))
