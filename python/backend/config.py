"""Board dimensions, tile alphabet, and glyph constants."""

from __future__ import annotations

BOARD_WIDTH = 4
BOARD_HEIGHT = 4

LABELS = "ABCDEFGHIJKLMNO"
BLANK = " "

# Every tile is a 5×3 block of cells; the label sits in the middle of it.
TILE_WIDTH = 5
TILE_HEIGHT = 3
LABEL_INDEX = TILE_WIDTH + TILE_WIDTH // 2

UL_CORNER = "┌"
UR_CORNER = "┐"
LL_CORNER = "└"
LR_CORNER = "┘"
H_LINE = "─"
V_LINE = "│"

WIN_MESSAGE = "You Won!"
EXIT_HINT = "Press ESC to exit."


def alphabet(width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> list[str]:
    """Return the tile labels for a board: one letter per cell, blank last."""
    count = width * height - 1
    if count > len(LABELS):
        raise ValueError(
            f"A {width}×{height} board needs {count} labels, "
            f"only {len(LABELS)} are defined."
        )
    return [*LABELS[:count], BLANK]
