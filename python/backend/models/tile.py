"""Tile glyphs: a 5×3 block of terminal cells with a bordered label."""

from __future__ import annotations

from dataclasses import dataclass

from backend.config import (
    BLANK,
    H_LINE,
    LABEL_INDEX,
    LL_CORNER,
    LR_CORNER,
    TILE_HEIGHT,
    TILE_WIDTH,
    UL_CORNER,
    UR_CORNER,
    V_LINE,
)


@dataclass(frozen=True)
class Tile:
    """A tile's cells, row-major, ``TILE_WIDTH * TILE_HEIGHT`` of them."""

    cells: tuple[str, ...]

    @property
    def label(self) -> str:
        return self.cells[LABEL_INDEX]

    @property
    def is_blank(self) -> bool:
        return self.label == BLANK

    def rows(self) -> list[str]:
        """Return the tile as ``TILE_HEIGHT`` strings of ``TILE_WIDTH`` cells."""
        return [
            "".join(self.cells[r * TILE_WIDTH : (r + 1) * TILE_WIDTH])
            for r in range(TILE_HEIGHT)
        ]


def _glyph(label: str, col: int, row: int) -> str:
    last_col = TILE_WIDTH - 1
    last_row = TILE_HEIGHT - 1
    middle = TILE_HEIGHT // 2

    if row in (0, last_row):
        if col == 0:
            return UL_CORNER if row == 0 else LL_CORNER
        if col == last_col:
            return UR_CORNER if row == 0 else LR_CORNER
        return H_LINE
    if row == middle:
        if col in (0, last_col):
            return V_LINE
        if col == TILE_WIDTH // 2:
            return label
    return BLANK


def build_tile(label: str) -> Tile:
    """Build the glyph block for *label*.

    The blank label yields a block of blank cells; any other label gets
    a line-drawn border with the label in the centre cell.
    """
    if label == BLANK:
        return Tile(cells=(BLANK,) * (TILE_WIDTH * TILE_HEIGHT))
    return Tile(
        cells=tuple(
            _glyph(label, col, row)
            for row in range(TILE_HEIGHT)
            for col in range(TILE_WIDTH)
        )
    )
