"""Board model for the letter-tile sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.config import alphabet
from backend.models.tile import Tile, build_tile


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


NOT_FOUND = (-1, -1)


def solved_arrangement(width: int, height: int) -> list[list[str]]:
    """Return the goal labels, row-major, blank in the bottom-right corner."""
    labels = alphabet(width, height)
    return [labels[y * width : (y + 1) * width] for y in range(height)]


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored row-major: ``tiles[y][x]`` is the tile in screen
    column *x* of row *y*. Exactly one tile is blank.
    """

    width: int
    height: int
    tiles: list[list[Tile]]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_labels(cls, width: int, height: int, labels: list[str]) -> Board:
        """Create a board from a flat row-major label list.

        Example::

            Board.from_labels(2, 2, ["A", "B", "C", " "])
        """
        if len(labels) != width * height:
            raise ValueError(
                f"Expected {width * height} labels for a {width}×{height} board, "
                f"got {len(labels)}."
            )
        tiles = [
            [build_tile(label) for label in labels[y * width : (y + 1) * width]]
            for y in range(height)
        ]
        return cls(width=width, height=height, tiles=tiles)

    # -- queries --------------------------------------------------------------

    def get_tile(self, x: int, y: int) -> Tile:
        return self.tiles[y][x]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def labels(self) -> list[str]:
        """Return the tile labels as a flat row-major list."""
        return [tile.label for row in self.tiles for tile in row]

    def find_empty(self) -> tuple[int, int]:
        """Return the (x, y) position of the blank tile, or ``(-1, -1)``."""
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile.is_blank:
                    return x, y
        return NOT_FOUND

    def is_solved(self) -> bool:
        """Check if every tile carries its goal label."""
        goal = solved_arrangement(self.width, self.height)
        for y in range(self.height):
            for x in range(self.width):
                if self.tiles[y][x].label != goal[y][x]:
                    return False
        return True

    # -- mutation -------------------------------------------------------------

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Exchange the tiles at two positions. Bounds are the caller's job."""
        self.tiles[y1][x1], self.tiles[y2][x2] = (
            self.tiles[y2][x2],
            self.tiles[y1][x1],
        )
