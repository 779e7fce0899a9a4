from backend.models.board import Board, Direction
from backend.models.tile import Tile, build_tile

__all__ = ["Board", "Direction", "Tile", "build_tile"]
