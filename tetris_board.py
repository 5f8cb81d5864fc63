
"""Board helpers: create, collide, merge, sweep"""
from typing import List, Optional

from tetris_piece import Color, Piece

EMPTY = None

Grid = List[List[Optional[Color]]]

def create_grid(cols: int, rows: int) -> Grid:
    return [[EMPTY] * cols for _ in range(rows)]

def collide(grid: Grid, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    """Return True if piece shifted by (dx, dy) hits a wall, the floor or a locked cell.

    Cells above the top row are only checked against the side walls.
    """
    rows, cols = len(grid), len(grid[0])
    for bx, by in piece.cells(dx, dy):
        if bx < 0 or bx >= cols or by >= rows: return True
        if by >= 0 and grid[by][bx] is not EMPTY: return True
    return False

def merge(grid: Grid, piece: Piece):
    """Lock the piece into the grid using its colour (no collision check).

    Cells outside the grid are dropped.
    """
    rows, cols = len(grid), len(grid[0])
    for bx, by in piece.cells():
        if 0 <= by < rows and 0 <= bx < cols:
            grid[by][bx] = piece.color

def sweep(grid: Grid) -> int:
    """Clear full rows bottom-up and return how many were removed."""
    cols = len(grid[0])
    c = 0; y = len(grid) - 1
    while y >= 0:
        if all(cell is not EMPTY for cell in grid[y]):
            del grid[y]; grid.insert(0, [EMPTY] * cols); c += 1
        else: y -= 1
    return c
