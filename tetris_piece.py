
"""Piece model, shape catalog, rotation"""
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from tetris_config import CONFIG

Shape = Tuple[Tuple[int, ...], ...]
Color = Tuple[int, int, int]

SHAPES: Dict[str, Shape] = {
    "T": ((1,1,1),(0,1,0)),
    "L": ((1,0),(1,0),(1,1)),
    "J": ((0,1),(0,1),(1,1)),
    "I": ((1,1,1,1),),
    "O": ((1,1),(1,1)),
    "S": ((0,1,1),(1,1,0)),
    "Z": ((1,1,0),(0,1,1)),
}

def rotate_ccw(m: Shape) -> Shape:
    """Transpose, then reverse the row order. Returns a new shape."""
    return tuple(tuple(c) for c in zip(*m))[::-1]

def random_color(rng) -> Color:
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

@dataclass
class Piece:
    x: int
    y: int
    shape: Shape
    color: Color
    cell: int

    @staticmethod
    def create(x: int, y: int, shape: Shape, rng: Optional[random.Random] = None,
               cell: Optional[int] = None) -> "Piece":
        rng = rng or random
        cell = CONFIG["CELL_SIZE"] if cell is None else cell
        return Piece(x, y, tuple(tuple(r) for r in shape), random_color(rng), cell)

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self, dx: int = 0, dy: int = 0) -> List[Tuple[int, int]]:
        """Occupied (col, row) grid cells after a hypothetical (dx, dy) shift."""
        col0 = self.x // self.cell + dx
        row0 = self.y // self.cell + dy
        return [(col0 + c, row0 + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]

    def draw(self, canvas):
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    canvas.fill_rect(self.x + c * self.cell, self.y + r * self.cell,
                                     self.cell, self.cell, self.color)

    def rotate(self):
        self.shape = rotate_ccw(self.shape)

    def move(self, dx: int, dy: int):
        self.x += dx * self.cell
        self.y += dy * self.cell
