# tetris_layout.py
from dataclasses import dataclass
from typing import Mapping, Optional
from tetris_config import CONFIG

@dataclass
class Dims:
    cell: int
    cols: int
    rows: int
    width: int
    height: int

def compute_dims(config: Optional[Mapping] = None) -> Dims:
    config = CONFIG if config is None else config
    cell = int(config["CELL_SIZE"])

    cols = int(config["WIDTH"]) // cell
    rows = int(config["HEIGHT"]) // cell

    return Dims(
        cell=cell, cols=cols, rows=rows,
        width=cols * cell, height=rows * cell
    )
