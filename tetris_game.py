
"""
Game state engine: grid, active piece, tick loop, locking, line clears.

The game owns a TickTimer started at construction. The host feeds clock time
into advance(), which runs one update() per elapsed period. Once a freshly
spawned piece collides the game is over: the next tick stops the timer for
good and fires the on_game_over callback exactly once.
"""
import logging
import random
from typing import Callable, Mapping, Optional

from tetris_board import EMPTY, Grid, collide, create_grid, merge, sweep
from tetris_config import BLACK, CONFIG
from tetris_layout import compute_dims
from tetris_piece import SHAPES, Piece
from tetris_timer import TickTimer

log = logging.getLogger(__name__)


class TetrisGame:
    def __init__(self, canvas, config: Optional[Mapping] = None,
                 rng: Optional[random.Random] = None,
                 on_game_over: Optional[Callable[[], None]] = None):
        self.config = CONFIG if config is None else config
        self.dims = compute_dims(self.config)
        self.canvas = canvas
        self.rng = rng or random.Random()
        self.on_game_over = on_game_over
        self.rotation_check = bool(self.config.get("ROTATION_CHECK", True))

        self.grid = self.create_grid()
        self.current_piece = self.random_piece()
        self.game_over = False
        self._notified = False

        self.timer = TickTimer(1000.0 / self.config["FPS"])
        self.timer.start()

    # ---------- Setup ----------
    def create_grid(self) -> Grid:
        return create_grid(self.dims.cols, self.dims.rows)

    def random_piece(self) -> Piece:
        name = self.rng.choice(list(SHAPES))
        shape = SHAPES[name]
        cell = self.dims.cell
        # Centre horizontally, snapped down to a whole cell
        col = (self.dims.cols - len(shape[0])) // 2
        piece = Piece.create(col * cell, 0, shape, self.rng, cell)
        log.debug("spawned %s at column %d", name, col)
        return piece

    # ---------- Rules ----------
    def check_collision(self, dx: int, dy: int) -> bool:
        return collide(self.grid, self.current_piece, dx, dy)

    def place_piece(self):
        merge(self.grid, self.current_piece)
        log.debug("locked piece at %s", self.current_piece.cells())

    def clear_rows(self) -> int:
        cleared = sweep(self.grid)
        if cleared:
            log.info("cleared %d row(s)", cleared)
        return cleared

    # ---------- Input actions ----------
    def move_piece(self, dx: int, dy: int) -> bool:
        """Move the active piece if the target position is free."""
        if self.game_over or self.check_collision(dx, dy):
            return False
        self.current_piece.move(dx, dy)
        return True

    def rotate_piece(self) -> bool:
        """Rotate the active piece.

        With ROTATION_CHECK enabled a rotation that lands on a wall, the
        floor or a locked cell is reverted; otherwise it is always applied.
        """
        if self.game_over:
            return False
        piece = self.current_piece
        previous = piece.shape
        piece.rotate()
        if self.rotation_check and self.check_collision(0, 0):
            piece.shape = previous
            return False
        return True

    # ---------- Loop ----------
    def advance(self, elapsed_ms: float):
        """Run one update() per tick that elapsed on the host clock."""
        for _ in range(self.timer.advance(elapsed_ms)):
            if self.timer.stopped:
                break
            self.update()

    def update(self):
        if self.game_over:
            self.timer.stop()
            if not self._notified:
                self._notified = True
                log.info("game over")
                if self.on_game_over:
                    self.on_game_over()
            return

        if not self.check_collision(0, 1):
            self.current_piece.move(0, 1)
        else:
            self.place_piece()
            self.clear_rows()
            self.current_piece = self.random_piece()
            if self.check_collision(0, 0):
                log.info("spawn blocked, topping out")
                self.game_over = True

        self.draw()

    def draw(self):
        cell = self.dims.cell
        for y, row in enumerate(self.grid):
            for x, color in enumerate(row):
                self.canvas.fill_rect(x * cell, y * cell, cell, cell,
                                      BLACK if color is EMPTY else color)
        self.current_piece.draw(self.canvas)
