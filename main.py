
import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_game import TetrisGame
from tetris_input import KeyHandler
from tetris_layout import compute_dims
from tetris_overlay import GameOverOverlay
from tetris_render import SurfaceCanvas

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    return pygame.display.set_mode((dims.width, dims.height), flags, vsync=1)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 42)
    clock = pygame.time.Clock()

    overlay = GameOverOverlay()
    game = TetrisGame(SurfaceCanvas(screen), on_game_over=overlay.show)
    keys = KeyHandler(game)
    game.draw()
    log.info("board %dx%d, cell %dpx, %d fps", dims.cols, dims.rows, dims.cell, CONFIG["FPS"])

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit(); sys.exit()
            keys.handle(e)

        game.advance(dt)

        overlay.draw(screen, font, dims.width, dims.height)
        pygame.display.flip()


if __name__ == '__main__':
    main()
