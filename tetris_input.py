
"""Keyboard controller"""
import pygame

MOVES = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_DOWN: (0, 1),
}

class KeyHandler:
    """Routes key presses to the game it was given."""
    def __init__(self, game):
        self.game = game

    def on_key(self, key) -> bool:
        if self.game.game_over: return False
        if key in MOVES:
            dx, dy = MOVES[key]
            return self.game.move_piece(dx, dy)
        if key == pygame.K_UP:
            return self.game.rotate_piece()
        return False

    def handle(self, e) -> bool:
        if e.type != pygame.KEYDOWN: return False
        return self.on_key(e.key)
