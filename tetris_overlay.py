
import pygame

class GameOverOverlay:
    """Game-over panel, blitted once over the last frame of the board."""
    def __init__(self, message="Game Over!"):
        self.active = False
        self.drawn = False
        self.message = message

    def show(self):
        self.active = True

    def draw(self, screen, font, w, h):
        if not self.active or self.drawn: return
        self.drawn = True
        s = pygame.Surface((w - 40, 120), pygame.SRCALPHA); s.fill((20, 25, 40, 230))
        top = (h - 120) // 2
        screen.blit(s, (20, top))
        txt = font.render(self.message, True, (255, 220, 220))
        screen.blit(txt, txt.get_rect(center=(w // 2, top + 45)))
        hint = font.render("Esc to quit", True, (200, 210, 235))
        screen.blit(hint, hint.get_rect(center=(w // 2, top + 85)))
