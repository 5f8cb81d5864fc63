"""
Drawing surface for the game engine.

The engine only ever asks for solid rectangles, so the pygame Surface is
wrapped behind a single fill_rect() call.
"""
from __future__ import annotations
import pygame

from tetris_piece import Color

class SurfaceCanvas:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color):
        self.surface.fill(color, pygame.Rect(x, y, w, h))
