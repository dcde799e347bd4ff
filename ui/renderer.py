"""
Fabricof - ui/renderer.py
Pygame Renderer: window management and glyph rasterization.
===========================================================
Version:     0.2
Stack:       Python 3.11+ | pygame 2
Status:      Thin boundary over SDL; everything above it is pygame-agnostic
             apart from event types.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import pygame

from engine.viewport import Rect

logger = logging.getLogger(__name__)

CLEAR_COLOR = (0, 0, 0)


class GlyphRasterizer:
    """
    Renders single characters to surfaces. A new surface is produced on every
    call; nothing is cached.
    """
    def __init__(self, font_path: Optional[Path], size: int):
        # pygame.font.Font(None, size) falls back to the bundled default font.
        self.font = pygame.font.Font(str(font_path) if font_path else None, size)

    def render(self, glyph: str, tint: Tuple[int, int, int]) -> Optional[pygame.Surface]:
        """Returns None for glyphs the font cannot rasterize."""
        try:
            return self.font.render(glyph, True, tint)
        except (pygame.error, ValueError) as e:
            logger.debug("Skipping glyph %r: %s", glyph, e)
            return None


class Renderer:
    """
    Owns the display surface. Implements the glyph canvas used by the
    compositor: one scaled blit per glyph.
    """
    def __init__(self, title: str, rasterizer: GlyphRasterizer):
        self.title = title
        self.rasterizer = rasterizer
        self.surface: Optional[pygame.Surface] = None

    @staticmethod
    def desktop_size() -> Tuple[int, int]:
        """Current display resolution. Only valid before the window is in fullscreen."""
        sizes = pygame.display.get_desktop_sizes()
        if not sizes:
            raise pygame.error("No desktop display reported")
        return sizes[0]

    def open(self, size: Tuple[int, int]) -> None:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.display.set_caption(self.title)
        self.surface = pygame.display.set_mode(size, pygame.RESIZABLE)
        logger.info("Window opened at %dx%d (driver: %s)", size[0], size[1], pygame.display.get_driver())

    def apply_window_mode(self, fullscreen: bool, size: Tuple[int, int]) -> None:
        """Switches between desktop fullscreen and a windowed size."""
        if fullscreen:
            self.surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.surface = pygame.display.set_mode(size, pygame.RESIZABLE)
        logger.info("Window mode: fullscreen=%s size=%s", fullscreen, self.surface.get_size())

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self) -> None:
        """Clear the surface with black."""
        self.surface.fill(CLEAR_COLOR)

    def draw_glyph(self, glyph: str, tint: Tuple[int, int, int], rect: Rect) -> bool:
        image = self.rasterizer.render(glyph, tint)
        if image is None:
            return False
        x, y, w, h = rect
        if w <= 0 or h <= 0:
            return False
        self.surface.blit(pygame.transform.scale(image, (w, h)), (x, y))
        return True

    def present(self) -> None:
        """Present the current frame to the screen."""
        pygame.display.flip()
