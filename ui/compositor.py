"""
Fabricof - ui/compositor.py
SceneCompositor: draws the scene layers in fixed z-order.
=========================================================
Version:     0.2
Stack:       Python 3.11+
Status:      Draw order is background -> landscape -> character -> textbox.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from engine.components import CharacterSprite
from engine.data_loader import TextboxDef
from engine.state import Scene
from engine.text_pager import paginate
from engine.viewport import Rect, ViewportScaler
from world.exploration import RevealTracker


class GlyphCanvas(Protocol):
    def draw_glyph(self, glyph: str, tint: Tuple[int, int, int], rect: Rect) -> bool: ...


class SceneCompositor:
    """
    Issues one draw call per visible glyph cell. Blank cells are transparent
    on every layer.
    """
    def __init__(self, scene: Scene):
        self.scene = scene

    def compose(
        self,
        canvas: GlyphCanvas,
        viewport: ViewportScaler,
        reveal: RevealTracker,
        character: CharacterSprite,
    ) -> int:
        """Draws all three layers. Returns the number of glyphs drawn."""
        drawn = self.draw_background(canvas, viewport)
        drawn += self.draw_landscape(canvas, viewport, reveal)
        drawn += self.draw_character(canvas, viewport, character)
        return drawn

    def draw_background(self, canvas: GlyphCanvas, viewport: ViewportScaler) -> int:
        drawn = 0
        tint = self.scene.background_tint
        for row, col, glyph in self.scene.background.opaque_cells():
            drawn += canvas.draw_glyph(glyph, tint, viewport.cell_rect(row, col))
        return drawn

    def draw_landscape(self, canvas: GlyphCanvas, viewport: ViewportScaler, reveal: RevealTracker) -> int:
        drawn = 0
        tint = self.scene.landscape_tint
        for row, col, glyph in self.scene.landscape.opaque_cells():
            if not reveal.is_revealed(row, col):
                continue
            drawn += canvas.draw_glyph(glyph, tint, viewport.cell_rect(row, col))
        return drawn

    def draw_character(self, canvas: GlyphCanvas, viewport: ViewportScaler, character: CharacterSprite) -> int:
        rows, cols = self.scene.background.rows, self.scene.background.cols
        drawn = 0
        tint = self.scene.character_tint
        for row, col, glyph in character.cells():
            # Clip to the logical grid.
            if not (0 <= row < rows and 0 <= col < cols):
                continue
            drawn += canvas.draw_glyph(glyph, tint, viewport.cell_rect(row, col))
        return drawn


class TextboxView:
    """Draws the visible window of wrapped dialogue lines."""
    def __init__(self, textbox: TextboxDef):
        self.textbox = textbox
        self.entries = list(textbox.entries)

    def visible_lines(self, scroll_offset: int) -> list[str]:
        return paginate(self.entries, self.textbox.width, self.textbox.height, scroll_offset)

    def draw(self, canvas: GlyphCanvas, viewport: ViewportScaler, scroll_offset: int) -> int:
        grid_rows = viewport.base_height // viewport.cell_height
        grid_cols = viewport.base_width // viewport.cell_width
        drawn = 0
        tb = self.textbox
        for i, line in enumerate(self.visible_lines(scroll_offset)):
            row = tb.row + i
            if row >= grid_rows:
                break
            for j, glyph in enumerate(line):
                if glyph == " ":
                    continue
                col = tb.col + j
                # Overlong words run past the box; keep them on the grid.
                if col >= grid_cols:
                    break
                drawn += canvas.draw_glyph(glyph, tb.tint, viewport.cell_rect(row, col))
        return drawn
