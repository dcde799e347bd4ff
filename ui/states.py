"""
Fabricof - ui/states.py
GameLoop: ties input, reveal tracking and composition together each tick.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

import pygame

from engine.input_controller import InputController
from engine.state import GameState
from engine.viewport import ViewportScaler
from ui.compositor import SceneCompositor, TextboxView
from ui.renderer import Renderer

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Central loop controller. One tick is: input -> state update ->
    viewport (only when dirty) -> reveal -> compose -> present.
    """
    def __init__(
        self,
        renderer: Renderer,
        state: GameState,
        controller: InputController,
        compositor: SceneCompositor,
        textbox: TextboxView,
        viewport: ViewportScaler,
        frame_delay_ms: int = 16,
    ):
        self.renderer = renderer
        self.state = state
        self.controller = controller
        self.compositor = compositor
        self.textbox = textbox
        self.viewport = viewport
        self.frame_delay_ms = frame_delay_ms
        # The window is opened at the starting mode before the loop is built.
        self._applied_mode: Tuple[bool, int] = (state.fullscreen, state.size_index)
        self.frames = 0

    def apply_viewport(self) -> None:
        """Pushes pending window mode changes to the renderer and rescales."""
        mode = (self.state.fullscreen, self.state.size_index)
        if mode != self._applied_mode:
            self.renderer.apply_window_mode(self.state.fullscreen, self.state.window_size)
            self._applied_mode = mode
        self.viewport.resize(*self.renderer.size)
        self.state.viewport_dirty = False
        logger.debug("Viewport scale %.3f x %.3f", self.viewport.scale_x, self.viewport.scale_y)

    def tick(self, events: Iterable[pygame.event.Event], dt: float) -> int:
        """Runs one frame. Returns the number of glyphs drawn."""
        state = self.state
        self.controller.handle(events, state, dt)
        if not state.running:
            return 0

        if state.viewport_dirty:
            self.apply_viewport()

        # Fog is settled before anything is drawn this frame.
        state.reveal.update(state.character.cell())

        self.renderer.clear()
        drawn = self.compositor.compose(self.renderer, self.viewport, state.reveal, state.character)
        drawn += self.textbox.draw(self.renderer, self.viewport, state.scroll_offset)
        self.renderer.present()
        self.frames += 1
        return drawn

    def run(self) -> None:
        """Main blocking loop with a fixed post-frame sleep."""
        last = pygame.time.get_ticks()
        while self.state.running:
            now = pygame.time.get_ticks()
            dt = (now - last) / 1000.0
            last = now
            self.tick(pygame.event.get(), dt)
            pygame.time.wait(self.frame_delay_ms)
        logger.info("Loop stopped after %d frames", self.frames)
