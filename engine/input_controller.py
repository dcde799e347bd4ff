"""
Fabricof - engine/input_controller.py
Translates polled pygame events into GameState transitions.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pygame

from engine.data_loader import MovementDef
from engine.state import GameState

logger = logging.getLogger(__name__)

MOVE_KEYS = {
    pygame.K_LEFT: -1,
    pygame.K_RIGHT: 1,
}
SCROLL_KEYS = {
    pygame.K_UP: -1,
    pygame.K_DOWN: 1,
}
RESIZE_EVENTS = (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED)


class InputController:
    """
    Routes events to ev_* handlers, then applies held movement scaled by
    elapsed time so speed does not depend on frame rate.
    """
    def __init__(self, movement: MovementDef):
        self.speed = movement.speed
        self.multiplier = movement.multiplier

    def handle(self, events: Iterable[pygame.event.Event], state: GameState, dt: float) -> bool:
        """Processes one tick of input. Returns True if the viewport must be recomputed."""
        for event in events:
            self.dispatch(event, state)
            if not state.running:
                break

        direction = sum(state.held)
        if state.running and direction:
            state.character.move(direction * self.speed * self.multiplier * dt)

        return state.viewport_dirty

    def dispatch(self, event: pygame.event.Event, state: GameState) -> None:
        if event.type == pygame.QUIT:
            self.ev_quit(state)
        elif event.type == pygame.KEYDOWN:
            self.ev_keydown(event, state)
        elif event.type == pygame.KEYUP:
            self.ev_keyup(event, state)
        elif event.type in RESIZE_EVENTS:
            state.viewport_dirty = True

    def ev_quit(self, state: GameState) -> None:
        logger.info("Quit requested")
        state.stop()

    def ev_keydown(self, event: pygame.event.Event, state: GameState) -> None:
        if event.key == pygame.K_ESCAPE:
            self.ev_quit(state)
        elif event.key == pygame.K_f:
            state.toggle_fullscreen()
        elif event.key == pygame.K_r:
            state.cycle_window_size()
        elif event.key in MOVE_KEYS:
            state.held.add(MOVE_KEYS[event.key])
        elif event.key in SCROLL_KEYS:
            state.scroll(SCROLL_KEYS[event.key])

    def ev_keyup(self, event: pygame.event.Event, state: GameState) -> None:
        if event.key in MOVE_KEYS:
            state.held.discard(MOVE_KEYS[event.key])
