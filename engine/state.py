"""
Fabricof - engine/state.py
GameState: the single owned bundle of mutable loop state.
==========================================================
Version:     0.2
Stack:       Python 3.11+
Status:      Passed explicitly through every phase of a tick.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Tuple

from engine.components import CharacterSprite, Grid
from engine.data_loader import SceneDef
from engine.text_pager import max_scroll
from world.exploration import RevealTracker


@dataclass(frozen=True)
class Scene:
    """Immutable scene content built once at startup."""
    background: Grid
    landscape: Grid
    background_tint: Tuple[int, int, int]
    landscape_tint: Tuple[int, int, int]
    character_tint: Tuple[int, int, int]

    @classmethod
    def from_def(cls, scene_def: SceneDef) -> Scene:
        rows, cols = scene_def.display.rows, scene_def.display.cols
        return cls(
            background=Grid.from_lines(scene_def.background.rows, rows, cols),
            landscape=Grid.from_lines(scene_def.landscape.rows, rows, cols),
            background_tint=scene_def.background.tint,
            landscape_tint=scene_def.landscape.tint,
            character_tint=scene_def.character.tint,
        )


@dataclass
class GameState:
    character: CharacterSprite
    reveal: RevealTracker
    window_sizes: List[Tuple[int, int]]
    size_index: int = 0
    fullscreen: bool = False
    scroll_offset: int = 0
    scroll_limit: int = 0
    viewport_dirty: bool = True
    running: bool = True
    # Directions currently held down: -1 for left, +1 for right.
    held: Set[int] = field(default_factory=set)

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.window_sizes[self.size_index]

    def stop(self) -> None:
        """Running -> Stopped. There is no way back."""
        self.running = False

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self.viewport_dirty = True

    def cycle_window_size(self) -> bool:
        """Advances to the next window size. Ignored while fullscreen."""
        if self.fullscreen:
            return False
        self.size_index = (self.size_index + 1) % len(self.window_sizes)
        self.viewport_dirty = True
        return True

    def scroll(self, delta: int) -> None:
        self.scroll_offset = max(0, min(self.scroll_limit, self.scroll_offset + delta))


def new_game_state(scene_def: SceneDef, window_sizes: List[Tuple[int, int]]) -> GameState:
    """Builds the starting state: empty reveal set, scroll at the top."""
    display = scene_def.display
    textbox = scene_def.textbox
    character = CharacterSprite(
        rows=list(scene_def.character.rows),
        x=scene_def.character.x,
        y=scene_def.character.y,
    )
    return GameState(
        character=character,
        reveal=RevealTracker(display.rows, display.cols, radius=scene_def.reveal.radius),
        window_sizes=list(window_sizes),
        size_index=min(display.start_size_index, len(window_sizes) - 1),
        scroll_limit=max_scroll(textbox.entries, textbox.width, textbox.height),
    )
