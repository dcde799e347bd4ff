"""
Fabricof - run.py
Main entry point for the Fabricof scene prototype.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

# Ensure we can import fabricof packages
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

import pygame
from pydantic import ValidationError

from engine.data_loader import DEFAULT_SCENE_PATH, get_scene_def, resolve_font_path
from engine.input_controller import InputController
from engine.state import Scene, new_game_state
from engine.viewport import ViewportScaler, window_size_candidates
from ui.compositor import SceneCompositor, TextboxView
from ui.renderer import GlyphRasterizer, Renderer
from ui.states import GameLoop

logger = logging.getLogger("fabricof")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python run.py", description="Run the Fabricof scene prototype.")
    parser.add_argument("--scene", type=Path, default=DEFAULT_SCENE_PATH, help="Path to the scene TOML file.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Use the dummy SDL video driver and render a single frame.",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"

    try:
        scene_def = get_scene_def(args.scene)
        font_path = resolve_font_path(scene_def.display)
    except (FileNotFoundError, ValidationError) as e:
        logger.critical("Failed to load scene: %s", e)
        return 1

    display = scene_def.display
    try:
        pygame.init()
        rasterizer = GlyphRasterizer(font_path, display.font_size)
        # pygame.init() only counts failed modules; the display query raises.
        screen_w, screen_h = Renderer.desktop_size()
    except (pygame.error, OSError) as e:
        logger.critical("Failed to initialize pygame, display or font: %s", e)
        pygame.quit()
        return 1

    sizes = window_size_candidates(screen_w, screen_h, display.base_width, display.base_height)
    logger.info("Display %dx%d, window sizes: %s", screen_w, screen_h, sizes)

    state = new_game_state(scene_def, sizes)
    renderer = Renderer(title=display.title, rasterizer=rasterizer)
    try:
        renderer.open(state.window_size)
    except pygame.error as e:
        logger.critical("Failed to create window: %s", e)
        pygame.quit()
        return 1

    viewport = ViewportScaler(
        *renderer.size,
        base_width=display.base_width,
        base_height=display.base_height,
        cell_width=display.cell_width,
        cell_height=display.cell_height,
    )
    loop = GameLoop(
        renderer=renderer,
        state=state,
        controller=InputController(scene_def.movement),
        compositor=SceneCompositor(Scene.from_def(scene_def)),
        textbox=TextboxView(scene_def.textbox),
        viewport=viewport,
        frame_delay_ms=display.frame_delay_ms,
    )

    if args.headless:
        drawn = loop.tick([], 0.0)
        logger.info("Headless frame drew %d glyphs", drawn)
    else:
        loop.run()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
