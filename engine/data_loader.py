"""
Fabricof - engine/data_loader.py
Scene Data Loader: TOML scene definitions validated by Pydantic.
=============================================================================================
Version:     0.2
Stack:       Python 3.11+ | Pydantic v2 | tomllib
Status:      Configuration layer for the scene renderer.
"""

import logging
import tomllib
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# ================================================================================
# SCHEMAS
# ================================================================================

Color = Tuple[int, int, int]


class DisplayDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    title: str = "The Fabricof"
    base_width: int = Field(default=320, gt=0)
    base_height: int = Field(default=200, gt=0)
    cell_width: int = Field(default=8, gt=0)
    cell_height: int = Field(default=8, gt=0)
    start_size_index: int = Field(default=0, ge=0)
    frame_delay_ms: int = Field(default=16, ge=0)
    font_path: Optional[str] = None  # None -> pygame default font
    font_size: int = Field(default=8, gt=0)

    @property
    def cols(self) -> int:
        return self.base_width // self.cell_width

    @property
    def rows(self) -> int:
        return self.base_height // self.cell_height


class MovementDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    speed: float = 10.0  # cells per second
    multiplier: float = 1.0


class RevealDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    radius: int = Field(default=6, ge=0)


class LayerDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    tint: Color
    rows: List[str] = Field(default_factory=list)

    @field_validator("tint")
    @classmethod
    def _check_tint(cls, value: Color) -> Color:
        if any(not 0 <= channel <= 255 for channel in value):
            raise ValueError(f"tint channels must be within 0..255, got {value}")
        return value


class SpriteDef(LayerDef):
    x: float = 0.0
    y: float = 0.0


class TextboxDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    tint: Color = (255, 255, 255)
    row: int = Field(ge=0)
    col: int = Field(ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    entries: List[str] = Field(default_factory=list)


class SceneDef(BaseModel):
    model_config = ConfigDict(frozen=True)
    display: DisplayDef = Field(default_factory=DisplayDef)
    movement: MovementDef = Field(default_factory=MovementDef)
    reveal: RevealDef = Field(default_factory=RevealDef)
    background: LayerDef
    landscape: LayerDef
    character: SpriteDef
    textbox: TextboxDef

    @model_validator(mode="after")
    def _check_textbox_fits(self) -> "SceneDef":
        tb, display = self.textbox, self.display
        if tb.row + tb.height > display.rows or tb.col + tb.width > display.cols:
            raise ValueError(
                f"textbox at row {tb.row}, col {tb.col} ({tb.width}x{tb.height}) "
                f"does not fit the {display.cols}x{display.rows} grid"
            )
        return self


# ================================================================================
# LOADERS & CACHE
# ================================================================================

_SCENE_CACHE: Dict[Path, SceneDef] = {}

DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_SCENE_PATH = DATA_DIR / "scene.toml"


def load_scene_def(path: Path) -> SceneDef:
    """Reads and validates a scene definition without touching the cache."""
    if not path.exists():
        raise FileNotFoundError(f"Scene definition not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return SceneDef(**data)


def get_scene_def(path: Optional[Path] = None) -> SceneDef:
    """Loads a scene definition from TOML. Cached per resolved path."""
    path = Path(path) if path is not None else DEFAULT_SCENE_PATH
    key = path.resolve()
    if key in _SCENE_CACHE:
        return _SCENE_CACHE[key]

    scene = load_scene_def(path)
    logger.info("Loaded scene definition from %s", path)
    _SCENE_CACHE[key] = scene
    return scene


def resolve_font_path(display: DisplayDef) -> Optional[Path]:
    """Font paths in scene data are relative to the project root."""
    if display.font_path is None:
        return None
    path = Path(display.font_path)
    if not path.is_absolute():
        path = DATA_DIR.parent / path
    if not path.exists():
        raise FileNotFoundError(f"Font asset not found: {path}")
    return path
