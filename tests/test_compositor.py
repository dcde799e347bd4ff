import math

import pytest

from engine.components import CharacterSprite, Grid, SpriteCoordinateError
from engine.data_loader import TextboxDef
from engine.state import Scene
from engine.viewport import ViewportScaler
from ui.compositor import SceneCompositor, TextboxView
from world.exploration import RevealTracker

BG = (255, 255, 0)
LAND = (0, 255, 0)
CHAR = (255, 0, 0)


class RecordingCanvas:
    """Collects draw calls instead of blitting."""
    def __init__(self, fail_on=""):
        self.calls = []
        self.fail_on = fail_on

    def draw_glyph(self, glyph, tint, rect):
        if glyph in self.fail_on:
            return False
        self.calls.append((glyph, tint, rect))
        return True


def _scene(background=(), landscape=()):
    return Scene(
        background=Grid.from_lines(list(background), 25, 40),
        landscape=Grid.from_lines(list(landscape), 25, 40),
        background_tint=BG,
        landscape_tint=LAND,
        character_tint=CHAR,
    )

def test_layers_drawn_in_z_order():
    scene = _scene(background=["#"], landscape=[" ▒"])
    reveal = RevealTracker(25, 40)
    reveal.update((0, 0))
    canvas = RecordingCanvas()
    drawn = SceneCompositor(scene).compose(
        canvas, ViewportScaler(320, 200), reveal, CharacterSprite(rows=["@"], x=2, y=0)
    )
    assert drawn == 3
    assert [c[1] for c in canvas.calls] == [BG, LAND, CHAR]
    assert canvas.calls[2][2] == (16, 0, 8, 8)

def test_background_blank_cells_are_skipped():
    scene = _scene(background=["#  #"])
    canvas = RecordingCanvas()
    drawn = SceneCompositor(scene).draw_background(canvas, ViewportScaler(320, 200))
    assert drawn == 2
    assert [c[2][0] for c in canvas.calls] == [0, 24]

def test_landscape_hidden_until_revealed():
    scene = _scene(landscape=["♠" * 40] * 25)
    reveal = RevealTracker(25, 40)
    comp = SceneCompositor(scene)
    vp = ViewportScaler(320, 200)

    canvas = RecordingCanvas()
    assert comp.draw_landscape(canvas, vp, reveal) == 0

    reveal.update((8, 10))
    canvas = RecordingCanvas()
    assert comp.draw_landscape(canvas, vp, reveal) == 13 * 13

def test_character_clipped_to_grid():
    scene = _scene()
    comp = SceneCompositor(scene)
    vp = ViewportScaler(320, 200)
    # Columns 38, 39, 40, 41: only the first two are on the grid.
    sprite = CharacterSprite(rows=["abcd"], x=38, y=0)
    canvas = RecordingCanvas()
    assert comp.draw_character(canvas, vp, sprite) == 2
    assert [c[0] for c in canvas.calls] == ["a", "b"]

def test_character_far_off_grid_never_raises():
    comp = SceneCompositor(_scene())
    vp = ViewportScaler(320, 200)
    for x, y in [(-1000, 5), (10 ** 12, 10 ** 12), (-3, -7), (41, 0)]:
        canvas = RecordingCanvas()
        assert comp.draw_character(canvas, vp, CharacterSprite(rows=["@"], x=x, y=y)) == 0

def test_character_non_finite_position_is_fatal():
    comp = SceneCompositor(_scene())
    with pytest.raises(SpriteCoordinateError):
        comp.draw_character(RecordingCanvas(), ViewportScaler(320, 200), CharacterSprite(rows=["@"], x=math.inf))

def test_failed_glyph_is_skipped():
    scene = _scene(background=["#?#"])
    canvas = RecordingCanvas(fail_on="?")
    assert SceneCompositor(scene).draw_background(canvas, ViewportScaler(320, 200)) == 2

def test_draws_scale_with_viewport():
    scene = _scene(background=["", "", "   #"])
    canvas = RecordingCanvas()
    SceneCompositor(scene).draw_background(canvas, ViewportScaler(640, 400))
    assert canvas.calls == [("#", BG, (48, 32, 16, 16))]

def test_textbox_draws_visible_window():
    tb = TextboxDef(row=18, col=2, width=7, height=2, entries=["aaa bbb ccc", "ddd"])
    view = TextboxView(tb)
    assert view.visible_lines(0) == ["aaa bbb", "ccc"]
    assert view.visible_lines(1) == ["ccc", "ddd"]

    canvas = RecordingCanvas()
    drawn = view.draw(canvas, ViewportScaler(320, 200), 1)
    assert drawn == 6
    assert canvas.calls[0] == ("c", (255, 255, 255), (16, 144, 8, 8))
    assert canvas.calls[3][2] == (16, 152, 8, 8)

def test_textbox_overflow_stops_at_grid_edge():
    tb = TextboxDef(row=0, col=35, width=3, height=1, entries=["abcdefghij"])
    canvas = RecordingCanvas()
    assert TextboxView(tb).draw(canvas, ViewportScaler(320, 200), 0) == 5

def test_textbox_rows_stop_at_grid_bottom():
    tb = TextboxDef(row=23, col=0, width=5, height=4, entries=["aa", "bb", "cc", "dd"])
    canvas = RecordingCanvas()
    assert TextboxView(tb).draw(canvas, ViewportScaler(320, 200), 0) == 4
    assert {c[2][1] for c in canvas.calls} == {184, 192}

def test_textbox_reads_entries_from_definition():
    tb = TextboxDef(row=0, col=0, width=7, height=8, entries=["aaa bbb ccc", "ddd"])
    view = TextboxView(tb)
    assert view.entries == ["aaa bbb ccc", "ddd"]
    assert view.visible_lines(0) == ["aaa bbb", "ccc", "ddd"]
