import pytest
from world.exploration import RevealTracker

def test_reveal_box_is_chebyshev():
    rt = RevealTracker(rows=25, cols=40)
    rt.update((8, 10))  # row=8, col=10
    for row in range(25):
        for col in range(40):
            expected = abs(row - 8) <= 6 and abs(col - 10) <= 6
            assert rt.is_revealed(row, col) is expected

def test_reveal_corner_is_included():
    rt = RevealTracker(rows=25, cols=40)
    rt.update((12, 20))
    # Corners of the box are inside; a disk would exclude them.
    assert rt.is_revealed(6, 14)
    assert rt.is_revealed(18, 26)
    assert not rt.is_revealed(5, 14)
    assert not rt.is_revealed(18, 27)

def test_reveal_is_monotonic():
    rt = RevealTracker(rows=25, cols=40)
    previous = set()
    for col in [0, 5, 39, 20, -10, 60, 10]:
        rt.update((12, col))
        current = set(rt.revealed)
        assert previous <= current
        previous = current

def test_reveal_never_leaves_grid_bounds():
    rt = RevealTracker(rows=25, cols=40)
    rt.update((0, 0))
    assert all(0 <= r < 25 and 0 <= c < 40 for r, c in rt.revealed)
    assert len(rt) == 7 * 7

    far = RevealTracker(rows=25, cols=40)
    assert far.update((-300, 500)) == 0
    assert len(far) == 0

def test_update_reports_new_cells_only():
    rt = RevealTracker(rows=25, cols=40)
    assert rt.update((10, 10)) == 13 * 13
    assert rt.update((10, 10)) == 0
    assert rt.update((10, 11)) == 13

def test_custom_radius():
    rt = RevealTracker(rows=25, cols=40, radius=1)
    rt.update((5, 5))
    assert len(rt) == 9
