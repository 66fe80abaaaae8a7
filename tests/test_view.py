import pytest

from flappy.view import View, next_tick, to_screen


def test_view_is_abstract():
    with pytest.raises(TypeError):
        View()


@pytest.mark.parametrize("tick", [0, 1, 2])
@pytest.mark.parametrize("step", [0, 5, 6, 60])
def test_next_tick_frozen_when_game_over(tick, step):
    assert next_tick(tick, step, True) == tick


@pytest.mark.parametrize("tick", [0, 1, 2])
@pytest.mark.parametrize("step", [1, 5, 7, 13])
def test_next_tick_unchanged_between_frames(tick, step):
    assert next_tick(tick, step, False) == tick


def test_next_tick_cycles_through_three_frames():
    start = 1
    tick = start
    seen = []
    for step in (0, 6, 12):
        tick = next_tick(tick, step, False)
        seen.append(tick)
    assert tick == start
    assert sorted(seen) == [0, 1, 2]


@pytest.mark.parametrize("tick", [0, 1, 2])
@pytest.mark.parametrize("step", range(12))
def test_next_tick_stays_in_range(tick, step):
    assert next_tick(tick, step, False) in range(3)


@pytest.mark.parametrize("x, y", [(0, 0), (100, 250), (333, 600), (999, 1)])
def test_to_screen_flips_vertical_axis(x, y):
    sx, sy = to_screen(600, x, y)
    assert sx == x
    assert sy + y == 600


def test_to_screen_truncates_fractions():
    assert to_screen(600, 10.7, 0.9) == (10, 600)


def test_to_screen_top_edge_maps_to_zero():
    assert to_screen(600, 0, 600) == (0, 0)