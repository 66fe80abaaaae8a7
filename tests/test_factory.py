import random
from dataclasses import dataclass

import pytest

from flappy.body import Bird, Pipe
from flappy.factory import Factory, SimpleFactory

BIRD = {"x": 300, "y": 300, "texture_width": 17, "texture_height": 12,
        "texture_width_scale": 2, "texture_height_scale": 2}
BOTTOM = {"texture_width": 26, "texture_height": 160,
          "texture_width_scale": 2, "texture_height_scale": 2}
TOP = dict(BOTTOM, texture_height_scale=-2)


@dataclass
class FakeModel:
    size: tuple = (1000, 600)


def _ready_factory(seed=1, with_bird=True):
    factory = SimpleFactory(random.Random(seed))
    factory.bind(FakeModel())
    if with_bird:
        factory.create_bird(BIRD)
    factory.create_top_pipe(TOP)
    factory.create_bottom_pipe(BOTTOM)
    return factory


def test_factory_is_abstract():
    with pytest.raises(TypeError):
        Factory()


def test_pair_is_empty_without_templates():
    factory = SimpleFactory(random.Random(0))
    factory.bind(FakeModel())
    assert factory.create_pipe_pair() == (None, None)
    factory.create_top_pipe(TOP)
    assert factory.create_pipe_pair() == (None, None)


def test_pair_needs_bound_model():
    factory = SimpleFactory(random.Random(0))
    factory.create_top_pipe(TOP)
    factory.create_bottom_pipe(BOTTOM)
    with pytest.raises(RuntimeError):
        factory.create_pipe_pair()


def test_bind_keeps_first_model():
    factory = SimpleFactory()
    first, second = FakeModel(), FakeModel((5, 5))
    factory.bind(first)
    factory.bind(second)
    assert factory.model is first


def test_create_bird_and_pipes_return_bodies():
    factory = SimpleFactory()
    bird = factory.create_bird(BIRD)
    top = factory.create_top_pipe(TOP)
    bottom = factory.create_bottom_pipe(BOTTOM)
    assert isinstance(bird, Bird) and (bird.x, bird.y) == (300, 300)
    assert isinstance(top, Pipe) and top.kind() == 2
    assert isinstance(bottom, Pipe) and bottom.kind() == 1


def test_pair_placement():
    factory = _ready_factory()
    bird = Bird.from_data(BIRD)
    top, bottom = factory.create_pipe_pair()
    assert top.kind() == 2 and bottom.kind() == 1
    assert top.x == bottom.x == FakeModel().size[0]
    assert 75 <= bottom.y < 75 + 275
    assert top.y - bottom.y == 5 * bird.height
    assert (top.x_velocity, top.y_velocity) == (-3, 0)
    assert (bottom.x_velocity, bottom.y_velocity) == (-3, 0)


def test_gap_fixed_by_first_bird():
    factory = _ready_factory()
    factory.create_bird(dict(BIRD, texture_height=100))
    top, bottom = factory.create_pipe_pair()
    assert top.y - bottom.y == 5 * Bird.from_data(BIRD).height


def test_no_bird_means_no_gap():
    factory = _ready_factory(with_bird=False)
    top, bottom = factory.create_pipe_pair()
    assert top.y == bottom.y


def test_templates_fixed_by_first_pipes():
    factory = _ready_factory()
    factory.create_bottom_pipe(dict(BOTTOM, texture_width=1))
    _, bottom = factory.create_pipe_pair()
    assert bottom.width == Pipe.from_data(BOTTOM).width


def test_pairs_are_independent_objects():
    factory = _ready_factory()
    first_top, _ = factory.create_pipe_pair()
    second_top, _ = factory.create_pipe_pair()
    first_top.move()
    assert second_top.x == FakeModel().size[0]


def test_same_seed_same_pipes():
    first = [_ready_factory(7).create_pipe_pair()[1].y]
    second = [_ready_factory(7).create_pipe_pair()[1].y]
    assert first == second


def test_heights_stay_in_range():
    factory = _ready_factory(3)
    heights = {factory.create_pipe_pair()[1].y for _ in range(2000)}
    assert min(heights) >= 75
    assert max(heights) < 75 + 275
    assert len(heights) > 1