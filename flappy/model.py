"""Game rules: gravity, flapping, scrolling pipes, scoring and crashes."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional

from .body import Bird, Body
from .factory import Factory, SimpleFactory
from .state import State, TextureSpec

_GRAVITY = 0.5
_JUMP_VELOCITY = 8.0
_PIPE_INTERVAL = 150
_SCORE_WINDOW = 1.0
_VANISH_WIDTHS = 1.5
_BIRD_START_X = 0.3
_BIRD_START_Y = 0.5


class Action(IntEnum):
    """Player input for one frame."""

    NONE = 0
    FLAP = 1
    RESTART = 2


class Phase(IntEnum):
    """Stage of a round."""

    READY = 0
    PLAYING = 1
    GAME_OVER = 2


class Model:
    """Holds the bird and pipes and advances the game one frame per update."""

    def __init__(
        self,
        factory: Factory,
        size: tuple[int, int],
        bird_texture: TextureSpec,
        pipe_texture: TextureSpec,
    ):
        self.factory = factory
        self.size = (size[0], size[1])
        self.bird_texture = bird_texture
        self.pipe_texture = pipe_texture

        self.phase = Phase.READY
        self.is_jump = False
        self.is_pipe_reached = False
        self.is_fail = False
        self.step = -1
        self.score = 0
        self.high_score = 0

        self._bird: Optional[Bird] = None
        self._pipes: list[Body] = []

        factory.bind(self)

    @classmethod
    def default(
        cls,
        size: tuple[int, int],
        bird_texture: TextureSpec,
        pipe_texture: TextureSpec,
        rng: Optional[random.Random] = None,
    ) -> "Model":
        """A model using a SimpleFactory driven by ``rng``."""
        return cls(SimpleFactory(rng), size, bird_texture, pipe_texture)

    @property
    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def bird(self) -> Bird:
        """The bird; available once the model has been reset."""
        if self._bird is None:
            raise RuntimeError("model has not been reset yet")
        return self._bird

    @property
    def pipes(self) -> tuple[Body, ...]:
        return tuple(self._pipes)

    def reset(self) -> None:
        """Place a fresh bird, drop all pipes and clear the frame flags."""
        self._pipes.clear()
        self.is_fail = False
        self.is_jump = False
        self.is_pipe_reached = False

        width, height = self.size
        bird_data = {
            "x": _BIRD_START_X * width,
            "y": _BIRD_START_Y * height,
            **_texture_data(self.bird_texture),
        }
        bird = self.factory.create_bird(bird_data)
        if not isinstance(bird, Bird):
            raise TypeError("factory must create a Bird")
        self._bird = bird

        bottom_data = _texture_data(self.pipe_texture)
        top_data = dict(bottom_data)
        top_data["texture_height_scale"] = -self.pipe_texture.height_scale
        self.factory.create_top_pipe(top_data)
        self.factory.create_bottom_pipe(bottom_data)

    def update(self, action: Action | int = Action.NONE) -> State:
        """Advance one frame with the given input and return a snapshot."""
        action = Action(action)
        bird = self.bird
        self.step += 1

        self._drop_bird(bird)
        self._check_and_fix_position(bird)
        self._count_score(bird)
        self._generate_pipes()
        self._move_pipes()
        self._remove_invisible_pipes()
        self._check_crash(bird)
        self._apply(action)

        return State(
            bird=self.bird.state(),
            pipes=[pipe.state() for pipe in self._pipes],
            score=self.score,
            high_score=self.high_score,
            step=self.step,
            is_jump=self.is_jump,
            is_pipe_reached=self.is_pipe_reached,
            is_fail=self.is_fail,
            is_game_over=self.is_game_over,
        )

    @property
    def _playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def _restart(self) -> None:
        self.reset()
        self.score = 0
        self.phase = Phase.READY

    def _crash(self, bird: Bird) -> None:
        self.is_fail = True
        bird.y_velocity = 0.0
        self.phase = Phase.GAME_OVER

    def _drop_bird(self, bird: Bird) -> None:
        self.is_jump = False
        if not self._playing:
            return
        bird.move()
        bird.y_velocity -= _GRAVITY

    def _jump(self) -> None:
        self.is_jump = True
        self.bird.y_velocity = _JUMP_VELOCITY

    def _check_and_fix_position(self, bird: Bird) -> None:
        self.is_fail = False
        if not self._playing:
            return
        ceiling = self.size[1]
        if bird.y > ceiling:
            bird.y = ceiling
            bird.y_velocity = 0.0
        elif bird.y < 0:
            self._crash(bird)

    def _count_score(self, bird: Bird) -> None:
        self.is_pipe_reached = False
        if not self._playing:
            return
        if any(
            pipe.x - _SCORE_WINDOW <= bird.x <= pipe.x + _SCORE_WINDOW
            for pipe in self._pipes
        ):
            self.score += 1
            self.is_pipe_reached = True
            self.high_score = max(self.high_score, self.score)

    def _generate_pipes(self) -> None:
        if not self._playing or self.step % _PIPE_INTERVAL != 0:
            return
        self._pipes.extend(p for p in self.factory.create_pipe_pair() if p is not None)

    def _move_pipes(self) -> None:
        if not self._playing:
            return
        for pipe in self._pipes:
            pipe.move()

    def _remove_invisible_pipes(self) -> None:
        if not self._playing:
            return
        self._pipes = [
            pipe for pipe in self._pipes if pipe.x >= -(pipe.width * _VANISH_WIDTHS)
        ]

    def _check_crash(self, bird: Bird) -> None:
        if not self._playing:
            return
        if any(bird.collides_with(pipe) for pipe in self._pipes):
            self._crash(bird)

    def _apply(self, action: Action) -> None:
        if action is Action.FLAP:
            if self.phase is Phase.PLAYING:
                self._jump()
            elif self.phase is Phase.READY:
                self.phase = Phase.PLAYING
        elif action is Action.RESTART and self.phase is Phase.GAME_OVER:
            self._restart()


def _texture_data(texture: TextureSpec) -> dict[str, float]:
    return {
        "texture_width": texture.texture_width,
        "texture_height": texture.texture_height,
        "texture_width_scale": texture.width_scale,
        "texture_height_scale": texture.height_scale,
    }