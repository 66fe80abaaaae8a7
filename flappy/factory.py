"""Factories creating the bird and pairs of pipes for the model."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Optional, Protocol

from .body import Bird, Body, Pipe

_GAP_IN_BIRD_HEIGHTS = 5.0
_MIN_BOTTOM_Y = 75
_BOTTOM_Y_SPAN = 275
_PIPE_SPEED = -3.0


class _Sized(Protocol):
    size: tuple[int, int]


class Factory(ABC):
    """Creates bodies for a model."""

    @abstractmethod
    def create_bird(self, data: Mapping[str, float]) -> Body:
        """Create the bird from a data mapping."""

    @abstractmethod
    def create_pipe_pair(self) -> tuple[Optional[Body], Optional[Body]]:
        """Create a (top, bottom) pipe pair at the right edge of the field."""

    @abstractmethod
    def create_top_pipe(self, data: Mapping[str, float]) -> Body:
        """Create a top pipe from a data mapping."""

    @abstractmethod
    def create_bottom_pipe(self, data: Mapping[str, float]) -> Body:
        """Create a bottom pipe from a data mapping."""

    @abstractmethod
    def bind(self, model) -> None:
        """Attach the model whose field size pipes are placed against."""


class SimpleFactory(Factory):
    """Places pipe pairs at a random height with a gap sized by the bird."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()
        self._model: Optional[_Sized] = None
        self._gap = 0.0
        self._top_template: Optional[Pipe] = None
        self._bottom_template: Optional[Pipe] = None

    @property
    def model(self):
        """The bound model, or None."""
        return self._model

    def bind(self, model) -> None:
        """Bind a model; a factory keeps the first model it is bound to."""
        if self._model is None:
            self._model = model

    def create_bird(self, data: Mapping[str, float]) -> Bird:
        bird = Bird.from_data(data)
        if self._gap == 0:
            self._gap = _GAP_IN_BIRD_HEIGHTS * bird.height
        return bird

    def create_top_pipe(self, data: Mapping[str, float]) -> Pipe:
        pipe = Pipe.from_data(data)
        if self._top_template is None:
            self._top_template = pipe.spawn(0, 0, 0, 0)
        return pipe

    def create_bottom_pipe(self, data: Mapping[str, float]) -> Pipe:
        pipe = Pipe.from_data(data)
        if self._bottom_template is None:
            self._bottom_template = pipe.spawn(0, 0, 0, 0)
        return pipe

    def create_pipe_pair(self) -> tuple[Optional[Pipe], Optional[Pipe]]:
        """Return (top, bottom); (None, None) until both templates exist."""
        if self._top_template is None or self._bottom_template is None:
            return None, None
        if self._model is None:
            raise RuntimeError("factory is not bound to a model")
        bottom_y = self._rng.randrange(_BOTTOM_Y_SPAN) + _MIN_BOTTOM_Y
        x = self._model.size[0]
        bottom = self._bottom_template.spawn(x, bottom_y, _PIPE_SPEED, 0)
        top = self._top_template.spawn(x, bottom_y + self._gap, _PIPE_SPEED, 0)
        return top, bottom