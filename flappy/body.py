"""Moving bodies of the game: the bird and the pipes."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeVar

_B = TypeVar("_B", bound="Body")


def collides_bottom(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Whether a box touches an upright (bottom) pipe box."""
    return x1 + w1 >= x2 and x1 <= x2 + w2 and y2 - h2 <= y1 - h1 <= y2


def collides_top(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """Whether a box touches a flipped (top) pipe box."""
    return x1 + w1 >= x2 and x1 <= x2 + w2 and y1 >= y2 - h2 and y1 - h1 <= y2


@dataclass
class Body(ABC):
    """A textured rectangle with a position and a velocity."""

    x: float = 0.0
    y: float = 0.0
    x_velocity: float = 0.0
    y_velocity: float = 0.0
    texture_width: int = 0
    texture_height: int = 0
    texture_width_scale: float = 1.0
    texture_height_scale: float = 1.0

    @classmethod
    def from_data(cls: type[_B], data: Mapping[str, float]) -> _B:
        """Build a body from a mapping; missing keys take their defaults."""
        return cls(
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            x_velocity=data.get("x_velocity", 0.0),
            y_velocity=data.get("y_velocity", 0.0),
            texture_width=int(data.get("texture_width", 0)),
            texture_height=int(data.get("texture_height", 0)),
            texture_width_scale=data.get("texture_width_scale", 1.0),
            texture_height_scale=data.get("texture_height_scale", 1.0),
        )

    def spawn(self: _B, x: float, y: float, x_velocity: float, y_velocity: float) -> _B:
        """Return a copy placed at (x, y) with the given velocity."""
        return dataclasses.replace(
            self, x=x, y=y, x_velocity=x_velocity, y_velocity=y_velocity
        )

    @abstractmethod
    def kind(self) -> int:
        """Numeric type tag reported in the body's state."""

    def state(self) -> dict[str, float]:
        """Position and type tag, as handed to a view."""
        return {"x": self.x, "y": self.y, "type": self.kind()}

    @property
    def width(self) -> float:
        return abs(self.texture_width * self.texture_width_scale)

    @property
    def height(self) -> float:
        return abs(self.texture_height * self.texture_height_scale)

    @property
    def top_left_x(self) -> float:
        if self.texture_width_scale > 0:
            return self.x
        return self.x + self.width

    @property
    def top_left_y(self) -> float:
        if self.texture_height_scale > 0:
            return self.y
        return self.y + self.height

    def move(self) -> None:
        """Advance the position by one step of velocity."""
        self.x += self.x_velocity
        self.y += self.y_velocity


@dataclass
class Bird(Body):
    """The player's bird."""

    def kind(self) -> int:
        return 0

    def collides_with(self, other: Body) -> bool:
        """Whether the bird touches another body, treated as a pipe."""
        test = collides_bottom if other.texture_height_scale > 0 else collides_top
        return test(
            self.top_left_x,
            self.top_left_y,
            self.width,
            self.height,
            other.top_left_x,
            other.top_left_y,
            other.width,
            other.height,
        )


@dataclass
class Pipe(Body):
    """A pipe; upright when its height scale is positive, flipped otherwise."""

    @classmethod
    def from_data(cls, data: Mapping[str, float]) -> "Pipe":
        """Build a pipe that always starts moving left."""
        pipe = super().from_data(data)
        pipe.x_velocity = -3.0
        pipe.y_velocity = 0.0
        return pipe

    def kind(self) -> int:
        return 1 if self.texture_height_scale > 0 else 2