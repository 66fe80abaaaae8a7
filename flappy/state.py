"""Snapshots handed from the game model to a view, and texture geometry."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class State:
    """Everything a view needs to draw and sound one frame."""

    bird: dict[str, float] = field(default_factory=dict)
    pipes: list[dict[str, float]] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    step: int = 0
    is_jump: bool = False
    is_pipe_reached: bool = False
    is_fail: bool = False
    is_game_over: bool = False


@dataclass(frozen=True)
class TextureSpec:
    """Pixel size of a texture and the scale it is drawn with."""

    texture_width: float
    texture_height: float
    width_scale: float = 1.0
    height_scale: float = 1.0

    @property
    def width(self) -> float:
        """Drawn width, never negative."""
        return abs(self.texture_width * self.width_scale)

    @property
    def height(self) -> float:
        """Drawn height, never negative."""
        return abs(self.texture_height * self.height_scale)