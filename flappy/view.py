"""Views that draw game states and read the player's input."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

import pygame

from .model import Action
from .state import State, TextureSpec

_TITLE = "Flappy Bird"
_FRAME_RATE = 60
_TICK_EVERY = 6
_BIRD_FRAMES = 3
_BLINK_PERIOD = 60
_BLINK_ON = 30
_SPRITE_SCALE = 2
_BACKGROUND_SCALE = (1.15625, 1.171875)
_BACKGROUND_OFFSETS = (0, 333, 666)
_GAME_OVER_ORIGIN = (96, 21)
_GAME_OVER_POSITION = (500, 125)
_RESTART_POSITION = (500, 250)
_RESTART_SIZE = 50
_SCORE_SIZE = 75
_HIGH_SCORE_SIZE = 30
_SCORE_POSITION = (30, 0)
_HIGH_SCORE_POSITION = (30, 80)
_BOTTOM_PIPE_KIND = 1
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


def next_tick(tick: int, step: int, game_over: bool) -> int:
    """Animation frame of the bird after the given step."""
    if game_over:
        return tick
    if step % _TICK_EVERY == 0:
        tick += 1
    if tick == _BIRD_FRAMES:
        tick = 0
    return tick


def to_screen(height: int, x: float, y: float) -> tuple[int, int]:
    """Convert model coordinates (origin bottom left) to screen pixels."""
    return int(x), height - int(y)


class View(ABC):
    """Shows game states and reports the player's input."""

    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the view is still open."""

    @abstractmethod
    def action(self) -> Action:
        """The player's input for the current frame."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Width and height of the playing field."""

    @abstractmethod
    def bird_texture(self) -> TextureSpec:
        """Geometry of the bird sprite."""

    @abstractmethod
    def pipe_texture(self) -> TextureSpec:
        """Geometry of an upright pipe sprite."""

    @abstractmethod
    def show_state(self, state: State) -> None:
        """Draw and sound one frame."""

    @abstractmethod
    def close(self) -> None:
        """Release the view's resources."""


def _load_image(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path)).convert_alpha()


def _scaled(surface: pygame.Surface, sx: float, sy: float) -> pygame.Surface:
    width, height = surface.get_size()
    return pygame.transform.scale(surface, (round(width * sx), round(height * sy)))


class PygameView(View):
    """A window drawn with pygame, loading its images, sounds and font from assets."""

    def __init__(
        self,
        width: int = 1000,
        height: int = 600,
        assets: Union[str, Path, None] = None,
    ):
        self.width = width
        self.height = height
        root = Path("assets") if assets is None else Path(assets)
        self._tick = 1

        pygame.init()
        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(_TITLE)
        pygame.key.set_repeat()
        self._clock = pygame.time.Clock()
        self._open = True

        images = root / "images"
        self._backgrounds = _scaled(
            _load_image(images / "background.png"), *_BACKGROUND_SCALE
        )
        pipe = _load_image(images / "pipe.png")
        self._pipe_size = pipe.get_size()
        self._bottom_pipe = _scaled(pipe, _SPRITE_SCALE, _SPRITE_SCALE)
        self._top_pipe = pygame.transform.flip(self._bottom_pipe, False, True)

        first = _load_image(images / "flappy1.png")
        second = _load_image(images / "flappy2.png")
        self._bird_size = first.get_size()
        self._bird_frames = tuple(
            _scaled(image, _SPRITE_SCALE, _SPRITE_SCALE)
            for image in (first, first, second)
        )
        self._game_over = _scaled(
            _load_image(images / "gameover.png"), _SPRITE_SCALE, _SPRITE_SCALE
        )

        font_path = str(root / "fonts" / "flappy.ttf")
        self._restart_text = pygame.font.Font(font_path, _RESTART_SIZE).render(
            "Press C to restart", True, _WHITE
        )
        self._score_font = pygame.font.Font(font_path, _SCORE_SIZE)
        self._high_score_font = pygame.font.Font(font_path, _HIGH_SCORE_SIZE)

        audio = root / "audio"
        self._score_sound = self._load_sound(audio / "score.wav")
        self._jump_sound = self._load_sound(audio / "flap.wav")
        self._crash_sound = self._load_sound(audio / "crash.wav")

    @staticmethod
    def _load_sound(path: Path) -> Optional[pygame.mixer.Sound]:
        # Without an audio device the game runs silently.
        if not pygame.mixer.get_init():
            return None
        return pygame.mixer.Sound(str(path))

    def is_alive(self) -> bool:
        if not self._open:
            return False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                break
        return self._open

    def action(self) -> Action:
        if not self._open:
            return Action.NONE
        pressed = pygame.key.get_pressed()
        if pressed[pygame.K_SPACE]:
            return Action.FLAP
        if pressed[pygame.K_c]:
            return Action.RESTART
        return Action.NONE

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def bird_texture(self) -> TextureSpec:
        width, height = self._bird_size
        return TextureSpec(width, height, _SPRITE_SCALE, _SPRITE_SCALE)

    def pipe_texture(self) -> TextureSpec:
        width, height = self._pipe_size
        return TextureSpec(width, height, _SPRITE_SCALE, _SPRITE_SCALE)

    def show_state(self, state: State) -> None:
        if not self._open:
            raise RuntimeError("view is closed")
        self._draw_background()
        self._tick = next_tick(self._tick, state.step, state.is_game_over)
        self._draw_body(self._bird_frames[self._tick], state.bird)
        for pipe in state.pipes:
            if pipe.get("type") == _BOTTOM_PIPE_KIND:
                self._draw_body(self._bottom_pipe, pipe)
            else:
                self._draw_body(self._top_pipe, pipe, flipped=True)
        self._draw_score(state.score, state.high_score)
        self._play_sounds(state)
        if state.is_game_over:
            self._draw_game_over(state.step)
        pygame.display.flip()
        self._clock.tick(_FRAME_RATE)

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.quit()

    def _draw_background(self) -> None:
        self._screen.fill(_BLACK)
        for offset in _BACKGROUND_OFFSETS:
            self._screen.blit(self._backgrounds, (offset, 0))

    def _draw_body(
        self, sprite: pygame.Surface, data: dict[str, float], flipped: bool = False
    ) -> None:
        x, y = to_screen(self.height, data.get("x", 0.0), data.get("y", 0.0))
        if flipped:
            y -= sprite.get_height()
        self._screen.blit(sprite, (x, y))

    def _draw_score(self, score: int, high_score: int) -> None:
        self._screen.blit(
            self._score_font.render(str(score), True, _WHITE), _SCORE_POSITION
        )
        self._screen.blit(
            self._high_score_font.render(f"HI {high_score}", True, _WHITE),
            _HIGH_SCORE_POSITION,
        )

    def _draw_game_over(self, step: int) -> None:
        x = _GAME_OVER_POSITION[0] - _GAME_OVER_ORIGIN[0] * _SPRITE_SCALE
        y = _GAME_OVER_POSITION[1] - _GAME_OVER_ORIGIN[1] * _SPRITE_SCALE
        self._screen.blit(self._game_over, (x, y))
        if step % _BLINK_PERIOD < _BLINK_ON:
            text_x = _RESTART_POSITION[0] - self._restart_text.get_width() / 2
            self._screen.blit(self._restart_text, (text_x, _RESTART_POSITION[1]))

    def _play_sounds(self, state: State) -> None:
        if (
            state.is_jump
            and self._jump_sound is not None
            and self._jump_sound.get_num_channels() == 0
        ):
            self._jump_sound.play()
        if state.is_pipe_reached and self._score_sound is not None:
            self._score_sound.play()
        if state.is_fail and self._crash_sound is not None:
            self._crash_sound.play()