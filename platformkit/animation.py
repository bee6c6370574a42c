"""Frame-timed sprite animations and their registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .graphics import Sprite, get_game

if TYPE_CHECKING:
    from .graphics import Game

log = logging.getLogger(__name__)


@dataclass
class AnimationFrame:
    """A sprite shown for a number of milliseconds."""

    sprite: Sprite
    time: int


class Animation:
    """A looping sequence of frames driven by the game clock."""

    def __init__(self, default_time: int = 100, game: Optional["Game"] = None) -> None:
        self.default_time = default_time
        self.frames: list[AnimationFrame] = []
        self.current_frame = -1
        self.last_frame_time = -1
        self._game_ref = game

    @property
    def _game(self) -> "Game":
        return self._game_ref if self._game_ref is not None else get_game()

    def add(self, sprite_id: int, time: int = 0) -> None:
        """Append a frame; a time of 0 uses the default frame time."""
        sprite = self._game.sprites.get(sprite_id)
        if sprite is None:
            raise KeyError(f"sprite id {sprite_id} not found")
        self.frames.append(AnimationFrame(sprite, time or self.default_time))

    def render(self, x: float, y: float) -> int:
        """Advance the frame when its time has passed, draw it and return its sprite id."""
        if not self.frames:
            raise ValueError("animation has no frames")
        now = self._game.now()
        if self.current_frame == -1:
            self.current_frame = 0
            self.last_frame_time = now
        elif now - self.last_frame_time > self.frames[self.current_frame].time:
            self.current_frame = (self.current_frame + 1) % len(self.frames)
            self.last_frame_time = now
        sprite = self.frames[self.current_frame].sprite
        sprite.draw(x, y)
        return sprite.id

    def reset(self) -> None:
        self.current_frame = -1
        self.last_frame_time = -1


class AnimationRegistry:
    """Animations looked up by numeric id."""

    def __init__(self) -> None:
        self._animations: dict[int, Animation] = {}

    def add(self, animation_id: int, animation: Animation) -> None:
        if animation_id in self._animations:
            log.warning("Animation %d already exists", animation_id)
        self._animations[animation_id] = animation

    def get(self, animation_id: int) -> Animation:
        try:
            return self._animations[animation_id]
        except KeyError:
            raise KeyError(f"animation id {animation_id} not found") from None

    def clear(self) -> None:
        self._animations.clear()

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self._animations

    def __len__(self) -> int:
        return len(self._animations)