"""Textures, sprites, keyboard input and a headless game engine that records draw calls."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Optional

MAX_FRAME_RATE = 100
KEYBOARD_BUFFER_SIZE = 1024
KEYBOARD_STATE_SIZE = 256

Rect = tuple[int, int, int, int]


@dataclass
class Texture:
    """An image that sprites cut regions from; -1 means an unknown size."""

    path: str = ""
    width: int = -1
    height: int = -1


class TextureRegistry:
    """Textures looked up by numeric id."""

    def __init__(self) -> None:
        self._textures: dict[int, Texture] = {}

    def add(self, texture_id: int, texture: Texture) -> None:
        self._textures[texture_id] = texture

    def get(self, texture_id: int) -> Optional[Texture]:
        """Return the texture, or None when the id is unknown."""
        return self._textures.get(texture_id)

    def __contains__(self, texture_id: object) -> bool:
        return texture_id in self._textures

    def __len__(self) -> int:
        return len(self._textures)


@dataclass
class Sprite:
    """A rectangular region of a texture."""

    id: int
    left: int
    top: int
    right: int
    bottom: int
    texture: Optional[Texture]
    game: Optional["Game"] = field(default=None, repr=False, compare=False)

    @property
    def rect(self) -> Rect:
        return (self.left, self.top, self.right, self.bottom)

    def draw(self, x: float, y: float) -> None:
        """Draw the sprite centred at world position (x, y), offset by the camera."""
        game = self.game if self.game is not None else get_game()
        game.draw(x - game.cam_x, y - game.cam_y, self.texture, self.rect)


class SpriteRegistry:
    """Sprites looked up by numeric id."""

    def __init__(self, game: Optional["Game"] = None) -> None:
        self._game = game
        self._sprites: dict[int, Sprite] = {}

    def add(self, sprite_id: int, left: int, top: int, right: int, bottom: int,
            texture: Optional[Texture]) -> Sprite:
        sprite = Sprite(sprite_id, left, top, right, bottom, texture, self._game)
        self._sprites[sprite_id] = sprite
        return sprite

    def get(self, sprite_id: int) -> Optional[Sprite]:
        """Return the sprite, or None when the id is unknown."""
        return self._sprites.get(sprite_id)

    def clear(self) -> None:
        self._sprites.clear()

    def __contains__(self, sprite_id: object) -> bool:
        return sprite_id in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)


@dataclass(frozen=True)
class DrawCall:
    """One draw request: screen position (centre), texture, source rect and alpha."""

    x: float
    y: float
    texture: Optional[Texture]
    rect: Optional[Rect]
    alpha: float


class KeyEventHandler(abc.ABC):
    """Receives keyboard state once per frame and buffered key events."""

    @abc.abstractmethod
    def key_state(self, game: "Game") -> None:
        """Inspect held keys through game.is_key_down."""

    @abc.abstractmethod
    def on_key_down(self, key_code: int) -> None:
        """Handle a key press."""

    @abc.abstractmethod
    def on_key_up(self, key_code: int) -> None:
        """Handle a key release."""


class Game:
    """The engine: asset registries, camera, a virtual clock, keyboard and a draw list."""

    def __init__(self, backbuffer_width: int = 0, backbuffer_height: int = 0) -> None:
        from .animation import AnimationRegistry

        self.backbuffer_width = backbuffer_width
        self.backbuffer_height = backbuffer_height
        self.cam_x = 0.0
        self.cam_y = 0.0
        self.textures = TextureRegistry()
        self.sprites = SpriteRegistry(self)
        self.animations = AnimationRegistry()
        self.draw_calls: list[DrawCall] = []
        self.key_handler: Optional[KeyEventHandler] = None
        self._ticks = 0
        self._keys_down: set[int] = set()
        self._key_events: list[tuple[bool, int]] = []

    def draw(self, x: float, y: float, texture: Optional[Texture],
             rect: Optional[Rect] = None, alpha: float = 1.0) -> DrawCall:
        """Record a draw of all of the texture, or of rect, centred at (x, y)."""
        call = DrawCall(x, y, texture, rect, alpha)
        self.draw_calls.append(call)
        return call

    def clear_frame(self) -> list[DrawCall]:
        """Return the draws recorded so far and start a new frame."""
        calls, self.draw_calls = self.draw_calls, []
        return calls

    def set_cam_pos(self, x: float, y: float) -> None:
        self.cam_x = x
        self.cam_y = y

    @property
    def cam_pos(self) -> tuple[float, float]:
        return (self.cam_x, self.cam_y)

    def now(self) -> int:
        """Milliseconds on the virtual clock."""
        return self._ticks

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("time cannot go backwards")
        self._ticks += ms
        return self._ticks

    def init_keyboard(self, handler: KeyEventHandler) -> None:
        self.key_handler = handler
        self._keys_down.clear()
        self._key_events.clear()

    @staticmethod
    def _check_key(key_code: int) -> None:
        if not 0 <= key_code < KEYBOARD_STATE_SIZE:
            raise ValueError(f"key code {key_code} out of range")

    def _queue(self, pressed: bool, key_code: int) -> None:
        if len(self._key_events) < KEYBOARD_BUFFER_SIZE:
            self._key_events.append((pressed, key_code))

    def press(self, key_code: int) -> None:
        self._check_key(key_code)
        self._keys_down.add(key_code)
        self._queue(True, key_code)

    def release(self, key_code: int) -> None:
        self._check_key(key_code)
        self._keys_down.discard(key_code)
        self._queue(False, key_code)

    def is_key_down(self, key_code: int) -> bool:
        self._check_key(key_code)
        return key_code in self._keys_down

    def process_keyboard(self) -> None:
        """Report held keys to the handler, then dispatch buffered events in order."""
        if self.key_handler is None:
            raise RuntimeError("keyboard has not been initialised")
        self.key_handler.key_state(self)
        events, self._key_events = self._key_events, []
        for pressed, key_code in events:
            if pressed:
                self.key_handler.on_key_down(key_code)
            else:
                self.key_handler.on_key_up(key_code)


_instance: Optional[Game] = None


def get_game() -> Game:
    """Return the shared game, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Game()
    return _instance