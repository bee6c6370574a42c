"""Earlier, simpler sample objects: a bouncing Mario, a ground-bound Mario, a plain brick and its key handler."""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, Optional

from .graphics import KeyEventHandler, Texture, get_game
from .keys import Key
from .mario import (
    ID_ANI_MARIO_BRACE_LEFT,
    ID_ANI_MARIO_BRACE_RIGHT,
    ID_ANI_MARIO_IDLE_LEFT,
    ID_ANI_MARIO_IDLE_RIGHT,
    ID_ANI_MARIO_JUMP_RUN_LEFT,
    ID_ANI_MARIO_JUMP_RUN_RIGHT,
    ID_ANI_MARIO_JUMP_WALK_LEFT,
    ID_ANI_MARIO_JUMP_WALK_RIGHT,
    ID_ANI_MARIO_RUNNING_LEFT,
    ID_ANI_MARIO_RUNNING_RIGHT,
    ID_ANI_MARIO_SIT_LEFT,
    ID_ANI_MARIO_SIT_RIGHT,
    ID_ANI_MARIO_WALKING_LEFT,
    ID_ANI_MARIO_WALKING_RIGHT,
    MARIO_ACCEL_RUN_X,
    MARIO_ACCEL_WALK_X,
    MARIO_GRAVITY,
    MARIO_JUMP_RUN_SPEED_Y,
    MARIO_JUMP_SPEED_Y,
    MARIO_RUNNING_SPEED,
    MARIO_STATE_IDLE,
    MARIO_STATE_JUMP,
    MARIO_STATE_RELEASE_JUMP,
    MARIO_STATE_RUNNING_LEFT,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_SIT,
    MARIO_STATE_SIT_RELEASE,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    MARIO_WALKING_SPEED,
)

if TYPE_CHECKING:
    from .graphics import Game

log = logging.getLogger(__name__)

MARIO_WIDTH = 14
ID_ANI_BOUNCING_MARIO_RIGHT = 500
ID_ANI_BOUNCING_MARIO_LEFT = 501

GROUND_Y = 160.0
GROUND_MARIO_SIT_HEIGHT_ADJUST = 4.0
GROUND_MARIO_MAX_X = 290.0

ID_ANI_GROUND_BRICK = 10000
GROUND_BRICK_WIDTH = 16


class _SampleObject(abc.ABC):
    """A positioned object bound to a game."""

    def __init__(self, x: float = 0.0, y: float = 0.0, game: Optional["Game"] = None) -> None:
        self.x = x
        self.y = y
        self._game_ref = game

    @property
    def game(self) -> "Game":
        return self._game_ref if self._game_ref is not None else get_game()

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance by dt milliseconds."""

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the object."""


class BouncingMario(_SampleObject):
    """Walks back and forth across the back buffer, turning at either edge.

    With a texture it draws that texture; otherwise it plays the right or
    left walking animation depending on its direction.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float = 0.0,
                 texture: Optional[Texture] = None, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.vx = vx
        self.vy = vy
        self.texture = texture

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        right_edge = self.game.backbuffer_width - MARIO_WIDTH
        if self.x <= 0 or self.x >= right_edge:
            self.vx = -self.vx
            if self.x <= 0:
                self.x = 0.0
            elif self.x >= right_edge:
                self.x = float(right_edge)

    def render(self) -> None:
        if self.texture is not None:
            self.game.draw(self.x, self.y, self.texture)
            return
        ani_id = ID_ANI_BOUNCING_MARIO_RIGHT if self.vx > 0 else ID_ANI_BOUNCING_MARIO_LEFT
        self.game.animations.get(ani_id).render(self.x, self.y)


class GroundMario(_SampleObject):
    """Mario on a flat ground line: walks, runs, jumps and sits, without real collision."""

    def __init__(self, x: float, y: float, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.is_sitting = False
        self.max_vx = 0.0
        self.ax = 0.0

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.vy += MARIO_GRAVITY * dt
        self.vx += self.ax * dt
        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx
        log.debug("vx = %0.5f", self.vx)

        if self.y > GROUND_Y:
            self.vy = 0.0
            self.y = GROUND_Y

        if self.vx > 0 and self.x > GROUND_MARIO_MAX_X:
            self.x = GROUND_MARIO_MAX_X
        if self.vx < 0 and self.x < 0:
            self.x = 0.0

    def set_state(self, state: int) -> None:
        if state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_RUNNING_LEFT,
                     MARIO_STATE_WALKING_RIGHT, MARIO_STATE_WALKING_LEFT):
            if not self.is_sitting:
                running = state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_RUNNING_LEFT)
                sign = 1 if state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_WALKING_RIGHT) else -1
                self.max_vx = sign * (MARIO_RUNNING_SPEED if running else MARIO_WALKING_SPEED)
                self.ax = sign * (MARIO_ACCEL_RUN_X if running else MARIO_ACCEL_WALK_X)
                self.nx = sign
        elif state == MARIO_STATE_JUMP:
            if not self.is_sitting and self.y == GROUND_Y:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MARIO_STATE_RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MARIO_STATE_SIT:
            if self.y == GROUND_Y:
                state = MARIO_STATE_IDLE
                self.is_sitting = True
                self.vx = 0.0
                self.vy = 0.0
        elif state == MARIO_STATE_SIT_RELEASE:
            self.is_sitting = False
            state = MARIO_STATE_IDLE
        elif state == MARIO_STATE_IDLE:
            self.ax = 0.0
            self.vx = 0.0
        self.state = state

    def animation_id(self) -> int:
        """The animation matching height, sitting and movement."""
        if self.y < GROUND_Y:
            if abs(self.ax) == MARIO_ACCEL_RUN_X:
                return ID_ANI_MARIO_JUMP_RUN_RIGHT if self.nx >= 0 else ID_ANI_MARIO_JUMP_RUN_LEFT
            return ID_ANI_MARIO_JUMP_WALK_RIGHT if self.nx >= 0 else ID_ANI_MARIO_JUMP_WALK_LEFT
        if self.is_sitting:
            return ID_ANI_MARIO_SIT_RIGHT if self.nx > 0 else ID_ANI_MARIO_SIT_LEFT
        if self.vx == 0:
            return ID_ANI_MARIO_IDLE_RIGHT if self.nx > 0 else ID_ANI_MARIO_IDLE_LEFT
        if self.vx > 0:
            if self.ax < 0:
                return ID_ANI_MARIO_BRACE_RIGHT
            if self.ax == MARIO_ACCEL_RUN_X:
                return ID_ANI_MARIO_RUNNING_RIGHT
            if self.ax == MARIO_ACCEL_WALK_X:
                return ID_ANI_MARIO_WALKING_RIGHT
        else:
            if self.ax > 0:
                return ID_ANI_MARIO_BRACE_LEFT
            if self.ax == -MARIO_ACCEL_RUN_X:
                return ID_ANI_MARIO_RUNNING_LEFT
            if self.ax == -MARIO_ACCEL_WALK_X:
                return ID_ANI_MARIO_WALKING_LEFT
        return ID_ANI_MARIO_IDLE_RIGHT

    def render(self) -> None:
        offset = GROUND_MARIO_SIT_HEIGHT_ADJUST if self.is_sitting else 0.0
        self.game.animations.get(self.animation_id()).render(self.x, self.y + offset)


class GroundBrick(_SampleObject):
    """A static brick drawn with the brick animation."""

    def update(self, dt: float) -> None:
        """Bricks do not move."""

    def render(self) -> None:
        self.game.animations.get(ID_ANI_GROUND_BRICK).render(self.x, self.y)


class GroundKeyHandler(KeyEventHandler):
    """Arrows move, A runs, S jumps and Down sits; sitting wins over moving."""

    def __init__(self, mario: Optional[GroundMario] = None) -> None:
        self._mario = mario

    @property
    def mario(self) -> GroundMario:
        if self._mario is None:
            raise RuntimeError("no Mario to control")
        return self._mario

    @mario.setter
    def mario(self, value: Optional[GroundMario]) -> None:
        self._mario = value

    def on_key_down(self, key_code: int) -> None:
        log.debug("KeyDown: %d", key_code)
        if key_code == Key.S:
            self.mario.set_state(MARIO_STATE_JUMP)

    def on_key_up(self, key_code: int) -> None:
        log.debug("KeyUp: %d", key_code)
        if key_code == Key.S:
            self.mario.set_state(MARIO_STATE_RELEASE_JUMP)
        elif key_code == Key.DOWN:
            self.mario.set_state(MARIO_STATE_SIT_RELEASE)

    def key_state(self, game: "Game") -> None:
        running = game.is_key_down(Key.A)
        if game.is_key_down(Key.RIGHT):
            self.mario.set_state(MARIO_STATE_RUNNING_RIGHT if running
                                 else MARIO_STATE_WALKING_RIGHT)
        elif game.is_key_down(Key.LEFT):
            self.mario.set_state(MARIO_STATE_RUNNING_LEFT if running
                                 else MARIO_STATE_WALKING_LEFT)
        else:
            self.mario.set_state(MARIO_STATE_IDLE)

        if game.is_key_down(Key.DOWN):
            self.mario.set_state(MARIO_STATE_SIT)