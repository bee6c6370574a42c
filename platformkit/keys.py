"""Keyboard codes and the key handler that drives Mario."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Callable, Optional

from .graphics import KeyEventHandler
from .mario import (
    MARIO_LEVEL_BIG,
    MARIO_LEVEL_SMALL,
    MARIO_STATE_IDLE,
    MARIO_STATE_JUMP,
    MARIO_STATE_RELEASE_JUMP,
    MARIO_STATE_RUNNING_LEFT,
    MARIO_STATE_RUNNING_RIGHT,
    MARIO_STATE_SIT,
    MARIO_STATE_SIT_RELEASE,
    MARIO_STATE_WALKING_LEFT,
    MARIO_STATE_WALKING_RIGHT,
    Mario,
)

if TYPE_CHECKING:
    from .graphics import Game

log = logging.getLogger(__name__)


class Key(enum.IntEnum):
    """Keyboard scan codes used by the sample."""

    KEY_1 = 0x02
    KEY_2 = 0x03
    R = 0x13
    A = 0x1E
    S = 0x1F
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class SampleKeyHandler(KeyEventHandler):
    """Arrows move, A runs, S jumps, Down sits, 1/2 set the level and R reloads.

    The controlled Mario is held in ``mario`` and may be replaced, for example
    after a reload; ``reload`` is called when R is pressed.
    """

    def __init__(self, mario: Optional[Mario] = None,
                 reload: Optional[Callable[[], object]] = None) -> None:
        self._mario = mario
        self.reload = reload

    @property
    def mario(self) -> Mario:
        if self._mario is None:
            raise RuntimeError("no Mario to control")
        return self._mario

    @mario.setter
    def mario(self, value: Optional[Mario]) -> None:
        self._mario = value

    def on_key_down(self, key_code: int) -> None:
        log.debug("KeyDown: %d", key_code)
        if key_code == Key.DOWN:
            self.mario.set_state(MARIO_STATE_SIT)
        elif key_code == Key.S:
            self.mario.set_state(MARIO_STATE_JUMP)
        elif key_code == Key.KEY_1:
            self.mario.set_level(MARIO_LEVEL_SMALL)
        elif key_code == Key.KEY_2:
            self.mario.set_level(MARIO_LEVEL_BIG)
        elif key_code == Key.R and self.reload is not None:
            self.reload()

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