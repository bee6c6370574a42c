"""The player character with levels, platform physics and enemy interaction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from .collision import Collision, CollisionEvent
from .objects import GOOMBA_STATE_DIE, BoundingBox, Coin, GameObject, Goomba

if TYPE_CHECKING:
    from .graphics import Game

log = logging.getLogger(__name__)

MARIO_WALKING_SPEED = 0.1
MARIO_RUNNING_SPEED = 0.2
MARIO_ACCEL_WALK_X = 0.0005
MARIO_ACCEL_RUN_X = 0.0007
MARIO_JUMP_SPEED_Y = 0.5
MARIO_JUMP_RUN_SPEED_Y = 0.6
MARIO_GRAVITY = 0.002
MARIO_JUMP_DEFLECT_SPEED = 0.4

MARIO_STATE_DIE = -10
MARIO_STATE_IDLE = 0
MARIO_STATE_WALKING_RIGHT = 100
MARIO_STATE_WALKING_LEFT = 200
MARIO_STATE_JUMP = 300
MARIO_STATE_RELEASE_JUMP = 301
MARIO_STATE_RUNNING_RIGHT = 400
MARIO_STATE_RUNNING_LEFT = 500
MARIO_STATE_SIT = 600
MARIO_STATE_SIT_RELEASE = 601

ID_ANI_MARIO_IDLE_RIGHT = 400
ID_ANI_MARIO_IDLE_LEFT = 401
ID_ANI_MARIO_WALKING_RIGHT = 500
ID_ANI_MARIO_WALKING_LEFT = 501
ID_ANI_MARIO_RUNNING_RIGHT = 600
ID_ANI_MARIO_RUNNING_LEFT = 601
ID_ANI_MARIO_JUMP_WALK_RIGHT = 700
ID_ANI_MARIO_JUMP_WALK_LEFT = 701
ID_ANI_MARIO_JUMP_RUN_RIGHT = 800
ID_ANI_MARIO_JUMP_RUN_LEFT = 801
ID_ANI_MARIO_SIT_RIGHT = 900
ID_ANI_MARIO_SIT_LEFT = 901
ID_ANI_MARIO_BRACE_RIGHT = 1000
ID_ANI_MARIO_BRACE_LEFT = 1001
ID_ANI_MARIO_DIE = 999

ID_ANI_MARIO_SMALL_IDLE_RIGHT = 1100
ID_ANI_MARIO_SMALL_IDLE_LEFT = 1102
ID_ANI_MARIO_SMALL_WALKING_RIGHT = 1200
ID_ANI_MARIO_SMALL_WALKING_LEFT = 1201
ID_ANI_MARIO_SMALL_RUNNING_RIGHT = 1300
ID_ANI_MARIO_SMALL_RUNNING_LEFT = 1301
ID_ANI_MARIO_SMALL_BRACE_RIGHT = 1400
ID_ANI_MARIO_SMALL_BRACE_LEFT = 1401
ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT = 1500
ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT = 1501
ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT = 1600
ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT = 1601

GROUND_Y = 160.0

MARIO_LEVEL_SMALL = 1
MARIO_LEVEL_BIG = 2

MARIO_BIG_BBOX_WIDTH = 14
MARIO_BIG_BBOX_HEIGHT = 24
MARIO_BIG_SITTING_BBOX_WIDTH = 14
MARIO_BIG_SITTING_BBOX_HEIGHT = 16
MARIO_SIT_HEIGHT_ADJUST = (MARIO_BIG_BBOX_HEIGHT - MARIO_BIG_SITTING_BBOX_HEIGHT) // 2
MARIO_SMALL_BBOX_WIDTH = 13
MARIO_SMALL_BBOX_HEIGHT = 12

MARIO_UNTOUCHABLE_TIME = 2500

_BIG_IDS = {
    "jump_run": (ID_ANI_MARIO_JUMP_RUN_RIGHT, ID_ANI_MARIO_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_JUMP_WALK_RIGHT, ID_ANI_MARIO_JUMP_WALK_LEFT),
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_IDLE_RIGHT, ID_ANI_MARIO_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_BRACE_RIGHT, ID_ANI_MARIO_BRACE_LEFT),
    "run": (ID_ANI_MARIO_RUNNING_RIGHT, ID_ANI_MARIO_RUNNING_LEFT),
    "walk": (ID_ANI_MARIO_WALKING_RIGHT, ID_ANI_MARIO_WALKING_LEFT),
}

_SMALL_IDS = {
    "jump_run": (ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT, ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT),
    "jump_walk": (ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT, ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT),
    "sit": (ID_ANI_MARIO_SIT_RIGHT, ID_ANI_MARIO_SIT_LEFT),
    "idle": (ID_ANI_MARIO_SMALL_IDLE_RIGHT, ID_ANI_MARIO_SMALL_IDLE_LEFT),
    "brace": (ID_ANI_MARIO_SMALL_BRACE_RIGHT, ID_ANI_MARIO_SMALL_BRACE_LEFT),
    "run": (ID_ANI_MARIO_SMALL_RUNNING_RIGHT, ID_ANI_MARIO_SMALL_RUNNING_LEFT),
    "walk": (ID_ANI_MARIO_SMALL_WALKING_RIGHT, ID_ANI_MARIO_SMALL_WALKING_LEFT),
}

_collision = Collision()


class Mario(GameObject):
    """The player: walks, runs, jumps, sits, stomps goombas and collects coins."""

    def __init__(self, x: float, y: float, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.is_sitting = False
        self.max_vx = 0.0
        self.ax = 0.0
        self.ay = MARIO_GRAVITY
        self.level = MARIO_LEVEL_BIG
        self.untouchable = 0
        self.untouchable_start = 0
        self.is_on_platform = False
        self.coins = 0

    def update(self, dt: float, co_objects: Optional[Iterable[GameObject]] = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt
        if abs(self.vx) > abs(self.max_vx):
            self.vx = self.max_vx

        if self.game.now() - self.untouchable_start > MARIO_UNTOUCHABLE_TIME:
            self.untouchable_start = 0
            self.untouchable = 0

        _collision.process(self, dt, co_objects or [])

    def on_no_collision(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.is_on_platform = False

    def on_collision_with(self, event: CollisionEvent) -> None:
        if event.ny != 0 and event.obj.is_blocking():
            self.vy = 0.0
            if event.ny < 0:
                self.is_on_platform = True
        elif event.nx != 0 and event.obj.is_blocking():
            self.vx = 0.0

        if isinstance(event.obj, Goomba):
            self._on_collision_with_goomba(event)
        elif isinstance(event.obj, Coin):
            self._on_collision_with_coin(event)

    def _on_collision_with_goomba(self, event: CollisionEvent) -> None:
        goomba: Goomba = event.obj
        if event.ny < 0:
            if goomba.state != GOOMBA_STATE_DIE:
                goomba.set_state(GOOMBA_STATE_DIE)
                self.vy = -MARIO_JUMP_DEFLECT_SPEED
        elif self.untouchable == 0 and goomba.state != GOOMBA_STATE_DIE:
            if self.level > MARIO_LEVEL_SMALL:
                self.level = MARIO_LEVEL_SMALL
                self.start_untouchable()
            else:
                self.set_state(MARIO_STATE_DIE)

    def _on_collision_with_coin(self, event: CollisionEvent) -> None:
        event.obj.delete()
        self.coins += 1

    def _pick(self, ids: dict[str, tuple[int, int]]) -> int:
        def side(key: str, right: bool) -> int:
            return ids[key][0 if right else 1]

        if not self.is_on_platform:
            key = "jump_run" if abs(self.ax) == MARIO_ACCEL_RUN_X else "jump_walk"
            return side(key, self.nx >= 0)
        if self.is_sitting:
            return side("sit", self.nx > 0)
        if self.vx == 0:
            return side("idle", self.nx > 0)
        if self.vx > 0:
            if self.ax < 0:
                return side("brace", True)
            if self.ax == MARIO_ACCEL_RUN_X:
                return side("run", True)
            if self.ax == MARIO_ACCEL_WALK_X:
                return side("walk", True)
        else:
            if self.ax > 0:
                return side("brace", False)
            if self.ax == -MARIO_ACCEL_RUN_X:
                return side("run", False)
            if self.ax == -MARIO_ACCEL_WALK_X:
                return side("walk", False)
        return side("idle", True)

    def animation_id(self) -> int:
        """The animation matching the current state, level and movement."""
        if self.state == MARIO_STATE_DIE:
            return ID_ANI_MARIO_DIE
        if self.level == MARIO_LEVEL_BIG:
            return self._pick(_BIG_IDS)
        if self.level == MARIO_LEVEL_SMALL:
            return self._pick(_SMALL_IDS)
        raise ValueError(f"unknown level {self.level}")

    def render(self) -> None:
        self.game.animations.get(self.animation_id()).render(self.x, self.y)
        log.debug("Coins: %d", self.coins)

    def set_state(self, state: int) -> None:
        if self.state == MARIO_STATE_DIE:
            return

        if state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_RUNNING_LEFT,
                     MARIO_STATE_WALKING_RIGHT, MARIO_STATE_WALKING_LEFT):
            if not self.is_sitting:
                running = state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_RUNNING_LEFT)
                sign = 1 if state in (MARIO_STATE_RUNNING_RIGHT, MARIO_STATE_WALKING_RIGHT) else -1
                speed = MARIO_RUNNING_SPEED if running else MARIO_WALKING_SPEED
                accel = MARIO_ACCEL_RUN_X if running else MARIO_ACCEL_WALK_X
                self.max_vx = sign * speed
                self.ax = sign * accel
                self.nx = sign
        elif state == MARIO_STATE_JUMP:
            if not self.is_sitting and self.is_on_platform:
                if abs(self.vx) == MARIO_RUNNING_SPEED:
                    self.vy = -MARIO_JUMP_RUN_SPEED_Y
                else:
                    self.vy = -MARIO_JUMP_SPEED_Y
        elif state == MARIO_STATE_RELEASE_JUMP:
            if self.vy < 0:
                self.vy += MARIO_JUMP_SPEED_Y / 2
        elif state == MARIO_STATE_SIT:
            if self.is_on_platform and self.level != MARIO_LEVEL_SMALL:
                state = MARIO_STATE_IDLE
                self.is_sitting = True
                self.vx = 0.0
                self.vy = 0.0
                self.y += MARIO_SIT_HEIGHT_ADJUST
        elif state == MARIO_STATE_SIT_RELEASE:
            if self.is_sitting:
                self.is_sitting = False
                state = MARIO_STATE_IDLE
                self.y -= MARIO_SIT_HEIGHT_ADJUST
        elif state == MARIO_STATE_IDLE:
            self.ax = 0.0
            self.vx = 0.0
        elif state == MARIO_STATE_DIE:
            self.vy = -MARIO_JUMP_DEFLECT_SPEED
            self.vx = 0.0
            self.ax = 0.0

        super().set_state(state)

    def bounding_box(self) -> BoundingBox:
        if self.level == MARIO_LEVEL_BIG:
            if self.is_sitting:
                width, height = MARIO_BIG_SITTING_BBOX_WIDTH, MARIO_BIG_SITTING_BBOX_HEIGHT
            else:
                width, height = MARIO_BIG_BBOX_WIDTH, MARIO_BIG_BBOX_HEIGHT
        else:
            width, height = MARIO_SMALL_BBOX_WIDTH, MARIO_SMALL_BBOX_HEIGHT
        left = self.x - width // 2
        top = self.y - height // 2
        return left, top, left + width, top + height

    def set_level(self, level: int) -> None:
        """Change level, lifting Mario when he grows so he does not sink into the ground."""
        if self.level == MARIO_LEVEL_SMALL:
            self.y -= (MARIO_BIG_BBOX_HEIGHT - MARIO_SMALL_BBOX_HEIGHT) // 2
        self.level = level

    def start_untouchable(self) -> None:
        self.untouchable = 1
        self.untouchable_start = self.game.now()

    def is_collidable(self) -> bool:
        return self.state != MARIO_STATE_DIE

    def is_blocking(self) -> bool:
        return self.state != MARIO_STATE_DIE and self.untouchable == 0