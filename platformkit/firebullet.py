"""Fireballs shot in one of eight diagonal directions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .collision import Collision
from .objects import BoundingBox, GameObject

if TYPE_CHECKING:
    from .graphics import Game

FIRE_BULLET_SPEED_Y = 0.04
FIRE_BULLET_SPEED_X_FAR = 0.1042
FIRE_BULLET_SPEED_X_NEAR = 0.042745

FIRE_BULLET_BBOX_WIDTH = 8
FIRE_BULLET_BBOX_HEIGHT = 8

FIRE_BULLET_ANI = 7000
FIRE_BULLET_ANI_INACTIVE = 7001

FIRE_BULLET_STATE_INACTIVE = 0
FIRE_BULLET_STATE_LEFT_SHOOT_UP_NEAR = 3
FIRE_BULLET_STATE_LEFT_SHOOT_UP_FAR = 4
FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_FAR = 5
FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_NEAR = 6
FIRE_BULLET_STATE_RIGHT_SHOOT_UP_NEAR = 7
FIRE_BULLET_STATE_RIGHT_SHOOT_UP_FAR = 8
FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_FAR = 9
FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_NEAR = 10

_VELOCITIES = {
    FIRE_BULLET_STATE_INACTIVE: (0.0, 0.0),
    FIRE_BULLET_STATE_LEFT_SHOOT_UP_NEAR: (-FIRE_BULLET_SPEED_X_NEAR, -FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_LEFT_SHOOT_UP_FAR: (-FIRE_BULLET_SPEED_X_FAR, -FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_FAR: (-FIRE_BULLET_SPEED_X_FAR, FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_NEAR: (-FIRE_BULLET_SPEED_X_NEAR, FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_RIGHT_SHOOT_UP_NEAR: (FIRE_BULLET_SPEED_X_NEAR, -FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_RIGHT_SHOOT_UP_FAR: (FIRE_BULLET_SPEED_X_FAR, -FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_FAR: (FIRE_BULLET_SPEED_X_FAR, FIRE_BULLET_SPEED_Y),
    FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_NEAR: (FIRE_BULLET_SPEED_X_NEAR, FIRE_BULLET_SPEED_Y),
}

_collision = Collision()


class FireBullet(GameObject):
    """A non-blocking projectile; the state picks its direction and speed."""

    def __init__(self, x: float, y: float, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.original_x = int(x)
        self.original_y = int(y)
        self.set_state(FIRE_BULLET_STATE_INACTIVE)

    def bounding_box(self) -> BoundingBox:
        left = self.x - FIRE_BULLET_BBOX_WIDTH // 2
        top = self.y - FIRE_BULLET_BBOX_HEIGHT // 2
        return left, top, left + FIRE_BULLET_BBOX_WIDTH, top + FIRE_BULLET_BBOX_HEIGHT

    def render(self) -> None:
        if self.state == FIRE_BULLET_STATE_INACTIVE:
            return
        self.game.animations.get(FIRE_BULLET_ANI).render(self.x, self.y)

    def set_state(self, state: int) -> None:
        velocity = _VELOCITIES.get(state)
        if velocity is not None:
            self.vx, self.vy = velocity
        super().set_state(state)

    def reload(self) -> None:
        """A fired bullet is not brought back; it is removed instead."""
        self.delete()

    def update(self, dt: float, co_objects: Optional[Iterable[GameObject]] = None) -> None:
        if self.state == FIRE_BULLET_STATE_INACTIVE:
            return
        self.x += self.vx * dt
        self.y += self.vy * dt
        _collision.process(self, dt, co_objects or [])

    def is_collidable(self) -> bool:
        return True

    def is_blocking(self) -> bool:
        return False