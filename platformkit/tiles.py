"""Typed bricks: floor pieces, cloud, question and shiny blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .objects import BoundingBox, GameObject

if TYPE_CHECKING:
    from .graphics import Game

BRICK_WIDTH = 16
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ID_ANI_BRICK_NORMAL = 10006
ID_ANI_BRICK_FLOOR_BOTTOM_LEFT = 10000
ID_ANI_BRICK_FLOOR_BOTTOM_MIDDLE = 10001
ID_ANI_BRICK_FLOOR_BOTTOM_RIGHT = 10002
ID_ANI_BRICK_FLOOR_TOP_LEFT = 10003
ID_ANI_BRICK_FLOOR_TOP_MIDDLE = 10004
ID_ANI_BRICK_FLOOR_TOP_RIGHT = 10005
ID_ANI_BRICK_CONVEX = 10010
ID_ANI_QUESTION_BRICK = 10020
ID_ANI_QUESTION_BRICK_BOUNCE = 10023
ID_ANI_QUESTION_BRICK_INACTIVE = 10024
ID_ANI_SHINY_BRICK = 10030
ID_ANI_BRICK_CLOUD = 10007

BRICK_TYPE_NORMAL = 6
BRICK_TYPE_FLOOR_BOTTOM_LEFT = 0
BRICK_TYPE_FLOOR_BOTTOM_MIDDLE = 1
BRICK_TYPE_FLOOR_BOTTOM_RIGHT = 2
BRICK_TYPE_FLOOR_TOP_LEFT = 3
BRICK_TYPE_FLOOR_TOP_MIDDLE = 4
BRICK_TYPE_FLOOR_TOP_RIGHT = 5
BRICK_TYPE_CONVEX = 10
BRICK_TYPE_DEATH = 100
BRICK_TYPE_CLOUD = 7
BRICK_TYPE_QUESTION = 20
BRICK_TYPE_QUESTION_INACTIVE = 21
BRICK_TYPE_SHINY = 30

NO_ANIMATION = -1

_ANIMATIONS = {
    BRICK_TYPE_FLOOR_BOTTOM_LEFT: ID_ANI_BRICK_FLOOR_BOTTOM_LEFT,
    BRICK_TYPE_FLOOR_BOTTOM_MIDDLE: ID_ANI_BRICK_FLOOR_BOTTOM_MIDDLE,
    BRICK_TYPE_FLOOR_BOTTOM_RIGHT: ID_ANI_BRICK_FLOOR_BOTTOM_RIGHT,
    BRICK_TYPE_FLOOR_TOP_LEFT: ID_ANI_BRICK_FLOOR_TOP_LEFT,
    BRICK_TYPE_FLOOR_TOP_MIDDLE: ID_ANI_BRICK_FLOOR_TOP_MIDDLE,
    BRICK_TYPE_FLOOR_TOP_RIGHT: ID_ANI_BRICK_FLOOR_TOP_RIGHT,
    BRICK_TYPE_CONVEX: ID_ANI_BRICK_CONVEX,
    BRICK_TYPE_CLOUD: ID_ANI_BRICK_CLOUD,
    BRICK_TYPE_QUESTION: ID_ANI_QUESTION_BRICK,
    BRICK_TYPE_SHINY: ID_ANI_SHINY_BRICK,
}


class TileBrick(GameObject):
    """A 16x16 brick whose look depends on its type; death bricks do not block."""

    def __init__(self, x: float, y: float, brick_type: int,
                 game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.type = brick_type

    def animation_id(self) -> int:
        """The animation for this brick's type, or -1 when it has none."""
        return _ANIMATIONS.get(self.type, NO_ANIMATION)

    def render(self) -> None:
        ani_id = self.animation_id()
        if ani_id == NO_ANIMATION:
            return
        self.game.animations.get(ani_id).render(self.x, self.y)

    def bounding_box(self) -> BoundingBox:
        left = self.x - BRICK_BBOX_WIDTH // 2
        top = self.y - BRICK_BBOX_HEIGHT // 2
        return left, top, left + BRICK_BBOX_WIDTH, top + BRICK_BBOX_HEIGHT

    def is_blocking(self) -> bool:
        return self.type != BRICK_TYPE_DEATH

    def is_collidable(self) -> bool:
        return True