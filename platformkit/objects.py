"""Game objects: the base class, bricks, coins, cloud platforms and goombas."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Iterable, Optional

from .collision import Collision, CollisionEvent
from .graphics import get_game

if TYPE_CHECKING:
    from .graphics import Game

ID_TEX_BBOX = -100
BBOX_ALPHA = 0.25

ID_ANI_BRICK = 10000
BRICK_WIDTH = 16
BRICK_BBOX_WIDTH = 16
BRICK_BBOX_HEIGHT = 16

ID_ANI_COIN = 11000
COIN_WIDTH = 10
COIN_BBOX_WIDTH = 10
COIN_BBOX_HEIGHT = 16

GOOMBA_GRAVITY = 0.002
GOOMBA_WALKING_SPEED = 0.05
GOOMBA_BBOX_WIDTH = 16
GOOMBA_BBOX_HEIGHT = 14
GOOMBA_BBOX_HEIGHT_DIE = 7
GOOMBA_DIE_TIMEOUT = 500
GOOMBA_STATE_WALKING = 100
GOOMBA_STATE_DIE = 200
ID_ANI_GOOMBA_WALKING = 5000
ID_ANI_GOOMBA_DIE = 5001

BoundingBox = tuple[float, float, float, float]

_collision = Collision()


class GameObject(abc.ABC):
    """Something in the world with a position, a speed, a facing and a state."""

    def __init__(self, x: float = 0.0, y: float = 0.0, game: Optional["Game"] = None) -> None:
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self.nx = 1
        self.state = -1
        self.is_deleted = False
        self._game_ref = game

    @property
    def game(self) -> "Game":
        return self._game_ref if self._game_ref is not None else get_game()

    @abc.abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Return (left, top, right, bottom)."""

    def update(self, dt: float, co_objects: Optional[Iterable["GameObject"]] = None) -> None:
        """Advance the object by dt milliseconds; nothing happens by default."""

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the object."""

    def set_state(self, state: int) -> None:
        self.state = state

    def delete(self) -> None:
        self.is_deleted = True

    def is_collidable(self) -> bool:
        """Whether the object looks for collisions while moving."""
        return False

    def is_tangible(self) -> bool:
        """Whether blocking objects stop this object."""
        return True

    def is_blocking(self) -> bool:
        """Whether this object pushes back objects that hit it."""
        return True

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        """Whether a hit with normal (nx, ny) counts."""
        return True

    def on_no_collision(self, dt: float) -> None:
        """Called when a move of dt milliseconds hit nothing."""

    def on_collision_with(self, event: CollisionEvent) -> None:
        """Called for each collision found while moving."""

    def render_bounding_box(self) -> None:
        """Draw the bounding box translucently over the object."""
        game = self.game
        texture = game.textures.get(ID_TEX_BBOX)
        left, top, right, bottom = self.bounding_box()
        rect = (0, 0, int(right) - int(left), int(bottom) - int(top))
        game.draw(self.x - game.cam_x, self.y - game.cam_y, texture, rect, BBOX_ALPHA)


def _centred_box(x: float, y: float, width: int, height: int) -> BoundingBox:
    left = x - width // 2
    top = y - height // 2
    return left, top, left + width, top + height


class Brick(GameObject):
    """A solid block."""

    def bounding_box(self) -> BoundingBox:
        return _centred_box(self.x, self.y, BRICK_BBOX_WIDTH, BRICK_BBOX_HEIGHT)

    def render(self) -> None:
        self.game.animations.get(ID_ANI_BRICK).render(self.x, self.y)


class Coin(GameObject):
    """A coin that can be picked up; it does not block."""

    def bounding_box(self) -> BoundingBox:
        return _centred_box(self.x, self.y, COIN_BBOX_WIDTH, COIN_BBOX_HEIGHT)

    def render(self) -> None:
        self.game.animations.get(ID_ANI_COIN).render(self.x, self.y)
        self.render_bounding_box()

    def is_blocking(self) -> bool:
        return False


class Platform(GameObject):
    """A horizontal row of cells that can only be landed on from above."""

    def __init__(self, x: float, y: float, cell_width: float, cell_height: float,
                 length: int, sprite_id_begin: int, sprite_id_middle: int,
                 sprite_id_end: int, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.length = length
        self.sprite_id_begin = sprite_id_begin
        self.sprite_id_middle = sprite_id_middle
        self.sprite_id_end = sprite_id_end

    def _draw_sprite(self, sprite_id: int, x: float) -> None:
        sprite = self.game.sprites.get(sprite_id)
        if sprite is None:
            raise KeyError(f"sprite id {sprite_id} not found")
        sprite.draw(x, self.y)

    def render(self) -> None:
        if self.length <= 0:
            return
        xx = self.x
        self._draw_sprite(self.sprite_id_begin, xx)
        xx += self.cell_width
        for _ in range(1, self.length - 1):
            self._draw_sprite(self.sprite_id_middle, xx)
            xx += self.cell_width
        if self.length > 1:
            self._draw_sprite(self.sprite_id_end, xx)

    def bounding_box(self) -> BoundingBox:
        half = self.cell_width / 2
        left = self.x - half
        top = self.y - self.cell_height / 2
        right = left + self.cell_width * self.length - half
        return left, top, right, top + self.cell_height

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        return nx == 0 and ny == -1


class Goomba(GameObject):
    """A walking enemy that turns at walls and disappears shortly after dying."""

    def __init__(self, x: float, y: float, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.ax = 0.0
        self.ay = GOOMBA_GRAVITY
        self.die_start = -1
        self.set_state(GOOMBA_STATE_WALKING)

    def bounding_box(self) -> BoundingBox:
        height = GOOMBA_BBOX_HEIGHT_DIE if self.state == GOOMBA_STATE_DIE else GOOMBA_BBOX_HEIGHT
        return _centred_box(self.x, self.y, GOOMBA_BBOX_WIDTH, height)

    def on_no_collision(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def on_collision_with(self, event: CollisionEvent) -> None:
        if not event.obj.is_blocking():
            return
        if isinstance(event.obj, Goomba):
            return
        if event.ny != 0:
            self.vy = 0.0
        elif event.nx != 0:
            self.vx = -self.vx

    def update(self, dt: float, co_objects: Optional[Iterable[GameObject]] = None) -> None:
        self.vy += self.ay * dt
        self.vx += self.ax * dt
        if (self.state == GOOMBA_STATE_DIE
                and self.game.now() - self.die_start > GOOMBA_DIE_TIMEOUT):
            self.is_deleted = True
            return
        _collision.process(self, dt, co_objects or [])

    def render(self) -> None:
        ani_id = ID_ANI_GOOMBA_DIE if self.state == GOOMBA_STATE_DIE else ID_ANI_GOOMBA_WALKING
        self.game.animations.get(ani_id).render(self.x, self.y)
        self.render_bounding_box()

    def set_state(self, state: int) -> None:
        super().set_state(state)
        if state == GOOMBA_STATE_DIE:
            self.die_start = self.game.now()
            self.y += (GOOMBA_BBOX_HEIGHT - GOOMBA_BBOX_HEIGHT_DIE) // 2
            self.vx = 0.0
            self.vy = 0.0
            self.ay = 0.0
        elif state == GOOMBA_STATE_WALKING:
            self.vx = -GOOMBA_WALKING_SPEED

    def is_collidable(self) -> bool:
        return True

    def is_blocking(self) -> bool:
        return False