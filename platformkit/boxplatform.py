"""A rectangular platform built from a grid of cells, with a shadow column on its right."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .objects import BBOX_ALPHA, ID_TEX_BBOX, BoundingBox, GameObject

if TYPE_CHECKING:
    from .graphics import Game

NO_SPRITE = -1


class BoxPlatform(GameObject):
    """A box of length x width cells that can only be landed on from above.

    Each row is drawn as a left cell, middle cells, a right cell and a shadow
    cell. A sprite id of -1 leaves that cell undrawn.
    """

    def __init__(self, x: float, y: float, length: int, width: int,
                 cell_width: float, cell_height: float,
                 sprite_id_tl: int, sprite_id_tr: int,
                 sprite_id_bl: int, sprite_id_br: int, sprite_id_fill: int,
                 sprite_id_mt: int, sprite_id_mb: int,
                 sprite_id_ml: int, sprite_id_mr: int,
                 sprite_id_sot_corner: int, sprite_id_sot_body: int,
                 sprite_id_sot_bottom: int, game: Optional["Game"] = None) -> None:
        super().__init__(x, y, game)
        self.length = length
        self.width = width
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.sprite_id_tl = sprite_id_tl
        self.sprite_id_tr = sprite_id_tr
        self.sprite_id_bl = sprite_id_bl
        self.sprite_id_br = sprite_id_br
        self.sprite_id_fill = sprite_id_fill
        self.sprite_id_mt = sprite_id_mt
        self.sprite_id_mb = sprite_id_mb
        self.sprite_id_ml = sprite_id_ml
        self.sprite_id_mr = sprite_id_mr
        self.sprite_id_sot_corner = sprite_id_sot_corner
        self.sprite_id_sot_body = sprite_id_sot_body
        self.sprite_id_sot_bottom = sprite_id_sot_bottom

    def _draw(self, sprite_id: int, x: float, y: float) -> None:
        sprite = self.game.sprites.get(sprite_id)
        if sprite is None:
            raise KeyError(f"sprite id {sprite_id} not found")
        sprite.draw(x, y)

    def render(self) -> None:
        if self.length <= 0 or self.width <= 0:
            return
        yy = self.y
        self.render_layer(self.sprite_id_tl, self.sprite_id_mt, self.sprite_id_tr,
                          self.sprite_id_sot_corner, yy)
        yy += self.cell_height
        for _ in range(1, self.width - 1):
            self.render_layer(self.sprite_id_ml, self.sprite_id_fill, self.sprite_id_mr,
                              self.sprite_id_sot_body, yy)
            yy += self.cell_height
        if self.width > 1:
            self.render_layer(self.sprite_id_bl, self.sprite_id_mb, self.sprite_id_br,
                              self.sprite_id_sot_bottom, yy)

    def render_layer(self, left_id: int, mid_id: int, right_id: int, shadow_id: int,
                     yy: float) -> None:
        """Draw one row of the box at height yy."""
        xx = self.x
        if left_id != NO_SPRITE:
            self._draw(left_id, xx, yy)
        xx += self.cell_width

        if mid_id != NO_SPRITE:
            for _ in range(1, self.length - 1):
                self._draw(mid_id, xx, yy)
                xx += self.cell_width
        else:
            xx += self.cell_width * (self.length - 2)

        if right_id != NO_SPRITE and self.length > 1:
            self._draw(right_id, xx, yy)
        xx += self.cell_width

        if shadow_id != NO_SPRITE:
            self._draw(shadow_id, xx, yy)

    def bounding_box(self) -> BoundingBox:
        left = self.x - self.cell_width / 2
        top = self.y - self.cell_height / 2
        return (left, top, left + self.cell_width * self.length,
                top + self.cell_height * self.width)

    def render_bounding_box(self) -> None:
        """Draw the bounding box translucently, centred on the box."""
        game = self.game
        texture = game.textures.get(ID_TEX_BBOX)
        left, top, right, bottom = self.bounding_box()
        rect = (0, 0, int(right) - int(left), int(bottom) - int(top))
        xx = left + (right - left) / 2
        yy = top + (bottom - top) / 2
        game.draw(xx - game.cam_x, yy - game.cam_y, texture, rect, BBOX_ALPHA)

    def is_collidable(self) -> bool:
        return True

    def is_direction_collidable(self, nx: float, ny: float) -> bool:
        return nx == 0 and ny == -1