"""The heads-up display: lives, score, coins, time, world and the P-meter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .graphics import Sprite, get_game

if TYPE_CHECKING:
    from .graphics import Game

ID_ANI_P_METER_MAX = 9000
ID_TEX_HUD = 100000
ID_SPRITE_MARIO_ICON = 100037
ID_SPRITE_P_METER = 100038
ID_SPRITE_DIGIT_0 = 100001
ID_SPRITE_LETTER_A = 100011
FONT_BBOX_WIDTH = 8
FONT_BBOX_HEIGHT = 8

DEFAULT_LIVES = 4
DEFAULT_TIME = 300
P_METER_MAX = 6
NO_GLYPH = 0


def format_number(number: int, length: int) -> str:
    """Zero-pad number to length digits, keeping only the last length characters."""
    text = str(number).rjust(length, "0")
    if len(text) > length:
        text = text[len(text) - length:]
    return text


def glyph_sprite_id(char: str) -> int:
    """The font sprite id for a digit or capital letter, or 0 for anything else."""
    if "0" <= char <= "9":
        return ord(char) - ord("0") + ID_SPRITE_DIGIT_0
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + ID_SPRITE_LETTER_A
    return NO_GLYPH


class Hud:
    """Shows the player's progress along the bottom of the screen.

    The player exposes ``coins`` and, when it has them, ``points`` and
    ``p_meter`` (0 to 600).
    """

    def __init__(self, player: Any, game: Optional["Game"] = None) -> None:
        self._game_ref = game
        self.player = player
        self.score = 0
        self.coin = 0
        self.p_meter = 0
        self.lives = DEFAULT_LIVES
        self.remaining_time = DEFAULT_TIME
        self.timer_start = self.game.now()

    @property
    def game(self) -> "Game":
        return self._game_ref if self._game_ref is not None else get_game()

    def _sprite(self, sprite_id: int) -> Sprite:
        sprite = self.game.sprites.get(sprite_id)
        if sprite is None:
            raise KeyError(f"sprite id {sprite_id} not found")
        return sprite

    def update(self, dt: float) -> None:
        """Copy the player's counters and tick the clock down once per second."""
        if self.player is not None:
            self.coin = getattr(self.player, "coins", 0)
            self.score = getattr(self.player, "points", 0)
            self.p_meter = int(getattr(self.player, "p_meter", 0)) // 100

        now = self.game.now()
        if now - self.timer_start > 1000:
            if self.remaining_time > 0:
                self.remaining_time -= 1
            self.timer_start = now

    def render(self) -> None:
        game = self.game
        hud_x = game.cam_x + game.backbuffer_width // 2
        hud_y = game.cam_y + game.backbuffer_height - 16

        self._sprite(ID_TEX_HUD).draw(hud_x, hud_y)
        self._sprite(ID_SPRITE_MARIO_ICON).draw(hud_x - 105, hud_y + 5)
        self.render_number(self.lives, hud_x - 77, hud_y + 6, 1)
        self.render_number(self.score, hud_x - 61, hud_y + 6, 7)
        self.render_number(self.coin, hud_x + 19, hud_y - 2, 2)
        self.render_number(self.remaining_time, hud_x + 11, hud_y + 6, 3)
        self.render_number(1, hud_x - 77, hud_y - 2, 1)

        if self.p_meter > 0:
            arrow = self._sprite(ID_SPRITE_P_METER)
            for i in range(self.p_meter):
                arrow.draw(hud_x - 62 + FONT_BBOX_WIDTH * i, hud_y - 3.0)
        if self.p_meter == P_METER_MAX:
            game.animations.get(ID_ANI_P_METER_MAX).render(
                hud_x - 65 + FONT_BBOX_WIDTH * 7, hud_y - 3.0)

    def render_number(self, number: int, x: float, y: float, length: int) -> None:
        self.render_text(format_number(number, length), x, y)

    def render_text(self, text: str, x: float, y: float) -> None:
        """Draw text in the HUD font; characters without a glyph are left blank."""
        sprites = self.game.sprites
        for i, char in enumerate(text):
            sprite = sprites.get(glyph_sprite_id(char))
            if sprite is not None:
                sprite.draw(x + i * FONT_BBOX_WIDTH, y)