"""Asset loading and the sample collision scene: ground, columns, a cloud platform, goombas and coins."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .animation import Animation
from .graphics import MAX_FRAME_RATE, DrawCall, Game, Texture
from .keys import SampleKeyHandler
from .mario import (
    GROUND_Y,
    ID_ANI_MARIO_BRACE_LEFT,
    ID_ANI_MARIO_BRACE_RIGHT,
    ID_ANI_MARIO_DIE,
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
    ID_ANI_MARIO_SMALL_BRACE_LEFT,
    ID_ANI_MARIO_SMALL_BRACE_RIGHT,
    ID_ANI_MARIO_SMALL_IDLE_LEFT,
    ID_ANI_MARIO_SMALL_IDLE_RIGHT,
    ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT,
    ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT,
    ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT,
    ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT,
    ID_ANI_MARIO_SMALL_RUNNING_LEFT,
    ID_ANI_MARIO_SMALL_RUNNING_RIGHT,
    ID_ANI_MARIO_SMALL_WALKING_LEFT,
    ID_ANI_MARIO_SMALL_WALKING_RIGHT,
    ID_ANI_MARIO_WALKING_LEFT,
    ID_ANI_MARIO_WALKING_RIGHT,
    Mario,
)
from .objects import (
    BRICK_WIDTH,
    COIN_WIDTH,
    ID_ANI_BRICK,
    ID_ANI_COIN,
    ID_ANI_GOOMBA_DIE,
    ID_ANI_GOOMBA_WALKING,
    ID_TEX_BBOX,
    Brick,
    Coin,
    GameObject,
    Goomba,
    Platform,
)

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240

ID_TEX_MARIO = 0
ID_TEX_ENEMY = 10
ID_TEX_MISC = 20

TEXTURES_DIR = "textures"
TEXTURE_PATH_MARIO = f"{TEXTURES_DIR}/mario_transparent.png"
TEXTURE_PATH_MISC = f"{TEXTURES_DIR}/misc_transparent.png"
TEXTURE_PATH_ENEMY = f"{TEXTURES_DIR}/enemies_transparent.png"
TEXTURE_PATH_BBOX = f"{TEXTURES_DIR}/bbox.png"

ID_SPRITE_MARIO = 10000
ID_SPRITE_MARIO_BIG = ID_SPRITE_MARIO + 1000
ID_SPRITE_MARIO_BIG_IDLE = ID_SPRITE_MARIO_BIG + 100
ID_SPRITE_MARIO_BIG_IDLE_LEFT = ID_SPRITE_MARIO_BIG_IDLE + 10
ID_SPRITE_MARIO_BIG_IDLE_RIGHT = ID_SPRITE_MARIO_BIG_IDLE + 20
ID_SPRITE_MARIO_BIG_WALKING = ID_SPRITE_MARIO_BIG + 200
ID_SPRITE_MARIO_BIG_WALKING_LEFT = ID_SPRITE_MARIO_BIG_WALKING + 10
ID_SPRITE_MARIO_BIG_WALKING_RIGHT = ID_SPRITE_MARIO_BIG_WALKING + 20
ID_SPRITE_MARIO_BIG_RUNNING = ID_SPRITE_MARIO_BIG + 300
ID_SPRITE_MARIO_BIG_RUNNING_LEFT = ID_SPRITE_MARIO_BIG_RUNNING + 10
ID_SPRITE_MARIO_BIG_RUNNING_RIGHT = ID_SPRITE_MARIO_BIG_RUNNING + 20
ID_SPRITE_MARIO_BIG_JUMP = ID_SPRITE_MARIO_BIG + 400
ID_SPRITE_MARIO_BIG_JUMP_WALK = ID_SPRITE_MARIO_BIG_JUMP + 10
ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT = ID_SPRITE_MARIO_BIG_JUMP_WALK + 2
ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT = ID_SPRITE_MARIO_BIG_JUMP_WALK + 6
ID_SPRITE_MARIO_BIG_JUMP_RUN = ID_SPRITE_MARIO_BIG_JUMP + 20
ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT = ID_SPRITE_MARIO_BIG_JUMP_RUN + 2
ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT = ID_SPRITE_MARIO_BIG_JUMP_RUN + 6
ID_SPRITE_MARIO_BIG_SIT = ID_SPRITE_MARIO_BIG + 500
ID_SPRITE_MARIO_BIG_SIT_LEFT = ID_SPRITE_MARIO_BIG_SIT + 10
ID_SPRITE_MARIO_BIG_SIT_RIGHT = ID_SPRITE_MARIO_BIG_SIT + 20
ID_SPRITE_MARIO_BIG_BRACE = ID_SPRITE_MARIO_BIG + 600
ID_SPRITE_MARIO_BIG_BRACE_LEFT = ID_SPRITE_MARIO_BIG_BRACE + 10
ID_SPRITE_MARIO_BIG_BRACE_RIGHT = ID_SPRITE_MARIO_BIG_BRACE + 20

ID_SPRITE_MARIO_DIE = ID_SPRITE_MARIO + 3000

ID_SPRITE_MARIO_SMALL = ID_SPRITE_MARIO + 2000
ID_SPRITE_MARIO_SMALL_IDLE = ID_SPRITE_MARIO_SMALL + 100
ID_SPRITE_MARIO_SMALL_IDLE_LEFT = ID_SPRITE_MARIO_SMALL_IDLE + 10
ID_SPRITE_MARIO_SMALL_IDLE_RIGHT = ID_SPRITE_MARIO_SMALL_IDLE + 20
ID_SPRITE_MARIO_SMALL_WALKING = ID_SPRITE_MARIO_SMALL + 200
ID_SPRITE_MARIO_SMALL_WALKING_LEFT = ID_SPRITE_MARIO_SMALL_WALKING + 10
ID_SPRITE_MARIO_SMALL_WALKING_RIGHT = ID_SPRITE_MARIO_SMALL_WALKING + 20
ID_SPRITE_MARIO_SMALL_RUNNING = ID_SPRITE_MARIO_SMALL + 300
ID_SPRITE_MARIO_SMALL_RUNNING_LEFT = ID_SPRITE_MARIO_SMALL_RUNNING + 10
ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT = ID_SPRITE_MARIO_SMALL_RUNNING + 20
ID_SPRITE_MARIO_SMALL_JUMP = ID_SPRITE_MARIO_SMALL + 400
ID_SPRITE_MARIO_SMALL_JUMP_WALK = ID_SPRITE_MARIO_SMALL_JUMP + 10
ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT = ID_SPRITE_MARIO_SMALL_JUMP_WALK + 2
ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT = ID_SPRITE_MARIO_SMALL_JUMP_WALK + 6
ID_SPRITE_MARIO_SMALL_JUMP_RUN = ID_SPRITE_MARIO_SMALL_JUMP + 20
ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT = ID_SPRITE_MARIO_SMALL_JUMP_RUN + 2
ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT = ID_SPRITE_MARIO_SMALL_JUMP_RUN + 6
ID_SPRITE_MARIO_SMALL_SIT = ID_SPRITE_MARIO_SMALL + 500
ID_SPRITE_MARIO_SMALL_SIT_LEFT = ID_SPRITE_MARIO_SMALL_SIT + 10
ID_SPRITE_MARIO_SMALL_SIT_RIGHT = ID_SPRITE_MARIO_SMALL_SIT + 20
ID_SPRITE_MARIO_SMALL_BRACE = ID_SPRITE_MARIO_SMALL + 500
ID_SPRITE_MARIO_SMALL_BRACE_LEFT = ID_SPRITE_MARIO_SMALL_BRACE + 10
ID_SPRITE_MARIO_SMALL_BRACE_RIGHT = ID_SPRITE_MARIO_SMALL_BRACE + 20

ID_SPRITE_BRICK = 20000

ID_SPRITE_GOOMBA = 30000
ID_SPRITE_GOOMBA_WALK = ID_SPRITE_GOOMBA + 1000
ID_SPRITE_GOOMBA_DIE = ID_SPRITE_GOOMBA + 2000

ID_SPRITE_COIN = 40000

ID_SPRITE_CLOUD = 50000
ID_SPRITE_CLOUD_BEGIN = ID_SPRITE_CLOUD + 1000
ID_SPRITE_CLOUD_MIDDLE = ID_SPRITE_CLOUD + 2000
ID_SPRITE_CLOUD_END = ID_SPRITE_CLOUD + 3000

MARIO_START_X = 20.0
MARIO_START_Y = 10.0
BRICK_X = 0.0
GOOMBA_X = 200.0
COIN_X = 100.0
BRICK_Y = GROUND_Y + 20.0
NUM_BRICKS = 70

_MARIO_SPRITES = [
    (ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1, 246, 154, 259, 181),
    (ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1, 186, 154, 199, 181),
    (ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 2, 275, 154, 290, 181),
    (ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 3, 304, 154, 321, 181),
    (ID_SPRITE_MARIO_BIG_WALKING_LEFT + 2, 155, 154, 170, 181),
    (ID_SPRITE_MARIO_BIG_WALKING_LEFT + 3, 125, 154, 140, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 1, 334, 154, 355, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 2, 334, 154, 355, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 3, 392, 154, 413, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 1, 91, 154, 112, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 2, 65, 154, 86, 181),
    (ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 3, 34, 154, 55, 181),
    (ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1, 395, 275, 412, 302),
    (ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1, 35, 275, 52, 302),
    (ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1, 394, 195, 413, 222),
    (ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1, 35, 195, 52, 222),
    (ID_SPRITE_MARIO_BIG_SIT_RIGHT + 1, 426, 239, 441, 256),
    (ID_SPRITE_MARIO_BIG_SIT_LEFT + 1, 5, 239, 20, 256),
    (ID_SPRITE_MARIO_BIG_BRACE_RIGHT + 1, 425, 154, 442, 181),
    (ID_SPRITE_MARIO_BIG_BRACE_LEFT + 1, 5, 154, 22, 181),
    (ID_SPRITE_MARIO_DIE + 1, 215, 120, 231, 135),
    (ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1, 247, 0, 259, 15),
    (ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1, 187, 0, 198, 15),
    (ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 2, 275, 0, 291, 15),
    (ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 3, 306, 0, 320, 15),
    (ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 2, 155, 0, 170, 15),
    (ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 3, 125, 0, 139, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1, 275, 0, 275 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2, 306, 0, 306 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3, 335, 0, 335 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 1, 155, 0, 155 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 2, 125, 0, 125 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 3, 95, 0, 95 + 15, 15),
    (ID_SPRITE_MARIO_SMALL_BRACE_LEFT + 1, 6, 0, 6 + 13, 15),
    (ID_SPRITE_MARIO_SMALL_BRACE_RIGHT + 1, 426, 0, 426 + 13, 15),
    (ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1, 35, 80, 35 + 15, 80 + 15),
    (ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1, 395, 80, 395 + 15, 80 + 15),
    (ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1, 65, 40, 65 + 15, 40 + 15),
    (ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1, 365, 40, 365 + 15, 40 + 15),
]

_MARIO_ANIMATIONS = [
    (ID_ANI_MARIO_IDLE_RIGHT, 100, [ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1]),
    (ID_ANI_MARIO_IDLE_LEFT, 100, [ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1]),
    (ID_ANI_MARIO_WALKING_RIGHT, 100, [ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1,
                                       ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 2,
                                       ID_SPRITE_MARIO_BIG_WALKING_RIGHT + 3]),
    (ID_ANI_MARIO_WALKING_LEFT, 100, [ID_SPRITE_MARIO_BIG_IDLE_LEFT + 1,
                                      ID_SPRITE_MARIO_BIG_WALKING_LEFT + 2,
                                      ID_SPRITE_MARIO_BIG_WALKING_LEFT + 3]),
    (ID_ANI_MARIO_RUNNING_RIGHT, 50, [ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 1,
                                      ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 2,
                                      ID_SPRITE_MARIO_BIG_RUNNING_RIGHT + 3]),
    (ID_ANI_MARIO_RUNNING_LEFT, 50, [ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 1,
                                     ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 2,
                                     ID_SPRITE_MARIO_BIG_RUNNING_LEFT + 3]),
    (ID_ANI_MARIO_JUMP_WALK_RIGHT, 100, [ID_SPRITE_MARIO_BIG_JUMP_WALK_RIGHT + 1]),
    (ID_ANI_MARIO_JUMP_WALK_LEFT, 100, [ID_SPRITE_MARIO_BIG_JUMP_WALK_LEFT + 1]),
    (ID_ANI_MARIO_JUMP_RUN_RIGHT, 100, [ID_SPRITE_MARIO_BIG_JUMP_RUN_RIGHT + 1]),
    (ID_ANI_MARIO_JUMP_RUN_LEFT, 100, [ID_SPRITE_MARIO_BIG_JUMP_RUN_LEFT + 1]),
    (ID_ANI_MARIO_SIT_RIGHT, 100, [ID_SPRITE_MARIO_BIG_SIT_RIGHT + 1]),
    (ID_ANI_MARIO_SIT_LEFT, 100, [ID_SPRITE_MARIO_BIG_SIT_LEFT + 1]),
    (ID_ANI_MARIO_BRACE_RIGHT, 100, [ID_SPRITE_MARIO_BIG_BRACE_RIGHT + 1]),
    (ID_ANI_MARIO_BRACE_LEFT, 100, [ID_SPRITE_MARIO_BIG_BRACE_LEFT + 1]),
    (ID_ANI_MARIO_DIE, 100, [ID_SPRITE_MARIO_DIE + 1]),
    (ID_ANI_MARIO_SMALL_IDLE_RIGHT, 100, [ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1]),
    (ID_ANI_MARIO_SMALL_WALKING_RIGHT, 100, [ID_SPRITE_MARIO_SMALL_IDLE_RIGHT + 1,
                                             ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 2,
                                             ID_SPRITE_MARIO_SMALL_WALKING_RIGHT + 3]),
    (ID_ANI_MARIO_SMALL_IDLE_LEFT, 100, [ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1]),
    (ID_ANI_MARIO_SMALL_WALKING_LEFT, 100, [ID_SPRITE_MARIO_SMALL_IDLE_LEFT + 1,
                                            ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 2,
                                            ID_SPRITE_MARIO_SMALL_WALKING_LEFT + 3]),
    (ID_ANI_MARIO_SMALL_RUNNING_RIGHT, 50, [ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 1,
                                            ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 2,
                                            ID_SPRITE_MARIO_SMALL_RUNNING_RIGHT + 3]),
    (ID_ANI_MARIO_SMALL_RUNNING_LEFT, 50, [ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 1,
                                           ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 2,
                                           ID_SPRITE_MARIO_SMALL_RUNNING_LEFT + 3]),
    (ID_ANI_MARIO_SMALL_BRACE_LEFT, 100, [ID_SPRITE_MARIO_SMALL_BRACE_LEFT + 1]),
    (ID_ANI_MARIO_SMALL_BRACE_RIGHT, 100, [ID_SPRITE_MARIO_SMALL_BRACE_RIGHT + 1]),
    (ID_ANI_MARIO_SMALL_JUMP_WALK_RIGHT, 100, [ID_SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT + 1]),
    (ID_ANI_MARIO_SMALL_JUMP_WALK_LEFT, 100, [ID_SPRITE_MARIO_SMALL_JUMP_WALK_LEFT + 1]),
    (ID_ANI_MARIO_SMALL_JUMP_RUN_LEFT, 100, [ID_SPRITE_MARIO_SMALL_JUMP_RUN_LEFT + 1]),
    (ID_ANI_MARIO_SMALL_JUMP_RUN_RIGHT, 100, [ID_SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT + 1]),
]

_ENEMY_SPRITES = [
    (ID_SPRITE_GOOMBA_WALK + 1, 4, 13, 22, 30),
    (ID_SPRITE_GOOMBA_WALK + 2, 24, 13, 42, 30),
    (ID_SPRITE_GOOMBA_DIE + 1, 44, 19, 62, 30),
]

_ENEMY_ANIMATIONS = [
    (ID_ANI_GOOMBA_WALKING, 100, [ID_SPRITE_GOOMBA_WALK + 1, ID_SPRITE_GOOMBA_WALK + 2]),
    (ID_ANI_GOOMBA_DIE, 100, [ID_SPRITE_GOOMBA_DIE + 1]),
]

_MISC_SPRITES = [
    (ID_SPRITE_BRICK + 1, 372, 153, 372 + 15, 153 + 15),
    (ID_SPRITE_COIN + 1, 303, 99, 303 + 9, 99 + 15),
    (ID_SPRITE_COIN + 2, 321, 99, 321 + 9, 99 + 15),
    (ID_SPRITE_COIN + 3, 338, 99, 338 + 9, 99 + 15),
    (ID_SPRITE_CLOUD_BEGIN, 390, 117, 390 + 15, 117 + 15),
    (ID_SPRITE_CLOUD_MIDDLE, 408, 117, 408 + 15, 117 + 15),
    (ID_SPRITE_CLOUD_END, 426, 117, 426 + 15, 117 + 15),
]

_MISC_ANIMATIONS = [
    (ID_ANI_BRICK, 100, [ID_SPRITE_BRICK + 1]),
    (ID_ANI_COIN, 300, [ID_SPRITE_COIN + 1, ID_SPRITE_COIN + 2, ID_SPRITE_COIN + 3]),
]


def load_resources(game: Game) -> None:
    """Register the sample's textures, sprites and animations with game."""
    textures = {
        ID_TEX_MARIO: TEXTURE_PATH_MARIO,
        ID_TEX_ENEMY: TEXTURE_PATH_ENEMY,
        ID_TEX_MISC: TEXTURE_PATH_MISC,
        ID_TEX_BBOX: TEXTURE_PATH_BBOX,
    }
    for texture_id, path in textures.items():
        game.textures.add(texture_id, Texture(path))

    for texture_id, sprites in ((ID_TEX_MARIO, _MARIO_SPRITES),
                                (ID_TEX_ENEMY, _ENEMY_SPRITES),
                                (ID_TEX_MISC, _MISC_SPRITES)):
        texture = game.textures.get(texture_id)
        for sprite_id, left, top, right, bottom in sprites:
            game.sprites.add(sprite_id, left, top, right, bottom, texture)

    for ani_id, default_time, sprite_ids in (*_MARIO_ANIMATIONS, *_ENEMY_ANIMATIONS,
                                             *_MISC_ANIMATIONS):
        animation = Animation(default_time, game)
        for sprite_id in sprite_ids:
            animation.add(sprite_id)
        game.animations.add(ani_id, animation)


class Scene:
    """The sample level: its objects, the player, the camera and the frame loop."""

    def __init__(self, game: Optional[Game] = None, *, load: bool = True) -> None:
        self.game = game if game is not None else Game(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.objects: list[GameObject] = []
        self.mario: Optional[Mario] = None
        self.key_handler = SampleKeyHandler(reload=self.reload)
        self.game.init_keyboard(self.key_handler)
        if load and ID_TEX_MARIO not in self.game.textures:
            load_resources(self.game)
        self.reload()

    def clear(self) -> None:
        """Remove every object from the scene."""
        self.objects.clear()
        self.mario = None
        self.key_handler.mario = None

    def reload(self) -> None:
        """Rebuild the level from scratch."""
        self.clear()
        game = self.game
        add = self.objects.append

        for i in range(NUM_BRICKS):
            add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y, game))
        for i in range(1, 3):
            add(Brick(i * BRICK_WIDTH * 1.0, BRICK_Y - 44.0, game))
        for i in range(10):
            add(Brick(0.0, BRICK_Y - i * BRICK_WIDTH, game))
        for column_x, top in ((300.0, 3), (400.0, 4), (500.0, 5)):
            for i in range(1, top):
                add(Brick(BRICK_X + column_x, BRICK_Y - i * BRICK_WIDTH, game))

        add(Platform(90.0, GROUND_Y - 34.0, 16, 15, 16,
                     ID_SPRITE_CLOUD_BEGIN, ID_SPRITE_CLOUD_MIDDLE, ID_SPRITE_CLOUD_END,
                     game))

        self.mario = Mario(MARIO_START_X, MARIO_START_Y, game)
        add(self.mario)
        self.key_handler.mario = self.mario

        for j in range(4):
            add(Goomba(GOOMBA_X + j * 60, GROUND_Y - 120.0, game))
        for i in range(10):
            add(Coin(COIN_X + i * (COIN_WIDTH * 2), GROUND_Y - 96.0, game))

    def purge_deleted(self) -> int:
        """Drop deleted objects; return how many were removed."""
        before = len(self.objects)
        self.objects = [obj for obj in self.objects if not obj.is_deleted]
        return before - len(self.objects)

    def update(self, dt: float) -> None:
        """Advance every object by dt milliseconds and move the camera to follow Mario."""
        co_objects = list(self.objects)
        for obj in co_objects:
            obj.update(dt, co_objects)
        self.purge_deleted()

        if self.mario is not None:
            cx = max(self.mario.x - SCREEN_WIDTH // 2, 0.0)
            self.game.set_cam_pos(cx, 0.0)

    def render(self) -> list[DrawCall]:
        """Draw every object into a fresh frame and return the frame's draw calls."""
        self.game.clear_frame()
        for obj in self.objects:
            obj.render()
        return list(self.game.draw_calls)

    def run(self, frames: int, frame_ms: int = 1000 // MAX_FRAME_RATE) -> list[DrawCall]:
        """Run frames frames of frame_ms each; return the last frame's draw calls."""
        if frames < 0:
            raise ValueError("frame count cannot be negative")
        if frame_ms <= 0:
            raise ValueError("frame time must be positive")
        calls: list[DrawCall] = []
        for _ in range(frames):
            self.game.advance(frame_ms)
            self.game.process_keyboard()
            self.update(frame_ms)
            calls = self.render()
        return calls


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sample scene headless and print where things ended up."""
    parser = argparse.ArgumentParser(description="Run the collision sample scene headless.")
    parser.add_argument("--frames", type=int, default=300, help="number of frames to run")
    parser.add_argument("--frame-ms", type=int, default=1000 // MAX_FRAME_RATE,
                        help="milliseconds per frame")
    args = parser.parse_args(argv)

    scene = Scene()
    try:
        calls = scene.run(args.frames, args.frame_ms)
    except ValueError as exc:
        parser.error(str(exc))
    mario = scene.mario
    assert mario is not None
    print(f"frames={args.frames} mario=({mario.x:.2f}, {mario.y:.2f}) "
          f"coins={mario.coins} objects={len(scene.objects)} draws={len(calls)}")
    return 0