import pytest

from platformkit.graphics import Game
from platformkit.keys import Key
from platformkit.mario import ID_ANI_MARIO_IDLE_RIGHT, Mario
from platformkit.objects import ID_TEX_BBOX, Brick, Coin, Goomba, Platform
from platformkit.scene import (
    BRICK_Y,
    ID_SPRITE_MARIO_BIG_IDLE_RIGHT,
    ID_TEX_MARIO,
    MARIO_START_X,
    MARIO_START_Y,
    SCREEN_WIDTH,
    TEXTURE_PATH_MARIO,
    Scene,
    load_resources,
    main,
)


@pytest.fixture
def scene():
    return Scene(Game(320, 240))


def test_load_resources_registers_textures_and_sprites():
    game = Game()
    load_resources(game)
    assert game.textures.get(ID_TEX_MARIO).path == TEXTURE_PATH_MARIO
    assert ID_TEX_BBOX in game.textures
    sprite = game.sprites.get(ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1)
    assert sprite.rect == (246, 154, 259, 181)
    assert sprite.texture is game.textures.get(ID_TEX_MARIO)


def test_load_resources_animations_have_frames():
    game = Game()
    load_resources(game)
    animation = game.animations.get(ID_ANI_MARIO_IDLE_RIGHT)
    assert len(animation.frames) == 1
    assert animation.frames[0].sprite.id == ID_SPRITE_MARIO_BIG_IDLE_RIGHT + 1


def test_reload_builds_level(scene):
    kinds = [type(obj) for obj in scene.objects]
    assert kinds.count(Goomba) == 4
    assert kinds.count(Coin) == 10
    assert kinds.count(Platform) == 1
    assert kinds.count(Mario) == 1
    assert scene.mario in scene.objects
    assert (scene.mario.x, scene.mario.y) == (MARIO_START_X, MARIO_START_Y)
    assert scene.key_handler.mario is scene.mario


def test_reload_is_repeatable(scene):
    before = len(scene.objects)
    first_mario = scene.mario
    scene.reload()
    assert len(scene.objects) == before
    assert scene.mario is not first_mario


def test_clear_empties_scene(scene):
    scene.clear()
    assert scene.objects == []
    assert scene.mario is None


def test_purge_deleted_removes_only_deleted(scene):
    coin = next(obj for obj in scene.objects if isinstance(obj, Coin))
    before = len(scene.objects)
    coin.delete()
    assert scene.purge_deleted() == 1
    assert coin not in scene.objects
    assert len(scene.objects) == before - 1


def test_update_camera_follows_mario(scene):
    scene.mario.x = 500.0
    scene.update(10)
    assert scene.game.cam_x == pytest.approx(scene.mario.x - SCREEN_WIDTH / 2)
    assert scene.game.cam_y == 0.0


def test_update_camera_never_negative(scene):
    scene.update(10)
    assert scene.game.cam_x == 0.0


def test_render_draws_every_object(scene):
    calls = scene.render()
    assert len(calls) >= len(scene.objects)
    assert calls == scene.game.draw_calls


def test_mario_lands_after_falling(scene):
    scene.run(200, 10)
    assert scene.mario.is_on_platform
    assert scene.mario.vy == 0.0
    assert scene.mario.y < BRICK_Y


def test_right_key_moves_mario_right(scene):
    scene.run(100, 10)
    start = scene.mario.x
    scene.game.press(Key.RIGHT)
    scene.run(30, 10)
    assert scene.mario.x > start


def test_reload_key_resets_mario(scene):
    scene.run(50, 10)
    old = scene.mario
    scene.game.press(Key.R)
    scene.run(1, 10)
    assert scene.mario is not old
    assert scene.key_handler.mario is scene.mario
    assert scene.mario.x == MARIO_START_X


def test_run_rejects_bad_arguments(scene):
    with pytest.raises(ValueError):
        scene.run(1, 0)
    with pytest.raises(ValueError):
        scene.run(-1, 10)


def test_bricks_are_present(scene):
    bricks = [obj for obj in scene.objects if isinstance(obj, Brick)]
    assert all(brick.y <= BRICK_Y for brick in bricks)
    assert any(brick.y == BRICK_Y for brick in bricks)


def test_main_prints_summary(capsys):
    assert main(["--frames", "5"]) == 0
    out = capsys.readouterr().out
    assert "frames=5" in out
    assert "coins=" in out