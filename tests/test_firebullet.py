import pytest

from platformkit import firebullet as fb
from platformkit.animation import Animation
from platformkit.firebullet import FireBullet
from platformkit.graphics import Game, Texture


def test_starts_inactive_and_still():
    bullet = FireBullet(10.0, 20.0, Game())
    assert bullet.state == fb.FIRE_BULLET_STATE_INACTIVE
    assert (bullet.vx, bullet.vy) == (0.0, 0.0)


def test_original_position_truncated():
    bullet = FireBullet(10.7, 3.2, Game())
    assert (bullet.original_x, bullet.original_y) == (10, 3)


@pytest.mark.parametrize("state, vx, vy", [
    (fb.FIRE_BULLET_STATE_LEFT_SHOOT_UP_NEAR, -fb.FIRE_BULLET_SPEED_X_NEAR, -fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_LEFT_SHOOT_UP_FAR, -fb.FIRE_BULLET_SPEED_X_FAR, -fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_FAR, -fb.FIRE_BULLET_SPEED_X_FAR, fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_NEAR, -fb.FIRE_BULLET_SPEED_X_NEAR, fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_RIGHT_SHOOT_UP_NEAR, fb.FIRE_BULLET_SPEED_X_NEAR, -fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_RIGHT_SHOOT_UP_FAR, fb.FIRE_BULLET_SPEED_X_FAR, -fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_FAR, fb.FIRE_BULLET_SPEED_X_FAR, fb.FIRE_BULLET_SPEED_Y),
    (fb.FIRE_BULLET_STATE_RIGHT_SHOOT_DOWN_NEAR, fb.FIRE_BULLET_SPEED_X_NEAR, fb.FIRE_BULLET_SPEED_Y),
])
def test_state_sets_velocity(state, vx, vy):
    bullet = FireBullet(0.0, 0.0, Game())
    bullet.set_state(state)
    assert (bullet.vx, bullet.vy, bullet.state) == (vx, vy, state)


def test_unknown_state_keeps_velocity():
    bullet = FireBullet(0.0, 0.0, Game())
    bullet.set_state(fb.FIRE_BULLET_STATE_RIGHT_SHOOT_UP_FAR)
    bullet.set_state(42)
    assert bullet.state == 42
    assert bullet.vx == fb.FIRE_BULLET_SPEED_X_FAR


def test_inactive_update_does_not_move():
    bullet = FireBullet(5.0, 6.0, Game())
    bullet.update(16, [])
    assert (bullet.x, bullet.y) == (5.0, 6.0)


def test_active_update_moves_by_velocity():
    bullet = FireBullet(5.0, 6.0, Game())
    bullet.set_state(fb.FIRE_BULLET_STATE_LEFT_SHOOT_DOWN_NEAR)
    bullet.update(10, [])
    assert bullet.x == pytest.approx(5.0 + bullet.vx * 10)
    assert bullet.y == pytest.approx(6.0 + bullet.vy * 10)


def test_reload_deletes():
    bullet = FireBullet(0.0, 0.0, Game())
    bullet.reload()
    assert bullet.is_deleted is True


def test_render_only_when_active():
    game = Game()
    tex = Texture("fire.png")
    game.sprites.add(1, 0, 0, 8, 8, tex)
    ani = Animation(100, game)
    ani.add(1)
    game.animations.add(fb.FIRE_BULLET_ANI, ani)
    bullet = FireBullet(12.0, 14.0, game)
    bullet.render()
    assert game.clear_frame() == []
    bullet.set_state(fb.FIRE_BULLET_STATE_RIGHT_SHOOT_UP_NEAR)
    bullet.render()
    (call,) = game.clear_frame()
    assert (call.x, call.y, call.texture) == (12.0, 14.0, tex)


def test_bounding_box_and_flags():
    bullet = FireBullet(20.0, 30.0, Game())
    left, top, right, bottom = bullet.bounding_box()
    assert right - left == fb.FIRE_BULLET_BBOX_WIDTH
    assert bottom - top == fb.FIRE_BULLET_BBOX_HEIGHT
    assert (left + right) / 2 == bullet.x
    assert bullet.is_collidable() is True
    assert bullet.is_blocking() is False