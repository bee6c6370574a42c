import pytest

from platformkit.animation import Animation
from platformkit.graphics import Game, Texture
from platformkit import tiles
from platformkit.tiles import TileBrick


@pytest.mark.parametrize("brick_type, ani_id", [
    (tiles.BRICK_TYPE_FLOOR_BOTTOM_LEFT, tiles.ID_ANI_BRICK_FLOOR_BOTTOM_LEFT),
    (tiles.BRICK_TYPE_FLOOR_BOTTOM_MIDDLE, tiles.ID_ANI_BRICK_FLOOR_BOTTOM_MIDDLE),
    (tiles.BRICK_TYPE_FLOOR_BOTTOM_RIGHT, tiles.ID_ANI_BRICK_FLOOR_BOTTOM_RIGHT),
    (tiles.BRICK_TYPE_FLOOR_TOP_LEFT, tiles.ID_ANI_BRICK_FLOOR_TOP_LEFT),
    (tiles.BRICK_TYPE_FLOOR_TOP_MIDDLE, tiles.ID_ANI_BRICK_FLOOR_TOP_MIDDLE),
    (tiles.BRICK_TYPE_FLOOR_TOP_RIGHT, tiles.ID_ANI_BRICK_FLOOR_TOP_RIGHT),
    (tiles.BRICK_TYPE_CONVEX, tiles.ID_ANI_BRICK_CONVEX),
    (tiles.BRICK_TYPE_CLOUD, tiles.ID_ANI_BRICK_CLOUD),
    (tiles.BRICK_TYPE_QUESTION, tiles.ID_ANI_QUESTION_BRICK),
    (tiles.BRICK_TYPE_SHINY, tiles.ID_ANI_SHINY_BRICK),
])
def test_animation_for_type(brick_type, ani_id):
    assert TileBrick(0, 0, brick_type, Game()).animation_id() == ani_id


@pytest.mark.parametrize("brick_type", [tiles.BRICK_TYPE_NORMAL, tiles.BRICK_TYPE_DEATH,
                                        tiles.BRICK_TYPE_QUESTION_INACTIVE])
def test_types_without_animation(brick_type):
    game = Game()
    brick = TileBrick(0, 0, brick_type, game)
    assert brick.animation_id() == tiles.NO_ANIMATION
    brick.render()
    assert game.draw_calls == []


def test_render_draws_animation():
    game = Game()
    tex = Texture("misc.png")
    game.sprites.add(1, 0, 0, 16, 16, tex)
    ani = Animation(100, game)
    ani.add(1)
    game.animations.add(tiles.ID_ANI_BRICK_CLOUD, ani)
    TileBrick(40.0, 30.0, tiles.BRICK_TYPE_CLOUD, game).render()
    (call,) = game.clear_frame()
    assert (call.x, call.y, call.texture) == (40.0, 30.0, tex)


def test_render_missing_animation_raises():
    with pytest.raises(KeyError):
        TileBrick(0, 0, tiles.BRICK_TYPE_SHINY, Game()).render()


def test_bounding_box_is_centred_square():
    brick = TileBrick(50.0, 80.0, tiles.BRICK_TYPE_CONVEX, Game())
    left, top, right, bottom = brick.bounding_box()
    assert right - left == tiles.BRICK_BBOX_WIDTH
    assert bottom - top == tiles.BRICK_BBOX_HEIGHT
    assert (left + right) / 2 == brick.x
    assert (top + bottom) / 2 == brick.y


def test_blocking_and_collidable():
    game = Game()
    assert TileBrick(0, 0, tiles.BRICK_TYPE_DEATH, game).is_blocking() is False
    assert TileBrick(0, 0, tiles.BRICK_TYPE_FLOOR_TOP_LEFT, game).is_blocking() is True
    assert TileBrick(0, 0, tiles.BRICK_TYPE_DEATH, game).is_collidable() is True