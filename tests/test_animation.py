import logging

import pytest

from platformkit.animation import Animation, AnimationRegistry
from platformkit.graphics import Game, Texture


@pytest.fixture
def game():
    g = Game()
    tex = Texture("mario.png")
    for sprite_id in (1, 2, 3):
        g.sprites.add(sprite_id, 0, 0, 16, 16, tex)
    return g


def make_anim(game, default=100):
    anim = Animation(default, game=game)
    for sprite_id in (1, 2, 3):
        anim.add(sprite_id)
    return anim


def test_add_uses_default_or_given_time(game):
    anim = Animation(100, game=game)
    anim.add(1, 500)
    anim.add(2)
    assert anim.frames[0].time == 500
    assert anim.frames[1].time == 100
    assert anim.frames[1].sprite is game.sprites.get(2)


def test_add_missing_sprite_raises(game):
    with pytest.raises(KeyError):
        Animation(game=game).add(99)


def test_render_advances_only_after_frame_time(game):
    anim = make_anim(game)
    assert anim.render(0, 0) == 1
    game.advance(100)
    assert anim.render(0, 0) == 1
    game.advance(1)
    assert anim.render(0, 0) == 2
    game.advance(101)
    assert anim.render(0, 0) == 3
    game.advance(101)
    assert anim.render(0, 0) == 1


def test_render_draws_current_sprite(game):
    anim = make_anim(game)
    anim.render(40, 50)
    call = game.draw_calls[-1]
    assert (call.x, call.y) == (40, 50)
    assert call.rect == game.sprites.get(1).rect


def test_reset_restarts_from_first_frame(game):
    anim = make_anim(game)
    anim.render(0, 0)
    game.advance(150)
    assert anim.render(0, 0) == 2
    anim.reset()
    assert anim.current_frame == -1
    assert anim.render(0, 0) == 1


def test_render_empty_raises(game):
    with pytest.raises(ValueError):
        Animation(game=game).render(0, 0)


def test_registry_add_get_clear(game):
    reg = AnimationRegistry()
    anim = make_anim(game)
    reg.add(500, anim)
    assert reg.get(500) is anim
    assert 500 in reg
    reg.clear()
    assert len(reg) == 0
    with pytest.raises(KeyError):
        reg.get(500)


def test_registry_duplicate_warns_and_replaces(game, caplog):
    reg = AnimationRegistry()
    first, second = make_anim(game), make_anim(game)
    reg.add(7, first)
    with caplog.at_level(logging.WARNING):
        reg.add(7, second)
    assert reg.get(7) is second
    assert "already exists" in caplog.text


def test_game_owns_animation_registry(game):
    anim = make_anim(game)
    game.animations.add(10000, anim)
    assert game.animations.get(10000) is anim