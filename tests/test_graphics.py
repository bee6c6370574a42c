import pytest

from platformkit.graphics import (
    KEYBOARD_BUFFER_SIZE,
    DrawCall,
    Game,
    KeyEventHandler,
    Sprite,
    SpriteRegistry,
    Texture,
    TextureRegistry,
    get_game,
)


class RecordingHandler(KeyEventHandler):
    def __init__(self):
        self.log = []

    def key_state(self, game):
        self.log.append(("state", sorted(k for k in range(256) if game.is_key_down(k))))

    def on_key_down(self, key_code):
        self.log.append(("down", key_code))

    def on_key_up(self, key_code):
        self.log.append(("up", key_code))


def test_texture_default_size_unknown():
    tex = Texture()
    assert (tex.width, tex.height) == (-1, -1)


def test_texture_registry_add_get():
    reg = TextureRegistry()
    tex = Texture("mario.png", 32, 16)
    reg.add(7, tex)
    assert reg.get(7) is tex
    assert reg.get(8) is None
    assert 7 in reg and len(reg) == 1


def test_sprite_registry_add_get_clear():
    game = Game()
    tex = Texture("misc.png")
    sprite = game.sprites.add(20001, 372, 153, 387, 168, tex)
    assert game.sprites.get(20001) is sprite
    assert sprite.rect == (372, 153, 387, 168)
    assert game.sprites.get(1) is None
    game.sprites.clear()
    assert game.sprites.get(20001) is None
    assert len(game.sprites) == 0


def test_sprite_registry_replaces_existing_id():
    reg = SpriteRegistry(Game())
    reg.add(1, 0, 0, 1, 1, None)
    second = reg.add(1, 2, 2, 3, 3, None)
    assert reg.get(1) is second


def test_sprite_draw_offsets_by_camera():
    game = Game()
    tex = Texture("t.png")
    sprite = Sprite(1, 0, 0, 16, 16, tex, game)
    game.set_cam_pos(5, 7)
    sprite.draw(20, 30)
    call = game.draw_calls[-1]
    assert call.x == 20 - 5 and call.y == 30 - 7
    assert call.texture is tex
    assert call.rect == (0, 0, 16, 16)
    assert call.alpha == 1.0


def test_game_draw_defaults_and_clear_frame():
    game = Game()
    tex = Texture()
    call = game.draw(1.5, 2.5, tex)
    assert call == DrawCall(1.5, 2.5, tex, None, 1.0)
    game.draw(0, 0, tex, (0, 0, 4, 4), 0.25)
    frame = game.clear_frame()
    assert len(frame) == 2
    assert frame[1].alpha == 0.25
    assert game.draw_calls == []


def test_camera_position_roundtrip():
    game = Game()
    game.set_cam_pos(12.0, 3.0)
    assert game.cam_pos == (12.0, 3.0)


def test_clock_advance():
    game = Game()
    assert game.now() == 0
    game.advance(10)
    game.advance(5)
    assert game.now() == 15


def test_clock_rejects_negative():
    with pytest.raises(ValueError):
        Game().advance(-1)


def test_keys_press_release():
    game = Game()
    game.init_keyboard(RecordingHandler())
    game.press(30)
    assert game.is_key_down(30)
    game.release(30)
    assert not game.is_key_down(30)


def test_key_out_of_range():
    game = Game()
    with pytest.raises(ValueError):
        game.press(256)
    with pytest.raises(ValueError):
        game.is_key_down(-1)


def test_process_keyboard_state_then_events():
    game = Game()
    handler = RecordingHandler()
    game.init_keyboard(handler)
    game.press(31)
    game.press(32)
    game.release(31)
    game.process_keyboard()
    assert handler.log == [("state", [32]), ("down", 31), ("down", 32), ("up", 31)]
    handler.log.clear()
    game.process_keyboard()
    assert handler.log == [("state", [32])]


def test_event_buffer_is_bounded():
    game = Game()
    handler = RecordingHandler()
    game.init_keyboard(handler)
    for _ in range(KEYBOARD_BUFFER_SIZE + 10):
        game.press(5)
    game.process_keyboard()
    downs = [e for e in handler.log if e[0] == "down"]
    assert len(downs) == KEYBOARD_BUFFER_SIZE


def test_process_keyboard_without_handler():
    with pytest.raises(RuntimeError):
        Game().process_keyboard()


def test_key_event_handler_is_abstract():
    with pytest.raises(TypeError):
        KeyEventHandler()


def test_get_game_is_shared():
    game = get_game()
    original = game.cam_pos
    game.set_cam_pos(3.0, 4.0)
    try:
        assert get_game().cam_pos == (3.0, 4.0)
    finally:
        game.set_cam_pos(*original)