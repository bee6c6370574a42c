import pytest

from platformkit.boxplatform import NO_SPRITE, BoxPlatform
from platformkit.graphics import Game, Texture
from platformkit.objects import BBOX_ALPHA, ID_TEX_BBOX

IDS = dict(
    sprite_id_tl=1, sprite_id_tr=2, sprite_id_bl=3, sprite_id_br=4, sprite_id_fill=5,
    sprite_id_mt=6, sprite_id_mb=7, sprite_id_ml=8, sprite_id_mr=9,
    sprite_id_sot_corner=10, sprite_id_sot_body=11, sprite_id_sot_bottom=12,
)


@pytest.fixture
def game():
    g = Game(320, 240)
    tex = Texture("tiles.png")
    for sprite_id in range(1, 13):
        g.sprites.add(sprite_id, 0, 0, 16, 16, tex)
    g.textures.add(ID_TEX_BBOX, Texture("bbox.png"))
    return g


def make(game, length=3, width=3, **overrides):
    ids = {**IDS, **overrides}
    return BoxPlatform(100.0, 50.0, length, width, 16.0, 16.0, game=game, **ids)


def test_full_box_draws_four_cells_per_row(game):
    box = make(game, length=3, width=3)
    box.render()
    calls = game.clear_frame()
    assert len(calls) == 4 * box.width
    ys = sorted({c.y for c in calls})
    assert ys == [box.y + i * box.cell_height for i in range(box.width)]


def test_first_row_positions(game):
    box = make(game, length=3, width=1)
    box.render()
    calls = game.clear_frame()
    xs = [c.x for c in calls]
    assert xs == [box.x + i * box.cell_width for i in range(4)]


def test_zero_width_draws_nothing(game):
    box = make(game, width=0)
    box.render()
    assert game.clear_frame() == []


def test_render_layer_skips_missing_sprites_but_advances(game):
    box = make(game, length=3)
    box.render_layer(NO_SPRITE, 6, 2, NO_SPRITE, 70.0)
    calls = game.clear_frame()
    assert [c.x for c in calls] == [box.x + box.cell_width, box.x + 2 * box.cell_width]
    assert all(c.y == 70.0 for c in calls)


def test_missing_sprite_raises(game):
    box = make(game, sprite_id_tl=999)
    with pytest.raises(KeyError):
        box.render()


def test_bounding_box_spans_cells(game):
    box = make(game, length=5, width=2)
    left, top, right, bottom = box.bounding_box()
    assert right - left == box.cell_width * box.length
    assert bottom - top == box.cell_height * box.width
    assert left == box.x - box.cell_width / 2
    assert top == box.y - box.cell_height / 2


def test_render_bounding_box_centred(game):
    box = make(game, length=4, width=2)
    box.render_bounding_box()
    (call,) = game.clear_frame()
    left, top, right, bottom = box.bounding_box()
    assert call.alpha == BBOX_ALPHA
    assert call.rect == (0, 0, int(right) - int(left), int(bottom) - int(top))
    assert call.x == (left + right) / 2
    assert call.y == (top + bottom) / 2


@pytest.mark.parametrize("nx, ny, expected", [(0, -1, True), (0, 1, False), (1, 0, False), (-1, 0, False)])
def test_only_collides_from_above(game, nx, ny, expected):
    assert make(game).is_direction_collidable(nx, ny) is expected


def test_collidable(game):
    assert make(game).is_collidable() is True