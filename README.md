# platformkit

A small framework for side-scrolling platform games. The game logic is
kept apart from any window, renderer or keyboard device. A whole level can
be stepped frame by frame and inspected from code.

## What it contains

- `platformkit.graphics` holds the drawing and input side.
  - `Texture` and `Sprite`, and the registries that store them,
    `TextureRegistry` and `SpriteRegistry`.
  - `Game`, which records every draw as a `DrawCall`. It keeps the camera
    position (`set_cam_pos`, `cam_pos`) and a virtual millisecond clock
    (`now`, `advance`).
  - `Game` also tracks keys through `press`, `release` and `is_key_down`.
    `process_keyboard` hands the held keys and the buffered events to a
    `KeyEventHandler`.
  - `get_game()` returns a shared `Game`.
- `platformkit.animation` has `Animation`, a looping list of timed
  `AnimationFrame`s, and `AnimationRegistry`.
- `platformkit.collision` has three parts.
  - `swept_aabb(...)` returns `(t, nx, ny)` for a moving box against a
    static one.
  - `CollisionEvent`.
  - `Collision`, with `sweep`, `scan`, `filter` and `process`. `process`
    moves an object, stops it at blocking objects and calls its collision
    callbacks.
- `platformkit.objects` has the `GameObject` base class, plus `Brick`,
  `Coin`, `Platform` (a cloud row that can only be landed on from above)
  and `Goomba`.
- `platformkit.mario` has `Mario`, the player.
  - He walks, runs, jumps and sits.
  - He has small and big levels and counts coins.
  - He stomps goombas, and after a hit he is untouchable for a short time.
- `platformkit.keys` has the `Key` codes and `SampleKeyHandler`, which maps
  keys to Mario's states:
  - arrows move, and A runs;
  - S jumps, and Down sits;
  - 1 and 2 set the level, and R reloads.
- `platformkit.scene` has `load_resources(game)` and `Scene`, the sample
  level, with `reload`, `clear`, `purge_deleted`, `update`, `render` and
  `run`.
- Further objects:
  - `platformkit.boxplatform.BoxPlatform`;
  - `platformkit.tiles.TileBrick`;
  - `platformkit.firebullet.FireBullet`;
  - `platformkit.hud.Hud`, with the helpers `format_number` and
    `glyph_sprite_id`.
- `platformkit.samples` holds simpler objects: `BouncingMario`,
  `GroundMario`, `GroundBrick` and `GroundKeyHandler`.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Running the sample level

```
platformkit --frames 300 --frame-ms 10
```

This builds the sample level and runs it with no window for the number of
frames given. Each frame is `--frame-ms` milliseconds long. At the end it
prints one line with the number of frames, Mario's position, his coin
count, how many objects remain and how many draw calls the last frame made.

## Using it in code

```python
from platformkit.keys import Key
from platformkit.scene import Scene

scene = Scene()                   # loads the assets and builds the level
scene.game.press(Key.RIGHT)       # hold the right arrow
calls = scene.run(frames=120, frame_ms=10)

print(scene.mario.x, scene.mario.y, scene.mario.coins)
print(scene.game.cam_pos, len(calls))
```

`run` returns the draw calls of the last frame. Each `DrawCall` gives the
screen position, the texture, the source rectangle and the alpha.

## What it does not do

- It opens no window and does not display anything. Drawing only records
  `DrawCall`s.
- Textures are never read from disk. A `Texture` only holds a path and a
  size.
- There is no real keyboard. Keys are pressed and released through
  `Game.press` and `Game.release`.
- Time is the virtual clock of `Game`, moved forward by `advance`. It is
  not the wall clock.
- Levels are built in code by `Scene.reload`. They are not loaded from
  files, and there is no sound and no saving.