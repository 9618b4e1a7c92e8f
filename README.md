# cardquest

A small 3D action game in plain Python, run as a headless simulation. A
four-part player character walks a stage, jumps and throws cards at enemies
that patrol back and forth, with a camera following behind. Drawing is
recorded as draw calls on models, and gamepad input is fed in through an
`Input` object.

## Installing

```
pip install .
```

## Running

```
cardquest --frames 120
```

`cardquest` runs the game loop (`cardquest.app.main`) for the given number of
frames (60 by default) and prints the scene it ended in, for example
`title after 120 frames`. With no gamepad input the game stays on the title
screen.

## Using the library

```python
from cardquest.app import Game
from cardquest.gamepad import Button, GamepadState, Input
from cardquest.textures import TextureManager

pad = Input()
game = Game(pad, TextureManager())

pad.set_state(0, GamepadState(buttons=Button.B))  # press B on pad 0
print(game.step())                                 # SceneType.EXPLANATION
```

The modules:

- `cardquest.vecmath` — `Vector2`, `Vector3`, `Vector4`, `Matrix4x4`
  (row-vector convention; `a @ b` multiplies) and the helpers
  `make_affine_matrix`, `make_rotate_matrix`, `inverse` (raises `ValueError`
  for a singular matrix), `make_perspective_fov_matrix`,
  `make_orthographic_matrix`, `make_viewport_matrix`, `transform`,
  `transform_normal`, `normalize`, `dot`, `length` and others.
- `cardquest.collision` — `ShortForm` eight-corner boxes, `AABB`,
  `short_form_from_bounds`, `check_hit_side` and `check_hit_vertical`.
- `cardquest.transform` — `WorldTransform` (with parent transforms) and
  `ViewProjection`.
- `cardquest.model` — `Model` records each `draw` as a `DrawCall`;
  `create_model` and `create_model_from_obj`.
- `cardquest.gamepad` — `Input` keeps this frame's and last frame's
  `GamepadState` per pad, with dead zones and `is_triggered`; `Button` flags.
- `cardquest.textures` — `TextureManager` hands out one handle per texture
  file name; `HandleBitset` tracks free slots.
- `cardquest.lights` — `DirectionalLight`, `PointLight`, `SpotLight` and
  `CircleShadow`.
- `cardquest.characters`, `cardquest.player`, `cardquest.enemies`,
  `cardquest.camera`, `cardquest.stage` — `BaseCharacter`, `Card`, `Player`,
  the patrolling `Enemy`, `Enemy2`, `Enemy3` and `EnemyRed`, `FollowCamera`,
  `Stage` and `Stage2`.
- `cardquest.scenes`, `cardquest.game_scene`, `cardquest.app` — `SceneType`,
  the picture scenes (`TitleScene`, `ExplanationScene`, `GameClear`),
  `GameScene`, and `Game` with `step()` and `run(frames)`.

## What it does not do

- It opens no window and renders nothing: drawing only records `DrawCall`
  objects and texture handles.
- It reads no real controller: pad state must be given with
  `Input.set_state`.
- It loads no model or image files. Models are named handles, and the
  texture manager only checks that a file exists when created with
  `require_files=True`.
- There is no sound.

## Tests

```
pip install .[test]
pytest
```