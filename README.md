# metabolistic

A small simulation of a rolling sphere that is steered from the camera's point
of view. It needs nothing outside the standard library. It provides:

- vector, quaternion and transform maths
- a character controller that is driven by input actions
- a follow camera that orbits its target and can be panned
- a text read-out of the latest movement state

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
metabolistic [--steps N] [--dt SECONDS]
```

The command builds the default scene: a 500 × 500 floor, a point light, the
player sphere and the follow camera. It then steps the scene forward with no
input.

- `--steps` sets the number of frames. The default is 600.
- `--dt` sets the seconds per frame. The default is 1/60.

Neither value may be negative. At the end the command prints one line with the
elapsed time, the player's position and whether the player is grounded:

```
t=10.00 player=(0.000, 0.600, 0.000) grounded=True
```

## Using the library

```python
from metabolistic.controller import Action, ActionState
from metabolistic.geometry import Vec2
from metabolistic.world import setup

world = setup()
state = ActionState(
    axes={Action.MOVE: Vec2(0.0, 1.0)},
    just_pressed_actions=frozenset({Action.JUMP}),
)
world.step(state, 1 / 60)
print(world.player.transform.translation)
print("\n".join(world.debug.lines()))
```

`World.step(action_state, dt)` advances one frame. It does the following, in
this order:

1. Pans the camera by the `Action.PAN` axis.
2. Turns the `Action.MOVE` axis and a just-pressed `Action.JUMP` into
   camera-relative `Move` and `Jump` events.
3. Records those events in `world.debug`.
4. Decides whether the player is grounded.
5. Applies the events: a move adds torque, and a jump sets the upward velocity
   if the player is grounded.
6. Integrates simple physics: gravity, floor contact, rolling and angular
   damping.
7. Lets the camera follow the player.

A negative `dt` raises `ValueError`.

## Modules

- `metabolistic.geometry`: the maths types.
  - `Vec2` and `Vec3` are immutable vectors with arithmetic, `length`,
    `length_squared` and `normalize_or_zero`. `Vec3` also has `dot`, `cross`,
    `lerp`, `angle_between` and `xz`.
  - `Quat` is a rotation. It has `from_axis_angle`, `from_rotation_x`,
    `from_rotation_y`, `rotate`, `to_euler_yxz` and `looking_to`, and
    multiplication by another `Quat` or by a `Vec3`.
  - `Transform` is a position and orientation. It has `from_xyz`, `forward`,
    `back`, `right`, `up`, `look_at`, `looking_at`, `rotate`, `rotate_around`
    and `rotate_local`.
- `metabolistic.controller`: input and character control.
  - `Action` lists the inputs `JUMP`, `MOVE` and `PAN`. `input_map()` gives the
    default key names: Space, W/S/A/D and mouse motion.
  - `ActionState` holds the input for one frame. It has `axis_pair` and
    `just_pressed`. `axis_pair` raises `ValueError` for `JUMP`.
  - `Move` and `Jump` are the movement events.
  - `MovementBundle` and `CharacterControllerBundle` hold the tuning values.
    `CharacterControllerBundle` has `with_movement` and `caster_radius`.
  - `CharacterBody` is the mutable physical state of the character.
  - `movement_input`, `update_grounded` and `apply_movement` are the per-frame
    steps.
- `metabolistic.camera`: the follow camera.
  - `FollowCamera` holds the distance (4.272) and the focus offset (0.5 up).
  - `CameraRig` has `pan(pan_vector, target_position)`, which turns and tilts
    the camera with the pitch clamped just short of vertical. It also has
    `follow(target_position, dt)`, which eases towards the follow distance and
    looks at the target.
  - `spawn_camera()` returns the starting camera.
- `metabolistic.debug_info`: the movement read-out.
  - `DebugMovementInfo` has `read_movement_actions`, `read_angular` and
    `lines()`, which returns the text of the read-out.
  - `Toggle` is an on/off switch bound to a key name. It has `toggle()`.
- `metabolistic.world`: the scene.
  - `Floor`, `PointLight` and `World` describe the scene.
  - `setup()` returns a new `World`.
  - `spawn_player()` returns the starting player.
  - `main()` is the `metabolistic` command.

## What it does not do

Nothing is drawn on screen, and the package does not read a keyboard or mouse.
Input is whatever `ActionState` you pass to `World.step`, and the `metabolistic`
command only runs an idle scene.

`input_map()` and the two `Toggle` switches on `World` (`debug_ui`, bound to
Backquote, and `inspector`, bound to F1) are plain data. Nothing in the package
presses those keys for you.

The physics is a small built-in step that knows only the sphere and the flat
floor. It is not a general rigid-body engine.