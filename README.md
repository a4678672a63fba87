# streetdash

A small 2D game engine built on pygame, meant as the base of a
side-scrolling arcade game. It provides vector maths, collision tests,
game objects and input controls arranged in groups, scenes with
life-cycle hooks, a sprite type with velocity and tint, a caching
resource loader, audio helpers, simple logging and a singleton engine
that owns the window and runs the event loop.

## Installation

From a checkout of the project:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | What it provides                                                              |
|------------------------|-------------------------------------------------------------------------------|
| `streetdash.geometry`  | `Point`, a 2D point/vector dataclass with `+`, `-`, `*`, `/`, `normalize`, `dot`, `magnitude`, `magnitude_squared` |
| `streetdash.collider`  | `is_point_in_rect`, `is_rect_overlap`, `is_circle_overlap`, `is_point_in_bitmap` |
| `streetdash.errors`    | `EngineError`, a `RuntimeError` raised when media fails to initialise, load or play |
| `streetdash.log`       | `LogType`, `set_config`, `can_log`, `log`                                     |
| `streetdash.objects`   | `GameObject` (position, size, anchor, `draw`, `update`) and `Control` (input handlers) |
| `streetdash.group`     | `Group`, a container that forwards updates, drawing and input                 |
| `streetdash.scene`     | `Scene`, an abstract group with `initialize` / `terminate`                    |
| `streetdash.resources` | `Resources` (cached images, fonts, sounds) and `SampleInstance`               |
| `streetdash.audio`     | `AudioPlayer` for one-shot effects, looping music and sample instances        |
| `streetdash.sprite`    | `Sprite`, an image with rotation, velocity, tint and collision radius         |
| `streetdash.engine`    | `GameEngine`, the window, the event loop and scene switching                  |

## Geometry and collisions

```python
from streetdash.geometry import Point
from streetdash.collider import is_rect_overlap, is_circle_overlap, is_point_in_rect

a = Point(3, 4)
a.magnitude()          # 5.0
a.normalize()          # Point(x=0.6, y=0.8)
Point().normalize()    # Point(x=0.0, y=0.0) for a zero vector
a + Point(1, 1), a * 2, 2 * a, a / 2

is_rect_overlap(Point(0, 0), Point(10, 10), Point(5, 5), Point(15, 15))   # True
is_circle_overlap(Point(0, 0), 1, Point(3, 0), 1)                         # False
is_point_in_rect(Point(10, 0), Point(0, 0), Point(10, 10))                # False (half-open)
```

Rectangle and circle overlaps are strict: shapes that only touch do not
overlap. `is_point_in_bitmap(pnt, bitmap)` takes anything with
`get_at((x, y))` returning an RGBA colour, such as a pygame `Surface`,
and tells whether that pixel is not fully transparent.

## Objects, controls and groups

`GameObject` holds `visible`, `position`, `size` and `anchor`; its
`draw(surface)` and `update(delta_time)` do nothing until overridden.
`Control` has `on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up`,
`on_mouse_move` and `on_mouse_scroll`, all doing nothing by default.

`Group` is both. It keeps objects and controls in insertion order:

- `update` and `draw` reach only visible objects; objects may add or
  remove members of the group while `update` runs.
- Input handlers are forwarded to every control.
- `add_object`, `insert_object(obj, before)` (`before=None` appends),
  `add_control`, and `add_control_object` for something that is both
  (a `ValueError` if it is not a `GameObject`).
- `remove_object`, `remove_control` and `remove_control_object` find
  members by identity and raise `ValueError` if they are not held.
- `pop_objects(num)` and `pop_controls(num)` drop the last `num`
  members, raising `IndexError` if there are fewer.
- `objects` and `controls` return copies of the lists; `clear` empties both.

## Scenes and the engine

Subclass `Scene` and put set-up code in `initialize`; `terminate` clears
the scene, and `draw` fills the surface with black before drawing the
scene's objects.

```python
from streetdash.engine import GameEngine
from streetdash.scene import Scene
from streetdash.sprite import Sprite


class PlayScene(Scene):
    def initialize(self):
        self.add_object(Sprite("play/player.png", 100, 300, vx=50))


engine = GameEngine.get_instance()
engine.add_new_scene("play", PlayScene())
engine.start("play", 60, 1600, 832, 1000, "Street Dash", None, False, 0.05)
```

`start` opens the window, initialises the first scene and runs until the
window is closed, then terminates the scene and shuts pygame down. Its
parameters default to 60 fps, an 800 x 600 window, 1000 mixer channels,
the icon `icon.png` from the image folder (pass `None` for no icon), no
resource release between scenes and a delta-time cap of 0.05 s.

- `add_new_scene` raises `ValueError` for a name already taken, and
  `get_scene` for an unknown one; `start` raises it when the first scene
  has not been added.
- `change_scene(name)` takes effect at the start of the next `update`;
  an unknown name raises `ValueError` then.
- `update(delta_time)` caps the delta time at `delta_time_threshold`.
- Keyboard, mouse button, motion and wheel events reach the active
  scene. Mouse buttons are numbered 1 left, 2 right, 3 middle; leaving
  the window is reported as a move to (-1, -1).
- `get_mouse_position()`, `is_key_down(key_code)`, `screen_size`,
  `active_scene` and `resume` are available to scenes.

## Sprites

`Sprite(img, x, y, w=0, h=0, anchor_x=0.5, anchor_y=0.5, rotation=0,
vx=0, vy=0, r=255, g=255, b=255, a=255, resources=None)` loads `img`
through `Resources`. A zero width or height takes the image's own size.
`update` moves the sprite by its `velocity`; `draw` scales, tints
(multiplying by `tint`) and rotates the image (radians, clockwise on
screen) about its anchor. It also carries `collision_radius` (10),
`type` and `use_flag`, plus `bitmap_width` and `bitmap_height`.

## Resources and audio

`Resources.get_instance()` returns the shared loader. Images come from
`Resource/images/`, fonts from `Resource/fonts/` and sounds from
`Resource/audios/`, relative to the working directory. Results are
cached by name, by size for scaled images (`get_bitmap(name, width,
height)`, both or neither) and by point size for fonts.
`get_sample_instance(name)` returns a new `SampleInstance` each time.
`release_unused()` drops every cached entry nothing else refers to. A
file that cannot be loaded raises `EngineError`. The loaders, the scaler
and the mixer frequency can be passed to `Resources(...)` as keyword
arguments.

`AudioPlayer(resources=None, bgm_volume=1.0, sfx_volume=1.0)`:

- `play_audio(name)` plays once at `sfx_volume`; `play_bgm(name)` loops
  at `bgm_volume`. Both return the pygame channel, or `None` if no
  channel was free; `stop_bgm(channel)` stops it.
- `play_sample(name, loop=False, volume=1.0, position=0.0)` sets up and
  starts a `SampleInstance` and returns it; `stop_sample` stops it.
- `change_sample_volume` raises `EngineError` for a negative volume;
  `change_sample_position` (in seconds) raises it for a position before
  the start or past the end.
- `get_sample_length` returns the length in whole seconds.

The pygame mixer must be initialised before sounds are loaded;
`GameEngine.start` does this.

## Logging

```python
from streetdash.log import LogType, set_config, log

set_config(True, False, "log.txt")
log(LogType.INFO, "Loaded ", 3, " images")
```

Logging is off until `set_config` turns it on; `set_config` also empties
the log file. Each message is printed as `[LABEL] text` and appended to
the file. `VERBOSE` messages are written only when `log_verbose` is set;
`can_log(log_type)` reports whether a type would be written.

## What this package does not include

This is the engine layer only. It contains no game: no player, enemies,
coins, bullets, levels, menus, scoreboard or settings screens, no image,
font or sound assets, and no command to launch anything. A game built on
it supplies its own `Scene` subclasses and its own `Resource/` folder.