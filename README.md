# georays

The game logic of a side-scrolling platformer, with no window, input or audio
code tied to it. Use it to read and write level text, drive a level editor, or
step the player physics from any front end. It needs nothing beyond the
standard library.

## Install

```
pip install georays
```

To run the tests:

```
pip install "georays[test]"
pytest
```

## Modules

### `georays.objects`

- `Rect(x, y, width, height)` has two methods. `collides(other)` checks for
  overlap; touching edges do not count. `contains(x, y)` checks for a point
  inside; the far edges are exclusive.
- `Color(r, g, b, a=255)` is a frozen RGBA colour.
- `LevelObject(x, y, id, rotation=0, no_touch=0, hide=0, selected=False, properties=None)`
  is one placed object. Only the colour trigger (id 23) carries `properties`,
  which are four strings: red, green, blue and kind.

### `georays.levelfile`

- `get_level_text(current_mode, current_song, bg, ground, objects)`
  serialises a level. `bg` and `ground` are `(r, g, b)` tuples. A colour
  trigger without four properties raises `ValueError`.
- `load_level(metadata, object_string, current_song=0, song_selected=False, load_song=True, song_if_song_not_selected=False)`
  parses a level into a `LoadedLevel`. A `LoadedLevel` has these fields:
  `objects`, `current_mode`, `current_song`, `bg`, `ground` and `version`.
  Versions `BETA` and `1.3` to `1.6` are accepted. For `ALPHA` a warning is
  logged and the rest of the metadata is skipped. Any other version raises
  `LevelVersionError`, a subclass of `ValueError`. Malformed data raises
  `ValueError`.
- `parse_level_download_response(response)` splits a level-server reply into
  an `OnlineLevel`. An `OnlineLevel` has these fields: `name`, `description`,
  `difficulty`, `rated`, `creator` and `data`.

### `georays.widgets`

Mouse and key state are passed in as plain values.

- `Button(rect, text, font_size, is_disabled=False, ...)`:
  - `update(mouse_x, mouse_y, mouse_down, delta_time)` advances the hover,
    press and colour animations.
  - `is_hovered` and `is_clicked` are the hit tests.
  - `scaled_rect()` gives the on-screen rectangle after the animation.
  - `fill_color(gray=False)` gives the body colour.
- `TextBox(rect, placeholder, text_size, max_length, spaces_allowed=True, active=False)`:
  - `is_clicked` and `is_not_clicked` are the hit tests.
  - `input(text, pressed_keys, shift_down=False)` returns the new text. Key
    names are `"a"`..`"z"`, `"0"`..`"9"`, `"space"` and `"backspace"`. At most
    one character is added per call.
  - `display_text(text)` returns the string to show and its colour.

### `georays.editor`

- `EditorTab` has three members: `BUILD`, `EDIT` and `DELETE`.
- `object_ped(objects, tab, snapped_x, snapped_y, current_object, shift_down=False)`
  places, selects or deletes an object at a grid position and changes
  `objects` in place. With `EDIT` it returns an `EditorSelection`, which says
  which object toggles should be disabled.
- `keybinds_manager(objects, pressed_keys, held_keys, start_pos)` applies
  editor keys to the selected objects:
  - `delete` removes them.
  - `w`/`a`/`s`/`d` move them one grid cell.
  - `i`/`j`/`k`/`l` move them one unit.
  - `q`/`e` rotate them.
  - Holding `period` or `comma` moves the start position, and holding
    `left_control` as well moves it faster.

  It returns the new start position. It raises `OverflowError` outside 0..65535.

### `georays.physics`

- `GameMode` has four members: `CUBE`, `SHIP`, `BALL` and `WAVE`.
- `GameState` has two members: `PLAYING` and `LEVEL_COMPLETE`.
- `PhysicsSettings` holds the fixed tuning values.
- `PlayerState` holds the per-frame player state.
- `LevelColors`, `Progress` and `LevelContext` hold the level colours, the
  saved stars and beaten levels, and facts about the level being played.
- `physics_handle(state, settings, space_down, mouse_down, current_mode, right_down=False, left_down=False)`
  moves the player one frame. Mode `"1"` scrolls automatically. Mode `"2"` is
  platformer mode, moved with the right and left keys.
- `hitbox_collision(obj, state, centered_player, small_player, settings, colors, progress, context, mouse_down, space_down)`
  applies one object's effect on the player. It covers spikes, blocks, pads,
  orbs, gravity, mode and speed portals, saws, colour triggers and the level
  end. The level end awards stars once per level.

## Example

```python
from georays.objects import LevelObject
from georays.levelfile import get_level_text, load_level

objects = [LevelObject(x=200, y=460, id=1)]
text = get_level_text("1", 1, (0, 0, 50), (0, 0, 100), objects)

metadata, object_string = text.split(";;;", 1)
level = load_level(metadata, object_string)
print(level.version, level.bg, level.objects)
```

## What it does not do

There is no game window, drawing, sound or command to run. Keyboard and mouse
input is not read either. The caller supplies key and mouse state each frame
and draws from the returned state.

The package does not fetch levels from a server or upload them; it only parses
a reply that has already been received. It does not save levels or progress
to disk; `get_level_text` returns a string for the caller to store.