# retrokit

Engine-side building blocks for a retro side-scrolling game engine, in
plain Python with no dependencies outside the standard library.

## Modules

- `retrokit.ini`: `IniParser` reads and writes simple INI settings.
  Build it from a file (`IniParser(path)`) or from text
  (`IniParser.loads(text)`). Read values with `get_string`, `get_integer`,
  `get_float` and `get_bool`, which return `None` when the key is missing.
  Change them with `set_string`, `set_integer`, `set_float`, `set_bool` and
  `set_comment`. Save with `dumps()` or `write(path)`. Sectionless items are
  written first, then each section in the order it first appears. Lines
  starting with `#` are skipped on reading.
- `retrokit.trig`: fixed-point lookup trigonometry. `sin_m` and `cos_m`
  use 512 steps per turn scaled to 4096. `sin512` and `cos512` use 512
  steps scaled to 512. `sin256` and `cos256` use 256 steps scaled to 256.
  `arc_tan_lookup(x, y)` returns the angle of a vector as a byte.
- `retrokit.palette`: `PaletteBank` holds eight 256-colour palettes. Each
  palette is kept both packed (RGB565 for `RenderType.SW`, RGB5551 for
  `RenderType.HW`) and as `PaletteEntry` RGB values. Its methods are:
  - `load_palette`, which takes raw RGB triplet bytes
  - `set_entry`
  - `set_active_palette`, for per-line palettes in software mode or the texture palette in hardware mode
  - `copy_palette`
  - `rotate_palette`
  - `set_fade`
  - `set_limited_fade`

  The module also provides `rgb888_to_rgb565` and `rgb888_to_rgb5551` for packing single colours.
- `retrokit.haptics`: the `HapticId` effect numbers, and a `HapticQueue`
  that holds one pending effect (`queue`, `take`).
- `retrokit.controls`: `InputDevice` tracks press and hold state for each
  `Button`. Each frame, call `update(held_buttons)` with the set of held
  buttons. `check_key_press` and `check_key_down` then fill an `InputData`
  record for the buttons selected by a flag mask, where `Button.X.flag` is
  the bit for button X.
- `retrokit.player`: provides `Player`, `ControlMode`, `ControlBuffers` and
  `process_player_control`. In `NORMAL` mode a player takes its controls
  from the input snapshots. In `SIDEKICK` mode it replays the buffered
  controls from 16 frames earlier.
- `retrokit.reader`: `DataPack(path)` reads the directory table of an
  encrypted data pack. `locate` finds a file's offset and size, `in` tests
  whether the pack holds a file, and `open` returns a `PackedFile` with
  `read`, `seek`, `tell`, `at_end` and `close`. A `PackedFile` is also a
  context manager. Missing files raise `FileNotInPackError`. `Cipher` is
  the key stream used for decryption. `copy_file_path` turns `/` into `\`.
- `retrokit.mods`: `ModManager(base_path)` manages the mods in a `mods/`
  folder:
  - `init_mods` discovers the mods, taking the order and active flags from `modconfig.ini` first.
  - `load_mod` reads a mod's `mod.ini`.
  - `scan_mod_folder` maps the files in a mod's `Data/`, `Scripts/` and `Videos/` folders.
  - `apply_settings` works out the resulting `ModSettings`.
  - `save_mods` writes `modconfig.ini`.
  - `resolve_file` tells where an active mod redirects a game file.

  The module also provides `resolve_path`, which finds a path's final name ignoring case, and `get_scene_id`, which matches stage names ignoring spaces and case.

## Example

```python
from retrokit.ini import IniParser
from retrokit.trig import sin256, arc_tan_lookup

ini = IniParser.loads("[Game]\nLanguage=2\n")
assert ini.get_integer("Game", "Language") == 2
ini.set_bool("Window", "FullScreen", True)
print(ini.dumps())

print(sin256(64), arc_tan_lookup(1, 1))
```

```python
from retrokit.reader import DataPack

pack = DataPack("Data.rsdk")
with pack.open("Data/Game/GameConfig.bin") as f:
    header = f.read(16)
```

## What it does not do

This is a library, not a game. It has no command, and it does not do any of the following:

- open a window, render, play audio or run scripts;
- poll keyboards, controllers or touch screens (callers pass held buttons to `InputDevice.update`);
- read palette files from disk (`load_palette` takes the bytes);
- write data packs.

## Tests

```
pip install -e .[test]
pytest
```