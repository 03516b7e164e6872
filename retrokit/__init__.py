"""INI settings, trig tables, palettes, input state, player control, data packs and mods for a retro 2D game engine."""

__version__ = "0.1.0"