"""Indexed colour palettes with 16-bit packing, fades and rotation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional

PALETTE_COUNT = 0x8
PALETTE_SIZE = 0x100
SCREEN_YSIZE = 240

_ACTIVE = 0xFF


class RenderType(enum.IntEnum):
    """Which renderer the packed colours are meant for."""

    SW = 0
    HW = 1


@dataclass
class PaletteEntry:
    """An RGB888 colour."""

    r: int = 0
    g: int = 0
    b: int = 0


def rgb888_to_rgb565(r: int, g: int, b: int) -> int:
    """Pack an RGB888 colour as RGB565."""
    return (b >> 3) | ((g >> 2) << 5) | ((r >> 3) << 11)


def rgb888_to_rgb5551(r: int, g: int, b: int) -> int:
    """Pack an RGB888 colour as RGB5551 with the alpha bit clear."""
    return ((b >> 3) << 1) | ((g >> 3) << 6) | ((r >> 3) << 11)


def _byte(value: int) -> int:
    return value & 0xFF


class PaletteBank:
    """A set of palettes, the active one, and the fade state."""

    def __init__(self, render_type: RenderType = RenderType.SW) -> None:
        self.render_type = RenderType(render_type)
        self.full_palette: list[list[int]] = [[0] * PALETTE_SIZE for _ in range(PALETTE_COUNT)]
        self.full_palette32: list[list[PaletteEntry]] = [
            [PaletteEntry() for _ in range(PALETTE_SIZE)] for _ in range(PALETTE_COUNT)
        ]
        self.line_buffer: list[int] = [0] * SCREEN_YSIZE
        self.active_index = 0
        self.tex_palette_num = 0
        self.palette_mode = 0
        self.fade_mode = 0
        self.fade_r = 0
        self.fade_g = 0
        self.fade_b = 0
        self.fade_a = 0

    @property
    def active_palette(self) -> list[int]:
        return self.full_palette[self.active_index]

    @property
    def active_palette32(self) -> list[PaletteEntry]:
        return self.full_palette32[self.active_index]

    def _pack(self, r: int, g: int, b: int) -> int:
        if self.render_type is RenderType.SW:
            return rgb888_to_rgb565(r, g, b)
        return rgb888_to_rgb5551(r, g, b)

    def load_palette(
        self,
        data: bytes,
        palette_id: int,
        start_palette_index: int,
        start_index: int,
        end_index: int,
    ) -> None:
        """Load RGB triplets from raw palette file data, entries start_index..end_index."""
        if end_index > start_index and len(data) < 3 * end_index:
            raise ValueError(
                f"palette data holds {len(data) // 3} colours, {end_index} needed"
            )
        if not 0 <= palette_id < PALETTE_COUNT:
            palette_id = 0
        target: Optional[int] = palette_id if palette_id else None
        for i in range(start_index, end_index):
            r, g, b = data[3 * i:3 * i + 3]
            self.set_entry(target, _byte(start_palette_index), r, g, b)
            start_palette_index += 1

    def set_active_palette(self, new_active: int, start_line: int, end_line: int) -> None:
        """Assign a palette to a range of screen lines (software) or the texture palette."""
        if self.render_type is RenderType.SW:
            if new_active < PALETTE_COUNT:
                for line in range(max(start_line, 0), min(end_line, SCREEN_YSIZE)):
                    self.line_buffer[line] = new_active
            self.active_index = self.line_buffer[0]
        elif new_active < PALETTE_COUNT:
            self.tex_palette_num = new_active

    def set_entry(self, palette_index: Optional[int], index: int, r: int, g: int, b: int) -> None:
        """Set one colour; a palette index of None, -1 or 0xFF means the active palette."""
        slot = _ACTIVE if palette_index is None else _byte(palette_index)
        index = _byte(index)
        r, g, b = _byte(r), _byte(g), _byte(b)
        if slot == _ACTIVE:
            packed_row, rgb_row = self.active_palette, self.active_palette32
        else:
            if slot >= PALETTE_COUNT:
                raise IndexError(f"palette {slot} out of range")
            packed_row, rgb_row = self.full_palette[slot], self.full_palette32[slot]
        packed = self._pack(r, g, b)
        if self.render_type is RenderType.HW and index:
            packed |= 1
        packed_row[index] = packed
        entry = rgb_row[index]
        entry.r, entry.g, entry.b = r, g, b

    def copy_palette(self, src: int, dest: int) -> None:
        """Copy every colour of one palette over another."""
        if src < PALETTE_COUNT and dest < PALETTE_COUNT:
            self.full_palette[dest] = list(self.full_palette[src])
            self.full_palette32[dest] = [replace(entry) for entry in self.full_palette32[src]]

    def rotate_palette(self, start_index: int, end_index: int, right: bool) -> None:
        """Rotate the active palette's colours between two indices, inclusive."""
        start_index, end_index = _byte(start_index), _byte(end_index)
        if start_index > end_index:
            return
        stop = end_index + 1
        for row in (self.active_palette, self.active_palette32):
            segment = row[start_index:stop]
            if right:
                segment = segment[-1:] + segment[:-1]
            else:
                segment = segment[1:] + segment[:1]
            row[start_index:stop] = segment

    def set_fade(self, r: int, g: int, b: int, alpha: int) -> None:
        """Set a full-screen fade colour; alpha is clamped to 255."""
        self.fade_mode = 1
        self.fade_r = _byte(r)
        self.fade_g = _byte(g)
        self.fade_b = _byte(b)
        self.fade_a = min(alpha & 0xFFFF, 0xFF)

    def set_limited_fade(
        self,
        palette_id: int,
        r: int,
        g: int,
        b: int,
        alpha: int,
        start_index: int,
        end_index: int,
    ) -> None:
        """Make a palette active and blend a range of its packed colours towards (r, g, b)."""
        if palette_id >= PALETTE_COUNT:
            return
        self.palette_mode = 1
        self.active_index = palette_id
        alpha &= 0xFFFF
        if alpha >= 0x100:
            alpha = 0xFF
        if start_index >= end_index:
            return
        inverse = 0xFF - alpha
        r, g, b = _byte(r), _byte(g), _byte(b)
        packed_row, rgb_row = self.active_palette, self.active_palette32

        def blend(target: int, current: int) -> int:
            return _byte(((target * alpha + inverse * current) & 0xFFFF) >> 8)

        for i in range(start_index, end_index):
            entry = rgb_row[i]
            nr, ng, nb = blend(r, entry.r), blend(g, entry.g), blend(b, entry.b)
            packed_row[i] = self._pack(nr, ng, nb)
            if self.render_type is RenderType.HW:
                entry.r, entry.g, entry.b = nr, ng, nb
                packed_row[i] |= 1