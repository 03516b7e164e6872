import pytest

from retrokit.palette import (
    PALETTE_COUNT,
    PALETTE_SIZE,
    PaletteBank,
    PaletteEntry,
    RenderType,
    rgb888_to_rgb565,
    rgb888_to_rgb5551,
)


def test_pack_white():
    assert rgb888_to_rgb565(255, 255, 255) == 0xFFFF
    assert rgb888_to_rgb5551(255, 255, 255) == 0xFFFE


def test_pack_black():
    assert rgb888_to_rgb565(0, 0, 0) == 0
    assert rgb888_to_rgb5551(0, 0, 0) == 0


def test_set_entry_software():
    bank = PaletteBank(RenderType.SW)
    bank.set_entry(2, 10, 0x12, 0x34, 0x56)
    assert bank.full_palette32[2][10] == PaletteEntry(0x12, 0x34, 0x56)
    assert bank.full_palette[2][10] == rgb888_to_rgb565(0x12, 0x34, 0x56)


def test_set_entry_hardware_sets_alpha_bit_except_index_zero():
    bank = PaletteBank(RenderType.HW)
    bank.set_entry(1, 5, 0, 0, 0)
    bank.set_entry(1, 0, 0, 0, 0)
    assert bank.full_palette[1][5] & 1 == 1
    assert bank.full_palette[1][0] == 0


def test_set_entry_active_palette():
    bank = PaletteBank()
    bank.set_entry(-1, 3, 1, 2, 3)
    assert bank.active_palette32[3] == PaletteEntry(1, 2, 3)
    assert bank.full_palette32[0][3] == PaletteEntry(1, 2, 3)


def test_set_entry_bad_palette():
    bank = PaletteBank()
    with pytest.raises(IndexError):
        bank.set_entry(PALETTE_COUNT, 0, 1, 2, 3)


def _act_data():
    return bytes((i * 3 + c) & 0xFF for i in range(PALETTE_SIZE) for c in range(3))


def test_load_palette_into_named_palette():
    data = _act_data()
    bank = PaletteBank()
    bank.load_palette(data, 3, 0, 0, PALETTE_SIZE)
    for i, entry in enumerate(bank.full_palette32[3]):
        assert (entry.r, entry.g, entry.b) == tuple(data[3 * i:3 * i + 3])


def test_load_palette_offsets():
    data = _act_data()
    bank = PaletteBank()
    bank.load_palette(data, 1, 100, 10, 20)
    assert bank.full_palette32[1][100] == PaletteEntry(*data[30:33])
    assert bank.full_palette32[1][109] == PaletteEntry(*data[57:60])
    assert bank.full_palette32[1][110] == PaletteEntry()


def test_load_palette_out_of_range_id_goes_to_active():
    data = _act_data()
    bank = PaletteBank()
    bank.set_limited_fade(4, 0, 0, 0, 0, 0, 0)
    bank.load_palette(data, 99, 0, 0, 4)
    assert bank.full_palette32[4][1] == PaletteEntry(*data[3:6])


def test_load_palette_short_data():
    bank = PaletteBank()
    with pytest.raises(ValueError):
        bank.load_palette(b"\x00" * 6, 1, 0, 0, 4)


def test_set_active_palette_software():
    bank = PaletteBank(RenderType.SW)
    bank.set_active_palette(5, 0, 10)
    assert bank.line_buffer[:10] == [5] * 10
    assert bank.line_buffer[10] == 0
    assert bank.active_index == 5


def test_set_active_palette_hardware():
    bank = PaletteBank(RenderType.HW)
    bank.set_active_palette(6, 0, 10)
    assert bank.tex_palette_num == 6
    assert bank.active_index == 0


def test_copy_palette_is_independent():
    bank = PaletteBank()
    bank.set_entry(0, 7, 9, 8, 7)
    bank.copy_palette(0, 2)
    assert bank.full_palette[2] == bank.full_palette[0]
    bank.set_entry(0, 7, 1, 1, 1)
    assert bank.full_palette32[2][7] == PaletteEntry(9, 8, 7)


def test_rotate_round_trip():
    bank = PaletteBank()
    for i in range(20):
        bank.set_entry(0, i, i, i, i)
    before = list(bank.active_palette)
    bank.rotate_palette(2, 9, True)
    assert bank.active_palette[2] == before[9]
    assert bank.active_palette[3] == before[2]
    bank.rotate_palette(2, 9, False)
    assert bank.active_palette == before


def test_set_fade_clamps_alpha():
    bank = PaletteBank()
    bank.set_fade(1, 2, 3, 0x400)
    assert bank.fade_mode == 1
    assert (bank.fade_r, bank.fade_g, bank.fade_b, bank.fade_a) == (1, 2, 3, 0xFF)


def test_limited_fade_ignores_bad_palette():
    bank = PaletteBank()
    bank.set_limited_fade(PALETTE_COUNT, 0, 0, 0, 0, 0, 10)
    assert bank.palette_mode == 0


def test_limited_fade_to_black_darkens():
    bank = PaletteBank(RenderType.HW)
    for i in range(16):
        bank.set_entry(1, i, 200, 150, 100)
    bank.set_limited_fade(1, 0, 0, 0, 128, 0, 16)
    assert bank.active_index == 1
    assert bank.palette_mode == 1
    for entry in bank.full_palette32[1][:16]:
        assert entry.r < 200 and entry.g < 150 and entry.b < 100
    assert all(value & 1 for value in bank.full_palette[1][:16])


def test_limited_fade_software_keeps_rgb_entries():
    bank = PaletteBank(RenderType.SW)
    bank.set_entry(0, 1, 200, 150, 100)
    original = bank.full_palette[0][1]
    bank.set_limited_fade(0, 0, 0, 0, 255, 0, 4)
    assert bank.full_palette32[0][1] == PaletteEntry(200, 150, 100)
    assert bank.full_palette[0][1] != original or original == 0


def test_limited_fade_empty_range_only_switches_palette():
    bank = PaletteBank()
    bank.set_entry(3, 0, 10, 20, 30)
    before = list(bank.full_palette[3])
    bank.set_limited_fade(3, 255, 255, 255, 255, 5, 5)
    assert bank.active_index == 3
    assert bank.full_palette[3] == before