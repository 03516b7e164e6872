"""Fixed-point trigonometry lookup tables."""

from __future__ import annotations

import math
import struct
from array import array


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _build_m() -> tuple[tuple[int, ...], tuple[int, ...]]:
    sin_table = [int(math.sin((i / 256.0) * math.pi) * 4096.0) for i in range(0x200)]
    cos_table = [int(math.cos((i / 256.0) * math.pi) * 4096.0) for i in range(0x200)]
    cos_table[0x00], cos_table[0x80], cos_table[0x100], cos_table[0x180] = 0x1000, 0, -0x1000, 0
    sin_table[0x00], sin_table[0x80], sin_table[0x100], sin_table[0x180] = 0, 0x1000, 0, -0x1000
    return tuple(sin_table), tuple(cos_table)


def _build_512() -> tuple[tuple[int, ...], tuple[int, ...]]:
    args = [_f32((i / 256.0) * math.pi) for i in range(0x200)]
    sin_table = [int(_f32(math.sin(a)) * 512.0) for a in args]
    cos_table = [int(_f32(math.cos(a)) * 512.0) for a in args]
    cos_table[0x00], cos_table[0x80], cos_table[0x100], cos_table[0x180] = 0x200, 0, -0x200, 0
    sin_table[0x00], sin_table[0x80], sin_table[0x100], sin_table[0x180] = 0, 0x200, 0, -0x200
    return tuple(sin_table), tuple(cos_table)


def _build_arctan() -> bytes:
    scale = _f32(40.743664)
    angles = array("f", (math.atan2(y, x) for x in range(0x100) for y in range(0x100)))
    scaled = array("f", (angle * scale for angle in angles))
    return bytes(int(value) for value in scaled)


_SIN_M, _COS_M = _build_m()
_SIN_512, _COS_512 = _build_512()
_SIN_256 = tuple(_SIN_512[i * 2] >> 1 for i in range(0x100))
_COS_256 = tuple(_COS_512[i * 2] >> 1 for i in range(0x100))
_ARC_TAN_256 = _build_arctan()


def _wrap512(angle: int) -> int:
    if angle < 0:
        angle = 0x200 - angle
    return angle & 0x1FF


def _wrap256(angle: int) -> int:
    if angle < 0:
        angle = 0x100 - angle
    return angle & 0xFF


def sin_m(angle: int) -> int:
    """Sine over 512 steps per turn, scaled to 4096."""
    return _SIN_M[_wrap512(angle)]


def cos_m(angle: int) -> int:
    """Cosine over 512 steps per turn, scaled to 4096."""
    return _COS_M[_wrap512(angle)]


def sin512(angle: int) -> int:
    """Sine over 512 steps per turn, scaled to 512."""
    return _SIN_512[_wrap512(angle)]


def cos512(angle: int) -> int:
    """Cosine over 512 steps per turn, scaled to 512."""
    return _COS_512[_wrap512(angle)]


def sin256(angle: int) -> int:
    """Sine over 256 steps per turn, scaled to 256."""
    return _SIN_256[_wrap256(angle)]


def cos256(angle: int) -> int:
    """Cosine over 256 steps per turn, scaled to 256."""
    return _COS_256[_wrap256(angle)]


def arc_tan_lookup(x: int, y: int) -> int:
    """Angle of the vector (x, y) as a byte, 256 steps per turn."""
    ax, ay = abs(x), abs(y)
    if ax <= ay:
        while ay > 0xFF:
            ax >>= 4
            ay >>= 4
    else:
        while ax > 0xFF:
            ax >>= 4
            ay >>= 4
    value = _ARC_TAN_256[(ax << 8) + ay]
    if x <= 0:
        if y <= 0:
            return (value - 0x80) & 0xFF
        return (-0x80 - value) & 0xFF
    if y <= 0:
        return -value & 0xFF
    return value