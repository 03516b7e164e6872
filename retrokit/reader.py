"""Reading files out of an encrypted data pack."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import BinaryIO, Optional, Union

_KEY_A = b"4RaS9D7KaEbxcp2o5r6t\0"
_KEY_B = b"3tRaUxLmEaSn\0"

_U32 = struct.Struct("<I")
_HEADER = struct.Struct("<IH")


def copy_file_path(path: str) -> str:
    """Return the path with forward slashes turned into backslashes."""
    return path.replace("/", "\\")


class FileNotInPackError(FileNotFoundError):
    """The requested file is not stored in the data pack."""


class Cipher:
    """The rolling key stream that scrambles file contents inside a pack."""

    def __init__(self, file_size: int) -> None:
        self.number = (file_size & 0x1FC) >> 2
        self.pos_b = self.number % 9 + 1
        self.pos_a = self.number % self.pos_b + 1
        self.nybble_swap = False

    def _step(self) -> None:
        self.pos_a += 1
        self.pos_b += 1
        if self.pos_a <= 19 or self.pos_b <= 11:
            if self.pos_a > 19:
                self.pos_a = 1
                self.nybble_swap = not self.nybble_swap
            if self.pos_b > 11:
                self.pos_b = 1
                self.nybble_swap = not self.nybble_swap
            return
        self.number = (self.number + 1) & 0x7F
        if self.nybble_swap:
            self.nybble_swap = False
            self.pos_a = self.number % 12 + 6
            self.pos_b = self.number % 5 + 4
        else:
            self.nybble_swap = True
            self.pos_a = self.number % 15 + 3
            self.pos_b = self.number % 7 + 1

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt the next bytes of the stream, advancing the key."""
        out = bytearray()
        for value in data:
            value ^= _KEY_B[self.pos_b] ^ self.number
            if self.nybble_swap:
                value = ((value & 0xF) << 4) | (value >> 4)
            out.append(value ^ _KEY_A[self.pos_a])
            self._step()
        return bytes(out)

    def advance(self, count: int) -> None:
        """Move the key forward by count bytes without decrypting anything."""
        for _ in range(count):
            self._step()


def _read_exact(handle: BinaryIO, size: int) -> bytes:
    data = handle.read(size)
    if len(data) != size:
        raise ValueError("data pack is truncated")
    return data


def _same_name(a: bytes, b: bytes) -> bool:
    return a.lower() == b.lower()


class PackedFile:
    """A readable view of one file stored in a data pack."""

    def __init__(self, path: Path, offset: int, size: int) -> None:
        self._handle: BinaryIO = open(path, "rb")
        self.offset = offset
        self.size = size
        self._position = 0
        self._cipher = Cipher(size)

    def read(self, size: int = -1) -> bytes:
        """Read and decrypt up to size bytes; all remaining bytes if size is negative."""
        remaining = max(self.size - self._position, 0)
        count = remaining if size < 0 else min(size, remaining)
        self._handle.seek(self.offset + self._position)
        raw = self._handle.read(count)
        self._position += len(raw)
        return self._cipher.decrypt(raw)

    def seek(self, position: int) -> int:
        """Move to a position within the file, re-deriving the key for it."""
        if position < 0:
            raise ValueError("negative seek position")
        if self._handle.closed:
            raise ValueError("seek on closed file")
        self._cipher = Cipher(self.size)
        self._cipher.advance(position)
        self._position = position
        return position

    def tell(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= self.size

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> "PackedFile":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class DataPack:
    """An encrypted archive of directories and files."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.path = Path(path)
        with open(self.path, "rb") as handle:
            self.header_size, dir_count = _HEADER.unpack(_read_exact(handle, _HEADER.size))
            self.directories: list[tuple[bytes, int]] = []
            for _ in range(dir_count):
                length = _read_exact(handle, 1)[0]
                key = 0xFF - length
                name = bytes(b ^ key for b in _read_exact(handle, length))
                (offset,) = _U32.unpack(_read_exact(handle, 4))
                self.directories.append((name, offset))
            self.file_size = handle.seek(0, os.SEEK_END)

    def locate(self, file_path: str) -> tuple[int, int]:
        """Return the absolute data offset and size of a file in the pack."""
        slash = file_path.rfind("/")
        if slash < 0:
            raise FileNotInPackError(file_path)
        directory = file_path[:slash + 1].encode("utf-8")
        name = file_path[slash + 1:].encode("utf-8")

        index: Optional[int] = next(
            (i for i, (dir_name, _) in enumerate(self.directories) if _same_name(dir_name, directory)),
            None,
        )
        if index is None:
            raise FileNotInPackError(file_path)
        offset = self.directories[index][1]
        if index == len(self.directories) - 1:
            next_offset = self.file_size - self.header_size
        else:
            next_offset = self.directories[index + 1][1]
        end = next_offset + self.header_size

        position = offset + self.header_size
        with open(self.path, "rb") as handle:
            while True:
                handle.seek(position)
                length = _read_exact(handle, 1)[0]
                entry_name = bytes(b ^ 0xFF for b in _read_exact(handle, length))
                (size,) = _U32.unpack(_read_exact(handle, 4))
                position += 1 + length + 4
                found = _same_name(entry_name, name)
                if not found:
                    position += size
                if position >= end:
                    raise FileNotInPackError(file_path)
                if found:
                    return position, size

    def open(self, file_path: str) -> PackedFile:
        """Open a file from the pack for reading."""
        offset, size = self.locate(file_path)
        return PackedFile(self.path, offset, size)

    def __contains__(self, file_path: object) -> bool:
        if not isinstance(file_path, str):
            return False
        try:
            self.locate(file_path)
        except FileNotInPackError:
            return False
        return True