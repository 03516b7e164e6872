"""A small INI reader and writer for engine and mod settings."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Optional, Union

_C_WHITESPACE = " \t\n\v\f\r"
_SECTION_RE = re.compile(r"\[([^\[\]]+)")
_KEY_RE = re.compile(r"[^;=]+")
_VALUE_RE = re.compile(r"[^\t\r\n]+")
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class ItemType(enum.IntEnum):
    """How an item is written back out."""

    STRING = 0
    INT = 1
    FLOAT = 2
    BOOL = 3
    COMMENT = 4


@dataclass
class ConfigItem:
    """One key/value pair, or a comment, within a section."""

    section: str = ""
    key: str = ""
    value: str = ""
    has_section: bool = False
    type: ItemType = ItemType.STRING

    def render(self) -> str:
        if self.type is ItemType.COMMENT:
            return f"; {self.value}\n"
        return f"{self.key}={self.value}\n"


def _parse_key_value(line: str) -> Optional[tuple[str, str]]:
    key_match = _KEY_RE.match(line)
    if key_match is None:
        return None
    end = key_match.end()
    if line[end:end + 1] != "=":
        return None
    rest = line[end + 1:]
    value_match = _VALUE_RE.match(rest.lstrip(_C_WHITESPACE)) or _VALUE_RE.match(rest)
    if value_match is None:
        return None
    return key_match.group(), value_match.group()


def _parse(text: str) -> Iterator[ConfigItem]:
    section = ""
    has_section = False
    for line in text.split("\n"):
        if line.startswith("#"):
            continue
        section_match = _SECTION_RE.match(line)
        if section_match is not None:
            section = section_match.group(1)
            has_section = True
            continue
        pair = _parse_key_value(line)
        if pair is not None:
            key, value = pair
            yield ConfigItem(
                section=section if has_section else "",
                key=key,
                value=value,
                has_section=has_section,
            )


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


class IniParser:
    """An ordered list of settings, read from and written to INI text."""

    def __init__(self, filename: Union[str, PathLike, None] = None) -> None:
        self.items: list[ConfigItem] = []
        if filename is not None:
            with open(filename, "r", encoding="utf-8", errors="surrogateescape") as handle:
                self.items = list(_parse(handle.read()))

    @classmethod
    def loads(cls, text: str) -> "IniParser":
        """Build a parser from INI text."""
        parser = cls()
        parser.items = list(_parse(text))
        return parser

    def _find(self, section: str, key: str) -> Optional[ConfigItem]:
        return next(
            (item for item in self.items if item.section == section and item.key == key),
            None,
        )

    def get_string(self, section: str, key: str) -> Optional[str]:
        item = self._find(section, key)
        return None if item is None else item.value

    def get_integer(self, section: str, key: str) -> Optional[int]:
        item = self._find(section, key)
        return None if item is None else _atoi(item.value)

    def get_float(self, section: str, key: str) -> Optional[float]:
        item = self._find(section, key)
        return None if item is None else _atof(item.value)

    def get_bool(self, section: str, key: str) -> Optional[bool]:
        item = self._find(section, key)
        if item is None:
            return None
        return item.value.lower() == "true" or item.value == "1"

    def _set(self, section: str, key: str, value: str, item_type: ItemType) -> None:
        item = self._find(section, key)
        if item is None:
            item = ConfigItem()
            self.items.append(item)
        item.section = section
        item.key = key
        item.value = value
        item.type = item_type

    def set_string(self, section: str, key: str, value: str) -> None:
        self._set(section, key, str(value), ItemType.STRING)

    def set_integer(self, section: str, key: str, value: int) -> None:
        self._set(section, key, str(int(value)), ItemType.INT)

    def set_float(self, section: str, key: str, value: float) -> None:
        self._set(section, key, f"{float(value):.6f}", ItemType.FLOAT)

    def set_bool(self, section: str, key: str, value: bool) -> None:
        self._set(section, key, "true" if value else "false", ItemType.BOOL)

    def set_comment(self, section: str, key: str, comment: str) -> None:
        self._set(section, key, comment, ItemType.COMMENT)

    def dumps(self) -> str:
        """Render the items as INI text, sectionless items first."""
        head = "".join(item.render() for item in self.items if not item.section)
        sections = dict.fromkeys(item.section for item in self.items if item.section)
        blocks = [
            f"[{name}]\n" + "".join(item.render() for item in self.items if item.section == name)
            for name in sections
        ]
        return head + "\n" + "\n".join(blocks)

    def write(self, filename: Union[str, PathLike]) -> None:
        with open(filename, "w", encoding="utf-8", errors="surrogateescape") as handle:
            handle.write(self.dumps())