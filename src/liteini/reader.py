# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2025/06/03 01:05:52
# @Author : liteini developers

"""Typed, never-failing access to a parsed INI document."""

import ctypes
from collections.abc import Iterable
from io import TextIOBase
from os import PathLike
from typing import TypeVar

from .abstract import LineSource
from .convert import (
    converter_for, int_bounds,
    to_bool, to_char, to_float, to_int, to_str
)
from .ini.model import IniDocument
from .ini.parser import DEFAULT_KEY_HINT, DEFAULT_SECTION_HINT, IniParser
from .sources import StringSource, as_source

__all__ = ['IniReader']

V = TypeVar('V', bool, int, float, str)


class IniReader:
    """Parses `source` once, then answers typed lookups.

    `source` may be a file name, an open text stream, a `LineSource` or any
    iterable of lines. A missing or unreadable file gives an empty document,
    and every `read()` against it returns the default.

        ```python
        ini = IniReader('settings.ini')
        width = ini.read('Video', 'Width', 800)
        vsync = ini.read('Video', 'VSync', False)
        name = ini.read('Player', 'Name', 'nobody', lowercase=True)
        ```
    """
    def __init__(
        self,
        source: LineSource | str | PathLike[str] | TextIOBase
        | Iterable[str] | None,
        section_hint: int = DEFAULT_SECTION_HINT,
        key_hint: int = DEFAULT_KEY_HINT,
        *, encoding: str | None = None
    ) -> None:
        self._parser = IniParser(
            as_source(source, encoding), section_hint, key_hint)
        self.__doc = self._parser.read()

    @classmethod
    def from_string(
        cls, text: str,
        section_hint: int = DEFAULT_SECTION_HINT,
        key_hint: int = DEFAULT_KEY_HINT
    ) -> 'IniReader':
        return cls(StringSource(text), section_hint, key_hint)

    @property
    def document(self) -> IniDocument:
        return self.__doc

    def read(
        self, section: str, key: str, default: V, lowercase: bool = False
    ) -> V:
        """Look up `[section] key` and convert it to the type of `default`.

        - absent section or key: `default`, the same object.
        - bool: `True` only for "true", "1", "on", "yes" (case-sensitive).
        - int, float: whole-string parse, `default` when that fails.
        - str: raw value, ASCII-lowercased if `lowercase`.

        Any other type of `default` raises `TypeError`.
        """
        convert = converter_for(default)
        raw = self.__doc.lookup(section, key)
        if raw is None:
            return default
        if convert is to_str:
            return to_str(raw, default, lowercase)
        return convert(raw, default)

    def read_bool(self, section: str, key: str, default: bool) -> bool:
        raw = self.__doc.lookup(section, key)
        return default if raw is None else to_bool(raw, default)

    def read_char(self, section: str, key: str, default: str) -> str:
        """First character of the value."""
        raw = self.__doc.lookup(section, key)
        return default if raw is None else to_char(raw, default)

    def read_int(
        self, section: str, key: str, default: int,
        ctype: type | None = None
    ) -> int:
        """`ctype` (e.g. `ctypes.c_uint8`) narrows the accepted range."""
        if ctype is not None:
            int_bounds(ctype)  # reject non-integer ctypes up front
        raw = self.__doc.lookup(section, key)
        return default if raw is None else to_int(raw, default, ctype)

    def read_float(
        self, section: str, key: str, default: float,
        ctype: type | None = None
    ) -> float:
        if ctype not in (None, ctypes.c_float, ctypes.c_double):
            raise TypeError(f'{ctype!r} is not c_float or c_double')
        raw = self.__doc.lookup(section, key)
        return default if raw is None else to_float(raw, default, ctype)

    def read_str(
        self, section: str, key: str, default: str, lowercase: bool = False
    ) -> str:
        raw = self.__doc.lookup(section, key)
        return default if raw is None else to_str(raw, default, lowercase)

    def sections(self) -> list[str]:
        return list(self.__doc)

    def has_section(self, section: str) -> bool:
        return section in self.__doc

    def has_key(self, section: str, key: str) -> bool:
        return self.__doc.lookup(section, key) is not None

    def __contains__(self, section: object) -> bool:
        return section in self.__doc

    def __len__(self) -> int:
        return len(self.__doc)

    def __str__(self) -> str:
        return str(self._parser)
