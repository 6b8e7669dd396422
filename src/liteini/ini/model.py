# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2025/06/02 22:03:17
# @Author : liteini developers

"""
Basically INI structure, read only once it has been built.

Only `IniParser` fills these in, through the underscored hooks below.
"""

from collections.abc import Mapping
from typing import Iterator


class IniSection(Mapping[str, str]):
    """INI section dict.

    Keeps every `key = value` pair declared under one header, with keys and
    values already trimmed and comment-stripped. Keys are case-sensitive.
    """
    def __init__(self, section_name: str, /) -> None:
        self._name = section_name
        self.__raw: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def _store(self, key: str, value: str) -> None:
        """for IniParser. last write wins."""
        self.__raw[key] = value

    def to_dict(self) -> dict[str, str]:
        """A detached copy of all pairs."""
        return self.__raw.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI file representation::

        key = val  ; pairs before any header live in section ""

        [section]
        key233 = val666
        [section]  ; re-opened, keeps key233
        key233 = val114514  ; overrides
    """
    def __init__(self) -> None:
        self.__sections: dict[str, IniSection] = {}

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'<IniDocument sections={list(self.__sections)!r}>'

    def _open_section(self, name: str) -> IniSection:
        """for IniParser. re-opening never clears existing keys."""
        if name not in self.__sections:
            self.__sections[name] = IniSection(name)
        return self.__sections[name]

    def lookup(self, section: str, key: str) -> str | None:
        """Raw value at (section, key), `None` when either is absent."""
        if section not in self.__sections:
            return None
        return self.__sections[section].get(key)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}
