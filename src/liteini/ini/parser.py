# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2025/06/02 22:31:40
# @Author : liteini developers

"""Line oriented INI parsing.

Each line gets its comment cut off (`;`, `#` or `//`, whichever comes first)
and is trimmed, then it is either a `[section]` header, a `key = value` pair
or nothing at all. Nothing here raises on bad content: a broken line is
just dropped.
"""

import logging
from collections.abc import Iterable

from .model import IniDocument
from ..abstract import Handler, LineSource

__all__ = ['strip_comment', 'trim', 'normalize', 'IniParser']

# the C locale `isspace()` set. unicode spaces are kept as content.
WHITESPACE = ' \t\n\v\f\r'
COMMENT_MARKS = (';', '#', '//')

DEFAULT_SECTION_HINT = 32
DEFAULT_KEY_HINT = 8


def strip_comment(line: str) -> str:
    """Cut `line` at the earliest comment mark, whichever one it is."""
    cut = len(line)
    for mark in COMMENT_MARKS:
        if (pos := line.find(mark, 0, cut)) != -1:
            cut = pos
    return line[:cut]


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def normalize(line: str) -> str:
    return trim(strip_comment(line))


class IniParser(Handler[IniDocument]):
    """Builds an `IniDocument` out of a `LineSource`.

    `section_hint` and `key_hint` are the expected section count and
    keys-per-section count. Python dicts grow on their own, so they only
    exist for callers that pass them around; they change nothing.
    """
    def __init__(
        self, source: LineSource,
        section_hint: int = DEFAULT_SECTION_HINT,
        key_hint: int = DEFAULT_KEY_HINT
    ) -> None:
        super().__init__(source)
        self.section_hint = section_hint
        self.key_hint = key_hint

    @staticmethod
    def readlines(
        lines: Iterable[str],
        section_hint: int = DEFAULT_SECTION_HINT,
        key_hint: int = DEFAULT_KEY_HINT
    ) -> IniDocument:
        """Parse plain lines (terminators stripped or not, doesn't matter).

        If there is no special need, just call `self.read()`.
        """
        doc = IniDocument()
        this_sect = ''
        for lineno, raw in enumerate(lines, 1):
            if not (i := normalize(raw)):
                continue
            # `[` wins over `=`, even when the header turns out broken.
            if (lbracket := i.find('[')) != -1:
                rbracket = i.find(']', lbracket)
                if rbracket == -1:
                    logging.debug(
                        f'line {lineno}: unclosed section header dropped: {i!r}')
                    continue
                this_sect = trim(i[lbracket + 1:rbracket])
                doc._open_section(this_sect)
            elif '=' in i:
                key, val = i.split('=', 1)
                doc._open_section(this_sect)._store(trim(key), trim(val))
        return doc

    def read(self) -> IniDocument:
        """Read the whole source once. An unreadable one reads as empty."""
        return self.readlines(
            self._src.readlines(), self.section_hint, self.key_hint)

    def __str__(self) -> str:
        return "INI source: " + super().__str__()
