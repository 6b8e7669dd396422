# -*- encoding: utf-8 -*-
# @File   : sources.py
# @Time   : 2025/06/02 21:40:51
# @Author : liteini developers

"""Where the lines come from.

The parser never opens anything by itself: it just walks whatever a
`LineSource` yields. A source that cannot be read yields no lines at all,
so a missing config file ends up as an empty document instead of a crash.
"""

import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase
from os import PathLike, fspath
from typing import Iterator

import chardet

from .abstract import LineSource

__all__ = [
    'FileSource', 'StringSource', 'StreamSource', 'IterableSource',
    'as_source'
]


def _readstream(buf: TextIOBase) -> Iterator[str]:
    # readline() keeps the terminator; trimming happens later anyway,
    # but callers of readlines() expect bare lines.
    while i := buf.readline():
        yield i.rstrip('\r\n')


class FileSource(LineSource):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('utf-8', errors='replace')
        return StringIO(buf, newline='\n')

    def readlines(self) -> Iterator[str]:
        try:
            lines = self._read_text()
        except (OSError, ValueError) as e:
            # ValueError: e.g. a NUL in the file name
            logging.warning(f'INI source not readable: {self._fn}\n  {e}')
            return iter(())
        return iter(lines)

    def _read_text(self) -> list[str]:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec, newline='\n') as fp:
                return list(_readstream(fp))
        except (UnicodeDecodeError, LookupError):
            return list(_readstream(self._decode_file(self._fn)))

    def __str__(self) -> str:
        return f'{self._fn} ({self._codec})'


class StringSource(LineSource):
    def __init__(self, text: str) -> None:
        self._text = text

    def readlines(self) -> Iterator[str]:
        return _readstream(StringIO(self._text))

    def __str__(self) -> str:
        return '<string>'


class StreamSource(LineSource):
    """Reads an already opened text stream. The stream is not closed."""
    def __init__(self, stream: TextIOBase) -> None:
        self._stream = stream

    def readlines(self) -> Iterator[str]:
        try:
            yield from _readstream(self._stream)
        except (OSError, UnicodeDecodeError) as e:
            # keep whatever we got before the stream broke
            logging.warning(f'INI stream read aborted: {self}\n  {e}')

    def __str__(self) -> str:
        return str(getattr(self._stream, 'name', '<stream>'))


class IterableSource(LineSource):
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines

    def readlines(self) -> Iterator[str]:
        return iter(self._lines)

    def __str__(self) -> str:
        return '<lines>'


def as_source(
    obj: LineSource | str | PathLike[str] | TextIOBase
    | Iterable[str] | None,
    encoding: str | None = None
) -> LineSource:
    """Pick a `LineSource` for whatever the caller passed.

    Plain strings are file names, not INI text. Use `StringSource` for that.
    """
    if isinstance(obj, LineSource):
        return obj
    if obj is None:
        return IterableSource(())
    if isinstance(obj, (str, PathLike)):
        return FileSource(obj, encoding)
    if isinstance(obj, TextIOBase):
        return StreamSource(obj)
    return IterableSource(obj)
