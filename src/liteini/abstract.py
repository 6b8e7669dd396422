# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2025/06/02 21:14:08
# @Author : liteini developers

from abc import ABCMeta, abstractmethod
from typing import Generic, Iterator, TypeVar

T = TypeVar('T')


class LineSource(metaclass=ABCMeta):
    """Anything that hands the parser an ordered, finite run of text lines.

    Implementations must not raise when the underlying resource is missing:
    yield nothing instead.
    """
    @abstractmethod
    def readlines(self) -> Iterator[str]:
        raise NotImplementedError

    @abstractmethod
    def __str__(self) -> str:
        raise NotImplementedError


class Handler(Generic[T], metaclass=ABCMeta):
    def __init__(self, source: LineSource) -> None:
        self._src = source

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    def __str__(self) -> str:
        return str(self._src)
