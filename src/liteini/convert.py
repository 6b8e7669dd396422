# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2025/06/03 00:12:26
# @Author : liteini developers

"""Raw INI strings to Python values.

Every converter takes the raw value and the caller's default and returns
one of the two. None of them raises on bad text.
"""

import ctypes
import logging
from math import isinf
from re import IGNORECASE
from re import compile as regex
from typing import Any, Callable

__all__ = [
    'TRUTHY', 'to_bool', 'to_char', 'to_int', 'to_float', 'to_str',
    'converter_for', 'int_bounds'
]

# exact, case-sensitive. "True" is false.
TRUTHY = frozenset(('true', '1', 'on', 'yes'))

# no '+', no '_', no blanks, ASCII digits only.
INT_PATTERN = regex(r'-?[0-9]+')
FLOAT_PATTERN = regex(
    r'-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?'
    r'|inf(?:inity)?|nan)',
    IGNORECASE)

_ASCII_LOWER = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')

_INT_CTYPES = (
    ctypes.c_byte, ctypes.c_ubyte, ctypes.c_short, ctypes.c_ushort,
    ctypes.c_int, ctypes.c_uint, ctypes.c_long, ctypes.c_ulong,
    ctypes.c_longlong, ctypes.c_ulonglong,
    ctypes.c_int8, ctypes.c_uint8, ctypes.c_int16, ctypes.c_uint16,
    ctypes.c_int32, ctypes.c_uint32, ctypes.c_int64, ctypes.c_uint64,
    ctypes.c_size_t, ctypes.c_ssize_t,
)
_UNSIGNED_CTYPES = (
    ctypes.c_ubyte, ctypes.c_ushort, ctypes.c_uint, ctypes.c_ulong,
    ctypes.c_ulonglong, ctypes.c_uint8, ctypes.c_uint16, ctypes.c_uint32,
    ctypes.c_uint64, ctypes.c_size_t,
)


def _fallback(raw: str, default, why: str):
    logging.debug(f'{raw!r}: {why}, falling back to {default!r}')
    return default


def int_bounds(ctype: type) -> tuple[int, int]:
    """Inclusive (min, max) of a `ctypes` integer type."""
    if ctype not in _INT_CTYPES:
        raise TypeError(f'{ctype!r} is not a ctypes integer type')
    bits = ctypes.sizeof(ctype) * 8
    if ctype in _UNSIGNED_CTYPES:
        return 0, (1 << bits) - 1
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def to_bool(raw: str, default: bool) -> bool:
    # once a value exists the default never comes back.
    return raw in TRUTHY


def to_char(raw: str, default: str) -> str:
    return raw[0] if raw else _fallback(raw, default, 'empty value')


def to_int(raw: str, default: int, ctype: type | None = None) -> int:
    if not INT_PATTERN.fullmatch(raw):
        return _fallback(raw, default, 'not an integer')
    value = int(raw)
    if ctype is not None:
        lo, hi = int_bounds(ctype)
        if not lo <= value <= hi:
            return _fallback(raw, default, f'out of {ctype.__name__} range')
    return value


def to_float(raw: str, default: float, ctype: type | None = None) -> float:
    if ctype not in (None, ctypes.c_float, ctypes.c_double):
        raise TypeError(f'{ctype!r} is not c_float or c_double')
    if not FLOAT_PATTERN.fullmatch(raw):
        return _fallback(raw, default, 'not a float')
    value = float(raw)
    literal_inf = 'inf' in raw.lower()
    if isinf(value) and not literal_inf:
        return _fallback(raw, default, 'out of double range')
    if ctype is ctypes.c_float:
        # rounds to single precision; past FLT_MAX that is inf
        value = ctypes.c_float(value).value
        if isinf(value) and not literal_inf:
            return _fallback(raw, default, 'out of c_float range')
    return value


def to_str(raw: str, default: str, lowercase: bool = False) -> str:
    if not lowercase:
        return raw
    lowered = raw.translate(_ASCII_LOWER)
    # hand back the very same object when nothing was uppercase
    return raw if lowered == raw else lowered


# the closed set. order doesn't matter, lookup walks the default's MRO,
# so `bool` is found before `int`.
_CONVERTERS: dict[type, Callable[..., Any]] = {
    bool: to_bool,
    int: to_int,
    float: to_float,
    str: to_str,
}


def converter_for(default: object) -> Callable[..., Any]:
    """Converter matching the type of `default`.

    Raises `TypeError` for anything outside bool/int/float/str; that is a
    caller bug, not a data problem.
    """
    for klass in type(default).__mro__:
        if klass in _CONVERTERS:
            return _CONVERTERS[klass]
    raise TypeError(
        f'unsupported INI value type: {type(default).__name__} '
        f'(expected one of {", ".join(t.__name__ for t in _CONVERTERS)})')
