# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/12 23:05:41
# @Author : Kariko Lin

"""Raw INI strings to python values, and defaults back to strings."""

import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import TypeVar

from .errors import InvalidFormatError, MissingValueError

E = TypeVar('E')

TRUTHY = frozenset(('1', 't', 'true', 'y', 'yes'))
FALSEY = frozenset(('0', 'f', 'false', 'n', 'no'))

# `int()` would also take `1_000` or non-ASCII digits.
_DECIMAL = re.compile(r'\s*[+-]?[0-9]+\s*')


def as_bool(s: str | None) -> bool:
    if s is None:
        raise MissingValueError('cannot convert None to bool')

    low = s.lower()
    if low in TRUTHY:
        return True
    elif low in FALSEY:
        return False
    else:
        raise InvalidFormatError(s, 'bool')


def as_int(s: str | None) -> int:
    if s is None:
        raise MissingValueError('cannot convert None to int')
    if not _DECIMAL.fullmatch(s):
        raise InvalidFormatError(s, 'int')
    return int(s)


def as_enum(
    s: str | None,
    enum_type: type[E] | Mapping[str, E] | Callable[[str], E]
) -> E:
    """Look up a member by its (case sensitive) name.

    Types without named members can pass a `{name: value}` mapping,
    or a parsing function raising `KeyError`/`ValueError` on bad input.
    """
    if s is None:
        raise MissingValueError('cannot convert None to an enum member')

    if isinstance(enum_type, type) and issubclass(enum_type, Enum):
        target = enum_type.__name__
        if s in enum_type.__members__:
            return enum_type.__members__[s]
        raise InvalidFormatError(s, target)

    if isinstance(enum_type, Mapping):
        if s not in enum_type:
            raise InvalidFormatError(s, 'member of ' + ', '.join(enum_type))
        return enum_type[s]

    try:
        return enum_type(s)
    except (KeyError, ValueError) as e:
        target = getattr(enum_type, '__name__', repr(enum_type))
        raise InvalidFormatError(s, target) from e


def bool_to_str(v: bool) -> str:
    return 't' if v else 'f'


def int_to_str(v: int) -> str:
    # no `int(v)` here: a float default must fail, not truncate.
    return str(v)


def enum_to_str(
    v: object,
    enum_type: type | Mapping[str, object] | Callable[[str], object]
) -> str:
    """The string `as_enum()` turns back into `v`."""
    if isinstance(v, Enum):
        return v.name
    if isinstance(enum_type, Mapping):
        for name, member in enum_type.items():
            if member == v:
                return name
    return str(v)
