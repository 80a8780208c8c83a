# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/12 23:41:18
# @Author : Kariko Lin

"""Typed queries over a parsed INI document.

A lookup in `a.b.c` checks `a.b.c`, `a.b`, `a` (whichever exist, nearest
first) and finally `DEFAULT`:

    ```ini
    [DEFAULT]
    x = 0
    [a]
    x = 1
    [a.b.c]
    ```

Here `get_value('a.b.c', 'x')` is `'1'`, though `[a.b]` does not exist.
"""

from collections.abc import Callable, Iterable, Mapping
from io import TextIOWrapper
from typing import IO, Any, Iterator, TypeVar

from . import convert
from .errors import MissingKeyError
from .ini.model import DEFAULT_SECTION, OptionStore
from .ini.parser import IniFileParser, parse

E = TypeVar('E')

# tells "no default given" apart from a `None` default.
_MISSING: Any = object()


class IniReader:
    def __init__(self, store: OptionStore) -> None:
        self.__store = store

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'IniReader':
        return cls(parse(lines))

    @classmethod
    def from_stream(
        cls, stream: IO[str] | IO[bytes], encoding: str = 'utf-8-sig'
    ) -> 'IniReader':
        """Read an already opened stream. Binary ones get decoded first.

        The stream is consumed, but not closed.
        """
        if isinstance(stream.read(0), bytes):
            text = TextIOWrapper(stream, encoding=encoding)  # type: ignore
            try:
                return cls(parse(text))
            finally:
                # keep the caller's stream open.
                text.detach()
        return cls(parse(stream))

    @classmethod
    def from_file(cls, filename: str, encoding: str | None = None) -> 'IniReader':
        return cls(IniFileParser(filename, encoding).read())

    @property
    def store(self) -> OptionStore:
        return self.__store

    def sections(self) -> list[str]:
        return list(self.__store)

    def has_section(self, section: str) -> bool:
        return section in self.__store

    def __contains__(self, section: object) -> bool:
        return section in self.__store

    def __iter__(self) -> Iterator[str]:
        return iter(self.__store)

    def __repr__(self) -> str:
        return f'IniReader({self.sections()})'

    def get_value(self, section: str | None, key: str, default: Any = _MISSING):
        """Resolve `key` through `section` and its dotted parents.

        Raises:
            MissingKeyError: nothing found and no `default` given.
        """
        found, value = self.__store.find_key(section, key)
        if found is not None:
            return value
        if default is _MISSING:
            raise MissingKeyError(section or DEFAULT_SECTION, key)
        return default

    def get_bool(
        self, section: str | None, key: str, default: bool = _MISSING
    ) -> bool:
        if default is not _MISSING:
            default = convert.bool_to_str(default)
        return convert.as_bool(self.get_value(section, key, default))

    def get_int(
        self, section: str | None, key: str, default: int = _MISSING
    ) -> int:
        if default is not _MISSING:
            default = convert.int_to_str(default)
        return convert.as_int(self.get_value(section, key, default))

    def get_enum(
        self, section: str | None, key: str,
        enum_type: type[E] | Mapping[str, E] | Callable[[str], E],
        default: E = _MISSING
    ) -> E:
        """Like `get_value()`, then `convert.as_enum()` with `enum_type`."""
        if default is not _MISSING:
            default = convert.enum_to_str(default, enum_type)
        return convert.as_enum(
            self.get_value(section, key, default), enum_type)
