# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI structure with dotted-name inheritance support.

A section named `a.b.c` inherits from `a.b`, then `a`, then `DEFAULT`.
Nothing about it is stored: the chain gets computed on every lookup.
"""

from collections.abc import Mapping
from typing import Generator, Iterator

from ..errors import DuplicateKeyError

DEFAULT_SECTION = 'DEFAULT'


def fold_name(name: str) -> str:
    """Ordinal case folding: one char in, one char out.

    `str.upper()` alone would turn `straße` into `STRASSE`.
    """
    return ''.join(c.upper() if len(c.upper()) == 1 else c for c in name)


class Section(Mapping[str, str]):
    """Key-value pairs of one `[name]` block. Keys are case sensitive.

    Read only to users; only `add()` inserts, and it refuses to overwrite.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self.__raw: dict[str, str] = {}

    @property
    def name(self) -> str:
        return self._name

    def add(self, key: str, value: str, lineno: int | None = None) -> None:
        if key in self.__raw:
            raise DuplicateKeyError(self._name, key, lineno)
        self.__raw[key] = value

    def __getitem__(self, key: str) -> str:
        return self.__raw[key]

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))


class OptionStore(Mapping[str, Section]):
    """A whole parsed INI document: section name -> `Section`.

    Section names compare case-insensitively, but the spelling
    met first is kept for iteration. `DEFAULT` always exists.
    """

    def __init__(self) -> None:
        # folded name as the real key, see `fold_name()`.
        self.__raw: dict[str, Section] = {}
        # to maintain original names
        self.__keyproxy: dict[str, str] = {}
        self._open_section(DEFAULT_SECTION)

    def __getitem__(self, key: str) -> Section:
        if not isinstance(key, str):
            raise KeyError(key)
        return self.__raw[fold_name(key)]

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__keyproxy.values())

    def __repr__(self) -> str:
        return f'OptionStore({list(self)})'

    @property
    def default(self) -> Section:
        return self.__raw[DEFAULT_SECTION]

    def _open_section(self, name: str) -> Section:
        """for the parser: get the section, create it if absent."""
        folded = fold_name(name)
        if folded not in self.__raw:
            self.__raw[folded] = Section(name)
            self.__keyproxy[folded] = name
        return self.__raw[folded]

    def __traverse_parents(
        self, section: str | None
    ) -> Generator[Section, None, None]:
        name = section or DEFAULT_SECTION
        # sections absent from the document are skipped,
        # yet their prefixes are still walked.
        while name is not None:
            if name in self:
                yield self[name]
            idx = name.rfind('.')
            name = name[:idx] if idx != -1 else None
        # may repeat DEFAULT when the walk started there, that's harmless.
        yield self.default

    def resolution_chain(self, section: str | None) -> list[str]:
        """Names of the existing sections a lookup in `section` would check,
        nearest first and always ending with `DEFAULT`."""
        ret: list[Section] = []
        for i in self.__traverse_parents(section):
            if not ret or ret[-1] is not i:
                ret.append(i)
        return [i.name for i in ret]

    def find_key(
        self, section: str | None, key: str
    ) -> tuple[str, str] | tuple[None, None]:
        """Start searching from a specific section, then its parents.

        Returns:
            - if found: the name of the section holding the key
            and the corresponding value.
            - if not found: a `(None, None)` tuple.
        """
        for i in self.__traverse_parents(section):
            if key in i:
                return i.name, i[key]
        return None, None
