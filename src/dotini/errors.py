# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 22:31:07
# @Author : Kariko Lin

"""Everything `dotini` raises derives from `IniError`.

Each error also inherits the closest builtin,
so `except KeyError` around a lookup keeps working.
"""


class IniError(Exception):
    """Base of all `dotini` errors."""
    pass


class DuplicateKeyError(IniError, KeyError):
    """A key got assigned twice within one section while parsing."""

    def __init__(self, section: str, key: str, lineno: int | None = None):
        self.section = section
        self.key = key
        self.lineno = lineno
        msg = f'duplicate key "{key}" in section [{section}]'
        if lineno is not None:
            msg += f' (line {lineno})'
        super().__init__(msg)

    # KeyError would quote the message otherwise.
    def __str__(self) -> str:
        return self.args[0]


class MissingKeyError(IniError, KeyError):
    """Neither the section chain nor DEFAULT holds the key."""

    def __init__(self, section: str, key: str):
        self.section = section
        self.key = key
        super().__init__(
            f'key "{key}" not found in [{section}], '
            'its parent sections or DEFAULT')

    def __str__(self) -> str:
        return self.args[0]


class InvalidFormatError(IniError, ValueError):
    """A raw value cannot be converted to the requested type."""

    def __init__(self, value: str, target: str):
        self.value = value
        self.target = target
        super().__init__(f"'{value}' is not a valid {target}.")


class MissingValueError(IniError, ValueError):
    """`None` was handed to a converter."""
    pass
