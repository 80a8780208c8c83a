# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line oriented INI reading.

Supported (and ONLY supported) constructs:

    ```ini
    bare_key            ; same as `bare_key=1`, lands in DEFAULT
    [section]           # opens, or reopens, a section
    key = value = more  ; value is ` value = more`, left side trimmed only
    [section.child]     ; inherits `section`, see `model`
    ```

`;` and `#` cut the rest of a line, no matter where they are.
There are no quotes, escapes or multi-line values.
"""

import logging
import re
from io import StringIO, TextIOBase
from typing import Iterable
from warnings import warn

import chardet

from .model import OptionStore
from ..abstract import FileHandler

_COMMENT = re.compile(r'[;#]')
BOM = '\ufeff'


def parse(lines: Iterable[str]) -> OptionStore:
    """Build an `OptionStore` from decoded lines, consuming them once.

    Raises:
        DuplicateKeyError: a key appears twice in the same section,
        even across reopened headers.
    """
    ret = OptionStore()
    this_sect = ret.default
    for lineno, raw in enumerate(lines, 1):
        if lineno == 1:
            raw = raw.lstrip(BOM)
        line = _COMMENT.split(raw, 1)[0].strip()
        if not line:
            continue

        if line[0] == '[' and line[-1] == ']':
            name = line[1:-1]
            if not name:
                warn(
                    f'line {lineno}: section header "[]" has an empty name, '
                    'lookups will never reach it.')
            this_sect = ret._open_section(name)
        else:
            key, sep, val = line.partition('=')
            this_sect.add(key.strip(), val if sep else '1', lineno)
    return ret


def readstream(buf: TextIOBase) -> OptionStore:
    """Read a decoded character stream.

    If you have a file path, just use `IniFileParser(path).read()`.
    """
    def lines():
        while i := buf.readline():
            yield i
    return parse(lines())


class IniFileParser(FileHandler[OptionStore]):
    MIN_CONFIDENCE = 0.8
    FALLBACK_ENCODING = 'latin-1'

    def __init__(self, filename: str, encoding: str | None = None):
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @property
    def _open_codec(self) -> str:
        # `utf-8-sig` drops a leading BOM, and reads plain utf-8 as well.
        if self._codec is None or self._codec.lower().replace('_', '-') in (
                'utf-8', 'utf8'):
            return 'utf-8-sig'
        return self._codec

    @classmethod
    def _decode_file(cls, filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (codec is None or codec['encoding'] is None
                or codec['confidence'] < cls.MIN_CONFIDENCE):
            codec = {'encoding': 'utf-8-sig'}
        logging.info(f'Decoding "{filename}" as {codec["encoding"]}.')

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            logging.warning(
                f'"{filename}" is not {codec["encoding"]}, '
                f'decoding as {cls.FALLBACK_ENCODING} instead.')
            buf = raw.decode(cls.FALLBACK_ENCODING)
        return StringIO(buf)

    def read(self) -> OptionStore:
        """Read the file the `IniFileParser` instance points to.

        Raises:
            OSError: the file cannot be opened.
            DuplicateKeyError: see `parse()`.
        """
        try:
            # when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._open_codec) as fp:
                return readstream(fp)
        except UnicodeDecodeError:
            return readstream(self._decode_file(self._fn))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
