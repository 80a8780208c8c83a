# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

import logging

from .errors import (
    IniError,
    DuplicateKeyError,
    MissingKeyError,
    InvalidFormatError,
    MissingValueError
)
from .ini import DEFAULT_SECTION, OptionStore, Section, IniFileParser, parse
from .reader import IniReader

__all__ = [
    'IniReader', 'OptionStore', 'Section', 'IniFileParser', 'parse',
    'DEFAULT_SECTION',
    'IniError', 'DuplicateKeyError', 'MissingKeyError',
    'InvalidFormatError', 'MissingValueError'
]

__version__ = '0.1.0'

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
