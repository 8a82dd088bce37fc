# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

import logging

from .errors import (
    IniError,
    IniIOError,
    IniParseError,
    NotAnIniFile,
    FileReadFailure,
    FileOpenFailure,
    FileWriteFailure,
    GlobalKeyNotAllowed,
    SectionNotFound,
    KeyNotFound,
)
from .model import IniSection, IniStore
from .parser import IniFile, IniParser

__all__ = [
    'IniParser', 'IniFile', 'IniStore', 'IniSection',
    'IniError', 'IniIOError', 'IniParseError',
    'NotAnIniFile', 'FileReadFailure', 'FileOpenFailure', 'FileWriteFailure',
    'GlobalKeyNotAllowed', 'SectionNotFound', 'KeyNotFound',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
