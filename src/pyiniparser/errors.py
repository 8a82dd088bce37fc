# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:08
# @Author : Kariko Lin


class IniError(Exception):
    """Base class for everything raised by `pyiniparser`."""


class NotAnIniFile(IniError, ValueError):
    """The source path lacks the `.ini` suffix."""

    def __init__(self, path: str) -> None:
        super().__init__(f'this is not an ini file: {path}')
        self.path = path


class IniIOError(IniError):
    """Wraps an `OSError` raised while touching the disk.

    The original error stays reachable through `__cause__`.
    """
    phase = 'accessing'

    def __init__(self, path: str) -> None:
        super().__init__(f'error in {self.phase} the file: {path}')
        self.path = path


class FileReadFailure(IniIOError):
    phase = 'reading'


class FileOpenFailure(IniIOError):
    phase = 'opening'


class FileWriteFailure(IniIOError):
    phase = 'writing to'


class IniParseError(IniError):
    """Raised when INI text cannot be loaded."""


class GlobalKeyNotAllowed(IniParseError):
    """A key-value pair shows up before any section header."""

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(
            f"global keys aren't supported (line {lineno}: {line!r})")
        self.lineno = lineno
        self.line = line


class SectionNotFound(IniError, LookupError):
    def __init__(self, section: str) -> None:
        super().__init__(f'section not found: [{section}]')
        self.section = section


class KeyNotFound(IniError, LookupError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f'key not found: [{section}] {key}')
        self.section = section
        self.key = key
