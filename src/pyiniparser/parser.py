# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line-oriented INI reading and canonical writing.

We do parsing based on the following consumption:
1. Every pair belongs to a section, i.e. NO global keys.
2. The key-value delimiter is just the first `=`.
3. Comments (`;` or `#`) are only valid at the beginning of a line.

Writing never reproduces comments. What comes out is the *canonical form*:
sections and keys sorted, one `key = value` per line.
"""

import logging
from io import TextIOBase
from os import PathLike, fspath

import chardet

from .abstract import FileHandler
from .errors import (
    FileOpenFailure,
    FileReadFailure,
    FileWriteFailure,
    GlobalKeyNotAllowed,
    NotAnIniFile,
)
from .model import IniStore

logger = logging.getLogger(__name__)

INI_SUFFIX = '.ini'
COMMENT_PREFIXES = (';', '#')


class IniFile(FileHandler[str]):
    """Raw INI text on disk."""

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    def _decode(self, raw: bytes) -> str:
        try:
            # `utf-8-sig` also eats the BOM some editors leave behind.
            return raw.decode(self._codec or 'utf-8-sig')
        except (UnicodeDecodeError, LookupError):
            pass

        codec = chardet.detect(raw)
        encoding = codec['encoding']
        if encoding is None or codec['confidence'] < 0.8:
            encoding = 'latin-1'
        logger.warning('"%s" is not %s, decoding as %s.',
                       self._fn, self._codec or 'utf-8', encoding)
        # fallbacks
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return raw.decode('latin-1')

    def read(self) -> str:
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            raise FileReadFailure(self._fn) from e
        return self._decode(raw)

    def write(self, instance: str) -> None:
        # encode before `open()` truncates the target.
        try:
            data = instance.encode(self._codec or 'utf-8')
        except (UnicodeEncodeError, LookupError) as e:
            raise FileWriteFailure(self._fn) from e
        try:
            fp = open(self._fn, 'wb')
        except OSError as e:
            raise FileOpenFailure(self._fn) from e
        try:
            with fp:
                fp.write(data)
        except OSError as e:
            raise FileWriteFailure(self._fn) from e

    def __str__(self) -> str:
        return super().__str__() + f" ({self._codec or 'auto'})"


class IniParser:
    """Owns one `IniStore` and fills it from INI text.

    Loads are *atomic*: the input is parsed into a staging dict first and
    committed only if the whole input is fine. A failed load leaves
    the store as it was. Sections from earlier loads are kept, unless
    a later load declares the same title again, which replaces them.
    """

    def __init__(self, encoding: str | None = None) -> None:
        self._codec = encoding
        self._store = IniStore()

    @property
    def sections(self) -> IniStore:
        return self._store

    @staticmethod
    def parse(text: str) -> dict[str, dict[str, str]]:
        """Tokenize INI text into `{title: {key: value}}`.

        Raises `GlobalKeyNotAllowed` on a pair before any header.
        Lines that are neither header nor pair are skipped.
        """
        ret: dict[str, dict[str, str]] = {}
        title: str | None = None
        this_sect: dict[str, str] = {}
        for lineno, line in enumerate(text.split('\n'), 1):
            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue
            if len(line) >= 2 and line[0] == '[' and line[-1] == ']':
                if title is not None:
                    ret[title] = this_sect
                title, this_sect = line[1:-1].strip(), {}
            elif '=' in line:
                if title is None:
                    raise GlobalKeyNotAllowed(lineno, line)
                key, val = line.split('=', 1)
                this_sect[key.strip()] = val.strip()
            else:
                logger.debug('line %d skipped: %r', lineno, line)
        if title is not None:
            ret[title] = this_sect
        return ret

    def load_from_string(self, text: str) -> None:
        staged = self.parse(text)
        self._store.replace_sections(staged.items())

    def load_from_stream(self, buf: TextIOBase) -> None:
        """Read a decoded text stream to the end."""
        self.load_from_string(buf.read())

    def load_from_file(self, path: str | PathLike[str]) -> None:
        """Read an `.ini` file, see `load_from_string()`.

        Raises:
            NotAnIniFile: `path` doesn't end with `.ini`.
            FileReadFailure: the file is missing or unreadable.
            GlobalKeyNotAllowed: as `load_from_string()` does.
        """
        path = fspath(path)
        if not path.endswith(INI_SUFFIX):
            raise NotAnIniFile(path)
        self.load_from_string(IniFile(path, self._codec).read())
        logger.info('loaded "%s", %d section(s) in total.',
                    path, len(self._store))

    def get_section_names(self) -> list[str]:
        return self._store.names()

    def get_sections(self) -> dict[str, dict[str, str]]:
        """Snapshot of the whole store. Changing it won't touch the parser."""
        return self._store.to_dict()

    def get(self, section: str, key: str) -> tuple[str, bool]:
        return self._store.find_key(section, key)

    def set(self, section: str, key: str, value: str) -> None:
        """Update an existing key.

        Raises `SectionNotFound` or `KeyNotFound`; nothing is created.
        """
        self._store.set_value(section, key, value)

    def to_text(self) -> str:
        ret = ''
        for title in self._store.names():
            section = self._store[title]
            ret += f'[{title}]\n'
            for key in section.keys_sorted():
                ret += f'{key} = {section[key]}\n'
        return ret

    def save_to_file(self, path: str | PathLike[str]) -> None:
        """Write the canonical form to `path`, any suffix allowed.

        Raises `FileOpenFailure` or `FileWriteFailure`.
        """
        IniFile(path, self._codec).write(self.to_text())
        logger.info('saved %d section(s) to "%s".',
                    len(self._store), fspath(path))

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f'IniParser(encoding={self._codec!r}, {self._store!r})'
