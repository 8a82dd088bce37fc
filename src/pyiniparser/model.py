# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure: sections of plain `str: str` pairs.

No global pairs, no inheritance, no `+=`. Both levels are read-only
`Mapping`s to the user; values are updated through `IniStore.set_value()`
so that a key or a section is never created by accident.
"""

from collections.abc import Iterable, Iterator, Mapping

from .errors import KeyNotFound, SectionNotFound


class IniSection(Mapping[str, str]):
    """A view over the pairs of one section.

    The view shares its dict with the owning `IniStore`,
    thus a later `set_value()` is visible here as well.
    """

    def __init__(self, section_name: str, /, this_dict: dict[str, str]):
        self._name = section_name
        self._data = this_dict

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def keys_sorted(self) -> list[str]:
        return sorted(self._data)

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniStore(Mapping[str, IniSection]):
    """INI document representation, supporting sections like:

        ```ini
        [section]
        key233 = val666
        ```

    An empty section is still a section: `'x' in store` tells it apart
    from a missing one, whatever its contents.
    """

    def __init__(self) -> None:
        self.__raw_dicts: dict[str, dict[str, str]] = {}

    def __getitem__(self, key: str) -> IniSection:
        if key not in self:
            raise KeyError(key)
        return IniSection(key, self.__raw_dicts[key])

    def __contains__(self, key: object) -> bool:
        return key in self.__raw_dicts

    def __len__(self) -> int:
        return len(self.__raw_dicts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw_dicts)

    def __repr__(self) -> str:
        return f'IniStore({self.__raw_dicts!r})'

    def names(self) -> list[str]:
        """Section titles in lexicographical order."""
        return sorted(self.__raw_dicts)

    def to_dict(self) -> dict[str, dict[str, str]]:
        """A deep snapshot, detached from the store."""
        return {k: v.copy() for k, v in self.__raw_dicts.items()}

    def find_key(self, section: str, key: str) -> tuple[str, bool]:
        """Returns `(value, True)` if found, otherwise `("", False)`.

        A missing section and a missing key look the same here.
        """
        pairs = self.__raw_dicts.get(section)
        if pairs is None or key not in pairs:
            return '', False
        return pairs[key], True

    def set_value(self, section: str, key: str, value: str) -> None:
        """Update an *existing* key. Never creates keys or sections."""
        if section not in self.__raw_dicts:
            raise SectionNotFound(section)
        if key not in self.__raw_dicts[section]:
            raise KeyNotFound(section, key)
        self.__raw_dicts[section][key] = value

    def replace_sections(
        self, sections: Iterable[tuple[str, dict[str, str]]]
    ) -> None:
        """Put whole sections in, dropping any earlier one of the same title.

        Pairs are copied; no ptr to external dicts is kept.
        """
        for title, pairs in sections:
            self.__raw_dicts[title] = pairs.copy()
