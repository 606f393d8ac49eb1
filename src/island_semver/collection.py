# SPDX-License-Identifier: MIT
"""A sortable list of versions."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from functools import cmp_to_key
from typing import Union, overload

from .compare import compare_versions, less
from .semver import Version


def _owned(value: object) -> Version:
    if not isinstance(value, Version):
        raise TypeError(f"VersionList holds Version objects, not {type(value).__name__}")
    return value.copy()


class VersionList(MutableSequence):
    """A list of versions ordered by SemVer precedence.

    Every version put into the list is copied, so later changes to the
    caller's object do not leak into the list.

    Example:
        >>> from island_semver import parse_version
        >>> versions = VersionList(parse_version(s) for s in ("v2.0.0", "v1.0.0-rc.1", "v1.0.0"))
        >>> versions.sort()
        >>> [str(v) for v in versions]
        ['v1.0.0-rc.1', 'v1.0.0', 'v2.0.0']
    """

    def __init__(self, versions: Iterable[Version] = ()):
        self._items: list[Version] = [_owned(v) for v in versions]

    @overload
    def __getitem__(self, index: int) -> Version: ...

    @overload
    def __getitem__(self, index: slice) -> VersionList: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Version, VersionList]:
        if isinstance(index, slice):
            return VersionList(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [_owned(v) for v in value]
        else:
            self._items[index] = _owned(value)

    def __delitem__(self, index: Union[int, slice]) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"VersionList([{', '.join(str(v) for v in self._items)}])"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def insert(self, index: int, value: Version) -> None:
        self._items.insert(index, _owned(value))

    def less(self, i: int, j: int) -> bool:
        """Return True if the version at i sorts before the one at j."""
        return less(self._items[i], self._items[j])

    def swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def sort(self, *, reverse: bool = False) -> None:
        """Sort in place by precedence; versions of equal precedence keep their order."""
        self._items.sort(key=cmp_to_key(compare_versions), reverse=reverse)
