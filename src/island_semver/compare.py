# SPDX-License-Identifier: MIT
"""Version comparison following the SemVer 2.0.0 precedence rules.

Pre-release ordering: a pre-release sorts before its release, numeric IDs
compare as integers and sort before alphanumeric IDs, alphanumeric IDs
compare by code point, and a shorter list of otherwise equal IDs sorts
first. Build metadata is ignored for precedence but not for equality.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .validate import is_well_formed_numeric

if TYPE_CHECKING:
    from .semver import Version


def less_prerelease(a: Version, b: Version) -> bool:
    """Return True if a's pre-release IDs sort before b's.

    Examples:
        1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta
        < 1.0.0-beta.2 < 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0
    """
    ids_a = a.prerelease
    ids_b = b.prerelease

    # Pre-release < release
    if ids_a and not ids_b:
        return True
    if not ids_a and ids_b:
        return False

    for id_a, id_b in zip(ids_a, ids_b):
        num_a = is_well_formed_numeric(id_a)
        num_b = is_well_formed_numeric(id_b)

        if num_a and num_b:
            n_a, n_b = int(id_a), int(id_b)
            if n_a != n_b:
                return n_a < n_b
        elif num_a:
            # Numeric < alphanumeric per SemVer
            return True
        elif num_b:
            return False
        elif id_a != id_b:
            return id_a < id_b

    # All compared IDs equal - the shorter list has lower precedence
    return len(ids_a) < len(ids_b)


def less(a: Version, b: Version) -> bool:
    """Return True if a has lower precedence than b."""
    for attr in ("major", "minor", "patch"):
        val_a = getattr(a, attr)
        val_b = getattr(b, attr)
        if val_a != val_b:
            return val_a < val_b

    return less_prerelease(a, b)


def equals(a: Version, b: Version) -> bool:
    """Return True if the versions are identical, build IDs included."""
    return (
        a.major == b.major
        and a.minor == b.minor
        and a.patch == b.patch
        and tuple(a.prerelease) == tuple(b.prerelease)
        and tuple(a.build) == tuple(b.build)
    )


def _coerce(version: Union[str, Version]) -> Version:
    if isinstance(version, str):
        from .semver import parse_version

        return parse_version(version)
    return version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if neither has precedence over the other
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Build metadata is ignored, so ``v1.0.0+a`` and ``v1.0.0+b`` compare
        as 0 even though they are not ``==``.

    Examples:
        >>> compare_versions("v1.0.0", "v2.0.0")
        -1
        >>> compare_versions("v1.0.0-beta.11", "v1.0.0-beta.2")
        1
        >>> compare_versions("v1.0.0-rc.1", "v1.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if less(v1, v2):
        return -1
    if less(v2, v1):
        return 1
    return 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, consistent with :func:`less`.

    Examples:
        >>> sorted(["v1.0.0", "v2.0.0", "v1.0.0-alpha"], key=version_key)
        ['v1.0.0-alpha', 'v1.0.0', 'v2.0.0']
    """
    v = _coerce(version)

    # Release becomes (1,) to sort after every pre-release (0, ...).
    # Numeric IDs are (0, n, "") and alphanumeric ones (1, 0, s), and tuple
    # comparison already puts a shorter prefix first.
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease:
            if is_well_formed_numeric(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)
