# SPDX-License-Identifier: MIT
"""Semantic version values, parsing and formatting.

Versions are written ``v<major>.<minor>.<patch>`` with optional pre-release
and build IDs:
- Pre-release: -alpha, -alpha.1, -beta.2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Parsing splits right to left: build metadata at the first '+', then the
pre-release at the first '-' of what is left, then the core on '.'.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from . import compare
from .errors import (
    InvalidVersionError,
    LeadingZeroError,
    MalformedCoreError,
    MissingPrefixError,
    NotANumberError,
)
from .rules import NO_RULES, IdentifierRules
from .validate import (
    check_all_build_ids,
    check_all_prerelease_ids,
    check_numeric_field,
)

logger = logging.getLogger(__name__)

PREFIX = "v"

_CORE_FIELDS = ("major", "minor", "patch")


def _as_ids(ids: Iterable[str], name: str) -> tuple[str, ...]:
    if isinstance(ids, str):
        raise TypeError(f"{name} IDs must be a sequence of strings, not a single string")
    return tuple(ids)


class Version:
    """A semantic version.

    The numbers and IDs are read through properties; the only ways to change
    a version are the increment methods and the validated setters, so every
    live instance satisfies the grammar.

    Equality (``==``) is strict and includes build metadata, while ordering
    (``<``, ``<=``, ...) follows SemVer precedence and ignores it. A version
    is mutable and therefore unhashable.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release IDs (e.g. ("alpha", "1"))
        build: Build metadata IDs (e.g. ("build", "456"))
        is_set: False only for the placeholder returned by :meth:`unset`
    """

    __slots__ = ("_major", "_minor", "_patch", "_prerelease", "_build", "_rules", "_is_set")

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        prerelease: Iterable[str] = (),
        build: Iterable[str] = (),
        *,
        rules: Optional[IdentifierRules] = None,
    ):
        prerelease = _as_ids(prerelease, "pre-release")
        build = _as_ids(build, "build")
        rules = rules if rules is not None else NO_RULES

        check_all_build_ids(build)
        check_all_prerelease_ids(prerelease)
        for name, value in zip(_CORE_FIELDS, (major, minor, patch)):
            check_numeric_field(value, name)
        rules.check_build(build)
        rules.check_prerelease(prerelease)

        self._major = major
        self._minor = minor
        self._patch = patch
        self._prerelease = prerelease
        self._build = build
        self._rules = rules
        self._is_set = True

    @classmethod
    def unset(cls) -> Version:
        """Return a placeholder version that formats as an empty string."""
        version = cls.__new__(cls)
        version._major = version._minor = version._patch = 0
        version._prerelease = ()
        version._build = ()
        version._rules = NO_RULES
        version._is_set = False
        return version

    @classmethod
    def must(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: Iterable[str] = (),
        build: Iterable[str] = (),
        *,
        rules: Optional[IdentifierRules] = None,
    ) -> Version:
        """Build a version whose parts are known to be valid.

        For module level constants; an invalid part is a bug and is reported
        as a ValueError.
        """
        try:
            return cls(major, minor, patch, prerelease, build, rules=rules)
        except InvalidVersionError as err:
            raise ValueError(f"invalid version parts: {err.message}") from err

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def prerelease(self) -> tuple[str, ...]:
        return self._prerelease

    @property
    def build(self) -> tuple[str, ...]:
        return self._build

    @property
    def rules(self) -> IdentifierRules:
        return self._rules

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self._prerelease)

    @property
    def base_version(self) -> str:
        """Return the core version without pre-release or build metadata."""
        return f"{PREFIX}{self._major}.{self._minor}.{self._patch}"

    def set_prerelease(self, ids: Iterable[str]) -> None:
        """Replace the pre-release IDs.

        The IDs are checked against the grammar and this version's rules
        first; if any check fails the version is left as it was.
        """
        ids = _as_ids(ids, "pre-release")
        check_all_prerelease_ids(ids)
        self._rules.check_prerelease(ids)
        self._prerelease = ids
        self._is_set = True

    def set_build(self, ids: Iterable[str]) -> None:
        """Replace the build IDs, validating them first."""
        ids = _as_ids(ids, "build")
        check_all_build_ids(ids)
        self._rules.check_build(ids)
        self._build = ids
        self._is_set = True

    def clear_prerelease(self) -> None:
        """Remove the pre-release IDs, if this version's rules allow it."""
        self._rules.check_prerelease(())
        self._prerelease = ()

    def clear_build(self) -> None:
        """Remove the build IDs, if this version's rules allow it."""
        self._rules.check_build(())
        self._build = ()

    def increment_major(self) -> None:
        """Bump the major number, zeroing minor and patch.

        Pre-release IDs are cleared, build IDs are kept.
        """
        self._rules.check_prerelease(())
        self._major += 1
        self._minor = 0
        self._patch = 0
        self._prerelease = ()
        self._is_set = True

    def increment_minor(self) -> None:
        """Bump the minor number, zeroing patch. Build IDs are kept."""
        self._rules.check_prerelease(())
        self._minor += 1
        self._patch = 0
        self._prerelease = ()
        self._is_set = True

    def increment_patch(self) -> None:
        """Bump the patch number. Pre-release IDs are cleared, build IDs are kept."""
        self._rules.check_prerelease(())
        self._patch += 1
        self._prerelease = ()
        self._is_set = True

    def copy(self) -> Version:
        """Return an independent copy of this version."""
        other = type(self).__new__(type(self))
        other._major = self._major
        other._minor = self._minor
        other._patch = self._patch
        # tuples cannot be changed through either copy
        other._prerelease = tuple(self._prerelease)
        other._build = tuple(self._build)
        other._rules = self._rules
        other._is_set = self._is_set
        return other

    def __copy__(self) -> Version:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Version:
        return self.copy()

    def __str__(self) -> str:
        """Return the canonical string form, or "" for an unset version."""
        if not self._is_set:
            return ""
        version = self.base_version
        if self._prerelease:
            version += "-" + ".".join(self._prerelease)
        if self._build:
            version += "+" + ".".join(self._build)
        return version

    def __repr__(self) -> str:
        if not self._is_set:
            return "Version.unset()"
        return (
            f"Version(major={self._major}, minor={self._minor}, patch={self._patch}, "
            f"prerelease={self._prerelease!r}, build={self._build!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare.equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare.less(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare.less(other, self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not compare.less(other, self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not compare.less(self, other)


def _to_number(text: str, name: str) -> int:
    """Convert one core part to a version number."""
    if len(text) > 1 and text.startswith("0"):
        raise LeadingZeroError(
            f"bad {name} version: {text} - it has a leading 0",
            field=name,
            value=text,
        )
    # int() would also take "1_0", " 1" and non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise NotANumberError(
            f"bad {name} version: {text} - it is not a number",
            field=name,
            value=text,
        )
    number = int(text)
    check_numeric_field(number, name)
    return number


def _parse(text: str, original: str, rules: Optional[IdentifierRules]) -> Version:
    try:
        rest, plus, build_text = text.partition("+")
        build = tuple(build_text.split(".")) if plus else ()
        check_all_build_ids(build)

        core, dash, prerelease_text = rest.partition("-")
        prerelease = tuple(prerelease_text.split(".")) if dash else ()
        check_all_prerelease_ids(prerelease)

        parts = core.split(".")
        if len(parts) != 3:
            raise MalformedCoreError(
                "it cannot be split into major/minor/patch parts",
                field="core",
                value=core,
            )
        major, minor, patch = (_to_number(part, name) for part, name in zip(parts, _CORE_FIELDS))
    except InvalidVersionError as err:
        logger.debug("rejected version %r: %s", original, err.message)
        raise err.in_version(original) from err

    # rule violations are the caller's own errors and are raised unchanged
    return Version(major, minor, patch, prerelease, build, rules=rules)


def _require_str(version_string: object) -> str:
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            f"Version must be a string, got {type(version_string).__name__}",
            value=version_string,
        )
    return version_string


def parse_version(version_string: str, *, rules: Optional[IdentifierRules] = None) -> Version:
    """Parse a 'v'-prefixed semantic version string into a Version.

    Args:
        version_string: A string like ``v1.2.3-rc.1+build.456``
        rules: Extra rules for the pre-release and build IDs

    Returns:
        A Version object with parsed components

    Raises:
        MissingPrefixError: If the string does not start with 'v'
        InvalidVersionError: Or a subclass, on the first part that is not valid
        ExternalRuleViolationError: If one of the rules rejects the IDs

    Examples:
        >>> parse_version("v1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("v2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build=('build', '456'))
    """
    version_string = _require_str(version_string)
    if not version_string.startswith(PREFIX):
        logger.debug("rejected version %r: no '%s' prefix", version_string, PREFIX)
        raise MissingPrefixError(
            f"bad semantic version '{version_string}' - it does not start with a '{PREFIX}'",
            version=version_string,
            field="prefix",
            value=version_string,
        )
    return _parse(version_string[len(PREFIX):], version_string, rules)


def parse_version_strict(version_string: str, *, rules: Optional[IdentifierRules] = None) -> Version:
    """Parse a semantic version string that has no 'v' prefix.

    Examples:
        >>> str(parse_version_strict("1.0.0-alpha.1"))
        'v1.0.0-alpha.1'
    """
    version_string = _require_str(version_string)
    return _parse(version_string, version_string, rules)


def must_parse(version_string: str, *, rules: Optional[IdentifierRules] = None) -> Version:
    """Parse a version string that is known to be valid.

    For module level constants; a bad string is a bug and is reported as a
    ValueError chained to the parse error.
    """
    try:
        return parse_version(version_string, rules=rules)
    except InvalidVersionError as err:
        raise ValueError(f"invalid version constant: {err.message}") from err


def format_version(version: Version) -> str:
    """Return the canonical string form of a version."""
    return str(version)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid 'v'-prefixed semantic version.

    Examples:
        >>> is_valid_semver("v1.0.0")
        True
        >>> is_valid_semver("v1.0")
        False
        >>> is_valid_semver("1.0.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def increment_major(version: Version) -> None:
    """Call Version.increment_major on the version."""
    version.increment_major()


def increment_minor(version: Version) -> None:
    """Call Version.increment_minor on the version."""
    version.increment_minor()


def increment_patch(version: Version) -> None:
    """Call Version.increment_patch on the version."""
    version.increment_patch()
