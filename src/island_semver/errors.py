# SPDX-License-Identifier: MIT
"""Exceptions raised while building, parsing or validating versions.

Every error kind derives from :class:`InvalidVersionError` so callers can
catch the whole family at once, or a single kind when the distinction
matters (e.g. ``LeadingZeroError`` vs ``InvalidIdentifierError``).
"""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Raised when a version or one of its parts is not valid.

    Attributes:
        message: Human-readable description of the problem
        version: The original version string, when the error came from parsing
        field: Which part was rejected (e.g. "major", "pre-release", "build")
        value: The offending substring or value
    """

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        field: Optional[str] = None,
        value: object = None,
    ):
        self.message = message
        self.version = version
        self.field = field
        self.value = value
        super().__init__(self.message)

    def in_version(self, version: str) -> InvalidVersionError:
        """Return a copy of this error with the original version string attached.

        The copy has the same type so callers can still catch the specific kind.
        """
        return type(self)(
            f"bad semantic version '{version}' - {self.message}",
            version=version,
            field=self.field,
            value=self.value,
        )


class MissingPrefixError(InvalidVersionError):
    """The version string does not start with the required 'v'."""


class MalformedCoreError(InvalidVersionError):
    """The core version cannot be split into major/minor/patch parts."""


class NotANumberError(InvalidVersionError):
    """A major/minor/patch part is not an integer."""


class LeadingZeroError(InvalidVersionError):
    """A numeric part or an all-digit pre-release ID has a leading zero."""


class NegativeVersionNumberError(InvalidVersionError):
    """A major/minor/patch number is below zero."""


class InvalidIdentifierError(InvalidVersionError):
    """A pre-release or build ID is empty or has characters outside [A-Za-z0-9-]."""


class ExternalRuleViolationError(InvalidVersionError):
    """A caller-supplied rule rejected the pre-release or build IDs."""
