# SPDX-License-Identifier: MIT
"""Semantic version values for Island packages.

This package provides a SemVer 2.0.0 version type: parsing 'v'-prefixed
version strings, validating every part, formatting back to canonical text
and ordering by SemVer precedence.

Example:
    >>> from island_semver import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_valid_semver("v1.0.0")
    True
    >>>
    >>> compare_versions("v1.0.0-beta.2", "v1.0.0-beta.11")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ExternalRuleViolationError,
    InvalidIdentifierError,
    InvalidVersionError,
    LeadingZeroError,
    MalformedCoreError,
    MissingPrefixError,
    NegativeVersionNumberError,
    NotANumberError,
)
from .validate import (
    check_all_build_ids,
    check_all_prerelease_ids,
    check_build_id,
    check_numeric_field,
    check_prerelease_id,
    check_rules,
)
from . import rules
from .rules import IdentifierRules, Rule
from .semver import (
    Version,
    format_version,
    increment_major,
    increment_minor,
    increment_patch,
    is_valid_semver,
    must_parse,
    parse_version,
    parse_version_strict,
)
from .compare import (
    compare_versions,
    equals,
    less,
    less_prerelease,
    version_key,
)
from .collection import VersionList

__all__ = [
    # Version values
    "Version",
    "VersionList",
    "increment_major",
    "increment_minor",
    "increment_patch",
    # Parsing and formatting
    "parse_version",
    "parse_version_strict",
    "must_parse",
    "format_version",
    "is_valid_semver",
    # Comparison
    "less",
    "less_prerelease",
    "equals",
    "compare_versions",
    "version_key",
    # Validation
    "check_build_id",
    "check_prerelease_id",
    "check_all_build_ids",
    "check_all_prerelease_ids",
    "check_numeric_field",
    "check_rules",
    "IdentifierRules",
    "Rule",
    "rules",
    # Errors
    "InvalidVersionError",
    "MissingPrefixError",
    "MalformedCoreError",
    "NotANumberError",
    "LeadingZeroError",
    "NegativeVersionNumberError",
    "InvalidIdentifierError",
    "ExternalRuleViolationError",
]
