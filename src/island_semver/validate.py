# SPDX-License-Identifier: MIT
"""Validation of the individual parts of a semantic version.

Pre-release and build IDs share the same character grammar
(``[A-Za-z0-9-]+``); pre-release IDs made only of digits must also have no
leading zero. Build IDs have no such restriction, so ``+01`` is fine while
``-01`` is not.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from .errors import (
    ExternalRuleViolationError,
    InvalidIdentifierError,
    InvalidVersionError,
    LeadingZeroError,
    NegativeVersionNumberError,
    NotANumberError,
)

logger = logging.getLogger(__name__)

GOOD_ID_DESC = "a non-empty string of letters, digits or hyphens"
GOOD_NUMBER_DESC = "greater than or equal to zero"

IDENTIFIER_PATTERN = re.compile(r"[-0-9A-Za-z]+")
NUMERIC_PATTERN = re.compile(r"[0-9]+")
WELL_FORMED_NUMERIC_PATTERN = re.compile(r"0|[1-9][0-9]*")


def is_well_formed_numeric(identifier: str) -> bool:
    """Return True if the ID is all digits with no disallowed leading zero."""
    return WELL_FORMED_NUMERIC_PATTERN.fullmatch(identifier) is not None


def check_build_id(identifier: str) -> None:
    """Check a single build ID.

    Raises:
        InvalidIdentifierError: If the ID is empty or has a bad character
    """
    if not isinstance(identifier, str) or IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise InvalidIdentifierError(
            f"the build ID: '{identifier}' must be {GOOD_ID_DESC}",
            field="build",
            value=identifier,
        )


def check_prerelease_id(identifier: str) -> None:
    """Check a single pre-release ID.

    Raises:
        LeadingZeroError: If the ID is all digits and has a leading zero
        InvalidIdentifierError: If the ID is empty or has a bad character
    """
    if isinstance(identifier, str) and NUMERIC_PATTERN.fullmatch(identifier):
        if not is_well_formed_numeric(identifier):
            raise LeadingZeroError(
                f"the pre-release ID: '{identifier}' must have no leading zero"
                " if it's all numeric",
                field="pre-release",
                value=identifier,
            )
        return
    if not isinstance(identifier, str) or IDENTIFIER_PATTERN.fullmatch(identifier) is None:
        raise InvalidIdentifierError(
            f"the pre-release ID: '{identifier}' must be {GOOD_ID_DESC}",
            field="pre-release",
            value=identifier,
        )


def check_all_build_ids(identifiers: Iterable[str]) -> None:
    """Check every build ID, stopping at the first bad one."""
    for identifier in identifiers:
        check_build_id(identifier)


def check_all_prerelease_ids(identifiers: Iterable[str]) -> None:
    """Check every pre-release ID, stopping at the first bad one."""
    for identifier in identifiers:
        check_prerelease_id(identifier)


def check_numeric_field(value: int, name: str) -> None:
    """Check a major, minor or patch number.

    Raises:
        NotANumberError: If the value is not an int
        NegativeVersionNumberError: If the value is below zero
    """
    # bool is an int subclass but True.0.0 is not a version
    if not isinstance(value, int) or isinstance(value, bool):
        raise NotANumberError(
            f"bad {name} version: {value!r} - it is not a number",
            field=name,
            value=value,
        )
    if value < 0:
        raise NegativeVersionNumberError(
            f"bad {name} version: {value} - it must be {GOOD_NUMBER_DESC}",
            field=name,
            value=value,
        )


def check_rules(identifiers: Sequence[str], rules: Iterable) -> None:
    """Run caller-supplied rules over the IDs in order.

    A rule rejects the IDs by raising, by returning False, or by returning
    an InvalidVersionError. The first rejection stops the run and a raised
    error propagates as-is.
    """
    ids = tuple(identifiers)
    for rule in rules:
        try:
            result = rule(ids)
        except Exception as err:
            logger.debug("rule %r rejected %r: %s", rule, ids, err)
            raise
        if isinstance(result, InvalidVersionError):
            logger.debug("rule %r rejected %r: %s", rule, ids, result)
            raise result
        if result is False:
            logger.debug("rule %r rejected %r", rule, ids)
            raise ExternalRuleViolationError(
                f"the IDs {ids!r} were rejected by {rule!r}",
                value=ids,
            )
