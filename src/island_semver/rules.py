# SPDX-License-Identifier: MIT
"""Caller-supplied rules for pre-release and build IDs.

A rule is any callable taking the tuple of IDs. It accepts them by returning
None or True, and rejects them by raising :class:`ExternalRuleViolationError`,
by returning False, or by returning an InvalidVersionError. Rules only ever
run after the built-in grammar checks have passed.

Example:
    >>> from island_semver import IdentifierRules, Version, rules
    >>> no_build = IdentifierRules(build=(rules.must_be_empty(),))
    >>> Version(1, 2, 3, build=["ci"], rules=no_build)
    Traceback (most recent call last):
    ...
    island_semver.errors.ExternalRuleViolationError: the IDs ('ci',) must be empty
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Union

from .errors import ExternalRuleViolationError
from .validate import check_rules

IdentifierRule = Callable[[tuple[str, ...]], None]


@dataclass(frozen=True, slots=True)
class Rule:
    """A named check over a tuple of IDs.

    Attributes:
        description: What the IDs must satisfy (e.g. "must be empty")
        accepts: Predicate returning True when the IDs are acceptable
    """

    description: str
    accepts: Callable[[tuple[str, ...]], bool]

    def __call__(self, ids: tuple[str, ...]) -> None:
        if not self.accepts(ids):
            raise ExternalRuleViolationError(
                f"the IDs {ids!r} {self.description}",
                value=ids,
            )


@dataclass(frozen=True, slots=True)
class IdentifierRules:
    """Extra rules applied to a version's IDs.

    Attributes:
        prerelease: Rules for the pre-release IDs, run in order
        build: Rules for the build IDs, run in order
    """

    prerelease: tuple[IdentifierRule, ...] = ()
    build: tuple[IdentifierRule, ...] = ()

    def __post_init__(self) -> None:
        # accept lists but keep the stored value immutable
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    def check_prerelease(self, ids: Sequence[str]) -> None:
        check_rules(ids, self.prerelease)

    def check_build(self, ids: Sequence[str]) -> None:
        check_rules(ids, self.build)


NO_RULES = IdentifierRules()


def predicate(accepts: Callable[[tuple[str, ...]], bool], description: str) -> Rule:
    """Turn a boolean predicate into a rule."""
    return Rule(description=description, accepts=accepts)


def must_be_empty() -> Rule:
    """Reject any IDs at all."""
    return Rule("must be empty", lambda ids: len(ids) == 0)


def max_length(limit: int) -> Rule:
    """Allow at most limit IDs."""
    return Rule(f"must have at most {limit} ID(s)", lambda ids: len(ids) <= limit)


def no_duplicates() -> Rule:
    """Reject an ID that appears more than once."""
    return Rule("must not repeat an ID", lambda ids: len(set(ids)) == len(ids))


def each_matches(pattern: Union[str, re.Pattern]) -> Rule:
    """Require every ID to fully match the given regular expression."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Rule(
        f"must each match {compiled.pattern!r}",
        lambda ids: all(compiled.fullmatch(i) for i in ids),
    )
