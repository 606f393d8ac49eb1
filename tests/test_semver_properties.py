# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, formatting and precedence.

These tests verify that:
- Formatting then parsing gives back an equal version
- Precedence is irreflexive, antisymmetric and transitive
- Build metadata never changes precedence
- version_key and VersionList.sort agree with less
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from island_semver import (
    Version,
    VersionList,
    compare_versions,
    less,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

build_ids = st.from_regex(r"[0-9A-Za-z-]{1,6}", fullmatch=True)

# All-digit pre-release IDs must not have a leading zero
prerelease_ids = st.one_of(
    st.integers(0, 30).map(str),
    st.from_regex(r"[0-9A-Za-z-]{1,6}", fullmatch=True).filter(
        lambda s: not (s.isdigit() and len(s) > 1 and s.startswith("0"))
    ),
    st.sampled_from(["alpha", "beta", "rc", "a", "A", "-"]),
)


@st.composite
def versions(draw, max_number: int = 3):
    """Generate a valid Version; small numbers make ties likely."""
    return Version(
        draw(st.integers(0, max_number)),
        draw(st.integers(0, max_number)),
        draw(st.integers(0, max_number)),
        draw(st.lists(prerelease_ids, max_size=4)),
        draw(st.lists(build_ids, max_size=3)),
    )


# =============================================================================
# Properties
# =============================================================================


@given(versions(max_number=10_000))
def test_format_then_parse_round_trips(v):
    assert parse_version(str(v)) == v


@given(versions())
def test_less_is_irreflexive(v):
    assert not less(v, v)
    assert not less(v, v.copy())


@given(versions(), versions())
def test_less_is_antisymmetric(a, b):
    assert not (less(a, b) and less(b, a))


@given(versions(), versions(), versions())
@settings(max_examples=300)
def test_less_is_transitive(a, b, c):
    if less(a, b) and less(b, c):
        assert less(a, c)


@given(versions(), versions(), st.lists(build_ids, max_size=3))
def test_build_metadata_never_changes_precedence(a, b, new_build):
    rebuilt = a.copy()
    rebuilt.set_build(new_build)
    assert less(rebuilt, b) == less(a, b)
    assert less(b, rebuilt) == less(b, a)


@given(versions(), versions())
def test_version_key_agrees_with_less(a, b):
    assert (version_key(a) < version_key(b)) == less(a, b)
    assert (version_key(a) == version_key(b)) == (compare_versions(a, b) == 0)


@given(st.lists(versions(), max_size=12))
def test_sorted_list_is_non_decreasing(items):
    ordered = VersionList(items)
    ordered.sort()
    assert len(ordered) == len(items)
    for i in range(len(ordered) - 1):
        assert not ordered.less(i + 1, i)


@given(versions())
def test_increment_major_clears_prerelease_keeps_build(v):
    bumped = v.copy()
    bumped.increment_major()
    assert (bumped.major, bumped.minor, bumped.patch) == (v.major + 1, 0, 0)
    assert bumped.prerelease == ()
    assert bumped.build == v.build
    assert less(v, bumped)
