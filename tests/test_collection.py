# SPDX-License-Identifier: MIT
"""Unit tests for VersionList."""

import pytest

from island_semver import Version, VersionList, parse_version


def make_list(*version_strings):
    return VersionList(parse_version(s) for s in version_strings)


class TestVersionList:
    def test_len_and_index(self):
        versions = make_list("v1.0.0", "v2.0.0")
        assert len(versions) == 2
        assert str(versions[1]) == "v2.0.0"
        assert str(versions[-1]) == "v2.0.0"

    def test_less(self):
        versions = make_list("v1.0.0-rc.1", "v1.0.0")
        assert versions.less(0, 1) is True
        assert versions.less(1, 0) is False

    def test_swap(self):
        versions = make_list("v1.0.0", "v2.0.0", "v3.0.0")
        versions.swap(0, 2)
        assert [str(v) for v in versions] == ["v3.0.0", "v2.0.0", "v1.0.0"]

    def test_sort(self):
        versions = make_list(
            "v1.0.0",
            "v1.0.0-beta.11",
            "v1.0.0-alpha.beta",
            "v1.0.0-beta.2",
            "v1.0.0-alpha",
            "v1.0.0-rc.1",
            "v1.0.0-beta",
            "v1.0.0-alpha.1",
        )
        versions.sort()
        assert [str(v) for v in versions] == [
            "v1.0.0-alpha",
            "v1.0.0-alpha.1",
            "v1.0.0-alpha.beta",
            "v1.0.0-beta",
            "v1.0.0-beta.2",
            "v1.0.0-beta.11",
            "v1.0.0-rc.1",
            "v1.0.0",
        ]

    def test_sort_reverse(self):
        versions = make_list("v1.0.0", "v3.0.0", "v2.0.0")
        versions.sort(reverse=True)
        assert [str(v) for v in versions] == ["v3.0.0", "v2.0.0", "v1.0.0"]

    def test_sort_is_stable_for_build_metadata(self):
        versions = make_list("v1.0.0+b", "v0.9.0", "v1.0.0+a")
        versions.sort()
        assert [str(v) for v in versions] == ["v0.9.0", "v1.0.0+b", "v1.0.0+a"]

    def test_owns_its_versions(self):
        v = parse_version("v1.0.0")
        versions = VersionList([v])
        versions.append(v)
        v.increment_major()
        assert [str(x) for x in versions] == ["v1.0.0", "v1.0.0"]

    def test_mutable_sequence_methods(self):
        versions = make_list("v1.0.0")
        versions.insert(0, Version(0, 1, 0))
        versions.extend([Version(2, 0, 0)])
        versions[1] = Version(1, 5, 0)
        del versions[0]
        assert [str(v) for v in versions] == ["v1.5.0", "v2.0.0"]
        assert Version(2, 0, 0) in versions
        assert versions.index(Version(2, 0, 0)) == 1

    def test_slice(self):
        versions = make_list("v1.0.0", "v2.0.0", "v3.0.0")
        head = versions[:2]
        assert isinstance(head, VersionList)
        assert head == make_list("v1.0.0", "v2.0.0")

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            VersionList(["v1.0.0"])  # type: ignore

    def test_repr(self):
        assert repr(make_list("v1.0.0", "v1.1.0-rc")) == "VersionList([v1.0.0, v1.1.0-rc])"
