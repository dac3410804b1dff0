import pytest

from nexttag.errors import ComputeFailure, UnsupportedVersionType
from nexttag.parser import ParsedVersion as V
from nexttag.schemes import (
    VersionType,
    continuous_bump_type,
    increment,
    next_continuous,
    next_semantic,
    prerelease_name,
)


@pytest.mark.parametrize(
    "version, bump, expected",
    [
        (V(2, 0, 0), "major", V(3, 0, 0)),
        (V(2, 1, 3), "major", V(3, 0, 0)),
        (V(2, 0, 0, ("beta", 1)), "major", V(2, 0, 0)),
        (V(2, 1, 0, ("beta", 1)), "major", V(3, 0, 0)),
        (V(2, 1, 3), "minor", V(2, 2, 0)),
        (V(2, 1, 0, ("beta", 1)), "minor", V(2, 1, 0)),
        (V(2, 1, 3, ("beta", 1)), "minor", V(2, 2, 0)),
        (V(2, 1, 3), "patch", V(2, 1, 4)),
        (V(2, 1, 3, ("beta", 0)), "patch", V(2, 1, 3)),
        (V(2, 1, 3, ("beta", 2)), "premajor", V(3, 0, 0, ("beta", 0))),
        (V(2, 1, 3), "preminor", V(2, 2, 0, ("beta", 0))),
        (V(2, 1, 3), "prepatch", V(2, 1, 4, ("beta", 0))),
        (V(2, 0, 0), "prerelease", V(2, 0, 1, ("beta", 0))),
        (V(2, 0, 1, ("beta", 0)), "prerelease", V(2, 0, 1, ("beta", 1))),
        (V(1, 0, 0, ("beta",)), "prerelease", V(1, 0, 0, ("beta", 0))),
        (V(1, 2, 3, ("rc", 1, "x")), "prerelease", V(1, 2, 3, ("rc", 2, "x"))),
    ],
)
def test_increment(version, bump, expected):
    assert increment(version, VersionType(bump), "beta") == expected


def test_increment_rejects_unknown_bump():
    with pytest.raises(ComputeFailure):
        increment(V(1), "bogus", "beta")


def test_numeric_prerelease_name_is_stored_as_number():
    assert increment(V(1), VersionType.PREMAJOR, "7") == V(2, 0, 0, (7, 0))


def test_prerelease_name_keeps_existing_track():
    assert prerelease_name("rc", V(1, 0, 0, ("alpha", 3))) == "alpha"
    assert prerelease_name("rc", V(1, 0, 0, (7,))) == "7"
    assert prerelease_name("rc", V(1)) == "rc"


@pytest.mark.parametrize(
    "requested, version, expected",
    [
        (VersionType.PRERELEASE, V(3), VersionType.PREMAJOR),
        (VersionType.PRERELEASE, V(3, 0, 0, ("beta", 0)), VersionType.PRERELEASE),
        (VersionType.PREMAJOR, V(3, 0, 0, ("beta", 0)), VersionType.PREMAJOR),
        (VersionType.PATCH, V(3), VersionType.MAJOR),
        (VersionType.PREPATCH, V(3), VersionType.MAJOR),
    ],
)
def test_continuous_bump_type(requested, version, expected):
    assert continuous_bump_type(requested, version) is expected


def test_continuous_only_shows_major():
    assert next_continuous("v", "beta", VersionType.MAJOR, V(4, 2, 1)) == "v5"
    assert next_continuous("", "rc", VersionType.PRERELEASE, V(4)) == "5-rc.0"


def test_semantic_rejects_unsupported_version_type():
    with pytest.raises(UnsupportedVersionType) as excinfo:
        next_semantic("v", "beta", "huge", V(1))
    assert "huge" in str(excinfo.value)
    assert "prerelease" in str(excinfo.value)


@pytest.mark.parametrize("name", ["", "beta_1", "beta..x", "01"])
def test_invalid_prerelease_name_is_rejected(name):
    with pytest.raises(ComputeFailure, match="Invalid prerelease suffix"):
        increment(V(2), VersionType.PRERELEASE, name)


def test_invalid_suffix_is_unused_when_continuing_a_prerelease():
    assert increment(V(2, 0, 1, ("beta", 0)), VersionType.PRERELEASE, "") == V(2, 0, 1, ("beta", 1))


def test_continuous_ignores_minor_and_patch():
    assert next_continuous("v", "beta", VersionType.PRERELEASE, V(4, 2, 1, ("beta", 0))) == "v4-beta.1"
    assert next_continuous("v", "beta", VersionType.MAJOR, V(4, 2, 1, ("beta", 0))) == "v4"
