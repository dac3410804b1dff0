"""Continuous and semantic tagging schemes.

Both schemes share one increment primitive that follows the usual
semantic-version rules. The ``prerelease`` bump on a final release bumps the
patch component before starting a ``[name, 0]`` prerelease, so ``2.0.0``
becomes ``2.0.1-beta.0``.
"""

from enum import Enum

import semver

from nexttag.errors import ComputeFailure, UnsupportedVersionType
from nexttag.parser import ParsedVersion, format_continuous, format_semantic, identifier


class Scheme(Enum):
    CONTINUOUS = "continuous"
    SEMANTIC = "semantic"


class VersionType(Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    @classmethod
    def from_value(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedVersionType(value, [member.value for member in cls]) from None


SEMANTIC_TYPES = tuple(VersionType)


def prerelease_name(suffix, version):
    """Name for the next prerelease: keep the existing track, else use ``suffix``."""
    if version.is_prerelease:
        return str(version.prerelease[0])
    return suffix


def _next_build(prerelease):
    parts = list(prerelease)
    for index in range(len(parts) - 1, -1, -1):
        if isinstance(parts[index], int):
            parts[index] += 1
            return tuple(parts)
    return tuple(parts) + (0,)


def start_prerelease(name):
    """First prerelease of the ``name`` track, ``(name, 0)``.

    Raises:
        ComputeFailure: ``name`` is not a valid prerelease identifier.
    """
    try:
        semver.Version.parse(f"0.0.0-{name}.0")
    except ValueError:
        raise ComputeFailure(f"Invalid prerelease suffix: '{name}'") from None
    return (identifier(name), 0)


def increment(version, bump, name):
    """Return ``version`` bumped by ``bump``, using ``name`` for new prereleases."""
    starts_prerelease = bump in (
        VersionType.PREMAJOR, VersionType.PREMINOR, VersionType.PREPATCH
    ) or (bump is VersionType.PRERELEASE and not version.is_prerelease)
    start = start_prerelease(name) if starts_prerelease else None

    if bump in (VersionType.MAJOR, VersionType.MINOR, VersionType.PATCH):
        return ParsedVersion.from_semver(version.to_semver().next_version(bump.value))
    if bump is VersionType.PREMAJOR:
        return ParsedVersion(version.major + 1, 0, 0, start)
    if bump is VersionType.PREMINOR:
        return ParsedVersion(version.major, version.minor + 1, 0, start)
    if bump is VersionType.PREPATCH:
        return ParsedVersion(version.major, version.minor, version.patch + 1, start)
    if bump is VersionType.PRERELEASE:
        if not version.is_prerelease:
            return ParsedVersion(version.major, version.minor, version.patch + 1, start)
        return ParsedVersion(
            version.major, version.minor, version.patch, _next_build(version.prerelease)
        )

    raise ComputeFailure(f"Cannot increment {version.to_semver()} by {bump!r}")


def continuous_bump_type(version_type, version):
    if version_type is VersionType.PRERELEASE:
        return VersionType.PRERELEASE if version.is_prerelease else VersionType.PREMAJOR
    if version_type is VersionType.PREMAJOR:
        return VersionType.PREMAJOR
    return VersionType.MAJOR


def next_continuous(prefix, suffix, version_type, version):
    # only the major component is ever shown
    version = ParsedVersion(version.major, prerelease=version.prerelease)
    bump = continuous_bump_type(version_type, version)
    name = prerelease_name(suffix, version)
    try:
        next_version = increment(version, bump, name)
    except ComputeFailure as exc:
        raise ComputeFailure(
            f"Failed to compute next continuous tag from {version.to_semver()}: {exc}"
        ) from exc
    return format_continuous(prefix, next_version)


def next_semantic(prefix, suffix, version_type, version):
    if version_type not in SEMANTIC_TYPES:
        raise UnsupportedVersionType(version_type, [member.value for member in SEMANTIC_TYPES])
    name = prerelease_name(suffix, version)
    return format_semantic(prefix, increment(version, version_type, name))
