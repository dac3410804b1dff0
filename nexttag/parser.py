"""Turn loosely formatted tag strings into versions and back."""

import re
from dataclasses import dataclass

import semver

from nexttag.errors import ParseFailure

# First run of up to three dot separated numbers not glued to a preceding digit
COERCE_PATTERN = re.compile(r"(?:^|\D)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?!\d)")

NULL_TOKENS = ("null", "undefined")


def is_null_string(value):
    return value is None or value == "" or value in NULL_TOKENS


def identifier(token):
    token = str(token)
    return int(token) if token.isascii() and token.isdigit() else token


@dataclass(frozen=True)
class ParsedVersion:
    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple = ()

    @property
    def is_prerelease(self):
        return len(self.prerelease) > 0

    def to_semver(self):
        pre = ".".join(str(part) for part in self.prerelease) or None
        return semver.Version(self.major, self.minor, self.patch, prerelease=pre)

    @classmethod
    def from_semver(cls, version):
        pre = version.prerelease
        return cls(
            version.major,
            version.minor,
            version.patch,
            tuple(identifier(part) for part in pre.split(".")) if pre else (),
        )


def coerce(version):
    match = COERCE_PATTERN.search(version)
    if match is None:
        return None
    major, minor, patch = (int(part or 0) for part in match.groups())
    return ParsedVersion(major, minor, patch)


def parse_prerelease(pre):
    """Return prerelease identifiers for ``pre``, or ``()`` when it is not a valid prerelease."""
    try:
        parsed = semver.Version.parse(f"0.0.0-{pre}")
    except ValueError:
        return ()
    return ParsedVersion.from_semver(parsed).prerelease


def parse(candidate):
    """Parse a tag candidate (prefix already removed) into a ParsedVersion.

    Everything before the first ``-`` is coerced into major.minor.patch, so
    ``v2`` becomes 2.0.0. Everything after it is read as prerelease
    identifiers, later hyphens included: ``1.0.0-beta-hotfix.2`` keeps
    ``beta-hotfix.2`` rather than cutting it back to ``beta``.

    Raises:
        ParseFailure: no numeric version could be found.
    """
    version, _, pre = candidate.partition("-")
    parsed = coerce(version)
    if parsed is None:
        raise ParseFailure(f"Failed to parse tag: {candidate}")

    if not is_null_string(pre):
        prerelease = parse_prerelease(pre)
        if prerelease:
            parsed = ParsedVersion(parsed.major, parsed.minor, parsed.patch, prerelease)

    return parsed


def _suffix(version):
    if not version.is_prerelease:
        return ""
    return "-" + ".".join(str(part) for part in version.prerelease)


def format_semantic(prefix, version):
    return f"{prefix or ''}{version.major}.{version.minor}.{version.patch}{_suffix(version)}"


def format_continuous(prefix, version):
    return f"{prefix or ''}{version.major}{_suffix(version)}"
