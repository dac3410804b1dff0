from dataclasses import dataclass, replace
from typing import Optional, Union

from nexttag.errors import UnsupportedScheme
from nexttag.parser import parse
from nexttag.schemes import (
    Scheme,
    VersionType,
    next_continuous,
    next_semantic,
    start_prerelease,
)

DEFAULT_SUFFIX = "beta"

INITIAL_TAGS = {
    Scheme.CONTINUOUS: "v1",
    Scheme.SEMANTIC: "v1.0.0",
}


def to_scheme(value):
    if isinstance(value, Scheme):
        return value
    try:
        return Scheme(value)
    except ValueError:
        raise UnsupportedScheme(
            f"Invalid version_scheme: '{value}'. "
            f"Must be one of ({', '.join(member.value for member in Scheme)})"
        ) from None


@dataclass(frozen=True)
class Config:
    """Inputs of one tag computation.

    ``scheme`` and ``version_type`` may be given as raw strings; they are
    checked here so an invalid value fails before anything is computed.
    """

    scheme: Union[Scheme, str]
    tag: Optional[str] = None
    version_type: Union[VersionType, str] = VersionType.PRERELEASE
    prefix: Optional[str] = None
    suffix: Optional[str] = DEFAULT_SUFFIX

    def __post_init__(self):
        object.__setattr__(self, "scheme", to_scheme(self.scheme))
        object.__setattr__(self, "version_type", VersionType.from_value(self.version_type))
        if self.suffix is None:
            object.__setattr__(self, "suffix", DEFAULT_SUFFIX)


def initial_tag(config):
    tag = INITIAL_TAGS[config.scheme]
    if config.prefix:
        tag = f"{config.prefix}-{tag}"
    if config.version_type is VersionType.PRERELEASE:
        name, build = start_prerelease(config.suffix)
        tag = f"{tag}-{name}.{build}"
    return tag


def strip_prefix(tag, prefix):
    if not prefix:
        return tag
    return tag.replace(f"{prefix}-", "", 1)


def output_prefix(candidate, prefix):
    v = "v" if candidate.startswith("v") else ""
    return f"{prefix}-{v}" if prefix else v


def next_tag(config=None, **kwargs):
    """Compute the tag that follows ``config.tag``.

    Accepts a Config, its fields as keyword arguments, or a Config plus
    keyword arguments overriding some of its fields. Without a previous tag
    the initial tag of the scheme is returned.

    Raises:
        UnsupportedScheme, UnsupportedVersionType: invalid configuration.
        ParseFailure: the previous tag holds no version.
        ComputeFailure: the next version could not be computed.
    """
    if config is None:
        config = Config(**kwargs)
    elif kwargs:
        config = replace(config, **kwargs)

    if not config.tag:
        return initial_tag(config)

    candidate = strip_prefix(config.tag, config.prefix)
    version = parse(candidate)
    prefix = output_prefix(candidate, config.prefix)

    if config.scheme is Scheme.CONTINUOUS:
        return next_continuous(prefix, config.suffix, config.version_type, version)
    if config.scheme is Scheme.SEMANTIC:
        return next_semantic(prefix, config.suffix, config.version_type, version)
    raise UnsupportedScheme(f"Unsupported version scheme: {config.scheme}")
