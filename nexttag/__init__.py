from nexttag.compute import Config, next_tag
from nexttag.errors import (
    ComputeFailure,
    ParseFailure,
    TagError,
    UnsupportedScheme,
    UnsupportedVersionType,
)
from nexttag.parser import ParsedVersion, parse
from nexttag.schemes import Scheme, VersionType

__all__ = [
    "ComputeFailure",
    "Config",
    "ParseFailure",
    "ParsedVersion",
    "Scheme",
    "TagError",
    "UnsupportedScheme",
    "UnsupportedVersionType",
    "VersionType",
    "next_tag",
    "parse",
]
