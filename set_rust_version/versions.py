"""Version string normalization.

Release channels publish full rustc version strings such as
"1.62.1 (e092d0b6b 2022-07-16)", while Cargo's rust-version field only
carries major.minor. This module converts the former into the latter.
"""

from __future__ import annotations

import re

from .errors import EmptyVersionString

_WHITESPACE = re.compile(r"\s+")
_PRERELEASE = re.compile(r"[-+]")


def strip_metadata(raw: str) -> str:
    """Drop everything after the first whitespace run.

    Examples:
        "1.62.1 (e092d0b6b 2022-07-16)" → "1.62.1"
        "1.64.0-nightly (abc 2022-08-01)" → "1.64.0-nightly"

    Raises:
        EmptyVersionString: If nothing precedes the first whitespace.
    """
    version = _WHITESPACE.split(raw, maxsplit=1)[0]
    if not version:
        raise EmptyVersionString(raw)
    return version


def major_minor(version: str) -> str:
    """Truncate a dotted version to its first two components.

    Examples:
        "1.62.1" → "1.62"
        "1.62" → "1.62"
        "1" → "1"
        "1.65-nightly" → "1.65"

    Pre-release and build suffixes are dropped first, so they never leak
    into the result even when the patch component is missing.
    """
    release = _PRERELEASE.split(version, maxsplit=1)[0]
    return ".".join(release.split(".")[:2])


def normalize_version(raw: str) -> str:
    """Turn a rustc version string into a rust-version value."""
    return major_minor(strip_metadata(raw))
