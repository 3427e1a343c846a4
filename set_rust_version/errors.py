"""Error types for cargo-set-rust-version.

Every failure the tool can hit has its own exception class so callers (and
tests) can tell exactly what went wrong. All of them derive from
SetRustVersionError, which the CLI turns into a one-line diagnostic and a
non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class SetRustVersionError(Exception):
    """Base class for all errors raised by cargo-set-rust-version."""


# Manifest errors


class ManifestReadError(SetRustVersionError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"reading manifest {path}: {cause}")


class ManifestParseError(SetRustVersionError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"parsing manifest {path}: {cause}")


class ManifestWriteError(SetRustVersionError):
    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"writing manifest {path}: {cause}")


class WorkspaceMembersMissing(SetRustVersionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"missing workspace.members in {path}")


class WorkspaceMembersNotArray(SetRustVersionError):
    def __init__(self, path: Path, key: str = "members") -> None:
        self.path = path
        self.key = key
        super().__init__(f"workspace.{key} is not an array in {path}")


class WorkspaceMemberNotString(SetRustVersionError):
    def __init__(self, path: Path, member: object, key: str = "members") -> None:
        self.path = path
        self.member = member
        self.key = key
        super().__init__(f"workspace.{key} entry {member!r} is not a string in {path}")


# Release info errors


class NetworkError(SetRustVersionError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"fetching {url}: {cause}")


class ReleaseInfoNotText(SetRustVersionError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"release info from {url} is not UTF-8 text")


class ReleaseInfoParseError(SetRustVersionError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"parsing release info from {url}: {cause}")


class ReleaseInfoPkgMissing(SetRustVersionError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"missing [pkg] in release info from {url}")


class ReleaseInfoRustcMissing(SetRustVersionError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"missing [pkg.rustc] in release info from {url}")


class ReleaseInfoVersionMissing(SetRustVersionError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"missing pkg.rustc.version in release info from {url}")


class ReleaseInfoVersionNotString(SetRustVersionError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"pkg.rustc.version is not a string in release info from {url}")


class EmptyVersionString(SetRustVersionError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"empty version string in {raw!r}")
