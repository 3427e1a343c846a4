"""Cargo.toml reading and writing utilities.

Uses tomlkit to preserve formatting and comments when modifying Cargo.toml
files. Only package.rust-version is ever changed; every other byte of the
manifest must come back out exactly as it went in.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError
from tomlkit.items import String

from .errors import (
    ManifestParseError,
    ManifestReadError,
    ManifestWriteError,
    WorkspaceMemberNotString,
    WorkspaceMembersMissing,
    WorkspaceMembersNotArray,
)

MANIFEST_NAME = "Cargo.toml"
RUST_VERSION_KEY = "rust-version"


def load_manifest(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a Cargo.toml file.

    Returns a TOMLDocument that preserves formatting when modified and saved.
    The file is decoded from raw bytes so CRLF line endings survive.

    Raises:
        ManifestReadError: If the file cannot be read as UTF-8 text.
        ManifestParseError: If the file is not valid TOML.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(path, e) from e
    try:
        return tomlkit.parse(text)
    except ParseError as e:
        raise ManifestParseError(path, e) from e


def save_manifest(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Save a TOMLDocument back to disk, preserving original formatting."""
    try:
        path.write_text(tomlkit.dumps(doc), encoding="utf-8", newline="")
    except OSError as e:
        raise ManifestWriteError(path, e) from e


def get_package(doc: tomlkit.TOMLDocument) -> dict[str, Any] | None:
    """Return the [package] table, or None if the manifest has none."""
    package = doc.get("package")
    return package if isinstance(package, dict) else None


def get_rust_version(doc: tomlkit.TOMLDocument) -> Any:
    """Extract the raw [package].rust-version value.

    This is usually a string, but may be a table when the value is
    inherited (`rust-version.workspace = true`). Returns None when the
    field or the [package] table is absent.
    """
    package = get_package(doc)
    if package is None:
        return None
    return package.get(RUST_VERSION_KEY)


def set_rust_version(doc: tomlkit.TOMLDocument, version: str) -> None:
    """Set [package].rust-version, creating the table or key if needed.

    An existing literal ('...') string stays literal, so the only byte
    difference is the version itself.
    """
    package = get_package(doc)
    if package is None:
        doc["package"] = tomlkit.table()
        package = doc["package"]
    current = package.get(RUST_VERSION_KEY)
    literal = isinstance(current, String) and current.type.is_literal()
    package[RUST_VERSION_KEY] = tomlkit.string(version, literal=literal)


def has_workspace(doc: tomlkit.TOMLDocument) -> bool:
    """Whether the manifest has a top-level [workspace] section."""
    return "workspace" in doc


def _string_list(doc: tomlkit.TOMLDocument, path: Path, key: str) -> list[str] | None:
    workspace = doc.get("workspace", {})
    if not isinstance(workspace, dict):
        raise WorkspaceMembersMissing(path)
    values = workspace.get(key)
    if values is None:
        return None
    if not isinstance(values, list):
        raise WorkspaceMembersNotArray(path, key)
    for value in values:
        if not isinstance(value, str):
            raise WorkspaceMemberNotString(path, value, key)
    return [str(value) for value in values]


def get_workspace_members(doc: tomlkit.TOMLDocument, path: Path) -> list[str]:
    """Extract member directories from [workspace].members.

    Entries are returned as written; they may be plain directory names
    ("crates/core") or glob patterns ("crates/*").

    Args:
        doc: Parsed workspace manifest.
        path: Location of the manifest, used in error messages.

    Raises:
        WorkspaceMembersMissing: If no members key is defined.
        WorkspaceMembersNotArray: If members is not an array.
        WorkspaceMemberNotString: If any entry is not a string.
    """
    members = _string_list(doc, path, "members")
    if members is None:
        raise WorkspaceMembersMissing(path)
    return members


def get_workspace_excludes(doc: tomlkit.TOMLDocument, path: Path) -> list[str]:
    """Extract [workspace].exclude, defaulting to an empty list."""
    return _string_list(doc, path, "exclude") or []
