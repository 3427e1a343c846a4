"""Manifest updater: read → classify → recurse or update → write.

Walks a Cargo manifest tree depth-first:
1. Read and parse the manifest at the given path
2. If it is a workspace, visit each member's Cargo.toml in listed order
3. Otherwise compare [package].rust-version with the target version
4. Rewrite the file only if the value differs

Each manifest is fully processed before the next one is touched. Any error
aborts the walk; manifests rewritten before the failure stay rewritten.
"""

from __future__ import annotations

import glob
from pathlib import Path

from .models import ManifestReport, VersionUpdate
from .toml import (
    MANIFEST_NAME,
    get_package,
    get_rust_version,
    get_workspace_excludes,
    get_workspace_members,
    has_workspace,
    load_manifest,
    save_manifest,
    set_rust_version,
)

_GLOB_CHARS = frozenset("*?[")


def say(path: Path, msg: str) -> None:
    """Print a progress line prefixed with the manifest path."""
    print(f"{path}: {msg}")


def member_manifests(
    workspace_dir: Path, members: list[str], excludes: list[str]
) -> list[Path]:
    """Resolve workspace member entries to manifest paths.

    Plain entries map directly to <workspace_dir>/<member>/Cargo.toml, whether
    or not that file exists, so a missing member fails loudly when read.
    Glob entries (e.g. "crates/*") are expanded in sorted order and only
    directories that contain a Cargo.toml are kept.

    Args:
        workspace_dir: Directory holding the workspace manifest.
        members: Raw [workspace].members entries.
        excludes: Raw [workspace].exclude entries.
    """
    excluded = {(workspace_dir / e).resolve() for e in excludes}
    manifests: list[Path] = []
    for member in members:
        if _GLOB_CHARS.isdisjoint(member):
            candidates = [workspace_dir / member]
        else:
            # The workspace path itself may contain glob characters
            pattern = str(Path(glob.escape(str(workspace_dir))) / member)
            candidates = [
                Path(match)
                for match in sorted(glob.glob(pattern))
                if (Path(match) / MANIFEST_NAME).exists()
            ]
        for d in candidates:
            if d.resolve() in excluded:
                continue
            manifests.append(d / MANIFEST_NAME)
    return manifests


def update_one(path: Path, target: str, reports: list[ManifestReport]) -> None:
    """Bring one manifest (and, for workspaces, its members) up to target.

    Reports for every visited manifest are appended to ``reports`` in
    visit order.

    Raises:
        SetRustVersionError: Any read, parse, workspace or write failure.
    """
    say(path, "reading")
    doc = load_manifest(path)

    if has_workspace(doc):
        say(path, "found workspace")
        members = get_workspace_members(doc, path)
        excludes = get_workspace_excludes(doc, path)
        reports.append(ManifestReport(path=path, kind="workspace"))
        for manifest in member_manifests(path.parent, members, excludes):
            update_one(manifest, target, reports)
        return

    # Nothing to update without a [package] table (e.g. an empty file)
    if get_package(doc) is None:
        reports.append(ManifestReport(path=path, kind="no-package"))
        return

    current = get_rust_version(doc)
    if current is not None and not isinstance(current, str):
        say(path, "rust-version inherited from workspace")
        reports.append(ManifestReport(path=path, kind="inherited"))
        return

    current = str(current) if current is not None else None
    if current == target:
        say(path, f"up-to-date rust-version: {current}")
        reports.append(ManifestReport(path=path, kind="package", current=current))
        return

    update = VersionUpdate(old=current, new=target)
    say(path, f"updating rust-version: {update.describe()}")
    set_rust_version(doc, target)
    save_manifest(path, doc)
    reports.append(
        ManifestReport(path=path, kind="package", current=current, update=update)
    )


def update_tree(root: Path, target: str) -> list[ManifestReport]:
    """Update rust-version in the manifest at ``root`` and any workspace members.

    Returns:
        One report per visited manifest, workspace root first.
    """
    reports: list[ManifestReport] = []
    update_one(root, target, reports)
    return reports
