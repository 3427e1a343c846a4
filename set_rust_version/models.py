"""Data models for cargo-set-rust-version.

These Pydantic models record what the manifest updater did, so callers can
inspect the outcome of a run without parsing its output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

ManifestKind = Literal["workspace", "package", "no-package", "inherited"]


class VersionUpdate(BaseModel):
    """Records a rust-version change for a package manifest.

    Attributes:
        old: The rust-version before updating, or None if it was not set.
        new: The rust-version written to the manifest.
    """

    old: str | None
    new: str

    def describe(self) -> str:
        return f"{self.old or '<not set>'} => {self.new}"


class ManifestReport(BaseModel):
    """Outcome of visiting a single manifest.

    Attributes:
        path: Manifest file that was visited.
        kind: How the manifest was classified. "no-package" means there was
              no [package] table, "inherited" means rust-version is taken
              from the workspace and was left alone; its current is None
              even though the manifest does set the field.
        current: rust-version found in the manifest, if any.
        update: The change that was written, or None if the file was not
                touched.
    """

    path: Path
    kind: ManifestKind
    current: str | None = None
    update: VersionUpdate | None = None

    @property
    def updated(self) -> bool:
        return self.update is not None
