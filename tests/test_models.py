"""Tests for set_rust_version.models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from set_rust_version.models import ManifestReport, VersionUpdate


class TestVersionUpdate:
    def test_describe(self) -> None:
        assert VersionUpdate(old="1.61", new="1.62").describe() == "1.61 => 1.62"

    def test_describe_unset(self) -> None:
        assert VersionUpdate(old=None, new="1.62").describe() == "<not set> => 1.62"


class TestManifestReport:
    def test_not_updated_by_default(self) -> None:
        report = ManifestReport(path=Path("Cargo.toml"), kind="package", current="1.62")
        assert not report.updated

    def test_updated(self) -> None:
        report = ManifestReport(
            path=Path("Cargo.toml"),
            kind="package",
            current="1.61",
            update=VersionUpdate(old="1.61", new="1.62"),
        )
        assert report.updated

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            ManifestReport(path=Path("Cargo.toml"), kind="crate")
