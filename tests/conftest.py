"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
import tomlkit

RELEASE_BODY = """\
manifest-version = "2"
date = "2022-07-19"

[pkg.cargo]
version = "0.63.1 (fd9c4297c 2022-07-01)"

[pkg.rustc]
version = "1.62.1 (e092d0b6b 2022-07-16)"
"""


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a Cargo.toml under tmp_path."""

    def _write(rel_dir: str, content: str) -> Path:
        manifest = tmp_path / rel_dir / "Cargo.toml"
        manifest.parent.mkdir(parents=True, exist_ok=True)
        manifest.write_text(content)
        return manifest

    return _write


@pytest.fixture
def workspace(write_manifest: Callable[[str, str], Path]) -> dict[str, Path]:
    """Create a workspace with members a (1.60) and b (1.62)."""
    return {
        "root": write_manifest(".", '\n[workspace]\nmembers = ["a", "b"]\n'),
        "a": write_manifest("a", '\n[package]\nrust-version = "1.60"\n'),
        "b": write_manifest("b", '\n[package]\nrust-version = "1.62"\n'),
    }


@pytest.fixture
def sample_manifest_doc() -> tomlkit.TOMLDocument:
    """Create a sample package manifest document."""
    content = """\
[package]
name = "my-crate"
version = "0.1.0"
edition = "2021"
rust-version = "1.60"

[dependencies]
serde = "1"
"""
    return tomlkit.parse(content)


@pytest.fixture
def make_client() -> Callable[..., httpx.Client]:
    """Return a factory for clients that answer every request the same way."""

    def _make(body: str | bytes = RELEASE_BODY, status_code: int = 200) -> httpx.Client:
        content = body.encode() if isinstance(body, str) else body

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, content=content)

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _make
