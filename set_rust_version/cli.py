"""CLI entry point for cargo-set-rust-version."""

from __future__ import annotations

from pathlib import Path

import click

from set_rust_version.errors import SetRustVersionError
from set_rust_version.release import resolve
from set_rust_version.updater import update_tree


@click.group()
@click.version_option(package_name="cargo-set-rust-version")
def cli() -> None:
    """Keep Cargo's rust-version in step with the latest Rust release."""


@cli.command("set-rust-version")
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False, path_type=Path),
    default="Cargo.toml",
    show_default=True,
    help="Cargo.toml file path.",
)
@click.option(
    "--channel",
    default="stable",
    show_default=True,
    help="Channel to take the latest version from (stable, beta, nightly, or a version).",
)
def set_rust_version(manifest: Path, channel: str) -> None:
    """Set rust-version to the latest release on CHANNEL."""
    try:
        click.echo(f"channel: {channel}")
        latest = resolve(channel)
        click.echo(f"latest rust-version: {latest}")
        update_tree(manifest, latest)
    except SetRustVersionError as e:
        raise click.ClickException(str(e)) from e
