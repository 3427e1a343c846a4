"""Latest Rust release lookup.

Each release channel has a manifest on the Rust dist server, e.g.
https://static.rust-lang.org/dist/channel-rust-stable.toml. Its
[pkg.rustc].version field holds the full compiler version string, which is
normalized here to the major.minor form used by Cargo's rust-version.
"""

from __future__ import annotations

from typing import Any

import httpx
import tomlkit
from tomlkit.exceptions import ParseError

from .errors import (
    NetworkError,
    ReleaseInfoNotText,
    ReleaseInfoParseError,
    ReleaseInfoPkgMissing,
    ReleaseInfoRustcMissing,
    ReleaseInfoVersionMissing,
    ReleaseInfoVersionNotString,
)
from .versions import normalize_version

DIST_URL = "https://static.rust-lang.org/dist"


def channel_url(channel: str, base_url: str = DIST_URL) -> str:
    """Build the channel manifest URL for a channel name or pinned version."""
    return f"{base_url}/channel-rust-{channel}.toml"


def fetch_release_info(url: str, client: httpx.Client | None = None) -> str:
    """GET the channel manifest and return its body as text.

    A client is created for the single request when none is supplied.

    Raises:
        NetworkError: On transport failures or a non-success status.
        ReleaseInfoNotText: If the body is not valid UTF-8.
    """
    try:
        if client is None:
            with httpx.Client() as owned:
                resp = owned.get(url)
        else:
            resp = client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(url, e) from e

    try:
        return resp.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReleaseInfoNotText(url) from e


def extract_rustc_version(body: str, url: str) -> str:
    """Extract the raw [pkg.rustc].version string from a channel manifest.

    Each missing level raises its own error so it is clear whether the
    document is truncated or just shaped differently than expected.
    """
    try:
        info: Any = tomlkit.parse(body)
    except ParseError as e:
        raise ReleaseInfoParseError(url, e) from e

    pkg = info.get("pkg")
    if not isinstance(pkg, dict):
        raise ReleaseInfoPkgMissing(url)
    rustc = pkg.get("rustc")
    if not isinstance(rustc, dict):
        raise ReleaseInfoRustcMissing(url)
    if "version" not in rustc:
        raise ReleaseInfoVersionMissing(url)
    version = rustc["version"]
    if not isinstance(version, str):
        raise ReleaseInfoVersionNotString(url)
    return str(version)


def resolve(
    channel: str,
    client: httpx.Client | None = None,
    base_url: str = DIST_URL,
) -> str:
    """Resolve the latest major.minor Rust version published on a channel.

    Every call performs a fresh fetch; nothing is cached or retried.

    Examples:
        "1.62.1 (e092d0b6b 2022-07-16)" → "1.62"
        "1.65.0-nightly (9243168fa 2022-08-31)" → "1.65"
    """
    url = channel_url(channel, base_url)
    body = fetch_release_info(url, client)
    return normalize_version(extract_rustc_version(body, url))
