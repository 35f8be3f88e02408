"""Manifest filtering for one version request."""

from __future__ import annotations

from collections.abc import Iterable

from .model import ReleaseDescriptor, VersionRequest
from .support import is_combination_offered
from .version import parse_extended_version

__all__ = ["archive_extension", "filter_manifest"]


def archive_extension(platform: str) -> str:
    """Archive format published for a platform: zip on Windows, tar.gz elsewhere."""
    return "zip" if platform == "windows" else "tar.gz"


def _version_matches_major(release: ReleaseDescriptor, major: int) -> bool:
    key = parse_extended_version(release.version)
    return key is not None and key[0] == major


def filter_manifest(
    manifest: Iterable[ReleaseDescriptor],
    request: VersionRequest,
) -> list[ReleaseDescriptor]:
    """Keep the manifest entries relevant to ``request``, in manifest order.

    Checks, in order: package type, major version, platform, architecture,
    the URL's archive extension, then that the version string parses to the
    same major. Every entry returned is therefore a candidate the version
    matcher can rank; "dragonwell-nightly" style labels never are.

    Returns an empty list (not an error) when the combination is not in the
    support matrix or nothing matches.
    """
    major = request.major
    if major is None or not is_combination_offered(major, request.platform, request.architecture):
        return []

    suffix = "." + archive_extension(request.platform)
    return [
        release
        for release in manifest
        if release.package_type == request.package_type
        and release.major_version == major
        and release.platform == request.platform
        and release.architecture == request.architecture
        and release.url.endswith(suffix)
        and _version_matches_major(release, major)
    ]
