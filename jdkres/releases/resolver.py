"""Release resolution: from a version request to one downloadable artifact.

Usage:
    resolver = Resolver(manifest)
    request = VersionRequest(version="11", architecture="x64", platform="linux")
    result = resolver.find_package_for_download(request)
    if is_ok(result):
        print(result.value.url)
"""

from __future__ import annotations

from collections.abc import Sequence

from jdkres.core.result import Err, Ok, Result

from .errors import ResolveError, UnsupportedMajorVersion
from .filter import filter_manifest
from .model import ReleaseDescriptor, VersionRequest
from .support import is_major_supported, supported_majors
from .version import TieBreak, select_best

__all__ = ["Resolver", "check_major"]


def check_major(request: VersionRequest) -> UnsupportedMajorVersion | None:
    """The error for a request whose major is not published, else None.

    Needs no manifest, so callers can reject a request before fetching one.
    """
    if is_major_supported(request.major):
        return None
    return UnsupportedMajorVersion(
        requested=request.version,
        supported=tuple(sorted(supported_majors())),
    )


class Resolver:
    """Resolves version requests against an already fetched manifest.

    The manifest is held as an immutable tuple; calls never mutate the
    resolver, so one instance can serve any number of requests.
    """

    def __init__(
        self,
        manifest: Sequence[ReleaseDescriptor],
        tie_break: TieBreak = TieBreak.FIRST,
    ) -> None:
        self._manifest: tuple[ReleaseDescriptor, ...] = tuple(manifest)
        self._tie_break = tie_break

    @property
    def manifest(self) -> tuple[ReleaseDescriptor, ...]:
        return self._manifest

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    def get_available_versions(
        self, request: VersionRequest
    ) -> Result[list[ReleaseDescriptor], UnsupportedMajorVersion]:
        """List every manifest entry matching the request, in manifest order.

        An empty list means the platform/architecture is not offered for this
        major; it is not an error.
        """
        error = check_major(request)
        if error is not None:
            return Err(error)
        return Ok(filter_manifest(self._manifest, request))

    def find_package_for_download(
        self,
        request: VersionRequest,
        version: str | None = None,
    ) -> Result[ReleaseDescriptor, ResolveError]:
        """Find the single best artifact for ``version``.

        Args:
            request: Platform, architecture and package type to resolve for
            version: Requested version, defaults to ``request.version``

        Returns:
            Ok with the newest satisfying release, Err with
            UnsupportedMajorVersion or NoSatisfyingVersion
        """
        requested = request.version if version is None else version
        error = check_major(request)
        if error is not None:
            return Err(error)
        candidates = filter_manifest(self._manifest, request)
        return select_best(candidates, requested, self._tie_break)
