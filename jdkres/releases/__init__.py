"""Release manifest resolution.

This package provides:
- Data model (model.py)
- Support matrix (support.py)
- Manifest filter (filter.py)
- Extended version matching (version.py)
- Resolver (resolver.py)
- Manifest fetching and caching (http.py, manifest.py, cache.py)
"""

from jdkres.releases.cache import ManifestCache
from jdkres.releases.errors import (
    ManifestError,
    NoSatisfyingVersion,
    ResolveError,
    UnsupportedMajorVersion,
)
from jdkres.releases.filter import archive_extension, filter_manifest
from jdkres.releases.http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from jdkres.releases.manifest import ParsedManifest, fetch_manifest, load_manifest, parse_manifest
from jdkres.releases.model import PackageType, ReleaseDescriptor, SupportEntry, VersionRequest
from jdkres.releases.resolver import Resolver, check_major
from jdkres.releases.support import (
    SUPPORT_MATRIX,
    is_combination_offered,
    offered_entries,
    supported_majors,
)
from jdkres.releases.version import (
    TieBreak,
    VersionRange,
    parse_extended_version,
    select_best,
    sort_descriptors,
)

__all__ = [
    # Model
    "PackageType",
    "ReleaseDescriptor",
    "SupportEntry",
    "VersionRequest",
    # Errors
    "ManifestError",
    "NoSatisfyingVersion",
    "ResolveError",
    "UnsupportedMajorVersion",
    # Support matrix
    "SUPPORT_MATRIX",
    "is_combination_offered",
    "offered_entries",
    "supported_majors",
    # Filter
    "archive_extension",
    "filter_manifest",
    # Versions
    "TieBreak",
    "VersionRange",
    "parse_extended_version",
    "select_best",
    "sort_descriptors",
    # Resolver
    "Resolver",
    "check_major",
    # Manifest source
    "HttpClient",
    "HttpError",
    "ManifestCache",
    "MockHttpClient",
    "ParsedManifest",
    "RealHttpClient",
    "fetch_manifest",
    "load_manifest",
    "parse_manifest",
]
