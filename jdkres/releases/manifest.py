"""Release manifest loading.

The manifest is a JSON array of records:

    {"version": "8.13.14", "platform": "linux", "architecture": "x64",
     "packageType": "jdk", "url": "https://...", "majorVersion": 8}

``majorVersion`` is optional and defaults to the leading integer of
``version``. Malformed records are skipped; only a malformed document is an
error.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from jdkres.core.result import Err, Ok, Result
from jdkres.core.structured import as_obj_list, as_str_dict, get_int, get_str

from .cache import ManifestCache
from .errors import ManifestError
from .http import HttpClient, HttpError
from .model import PackageType, ReleaseDescriptor, leading_major

__all__ = [
    "ParsedManifest",
    "parse_record",
    "parse_manifest",
    "fetch_manifest",
    "load_manifest",
]


@dataclass(frozen=True, slots=True)
class ParsedManifest:
    """Descriptors in manifest order plus the count of records dropped."""

    releases: tuple[ReleaseDescriptor, ...]
    skipped: int = 0
    source: str = field(default="", compare=False)


def parse_record(record: object) -> ReleaseDescriptor | None:
    """Convert one JSON record into a ReleaseDescriptor, or None if unusable."""
    data = as_str_dict(record)
    if data is None:
        return None

    version = get_str(data, "version")
    platform = get_str(data, "platform")
    architecture = get_str(data, "architecture")
    url = get_str(data, "url")
    package_type_raw = get_str(data, "packageType")
    if not (version and platform and architecture and url and package_type_raw):
        return None

    package_type = PackageType.parse(package_type_raw)
    if package_type is None:
        return None

    major = get_int(data, "majorVersion")
    if major is None:
        major = leading_major(version)
    if major is None:
        return None

    return ReleaseDescriptor(
        major_version=major,
        version=version,
        platform=platform,
        architecture=architecture,
        package_type=package_type,
        url=url,
    )


def parse_manifest(text: str, source: str = "") -> Result[ParsedManifest, ManifestError]:
    """Parse manifest JSON text.

    Args:
        text: Raw JSON document
        source: Where it came from, used in error messages

    Returns:
        Ok with ParsedManifest, or Err if the document is not a JSON array
    """
    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(ManifestError(url=source, message=f"JSON parse error: {e}"))

    records = as_obj_list(raw)
    if records is None:
        return Err(ManifestError(url=source, message="Expected JSON array"))

    releases: list[ReleaseDescriptor] = []
    skipped = 0
    for record in records:
        release = parse_record(record)
        if release is None:
            skipped += 1
            continue
        releases.append(release)

    return Ok(ParsedManifest(releases=tuple(releases), skipped=skipped, source=source))


def fetch_manifest(
    http: HttpClient, url: str
) -> Result[ParsedManifest, HttpError | ManifestError]:
    """Fetch and parse the manifest at ``url``."""
    return http.get_text(url).flat_map(lambda text: parse_manifest(text, source=url))


def load_manifest(
    http: HttpClient,
    url: str,
    cache: ManifestCache | None = None,
    *,
    check_latest: bool = False,
) -> Result[ParsedManifest, HttpError | ManifestError]:
    """Load the manifest, going through the on-disk cache when given.

    ``check_latest`` skips the cached copy and always fetches; a successful
    fetch refreshes the cache either way. A corrupt cached copy is ignored
    and refetched.
    """
    if cache is not None and not check_latest:
        cached = cache.read(url)
        if cached is not None:
            parsed = parse_manifest(cached, source=url)
            if isinstance(parsed, Ok):
                return parsed

    text_result = http.get_text(url)
    if isinstance(text_result, Err):
        return text_result

    parsed = parse_manifest(text_result.value, source=url)
    if isinstance(parsed, Ok) and cache is not None:
        cache.write(url, text_result.value)
    return parsed
