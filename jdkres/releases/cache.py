"""On-disk cache for the raw manifest document.

One file per manifest URL, named after the URL's SHA-256. The cache holds the
raw JSON text; parsing always happens on load so a schema change never
serves stale descriptors.
"""

from __future__ import annotations

import hashlib
import os
import tempfile
from pathlib import Path

__all__ = ["ManifestCache"]


class ManifestCache:
    """Best-effort manifest cache.

    Read and write failures degrade to a cache miss: resolution must keep
    working on a read-only or full disk.
    """

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    def path_for(self, url: str) -> Path:
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
        return self._cache_dir / f"manifest-{digest}.json"

    def read(self, url: str) -> str | None:
        """Cached text for url, or None on miss."""
        path = self.path_for(url)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def write(self, url: str, text: str) -> bool:
        """Store text for url. Returns False if the cache could not be written.

        The text lands in a temp file first and is renamed over the target,
        so a concurrent reader sees the old document or the new one.
        """
        target = self.path_for(url)
        tmp: Path | None = None
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._cache_dir,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp = Path(handle.name)
                handle.write(text)
            os.replace(tmp, target)
        except OSError:
            return False
        finally:
            if tmp is not None:
                tmp.unlink(missing_ok=True)
        return True

    def clear(self) -> int:
        """Remove every cached manifest. Returns the number of files removed."""
        if not self._cache_dir.is_dir():
            return 0
        removed = 0
        for path in self._cache_dir.glob("manifest-*.json"):
            path.unlink(missing_ok=True)
            removed += 1
        return removed
