"""Platform abstraction layer."""

from .detection import (
    Arch,
    Platform,
    detect_arch,
    detect_platform,
    normalize_arch,
    normalize_platform,
)
from .paths import (
    home,
    user_cache_dir,
    user_config_dir,
)

__all__ = [
    # detection
    "Arch",
    "Platform",
    "detect_arch",
    "detect_platform",
    "normalize_arch",
    "normalize_platform",
    # paths
    "home",
    "user_cache_dir",
    "user_config_dir",
]
