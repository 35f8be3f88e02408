"""Process exit codes.

Scripts and CI steps wrapping ``jdkres resolve`` branch on these, so the
values are part of the interface and must not be renumbered.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    OK = 0
    # Malformed or unsupported version request
    USER_ERROR = 1
    # Host platform undetectable, config invalid
    ENV_ERROR = 2
    # No release satisfies the request
    NOT_FOUND = 3
    # Manifest unreachable or malformed
    NETWORK_ERROR = 4
    IO_ERROR = 5
