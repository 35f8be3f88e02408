"""Ok / Err values for operations that can fail in expected ways.

Resolving a request fails routinely (unsupported major, nothing satisfies
the range, manifest unreachable). Those outcomes are returned, not raised:

    match resolver.find_package_for_download(request):
        case Ok(release):
            print(release.url)
        case Err(error):
            print(error.message)

Steps chain with ``flat_map``; the first Err short-circuits the rest:

    http.get_text(url).flat_map(lambda text: parse_manifest(text, source=url))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeGuard, TypeVar

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err"]

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def flat_map(self, f: Callable[..., object]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = "Ok[T] | Err[E]"


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)
