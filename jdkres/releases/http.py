"""Fetching the release manifest over HTTP.

Resolution needs exactly one network operation: GET a URL and decode the
body. ``HttpClient`` is that operation as a protocol so tests can swap in
``MockHttpClient`` and never touch the network.
"""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from jdkres import __version__
from jdkres.core.result import Err, Ok, Result

__all__ = [
    "DEFAULT_USER_AGENT",
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
]

DEFAULT_USER_AGENT = f"jdkres/{__version__}"


@dataclass(frozen=True, slots=True)
class HttpError:
    """A failed manifest request.

    ``status`` is the HTTP status code, or 0 when no response arrived
    (DNS, TLS, timeout) or the body could not be decoded.
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        prefix = f"HTTP {self.status}: " if self.status else ""
        return f"{prefix}{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    def get_text(self, url: str) -> Result[str, HttpError]:
        """GET ``url`` and return the body as UTF-8 text."""
        ...


def _transport_error(url: str, exc: Exception) -> HttpError:
    """Describe a urllib failure without leaking the exception type."""
    if isinstance(exc, urllib.error.HTTPError):
        return HttpError(url=url, status=exc.code, message=str(exc.reason))
    if isinstance(exc, urllib.error.URLError):
        return HttpError(url=url, status=0, message=str(exc.reason))
    if isinstance(exc, TimeoutError):
        return HttpError(url=url, status=0, message="Request timed out")
    return HttpError(url=url, status=0, message=str(exc))


class RealHttpClient:
    """urllib client verifying against the system trust store."""

    def __init__(self, timeout: float = 30.0, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def get_text(self, url: str) -> Result[str, HttpError]:
        request = urllib.request.Request(
            url,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
        )
        try:
            with urllib.request.urlopen(
                request, timeout=self.timeout, context=self._ssl_context
            ) as response:
                body: bytes = response.read()
        # URLError and TimeoutError are OSError subclasses; ValueError is a malformed URL
        except (OSError, ValueError) as e:
            return Err(_transport_error(url, e))

        try:
            return Ok(body.decode("utf-8"))
        except UnicodeDecodeError as e:
            return Err(HttpError(url=url, status=0, message=f"Decode error: {e}"))


@dataclass
class MockHttpClient:
    """In-memory client: serves registered bodies, 404s everything else.

    Usage:
        client = MockHttpClient()
        client.set_text(MANIFEST_URL, fixture_text())
        assert client.get_text(MANIFEST_URL) == Ok(fixture_text())
        assert client.calls == [MANIFEST_URL]
    """

    responses: dict[str, str | HttpError] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def set_text(self, url: str, response: str | HttpError) -> None:
        self.responses[url] = response

    def get_text(self, url: str) -> Result[str, HttpError]:
        self.calls.append(url)
        match self.responses.get(url):
            case None:
                return Err(HttpError(url=url, status=404, message="Not found (mock)"))
            case HttpError() as error:
                return Err(error)
            case str() as text:
                return Ok(text)
