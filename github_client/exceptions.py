"""
Exceptions raised by the GitHub client.

The Client itself never translates errors: everything raised by a transport
reaches the caller unchanged.
"""

from typing import Optional


class GithubClientError(Exception):
    """Base exception for all client errors."""


class TransportError(GithubClientError):
    """Network failure while talking to GitHub (connection, timeout)."""


class HttpError(TransportError):
    """Non-success HTTP status returned by GitHub."""

    def __init__(self, status_code: int, message: str, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code}: {message}")


class ResponseDecodeError(TransportError):
    """Response body could not be decoded in the requested format."""


class ApiError(TransportError):
    """GitHub answered with an error payload ({"error": ...})."""

    def __init__(self, message: str, payload: Optional[dict] = None):
        self.payload = payload or {}
        super().__init__(message)


class UnknownApiError(GithubClientError, KeyError):
    """No facade is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No API registered under '{self.name}'"
