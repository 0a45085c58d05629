"""
Base class for resource facades.
"""

import weakref
from typing import Any, Dict, Optional, TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from github_client.client import Client


class AbstractApi:
    """
    Resource-scoped helper delegating to a Client.

    The facade only keeps a weak proxy to its client: it never keeps the
    client alive on its own.
    """

    def __init__(self, client: "Client"):
        if isinstance(client, weakref.ProxyTypes):
            self.client = client
        else:
            self.client = weakref.proxy(client)

    def get(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.client.get(path, parameters or {}, request_options or {})

    def post(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.client.post(path, parameters or {}, request_options or {})

    @staticmethod
    def path(route: str, *segments: Any) -> str:
        """
        Append quoted segments to a route.

        path("commits/list", "octocat", "hello", "feature/x")
        -> "commits/list/octocat/hello/feature%2Fx"

        Raises:
            ValueError: A segment is empty
        """
        parts = [route.strip("/")]
        for segment in segments:
            segment = str(segment)
            if not segment:
                raise ValueError(f"Empty path segment for '{route}'")
            parts.append(quote(segment, safe=""))
        return "/".join(parts)

    @staticmethod
    def file_path(path: str) -> str:
        """Quote a repository file path, keeping its directory separators."""
        return quote(path.strip("/"), safe="/")
