"""
Transport layer: executes HTTP requests against the GitHub API and decodes
the responses.

The Client only depends on the `Transport` protocol, so any object with the
same methods can be injected (a recording stub in tests, a caching proxy,
...). `HttpClient` is the default implementation, built on requests.
"""

import json
import logging
import threading
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Union
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from github_client.exceptions import (
    ApiError,
    HttpError,
    ResponseDecodeError,
    TransportError,
)
from github_client.options import AuthMethod, TransportOptions
from github_client.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Interface the Client consumes."""

    def get(
        self,
        path: str,
        parameters: Dict[str, Any],
        request_options: Dict[str, Any],
    ) -> Any:
        """Send a GET request and return the decoded response."""
        ...

    def post(
        self,
        path: str,
        parameters: Dict[str, Any],
        request_options: Dict[str, Any],
    ) -> Any:
        """Send a POST request and return the decoded response."""
        ...

    def set_option(self, name: str, value: Any) -> "Transport":
        """Change one option, returning the transport."""
        ...

    def set_options(self, options: Mapping[str, Any]) -> "Transport":
        """Change several options in one step, returning the transport."""
        ...

    def get_option(self, name: str, default: Any = None) -> Any:
        """Current value of an option."""
        ...


class HttpClient:
    """
    Default transport, talking to GitHub over HTTP with requests.

    Options (see TransportOptions for defaults):
    - url: template with :protocol, :format and :path placeholders
    - format: response format, "json" is decoded, anything else returned as text
    - auth_method / login / password / token: credentials
    - api_limit: requests per minute before throttling
    """

    def __init__(
        self,
        options: Union[TransportOptions, Mapping[str, Any], None] = None,
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ):
        """
        Initialize the transport.

        Args:
            options: Option overrides, merged over the defaults
            session: Existing requests session (a new one is created otherwise)
            rate_limiter: Request throttle (built from api_limit otherwise)
        """
        self.options: Dict[str, Any] = TransportOptions().to_dict()
        if isinstance(options, TransportOptions):
            self.options.update(options.to_dict())
        elif options:
            self.options.update(options)

        self.session = session or requests.Session()
        self.rate_limiter = rate_limiter or RateLimiter(limit=self.options.get("api_limit"))
        self._lock = threading.Lock()

    def set_option(self, name: str, value: Any) -> "HttpClient":
        """Change an option value."""
        return self.set_options({name: value})

    def set_options(self, options: Mapping[str, Any]) -> "HttpClient":
        """Change several options at once; requests never see a partial update."""
        with self._lock:
            self.options = {**self.options, **options}
            if "api_limit" in options:
                self.rate_limiter.limit = options["api_limit"]
        return self

    def get_option(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def get(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a GET request; parameters go to the query string."""
        return self.request(path, parameters, "GET", request_options)

    def post(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a POST request; parameters are form-encoded in the body."""
        return self.request(path, parameters, "POST", request_options)

    def request(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        http_method: str = "GET",
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Send a request to GitHub and decode the response.

        Args:
            path: API path, e.g. "user/show/octocat"
            parameters: Query (GET) or body (POST) parameters
            http_method: "GET" or "POST"
            request_options: Options overriding the transport's for this call

        Returns:
            Decoded JSON data, or the raw body for non-JSON formats

        Raises:
            TransportError: Connection failure or timeout
            HttpError: Response status >= 400
            ApiError: GitHub returned an error payload
            ResponseDecodeError: Body is not valid JSON
        """
        with self._lock:
            options = {**self.options, **(request_options or {})}

        parameters = dict(parameters or {})
        url = self._build_url(path, options)
        headers = {"User-Agent": options["user_agent"]}
        auth = self._apply_authentication(options, parameters)

        self.rate_limiter.wait_if_needed()
        logger.debug("%s %s", http_method, url)

        try:
            if http_method == "POST":
                response = self.session.post(
                    url, data=parameters, headers=headers, auth=auth, timeout=options["timeout"]
                )
            else:
                response = self.session.get(
                    url, params=parameters, headers=headers, auth=auth, timeout=options["timeout"]
                )
        except requests.RequestException as e:
            raise TransportError(f"{http_method} {url} failed: {e}") from e

        self.rate_limiter.check_rate_limit(response)
        logger.debug("Response: %s - %d bytes", response.status_code, len(response.text))

        if response.status_code >= 400:
            raise HttpError(response.status_code, response.text[:200], url=url)

        return self.decode_response(response.text, options["format"])

    def _build_url(self, path: str, options: Dict[str, Any]) -> str:
        """Expand the url template for a path."""
        url = (
            options["url"]
            .replace(":protocol", options["protocol"])
            .replace(":format", options["format"])
            .replace(":path", quote(path.strip("/"), safe="/:@%"))
        )

        port = options.get("http_port")
        default_port = {"http": 80, "https": 443}.get(options["protocol"])
        parts = urlsplit(url)
        if port and port != default_port and parts.port is None:
            parts = parts._replace(netloc=f"{parts.netloc}:{port}")
            url = urlunsplit(parts)
        return url

    @staticmethod
    def _apply_authentication(
        options: Dict[str, Any], parameters: Dict[str, Any]
    ) -> Optional[Tuple[str, str]]:
        """
        Add credentials to the request.

        URL token credentials are added to the parameters; HTTP methods return
        a basic auth pair for requests.
        """
        method = options.get("auth_method")
        login = options.get("login")
        if not method or not login:
            return None

        method = AuthMethod.coerce(method)
        if method is AuthMethod.URL_TOKEN:
            if options.get("token"):
                parameters["login"] = login
                parameters["token"] = options["token"]
            return None
        if method is AuthMethod.HTTP_PASSWORD:
            if options.get("password") is None:
                return None
            return (login, options["password"])
        if options.get("token") is None:
            return None
        return (f"{login}/token", options["token"])

    @staticmethod
    def decode_response(body: str, response_format: str) -> Any:
        """
        Decode a response body; JSON error payloads raise ApiError.

        An empty JSON body (no content) decodes to None.
        """
        if response_format != "json":
            return body
        if not body.strip():
            return None

        try:
            data = json.loads(body)
        except ValueError as e:
            raise ResponseDecodeError(f"Invalid JSON response: {e}") from e

        if isinstance(data, dict) and "error" in data:
            error = data["error"]
            if isinstance(error, list):
                error = ", ".join(str(item) for item in error)
            raise ApiError(str(error), payload=data)

        return data

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()
