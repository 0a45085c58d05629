"""
Unit tests for the requests-based HttpClient transport.
"""

from unittest.mock import Mock

import pytest
import requests

from github_client import (
    ApiError,
    HttpClient,
    HttpError,
    RateLimiter,
    ResponseDecodeError,
    TransportError,
)
from tests.conftest import make_response

USER_AGENT = "github-client (https://github.com/ornicar/php-github-api)"


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.get.return_value = make_response(text='{"user": {"login": "octocat"}}')
    session.post.return_value = make_response(text='{"repository": {"name": "hello"}}')
    return session


@pytest.fixture
def http_client(session):
    return HttpClient(options={"api_limit": None}, session=session)


class TestRequests:
    """Test URL building and request dispatch."""

    def test_get_request(self, http_client, session):
        result = http_client.get("user/show/octocat", {"page": 2}, {})

        assert result == {"user": {"login": "octocat"}}
        session.get.assert_called_once_with(
            "https://github.com/api/v2/json/user/show/octocat",
            params={"page": 2},
            headers={"User-Agent": USER_AGENT},
            auth=None,
            timeout=10,
        )

    def test_post_request(self, http_client, session):
        result = http_client.post("repos/create", {"name": "hello"}, {})

        assert result == {"repository": {"name": "hello"}}
        session.post.assert_called_once_with(
            "https://github.com/api/v2/json/repos/create",
            data={"name": "hello"},
            headers={"User-Agent": USER_AGENT},
            auth=None,
            timeout=10,
        )

    def test_path_is_quoted(self, http_client, session):
        http_client.get("/repos/search/hello world/", {}, {})
        assert session.get.call_args[0][0] == "https://github.com/api/v2/json/repos/search/hello%20world"

    def test_custom_port(self, session):
        http_client = HttpClient(options={"api_limit": None, "http_port": 8443}, session=session)
        http_client.get("user/show/octocat")
        assert session.get.call_args[0][0] == "https://github.com:8443/api/v2/json/user/show/octocat"

    @pytest.mark.parametrize("template,expected", [
        (":protocol://Proxy.Example/api/v2/:format/:path", "https://Proxy.Example:8443/api/v2/json/x"),
        (":protocol://bot@github.com/api/v2/:format/:path", "https://bot@github.com:8443/api/v2/json/x"),
        (":protocol://[::1]/api/v2/:format/:path", "https://[::1]:8443/api/v2/json/x"),
    ])
    def test_custom_port_keeps_netloc(self, session, template, expected):
        http_client = HttpClient(
            options={"api_limit": None, "http_port": 8443, "url": template}, session=session
        )
        http_client.get("x")
        assert session.get.call_args[0][0] == expected

    def test_escaped_segments_not_quoted_twice(self, http_client, session):
        http_client.get("commits/list/octocat/hello/feature%2Fx", {}, {})
        assert session.get.call_args[0][0] == (
            "https://github.com/api/v2/json/commits/list/octocat/hello/feature%2Fx"
        )

    def test_empty_body_decodes_to_none(self, http_client, session):
        session.post.return_value = make_response(text="")
        assert http_client.post("user/key/remove", {"id": 1}) is None

    def test_malformed_rate_limit_header_ignored(self, http_client, session):
        session.get.return_value = make_response(
            text='{"a": 1}', headers={"X-RateLimit-Remaining": "abc"}
        )
        assert http_client.get("x") == {"a": 1}

    def test_request_options_apply_to_one_call(self, http_client, session):
        session.get.return_value = make_response(text="raw blob contents")

        result = http_client.get("blob/show/octocat/hello/abc", {}, {"format": "text", "timeout": 60})

        assert result == "raw blob contents"
        url = session.get.call_args[0][0]
        assert url == "https://github.com/api/v2/text/blob/show/octocat/hello/abc"
        assert session.get.call_args[1]["timeout"] == 60
        assert http_client.get_option("format") == "json"

    def test_parameters_not_mutated(self, http_client):
        http_client.set_options({"auth_method": "url_token", "login": "alice", "token": "t0k"})
        parameters = {"page": 1}

        http_client.get("user/show/alice", parameters)

        assert parameters == {"page": 1}

    def test_rate_limiter_consulted(self, session):
        rate_limiter = Mock(spec=RateLimiter)
        http_client = HttpClient(session=session, rate_limiter=rate_limiter)

        http_client.get("user/show/octocat")

        rate_limiter.wait_if_needed.assert_called_once_with()
        rate_limiter.check_rate_limit.assert_called_once_with(session.get.return_value)


class TestAuthentication:
    """Test how each auth method reaches the request."""

    def test_url_token(self, http_client, session):
        http_client.set_options({"auth_method": "url_token", "login": "alice", "token": "t0k"})

        http_client.get("user/show/alice")

        kwargs = session.get.call_args[1]
        assert kwargs["params"] == {"login": "alice", "token": "t0k"}
        assert kwargs["auth"] is None

    def test_http_password(self, http_client, session):
        http_client.set_options({"auth_method": "http_password", "login": "alice", "password": "secret"})

        http_client.get("user/show/alice")

        assert session.get.call_args[1]["auth"] == ("alice", "secret")
        assert session.get.call_args[1]["params"] == {}

    def test_http_token(self, http_client, session):
        http_client.set_options({"auth_method": "http_token", "login": "alice", "token": "t0k"})

        http_client.post("user/follow/octocat")

        assert session.post.call_args[1]["auth"] == ("alice/token", "t0k")

    def test_cleared_credentials_send_nothing(self, http_client, session):
        http_client.set_options({"auth_method": "url_token", "login": None, "password": None, "token": None})

        http_client.get("user/show/octocat")

        kwargs = session.get.call_args[1]
        assert kwargs["params"] == {}
        assert kwargs["auth"] is None


class TestErrors:
    """Test error reporting."""

    def test_http_error(self, http_client, session):
        session.get.return_value = make_response(status_code=404, text="Not Found")

        with pytest.raises(HttpError) as exc_info:
            http_client.get("user/show/nobody")

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://github.com/api/v2/json/user/show/nobody"
        assert isinstance(exc_info.value, TransportError)

    def test_http_error_with_malformed_rate_limit_header(self, http_client, session):
        session.get.return_value = make_response(
            status_code=503, text="Unavailable", headers={"X-RateLimit-Remaining": "abc"}
        )

        with pytest.raises(HttpError) as exc_info:
            http_client.get("user/show/octocat")

        assert exc_info.value.status_code == 503

    def test_error_payload(self, http_client, session):
        session.get.return_value = make_response(text='{"error": ["not found"]}')

        with pytest.raises(ApiError, match="not found") as exc_info:
            http_client.get("user/show/nobody")

        assert exc_info.value.payload == {"error": ["not found"]}

    def test_invalid_json(self, http_client, session):
        session.get.return_value = make_response(text="<html>oops</html>")

        with pytest.raises(ResponseDecodeError):
            http_client.get("user/show/octocat")

    def test_connection_error(self, http_client, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(TransportError) as exc_info:
            http_client.get("user/show/octocat")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


class TestOptions:
    """Test option handling."""

    def test_defaults(self):
        http_client = HttpClient(session=Mock())

        assert http_client.get_option("url") == ":protocol://github.com/api/v2/:format/:path"
        assert http_client.get_option("timeout") == 10
        assert http_client.get_option("api_limit") == 60
        assert http_client.rate_limiter.limit == 60

    def test_set_option_is_chainable(self, http_client):
        assert http_client.set_option("timeout", 20).set_option("format", "xml") is http_client
        assert http_client.get_option("timeout") == 20
        assert http_client.get_option("format") == "xml"

    def test_api_limit_updates_rate_limiter(self, http_client):
        http_client.set_option("api_limit", 30)
        assert http_client.rate_limiter.limit == 30

    def test_close(self, http_client, session):
        http_client.close()
        session.close.assert_called_once_with()
