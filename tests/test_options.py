"""
Unit tests for credentials and transport options.
"""

import pytest

from github_client import AuthMethod, Credentials, TransportOptions


class TestAuthMethod:

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_defaults_to_url_token(self, value):
        assert AuthMethod.coerce(value) is AuthMethod.URL_TOKEN

    def test_from_string(self):
        assert AuthMethod.coerce("http_token") is AuthMethod.HTTP_TOKEN

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown authentication method"):
            AuthMethod.coerce("oauth")


class TestCredentials:

    def test_password_method_uses_password(self):
        credentials = Credentials.build("alice", "secret", AuthMethod.HTTP_PASSWORD)

        assert credentials.password == "secret"
        assert credentials.token is None

    @pytest.mark.parametrize("method", [AuthMethod.URL_TOKEN, AuthMethod.HTTP_TOKEN, None])
    def test_token_methods_use_token(self, method):
        credentials = Credentials.build("alice", "t0k", method)

        assert credentials.token == "t0k"
        assert credentials.password is None

    def test_to_options_lists_every_auth_option(self):
        options = Credentials.build("alice", "secret", AuthMethod.HTTP_PASSWORD).to_options()

        assert options == {
            "auth_method": "http_password",
            "login": "alice",
            "password": "secret",
            "token": None,
        }

    def test_anonymous(self):
        assert Credentials().is_anonymous
        assert Credentials.build(None, None, None).is_anonymous
        assert not Credentials.build("alice", "t0k").is_anonymous

    def test_immutable(self):
        credentials = Credentials.build("alice", "t0k")
        with pytest.raises(AttributeError):
            credentials.login = "bob"


class TestTransportOptions:

    def test_to_dict_merges_extra(self):
        options = TransportOptions(timeout=5, extra={"proxy": "http://proxy:3128"})
        data = options.to_dict()

        assert data["timeout"] == 5
        assert data["proxy"] == "http://proxy:3128"
        assert "extra" not in data

    def test_from_empty_env(self):
        options = TransportOptions.from_env({})

        assert options == TransportOptions()

    def test_from_env_token(self):
        options = TransportOptions.from_env({
            "GITHUB_LOGIN": "alice",
            "GITHUB_TOKEN": "t0k",
            "GITHUB_AUTH_METHOD": "http_token",
        })

        assert options.auth_method == "http_token"
        assert options.login == "alice"
        assert options.token == "t0k"
        assert options.password is None

    def test_from_env_password_implies_http_password(self):
        options = TransportOptions.from_env({"GITHUB_LOGIN": "alice", "GITHUB_PASSWORD": "secret"})

        assert options.auth_method == "http_password"
        assert options.password == "secret"

    def test_from_env_settings(self):
        options = TransportOptions.from_env({
            "GITHUB_API_URL": "http://localhost:8080/api/v2/:format/:path",
            "GITHUB_API_LIMIT": "0",
            "GITHUB_TIMEOUT": "30",
        })

        assert options.url == "http://localhost:8080/api/v2/:format/:path"
        assert options.api_limit is None
        assert options.timeout == 30
