"""
Transport configuration and authentication settings.

Options are plain name -> value pairs on the transport. Credentials are kept
as one immutable value so a new authentication replaces the previous one in
a single step.
"""

import os
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, Any, Optional, Union


class AuthMethod(str, Enum):
    """Supported authentication methods."""
    URL_TOKEN = "url_token"  # login + token passed as request parameters (deprecated)
    HTTP_PASSWORD = "http_password"  # login + password via HTTP basic auth
    HTTP_TOKEN = "http_token"  # login + token via HTTP basic auth

    @classmethod
    def coerce(cls, method: Union["AuthMethod", str, None]) -> "AuthMethod":
        """Resolve a method name, falling back to URL_TOKEN when empty."""
        if not method:
            return cls.URL_TOKEN
        if isinstance(method, cls):
            return method
        try:
            return cls(method)
        except ValueError:
            raise ValueError(
                f"Unknown authentication method '{method}', expected one of "
                f"{', '.join(m.value for m in cls)}"
            ) from None


AUTH_OPTION_NAMES = ("auth_method", "login", "password", "token")


@dataclass(frozen=True)
class Credentials:
    """Active authentication configuration for a transport."""
    method: AuthMethod = AuthMethod.URL_TOKEN
    login: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None

    @classmethod
    def build(
        cls,
        login: Optional[str],
        secret: Optional[str],
        method: Union[AuthMethod, str, None] = None,
    ) -> "Credentials":
        """
        Create credentials for a login/secret pair.

        Args:
            login: GitHub username
            secret: Password when method is HTTP_PASSWORD, API token otherwise
            method: One of AuthMethod (defaults to URL_TOKEN)
        """
        method = AuthMethod.coerce(method)
        if method is AuthMethod.HTTP_PASSWORD:
            return cls(method=method, login=login, password=secret)
        return cls(method=method, login=login, token=secret)

    @property
    def is_anonymous(self) -> bool:
        return self.login is None and self.password is None and self.token is None

    def to_options(self) -> Dict[str, Any]:
        """Full set of auth options, unused credentials reset to None."""
        return {
            "auth_method": self.method.value,
            "login": self.login,
            "password": self.password,
            "token": self.token,
        }


@dataclass
class TransportOptions:
    """Default option set of the HTTP transport."""
    protocol: str = "https"
    url: str = ":protocol://github.com/api/v2/:format/:path"
    format: str = "json"
    user_agent: str = "github-client (https://github.com/ornicar/php-github-api)"
    http_port: int = 443
    timeout: int = 10
    api_limit: Optional[int] = 60  # requests per minute, None disables throttling
    auth_method: Optional[str] = None
    login: Optional[str] = None
    password: Optional[str] = None
    token: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "TransportOptions":
        """
        Build options from GITHUB_* environment variables.

        Recognised: GITHUB_API_URL, GITHUB_API_LIMIT, GITHUB_TIMEOUT,
        GITHUB_LOGIN, GITHUB_TOKEN, GITHUB_PASSWORD, GITHUB_AUTH_METHOD.
        """
        env = os.environ if environ is None else environ
        options = cls()

        if env.get("GITHUB_API_URL"):
            options.url = env["GITHUB_API_URL"]
        if env.get("GITHUB_API_LIMIT"):
            limit = int(env["GITHUB_API_LIMIT"])
            options.api_limit = limit or None
        if env.get("GITHUB_TIMEOUT"):
            options.timeout = int(env["GITHUB_TIMEOUT"])

        login = env.get("GITHUB_LOGIN")
        password = env.get("GITHUB_PASSWORD")
        token = env.get("GITHUB_TOKEN")
        method = env.get("GITHUB_AUTH_METHOD")
        if not method and password and not token:
            method = AuthMethod.HTTP_PASSWORD.value
        if login or token or password:
            credentials = Credentials.build(
                login,
                password if AuthMethod.coerce(method) is AuthMethod.HTTP_PASSWORD else token,
                method,
            )
            for name, value in credentials.to_options().items():
                setattr(options, name, value)

        return options

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to the transport's option mapping."""
        data = asdict(self)
        extra = data.pop("extra")
        data.update(extra)
        return data
