"""
Thin client for the GitHub web API.

- Client: authentication, generic get/post calls and resource facades
- HttpClient: default transport, built on requests
- api: user, issue, commit, repo, organization, object and pull request facades
"""

import logging

from github_client.api import ResourceKind
from github_client.client import Client
from github_client.exceptions import (
    ApiError,
    GithubClientError,
    HttpError,
    ResponseDecodeError,
    TransportError,
    UnknownApiError,
)
from github_client.options import AuthMethod, Credentials, TransportOptions
from github_client.rate_limiter import RateLimiter
from github_client.transport import HttpClient, Transport

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiError",
    "AuthMethod",
    "Client",
    "Credentials",
    "GithubClientError",
    "HttpClient",
    "HttpError",
    "RateLimiter",
    "ResourceKind",
    "ResponseDecodeError",
    "Transport",
    "TransportError",
    "TransportOptions",
    "UnknownApiError",
]
