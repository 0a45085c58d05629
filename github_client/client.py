"""
GitHub API client.

Single entry point for path-based calls to the GitHub API: owns the
transport, the authentication settings and the resource facades.
"""

import logging
import threading
from typing import Any, Dict, Optional, Union

from github_client.api import (
    API_CLASSES,
    AbstractApi,
    CommitApi,
    IssueApi,
    ObjectApi,
    OrganizationApi,
    PullRequestApi,
    RepoApi,
    ResourceKind,
    UserApi,
)
from github_client.exceptions import UnknownApiError
from github_client.options import AuthMethod, Credentials, TransportOptions
from github_client.transport import HttpClient, Transport

logger = logging.getLogger(__name__)


class Client:
    """
    Simple GitHub client.

    Usage:
        client = Client()
        client.authenticate("octocat", token, Client.AUTH_HTTP_TOKEN)
        client.get_user_api().show("octocat")
        client.get("repos/show/octocat/hello-world")

    One client is meant to be shared by a process. Facade creation and
    authentication changes are serialized, requests run on the caller's thread.
    """

    AUTH_URL_TOKEN = AuthMethod.URL_TOKEN
    AUTH_HTTP_PASSWORD = AuthMethod.HTTP_PASSWORD
    AUTH_HTTP_TOKEN = AuthMethod.HTTP_TOKEN

    def __init__(self, transport: Optional[Transport] = None):
        """
        Initialize the client.

        Args:
            transport: Custom transport (an HttpClient is created otherwise)
        """
        self.transport: Transport = transport if transport is not None else HttpClient()
        self.apis: Dict[str, AbstractApi] = {}
        self.credentials = Credentials()
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Client":
        """Create a client configured from GITHUB_* environment variables."""
        options = TransportOptions.from_env(environ)
        client = cls(HttpClient(options))
        if options.login or options.token or options.password:
            method = AuthMethod.coerce(options.auth_method)
            secret = options.password if method is AuthMethod.HTTP_PASSWORD else options.token
            client.authenticate(options.login, secret, method)
        return client

    def authenticate(
        self,
        login: Optional[str],
        secret: Optional[str],
        method: Union[AuthMethod, str, None] = None,
    ) -> None:
        """
        Authenticate all following requests.

        Args:
            login: GitHub username
            secret: Password if method is AUTH_HTTP_PASSWORD, API token otherwise
            method: One of the AUTH_* constants (defaults to AUTH_URL_TOKEN)
        """
        credentials = Credentials.build(login, secret, method)
        options = credentials.to_options()

        with self._lock:
            self.transport.set_options(options)
            self.credentials = credentials

        if credentials.is_anonymous:
            logger.debug("Cleared credentials")
        else:
            logger.debug("Authenticating as %s using %s", login, credentials.method.value)

    def deauthenticate(self) -> None:
        """Remove credentials for all following requests."""
        self.authenticate(None, None, None)

    def get(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Call any path, GET method.

        Ex: client.get("repos/show/my-username/my-repo")

        Args:
            path: GitHub API path
            parameters: GET parameters
            request_options: Transport options overridden for this request

        Returns:
            Data decoded by the transport
        """
        return self.transport.get(path, parameters or {}, request_options or {})

    def post(
        self,
        path: str,
        parameters: Optional[Dict[str, Any]] = None,
        request_options: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Call any path, POST method.

        Ex: client.post("repos/show/my-username", {"email": "my-new-email@provider.org"})
        """
        return self.transport.post(path, parameters or {}, request_options or {})

    def get_transport(self) -> Transport:
        return self.transport

    def set_transport(self, transport: Transport) -> None:
        """Replace the transport; credentials set before are not carried over."""
        self.transport = transport

    def _lazy_api(self, kind: ResourceKind) -> AbstractApi:
        api = self.apis.get(kind.value)
        if api is None:
            with self._lock:
                api = self.apis.get(kind.value)
                if api is None:
                    api = API_CLASSES[kind](self)
                    self.apis[kind.value] = api
        return api

    def get_user_api(self) -> UserApi:
        return self._lazy_api(ResourceKind.USER)

    def get_issue_api(self) -> IssueApi:
        return self._lazy_api(ResourceKind.ISSUE)

    def get_commit_api(self) -> CommitApi:
        return self._lazy_api(ResourceKind.COMMIT)

    def get_repo_api(self) -> RepoApi:
        return self._lazy_api(ResourceKind.REPO)

    def get_organization_api(self) -> OrganizationApi:
        return self._lazy_api(ResourceKind.ORGANIZATION)

    def get_object_api(self) -> ObjectApi:
        return self._lazy_api(ResourceKind.OBJECT)

    def get_pull_request_api(self) -> PullRequestApi:
        return self._lazy_api(ResourceKind.PULL_REQUEST)

    @staticmethod
    def _api_key(name: Union[ResourceKind, str]) -> str:
        if isinstance(name, ResourceKind):
            return name.value
        return str(name)

    def set_api(self, name: Union[ResourceKind, str], instance: Any) -> "Client":
        """
        Inject an API instance under a name.

        Overrides the built-in facade when name is one of ResourceKind.
        """
        with self._lock:
            self.apis[self._api_key(name)] = instance
        return self

    def get_api(self, name: Union[ResourceKind, str]) -> Any:
        """
        Get an API instance by name.

        Raises:
            UnknownApiError: Nothing was registered under name yet
        """
        key = self._api_key(name)
        try:
            return self.apis[key]
        except KeyError:
            raise UnknownApiError(key) from None
