"""
Resource facades for the GitHub API.

Each facade is built with the Client it belongs to and delegates every call
to `Client.get` / `Client.post`.
"""

from enum import Enum
from typing import Dict, Type

from github_client.api.base import AbstractApi
from github_client.api.commit import CommitApi
from github_client.api.git_object import ObjectApi
from github_client.api.issue import IssueApi
from github_client.api.organization import OrganizationApi
from github_client.api.pull_request import PullRequestApi
from github_client.api.repo import RepoApi
from github_client.api.user import UserApi


class ResourceKind(str, Enum):
    """Built-in facade names."""
    USER = "user"
    ISSUE = "issue"
    COMMIT = "commit"
    REPO = "repo"
    ORGANIZATION = "organization"
    OBJECT = "object"
    PULL_REQUEST = "pull_request"


API_CLASSES: Dict[ResourceKind, Type[AbstractApi]] = {
    ResourceKind.USER: UserApi,
    ResourceKind.ISSUE: IssueApi,
    ResourceKind.COMMIT: CommitApi,
    ResourceKind.REPO: RepoApi,
    ResourceKind.ORGANIZATION: OrganizationApi,
    ResourceKind.OBJECT: ObjectApi,
    ResourceKind.PULL_REQUEST: PullRequestApi,
}

__all__ = [
    "AbstractApi",
    "API_CLASSES",
    "CommitApi",
    "IssueApi",
    "ObjectApi",
    "OrganizationApi",
    "PullRequestApi",
    "RepoApi",
    "ResourceKind",
    "UserApi",
]
