"""
Issue API: listing, searching, editing issues, their labels and comments.
"""

from typing import Any, Dict, List

from github_client.api.base import AbstractApi

ISSUE_STATES = ("open", "closed")


class IssueApi(AbstractApi):
    """Listing issues, searching, editing and closing your projects issues."""

    @staticmethod
    def _check_state(state: str) -> str:
        if state not in ISSUE_STATES:
            raise ValueError(f"Issue state must be one of {ISSUE_STATES}, got '{state}'")
        return state

    def get_list(self, username: str, repo: str, state: str = "open") -> List[Dict[str, Any]]:
        """List issues of a repository by state."""
        state = self._check_state(state)
        return self.get(self.path("issues/list", username, repo, state))["issues"]

    def search(
        self, username: str, repo: str, state: str, search_string: str
    ) -> List[Dict[str, Any]]:
        """Search issues of a repository by state and keyword."""
        state = self._check_state(state)
        return self.get(self.path("issues/search", username, repo, state, search_string))["issues"]

    def search_label(self, username: str, repo: str, label: str) -> List[Dict[str, Any]]:
        """List issues carrying a label."""
        return self.get(self.path("issues/list", username, repo, "label", label))["issues"]

    def show(self, username: str, repo: str, number: int) -> Dict[str, Any]:
        return self.get(self.path("issues/show", username, repo, number))["issue"]

    def open(self, username: str, repo: str, title: str, body: str) -> Dict[str, Any]:
        """Create a new issue; requires authentication."""
        parameters = {"title": title, "body": body}
        return self.post(self.path("issues/open", username, repo), parameters)["issue"]

    def close(self, username: str, repo: str, number: int) -> Dict[str, Any]:
        return self.post(self.path("issues/close", username, repo, number))["issue"]

    def reopen(self, username: str, repo: str, number: int) -> Dict[str, Any]:
        return self.post(self.path("issues/reopen", username, repo, number))["issue"]

    def update(self, username: str, repo: str, number: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Edit an issue.

        Args:
            data: New title and/or body
        """
        return self.post(self.path("issues/edit", username, repo, number), dict(data))["issue"]

    def get_labels(self, username: str, repo: str) -> List[str]:
        return self.get(self.path("issues/labels", username, repo))["labels"]

    def add_label(self, username: str, repo: str, label: str, number: int) -> List[str]:
        """Add a label to an issue, creating the label when needed."""
        return self.post(self.path("issues/label/add", username, repo, label, number))["labels"]

    def remove_label(self, username: str, repo: str, label: str, number: int) -> List[str]:
        return self.post(self.path("issues/label/remove", username, repo, label, number))["labels"]

    def get_comments(self, username: str, repo: str, number: int) -> List[Dict[str, Any]]:
        return self.get(self.path("issues/comments", username, repo, number))["comments"]

    def add_comment(self, username: str, repo: str, number: int, body: str) -> Dict[str, Any]:
        parameters = {"comment": body}
        return self.post(self.path("issues/comment", username, repo, number), parameters)["comment"]
