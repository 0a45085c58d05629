"""
Pull request API.
"""

from typing import Any, Dict, List, Optional

from github_client.api.base import AbstractApi


class PullRequestApi(AbstractApi):
    """Listing, showing and creating pull requests."""

    def list_pull_requests(self, username: str, repo: str, state: str = "open") -> List[Dict[str, Any]]:
        """List pull requests of a repository by state ("open" or "closed")."""
        return self.get(self.path("pulls", username, repo, state))["pulls"]

    def show(self, username: str, repo: str, number: int) -> Dict[str, Any]:
        """Show a pull request with its discussion."""
        return self.get(self.path("pulls", username, repo, number))["pull"]

    def create(
        self,
        username: str,
        repo: str,
        base: str,
        head: str,
        title: Optional[str] = None,
        body: Optional[str] = None,
        issue_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Create a pull request.

        Either title and body describe a new pull request, or issue_id turns
        an existing issue into one.

        Args:
            base: Branch to merge into
            head: Branch (or "user:branch") holding the changes
        """
        if issue_id is None and (title is None or body is None):
            raise ValueError("A pull request needs either a title and a body, or an issue_id")

        parameters: Dict[str, Any] = {
            "pull[base]": base,
            "pull[head]": head,
        }
        if issue_id is not None:
            parameters["pull[issue]"] = issue_id
        else:
            parameters["pull[title]"] = title
            parameters["pull[body]"] = body

        return self.post(self.path("pulls", username, repo), parameters)["pull"]
