"""
Commit API.
"""

from typing import Any, Dict, List

from github_client.api.base import AbstractApi


class CommitApi(AbstractApi):
    """Getting information on specific commits, the diffs they introduce and the files they touched."""

    def get_branch_commits(self, username: str, repo: str, branch: str) -> List[Dict[str, Any]]:
        """List commits on a branch."""
        return self.get(self.path("commits/list", username, repo, branch))["commits"]

    def get_file_commits(
        self, username: str, repo: str, branch: str, path: str
    ) -> List[Dict[str, Any]]:
        """List commits touching a file path on a branch."""
        route = self.path("commits/list", username, repo, branch)
        return self.get(f"{route}/{self.file_path(path)}")["commits"]

    def get_commit(self, username: str, repo: str, sha: str) -> Dict[str, Any]:
        """Show one commit with its diff and modified files."""
        return self.get(self.path("commits/show", username, repo, sha))["commit"]
