"""
Object API: git trees and blobs.
"""

from typing import Any, Dict, List

from github_client.api.base import AbstractApi


class ObjectApi(AbstractApi):
    """Getting full versions of specific files and trees in your Git repositories."""

    def show_tree(self, username: str, repo: str, tree_sha: str) -> List[Dict[str, Any]]:
        """Contents of a tree (one directory level)."""
        return self.get(self.path("tree/show", username, repo, tree_sha))["tree"]

    def list_blobs(self, username: str, repo: str, tree_sha: str) -> Dict[str, str]:
        """All blobs of a tree, recursively, as path -> blob SHA."""
        return self.get(self.path("blob/all", username, repo, tree_sha))["blobs"]

    def show_blob(self, username: str, repo: str, tree_sha: str, path: str) -> Dict[str, Any]:
        """Blob metadata and contents for a file path in a tree."""
        route = self.path("blob/show", username, repo, tree_sha)
        return self.get(f"{route}/{self.file_path(path)}")["blob"]

    def get_raw_data(self, username: str, repo: str, object_sha: str) -> str:
        """Raw contents of a blob, undecoded."""
        return self.get(
            self.path("blob/show", username, repo, object_sha),
            request_options={"format": "text"},
        )
