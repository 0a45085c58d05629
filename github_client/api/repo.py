"""
Repository API.

Searching repositories, getting repository information and managing
repository settings for the authenticated user.
"""

from typing import Any, Dict, List, Optional, Union

from github_client.api.base import AbstractApi


class RepoApi(AbstractApi):
    """Searching repositories, getting repository information and managing repository information for authenticated users."""

    def search(self, query: str, language: str = "", start_page: int = 1) -> List[Dict[str, Any]]:
        """
        Search repositories by keyword.

        Args:
            query: Search keyword
            language: Restrict to a language (e.g. "python")
            start_page: Result page, 1-indexed
        """
        parameters = {"language": language.lower(), "start_page": start_page}
        return self.get(self.path("repos/search", query), parameters)["repositories"]

    def show(self, username: str, repo: str) -> Dict[str, Any]:
        return self.get(self.path("repos/show", username, repo))["repository"]

    def get_user_repos(self, username: str) -> List[Dict[str, Any]]:
        """Public repositories of a user."""
        return self.get(self.path("repos/show", username))["repositories"]

    def get_pushable_repos(self) -> List[Dict[str, Any]]:
        """Repositories the authenticated user can push to."""
        return self.get("repos/pushable")["repositories"]

    def get_repo_collaborators(self, username: str, repo: str) -> List[str]:
        return self.get(self.path("repos/show", username, repo, "collaborators"))["collaborators"]

    def create(
        self,
        name: str,
        description: str = "",
        homepage: str = "",
        public: bool = True,
    ) -> Dict[str, Any]:
        """Create a repository owned by the authenticated user."""
        parameters = {
            "name": name,
            "description": description,
            "homepage": homepage,
            "public": int(bool(public)),
        }
        return self.post("repos/create", parameters)["repository"]

    def delete(
        self, name: str, token: Optional[str] = None, force: bool = False
    ) -> Union[str, Dict[str, Any]]:
        """
        Delete a repository of the authenticated user.

        GitHub first hands out a delete token which must be posted back to
        confirm. Without a token and without force, only the token is
        returned; with force, both steps run.

        Returns:
            The delete token, or GitHub's confirmation
        """
        path = self.path("repos/delete", name)
        if token is None:
            token = self.post(path)["delete_token"]
            if not force:
                return token

        return self.post(path, {"delete_token": token})

    def set_repo_info(self, username: str, repo: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Set description, homepage, has_wiki, has_issues, has_downloads."""
        parameters = {f"values[{key}]": value for key, value in values.items()}
        return self.post(self.path("repos/show", username, repo), parameters)["repository"]

    def set_public(self, repo: str) -> Dict[str, Any]:
        return self.post(self.path("repos/set/public", repo))["repository"]

    def set_private(self, repo: str) -> Dict[str, Any]:
        return self.post(self.path("repos/set/private", repo))["repository"]

    def get_deploy_keys(self, repo: str) -> List[Dict[str, Any]]:
        return self.get(self.path("repos/keys", repo))["public_keys"]

    def add_deploy_key(self, repo: str, title: str, key: str) -> List[Dict[str, Any]]:
        parameters = {"title": title, "key": key}
        return self.post(self.path("repos/key", repo, "add"), parameters)["public_keys"]

    def remove_deploy_key(self, repo: str, key_id: int) -> List[Dict[str, Any]]:
        return self.post(self.path("repos/key", repo, "remove"), {"id": key_id})["public_keys"]

    def add_collaborator(self, repo: str, username: str) -> List[str]:
        return self.post(self.path("repos/collaborators", repo, "add", username))["collaborators"]

    def remove_collaborator(self, repo: str, username: str) -> List[str]:
        return self.post(self.path("repos/collaborators", repo, "remove", username))["collaborators"]

    def watch(self, username: str, repo: str) -> Dict[str, Any]:
        return self.post(self.path("repos/watch", username, repo))["repository"]

    def unwatch(self, username: str, repo: str) -> Dict[str, Any]:
        return self.post(self.path("repos/unwatch", username, repo))["repository"]

    def fork(self, username: str, repo: str) -> Dict[str, Any]:
        """Fork a repository into the authenticated user's account."""
        return self.post(self.path("repos/fork", username, repo))["repository"]

    def get_repo_tags(self, username: str, repo: str) -> Dict[str, str]:
        """Tag names mapped to commit SHAs."""
        return self.get(self.path("repos/show", username, repo, "tags"))["tags"]

    def get_repo_branches(self, username: str, repo: str) -> Dict[str, str]:
        """Branch names mapped to commit SHAs."""
        return self.get(self.path("repos/show", username, repo, "branches"))["branches"]

    def get_repo_watchers(self, username: str, repo: str) -> List[str]:
        return self.get(self.path("repos/show", username, repo, "watchers"))["watchers"]

    def get_repo_network(self, username: str, repo: str) -> List[Dict[str, Any]]:
        return self.get(self.path("repos/show", username, repo, "network"))["network"]

    def get_repo_languages(self, username: str, repo: str) -> Dict[str, int]:
        """Languages mapped to their size in bytes."""
        return self.get(self.path("repos/show", username, repo, "languages"))["languages"]

    def get_repo_contributors(
        self, username: str, repo: str, include_non_github: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Contributors of a repository.

        Args:
            include_non_github: Also list contributors without a GitHub account
        """
        path = self.path("repos/show", username, repo, "contributors")
        if include_non_github:
            path += "/anon"
        return self.get(path)["contributors"]
