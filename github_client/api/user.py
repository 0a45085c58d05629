"""
User API: profiles, followers, SSH keys and emails.
"""

from typing import Any, Dict, List

from github_client.api.base import AbstractApi


class UserApi(AbstractApi):
    """Searching users, getting user information and managing authenticated user account information."""

    def search(self, username: str) -> List[Dict[str, Any]]:
        """Search users by username."""
        return self.get(self.path("user/search", username))["users"]

    def show(self, username: str) -> Dict[str, Any]:
        """Get extended information about a user."""
        return self.get(self.path("user/show", username))["user"]

    def update(self, username: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update the authenticated user's profile.

        Args:
            username: Authenticated user
            data: Fields to change (name, email, blog, company, location)
        """
        parameters = {f"values[{key}]": value for key, value in data.items()}
        return self.post(self.path("user/show", username), parameters)["user"]

    def get_following(self, username: str) -> List[str]:
        """Users followed by username."""
        return self.get(self.path("user/show", username, "following"))["users"]

    def get_followers(self, username: str) -> List[str]:
        """Users following username."""
        return self.get(self.path("user/show", username, "followers"))["users"]

    def follow(self, username: str) -> List[str]:
        """Make the authenticated user follow username."""
        return self.post(self.path("user/follow", username))["users"]

    def unfollow(self, username: str) -> List[str]:
        return self.post(self.path("user/unfollow", username))["users"]

    def get_watched_repos(self, username: str) -> List[Dict[str, Any]]:
        """Repositories watched by username."""
        return self.get(self.path("repos/watched", username))["repositories"]

    def get_keys(self) -> List[Dict[str, Any]]:
        """Public SSH keys of the authenticated user."""
        return self.get("user/keys")["public_keys"]

    def add_key(self, title: str, key: str) -> List[Dict[str, Any]]:
        return self.post("user/key/add", {"title": title, "key": key})["public_keys"]

    def remove_key(self, key_id: int) -> List[Dict[str, Any]]:
        return self.post("user/key/remove", {"id": key_id})["public_keys"]

    def get_emails(self) -> List[str]:
        """Email addresses of the authenticated user."""
        return self.get("user/emails")["emails"]

    def add_email(self, email: str) -> List[str]:
        return self.post("user/email/add", {"email": email})["emails"]

    def remove_email(self, email: str) -> List[str]:
        return self.post("user/email/remove", {"email": email})["emails"]
