"""
Organization API.
"""

from typing import Any, Dict, List, Optional

from github_client.api.base import AbstractApi

TEAM_PERMISSIONS = ("pull", "push", "admin")


class OrganizationApi(AbstractApi):
    """Getting organization information and managing authenticated organization account information."""

    def show(self, name: str) -> Dict[str, Any]:
        return self.get(self.path("organizations", name))["organization"]

    def get_all_repos(self) -> List[Dict[str, Any]]:
        """Repositories of all organizations the authenticated user belongs to."""
        return self.get("organizations/repositories")["repositories"]

    def get_public_repos(self, name: str) -> List[Dict[str, Any]]:
        return self.get(self.path("organizations", name, "public_repositories"))["repositories"]

    def get_public_members(self, name: str) -> List[Dict[str, Any]]:
        return self.get(self.path("organizations", name, "public_members"))["users"]

    def get_teams(self, name: str) -> List[Dict[str, Any]]:
        return self.get(self.path("organizations", name, "teams"))["teams"]

    def add_team(
        self,
        organization: str,
        team: str,
        permission: str,
        repositories: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Create a team in an organization.

        Args:
            organization: Organization login
            team: Team name
            permission: One of "pull", "push", "admin"
            repositories: "owner/repo" names the team gets access to
        """
        if permission not in TEAM_PERMISSIONS:
            raise ValueError(f"Permission must be one of {TEAM_PERMISSIONS}, got '{permission}'")

        parameters: Dict[str, Any] = {
            "team[name]": team,
            "team[permission]": permission,
        }
        if repositories:
            parameters["team[repo_names][]"] = list(repositories)

        return self.post(self.path("organizations", organization, "teams"), parameters)["team"]
