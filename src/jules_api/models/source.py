"""
Source models — connected repositories and the context a session starts from.
"""

from typing import Any, Optional

from pydantic import field_validator

from jules_api.models.base import JulesModel


class GitHubBranch(JulesModel):
    display_name: Optional[str] = None


class GitHubRepo(JulesModel):
    owner: Optional[str] = None
    repo: Optional[str] = None
    is_private: Optional[bool] = None
    default_branch: Optional[GitHubBranch] = None
    branches: list[GitHubBranch] = []

    @field_validator("branches", mode="before")
    @classmethod
    def _default_branches(cls, value: Any) -> Any:
        return value or []

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class Source(JulesModel):
    """A repository connected to the Jules account, e.g. sources/github/owner/repo."""

    name: Optional[str] = None
    id: Optional[str] = None
    github_repo: Optional[GitHubRepo] = None


class GitHubRepoContext(JulesModel):
    starting_branch: Optional[str] = None


class SourceContext(JulesModel):
    source: Optional[str] = None
    github_repo_context: Optional[GitHubRepoContext] = None

    @property
    def starting_branch(self) -> Optional[str]:
        if self.github_repo_context is None:
            return None
        return self.github_repo_context.starting_branch

    @staticmethod
    def build(source: str, starting_branch: str) -> dict[str, Any]:
        """Wire-shaped sourceContext for a create-session request."""
        return {
            "source": source,
            "githubRepoContext": {"startingBranch": starting_branch},
        }
