"""
Declarative repository configuration.

A RepositoryDeclaration is the desired state of a single GitHub repository.
It is built once from static literals and is immutable afterwards.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from repo_epics.models.domain import RepositoryRef

ScanStatus = Literal["enabled", "disabled"]


class SecurityAndAnalysisConfig(BaseModel):
    """Secret scanning toggles of a repository."""

    model_config = ConfigDict(frozen=True)

    secret_scanning: ScanStatus = Field(default="disabled", description="Secret scanning status")
    secret_scanning_push_protection: ScanStatus = Field(
        default="disabled", description="Secret scanning push protection status"
    )

    def to_payload(self) -> dict[str, dict[str, str]]:
        return {
            "secret_scanning": {"status": self.secret_scanning},
            "secret_scanning_push_protection": {"status": self.secret_scanning_push_protection},
        }


class RepositoryDeclaration(BaseModel):
    """Desired settings of a GitHub repository."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Repository name")
    description: str = Field(default="", description="Short repository description")
    homepage_url: str | None = Field(default=None, description="Project homepage")
    default_branch: str = Field(default="main", description="Default branch name")
    delete_branch_on_merge: bool = Field(default=False, description="Delete head branches after merge")
    has_discussions: bool = Field(default=False, description="Enable GitHub Discussions")
    has_downloads: bool = Field(default=False, description="Enable downloads")
    has_issues: bool = Field(default=True, description="Enable issues")
    has_projects: bool = Field(default=False, description="Enable projects")
    has_wiki: bool = Field(default=False, description="Enable the wiki")
    squash_merge_commit_message: Literal["PR_BODY", "COMMIT_MESSAGES", "BLANK"] = Field(
        default="COMMIT_MESSAGES", description="Default squash merge commit message"
    )
    squash_merge_commit_title: Literal["PR_TITLE", "COMMIT_OR_PR_TITLE"] = Field(
        default="COMMIT_OR_PR_TITLE", description="Default squash merge commit title"
    )
    topics: tuple[str, ...] = Field(default=(), description="Repository topics, in display order")
    visibility: Literal["public", "private", "internal"] = Field(default="public", description="Visibility")
    vulnerability_alerts: bool = Field(default=False, description="Enable Dependabot vulnerability alerts")
    security_and_analysis: SecurityAndAnalysisConfig = Field(default_factory=SecurityAndAnalysisConfig)

    def ref(self, owner: str) -> RepositoryRef:
        """Get the reference issue creation targets for this repository."""
        return RepositoryRef(owner=owner, name=self.name)

    def to_update_payload(self) -> dict[str, Any]:
        """Build the body of ``PATCH /repos/{owner}/{repo}``.

        Topics and vulnerability alerts live behind their own endpoints and
        are not part of the payload.
        """
        payload: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "homepage": self.homepage_url,
            "default_branch": self.default_branch,
            "delete_branch_on_merge": self.delete_branch_on_merge,
            "has_discussions": self.has_discussions,
            "has_downloads": self.has_downloads,
            "has_issues": self.has_issues,
            "has_projects": self.has_projects,
            "has_wiki": self.has_wiki,
            "squash_merge_commit_message": self.squash_merge_commit_message,
            "squash_merge_commit_title": self.squash_merge_commit_title,
            "visibility": self.visibility,
            "security_and_analysis": self.security_and_analysis.to_payload(),
        }
        return {k: v for k, v in payload.items() if v is not None}
