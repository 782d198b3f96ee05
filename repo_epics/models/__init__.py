"""Domain and result models for repo-epics."""

from repo_epics.models.domain import (
    CreatedIssue,
    EpicIssue,
    Issue,
    IssueFromFile,
    ProvisioningPlan,
    RepositoryRef,
    Section,
)
from repo_epics.models.results import CreationResult, EpicResult, RepositoryChange, RunReport

__all__ = [
    "CreatedIssue",
    "CreationResult",
    "EpicIssue",
    "EpicResult",
    "Issue",
    "IssueFromFile",
    "ProvisioningPlan",
    "RepositoryChange",
    "RepositoryRef",
    "RunReport",
    "Section",
]
