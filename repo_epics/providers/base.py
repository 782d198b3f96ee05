"""
Abstract base class for remote provisioning providers.

A provider is the boundary to the system that actually stores repositories
and issues. Everything behind it (network, authentication, state) is opaque
to the provisioning pipeline.
"""

from abc import ABC, abstractmethod

from repo_epics.config.repository import RepositoryDeclaration
from repo_epics.models.domain import CreatedIssue, RepositoryRef
from repo_epics.models.results import RepositoryChange


class IssueProvider(ABC):
    """Abstract base class for provider implementations.

    All methods are async so blocking SDK calls can be pushed off the
    event loop. Callers await each call in order; providers are not
    required to be safe for concurrent use.
    """

    async def connect(self) -> None:
        """Open the connection to the provider. No-op by default."""

    async def disconnect(self) -> None:
        """Close the connection to the provider. No-op by default."""

    @abstractmethod
    async def apply_repository(self, declaration: RepositoryDeclaration, owner: str) -> RepositoryChange:
        """Bring the remote repository in line with its declaration.

        Creates the repository when it does not exist. Repositories are never
        deleted.

        Args:
            declaration: Desired repository settings
            owner: User or organization owning the repository

        Returns:
            RepositoryChange describing what was created or updated.

        Raises:
            ExternalServiceError: If the provider rejects a request.
        """
        pass

    @abstractmethod
    async def create_issue(
        self,
        repository: RepositoryRef,
        title: str,
        body: str,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> CreatedIssue:
        """Create a new issue.

        Args:
            repository: Repository to create the issue in
            title: Issue title
            body: Issue body, Markdown
            assignees: Logins to assign
            labels: Label names to apply

        Returns:
            CreatedIssue carrying the remote-assigned number.

        Raises:
            ExternalServiceError: If the provider rejects the request.
        """
        pass
