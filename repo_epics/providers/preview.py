"""In-memory provider used by ``repo-epics preview``.

Nothing leaves the process: the repository declaration is recorded and
reported as unchanged, and issues get sequential numbers. Every request is
kept in :attr:`PreviewProvider.requests` in submission order.

Example:
    >>> provider = PreviewProvider(start_number=100)
    >>> created = await provider.create_issue(ref, "Implement X", "", labels=["kind/task"])
    >>> created.number
    100
    >>> provider.requests[0].labels
    ['kind/task']
"""

from dataclasses import dataclass, field

import structlog

from repo_epics.config.repository import RepositoryDeclaration
from repo_epics.models.domain import CreatedIssue, RepositoryRef
from repo_epics.models.results import RepositoryChange
from repo_epics.providers.base import IssueProvider

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class IssueRequest:
    """A create-issue request as submitted to the provider."""

    repository: RepositoryRef
    title: str
    body: str
    assignees: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)


class PreviewProvider(IssueProvider):
    """Provider that records requests instead of sending them."""

    def __init__(self, start_number: int = 1, html_url_base: str = "https://github.com"):
        if start_number < 1:
            raise ValueError("start_number must be positive")
        self.next_number = start_number
        self.html_url_base = html_url_base.rstrip("/")
        self.declarations: list[RepositoryDeclaration] = []
        self.requests: list[IssueRequest] = []

    async def apply_repository(self, declaration: RepositoryDeclaration, owner: str) -> RepositoryChange:
        self.declarations.append(declaration)
        ref = declaration.ref(owner)
        log.info("preview_repository", repository=ref.full_name)
        return RepositoryChange(ref=ref)

    async def create_issue(
        self,
        repository: RepositoryRef,
        title: str,
        body: str,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> CreatedIssue:
        self.requests.append(
            IssueRequest(
                repository=repository,
                title=title,
                body=body,
                assignees=list(assignees or []),
                labels=list(labels or []),
            )
        )
        number = self.next_number
        self.next_number += 1
        log.info("preview_issue", title=title, number=number)
        return CreatedIssue(
            number=number,
            html_url=f"{self.html_url_base}/{repository.full_name}/issues/{number}",
        )
