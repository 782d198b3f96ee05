"""
Issue creation procedures.

Each procedure submits one create-issue request and reports the outcome as a
:class:`CreationResult`. Failures are logged and returned, never raised: a
failed issue does not stop the issues after it, and nothing is retried or
rolled back.
"""

from pathlib import Path

import aiofiles
import structlog

from repo_epics.engine.description import generate_description
from repo_epics.enums import IssueLabel
from repo_epics.exceptions import ExternalServiceError, IssueTextError
from repo_epics.models.domain import EpicIssue, Issue, IssueFromFile, RepositoryRef
from repo_epics.models.results import CreationResult, EpicResult
from repo_epics.providers.base import IssueProvider

log = structlog.get_logger(__name__)

EPIC_TITLE_PREFIX = "[Epic] "


def flaky_test_title(test_name: str) -> str:
    return f"`{test_name}` is flaky"


class IssueCreator:
    """Creates issues of every kind in one repository."""

    def __init__(
        self,
        provider: IssueProvider,
        repository: RepositoryRef,
        issue_texts_directory: Path | str = "issue-texts",
        url_template: str = "https://github.com/{owner}/{repo}/issues/{number}",
    ):
        """Initialize the creator.

        Args:
            provider: Remote provider issues are submitted to
            repository: Repository every issue is created in
            issue_texts_directory: Directory holding bodies of IssueFromFile issues
            url_template: Format of the URL recorded for created issues
        """
        self.provider = provider
        self.repository = repository
        self.issue_texts_directory = Path(issue_texts_directory)
        self.url_template = url_template

    def issue_url(self, number: int) -> str:
        return self.url_template.format(
            owner=self.repository.owner,
            repo=self.repository.name,
            number=number,
        )

    async def _submit(
        self,
        title: str,
        body: str,
        assignees: list[str],
        labels: list[str],
    ) -> CreationResult:
        try:
            created = await self.provider.create_issue(
                self.repository,
                title=title,
                body=body,
                assignees=assignees,
                labels=labels,
            )
        except ExternalServiceError as e:
            log.error("issue_create_failed", title=title, error=str(e))
            return CreationResult.failed(str(e))

        url = self.issue_url(created.number)
        log.info("issue_created", title=title, number=created.number, url=url)
        return CreationResult.created(number=created.number, url=url)

    async def create_task_issue(self, issue: Issue) -> CreationResult:
        """Create a child task of an epic."""
        return await self._submit(
            issue.title,
            issue.description,
            issue.assignees,
            [IssueLabel.TASK.value],
        )

    async def create_work_item(self, issue: Issue) -> CreationResult:
        """Create a standalone engineering work item."""
        return await self._submit(
            issue.title,
            issue.description,
            issue.assignees,
            [*issue.additional_labels, IssueLabel.ENGINEERING.value],
        )

    async def read_issue_text(self, relative_path: str) -> str:
        """Read an issue body from the issue-texts directory.

        Raises:
            IssueTextError: If the file cannot be read or is not UTF-8
        """
        path = self.issue_texts_directory / relative_path
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IssueTextError(f"Cannot read issue text: {e}", path=str(path)) from e

    async def create_flaky_test_issue(self, issue: IssueFromFile) -> CreationResult:
        """Create a flaky-test issue whose body comes from a file.

        When the file cannot be read nothing is submitted.
        """
        try:
            body = await self.read_issue_text(issue.description_path)
        except IssueTextError as e:
            log.error("issue_text_read_failed", title=issue.title, path=e.path, error=e.message)
            return CreationResult.failed(str(e))

        return await self._submit(
            flaky_test_title(issue.title),
            body,
            issue.assignees,
            [*issue.additional_labels, IssueLabel.ENGINEERING.value, IssueLabel.FLAKY_TEST.value],
        )

    async def create_epic_issue(self, epic: EpicIssue) -> EpicResult:
        """Create every child issue, then the epic whose checklist links them.

        Issues marked ``no_create_issue`` are skipped and show up in the
        checklist by title.
        """
        log.info("epic_started", title=epic.title)

        children: dict[Issue, CreationResult] = {}
        for issue in epic.iter_issues():
            if issue.no_create_issue:
                children[issue] = CreationResult.skipped()
                continue
            children[issue] = await self.create_task_issue(issue)

        description = generate_description(epic, children)

        result = await self._submit(
            EPIC_TITLE_PREFIX + epic.title,
            description,
            epic.assignees,
            [IssueLabel.EPIC.value],
        )
        log.info("epic_finished", title=epic.title, status=result.status.value)
        return EpicResult(epic=epic, result=result, description=description, children=children)
