"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from repo_epics.config.settings import GitHubConfig, ProvisioningSettings, WorkflowConfig
from repo_epics.models.domain import CreatedIssue, EpicIssue, Issue, RepositoryRef, Section
from repo_epics.models.results import RepositoryChange
from repo_epics.providers.base import IssueProvider


@pytest.fixture
def repository_ref() -> RepositoryRef:
    """The repository issues are created in."""
    return RepositoryRef(owner="pulumi", name="pulumi")


@pytest.fixture
def issue_texts_dir(tmp_path: Path) -> Path:
    """Issue-texts directory holding the flaky test body used by the catalog."""
    texts = tmp_path / "issue-texts"
    texts.mkdir()
    (texts / "TestGoTransformations.md").write_text("Fails on CI about once a day.\n", encoding="utf-8")
    return texts


@pytest.fixture
def settings(issue_texts_dir: Path) -> ProvisioningSettings:
    """Settings pointing at the temporary issue-texts directory."""
    return ProvisioningSettings(
        github=GitHubConfig(api_token="test-token", owner="pulumi"),
        workflow=WorkflowConfig(issue_texts_directory=str(issue_texts_dir)),
    )


@pytest.fixture
def design_doc() -> Issue:
    return Issue(title="Write design doc", no_create_issue=True)


@pytest.fixture
def implement_x() -> Issue:
    return Issue(title="Implement X", description="Do the thing")


@pytest.fixture
def small_epic(design_doc: Issue, implement_x: Issue) -> EpicIssue:
    """Epic with one section holding a title-only issue and a real one."""
    return EpicIssue(
        title="Small Epic",
        description="Epic body",
        assignees=["octocat"],
        sections=[Section(title="Design", issues=[design_doc, implement_x])],
    )


@pytest.fixture
def mock_provider(repository_ref: RepositoryRef) -> AsyncMock:
    """Provider mock that assigns issue numbers 42, 43, 44, ..."""
    provider = AsyncMock(spec=IssueProvider)
    numbers = iter(range(42, 1000))

    async def _create_issue(repository, title, body, assignees=None, labels=None):
        number = next(numbers)
        return CreatedIssue(number=number, html_url=f"https://github.com/{repository.full_name}/issues/{number}")

    provider.create_issue = AsyncMock(side_effect=_create_issue)
    provider.apply_repository = AsyncMock(return_value=RepositoryChange(ref=repository_ref))
    return provider
