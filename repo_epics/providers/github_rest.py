"""GitHub provider implementation using PyGithub."""

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from github import Github, GithubException  # type: ignore[import-not-found]
from github.Repository import Repository as GHRepository  # type: ignore[import-not-found]
from requests.exceptions import RequestException

from repo_epics.config.repository import RepositoryDeclaration
from repo_epics.exceptions import ExternalServiceError
from repo_epics.models.domain import CreatedIssue, RepositoryRef
from repo_epics.models.results import RepositoryChange
from repo_epics.providers.base import IssueProvider

log = structlog.get_logger(__name__)

T = TypeVar("T")


async def _run_sync(func: Callable[[], T]) -> T:
    """Run a synchronous PyGithub call in a thread pool."""
    return await asyncio.to_thread(func)


def _to_service_error(message: str, e: GithubException) -> ExternalServiceError:
    detail = e.data.get("message") if isinstance(e.data, dict) else None
    return ExternalServiceError(
        f"{message}: {detail or e}",
        status_code=e.status,
        response_text=str(e.data) if e.data is not None else None,
    )


def _transport_error(message: str, e: Exception) -> ExternalServiceError:
    """Wrap a failure that never produced an HTTP response."""
    return ExternalServiceError(f"{message}: {e}")


def diff_settings(current: dict[str, Any], desired: dict[str, Any]) -> dict[str, Any]:
    """Return the part of ``desired`` that differs from ``current``.

    Nested mappings (``security_and_analysis``) are compared key by key so
    that only the changed toggles are sent.
    """
    changes: dict[str, Any] = {}
    for key, value in desired.items():
        existing = current.get(key)
        if isinstance(value, dict):
            nested = diff_settings(existing if isinstance(existing, dict) else {}, value)
            if nested:
                changes[key] = nested
        elif existing != value:
            changes[key] = value
    return changes


class GitHubRestProvider(IssueProvider):
    """GitHub implementation using the PyGithub library."""

    def __init__(self, token: str, base_url: str = "https://api.github.com"):
        """Initialize GitHub provider.

        Args:
            token: GitHub personal access token or App token
            base_url: GitHub API base URL (for GitHub Enterprise)
        """
        self.token = token.strip() if token else token
        self.base_url = base_url.rstrip("/")
        self._client: Github | None = None
        self._repos: dict[str, GHRepository] = {}

    async def connect(self) -> None:
        """Initialize GitHub client."""
        self._client = await _run_sync(lambda: Github(self.token, base_url=self.base_url))
        log.info("github_connected", base_url=self.base_url)

    async def disconnect(self) -> None:
        """Close GitHub client."""
        if self._client:
            await _run_sync(self._client.close)
            self._client = None
            self._repos = {}

    @property
    def client(self) -> Github:
        if self._client is None:
            raise ConnectionError("GitHub provider is not connected")
        return self._client

    async def apply_repository(self, declaration: RepositoryDeclaration, owner: str) -> RepositoryChange:
        """Create or update the repository so it matches the declaration."""
        ref = declaration.ref(owner)
        log.info("apply_repository", repository=ref.full_name)

        def _apply() -> RepositoryChange:
            created = False
            try:
                repo = self.client.get_repo(ref.full_name)
            except GithubException as e:
                if e.status != 404:
                    raise
                repo = self._create_repository(declaration, owner)
                created = True

            changed: list[str] = []

            updates = diff_settings(repo.raw_data, declaration.to_update_payload())
            if updates:
                self.client.requester.requestJsonAndCheck("PATCH", repo.url, input=updates)
                changed.extend(updates)

            topics = list(declaration.topics)
            if repo.get_topics() != topics:
                repo.replace_topics(topics)
                changed.append("topics")

            if repo.get_vulnerability_alert() != declaration.vulnerability_alerts:
                if declaration.vulnerability_alerts:
                    repo.enable_vulnerability_alert()
                else:
                    repo.disable_vulnerability_alert()
                changed.append("vulnerability_alerts")

            self._repos[ref.full_name] = repo
            return RepositoryChange(ref=ref, created=created, changed_fields=tuple(changed))

        try:
            change = await _run_sync(_apply)
        except GithubException as e:
            log.error("github_apply_repository_failed", repository=ref.full_name, error=str(e))
            raise _to_service_error(f"Failed to apply repository {ref.full_name}", e) from e
        except (RequestException, ConnectionError) as e:
            log.error("github_apply_repository_failed", repository=ref.full_name, error=str(e))
            raise _transport_error(f"Failed to apply repository {ref.full_name}", e) from e

        log.info(
            "repository_applied",
            repository=ref.full_name,
            created=change.created,
            changed_fields=list(change.changed_fields),
        )
        return change

    def _create_repository(self, declaration: RepositoryDeclaration, owner: str) -> GHRepository:
        user = self.client.get_user()
        creator = user if user.login.lower() == owner.lower() else self.client.get_organization(owner)
        log.info("github_create_repository", owner=owner, name=declaration.name)
        return creator.create_repo(
            declaration.name,
            description=declaration.description,
            private=declaration.visibility != "public",
        )

    def _get_repo(self, repository: RepositoryRef) -> GHRepository:
        repo = self._repos.get(repository.full_name)
        if repo is None:
            repo = self.client.get_repo(repository.full_name)
            self._repos[repository.full_name] = repo
        return repo

    async def create_issue(
        self,
        repository: RepositoryRef,
        title: str,
        body: str,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
    ) -> CreatedIssue:
        """Create a new issue."""
        log.info("create_issue", repository=repository.full_name, title=title, labels=labels)

        def _create() -> CreatedIssue:
            gh_issue = self._get_repo(repository).create_issue(
                title=title,
                body=body,
                assignees=assignees or [],
                labels=labels or [],
            )
            return CreatedIssue(number=gh_issue.number, html_url=gh_issue.html_url)

        try:
            return await _run_sync(_create)
        except GithubException as e:
            log.error("github_create_issue_failed", title=title, error=str(e))
            raise _to_service_error(f"Failed to create issue {title!r}", e) from e
        except (RequestException, ConnectionError) as e:
            log.error("github_create_issue_failed", title=title, error=str(e))
            raise _transport_error(f"Failed to create issue {title!r}", e) from e
