"""
Result types threaded through the provisioning pipeline.

Every creation procedure returns a :class:`CreationResult` instead of
mutating the issue it was given. The description generator reads these
results to decide between an issue's title and its URL.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from repo_epics.enums import CreationStatus
from repo_epics.models.domain import EpicIssue, Issue, IssueFromFile, RepositoryRef


@dataclass(frozen=True)
class CreationResult:
    """Tagged outcome of one create-issue request.

    Use the constructors rather than building instances directly::

        CreationResult.created(number=42, url="https://github.com/pulumi/pulumi/issues/42")
        CreationResult.skipped()
        CreationResult.failed("HTTP 422: Validation Failed")
    """

    status: CreationStatus
    number: int | None = None
    url: str | None = None
    reason: str | None = None

    @classmethod
    def created(cls, number: int, url: str) -> CreationResult:
        return cls(status=CreationStatus.CREATED, number=number, url=url)

    @classmethod
    def skipped(cls) -> CreationResult:
        return cls(status=CreationStatus.SKIPPED)

    @classmethod
    def failed(cls, reason: str) -> CreationResult:
        return cls(status=CreationStatus.FAILED, reason=reason)

    @property
    def is_created(self) -> bool:
        return self.status == CreationStatus.CREATED

    @property
    def is_failed(self) -> bool:
        return self.status == CreationStatus.FAILED


@dataclass(frozen=True)
class RepositoryChange:
    """What declaring the repository did remotely."""

    ref: RepositoryRef
    created: bool = False
    changed_fields: tuple[str, ...] = ()


@dataclass
class EpicResult:
    """Outcome of provisioning one epic and its children."""

    epic: EpicIssue
    result: CreationResult
    description: str
    children: dict[Issue, CreationResult] = field(default_factory=dict)


@dataclass
class RunReport:
    """Summary of a full provisioning run."""

    repository: RepositoryChange
    epics: list[EpicResult] = field(default_factory=list)
    work_items: dict[Issue, CreationResult] = field(default_factory=dict)
    flaky_tests: dict[IssueFromFile, CreationResult] = field(default_factory=dict)

    def all_results(self) -> list[CreationResult]:
        results: list[CreationResult] = []
        for epic in self.epics:
            results.extend(epic.children.values())
            results.append(epic.result)
        results.extend(self.work_items.values())
        results.extend(self.flaky_tests.values())
        return results

    @property
    def created(self) -> int:
        return sum(1 for r in self.all_results() if r.is_created)

    @property
    def failures(self) -> int:
        return sum(1 for r in self.all_results() if r.is_failed)
