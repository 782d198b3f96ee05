"""
Domain models for provisioned issues.

An epic is a tree: the epic holds sections, sections hold issues and
sub-sections. Records are built once from static literals and never mutated
by the provisioning pipeline; what happened to each issue remotely is carried
separately by :class:`repo_epics.models.results.CreationResult`.

Issue records compare by identity so that they can key result mappings even
when two issues share a title.

Example:
    Declaring a small epic::

        epic = EpicIssue(
            title="Programmatic Default Providers",
            description="Track the work ...",
            related_issues=[2059],
            sections=[
                Section(
                    title="Design",
                    issues=[Issue(title="Write design doc", no_create_issue=True, done=True)],
                ),
            ],
        )
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repo_epics.config.repository import RepositoryDeclaration


@dataclass(eq=False)
class Issue:
    """A leaf work item, either a child of an epic or standalone."""

    title: str
    description: str = ""
    assignees: list[str] = field(default_factory=list)
    additional_labels: list[str] = field(default_factory=list)

    no_create_issue: bool = False
    """Render the title in the epic checklist instead of creating an issue."""

    done: bool = False
    """Render the checklist entry as ticked."""

    additional_text: str = ""
    """Appended in parentheses after the checklist entry when non-empty."""


@dataclass(eq=False)
class IssueFromFile:
    """An issue whose body is read from the issue-texts directory."""

    title: str
    description_path: str
    assignees: list[str] = field(default_factory=list)
    additional_labels: list[str] = field(default_factory=list)


@dataclass(eq=False)
class Section:
    """A titled group of issues inside an epic, with optional sub-sections."""

    title: str
    issues: list[Issue] = field(default_factory=list)
    sub_sections: list[Section] = field(default_factory=list)

    def walk(self, depth: int = 0) -> Iterator[tuple[int, Section]]:
        """Yield ``(depth, section)`` pairs, this section first, then sub-sections depth first."""
        yield depth, self
        for sub_section in self.sub_sections:
            yield from sub_section.walk(depth + 1)


@dataclass(eq=False)
class EpicIssue:
    """A parent tracking issue aggregating a checklist of child issues."""

    title: str
    description: str = ""
    assignees: list[str] = field(default_factory=list)
    related_issues: list[int] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    def walk_sections(self) -> Iterator[tuple[int, Section]]:
        for section in self.sections:
            yield from section.walk()

    def iter_issues(self) -> Iterator[Issue]:
        """Yield every issue of the epic in checklist order."""
        for _, section in self.walk_sections():
            yield from section.issues


@dataclass(frozen=True)
class RepositoryRef:
    """The repository issues are created in."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class CreatedIssue:
    """What the remote provider hands back for a created issue."""

    number: int
    html_url: str


@dataclass
class ProvisioningPlan:
    """Everything a single run declares: the repository and the issues to create in it."""

    repository: RepositoryDeclaration
    epics: list[EpicIssue] = field(default_factory=list)
    work_items: list[Issue] = field(default_factory=list)
    flaky_tests: list[IssueFromFile] = field(default_factory=list)
