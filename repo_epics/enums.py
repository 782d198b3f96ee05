"""Enumerations for issue labels and creation outcomes."""

from enum import Enum


class IssueLabel(str, Enum):
    """Labels attached to provisioned issues.

    - kind/task: child issue of an epic
    - kind/engineering: standalone engineering work item
    - kind/epic: the parent tracking issue
    - impact/flaky-test: added on top of kind/engineering for flaky tests
    """

    TASK = "kind/task"
    ENGINEERING = "kind/engineering"
    EPIC = "kind/epic"
    FLAKY_TEST = "impact/flaky-test"

    def __str__(self) -> str:
        return self.value


class CreationStatus(str, Enum):
    """Outcome of a single issue creation request."""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value
