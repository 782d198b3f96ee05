"""Provisioning engine: description rendering, issue creation and the top-level run."""

from repo_epics.engine.creator import IssueCreator
from repo_epics.engine.description import generate_description, issue_reference
from repo_epics.engine.provisioner import Provisioner

__all__ = [
    "IssueCreator",
    "Provisioner",
    "generate_description",
    "issue_reference",
]
