"""
Markdown body generation for epic issues.

The epic's own description is emitted verbatim and never treated as a
format template: ``%`` and ``{}`` sequences in hand-written text come out
exactly as written.
"""

from collections.abc import Mapping

from repo_epics.models.domain import EpicIssue, Issue
from repo_epics.models.results import CreationResult


def issue_reference(issue: Issue, result: CreationResult | None) -> str:
    """Pick what a checklist entry points at.

    The URL is used only when the issue was actually created. Issues marked
    ``no_create_issue``, and issues whose creation failed or never ran, are
    referenced by title.
    """
    if issue.no_create_issue:
        return issue.title
    if result is not None and result.is_created and result.url:
        return result.url
    return issue.title


def checklist_line(issue: Issue, result: CreationResult | None) -> str:
    check = "x" if issue.done else " "
    line = f"- [{check}] {issue_reference(issue, result)}"
    if issue.additional_text:
        line += f" ({issue.additional_text})"
    return line


def generate_description(
    epic: EpicIssue,
    results: Mapping[Issue, CreationResult] | None = None,
) -> str:
    """Render the epic body: description, related issues and one checklist per section.

    Top-level sections get ``##`` headings, sub-sections ``###``, and so on
    one level deeper per nesting level. Ordering mirrors the input exactly.

    Args:
        epic: The epic to render
        results: Creation results of the epic's issues, keyed by issue

    Returns:
        The Markdown body
    """
    results = results or {}
    description = epic.description

    if epic.related_issues:
        related = "".join(f"#{number} " for number in epic.related_issues)
        description += f"\n\nRelated issues: {related}"

    for depth, section in epic.walk_sections():
        description += f"\n\n{'#' * (depth + 2)} {section.title}"
        for issue in section.issues:
            description += "\n" + checklist_line(issue, results.get(issue))

    return description
