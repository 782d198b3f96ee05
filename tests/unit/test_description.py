"""Tests for repo_epics/engine/description.py - epic body rendering."""

from repo_epics.catalog import programmatic_default_providers_epic
from repo_epics.engine.description import checklist_line, generate_description, issue_reference
from repo_epics.models.domain import EpicIssue, Issue, Section
from repo_epics.models.results import CreationResult

URL_42 = "https://github.com/pulumi/pulumi/issues/42"


def _headings(description: str) -> list[str]:
    return [line for line in description.split("\n") if line.startswith("#")]


class TestIssueReference:
    """Tests for the title-or-URL decision."""

    def test_created_issue_uses_url(self):
        issue = Issue(title="Implement X")
        assert issue_reference(issue, CreationResult.created(42, URL_42)) == URL_42

    def test_no_create_issue_uses_title_even_with_result(self):
        issue = Issue(title="Write design doc", no_create_issue=True)
        assert issue_reference(issue, CreationResult.created(42, URL_42)) == "Write design doc"

    def test_failed_issue_falls_back_to_title(self):
        issue = Issue(title="Implement X")
        assert issue_reference(issue, CreationResult.failed("HTTP 500")) == "Implement X"

    def test_missing_result_falls_back_to_title(self):
        assert issue_reference(Issue(title="Implement X"), None) == "Implement X"


class TestChecklistLine:
    """Tests for single checklist entries."""

    def test_open_entry(self):
        assert checklist_line(Issue(title="A"), None) == "- [ ] A"

    def test_done_entry(self):
        assert checklist_line(Issue(title="A", done=True), None) == "- [x] A"

    def test_additional_text(self):
        issue = Issue(title="A", additional_text="[WIP PR](https://example.com/pr/1)")
        result = CreationResult.created(42, URL_42)
        assert checklist_line(issue, result) == f"- [ ] {URL_42} ([WIP PR](https://example.com/pr/1))"


class TestGenerateDescription:
    """Tests for full epic bodies."""

    def test_section_with_title_and_url_entries(self, small_epic, implement_x):
        results = {implement_x: CreationResult.created(42, URL_42)}

        description = generate_description(small_epic, results)

        assert f"## Design\n- [ ] Write design doc\n- [ ] {URL_42}" in description

    def test_exact_rendering(self, small_epic, implement_x):
        results = {implement_x: CreationResult.created(42, URL_42)}

        assert generate_description(small_epic, results) == (
            f"Epic body\n\n## Design\n- [ ] Write design doc\n- [ ] {URL_42}"
        )

    def test_related_issues_line_keeps_trailing_space(self):
        epic = EpicIssue(title="E", description="Body", related_issues=[2059])
        assert generate_description(epic) == "Body\n\nRelated issues: #2059 "

    def test_multiple_related_issues_keep_order(self):
        epic = EpicIssue(title="E", description="Body", related_issues=[7, 3, 5])
        assert "Related issues: #7 #3 #5 " in generate_description(epic)

    def test_no_related_issues_line_when_empty(self, small_epic):
        assert "Related issues:" not in generate_description(small_epic)

    def test_headings_follow_input_order(self):
        description = generate_description(programmatic_default_providers_epic())

        assert _headings(description) == [
            "## Design (M103)",
            "## Implementation Plan",
            "### M104",
            "### M105",
            "### Future",
            "## Announce",
        ]

    def test_deeper_nesting_gets_deeper_headings(self):
        epic = EpicIssue(
            title="E",
            sections=[
                Section(
                    title="Top",
                    sub_sections=[Section(title="Mid", sub_sections=[Section(title="Low")])],
                )
            ],
        )
        assert _headings(generate_description(epic)) == ["## Top", "### Mid", "#### Low"]

    def test_subsection_issues_follow_parent_issues(self):
        epic = EpicIssue(
            title="E",
            sections=[
                Section(
                    title="Plan",
                    issues=[Issue(title="first")],
                    sub_sections=[Section(title="Later", issues=[Issue(title="second")])],
                )
            ],
        )
        assert generate_description(epic) == "\n\n## Plan\n- [ ] first\n\n### Later\n- [ ] second"

    def test_percent_sequences_are_literal(self):
        text = "Coverage is 100% and %s or %d or %(name)s or {name} stay as written"
        epic = EpicIssue(title="E", description=text)
        assert generate_description(epic) == text

    def test_catalog_epic_entries(self):
        epic = programmatic_default_providers_epic()
        engine = epic.sections[1].sub_sections[0].issues[0]
        results = {engine: CreationResult.created(42, URL_42)}

        description = generate_description(epic, results)

        assert (
            "- [x] Write design doc for programmatic default providers "
            "(https://docs.google.com/document/d/12AhuLGpK-hV5f0Zv0PqO9JwxuiRJm5xjQk2YkWYJKuk/edit)"
        ) in description
        assert f"- [ ] {URL_42} ([WIP PR](https://github.com/pulumi/pulumi/pull/16105))" in description
        assert "- [ ] :icecream:" in description
        assert "Related issues: #2059 " in description

    def test_does_not_mutate_epic(self, small_epic, implement_x):
        generate_description(small_epic, {implement_x: CreationResult.created(42, URL_42)})
        assert small_epic.description == "Epic body"
        assert not hasattr(implement_x, "url")
