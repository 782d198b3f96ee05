"""Top-level provisioning run.

A run is a single sequential pass:

1. Declare the repository (errors propagate).
2. Create each epic with its children.
3. Create each standalone work item.
4. Create each flaky-test issue.

Issue failures are logged by the creator and collected in the report; they
never abort the run. Re-running creates duplicate issues, since only the
repository declaration is diffed against remote state.
"""

import structlog

from repo_epics.config.settings import ProvisioningSettings
from repo_epics.engine.creator import IssueCreator
from repo_epics.models.domain import ProvisioningPlan
from repo_epics.models.results import RunReport
from repo_epics.providers.base import IssueProvider

log = structlog.get_logger(__name__)


class Provisioner:
    """Runs a provisioning plan against a provider."""

    def __init__(self, provider: IssueProvider, settings: ProvisioningSettings):
        self.provider = provider
        self.settings = settings

    async def run(self, plan: ProvisioningPlan) -> RunReport:
        """Provision the repository and every issue of the plan.

        Raises:
            ExternalServiceError: If the repository declaration cannot be applied
        """
        owner = self.settings.github.owner
        log.info("provisioning_started", owner=owner, repository=plan.repository.name)

        change = await self.provider.apply_repository(plan.repository, owner)
        report = RunReport(repository=change)

        creator = IssueCreator(
            self.provider,
            change.ref,
            issue_texts_directory=self.settings.workflow.issue_texts_dir,
            url_template=self.settings.workflow.issue_url_template,
        )

        for epic in plan.epics:
            report.epics.append(await creator.create_epic_issue(epic))

        for work_item in plan.work_items:
            report.work_items[work_item] = await creator.create_work_item(work_item)

        for flaky_test in plan.flaky_tests:
            report.flaky_tests[flaky_test] = await creator.create_flaky_test_issue(flaky_test)

        log.info(
            "provisioning_finished",
            repository=change.ref.full_name,
            created=report.created,
            failures=report.failures,
        )
        return report
