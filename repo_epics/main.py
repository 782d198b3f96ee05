"""CLI entry point for repo-epics."""

import asyncio
import sys
from pathlib import Path

import click
import structlog
from pydantic import ValidationError

from repo_epics.catalog import build_plan
from repo_epics.config.settings import GitHubConfig, ProvisioningSettings, WorkflowConfig
from repo_epics.engine.description import generate_description
from repo_epics.engine.provisioner import Provisioner
from repo_epics.exceptions import ConfigurationError, RepoEpicsError
from repo_epics.models.results import CreationResult, RunReport
from repo_epics.providers.github_rest import GitHubRestProvider
from repo_epics.providers.preview import PreviewProvider
from repo_epics.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--config",
    default="repo_epics/config/provisioning.yaml",
    help="Path to configuration file",
)
@click.option("--log-level", default="INFO", help="Logging level")
@click.pass_context
def cli(ctx: click.Context, config: str, log_level: str) -> None:
    """repo-epics: declare a GitHub repository and provision its epic issues."""
    configure_logging(log_level)
    ctx.obj = {"config_path": Path(config)}


def load_settings(config_path: Path) -> ProvisioningSettings:
    """Load settings from the config file, or from REPO_EPICS_* variables when it is absent.

    Raises:
        ConfigurationError: If no valid configuration can be assembled
    """
    if config_path.exists():
        return ProvisioningSettings.from_yaml(str(config_path))

    log.debug("config_file_missing", path=str(config_path))
    try:
        return ProvisioningSettings()  # type: ignore[call-arg]
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration file not found: {config_path} "
            f"(and REPO_EPICS_* environment variables are incomplete: {e.error_count()} errors)"
        ) from e


@cli.command()
@click.pass_context
def up(ctx: click.Context) -> None:
    """Declare the repository and create every issue of the plan.

    Individual issue failures are logged and reported but do not change the
    exit status.
    """
    try:
        settings = load_settings(ctx.obj["config_path"])
        report = asyncio.run(_provision(settings))
    except RepoEpicsError as e:
        click.echo(f"Error: {e.message}", err=True)
        log.debug("up_error", exc_info=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        log.error("up_unexpected", exc_info=True)
        sys.exit(1)

    _print_report(report)


async def _provision(settings: ProvisioningSettings) -> RunReport:
    provider = GitHubRestProvider(
        token=settings.github.api_token.get_secret_value(),
        base_url=settings.github.base_url,
    )
    await provider.connect()
    try:
        return await Provisioner(provider, settings).run(build_plan())
    finally:
        await provider.disconnect()


@cli.command()
@click.option("--owner", default="pulumi", help="Repository owner used in issue URLs")
@click.option(
    "--issue-texts-dir",
    default="issue-texts",
    type=click.Path(file_okay=False),
    help="Directory holding issue bodies loaded from files",
)
@click.option("--start-number", default=1, type=click.IntRange(min=1), help="First issue number to assign")
def preview(owner: str, issue_texts_dir: str, start_number: int) -> None:
    """Show what `up` would submit, without contacting GitHub."""
    settings = ProvisioningSettings(
        github=GitHubConfig(api_token="preview", owner=owner),
        workflow=WorkflowConfig(issue_texts_directory=issue_texts_dir),
    )
    provider = PreviewProvider(start_number=start_number)

    try:
        report = asyncio.run(Provisioner(provider, settings).run(build_plan()))
    except RepoEpicsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    for request in provider.requests:
        labels = ", ".join(request.labels)
        click.echo(f"+ issue {request.title!r} [{labels}]")

    for epic_result in report.epics:
        click.echo(f"\n--- [Epic] {epic_result.epic.title} ---")
        click.echo(epic_result.description)

    click.echo()
    _print_report(report)


@cli.command()
def describe() -> None:
    """Print the epic bodies with every child referenced by title."""
    for epic in build_plan().epics:
        click.echo(f"--- [Epic] {epic.title} ---")
        click.echo(generate_description(epic))


def _status(result: CreationResult) -> str:
    if result.is_created:
        return click.style("[OK]", fg="green")
    if result.is_failed:
        return click.style("[FAIL]", fg="red")
    return click.style("[SKIP]", fg="yellow")


def _result_line(title: str, result: CreationResult) -> str:
    line = f"{_status(result)} {title}"
    if result.url:
        line += f" -> {result.url}"
    elif result.reason:
        line += f" ({result.reason})"
    return line


def _print_report(report: RunReport) -> None:
    change = report.repository
    if change.created:
        click.echo(f"Repository {change.ref.full_name}: created")
    elif change.changed_fields:
        click.echo(f"Repository {change.ref.full_name}: updated {', '.join(change.changed_fields)}")
    else:
        click.echo(f"Repository {change.ref.full_name}: unchanged")

    for epic_result in report.epics:
        click.echo(f"  {_result_line('[Epic] ' + epic_result.epic.title, epic_result.result)}")
        for issue, result in epic_result.children.items():
            click.echo(f"    {_result_line(issue.title, result)}")

    for issue, result in [*report.work_items.items(), *report.flaky_tests.items()]:
        click.echo(f"  {_result_line(issue.title, result)}")

    click.echo(f"Created {report.created} issues, {report.failures} failed")


if __name__ == "__main__":
    cli()
