"""Static declarations: the pulumi repository and the issues provisioned in it.

Each builder returns fresh objects, so a plan can be built, run and
inspected without sharing state with another plan.
"""

from repo_epics.config.repository import RepositoryDeclaration, SecurityAndAnalysisConfig
from repo_epics.models.domain import EpicIssue, Issue, IssueFromFile, ProvisioningPlan, Section

PULUMI_REPOSITORY = RepositoryDeclaration(
    name="pulumi",
    description=(
        "Pulumi - Infrastructure as Code in any programming language. "
        "Build infrastructure intuitively on any cloud using familiar languages 🚀"
    ),
    homepage_url="https://www.pulumi.com",
    default_branch="master",
    delete_branch_on_merge=True,
    has_discussions=True,
    has_downloads=True,
    has_issues=True,
    has_projects=True,
    has_wiki=True,
    security_and_analysis=SecurityAndAnalysisConfig(
        secret_scanning="disabled",
        secret_scanning_push_protection="disabled",
    ),
    squash_merge_commit_message="PR_BODY",
    squash_merge_commit_title="PR_TITLE",
    topics=(
        "javascript",
        "aws",
        "csharp",
        "gcp",
        "azure",
        "dotnet",
        "typescript",
        "serverless",
        "python",
        "iac",
        "go",
        "cloud",
        "kubernetes",
        "infrastructure-as-code",
        "containers",
        "fsharp",
        "golang",
        "cloud-computing",
    ),
    visibility="public",
    vulnerability_alerts=True,
)

_DEFAULT_PROVIDERS_DESCRIPTION = """\
Providers in pulumi can be instantiated in two different ways.  One is implicitly through the program.  If the user doesn’t set an explicit provider for a resource, the resource automatically gets a default provider assigned.  On the other hand, providers that have been created beforehand can be passed along to the resource registration request and that provider will be used to create the resource.

There is currently no way to set up a default provider for all the resources in a particular pulumi program.  This especially in combination with default providers can lead to confusion, as it’s easy to forget to pass in a provider to some resource, and then there could be multiple resources with different provider settings in the same program.  For example for the kubernetes provider, someone could carefully set one up, and then forget to pass that provider to a kubernetes resource. That would then create a new kubernetes default provider based on a local kubeconfig, which is probably not what the user wanted.

This issue is to track the work to allow users to programmatically set up a default provider for all the resources a provider supports.
"""

_WIP_PR = "[WIP PR](https://github.com/pulumi/pulumi/pull/16105)"


def programmatic_default_providers_epic() -> EpicIssue:
    return EpicIssue(
        title="Programmatic Default Providers",
        description=_DEFAULT_PROVIDERS_DESCRIPTION,
        assignees=["tgummerer"],
        related_issues=[2059],
        sections=[
            Section(
                title="Design (M103)",
                issues=[
                    Issue(
                        title="Write design doc for programmatic default providers",
                        no_create_issue=True,
                        additional_text=(
                            "https://docs.google.com/document/d/"
                            "12AhuLGpK-hV5f0Zv0PqO9JwxuiRJm5xjQk2YkWYJKuk/edit"
                        ),
                        done=True,
                    ),
                ],
            ),
            Section(
                title="Implementation Plan",
                sub_sections=[
                    Section(
                        title="M104",
                        issues=[
                            Issue(
                                title="Engine support for programmatic default providers",
                                additional_text=_WIP_PR,
                            ),
                            Issue(
                                title="Go SDK support for programmatic default providers",
                                additional_text=_WIP_PR,
                            ),
                            Issue(title="Node SDK support for programmatic default providers"),
                            Issue(title="Python SDK support for programmatic default providers"),
                        ],
                    ),
                    Section(
                        title="M105",
                        issues=[
                            Issue(title=".NET SDK support for programmatic default providers"),
                            Issue(title="YAML SDK support for programmatic default providers"),
                        ],
                    ),
                    Section(
                        title="Future",
                        issues=[
                            Issue(title="Java SDK support for programmatic default providers"),
                        ],
                    ),
                ],
            ),
            Section(
                title="Announce",
                issues=[
                    Issue(title="Write Blog post for programmatic default providers"),
                    Issue(title=":icecream:", no_create_issue=True),
                ],
            ),
        ],
    )


def dotnet_sdk_version_work_item() -> Issue:
    return Issue(
        title="Stop hardcoding the dotnet SDK version number in tests",
        description=(
            "We currently hardcode the version of the dotnet SDK in tests.  This breaks everytime we "
            "forget to bump this after a new dotnet SDK release.  We should try to stop hardcoding "
            "this, so we don't have issues with the merge queue being blocked every time we do a "
            "release and one of the providers requires the new version."
        ),
        additional_labels=["area/testing", "area/codegen"],
    )


def go_transformations_flaky_test() -> IssueFromFile:
    return IssueFromFile(
        title="TestGoTransformations/go/simple",
        description_path="TestGoTransformations.md",
    )


def build_plan() -> ProvisioningPlan:
    """Build the full plan provisioned by ``repo-epics up``."""
    return ProvisioningPlan(
        repository=PULUMI_REPOSITORY,
        epics=[programmatic_default_providers_epic()],
        work_items=[dotnet_sdk_version_work_item()],
        flaky_tests=[go_transformations_flaky_test()],
    )
