"""Configuration for repo-epics.

Key Components:
    - ProvisioningSettings: Main configuration container with YAML loading support
    - GitHubConfig: GitHub connection settings
    - WorkflowConfig: Issue text directory and issue URL template
    - RepositoryDeclaration: Desired state of the provisioned repository

Example:
    >>> from repo_epics.config import ProvisioningSettings
    >>> settings = ProvisioningSettings.from_yaml("provisioning.yaml")
    >>> settings.github.owner
    'pulumi'
"""

from repo_epics.config.repository import RepositoryDeclaration, SecurityAndAnalysisConfig
from repo_epics.config.settings import GitHubConfig, ProvisioningSettings, WorkflowConfig

__all__ = [
    "GitHubConfig",
    "ProvisioningSettings",
    "RepositoryDeclaration",
    "SecurityAndAnalysisConfig",
    "WorkflowConfig",
]
