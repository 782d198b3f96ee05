"""
Configuration system using Pydantic for type-safe settings management.

Settings cover how to reach GitHub and where issue bodies live. What to
provision (the repository declaration and the issue tree) is declared in
:mod:`repo_epics.catalog`.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_epics.exceptions import ConfigurationError


class GitHubConfig(BaseModel):
    """GitHub connection configuration.

    The token is usually interpolated from the environment:
    - api_token: "${GITHUB_TOKEN}"
    """

    base_url: str = Field(default="https://api.github.com", description="GitHub API base URL")
    api_token: SecretStr = Field(..., description="Personal access token or App token")
    owner: str = Field(default="pulumi", description="Owner (user or organization) of the repository")


class WorkflowConfig(BaseModel):
    """Provisioning behaviour configuration."""

    issue_texts_directory: str = Field(
        default="issue-texts", description="Directory holding issue bodies loaded from files"
    )
    issue_url_template: str = Field(
        default="https://github.com/{owner}/{repo}/issues/{number}",
        description="URL written into epic checklists for created issues",
    )

    @field_validator("issue_url_template")
    @classmethod
    def validate_issue_url_template(cls, value: str) -> str:
        if "{number}" not in value:
            raise ValueError("issue_url_template must contain a {number} placeholder")
        return value

    @property
    def issue_texts_dir(self) -> Path:
        return Path(self.issue_texts_directory)


class ProvisioningSettings(BaseSettings):
    """Main settings.

    Loaded from YAML with environment variable interpolation, or from
    REPO_EPICS_* environment variables (e.g. REPO_EPICS_GITHUB__OWNER).
    """

    model_config = SettingsConfigDict(
        env_prefix="REPO_EPICS_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    github: GitHubConfig
    workflow: WorkflowConfig = Field(default_factory=WorkflowConfig)

    @classmethod
    def from_yaml(cls, config_path: str) -> ProvisioningSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            ProvisioningSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing required fields
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file) as f:
                yaml_content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        YAML comment lines (starting with #) are preserved unchanged.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            stripped = line.lstrip()
            if stripped.startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        lines = content.split("\n")
        return "\n".join(process_line(line) for line in lines)
