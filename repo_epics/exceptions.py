"""Custom exception hierarchy for repo-epics.

Exception Hierarchy:
    RepoEpicsError (base)
    ├── ConfigurationError
    ├── IssueTextError
    └── ExternalServiceError

Example Usage:
    >>> from repo_epics.exceptions import ConfigurationError
    >>> try:
    ...     load_config(path)
    ... except FileNotFoundError as e:
    ...     raise ConfigurationError(f"Config file not found: {path}") from e
"""


class RepoEpicsError(Exception):
    """Base exception for all repo-epics errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(RepoEpicsError):
    """Configuration-related errors.

    Raised when configuration files are invalid, missing, or contain
    incompatible settings.

    Examples:
        - Configuration file not found
        - Invalid YAML syntax
        - Missing required configuration fields
    """

    pass


class IssueTextError(RepoEpicsError):
    """An issue body could not be loaded from the issue-texts directory.

    Attributes:
        path: The file that failed to load
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            path: The file that failed to load
        """
        self.path = path

        full_message = message
        if path:
            full_message = f"{message} (path: {path})"

        super().__init__(full_message)
        # Preserve original message (super sets self.message to full_message)
        self.message = message


class ExternalServiceError(RepoEpicsError):
    """Communication with the remote provider failed.

    Raised when the GitHub API rejects or fails a request (HTTP errors,
    validation failures, rate limiting, etc.).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
            response_text: Response body text (if applicable)
        """
        self.message = message
        self.status_code = status_code
        self.response_text = response_text

        full_message = message
        if status_code:
            full_message = f"{message} (HTTP {status_code})"

        super().__init__(full_message)
