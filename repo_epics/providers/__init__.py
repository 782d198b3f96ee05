"""Provider implementations for the remote provisioning boundary.

Key Components:
    - IssueProvider: Abstract base for providers
    - GitHubRestProvider: GitHub via PyGithub
    - PreviewProvider: In-memory provider for dry runs

Example:
    >>> from repo_epics.providers import GitHubRestProvider
    >>> github = GitHubRestProvider(token="ghp_...")
    >>> await github.connect()
"""

from repo_epics.providers.base import IssueProvider
from repo_epics.providers.github_rest import GitHubRestProvider
from repo_epics.providers.preview import IssueRequest, PreviewProvider

__all__ = [
    "GitHubRestProvider",
    "IssueProvider",
    "IssueRequest",
    "PreviewProvider",
]
