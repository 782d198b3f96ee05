"""repo-epics: declare a GitHub repository and provision epic issue trees in it."""

__version__ = "0.1.0"
