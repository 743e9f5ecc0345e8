"""Exception classes for aicommit.

Every failure in the pipeline is raised as an ``AICommitError`` subclass and
handled in one place by the CLI, which turns it into exit status 1:

- ConfigError: the config file cannot be read or parsed
- MissingAPIKeyError: the config has no API key
- GitError: the git binary is missing or a git command failed
- APIError: the completion request failed or returned an error
- EmptyCompletionError: the endpoint answered without any text
"""

from pathlib import Path
from typing import Optional, Sequence


class AICommitError(Exception):
    """Base exception for aicommit errors."""

    pass


class ConfigError(AICommitError):
    """Raised when the configuration file is unreadable or invalid."""

    pass


class MissingAPIKeyError(ConfigError):
    """Raised when no API key is configured."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path
        super().__init__("API key is not set in the config file")


class GitError(AICommitError):
    """Raised when a git invocation fails."""

    def __init__(self, args: Sequence[str], stderr: str = "", status: Optional[int] = None):
        self.args_list = list(args)
        self.stderr = stderr.strip()
        self.status = status
        message = f"git {' '.join(self.args_list)} failed"
        if status is not None:
            message += f" (exit status {status})"
        if self.stderr:
            message += f"\n{self.stderr}"
        super().__init__(message)


class APIError(AICommitError):
    """Raised when the completion endpoint cannot be used."""

    pass


class EmptyCompletionError(APIError):
    """Raised when the endpoint returns no commit message."""

    def __init__(self):
        super().__init__("Unable to generate commit message.")


class ConfigInitialized(Exception):
    """Signals that a default config file was just written.

    Not an error: the run stops so the user can fill in the API key.
    """

    def __init__(self, config_path: Path):
        self.config_path = config_path
        super().__init__(f"Default config file created: {config_path}")
