"""Runner that invokes the git binary for the command classes."""

import os
import re
from typing import Optional

from git import Git
from git.exc import CommandError, GitCommandError, GitCommandNotFound

from ..exceptions import GitError

# GitPython stores stderr as "\n  stderr: '<text>'"
_STDERR_PATTERN = re.compile(r"^\s*stderr: '(.*)'\s*$", re.DOTALL)


class GitRunner:
    """Runs git commands in a working directory and returns their stdout.

    Every failure (git missing from PATH, the directory not being a
    repository, a non-zero exit status) is raised as GitError. Commands are
    not retried and no timeout is applied.

    Attributes:
        working_dir (str): Directory the git commands run in
    """

    def __init__(self, working_dir: Optional[str] = None):
        self.working_dir = working_dir or os.getcwd()
        self.git = Git(self.working_dir)

    def run(self, *args: str) -> str:
        """Run ``git <args>`` and return stdout verbatim."""
        try:
            return self.git.execute(["git", *args], strip_newline_in_stdout=False)
        except GitCommandNotFound as e:
            raise GitError(args, stderr=f"git executable not found: {e}") from e
        except GitCommandError as e:
            raise GitError(args, stderr=stderr_text(e), status=e.status) from e


def stderr_text(error: CommandError) -> str:
    """Extract git's own stderr from a GitPython command error."""
    match = _STDERR_PATTERN.match(error.stderr or "")
    if match:
        return match.group(1)
    return error.stderr or ""
