"""Command for creating git commits."""

from typing import Optional

from rich.console import Console

from .base import GitCommand
from .runner import GitRunner


class CommitCommand(GitCommand):
    """Command for creating a git commit from the staged changes.

    Attributes:
        message (str): The commit message
    """

    def __init__(self, runner: GitRunner, message: str, console: Optional[Console] = None):
        """Initialize the commit command.

        Args:
            runner: Runner that executes git
            message: The commit message, passed to ``git commit -m`` unchanged
            console: Optional Rich console for output
        """
        super().__init__(runner, console)
        self.message = message

    def execute(self) -> str:
        """Create the commit and notify observers.

        Returns:
            str: Output of ``git commit``
        """
        output = self._run("commit", "-m", self.message)

        for observer in self.observers:
            observer.on_commit_created(self.message)

        return output
