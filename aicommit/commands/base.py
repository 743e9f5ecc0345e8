"""Base command class for git operations.

This module provides the abstract base class for all git commands,
implementing the Command Pattern with observer support.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console

from ..observers import GitOperationObserver
from .runner import GitRunner


class GitCommand(ABC):
    """Abstract base class for git commands.

    Concrete commands implement execute(), run their git invocation through
    the runner and call _notify() with the arguments and output.

    Attributes:
        runner (GitRunner): Runner that executes git
        console (Console): Rich console for output
        observers (List[GitOperationObserver]): List of observers to notify
    """

    def __init__(self, runner: GitRunner, console: Optional[Console] = None):
        """Initialize the command.

        Args:
            runner: Runner that executes git
            console: Optional Rich console for output
        """
        self.runner = runner
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of command execution."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def _run(self, *args: str) -> str:
        output = self.runner.run(*args)
        for observer in self.observers:
            observer.on_git_command(args, output)
        return output

    @abstractmethod
    def execute(self) -> str:
        """Execute the git command.

        Returns:
            str: The command's standard output

        Raises:
            GitError: The git invocation failed
        """
        pass
