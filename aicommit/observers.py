"""Observer pattern for git operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape


class GitOperationObserver(ABC):
    """Abstract base class for git operation observers."""

    @abstractmethod
    def on_git_command(self, args: Sequence[str], output: str) -> None:
        """Called after a git command completes."""
        pass

    @abstractmethod
    def on_message_generated(self, message: str) -> None:
        """Called when the endpoint returned a commit message."""
        pass

    @abstractmethod
    def on_commit_created(self, message: str) -> None:
        """Called when a commit is created."""
        pass


class ConsoleLogObserver(GitOperationObserver):
    """Observer that logs git operations to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_git_command(self, args: Sequence[str], output: str) -> None:
        self.console.print(f"[dim]$ git {escape(' '.join(args))}[/dim]", highlight=False)

    def on_message_generated(self, message: str) -> None:
        self.console.print("[green]Generated commit message[/green]")

    def on_commit_created(self, message: str) -> None:
        first_line = message.splitlines()[0] if message else ""
        self.console.print("[green]Created commit:[/green] ", end="")
        self.console.print(first_line, markup=False, highlight=False)


class FileLogObserver(GitOperationObserver):
    """Observer that logs git operations to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_git_command(self, args: Sequence[str], output: str) -> None:
        self._log(f"Ran git {' '.join(args)}")

    def on_message_generated(self, message: str) -> None:
        self._log(f"Generated commit message: {message}")

    def on_commit_created(self, message: str) -> None:
        self._log(f"Created commit: {message}")
