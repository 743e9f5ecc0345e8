"""Core functionality for aicommit."""
from typing import List, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .commands import CommitCommand, DiffCommand, GitCommand, GitRunner, StageCommand, StatusCommand
from .commit_message import CommitMessageGenerator
from .config import Config
from .exceptions import EmptyCompletionError
from .models import PipelineOutcome, PipelineResult
from .observers import GitOperationObserver


class GitCommitter:
    """Handles git operations using the Command Pattern."""

    def __init__(self, runner: GitRunner, console: Optional[Console] = None):
        self.runner = runner
        self.console = console or Console()
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of git operations."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def execute_command(self, command: GitCommand) -> str:
        """Execute a git command with the committer's observers attached."""
        for observer in self.observers:
            command.add_observer(observer)

        return command.execute()

    def stage_all(self) -> str:
        """Stage every change in the working tree."""
        return self.execute_command(StageCommand(self.runner, self.console))

    def show_status(self) -> str:
        """Print the working tree status."""
        return self.execute_command(StatusCommand(self.runner, self.console))

    def compute_diff(self) -> str:
        """Return the working tree diff followed by the staged diff."""
        working_diff = self.execute_command(DiffCommand(self.runner, console=self.console))
        staged_diff = self.execute_command(DiffCommand(self.runner, cached=True, console=self.console))
        return working_diff + staged_diff

    def commit(self, message: str) -> str:
        """Commit the staged changes with the given message."""
        return self.execute_command(CommitCommand(self.runner, message, self.console))


class CommitPipeline:
    """Stages changes, asks the endpoint for a message and commits with it.

    The steps run strictly in order and the first failure propagates to the
    caller as an AICommitError; nothing is retried.

    Attributes:
        config (Config): Configuration for this run, including the language
        committer (GitCommitter): Git operations
        generator (CommitMessageGenerator): Completion client
    """

    def __init__(
        self,
        config: Config,
        committer: GitCommitter,
        generator: CommitMessageGenerator,
        console: Optional[Console] = None,
    ):
        self.config = config
        self.committer = committer
        self.generator = generator
        self.console = console or Console()

    @property
    def observers(self) -> List[GitOperationObserver]:
        return self.committer.observers

    def _generate(self, diff: str, notes: str) -> str:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task(f"Generating commit message with {self.config.model}...", total=None)
            return self.generator.generate(diff, self.config.default_lang, notes)

    def run(self, notes: str = "") -> PipelineResult:
        """Run the pipeline once.

        Args:
            notes: Free text appended to the prompt

        Returns:
            PipelineResult: NO_CHANGES when there is nothing to commit,
            otherwise COMMITTED with the message used

        Raises:
            GitError: A git command failed
            APIError: The completion request failed
            EmptyCompletionError: The endpoint returned no message
        """
        self.committer.stage_all()

        self.console.print("Checking the status of the working directory...")
        self.committer.show_status()

        diff = self.committer.compute_diff()
        if not diff.strip():
            return PipelineResult(outcome=PipelineOutcome.NO_CHANGES)

        message = self._generate(diff, notes)
        if not message:
            raise EmptyCompletionError()

        for observer in self.observers:
            observer.on_message_generated(message)

        self.committer.commit(message)

        return PipelineResult(outcome=PipelineOutcome.COMMITTED, message=message)
