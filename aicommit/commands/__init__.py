"""Git operation commands using the Command Pattern.

Each git invocation made by aicommit is wrapped in a command object that runs
through a GitRunner and reports to observers.

Example:
    ```python
    from aicommit.commands import CommitCommand, GitRunner
    from aicommit.observers import FileLogObserver

    commit_cmd = CommitCommand(GitRunner(), "Add retry logic")
    commit_cmd.add_observer(FileLogObserver("aicommit.log"))
    commit_cmd.execute()
    ```
"""

from .base import GitCommand
from .commit import CommitCommand
from .diff import DiffCommand
from .runner import GitRunner
from .stage import StageCommand
from .status import StatusCommand

__all__ = [
    "GitCommand",
    "GitRunner",
    "CommitCommand",
    "DiffCommand",
    "StageCommand",
    "StatusCommand",
]
