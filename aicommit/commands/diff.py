"""Command for reading the diff of the working tree or the index."""

from typing import Optional

from rich.console import Console

from .base import GitCommand
from .runner import GitRunner


class DiffCommand(GitCommand):
    """Run ``git diff`` or, with ``cached=True``, ``git diff --cached``.

    Attributes:
        cached (bool): Whether to diff the staging area instead of the working tree
    """

    def __init__(self, runner: GitRunner, cached: bool = False, console: Optional[Console] = None):
        super().__init__(runner, console)
        self.cached = cached

    def execute(self) -> str:
        if self.cached:
            return self._run("diff", "--cached")
        return self._run("diff")
