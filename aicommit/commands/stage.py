"""Command for staging every change in the working tree."""

from .base import GitCommand


class StageCommand(GitCommand):
    """Stage all changes with ``git add .``."""

    def execute(self) -> str:
        return self._run("add", ".")
