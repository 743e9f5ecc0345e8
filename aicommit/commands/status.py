"""Command for showing the working tree status."""

from .base import GitCommand


class StatusCommand(GitCommand):
    """Run ``git status`` and show its output.

    The output is informational only; nothing downstream depends on it.
    """

    def execute(self) -> str:
        output = self._run("status")
        if output.strip():
            self.console.print(output.rstrip("\n"), markup=False, highlight=False)
        return output
