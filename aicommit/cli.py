#!/usr/bin/env python3
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from .commands import GitRunner
from .commit_message import CommitMessageGenerator
from .config import Config
from .core import CommitPipeline, GitCommitter
from .exceptions import AICommitError, ConfigError, ConfigInitialized, MissingAPIKeyError
from .models import CommandInvocation, PipelineOutcome
from .observers import ConsoleLogObserver, FileLogObserver

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Options are only recognised in their --name=value form
VALUE_OPTION_PREFIXES = ("--lang=", "--notes=")

EPILOG = """\b
Config file:
  ~/.aicommit/config.json

\b
Examples:
  aicommit
  aicommit --lang=zh
  aicommit --lang=zh --notes="urgent fix"
"""


def print_error(message: str) -> None:
    err_console.print(message, style="red", markup=False, highlight=False)


class AICommitCommand(click.Command):
    """Command that sets aside every argument it does not recognise.

    Only `--lang=<code>`, `--notes=<text>` and the help flags are handed to
    click. Anything else, including `--lang fr` or a bare `--lang`, ends up
    in `ctx.meta["unknown_args"]` so main() can report it and show the usage
    text. When unknown arguments are present the help flags are set aside as
    well, so they are reported before the usage is printed.
    """

    def parse_args(self, ctx: click.Context, args):
        unknown = [
            arg for arg in args
            if not arg.startswith(VALUE_OPTION_PREFIXES) and arg not in ctx.help_option_names
        ]
        known = [arg for arg in args if arg.startswith(VALUE_OPTION_PREFIXES)] if unknown else list(args)
        ctx.meta["unknown_args"] = tuple(unknown)
        return super().parse_args(ctx, known)


def build_pipeline(config: Config) -> CommitPipeline:
    """Wire the git runner, observers and generator for one run."""
    committer = GitCommitter(GitRunner(), console)
    committer.add_observer(ConsoleLogObserver(console))

    log_file_path = config.get_log_file()
    if log_file_path:
        committer.add_observer(FileLogObserver(str(log_file_path)))

    generator = CommitMessageGenerator(config)
    return CommitPipeline(config, committer, generator, console)


def run_pipeline(invocation: CommandInvocation, config_path: Optional[Path] = None) -> int:
    """Load the configuration, run the pipeline and return the exit status."""
    try:
        config = Config.load_or_init(config_path)

        # Command line options override config
        if invocation.language:
            config = config.with_language(invocation.language)

        result = build_pipeline(config).run(invocation.notes)
    except ConfigInitialized as e:
        console.print(f"Default config file created: {e.config_path}", markup=False, highlight=False)
        console.print("Please edit the config file to set your OpenAI API key")
        return 0
    except MissingAPIKeyError as e:
        print_error(f"Error: {e}")
        if e.config_path:
            print_error(f"Please edit the config file: {e.config_path}")
        return 1
    except ConfigError as e:
        print_error(f"Error loading config: {e}")
        return 1
    except AICommitError as e:
        print_error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        print_error(f"Error: {e}")
        return 1

    if result.outcome is PipelineOutcome.NO_CHANGES:
        console.print("No differences found.")
        return 0

    console.print("[green]Commit complete with message:[/green]")
    console.print()
    console.print(result.message, markup=False, highlight=False)
    return 0


@click.command(cls=AICommitCommand, context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.option(
    "--lang",
    metavar="<lang>",
    help="Language of the commit message (defaults to default_lang in the config file)",
)
@click.option(
    "--notes",
    metavar="<text>",
    default="",
    help="Extra notes sent to the model along with the diff",
)
@click.pass_context
def main(ctx: click.Context, lang: Optional[str], notes: str):
    """
    AI Commit - generate Git commit messages with AI.

    This tool will:
    1. Stage all changes in the working directory
    2. Send the diff to an OpenAI-compatible chat completions endpoint
    3. Commit with the message the model returns
    """
    invocation = CommandInvocation(
        language=lang or None,
        notes=notes or "",
        unknown_args=ctx.meta.get("unknown_args", ()),
    )

    if invocation.show_help:
        for arg in invocation.unknown_args:
            console.print(f"Unknown parameter passed: {arg}", markup=False, highlight=False)
        click.echo(ctx.get_help())
        return

    ctx.exit(run_pipeline(invocation))


if __name__ == "__main__":
    main()
