"""Tests for the commit pipeline."""

from io import StringIO
from unittest.mock import Mock

import pytest
from rich.console import Console

from aicommit.commit_message import CommitMessageGenerator
from aicommit.core import CommitPipeline, GitCommitter
from aicommit.exceptions import APIError, EmptyCompletionError, GitError
from aicommit.models import PipelineOutcome
from aicommit.observers import GitOperationObserver

from conftest import FakeRunner, completion_body, request_json


@pytest.fixture
def console():
    return Console(file=StringIO(), width=120)


@pytest.fixture
def mock_generator():
    generator = Mock(spec=CommitMessageGenerator)
    generator.generate.return_value = "Add retry logic"
    return generator


def make_pipeline(config, runner, generator, console):
    committer = GitCommitter(runner, console)
    return CommitPipeline(config, committer, generator, console)


def test_pipeline_runs_steps_in_order(config, fake_runner, mock_generator, console):
    result = make_pipeline(config, fake_runner, mock_generator, console).run()

    assert result.outcome is PipelineOutcome.COMMITTED
    assert result.message == "Add retry logic"
    assert fake_runner.calls == [
        ("add", "."),
        ("status",),
        ("diff",),
        ("diff", "--cached"),
        ("commit", "-m", "Add retry logic"),
    ]


def test_pipeline_sends_diff_language_and_notes(config, fake_runner, mock_generator, console):
    make_pipeline(config.with_language("fr"), fake_runner, mock_generator, console).run("urgent")

    mock_generator.generate.assert_called_once_with(
        "diff --git a/app.py b/app.py\n+retry = 3\n", "fr", "urgent"
    )


def test_pipeline_concatenates_unstaged_then_staged(config, mock_generator, console):
    runner = FakeRunner(outputs={
        ("diff",): "unstaged change\n",
        ("diff", "--cached"): "staged change\n",
    })

    make_pipeline(config, runner, mock_generator, console).run()

    diff = mock_generator.generate.call_args[0][0]
    assert diff == "unstaged change\nstaged change\n"


def test_pipeline_without_changes_skips_generator(config, mock_generator, console):
    runner = FakeRunner()

    result = make_pipeline(config, runner, mock_generator, console).run()

    assert result.outcome is PipelineOutcome.NO_CHANGES
    assert result.message is None
    mock_generator.generate.assert_not_called()
    assert ("commit", "-m", "Add retry logic") not in runner.calls


def test_pipeline_prints_status(config, fake_runner, mock_generator, console):
    make_pipeline(config, fake_runner, mock_generator, console).run()

    output = console.file.getvalue()
    assert "Checking the status of the working directory..." in output
    assert "Changes to be committed" in output


def test_empty_message_is_an_error(config, fake_runner, mock_generator, console):
    mock_generator.generate.return_value = ""

    with pytest.raises(EmptyCompletionError, match="Unable to generate commit message"):
        make_pipeline(config, fake_runner, mock_generator, console).run()

    assert all(call[0] != "commit" for call in fake_runner.calls)


def test_git_failure_stops_pipeline(config, mock_generator, console):
    runner = FakeRunner(fail_on=["add"])

    with pytest.raises(GitError):
        make_pipeline(config, runner, mock_generator, console).run()

    assert runner.calls == [("add", ".")]
    mock_generator.generate.assert_not_called()


def test_api_failure_stops_pipeline(config, fake_runner, mock_generator, console):
    mock_generator.generate.side_effect = APIError("OpenAI API returned an error: quota exceeded")

    with pytest.raises(APIError, match="quota exceeded"):
        make_pipeline(config, fake_runner, mock_generator, console).run()

    assert all(call[0] != "commit" for call in fake_runner.calls)


def test_observers_see_message_and_commit(config, fake_runner, mock_generator, console):
    observer = Mock(spec=GitOperationObserver)
    pipeline = make_pipeline(config, fake_runner, mock_generator, console)
    pipeline.committer.add_observer(observer)

    pipeline.run()

    observer.on_message_generated.assert_called_once_with("Add retry logic")
    observer.on_commit_created.assert_called_once_with("Add retry logic")
    assert observer.on_git_command.call_count == 5


def test_pipeline_with_http_generator(config, fake_runner, mock_endpoint, console):
    """Run the pipeline against a fake endpoint instead of a mocked generator."""
    transport = mock_endpoint(completion_body("Add retry logic"))
    generator = CommitMessageGenerator(config.with_language("fr"), transport=transport)

    result = make_pipeline(config.with_language("fr"), fake_runner, generator, console).run()

    assert result.message == "Add retry logic"
    prompt = request_json(transport.requests[0])["messages"][0]["content"]
    assert "French" in prompt
    assert "+retry = 3" in prompt


def test_committer_observer_management(fake_runner, console):
    committer = GitCommitter(fake_runner, console)
    observer = Mock(spec=GitOperationObserver)

    committer.add_observer(observer)
    committer.stage_all()
    committer.remove_observer(observer)
    committer.stage_all()

    observer.on_git_command.assert_called_once_with(("add", "."), "")
