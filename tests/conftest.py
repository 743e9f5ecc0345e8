import json
from pathlib import Path

import httpx
import pytest
from git import Repo

from aicommit.config import ENV_MAPPING, Config
from aicommit.exceptions import GitError


class FakeRunner:
    """Stands in for GitRunner: records invocations and answers from a table."""

    def __init__(self, outputs=None, fail_on=None):
        self.outputs = outputs or {}
        self.fail_on = tuple(fail_on) if fail_on else None
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        if self.fail_on and args[:len(self.fail_on)] == self.fail_on:
            raise GitError(args, stderr="fatal: simulated failure", status=128)
        return self.outputs.get(args, "")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AICOMMIT_* variables from the developer's shell out of the tests."""
    for env_var in ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    yield


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """Point the home directory (and so the config file) at a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def config_file(home_dir):
    """Write a valid config file into the temporary home directory."""
    def write(**values):
        data = {"api_key": "test-key"}
        data.update(values)
        path = home_dir / ".aicommit" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data))
        return path
    return write


@pytest.fixture
def config():
    return Config(api_key="test-key")


@pytest.fixture
def fake_runner():
    return FakeRunner(outputs={
        ("status",): "On branch main\nChanges to be committed:\n\tmodified:   app.py\n",
        ("diff", "--cached"): "diff --git a/app.py b/app.py\n+retry = 3\n",
    })


@pytest.fixture
def mock_endpoint():
    """Build an httpx transport that answers every request with the given body."""
    def factory(body, status_code=200):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if isinstance(body, (dict, list)):
                return httpx.Response(status_code, json=body)
            return httpx.Response(status_code, text=body)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport
    return factory


@pytest.fixture
def temp_git_repo(tmp_path, monkeypatch):
    """Create a temporary git repository with one commit."""
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    # Never let git discover a repository above the temporary directory
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

    repo = Repo.init(repo_dir)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    test_file = repo_dir / "app.py"
    test_file.write_text("retry = 1\n")
    repo.index.add(["app.py"])
    repo.index.commit("Initial commit")

    yield repo_dir


def completion_body(content):
    return {"choices": [{"message": {"content": content}}]}


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
