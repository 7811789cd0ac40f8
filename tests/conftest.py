"""
Shared pytest fixtures for the release action test suite.
"""
import json
from pathlib import Path

import pytest

from release_action.exceptions import ExitError

# ── Constants ──────────────────────────────────────────────────────────────
OWNER_NAME = "octocat"
OWNER_EMAIL = "octocat@example.com"


# ── Fake command runner ─────────────────────────────────────────────────────

class FakeRunner:
    """
    Records run_command calls instead of spawning processes.

    Tags listed in existing_tags resolve with git rev-parse; every other
    rev-parse exits 1 like the real command. fail() makes commands that
    start with a given prefix raise.
    """

    def __init__(self):
        self.calls = []
        self.existing_tags = set()
        self._failures = []

    def fail(self, *prefix, error=None):
        self._failures.append((tuple(prefix), error or ExitError(1, "fatal: boom")))

    def __call__(self, cwd, command, *args):
        argv = (command, *args)
        self.calls.append(argv)

        for prefix, error in self._failures:
            if argv[:len(prefix)] == prefix:
                raise error

        if argv[:2] == ("git", "rev-parse"):
            if argv[-1] not in {f"refs/tags/{tag}" for tag in self.existing_tags}:
                raise ExitError(1, "")

    @property
    def commands(self):
        return [" ".join(argv) for argv in self.calls]

    def ran(self, *prefix):
        return any(argv[:len(prefix)] == prefix for argv in self.calls)


@pytest.fixture
def runner(monkeypatch):
    """FakeRunner patched into every module that shells out."""
    fake = FakeRunner()
    monkeypatch.setattr("release_action.utils.git_utils.run_command", fake)
    monkeypatch.setattr("release_action.tools.publish_tools.run_command", fake)
    return fake


# ── Workspace and event files ───────────────────────────────────────────────

@pytest.fixture
def workspace(tmp_path):
    """Package directory; write_manifest() fills in package.json."""
    d = tmp_path / "workspace"
    d.mkdir()
    return d


@pytest.fixture
def write_manifest(workspace):
    def _write(version="1.2.3", **extra):
        data = {"name": "my-package", **extra}
        if version is not None:
            data["version"] = version
        (workspace / "package.json").write_text(json.dumps(data), encoding="utf-8")
        return workspace / "package.json"
    return _write


def make_event(messages, ref="refs/heads/master", name=OWNER_NAME, email=OWNER_EMAIL):
    """Minimal push event payload."""
    return {
        "ref": ref,
        "repository": {"owner": {"name": name, "email": email}},
        "commits": [{"id": f"{i:040d}", "message": message} for i, message in enumerate(messages)],
    }


@pytest.fixture
def write_event(tmp_path):
    def _write(messages=("Release 1.2.3",), **kwargs):
        path = tmp_path / "event.json"
        path.write_text(json.dumps(make_event(list(messages), **kwargs)), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def environ(workspace, tmp_path):
    """Base configuration mapping pointing at the temporary files."""
    return {
        "GITHUB_WORKSPACE": str(workspace),
        "GITHUB_EVENT_PATH": str(tmp_path / "event.json"),
    }
