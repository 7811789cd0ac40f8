"""
Unit tests for tools/tag_tools.py

Tests template rendering, the idempotency check and the best-effort
failure policy of the tagging step.
"""
import pytest

from release_action.exceptions import CommandError, ExitError
from release_action.models.release import ReleaseConfig, TagAuthor, TagStatus
from release_action.tools.tag_tools import create_tag, render_template, tag_release


@pytest.fixture
def config():
    return ReleaseConfig(
        commit_pattern=r"^(?:Release|Version) (\S+)",
        tag_name="v%s",
        tag_message="Release %s",
        tag_author=TagAuthor(name="octocat", email="octocat@example.com"),
        publish_with="yarn",
    )


# ── render_template ─────────────────────────────────────────────────────────

class TestRenderTemplate:
    def test_single_placeholder(self):
        assert render_template("v%s", "1.2.3") == "v1.2.3"

    def test_every_placeholder_replaced(self):
        assert render_template("%s (release %s)", "1.2.3") == "1.2.3 (release 1.2.3)"

    def test_rendering_twice_is_stable(self):
        once = render_template("v%s", "1.2.3")
        assert render_template(once, "1.2.3") == "v1.2.3"


# ── create_tag ──────────────────────────────────────────────────────────────

class TestCreateTag:
    def test_full_sequence(self, runner, tmp_path, config):
        assert create_tag(tmp_path, config, "1.2.3") is TagStatus.CREATED
        assert runner.calls == [
            ("git", "rev-parse", "-q", "--verify", "refs/tags/v1.2.3"),
            ("git", "config", "user.name", "octocat"),
            ("git", "config", "user.email", "octocat@example.com"),
            ("git", "tag", "-a", "-m", "Release 1.2.3", "v1.2.3"),
            ("git", "push", "origin", "refs/tags/v1.2.3"),
        ]

    def test_existing_tag_skips_tagging(self, runner, tmp_path, config):
        runner.existing_tags.add("v1.2.3")
        assert create_tag(tmp_path, config, "1.2.3") is TagStatus.ALREADY_EXISTS
        assert not runner.ran("git", "config")
        assert not runner.ran("git", "tag")
        assert not runner.ran("git", "push")

    def test_tag_failure_raises(self, runner, tmp_path, config):
        runner.fail("git", "tag")
        with pytest.raises(ExitError):
            create_tag(tmp_path, config, "1.2.3")
        assert not runner.ran("git", "push")


# ── tag_release ─────────────────────────────────────────────────────────────

class TestTagRelease:
    def test_success(self, runner, tmp_path, config):
        assert tag_release(tmp_path, config, "1.2.3") is TagStatus.CREATED

    def test_already_exists_is_not_failure(self, runner, tmp_path, config):
        runner.existing_tags.add("v1.2.3")
        assert tag_release(tmp_path, config, "1.2.3") is TagStatus.ALREADY_EXISTS

    def test_tag_command_failure_swallowed(self, runner, tmp_path, config):
        runner.fail("git", "tag", error=ExitError(128, "fatal: tag exists"))
        assert tag_release(tmp_path, config, "1.2.3") is TagStatus.FAILED

    def test_push_failure_swallowed(self, runner, tmp_path, config):
        runner.fail("git", "push", error=ExitError(1, "rejected"))
        assert tag_release(tmp_path, config, "1.2.3") is TagStatus.FAILED

    def test_launch_failure_swallowed(self, runner, tmp_path, config):
        runner.fail("git", error=CommandError("command failed: git"))
        assert tag_release(tmp_path, config, "1.2.3") is TagStatus.FAILED

    def test_missing_author_swallowed(self, runner, tmp_path, config):
        anonymous = config.model_copy(update={"tag_author": TagAuthor()})
        assert tag_release(tmp_path, anonymous, "1.2.3") is TagStatus.FAILED
        assert not runner.ran("git", "tag")
