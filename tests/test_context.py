"""Tests for run context hydration."""

import dataclasses
import io
import json
import pytest

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from actions_github import EOL, ContextError, Repo, get_context


@pytest.fixture
def env():
    """Minimal environment of a push run."""
    return {
        "GITHUB_EVENT_NAME": "push",
        "GITHUB_SHA": "ffac537e6cbbf934b08745a378932722df287a53",
        "GITHUB_REF": "refs/heads/main",
        "GITHUB_WORKFLOW": "CI",
        "GITHUB_ACTION": "__run",
        "GITHUB_ACTOR": "octocat",
        "GITHUB_JOB": "build",
        "GITHUB_RUN_ATTEMPT": "2",
        "GITHUB_RUN_NUMBER": "42",
        "GITHUB_RUN_ID": "1658821493",
        "GITHUB_REPOSITORY": "octo-org/octo-repo",
    }


# =============================================================================
# Environment fields
# =============================================================================


class TestGetContext:
    """Tests for reading GITHUB_* variables."""

    def test_fields(self, env):
        context = get_context(env=env)

        assert context.event_name == "push"
        assert context.sha == "ffac537e6cbbf934b08745a378932722df287a53"
        assert context.ref == "refs/heads/main"
        assert context.workflow == "CI"
        assert context.action == "__run"
        assert context.actor == "octocat"
        assert context.job == "build"
        assert context.run_attempt == 2
        assert context.run_number == 42
        assert context.run_id == 1658821493
        assert context.repo == Repo(owner="octo-org", repo="octo-repo")
        assert context.payload == {}

    def test_url_defaults(self, env):
        """URLs fall back to github.com endpoints."""
        context = get_context(env=env)

        assert context.api_url == "https://api.github.com"
        assert context.server_url == "https://github.com"
        assert context.graphql_url == "https://api.github.com/graphql"

    def test_url_overrides(self, env):
        """GitHub Enterprise URLs are taken from the environment."""
        env["GITHUB_API_URL"] = "https://ghe.example.com/api/v3"
        env["GITHUB_SERVER_URL"] = "https://ghe.example.com"
        env["GITHUB_GRAPHQL_URL"] = "https://ghe.example.com/api/graphql"

        context = get_context(env=env)

        assert context.api_url == "https://ghe.example.com/api/v3"
        assert context.server_url == "https://ghe.example.com"
        assert context.graphql_url == "https://ghe.example.com/api/graphql"

    @pytest.mark.parametrize(
        "variable",
        [
            "GITHUB_EVENT_NAME",
            "GITHUB_SHA",
            "GITHUB_REF",
            "GITHUB_WORKFLOW",
            "GITHUB_ACTION",
            "GITHUB_ACTOR",
            "GITHUB_JOB",
            "GITHUB_RUN_ATTEMPT",
            "GITHUB_RUN_NUMBER",
            "GITHUB_RUN_ID",
        ],
    )
    def test_missing_required(self, env, variable):
        """Each missing required variable is reported by name."""
        del env[variable]

        with pytest.raises(ContextError) as exc_info:
            get_context(env=env)

        assert exc_info.value.field == variable
        assert variable in str(exc_info.value)

    def test_non_integer_run_id(self, env):
        env["GITHUB_RUN_ID"] = "abc"

        with pytest.raises(ContextError) as exc_info:
            get_context(env=env)

        assert exc_info.value.field == "GITHUB_RUN_ID"

    def test_frozen(self, env):
        context = get_context(env=env)
        with pytest.raises(dataclasses.FrozenInstanceError):
            context.sha = "0" * 40


# =============================================================================
# Repository
# =============================================================================


class TestRepo:
    """Tests for owner/repo resolution."""

    def test_malformed_repository(self, env):
        env["GITHUB_REPOSITORY"] = "no-slash"

        with pytest.raises(ContextError) as exc_info:
            get_context(env=env)

        assert exc_info.value.field == "GITHUB_REPOSITORY"

    def test_from_payload(self, env, tmp_path):
        """Without GITHUB_REPOSITORY the payload is used."""
        del env["GITHUB_REPOSITORY"]
        event = tmp_path / "event.json"
        event.write_text(
            json.dumps({"repository": {"name": "hello", "owner": {"login": "me"}}})
        )
        env["GITHUB_EVENT_PATH"] = str(event)

        context = get_context(env=env)

        assert context.repo == Repo(owner="me", repo="hello")

    @pytest.mark.parametrize(
        "payload",
        [
            {"repository": "octo/repo"},
            {"repository": ["octo", "repo"]},
            {"repository": {"owner": "me", "name": "x"}},
            {"repository": {"owner": 7, "name": "x"}},
            {"repository": {"owner": {"login": "me"}}},
        ],
    )
    def test_unexpected_payload_shape(self, env, tmp_path, payload):
        """Payloads without repository.owner.login and name are rejected."""
        del env["GITHUB_REPOSITORY"]
        event = tmp_path / "event.json"
        event.write_text(json.dumps(payload))
        env["GITHUB_EVENT_PATH"] = str(event)

        with pytest.raises(ContextError) as exc_info:
            get_context(env=env)

        assert exc_info.value.field == "GITHUB_REPOSITORY"

    def test_unresolvable(self, env):
        del env["GITHUB_REPOSITORY"]

        with pytest.raises(ContextError) as exc_info:
            get_context(env=env)

        assert exc_info.value.field == "GITHUB_REPOSITORY"
        assert "owner/repo" in str(exc_info.value)


# =============================================================================
# Event payload
# =============================================================================


class TestPayload:
    """Tests for loading the event payload."""

    def test_loaded(self, env, tmp_path):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"ref": "refs/heads/main", "forced": False}))
        env["GITHUB_EVENT_PATH"] = str(event)

        context = get_context(env=env)

        assert context.payload == {"ref": "refs/heads/main", "forced": False}

    def test_missing_file_annotated(self, env, tmp_path):
        """A missing payload file is an error annotation, not a failure."""
        missing = tmp_path / "missing.json"
        env["GITHUB_EVENT_PATH"] = str(missing)
        stream = io.StringIO()

        context = get_context(env=env, stream=stream)

        assert context.payload == {}
        assert stream.getvalue() == (
            f"::error::GITHUB_EVENT_PATH {missing} does not exist" + EOL
        )

    def test_invalid_json_annotated(self, env, tmp_path):
        event = tmp_path / "event.json"
        event.write_text("{not json")
        env["GITHUB_EVENT_PATH"] = str(event)
        stream = io.StringIO()

        context = get_context(env=env, stream=stream)

        assert context.payload == {}
        assert stream.getvalue().startswith("::error::Failed to parse JSON")

    def test_invalid_utf8_annotated(self, env, tmp_path):
        """An event file that is not UTF-8 is reported as a read failure."""
        event = tmp_path / "event.json"
        event.write_bytes(b'{"a": "\xff\xfe"}')
        env["GITHUB_EVENT_PATH"] = str(event)
        stream = io.StringIO()

        context = get_context(env=env, stream=stream)

        assert context.payload == {}
        assert stream.getvalue().startswith("::error::Failed to read file")

    def test_unreadable_path_annotated(self, env, tmp_path):
        """A path that exists but cannot be read is annotated."""
        env["GITHUB_EVENT_PATH"] = str(tmp_path)
        stream = io.StringIO()

        context = get_context(env=env, stream=stream)

        assert context.payload == {}
        assert stream.getvalue().startswith("::error::Failed to read file")

    @pytest.mark.parametrize("content", ["[1, 2, 3]", "42", '"text"', "null"])
    def test_non_object_annotated(self, env, tmp_path, content):
        """A payload that is not a JSON object is replaced by {}."""
        event = tmp_path / "event.json"
        event.write_text(content)
        env["GITHUB_EVENT_PATH"] = str(event)
        stream = io.StringIO()

        context = get_context(env=env, stream=stream)

        assert context.payload == {}
        assert stream.getvalue() == (
            f"::error::Event payload in {event} is not a JSON object" + EOL
        )

    def test_payload_read_only(self, env, tmp_path):
        event = tmp_path / "event.json"
        event.write_text(json.dumps({"ref": "refs/heads/main"}))
        env["GITHUB_EVENT_PATH"] = str(event)

        context = get_context(env=env)

        with pytest.raises(TypeError):
            context.payload["ref"] = "refs/heads/other"
        assert context.payload["ref"] == "refs/heads/main"
