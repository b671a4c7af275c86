"""Context of the current workflow run.

The runner describes the run through GITHUB_* environment variables and
a JSON file holding the webhook payload of the triggering event. Use
``get_context()`` to read them once into an immutable ``Context``.

See https://docs.github.com/en/actions/learn-github-actions/contexts#github-context
"""

import json
import logging
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TextIO

from .errors import ContextError
from .gha import DEFAULT_API_URL, DEFAULT_GRAPHQL_URL, DEFAULT_SERVER_URL
from .logger import error as error_log

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repo:
    """Owner and name of a repository."""

    owner: str
    repo: str


@dataclass(frozen=True)
class Context:
    """Snapshot of the GitHub context injected by the runner.

    ``payload`` is a read-only view of the top level of the event; nested
    objects are plain dicts and lists.
    """

    event_name: str
    sha: str
    ref: str
    workflow: str
    action: str
    actor: str
    job: str
    run_attempt: int
    run_number: int
    run_id: int
    api_url: str
    server_url: str
    graphql_url: str
    repo: Repo
    payload: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None:
        raise ContextError(name)
    return value


def _require_int(env: Mapping[str, str], name: str) -> int:
    value = _require(env, name)
    try:
        return int(value)
    except ValueError:
        raise ContextError(name, f"{name} is not an integer: {value!r}") from None


def _load_payload(path: str, stream: TextIO | None) -> dict[str, Any]:
    """Read the event payload, reporting problems as error annotations."""
    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        error_log(f"GITHUB_EVENT_PATH {path} does not exist", stream=stream)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        error_log(f"Failed to read file {e}", stream=stream)
        return {}

    try:
        payload = json.loads(content)
    except json.JSONDecodeError as e:
        error_log(f"Failed to parse JSON {e}", stream=stream)
        return {}

    if not isinstance(payload, dict):
        error_log(f"Event payload in {path} is not a JSON object", stream=stream)
        return {}

    logger.debug(f"Loaded event payload from {path}")
    return payload


def _get_repo(env: Mapping[str, str], payload: Mapping[str, Any]) -> Repo:
    repository = env.get("GITHUB_REPOSITORY")
    if repository is not None:
        parts = repository.split("/")
        if len(parts) != 2 or not all(parts):
            raise ContextError(
                "GITHUB_REPOSITORY",
                f"GITHUB_REPOSITORY must look like 'owner/repo', got {repository!r}",
            )
        return Repo(owner=parts[0], repo=parts[1])

    owner = name = None
    repository = payload.get("repository")
    if isinstance(repository, dict):
        name = repository.get("name")
        if isinstance(repository.get("owner"), dict):
            owner = repository["owner"].get("login")
    if owner is None or name is None:
        raise ContextError(
            "GITHUB_REPOSITORY",
            "context.repo requires a GITHUB_REPOSITORY environment variable "
            "like 'owner/repo'",
        )
    return Repo(owner=str(owner), repo=str(name))


def get_context(
    *, env: Mapping[str, str] | None = None, stream: TextIO | None = None
) -> Context:
    """Build the run context from the environment.

    Args:
        env: Environment to read from (default: os.environ)
        stream: Where payload problems are annotated (default: stdout)

    Returns:
        The hydrated Context

    Raises:
        ContextError: A required variable is missing or malformed, or the
            repository cannot be determined
    """
    if env is None:
        env = os.environ

    payload: dict[str, Any] = {}
    event_path = env.get("GITHUB_EVENT_PATH")
    if event_path:
        payload = _load_payload(event_path, stream)

    return Context(
        payload=MappingProxyType(payload),
        event_name=_require(env, "GITHUB_EVENT_NAME"),
        sha=_require(env, "GITHUB_SHA"),
        ref=_require(env, "GITHUB_REF"),
        workflow=_require(env, "GITHUB_WORKFLOW"),
        action=_require(env, "GITHUB_ACTION"),
        actor=_require(env, "GITHUB_ACTOR"),
        job=_require(env, "GITHUB_JOB"),
        run_attempt=_require_int(env, "GITHUB_RUN_ATTEMPT"),
        run_number=_require_int(env, "GITHUB_RUN_NUMBER"),
        run_id=_require_int(env, "GITHUB_RUN_ID"),
        api_url=env.get("GITHUB_API_URL", DEFAULT_API_URL),
        server_url=env.get("GITHUB_SERVER_URL", DEFAULT_SERVER_URL),
        graphql_url=env.get("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
        repo=_get_repo(env, payload),
    )
