"""Inputs and outputs of a running action."""

import logging
import os
from typing import Mapping, TextIO

from .channel import file_command_variable, issue, issue_file_command
from .commands import format_old_command, prepare_key_value_message
from .errors import InputNotFoundError
from .gha import INPUT_PREFIX

logger = logging.getLogger(__name__)


def input_variable(name: str) -> str:
    """Environment variable the runner uses for input ``name``."""
    return INPUT_PREFIX + name.replace(" ", "_").upper()


def get_input(name: str, *, env: Mapping[str, str] | None = None) -> str:
    """Return the value of an action input.

    Example:
        # with INPUT_RELEASE_NAME=v1
        get_input("release name")  # Returns "v1"

    Raises:
        InputNotFoundError: If the input was not supplied
    """
    if env is None:
        env = os.environ
    value = env.get(input_variable(name))
    if value is None:
        raise InputNotFoundError(name)
    return value


def set_output(
    name: str,
    value: str,
    *,
    env: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Produce an output that later steps can read.

    Runners that expose GITHUB_OUTPUT get a heredoc record appended to
    that file. Older runners get the legacy ``::set-output`` command on
    stdout.

    Raises:
        OutputError: If the record could not be encoded or written
    """
    if env is None:
        env = os.environ

    if file_command_variable("OUTPUT") in env:
        message = prepare_key_value_message(name, value)
        issue_file_command("OUTPUT", message, env=env)
        return

    logger.debug(f"GITHUB_OUTPUT not set, using set-output command for {name}")
    issue(format_old_command("set-output", name, value), stream=stream)
