"""Delivery of encoded commands to the runner.

Commands reach the runner either on stdout, where the log scanner picks
them up line by line, or by appending to a file whose path the runner
exposes as ``GITHUB_<COMMAND>`` (for example ``GITHUB_OUTPUT``).
"""

import logging
import os
import sys
from typing import Mapping, TextIO

from .eol import EOL
from .errors import (
    FileCommandEnvError,
    FileCommandMissingFileError,
    FileCommandOpenError,
    FileCommandWriteError,
)
from .gha import FILE_COMMAND_PREFIX

logger = logging.getLogger(__name__)


def issue(message: str, *, stream: TextIO | None = None) -> None:
    """Write a message and line ending to stdout (or ``stream``)."""
    target = stream if stream is not None else sys.stdout
    target.write(message + EOL)
    target.flush()


def file_command_variable(command: str) -> str:
    """Name of the environment variable holding the file for ``command``."""
    return f"{FILE_COMMAND_PREFIX}{command}"


def issue_file_command(
    command: str, message: str, *, env: Mapping[str, str] | None = None
) -> None:
    """Append a message to the file backing a file command.

    The file is provided by the runner and is never created here.

    Args:
        command: File command name, e.g. "OUTPUT"
        message: Encoded record to append
        env: Environment to resolve the file path from (default: os.environ)

    Raises:
        FileCommandEnvError: The GITHUB_<command> variable is not set
        FileCommandMissingFileError: The file does not exist
        FileCommandOpenError: The file could not be opened for append
        FileCommandWriteError: The record could not be written
    """
    if env is None:
        env = os.environ

    file_path = env.get(file_command_variable(command))
    if file_path is None:
        raise FileCommandEnvError(command)

    if not os.path.exists(file_path):
        raise FileCommandMissingFileError(file_path)

    try:
        # newline="" keeps EOL as written on every platform
        handle = open(file_path, "a", encoding="utf-8", newline="")
    except OSError as e:
        raise FileCommandOpenError(file_path) from e

    try:
        with handle:
            handle.write(message + EOL)
    except OSError as e:
        raise FileCommandWriteError(file_path) from e

    logger.debug(f"Appended {command} file command to {file_path}")
