"""Log messages and annotations for the job log.

Warnings, errors and notices become annotations in the workflow UI and
can point at a file and line range. Debug messages are only shown when
debug logging is enabled on the runner.
"""

import logging
import os
from typing import Mapping, TextIO

from .channel import issue
from .commands import AnnotationProperties, format_command
from .gha import RUNNER_DEBUG


def debug(msg: str, *, stream: TextIO | None = None) -> None:
    """Print a debug message, visible only on debug runners."""
    issue(format_command("debug", msg), stream=stream)


def info(msg: str, *, stream: TextIO | None = None) -> None:
    """Print a plain message."""
    issue(msg, stream=stream)


def warning(
    msg: str,
    properties: AnnotationProperties | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Create a warning annotation."""
    issue(format_command("warning", msg, properties), stream=stream)


def error(
    msg: str,
    properties: AnnotationProperties | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Create an error annotation."""
    issue(format_command("error", msg, properties), stream=stream)


def notice(
    msg: str,
    properties: AnnotationProperties | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Create a notice annotation."""
    issue(format_command("notice", msg, properties), stream=stream)


def is_debug(*, env: Mapping[str, str] | None = None) -> bool:
    """Return True when the runner has debug logging enabled.

    Only RUNNER_DEBUG=1 counts; an unset variable means debug is off.
    """
    if env is None:
        env = os.environ
    return env.get(RUNNER_DEBUG) == "1"


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that emits records as workflow commands.

    Example:
        logger = logging.getLogger(__name__)
        logger.addHandler(WorkflowCommandHandler())

        logger.warning("Cache miss")  # prints "::warning::Cache miss"
    """

    def __init__(self, stream: TextIO | None = None, level: int = logging.NOTSET):
        super().__init__(level)
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            if record.levelno >= logging.ERROR:
                error(msg, stream=self.stream)
            elif record.levelno >= logging.WARNING:
                warning(msg, stream=self.stream)
            elif record.levelno >= logging.INFO:
                info(msg, stream=self.stream)
            else:
                debug(msg, stream=self.stream)
        except Exception:
            self.handleError(record)


def configure_logging(
    level: int = logging.INFO, stream: TextIO | None = None
) -> WorkflowCommandHandler:
    """Route the root logger through a WorkflowCommandHandler.

    Calling it again only updates the level; the handler installed by the
    first call (and its stream) is kept so records are not duplicated.

    Returns:
        The installed handler
    """
    root = logging.getLogger()
    root.setLevel(level)
    for existing in root.handlers:
        if isinstance(existing, WorkflowCommandHandler):
            return existing

    handler = WorkflowCommandHandler(stream=stream)
    root.addHandler(handler)
    return handler
