"""Workflow commands for GitHub Actions written in Python."""

from .eol import EOL
from .errors import (
    ActionsError,
    ContextError,
    InputNotFoundError,
    OutputError,
    DelimiterCollisionError,
    FileCommandError,
    FileCommandEnvError,
    FileCommandMissingFileError,
    FileCommandOpenError,
    FileCommandWriteError,
)
from .commands import (
    AnnotationProperties,
    format_command,
    format_old_command,
    generate_delimiter,
    prepare_key_value_message,
)
from .channel import issue, issue_file_command
from .core import get_input, set_output
from .context import Context, Repo, get_context
from .logger import WorkflowCommandHandler, configure_logging, is_debug

__all__ = [
    "EOL",
    # Errors
    "ActionsError",
    "ContextError",
    "InputNotFoundError",
    "OutputError",
    "DelimiterCollisionError",
    "FileCommandError",
    "FileCommandEnvError",
    "FileCommandMissingFileError",
    "FileCommandOpenError",
    "FileCommandWriteError",
    # Encoding
    "AnnotationProperties",
    "format_command",
    "format_old_command",
    "generate_delimiter",
    "prepare_key_value_message",
    # Delivery
    "issue",
    "issue_file_command",
    # Inputs / outputs
    "get_input",
    "set_output",
    # Context
    "Context",
    "Repo",
    "get_context",
    # Logging
    "WorkflowCommandHandler",
    "configure_logging",
    "is_debug",
]
