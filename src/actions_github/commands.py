"""Encoding of workflow commands.

Three message shapes are understood by the runner:

- Legacy commands written to stdout: ``::set-output name=foo::bar``
- Annotations written to stdout: ``::warning file=a.py,line=1,endLine=2,title=t::msg``
- File command records appended to a ``GITHUB_*`` file, framed with a
  random heredoc delimiter so values may span several lines.

Nothing here performs I/O; see ``channel`` for delivery.
"""

import uuid
from dataclasses import dataclass
from typing import Callable

from .eol import EOL
from .errors import DelimiterCollisionError

DELIMITER_PREFIX = "ghadelimiter_"

# Verbs accepted by format_command
ANNOTATION_COMMANDS = frozenset({"debug", "warning", "error", "notice"})


@dataclass(frozen=True)
class AnnotationProperties:
    """Source location attached to a warning, error or notice annotation."""

    title: str
    file: str
    line: int
    end_line: int

    def __post_init__(self):
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.end_line < 1:
            raise ValueError(f"end_line must be >= 1, got {self.end_line}")

    @classmethod
    def default(cls) -> "AnnotationProperties":
        """Properties pointing at the top of the .github directory."""
        return cls(title="", file=".github", line=1, end_line=1)

    def __str__(self) -> str:
        # Order is part of the wire format
        return (
            f"file={self.file},line={self.line},"
            f"endLine={self.end_line},title={self.title}"
        )


def format_old_command(command: str, name: str, value: str) -> str:
    """Format a legacy ``::command name=...::value`` line.

    No escaping is applied: a value containing ``::`` or a newline will
    confuse the runner. Use a file command for such values.
    """
    return f"::{command} name={name}::{value}"


def format_command(
    command: str, msg: str, properties: AnnotationProperties | None = None
) -> str:
    """Format an annotation command.

    Args:
        command: One of debug, warning, error, notice
        msg: Free text message
        properties: Optional source location; ``None`` yields the bare form

    Returns:
        The encoded command, without line ending
    """
    if command not in ANNOTATION_COMMANDS:
        raise ValueError(f"Unknown annotation command: {command}")
    if properties is None:
        return f"::{command}::{msg}"
    if command == "debug":
        raise ValueError("debug commands do not accept properties")
    return f"::{command} {properties}::{msg}"


def generate_delimiter(uuid_factory: Callable[[], uuid.UUID] = uuid.uuid4) -> str:
    """Return a fresh ``ghadelimiter_<uuid>`` token."""
    return f"{DELIMITER_PREFIX}{uuid_factory()}"


def prepare_key_value_message(
    key: str,
    value: str,
    *,
    uuid_factory: Callable[[], uuid.UUID] = uuid.uuid4,
) -> str:
    """Frame a key/value pair as a heredoc file command record.

    Args:
        key: Output name
        value: Output value, may contain newlines
        uuid_factory: Source of the random part of the delimiter

    Returns:
        ``{key}<<{delimiter}{EOL}{value}{EOL}{delimiter}``

    Raises:
        DelimiterCollisionError: If the key or value contains the delimiter
    """
    delimiter = generate_delimiter(uuid_factory)

    # Collisions are never retried with a new delimiter
    if delimiter in key:
        raise DelimiterCollisionError("name", delimiter)
    if delimiter in value:
        raise DelimiterCollisionError("value", delimiter)

    return f"{key}<<{delimiter}{EOL}{value}{EOL}{delimiter}"
