"""Exceptions raised by the workflow command toolkit."""


class ActionsError(Exception):
    """Base class for every error raised while talking to the runner."""


class ContextError(ActionsError):
    """A context field could not be read from the environment."""

    def __init__(self, field: str, detail: str | None = None):
        self.field = field
        self.detail = detail
        super().__init__(
            f"Problem while generating the context: {detail or field}"
        )


class InputNotFoundError(ActionsError):
    """No INPUT_* variable exists for the requested input."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Input required and not supplied: {name}")


class OutputError(ActionsError):
    """An output could not be encoded or delivered."""


class DelimiterCollisionError(OutputError):
    """The generated heredoc delimiter appears inside the key or value."""

    def __init__(self, side: str, delimiter: str):
        self.side = side
        self.delimiter = delimiter
        super().__init__(
            f'Unexpected input: {side} should not contain the delimiter "{delimiter}"'
        )


class FileCommandError(OutputError):
    """Base class for file command delivery failures."""


class FileCommandEnvError(FileCommandError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(
            f"Unable to find environment variable for file command {command}"
        )


class FileCommandMissingFileError(FileCommandError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Missing file at path: {path}")


class FileCommandOpenError(FileCommandError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to open file at path: {path}")


class FileCommandWriteError(FileCommandError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to write to file at path: {path}")
