"""Exceptions raised by the log file manager."""


class LogFileError(Exception):
    """Base class for log file management failures."""


class NoDestinationError(LogFileError):
    """Raised when no candidate log directory is available."""

    def __init__(self):
        super().__init__("log: no log dirs")


class DirectoryCreateError(LogFileError):
    """Raised when a candidate log directory cannot be created."""

    def __init__(self, directory: str, error: OSError):
        self.directory = directory
        self.last_error = error
        super().__init__(f"log: cannot create log dir {directory}: {error}")


class CreateFailedError(LogFileError):
    """Raised when the log file could not be created in any candidate directory."""

    def __init__(self, error: OSError | None):
        self.last_error = error
        super().__init__(f"log: cannot create log: {error}")


class NotFoundError(LogFileError):
    """Raised when no existing log file for a tag can be opened."""

    def __init__(self, tag: str, error: OSError | None = None):
        self.tag = tag
        self.last_error = error
        detail = f": {error}" if error is not None else ""
        super().__init__(f"log: no existing log file for tag {tag}{detail}")
