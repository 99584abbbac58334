"""
Exception hierarchy shared by the hydrator components.

Each component raises its own subclass; the use case catches them at the
boundary and records them on the PipelineResult.
"""


class HydratorError(Exception):
    """Base exception for all hydrator failures."""


class NoRowsExtractedError(HydratorError):
    """The finals table was found but yielded no usable rows."""

    def __init__(self, message: str = "No data extracted from the table"):
        self.message = message
        super().__init__(message)


class WriterError(HydratorError):
    """Writing an output file failed."""

    def __init__(self, path, message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"Failed to write {path}: {message}")


class AuthenticationError(HydratorError):
    """OAuth credentials could not be obtained."""


class UploadError(HydratorError):
    """The Sheets API rejected or failed a request."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Sheets {operation} failed: {message}")
