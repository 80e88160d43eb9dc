"""md2html exception hierarchy"""

from pathlib import Path


class Md2HtmlError(Exception):
    """Base exception for all md2html errors."""


class InvalidInputError(Md2HtmlError, TypeError):
    """Raised when the converter is given something other than text."""


class FileAccessError(Md2HtmlError):
    """Raised when a file cannot be read or written."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)


class NotFoundError(FileAccessError):
    """Raised when an input file does not exist."""


class PermissionDeniedError(FileAccessError):
    """Raised when the OS refuses access to a file."""


class WatchError(Md2HtmlError):
    """Raised when the underlying filesystem watch fails."""
