"""Exception taxonomy for filetree.

Root-level errors abort a scan and return nothing. ``DirectoryReadError``
is recovered inside the scanner. ``ScanInterruptedError`` subclasses
propagate through every traversal frame up to the caller.
"""

from __future__ import annotations


class FileTreeError(Exception):
    """Base class for every error raised by filetree.

    The CLI prints the message to stderr and exits with a non-zero code.
    """


class ConfigError(FileTreeError):
    """Raised when a ``Config`` is built with invalid values."""


class ScanInputError(FileTreeError):
    """Raised when the scan root path is empty."""


class StatError(FileTreeError):
    """Raised when the scan root cannot be inspected."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to stat path '{path}': {reason}")


class RootNotFoundError(StatError):
    """Raised when the scan root does not exist."""


class RootNotDirectoryError(FileTreeError):
    """Raised when the scan root exists but is not a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"path '{path}' is not a directory")


class DirectoryReadError(FileTreeError):
    """A directory below the root could not be listed.

    Never escapes :func:`filetree.scanner.scan`; the directory is kept
    as a leaf and the error is logged.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to read directory '{path}': {reason}")


class ScanInterruptedError(FileTreeError):
    """The scan stopped before completion. Not a failure of the input."""


class ScanCancelledError(ScanInterruptedError):
    """The scan context was cancelled."""

    def __init__(self) -> None:
        super().__init__("scan cancelled")


class ScanDeadlineExceededError(ScanInterruptedError):
    """The scan context deadline passed."""

    def __init__(self) -> None:
        super().__init__("scan timed out (directory too large)")
