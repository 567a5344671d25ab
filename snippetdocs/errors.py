from __future__ import annotations

from pathlib import Path


class SnippetSourceNotFoundError(FileNotFoundError):
    """Raised when the source file for a logical identity does not exist."""

    def __init__(self, path: Path, logical_identity: str) -> None:
        self.path = path
        self.logical_identity = logical_identity
        super().__init__(f"Snippet file {path} does not exist (identity '{logical_identity}')")


class SnippetExtractionError(RuntimeError):
    """Raised when a located source file cannot be read."""

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error generating snippet docs from {path}: {cause}")


class DirectoryCreationError(RuntimeError):
    """Raised when the output directory cannot be created."""

    def __init__(self, directory: Path, cause: Exception | None = None) -> None:
        self.directory = directory
        self.cause = cause
        message = f"Could not create directory {directory}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
