"""Exception types for barrel generation."""

from pathlib import Path


class BarrelGeneratorError(Exception):
    """Base exception for barrel generation errors."""

    pass


class SelectionInvalidError(BarrelGeneratorError):
    """The selected path is not a directory."""

    pass


class OutOfWorkspaceError(BarrelGeneratorError):
    """The selected path is not inside the active workspace root."""

    pass


class WriteFailureError(BarrelGeneratorError):
    """Error writing a barrel file to disk.

    Raised when the underlying write fails (permissions, missing parent,
    full disk). Barrel files written before the failure are left in place.
    """

    def __init__(self, path: Path, message: str):
        super().__init__(f"Failed to write {path}: {message}")
        self.path = path
