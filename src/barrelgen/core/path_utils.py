"""
Path utilities for barrelgen.

Provides canonical (forward-slash) path conversion, target directory
validation and workspace containment checks used by the generator,
the target resolver and the CLI.
"""

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class PathValidationResult:
    """Result of path validation.

    Attributes:
        valid: True if the path is valid for the requested operation.
        error_message: Human-readable error message if validation failed.
    """
    valid: bool
    error_message: Optional[str] = None


def to_canonical(path: str | Path, sep: str = os.sep) -> str:
    """
    Convert a platform-native path to its canonical forward-slash form.

    Args:
        path: Native path (string or Path object).
        sep: Native separator to replace. Defaults to the host separator.

    Returns:
        The path with every native separator replaced by '/'.
    """
    return str(path).replace(sep, posixpath.sep)


def to_native(canonical_path: str, sep: str = os.sep) -> str:
    """
    Convert a canonical forward-slash path to the platform-native form.

    Args:
        canonical_path: Path using '/' as separator.
        sep: Native separator to use. Defaults to the host separator.

    Returns:
        The path with every '/' replaced by the native separator.
    """
    return canonical_path.replace(posixpath.sep, sep)


def is_within_workspace(path: str | Path, workspace_root: str | Path) -> bool:
    """
    Check whether a path equals or is a descendant of the workspace root.

    Comparison is done on resolved path components, so a sibling directory
    sharing a name prefix with the root ('/work' vs '/workshop') is rejected.

    Args:
        path: Path to check.
        workspace_root: Root directory of the active workspace.

    Returns:
        True if the path is inside the workspace, False otherwise.
    """
    try:
        resolved = Path(path).resolve()
        root = Path(workspace_root).resolve()
    except (OSError, RuntimeError):
        return False

    return resolved == root or root in resolved.parents


def validate_target_directory(path: str | Path) -> PathValidationResult:
    """
    Validate that a path can receive a barrel file.

    Performs the following checks:
    1. Path exists
    2. Path is a directory

    Args:
        path: Path to validate (string or Path object).

    Returns:
        PathValidationResult with valid=True if all checks pass,
        or valid=False with an appropriate error message.
    """
    try:
        p = Path(path) if isinstance(path, str) else path

        if not p.exists():
            return PathValidationResult(
                valid=False,
                error_message=f"Path '{path}' does not exist"
            )

        if not p.is_dir():
            return PathValidationResult(
                valid=False,
                error_message=f"Path '{path}' is not a directory"
            )

        return PathValidationResult(valid=True)

    except (OSError, ValueError) as e:
        return PathValidationResult(
            valid=False,
            error_message=f"Invalid path '{path}': {e}"
        )


def relative_canonical(path: Path, base: Path) -> str:
    """Return ``path`` relative to ``base`` in canonical form."""
    return Path(path).relative_to(base).as_posix()
