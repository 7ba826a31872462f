"""
Target directory resolution for barrelgen.

Maps an explicit selection or an interactive folder pick to a validated
directory inside the active workspace root.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from barrelgen.core.errors import OutOfWorkspaceError, SelectionInvalidError
from barrelgen.core.path_utils import is_within_workspace, validate_target_directory

logger = logging.getLogger(__name__)

# Returns the picked folder, or None when the user cancels
FolderPicker = Callable[[], Optional[Path | str]]

SELECT_DIRECTORY_MESSAGE = "Select a directory!"
SELECT_WORKSPACE_FOLDER_MESSAGE = "Select a folder from the workspace"


def resolve_target(
    explicit_selection: Optional[Path | str],
    workspace_root: Path | str,
    picker: Optional[FolderPicker] = None,
) -> Optional[Path]:
    """
    Resolve and validate the directory that receives a barrel file.

    Args:
        explicit_selection: Path chosen up front, or None to prompt.
        workspace_root: Root directory of the active workspace.
        picker: Interactive folder picker used when no explicit selection
            is given. Returning None means the user cancelled.

    Returns:
        The resolved absolute directory, or None if the user cancelled.

    Raises:
        SelectionInvalidError: If the selection is not a directory.
        OutOfWorkspaceError: If the selection is outside the workspace root.
    """
    selection = explicit_selection
    if selection is None:
        if picker is None:
            logger.debug("No selection and no picker available")
            return None
        selection = picker()
        if selection is None or str(selection).strip() == "":
            logger.debug("Folder selection cancelled")
            return None

    target = Path(selection).expanduser()
    validation = validate_target_directory(target)
    if not validation.valid:
        logger.debug(f"Rejected selection {target}: {validation.error_message}")
        raise SelectionInvalidError(SELECT_DIRECTORY_MESSAGE)

    if not is_within_workspace(target, workspace_root):
        logger.debug(f"Rejected selection {target}: outside {workspace_root}")
        raise OutOfWorkspaceError(SELECT_WORKSPACE_FOLDER_MESSAGE)

    return target.resolve()
