"""
Validate-and-generate flow shared by the barrelgen commands.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from barrelgen.core.barrel import BarrelFile, BarrelGenerator
from barrelgen.core.barrel.generator import ProgressCallback
from barrelgen.core.config import GenerationConfig

from .target_resolver import FolderPicker, resolve_target

logger = logging.getLogger(__name__)


@dataclass
class GenerationOutcome:
    """
    Result of a completed generation command.

    Attributes:
        target_directory: The directory the command ran on.
        barrel_path: Path of the top-level barrel file.
        written_files: Every barrel written, nested ones before their parents.
    """

    target_directory: Path
    barrel_path: Path
    written_files: list[BarrelFile] = field(default_factory=list)


class BarrelService:
    """
    Resolves a target directory and generates its barrel file(s).

    The generation config is injected per service instance; the CLI builds
    a new service on every invocation so config edits apply to the next run.
    """

    def __init__(
        self,
        workspace_root: Path | str,
        config: GenerationConfig | None = None,
        picker: Optional[FolderPicker] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self._workspace_root = Path(workspace_root)
        self._config = config or GenerationConfig()
        self._picker = picker
        self._progress_callback = progress_callback

    def validate_and_generate(
        self,
        selection: Optional[Path | str] = None,
        recursive: bool = False,
    ) -> Optional[GenerationOutcome]:
        """
        Validate the selection and generate barrel file(s) for it.

        Args:
            selection: Explicit directory, or None to use the folder picker.
            recursive: Also generate barrels for active nested directories.

        Returns:
            GenerationOutcome, or None if the folder pick was cancelled.

        Raises:
            SelectionInvalidError: If the selection is not a directory.
            OutOfWorkspaceError: If the selection is outside the workspace.
            WriteFailureError: If a barrel file cannot be written.
        """
        target = resolve_target(selection, self._workspace_root, self._picker)
        if target is None:
            return None

        generator = BarrelGenerator(self._config, progress_callback=self._progress_callback)
        barrel_path = generator.generate(target, recursive=recursive)
        logger.info(f"Generated {len(generator.written_files)} barrel file(s) under {target}")

        return GenerationOutcome(
            target_directory=target,
            barrel_path=barrel_path,
            written_files=list(generator.written_files),
        )
