"""
Eligibility rules deciding which files a directory's barrel exports.

The configuration is passed in on every call; nothing is cached between
checks so a reloaded config applies to the next run.
"""

import logging
from pathlib import Path, PurePath

from barrelgen.core.config import GenerationConfig

from .models import Classification

logger = logging.getLogger(__name__)

FREEZED_MARKER = ".freezed"
GENERATED_MARKER = ".g"


def barrel_file_name(dir_name: str, extension: str) -> str:
    """Name of the barrel file a directory called ``dir_name`` produces."""
    return f"{dir_name}{extension}"


def classify(
    file_path: str | PurePath,
    containing_dir_name: str,
    config: GenerationConfig,
) -> Classification:
    """
    Classify a file against the barrel of ``containing_dir_name``.

    Rules are applied in order:
    1. Files without the configured extension are not applicable.
    2. The directory's own barrel file is not applicable.
    3. ``*.freezed<ext>`` files are excluded when ``exclude_freezed`` is set.
    4. ``*.g<ext>`` files are excluded when ``exclude_generated`` is set.
    5. Anything else is exported.

    Args:
        file_path: Path of the candidate file (native or canonical)
        containing_dir_name: Name of the directory whose barrel is built
        config: Generation settings supplying the extension and toggles

    Returns:
        The Classification for the file
    """
    name = PurePath(file_path).name
    extension = config.extension

    if not name.endswith(extension):
        return Classification.NOT_APPLICABLE

    if name == barrel_file_name(containing_dir_name, extension):
        return Classification.NOT_APPLICABLE

    if name.endswith(f"{FREEZED_MARKER}{extension}"):
        if config.exclude_freezed:
            return Classification.GENERATED_EXCLUDED
        return Classification.EXPORT

    if name.endswith(f"{GENERATED_MARKER}{extension}"):
        if config.exclude_generated:
            return Classification.GENERATED_EXCLUDED
        return Classification.EXPORT

    return Classification.EXPORT


def is_exportable(
    file_path: str | PurePath,
    containing_dir_name: str,
    config: GenerationConfig,
) -> bool:
    """Return True if the file belongs in the barrel of ``containing_dir_name``."""
    result = classify(file_path, containing_dir_name, config)
    if result is Classification.GENERATED_EXCLUDED:
        logger.debug(f"Excluding generated file: {Path(file_path).name}")
    return result is Classification.EXPORT
