"""
Abstract interfaces for barrel generation.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class BarrelGeneratorInterface(ABC):
    """
    Abstract interface for barrel file generation.

    Implementations write one barrel file per visited directory and return
    the path of the top-level barrel file.
    """

    @abstractmethod
    def generate(
        self,
        target_directory: Path,
        recursive: bool = False,
        ancestor_chain: tuple[str, ...] = (),
    ) -> Path:
        """
        Generate the barrel file for a directory.

        Args:
            target_directory: Directory receiving the barrel file
            recursive: Whether active subdirectories get their own barrels
            ancestor_chain: Directory names accumulated since the top-level call

        Returns:
            Absolute path of the written barrel file

        Raises:
            WriteFailureError: If a barrel file cannot be written
        """
        pass
