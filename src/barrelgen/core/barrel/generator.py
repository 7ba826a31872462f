"""
BarrelGenerator implementation: recursive directory scan and aggregation.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pathspec

from barrelgen.core.config import GenerationConfig
from barrelgen.core.errors import WriteFailureError
from barrelgen.core.path_utils import relative_canonical

from .eligibility import barrel_file_name, classify, is_exportable
from .interfaces import BarrelGeneratorInterface
from .models import BarrelFile, CandidateFile, GenerationRequest, sort_entries

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[BarrelFile], None]


class BarrelGenerator(BarrelGeneratorInterface):
    """
    Concrete implementation of BarrelGeneratorInterface.

    For each visited directory the generator:
    - lists the subtree rooted at the directory (symlinks are not followed)
    - exports eligible immediate child files
    - marks first-level subdirectories holding an eligible file at any depth
      as active
    - in recursive mode, generates the barrel of every active subdirectory
      first and exports it from the parent
    - writes ``<dir>/<dir name><ext>`` with the sorted export lines

    Every written barrel is appended to ``written_files`` in write order,
    so nested barrels always precede their parent.
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        progress_callback: ProgressCallback | None = None,
    ):
        """
        Initialize the BarrelGenerator.

        Args:
            config: Generation settings (extension, exclusion toggles, ignore
                patterns). If None, defaults are used.
            progress_callback: Optional callable invoked with each BarrelFile
                right after it has been written.
        """
        self._config = config or GenerationConfig()
        self._progress_callback = progress_callback
        self._ignore_spec = pathspec.PathSpec.from_lines(
            pathspec.patterns.GitWildMatchPattern, self._config.ignore_patterns
        )
        self.written_files: list[BarrelFile] = []

    def generate(
        self,
        target_directory: Path,
        recursive: bool = False,
        ancestor_chain: tuple[str, ...] = (),
    ) -> Path:
        """
        Generate the barrel file for ``target_directory``.

        Args:
            target_directory: Directory receiving the barrel file
            recursive: Whether active subdirectories get their own barrels
            ancestor_chain: Directory names accumulated since the top-level call

        Returns:
            Absolute path of the written barrel file

        Raises:
            WriteFailureError: If any barrel file in the traversal cannot be
                written. Barrels written before the failure stay on disk.
        """
        request = GenerationRequest(
            target_directory=Path(target_directory).resolve(),
            recursive=recursive,
            ancestor_chain=tuple(ancestor_chain),
        )
        return self._generate(request).path

    def _generate(self, request: GenerationRequest) -> BarrelFile:
        target = request.target_directory
        dir_name = request.dir_name
        logger.debug(f"Scanning {request.qualified_name} ({target})")

        entries, active_dirs = self._partition(target, dir_name, request.ignore_root)

        if request.recursive:
            for subdirectory in active_dirs:
                nested = self._generate(request.child(subdirectory))
                entries.append(relative_canonical(nested.path, target))
        elif active_dirs:
            logger.debug(
                f"Skipping {len(active_dirs)} active subdirectories of {target} "
                "(recursive=False)"
            )

        barrel = BarrelFile(
            path=target / barrel_file_name(dir_name, self._config.extension),
            entries=sort_entries(entries),
        )
        self._write(barrel)
        return barrel

    def _partition(
        self, target: Path, dir_name: str, ignore_root: Path
    ) -> tuple[list[str], list[Path]]:
        """
        Split the files of a subtree into export entries and active subdirectories.

        Ignore patterns are matched relative to ``ignore_root``, the top-level
        target, so every level of a recursive run sees the same files.

        Returns:
            Tuple of (immediate child file names to export, sorted active
            first-level subdirectories)
        """
        entries: list[str] = []
        active: set[Path] = set()

        for file_path in self._scan(target, ignore_root):
            rel_parts = file_path.relative_to(target).parts

            if len(rel_parts) == 1:
                candidate = CandidateFile(
                    path=file_path,
                    classification=classify(file_path, dir_name, self._config),
                )
                logger.debug(f"{candidate.classification.value}: {file_path}")
                if candidate.is_exportable:
                    entries.append(rel_parts[0])
                continue

            subdirectory = target / rel_parts[0]
            if subdirectory in active:
                continue
            # Descendants are checked against their own directory's barrel
            if is_exportable(file_path, file_path.parent.name, self._config):
                active.add(subdirectory)

        return entries, sorted(active)

    def _scan(self, root: Path, ignore_root: Path) -> Iterator[Path]:
        """Yield every regular file under ``root``, skipping ignored entries."""
        yield from self._scan_directory(root, ignore_root)

    def _scan_directory(self, current_path: Path, root: Path) -> Iterator[Path]:
        try:
            entries = sorted(current_path.iterdir(), key=lambda p: p.name)
        except PermissionError as e:
            logger.warning(f"Permission denied accessing directory: {current_path} - {e}")
            return
        except OSError as e:
            logger.warning(f"Error accessing directory: {current_path} - {e}")
            return

        for entry in entries:
            if entry.is_symlink():
                logger.debug(f"Skipping symlink: {entry}")
                continue

            is_dir = entry.is_dir()
            if self._should_ignore(entry, root, is_dir):
                logger.debug(f"Ignoring: {entry}")
                continue

            if is_dir:
                yield from self._scan_directory(entry, root)
            elif entry.is_file():
                yield entry

    def _should_ignore(self, path: Path, root: Path, is_dir: bool) -> bool:
        rel_path = relative_canonical(path, root)
        if is_dir:
            rel_path += "/"
        return self._ignore_spec.match_file(rel_path)

    def _write(self, barrel: BarrelFile) -> None:
        try:
            barrel.path.write_text(barrel.content, encoding="utf-8", newline="\n")
        except OSError as e:
            logger.error(f"Failed to write barrel file {barrel.path}: {e}")
            raise WriteFailureError(barrel.path, str(e)) from e

        logger.info(f"Wrote {barrel.path} ({len(barrel.entries)} exports)")
        self.written_files.append(barrel)
        if self._progress_callback is not None:
            self._progress_callback(barrel)
