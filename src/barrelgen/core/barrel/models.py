"""
Data models for the barrel generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Classification(str, Enum):
    """
    Outcome of running a candidate file through the eligibility filter.

    Inherits from str to enable string comparison in logs and tests.
    """
    EXPORT = "export"
    GENERATED_EXCLUDED = "generated_excluded"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True)
class GenerationRequest:
    """
    A single generation call.

    Attributes:
        target_directory: Absolute path of the directory receiving a barrel file
        recursive: Whether active subdirectories get their own barrel files
        ancestor_chain: Directory names accumulated since the top-level call
        scan_root: Top-level target that ignore patterns are matched against
            (the target itself when None)
    """

    target_directory: Path
    recursive: bool = False
    ancestor_chain: tuple[str, ...] = ()
    scan_root: Path | None = None

    @property
    def dir_name(self) -> str:
        return self.target_directory.name

    @property
    def qualified_name(self) -> str:
        """Ancestor chain joined with the directory name."""
        return "/".join((*self.ancestor_chain, self.dir_name))

    @property
    def ignore_root(self) -> Path:
        return self.scan_root or self.target_directory

    def child(self, subdirectory: Path) -> "GenerationRequest":
        """Build the request for a nested generation under this one."""
        return GenerationRequest(
            target_directory=subdirectory,
            recursive=self.recursive,
            ancestor_chain=(*self.ancestor_chain, self.dir_name),
            scan_root=self.ignore_root,
        )


@dataclass(frozen=True)
class CandidateFile:
    """
    A regular file discovered under a target subtree.

    Attributes:
        path: Absolute path to the file
        classification: Eligibility outcome for the directory it was checked against
    """

    path: Path
    classification: Classification

    @property
    def is_exportable(self) -> bool:
        return self.classification is Classification.EXPORT


@dataclass
class BarrelFile:
    """
    A written barrel file.

    Attributes:
        path: Absolute path of the barrel file
        entries: Sorted export entries, relative to the barrel's directory
    """

    path: Path
    entries: list[str] = field(default_factory=list)

    @property
    def content(self) -> str:
        return render_barrel(self.entries)


def sort_entries(entries: list[str]) -> list[str]:
    """
    Sort export entries by UTF-16 code unit, without locale collation.

    Code unit order only differs from Python's code point order for names
    containing characters outside the Basic Multilingual Plane.
    """
    return sorted(entries, key=lambda entry: entry.encode("utf-16-be", "surrogatepass"))


def render_barrel(entries: list[str]) -> str:
    """
    Compose the barrel body for a list of entries.

    Entries are sorted with ``sort_entries`` and each produces one
    newline-terminated ``export '<entry>';`` line. An empty list yields an
    empty body.
    """
    return "".join(f"export '{entry}';\n" for entry in sort_entries(entries))
