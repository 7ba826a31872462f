"""
Barrel generation module for barrelgen.

Provides the eligibility filter, the recursive directory walker that
writes one barrel file per visited directory, and the data models they share.
"""

from .eligibility import barrel_file_name, classify, is_exportable
from .generator import BarrelGenerator
from .interfaces import BarrelGeneratorInterface
from .models import (
    BarrelFile,
    CandidateFile,
    Classification,
    GenerationRequest,
    render_barrel,
    sort_entries,
)

__all__ = [
    # Main classes
    "BarrelGenerator",
    "BarrelGeneratorInterface",
    # Models
    "BarrelFile",
    "CandidateFile",
    "Classification",
    "GenerationRequest",
    # Functions
    "barrel_file_name",
    "classify",
    "is_exportable",
    "render_barrel",
    "sort_entries",
]
