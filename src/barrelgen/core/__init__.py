"""
Core Layer - Configuration, path utilities, eligibility rules and barrel generation.
"""

from barrelgen.core.barrel import (
    BarrelFile,
    BarrelGenerator,
    BarrelGeneratorInterface,
    CandidateFile,
    Classification,
    GenerationRequest,
    classify,
    is_exportable,
    render_barrel,
)
from barrelgen.core.config import (
    BarrelConfig,
    GenerationConfig,
    LoggingConfig,
    load_config,
)
from barrelgen.core.errors import (
    BarrelGeneratorError,
    OutOfWorkspaceError,
    SelectionInvalidError,
    WriteFailureError,
)
from barrelgen.core.path_utils import (
    PathValidationResult,
    is_within_workspace,
    to_canonical,
    to_native,
    validate_target_directory,
)

__all__ = [
    # Config
    "BarrelConfig",
    "GenerationConfig",
    "LoggingConfig",
    "load_config",
    # Errors
    "BarrelGeneratorError",
    "SelectionInvalidError",
    "OutOfWorkspaceError",
    "WriteFailureError",
    # Path utilities
    "PathValidationResult",
    "is_within_workspace",
    "to_canonical",
    "to_native",
    "validate_target_directory",
    # Barrel generation
    "BarrelFile",
    "BarrelGenerator",
    "BarrelGeneratorInterface",
    "CandidateFile",
    "Classification",
    "GenerationRequest",
    "classify",
    "is_exportable",
    "render_barrel",
]
