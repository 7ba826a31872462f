"""
Service Layer - target resolution and the validate-and-generate flow.
"""

from barrelgen.services.barrel_service import BarrelService, GenerationOutcome
from barrelgen.services.target_resolver import FolderPicker, resolve_target

__all__ = [
    "BarrelService",
    "GenerationOutcome",
    "FolderPicker",
    "resolve_target",
]
