"""Host platform and assembly metadata services for fstoml."""

from .assembly_metadata import AssemblyMetadataError, read_assembly_references
from .platform_utils import PlatformDetector

__all__ = [
    "AssemblyMetadataError",
    "PlatformDetector",
    "read_assembly_references",
]
