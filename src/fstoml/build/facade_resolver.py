"""
Facade assembly resolution.

Assemblies built against the split "contract" layout reference
System.Runtime and need the framework's facade assemblies at compile time to
resolve their type forwarders. Any such reference pulls in the whole facade
directory for the target framework; it over-includes but never misses one.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set

from ..packages.assembly_metadata import read_assembly_references
from .system_references import SystemReferenceResolver

logger = logging.getLogger(__name__)

FACADE_MARKER = "System.Runtime"

AssemblyReferenceReader = Callable[[str], Set[str]]


def depends_on_compatibility_facades(assembly_names: Iterable[str]) -> bool:
    """Check whether any referenced assembly name belongs to the facade family."""
    return any(FACADE_MARKER in name for name in assembly_names)


class FacadeResolver:
    """
    Detects facade-dependent assemblies and lists the facades they need.

    Usage:
        facades = FacadeResolver(SystemReferenceResolver())
        if facades.is_facade_dependent("lib/Newtonsoft.Json.dll"):
            paths = facades.facade_assemblies("v4.5")
    """

    def __init__(
        self,
        system_resolver: SystemReferenceResolver,
        read_references: Optional[AssemblyReferenceReader] = None,
        predicate: Callable[[Iterable[str]], bool] = depends_on_compatibility_facades,
    ):
        """
        Initialize facade resolver.

        Args:
            system_resolver: Resolver locating the framework's facade directory
            read_references: Reads the assembly names a binary depends on
                (default: metadata reader)
            predicate: Decides facade dependence from those names
        """
        self.system_resolver = system_resolver
        self.read_references = read_references or read_assembly_references
        self.predicate = predicate

    def is_facade_dependent(self, assembly_path: str) -> bool:
        """
        Check whether an assembly needs the facade assemblies.

        Raises:
            AssemblyMetadataError: If the assembly cannot be read
        """
        dependent = self.predicate(self.read_references(assembly_path))
        if dependent:
            logger.debug("%s depends on facade assemblies", assembly_path)
        return dependent

    def facade_assemblies(self, framework_version: str) -> List[str]:
        """
        List every facade assembly for a framework version.

        Returns:
            Sorted paths of the files in the facade directory

        Raises:
            FileNotFoundError: If the facade directory is not installed
        """
        facade_dir = Path(self.system_resolver.facade_directory(framework_version))
        return sorted(str(p) for p in facade_dir.iterdir() if p.is_file())
