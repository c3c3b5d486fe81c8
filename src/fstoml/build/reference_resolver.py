"""
Assembly reference resolution.

Each declared reference becomes one or more assembly paths:

- an absolute path is used as is
- a relative path to an existing file is made absolute
- anything else is a framework assembly name

File references that depend on facade assemblies also bring in the target
framework's facades. mscorlib and FSharp.Core are always passed first through
dedicated flags, so they are filtered out of the generic list.
"""

import logging
import os
from typing import Iterable, List, Optional

from ..config.project import BuildTarget, Reference
from .facade_resolver import FacadeResolver
from .system_references import (
    BASE_CLASS_LIBRARY_NAME,
    CORE_LIBRARY_NAME,
    SystemReferenceResolver,
)

logger = logging.getLogger(__name__)

IMPLICIT_REFERENCES = (CORE_LIBRARY_NAME, BASE_CLASS_LIBRARY_NAME)


def is_implicit_reference(path: str) -> bool:
    """Check whether a path is one of the always-referenced core assemblies."""
    return any(name in path for name in IMPLICIT_REFERENCES)


class ReferenceResolver:
    """
    Resolves declared references into `-r:` compiler flags.

    Usage:
        resolver = ReferenceResolver()
        resolver.resolve(target, Reference("System.Xml"))
        resolver.get_compiler_params(target, "4.4.0.0", project.references)
    """

    def __init__(
        self,
        system_resolver: Optional[SystemReferenceResolver] = None,
        facade_resolver: Optional[FacadeResolver] = None,
    ):
        self.system_resolver = system_resolver or SystemReferenceResolver()
        self.facade_resolver = facade_resolver or FacadeResolver(self.system_resolver)

    def resolve(self, target: BuildTarget, reference: Reference) -> List[str]:
        """
        Resolve one reference to its assembly paths.

        Args:
            target: Build target
            reference: Declared reference

        Returns:
            The assembly path, followed by the framework facades when the
            assembly depends on them

        Raises:
            AssemblyMetadataError: If a file reference cannot be inspected
        """
        include = reference.include

        if os.path.isabs(include):
            path = include
        elif os.path.isfile(include):
            path = os.path.abspath(include)
        else:
            return [self.system_resolver.system_library_path(target.framework_version, include)]

        paths = [path]
        if self.facade_resolver.is_facade_dependent(path):
            paths.extend(self.facade_resolver.facade_assemblies(target.framework_version))
        return paths

    def resolve_all(self, target: BuildTarget, references: Iterable[Reference]) -> List[str]:
        """
        Resolve references to a deduplicated path list.

        Core assemblies are dropped; order of first occurrence is kept.
        """
        resolved: List[str] = []
        seen = set()
        for reference in references:
            for path in self.resolve(target, reference):
                if is_implicit_reference(path) or path in seen:
                    continue
                seen.add(path)
                resolved.append(path)
        logger.debug("Resolved %d reference paths", len(resolved))
        return resolved

    def get_compiler_params(
        self,
        target: BuildTarget,
        core_version: str,
        references: Iterable[Reference],
    ) -> List[str]:
        """
        Build the reference flags for a project.

        Args:
            target: Build target
            core_version: FSharp.Core version of the project
            references: Declared references

        Returns:
            ['-r:<mscorlib>', '-r:<FSharp.Core>', '-r:<reference>', ...]
        """
        flags = [
            "-r:" + self.system_resolver.base_class_library_path(target.framework_version),
            "-r:" + self.system_resolver.core_library_path(core_version),
        ]
        flags.extend("-r:" + path for path in self.resolve_all(target, references))
        return flags
