"""
System and framework reference resolution.

This module computes where framework assemblies live for a framework version:

- On Windows, reference assemblies are installed per framework version under
  Program Files (x86)\\Reference Assemblies.
- Elsewhere, the assemblies shipped with the installed runtime are used.

Paths are computed, never checked for existence; a wrong path surfaces when
the compiler fails to open it.
"""

import logging
import ntpath
import os
from pathlib import Path
from typing import Optional, Tuple

from ..packages.platform_utils import PlatformDetector

logger = logging.getLogger(__name__)

CORE_LIBRARY_NAME = "FSharp.Core"
BASE_CLASS_LIBRARY_NAME = "mscorlib"
FACADES_DIR = "Facades"

# Directory templates below Program Files (x86); {version} is substituted
FRAMEWORK_TEMPLATE: Tuple[str, ...] = (
    "Reference Assemblies", "Microsoft", "Framework", ".NETFramework", "{version}",
)
CORE_LIBRARY_TEMPLATE: Tuple[str, ...] = (
    "Reference Assemblies", "Microsoft", "FSharp", ".NETFramework", "v4.0", "{version}",
)


class SystemReferenceResolver:
    """
    Resolves framework assemblies to paths for the host platform.

    Usage:
        resolver = SystemReferenceResolver()
        resolver.system_library_path("v4.5", "System.Core")
        resolver.core_library_path("4.4.0.0")
        resolver.facade_directory("v4.5")
    """

    def __init__(
        self,
        reference_assemblies: Optional[bool] = None,
        program_files: Optional[str] = None,
        runtime_dir: Optional[Path] = None,
    ):
        """
        Initialize resolver.

        Args:
            reference_assemblies: Whether the host uses the versioned
                reference-assemblies layout (default: detect, True on Windows)
            program_files: Program Files (x86) directory (default: detect)
            runtime_dir: Runtime assembly directory used on other hosts
                (default: detect from the installed runtime)
        """
        if reference_assemblies is None:
            reference_assemblies = PlatformDetector.has_reference_assemblies()
        self.reference_assemblies = reference_assemblies
        self._program_files = program_files
        self._runtime_dir = runtime_dir

    @property
    def program_files(self) -> str:
        if self._program_files is None:
            self._program_files = PlatformDetector.get_program_files_x86()
        return self._program_files

    @property
    def runtime_dir(self) -> Path:
        if self._runtime_dir is None:
            self._runtime_dir = PlatformDetector.get_runtime_directory()
        return self._runtime_dir

    def directory(self, template: Tuple[str, ...], version: str) -> str:
        """
        Get the directory holding assemblies for a template and version.

        Args:
            template: Directory template below Program Files (x86)
            version: Value substituted for {version}

        Returns:
            Versioned reference-assembly directory on Windows hosts,
            the runtime directory elsewhere
        """
        if self.reference_assemblies:
            parts = [part.format(version=version) for part in template]
            return ntpath.join(self.program_files, *parts)
        return str(self.runtime_dir)

    def library_path(self, template: Tuple[str, ...], version: str, name: str) -> str:
        """Get the path of an assembly by name within a template directory."""
        join = ntpath.join if self.reference_assemblies else os.path.join
        path = join(self.directory(template, version), name + ".dll")
        logger.debug("Resolved %s (%s) to %s", name, version, path)
        return path

    def system_library_path(self, framework_version: str, name: str) -> str:
        """Get the path of a framework assembly (e.g. 'System.Core')."""
        return self.library_path(FRAMEWORK_TEMPLATE, framework_version, name)

    def core_library_path(self, core_version: str) -> str:
        """Get the path of the F# core library for a core library version."""
        return self.library_path(CORE_LIBRARY_TEMPLATE, core_version, CORE_LIBRARY_NAME)

    def base_class_library_path(self, framework_version: str) -> str:
        """Get the path of mscorlib for a framework version."""
        return self.system_library_path(framework_version, BASE_CLASS_LIBRARY_NAME)

    def facade_directory(self, framework_version: str) -> str:
        """Get the facade assembly directory for a framework version."""
        join = ntpath.join if self.reference_assemblies else os.path.join
        return join(self.directory(FRAMEWORK_TEMPLATE, framework_version), FACADES_DIR)
