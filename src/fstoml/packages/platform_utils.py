"""Platform Detection Utilities.

This module provides utilities for detecting the host platform and the
directories framework reference assemblies are resolved from.

Supported Hosts:
    - Windows: versioned reference assemblies under Program Files (x86)
    - Linux / macOS: assemblies shipped with the installed Mono runtime
"""

import os
import platform
import shutil
from pathlib import Path
from typing import Optional


# Mono profile directory holding the 4.x framework assemblies
MONO_PROFILE = "4.5"
DEFAULT_MONO_PREFIX = Path("/usr")
DEFAULT_PROGRAM_FILES_X86 = "C:\\Program Files (x86)"


class PlatformDetector:
    """Detects the host platform for framework reference resolution."""

    @staticmethod
    def has_reference_assemblies() -> bool:
        """Check whether the host uses the versioned reference-assemblies layout.

        Only Windows installs framework reference assemblies separately from
        the runtime.

        Returns:
            True on Windows, False elsewhere
        """
        return platform.system().lower() == "windows"

    @staticmethod
    def get_program_files_x86() -> str:
        """Get the 32-bit Program Files directory on Windows.

        Returns:
            Program Files (x86) directory as a Windows path string
        """
        return os.environ.get("ProgramFiles(x86)") or DEFAULT_PROGRAM_FILES_X86

    @staticmethod
    def get_runtime_directory(mono_path: Optional[str] = None) -> Path:
        """Get the active runtime's framework assembly directory.

        The runtime is located from the `mono` executable on PATH
        (<prefix>/bin/mono -> <prefix>/lib/mono/4.5). Without one the
        conventional system prefix is assumed.

        Args:
            mono_path: Explicit path to the mono executable

        Returns:
            Directory containing the runtime's framework assemblies
        """
        mono = mono_path or shutil.which("mono")
        if mono:
            prefix = Path(mono).resolve().parent.parent
        else:
            prefix = DEFAULT_MONO_PREFIX
        return prefix / "lib" / "mono" / MONO_PROFILE

    @staticmethod
    def get_platform_info() -> dict:
        """Get information about the host relevant to reference resolution.

        Returns:
            Dictionary with system name and resolution layout
        """
        reference_assemblies = PlatformDetector.has_reference_assemblies()
        return {
            "system": platform.system(),
            "machine": platform.machine(),
            "reference_assemblies": reference_assemblies,
            "assembly_root": (
                PlatformDetector.get_program_files_x86()
                if reference_assemblies
                else str(PlatformDetector.get_runtime_directory())
            ),
        }
