"""Compiler Flag Builder.

This module turns one resolved target configuration into the ordered list of
compiler flags for that configuration.

Design:
    - Every configuration field is optional and has a documented default
    - Flag order is fixed so the command line is reproducible
    - Boolean switches default to disabled ("-")
    - Output and documentation paths derive from the output directory
"""

import os
from typing import List, Optional

from ..config.project import BuildTarget, Configuration, DebugType, PlatformType

DEFAULT_OUTPUT_DIR = "bin"
DEFAULT_WARNING_LEVEL = 3
ANYCPU_32BIT_PREFERRED = "anycpu32bitpreferred"

DEBUG_TYPE_FLAGS = {
    DebugType.NONE: "--debug-",
    DebugType.FULL: "--debug:full",
    DebugType.PDB_ONLY: "--debug:pdbonly",
}


def get_output_path(config: Configuration, output_name: str) -> str:
    """Get the output file path for a configuration.

    Args:
        config: Target configuration
        output_name: Output file name (e.g. 'App.exe')

    Returns:
        Configured output directory (or 'bin') joined with the file name
    """
    return os.path.join(config.output_path or DEFAULT_OUTPUT_DIR, output_name)


def _switch(name: str, enabled: Optional[bool]) -> str:
    return name + ("+" if enabled is True else "-")


class FlagBuilder:
    """Builds compiler flags from a target configuration.

    Flags are emitted in this order:
    - tailcalls, warnings as errors
    - constants (-d:)
    - debug, optimize, platform
    - warning level, output, documentation file
    - suppressed warnings, passthrough flags

    Example:
        builder = FlagBuilder(target, "App.exe", config)
        builder.build_flags()
        # ['--tailcalls-', '--warnaserror-', '--debug-', ...]
    """

    def __init__(self, target: BuildTarget, output_name: str, config: Configuration):
        """Initialize flag builder.

        Args:
            target: Build target (framework version and platform)
            output_name: Output file name of the project
            config: Configuration selected for the target
        """
        self.target = target
        self.output_name = output_name
        self.config = config

    def build_flags(self) -> List[str]:
        """Build the compiler flags for the configuration.

        Returns:
            Ordered list of compiler flags
        """
        config = self.config
        out_path = get_output_path(config, self.output_name)

        flags = [
            _switch("--tailcalls", config.tailcalls),
            _switch("--warnaserror", config.warnings_as_errors),
        ]

        for constant in config.constants or ():
            flags.append(f"-d:{constant}")

        flags.extend([
            self.get_debug_flag(),
            _switch("--optimize", config.optimize),
            f"--platform:{self.get_platform()}",
            f"--warn:{self.get_warning_level()}",
            f"--out:{out_path}",
            f"--doc:{config.documentation_file or out_path + '.xml'}",
        ])

        if config.no_warn:
            flags.append("--nowarn:" + ",".join(str(code) for code in config.no_warn))

        if config.other_flags:
            flags.extend(config.other_flags)

        return flags

    def get_debug_flag(self) -> str:
        """Resolve the debug flag.

        An explicit `debug_symbols = true` wins over `debug_type`.

        Returns:
            '--debug:full', '--debug:pdbonly' or '--debug-'
        """
        if self.config.debug_symbols is True:
            return "--debug:full"
        if self.config.debug_type is not None:
            return DEBUG_TYPE_FLAGS[self.config.debug_type]
        return "--debug-"

    def get_platform(self) -> str:
        """Get the platform name passed to --platform."""
        if self.target.platform_type == PlatformType.ANY_CPU and self.config.prefer_32bit is True:
            return ANYCPU_32BIT_PREFERRED
        return self.target.platform_type.value

    def get_warning_level(self) -> int:
        """Get the warning level (defaults to 3)."""
        if self.config.warning_level is None:
            return DEFAULT_WARNING_LEVEL
        return self.config.warning_level


def build_compiler_flags(target: BuildTarget, output_name: str, config: Configuration) -> List[str]:
    """Build the compiler flags for one target configuration."""
    return FlagBuilder(target, output_name, config).build_flags()
