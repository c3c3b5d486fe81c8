"""CLI utility functions for fstoml.

This module provides common utilities used across CLI commands including:
- Build target parsing
- Logging setup
- Error handling and formatting
"""

import logging
import sys
from pathlib import Path

from fstoml.config import BuildTarget, PlatformType

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Setup console logging for CLI commands."""
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)


class TargetParser:
    """Parses build targets from command-line values."""

    @staticmethod
    def parse_platform(value: str) -> PlatformType:
        """Parse a platform name, ignoring case.

        Raises:
            ValueError: If the platform is unknown
        """
        for platform_type in PlatformType:
            if platform_type.value.lower() == value.lower():
                return platform_type
        accepted = ", ".join(p.value for p in PlatformType)
        raise ValueError(f"Unknown platform '{value}' (expected one of: {accepted})")

    @staticmethod
    def parse_target(framework: str, platform: str) -> BuildTarget:
        """Build a target from framework version and platform strings.

        Args:
            framework: Framework version (e.g. "v4.5")
            platform: Platform name (e.g. "AnyCPU", "x86")

        Returns:
            BuildTarget for the values
        """
        return BuildTarget(
            framework_version=framework,
            platform_type=TargetParser.parse_platform(platform),
        )


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message to stderr.

        Args:
            title: Error title (e.g., "Invalid project descriptor")
            message: Error message details
        """
        print(file=sys.stderr)
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(file=sys.stderr)
        print(message, file=sys.stderr)
        print(file=sys.stderr)

    @staticmethod
    def print_success(message: str) -> None:
        """Print formatted success message to stderr."""
        print(f"{ErrorFormatter.GREEN}✓ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def print_warning(message: str) -> None:
        """Print formatted warning message to stderr."""
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:", file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

        sys.exit(1)


class PathValidator:
    """Validates project descriptor paths."""

    @staticmethod
    def validate_project_file(project: Path) -> None:
        """Validate that a project descriptor exists and is a file.

        Raises:
            SystemExit: If the path doesn't exist or isn't a file
        """
        if not project.exists():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path does not exist: {project}{ErrorFormatter.RESET}",
                file=sys.stderr,
            )
            sys.exit(2)
        if not project.is_file():
            print(
                f"{ErrorFormatter.RED}✗ Error: Path is not a file: {project}{ErrorFormatter.RESET}",
                file=sys.stderr,
            )
            sys.exit(2)
