"""
Command-line interface for fstoml.

This module provides the `fstoml` CLI tool for generating F# compiler
arguments from .fstoml project descriptors.
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fstoml.build import InvocationAssembler
from fstoml.cli_utils import ErrorFormatter, PathValidator, TargetParser, setup_logging
from fstoml.config import ConfigurationNotFoundError, DescriptorError, parse_descriptor
from fstoml.packages import AssemblyMetadataError, PlatformDetector

DEFAULT_FRAMEWORK = "v4.5"
DEFAULT_PLATFORM = "AnyCPU"


@dataclass
class ArgsCommandArgs:
    """Arguments for the args command."""

    project: Path
    framework: str = DEFAULT_FRAMEWORK
    platform: str = DEFAULT_PLATFORM
    output: Optional[Path] = None
    verbose: bool = False


def args_command(args: ArgsCommandArgs) -> None:
    """Print the compiler arguments for a project.

    Examples:
        fstoml args App.fstoml                   # v4.5 / AnyCPU
        fstoml args App.fstoml -f v4.6 -p x64    # Specific target
        fstoml args App.fstoml -o App.rsp        # Write a response file
    """
    setup_logging(args.verbose)

    try:
        target = TargetParser.parse_target(args.framework, args.platform)
        project = parse_descriptor(args.project)
        compiler_args = InvocationAssembler().assemble(target, project)

        text = "\n".join(compiler_args) + "\n"
        if args.output:
            args.output.write_text(text, encoding="utf-8")
            ErrorFormatter.print_success(f"Wrote {len(compiler_args)} arguments to {args.output}")
        else:
            sys.stdout.write(text)
        sys.exit(0)

    except DescriptorError as e:
        ErrorFormatter.print_error("Invalid project descriptor", str(e))
        sys.exit(1)
    except ValueError as e:
        ErrorFormatter.print_error("Invalid target", str(e))
        sys.exit(1)
    except ConfigurationNotFoundError as e:
        ErrorFormatter.print_error("Missing configuration", str(e))
        sys.exit(1)
    except AssemblyMetadataError as e:
        ErrorFormatter.print_error("Cannot read referenced assembly", str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


def info_command() -> None:
    """Print where framework assemblies are resolved from on this host."""
    for key, value in PlatformDetector.get_platform_info().items():
        print(f"{key}: {value}")
    sys.exit(0)


def main() -> None:
    """fstoml - compiler arguments for TOML-described F# projects"""
    parser = argparse.ArgumentParser(
        prog="fstoml",
        description="Generate F# compiler arguments from .fstoml project descriptors",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    args_parser = subparsers.add_parser(
        "args",
        help="Print compiler arguments for a project",
    )
    args_parser.add_argument(
        "project",
        type=Path,
        help="Path to the .fstoml project descriptor",
    )
    args_parser.add_argument(
        "-f",
        "--framework",
        default=DEFAULT_FRAMEWORK,
        help=f"Target framework version (default: {DEFAULT_FRAMEWORK})",
    )
    args_parser.add_argument(
        "-p",
        "--platform",
        default=DEFAULT_PLATFORM,
        help=f"Target platform (default: {DEFAULT_PLATFORM})",
    )
    args_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write arguments to a response file instead of stdout",
    )
    args_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show resolution details",
    )

    subparsers.add_parser(
        "info",
        help="Show where framework assemblies are resolved from",
    )

    # Parse arguments
    parsed_args = parser.parse_args()

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    if parsed_args.command == "args":
        PathValidator.validate_project_file(parsed_args.project)
        args_command(
            ArgsCommandArgs(
                project=parsed_args.project,
                framework=parsed_args.framework,
                platform=parsed_args.platform,
                output=parsed_args.output,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "info":
        info_command()


if __name__ == "__main__":
    main()
