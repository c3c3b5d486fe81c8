"""
Project model for TOML-described F# projects.

This module defines the read-only data model consumed by the compiler
argument builders: build targets, per-target configurations, references,
project references and source files.

Example:
    target = BuildTarget(framework_version="v4.5", platform_type=PlatformType.ANY_CPU)
    project = ProjectModel(name="App", assembly_name="App", output_type=OutputType.EXE)
    get_output_name(project)  # 'App.exe'
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class PlatformType(str, Enum):
    """Target CPU platform."""

    ANY_CPU = "AnyCPU"
    X86 = "x86"
    X64 = "x64"
    ITANIUM = "Itanium"
    ARM = "ARM"


class DebugType(str, Enum):
    """Kind of debug information to emit."""

    NONE = "None"
    FULL = "Full"
    PDB_ONLY = "PdbOnly"


class OutputType(str, Enum):
    """Kind of binary a project builds."""

    LIBRARY = "Library"
    EXE = "Exe"
    WINEXE = "Winexe"
    MODULE = "Module"


class BuildAction(str, Enum):
    """What the build does with a declared file."""

    COMPILE = "Compile"
    CONTENT = "Content"
    EMBEDDED_RESOURCE = "EmbeddedResource"
    RESOURCE = "Resource"
    NONE = "None"


@dataclass(frozen=True)
class BuildTarget:
    """Framework version and platform a build is performed for."""

    framework_version: str
    platform_type: PlatformType = PlatformType.ANY_CPU


@dataclass(frozen=True)
class Configuration:
    """Compiler configuration for one target.

    Every field is optional; ``None`` means "not declared" and the flag
    builder applies its documented default.
    """

    debug_symbols: Optional[bool] = None
    debug_type: Optional[DebugType] = None
    tailcalls: Optional[bool] = None
    warnings_as_errors: Optional[bool] = None
    optimize: Optional[bool] = None
    prefer_32bit: Optional[bool] = None
    warning_level: Optional[int] = None
    no_warn: Optional[Tuple[int, ...]] = None
    constants: Optional[Tuple[str, ...]] = None
    other_flags: Optional[Tuple[str, ...]] = None
    output_path: Optional[str] = None
    documentation_file: Optional[str] = None


@dataclass(frozen=True)
class Reference:
    """Assembly reference: a file path to a binary or a bare assembly name."""

    include: str


@dataclass(frozen=True)
class ProjectReference:
    """Reference to another project's descriptor file."""

    include: str


@dataclass(frozen=True)
class SourceFile:
    """File declared by a project."""

    include: str
    link: Optional[str] = None
    on_build: BuildAction = BuildAction.COMPILE


@dataclass(frozen=True)
class ProjectModel:
    """In-memory form of a project descriptor."""

    name: str
    assembly_name: str
    output_type: OutputType = OutputType.LIBRARY
    framework_core_version: str = "4.4.0.0"
    configurations: Dict[str, Configuration] = field(default_factory=dict)
    references: Tuple[Reference, ...] = ()
    project_references: Tuple[ProjectReference, ...] = ()
    files: Tuple[SourceFile, ...] = ()


def get_output_extension(output_type: OutputType) -> str:
    """Libraries build to .dll, everything else to .exe."""
    return ".dll" if output_type == OutputType.LIBRARY else ".exe"


def get_output_name(project: ProjectModel) -> str:
    """Get the file name a project builds to (assembly name + extension)."""
    return project.assembly_name + get_output_extension(project.output_type)
