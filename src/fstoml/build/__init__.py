"""
Compiler argument builders for fstoml.

This module provides:
- Configuration flags (debug, optimize, warnings, output paths)
- Framework, facade and file reference resolution
- Project-to-project reference resolution
- Source file selection
- Complete compiler invocation assembly
"""

from .facade_resolver import FacadeResolver, depends_on_compatibility_facades
from .flag_builder import FlagBuilder, build_compiler_flags, get_output_path
from .invocation import CompilerSessionService, InvocationAssembler, project_options
from .project_references import (
    ProjectReferenceResolution,
    ProjectReferenceResolver,
    ResolutionKind,
)
from .reference_resolver import ReferenceResolver
from .source_selector import select_source_files
from .system_references import SystemReferenceResolver

__all__ = [
    "CompilerSessionService",
    "FacadeResolver",
    "FlagBuilder",
    "InvocationAssembler",
    "ProjectReferenceResolution",
    "ProjectReferenceResolver",
    "ReferenceResolver",
    "ResolutionKind",
    "SystemReferenceResolver",
    "build_compiler_flags",
    "depends_on_compatibility_facades",
    "get_output_path",
    "project_options",
    "select_source_files",
]
