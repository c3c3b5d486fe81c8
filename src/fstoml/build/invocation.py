"""
Compiler invocation assembly.

This module composes the complete F# compiler argument list for one project
and target:

    fixed prefix flags
    configuration flags      (FlagBuilder)
    assembly references      (ReferenceResolver)
    project references       (ProjectReferenceResolver)
    source files             (select_source_files)

The prefix and the block order are the same for every project and target.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from ..config.project import BuildTarget, ProjectModel, get_output_name
from ..config.target import get_config
from .flag_builder import FlagBuilder
from .project_references import ProjectReferenceResolver
from .reference_resolver import ReferenceResolver
from .source_selector import select_source_files

logger = logging.getLogger(__name__)

PREFIX_FLAGS = (
    "--noframework",
    "--fullpaths",
    "--flaterrors",
    "--subsystemversion:6.00",
    "--highentropyva+",
)


class CompilerSessionService(ABC):
    """Interface for the compiler service that turns arguments into session options.

    Implementations wrap a concrete compiler front end; they are passed in
    explicitly rather than looked up globally.
    """

    @abstractmethod
    def options_from_arguments(self, name: str, args: Sequence[str]) -> Any:
        """Create compiler session options for a project.

        Args:
            name: Project name
            args: Compiler arguments

        Returns:
            Session options understood by the compiler front end
        """
        pass


class InvocationAssembler:
    """
    Assembles compiler arguments for a project.

    Usage:
        assembler = InvocationAssembler()
        args = assembler.assemble(BuildTarget("v4.5"), parse_descriptor("App.fstoml"))
    """

    def __init__(
        self,
        reference_resolver: Optional[ReferenceResolver] = None,
        project_reference_resolver: Optional[ProjectReferenceResolver] = None,
    ):
        self.reference_resolver = reference_resolver or ReferenceResolver()
        self.project_reference_resolver = project_reference_resolver or ProjectReferenceResolver()

    def assemble(self, target: BuildTarget, project: ProjectModel) -> List[str]:
        """
        Build the compiler argument list.

        Args:
            target: Build target
            project: Project to compile

        Returns:
            Ordered compiler arguments

        Raises:
            ConfigurationNotFoundError: If the project has no configuration
                for the target
            AssemblyMetadataError: If a referenced assembly cannot be inspected
        """
        logger.debug("Assembling compiler arguments for %s (%s)", project.name, target)
        config = get_config(project.configurations, target)

        args = list(PREFIX_FLAGS)
        args.append(f"--target:{project.output_type.value}")
        args.extend(FlagBuilder(target, get_output_name(project), config).build_flags())
        args.extend(
            self.reference_resolver.get_compiler_params(
                target, project.framework_core_version, project.references
            )
        )
        args.extend(
            self.project_reference_resolver.get_compiler_params(target, project.project_references)
        )
        args.extend(select_source_files(project.files))
        return args


def project_options(
    service: CompilerSessionService,
    target: BuildTarget,
    project: ProjectModel,
    assembler: Optional[InvocationAssembler] = None,
) -> Any:
    """Get compiler session options for a project from an injected service."""
    assembler = assembler or InvocationAssembler()
    return service.options_from_arguments(project.name, assembler.assemble(target, project))
