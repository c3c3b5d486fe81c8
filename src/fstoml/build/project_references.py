"""
Project-to-project reference resolution.

A reference to another .fstoml project resolves to the path that project
builds to for the same target. The referenced descriptor is parsed and its
output path computed the way its own build would compute it; nothing is
built. Other project kinds are not supported and resolve to an empty path.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..config.descriptor_parser import is_descriptor, parse_descriptor
from ..config.project import BuildTarget, ProjectModel, ProjectReference, get_output_name
from ..config.target import get_config
from .flag_builder import get_output_path

logger = logging.getLogger(__name__)

DescriptorLoader = Callable[[str], ProjectModel]


class ResolutionKind(Enum):
    RESOLVED = "resolved"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ProjectReferenceResolution:
    """Result of resolving one project reference."""

    reference: ProjectReference
    kind: ResolutionKind
    output_path: str = ""

    @property
    def is_supported(self) -> bool:
        return self.kind == ResolutionKind.RESOLVED


class ProjectReferenceResolver:
    """
    Resolves project references to the output paths of the referenced projects.

    Usage:
        resolver = ProjectReferenceResolver()
        resolver.resolve(target, ProjectReference("../Lib/Lib.fstoml")).output_path
        # 'bin/Lib.dll'
    """

    def __init__(self, load_descriptor: Optional[DescriptorLoader] = None):
        """
        Initialize resolver.

        Args:
            load_descriptor: Parses a descriptor path into a ProjectModel
                (default: parse_descriptor). Called on every resolution.
        """
        self.load_descriptor = load_descriptor or parse_descriptor

    def resolve(self, target: BuildTarget, reference: ProjectReference) -> ProjectReferenceResolution:
        """
        Resolve a project reference for a target.

        Raises:
            DescriptorError: If the referenced descriptor cannot be parsed
            ConfigurationNotFoundError: If it has no configuration for the target
        """
        if not is_descriptor(reference.include):
            return ProjectReferenceResolution(reference, ResolutionKind.UNSUPPORTED)

        project = self.load_descriptor(os.path.abspath(reference.include))
        config = get_config(project.configurations, target)
        output_path = get_output_path(config, get_output_name(project))
        logger.debug("Project reference %s builds to %s", reference.include, output_path)
        return ProjectReferenceResolution(reference, ResolutionKind.RESOLVED, output_path)

    def get_compiler_params(
        self, target: BuildTarget, references: Iterable[ProjectReference]
    ) -> List[str]:
        """
        Build one `-r:` flag per project reference.

        Unsupported project kinds keep an empty `-r:` placeholder.
        """
        flags = []
        for reference in references:
            resolution = self.resolve(target, reference)
            if not resolution.is_supported:
                logger.warning(
                    "Unsupported project reference kind, emitting empty reference: %s",
                    reference.include,
                )
            flags.append("-r:" + resolution.output_path)
        return flags
