"""Project model, descriptor parsing and target selection for fstoml."""

from .descriptor_parser import DescriptorError, is_descriptor, parse_descriptor
from .project import (
    BuildAction,
    BuildTarget,
    Configuration,
    DebugType,
    OutputType,
    PlatformType,
    ProjectModel,
    ProjectReference,
    Reference,
    SourceFile,
    get_output_name,
)
from .target import ConfigurationNotFoundError, get_config, target_key

__all__ = [
    "BuildAction",
    "BuildTarget",
    "Configuration",
    "ConfigurationNotFoundError",
    "DebugType",
    "DescriptorError",
    "OutputType",
    "PlatformType",
    "ProjectModel",
    "ProjectReference",
    "Reference",
    "SourceFile",
    "get_config",
    "get_output_name",
    "is_descriptor",
    "parse_descriptor",
    "target_key",
]
