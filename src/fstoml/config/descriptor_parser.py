"""
Project descriptor (.fstoml) parser.

This module reads TOML project descriptors into the ProjectModel consumed by
the compiler argument builders.

Example project.fstoml:
    Name = "App"
    OutputType = "Exe"
    FSharpCore = "4.4.0.0"

    [Configuration]
    WarningLevel = 3

    [Configurations."v4.5/x86"]
    Prefer32bit = true

    [[References]]
    Include = "System.Core"

    [[Files]]
    Include = "Main.fs"

Usage:
    project = parse_descriptor(Path("App/App.fstoml"))
"""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar, Union

from .project import (
    BuildAction,
    Configuration,
    DebugType,
    OutputType,
    ProjectModel,
    ProjectReference,
    Reference,
    SourceFile,
)
from .target import BASE_KEY

DESCRIPTOR_EXTENSION = ".fstoml"

E = TypeVar("E", bound=Enum)

# Descriptor key -> Configuration field
CONFIGURATION_KEYS = {
    "DebugSymbols": "debug_symbols",
    "DebugType": "debug_type",
    "Tailcalls": "tailcalls",
    "WarningsAsErrors": "warnings_as_errors",
    "Optimize": "optimize",
    "Prefer32bit": "prefer_32bit",
    "WarningLevel": "warning_level",
    "NoWarn": "no_warn",
    "Constants": "constants",
    "OtherFlags": "other_flags",
    "OutputPath": "output_path",
    "DocumentationFile": "documentation_file",
}

BOOL_FIELDS = {
    "debug_symbols",
    "tailcalls",
    "warnings_as_errors",
    "optimize",
    "prefer_32bit",
}


class DescriptorError(Exception):
    """Exception raised for malformed or missing project descriptors."""

    pass


def parse_descriptor(path: Union[str, Path]) -> ProjectModel:
    """
    Parse a project descriptor file.

    Args:
        path: Path to the .fstoml file

    Returns:
        ProjectModel for the descriptor

    Raises:
        DescriptorError: If the file doesn't exist or is not a valid descriptor
    """
    path = Path(path)
    if not path.exists():
        raise DescriptorError(f"Project descriptor not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise DescriptorError(f"Failed to parse {path}: {e}") from e

    return parse_descriptor_data(data, source=str(path))


def parse_descriptor_data(data: Dict[str, Any], source: str = "<descriptor>") -> ProjectModel:
    """Build a ProjectModel from an already decoded descriptor table."""
    name = data.get("Name")
    if not isinstance(name, str) or not name:
        raise DescriptorError(f"{source}: 'Name' is required")

    configurations: Dict[str, Configuration] = {}
    if "Configuration" in data:
        configurations[BASE_KEY] = _parse_configuration(
            _expect_table(data["Configuration"], "Configuration", source), "Configuration", source
        )
    for key, table in _expect_table(data.get("Configurations", {}), "Configurations", source).items():
        where = f"Configurations.{key}"
        configurations[key] = _parse_configuration(_expect_table(table, where, source), where, source)

    return ProjectModel(
        name=name,
        assembly_name=str(data.get("AssemblyName", name)),
        output_type=_parse_enum(OutputType, data.get("OutputType", "Library"), "OutputType", source),
        framework_core_version=str(data.get("FSharpCore", "4.4.0.0")),
        configurations=configurations,
        references=tuple(
            Reference(include=item["Include"])
            for item in _parse_items(data, "References", source)
        ),
        project_references=tuple(
            ProjectReference(include=item["Include"])
            for item in _parse_items(data, "ProjectReferences", source)
        ),
        files=tuple(
            SourceFile(
                include=item["Include"],
                link=item.get("Link"),
                on_build=_parse_enum(BuildAction, item.get("OnBuild", "Compile"), "OnBuild", source),
            )
            for item in _parse_items(data, "Files", source)
        ),
    )


def _parse_configuration(table: Dict[str, Any], where: str, source: str) -> Configuration:
    values: Dict[str, Any] = {}
    for key, value in table.items():
        field_name = CONFIGURATION_KEYS.get(key)
        if field_name is None:
            raise DescriptorError(f"{source}: unknown key '{key}' in [{where}]")

        if field_name in BOOL_FIELDS:
            if not isinstance(value, bool):
                raise DescriptorError(f"{source}: '{where}.{key}' must be true or false")
        elif field_name == "debug_type":
            value = _parse_enum(DebugType, value, f"{where}.{key}", source)
        elif field_name == "warning_level":
            if isinstance(value, bool) or not isinstance(value, int):
                raise DescriptorError(f"{source}: '{where}.{key}' must be an integer")
        elif field_name == "no_warn":
            items = _expect_list(value, f"{where}.{key}", source)
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in items):
                raise DescriptorError(f"{source}: '{where}.{key}' must be an array of integers")
            value = tuple(items)
        elif field_name in ("constants", "other_flags"):
            value = tuple(str(v) for v in _expect_list(value, f"{where}.{key}", source))
        else:
            value = str(value)

        values[field_name] = value
    return Configuration(**values)


def _parse_items(data: Dict[str, Any], key: str, source: str) -> List[Dict[str, Any]]:
    items = _expect_list(data.get(key, []), key, source)
    for index, item in enumerate(items):
        if not isinstance(item, dict) or not isinstance(item.get("Include"), str):
            raise DescriptorError(f"{source}: {key}[{index}] must be a table with an 'Include' string")
    return items


def _parse_enum(enum_type: Type[E], value: Any, where: str, source: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        accepted = ", ".join(member.value for member in enum_type)
        raise DescriptorError(
            f"{source}: invalid {where} '{value}' (expected one of: {accepted})"
        ) from None


def _expect_table(value: Any, where: str, source: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise DescriptorError(f"{source}: '{where}' must be a table")
    return value


def _expect_list(value: Any, where: str, source: str) -> List[Any]:
    if not isinstance(value, list):
        raise DescriptorError(f"{source}: '{where}' must be an array")
    return value


def is_descriptor(path: Union[str, Path]) -> bool:
    """Check whether a path names a recognized project descriptor kind."""
    return str(path).endswith(DESCRIPTOR_EXTENSION)

