"""
Target configuration selection.

A project declares configurations keyed by target:

    ""               base configuration, inherited by every target
    "v4.5"           overrides for every platform of a framework version
    "v4.5/x86"       overrides for one framework version and platform

The configuration for a target is the base overlaid by the framework entry,
overlaid by the exact entry. Fields left unset (``None``) never override.
"""

from dataclasses import fields, replace
from typing import Dict, List

from .project import BuildTarget, Configuration

BASE_KEY = ""


class ConfigurationNotFoundError(Exception):
    """Raised when a project declares no configuration for a target."""

    pass


def target_key(target: BuildTarget) -> str:
    """Get the exact configuration key for a target (e.g. 'v4.5/x86')."""
    return f"{target.framework_version}/{target.platform_type.value}"


def merge_configurations(base: Configuration, override: Configuration) -> Configuration:
    """Overlay the fields set in ``override`` onto ``base``."""
    changes = {
        f.name: getattr(override, f.name)
        for f in fields(override)
        if getattr(override, f.name) is not None
    }
    return replace(base, **changes)


def get_config(configurations: Dict[str, Configuration], target: BuildTarget) -> Configuration:
    """
    Select the configuration for a build target.

    Args:
        configurations: Configurations declared by the project, keyed as above
        target: Build target

    Returns:
        The merged configuration for the target

    Raises:
        ConfigurationNotFoundError: If no base, framework or exact entry exists
    """
    keys = [BASE_KEY, target.framework_version, target_key(target)]
    matches: List[Configuration] = [configurations[k] for k in keys if k in configurations]

    if not matches:
        available = ", ".join(repr(k) for k in configurations) or "none"
        raise ConfigurationNotFoundError(
            f"No configuration for target '{target_key(target)}'. "
            + f"Available configurations: {available}"
        )

    config = matches[0]
    for override in matches[1:]:
        config = merge_configurations(config, override)
    return config
