"""fstoml - F# compiler arguments from TOML project descriptors."""

from .build import InvocationAssembler
from .config import BuildTarget, ProjectModel, parse_descriptor

__version__ = "0.1.0"

__all__ = [
    "BuildTarget",
    "InvocationAssembler",
    "ProjectModel",
    "parse_descriptor",
    "__version__",
]
