"""Assembly metadata reader.

Reads the names of the assemblies a .NET binary references from its
metadata AssemblyRef table, without loading the assembly.
"""

import logging
from pathlib import Path
from typing import Set, Union

import dnfile
import pefile

logger = logging.getLogger(__name__)


class AssemblyMetadataError(Exception):
    """Raised when an assembly's metadata cannot be read."""

    pass


def read_assembly_references(path: Union[str, Path]) -> Set[str]:
    """Get the names of the assemblies a binary depends on.

    Args:
        path: Path to a .NET assembly (.dll or .exe)

    Returns:
        Set of referenced assembly names (e.g. {'mscorlib', 'System.Runtime'})

    Raises:
        AssemblyMetadataError: If the file cannot be opened or is not a
            .NET assembly
    """
    try:
        pe = dnfile.dnPE(str(path))
    except (OSError, pefile.PEFormatError) as e:
        raise AssemblyMetadataError(f"Failed to read assembly {path}: {e}") from e

    try:
        if pe.net is None or pe.net.mdtables is None:
            raise AssemblyMetadataError(f"Not a .NET assembly: {path}")

        table = pe.net.mdtables.AssemblyRef
        if table is None:
            return set()

        # Heap string items render as "" when their value is missing
        names = {str(row.Name) for row in table.rows}
        names.discard("")
    finally:
        pe.close()

    logger.debug("%s references %d assemblies", path, len(names))
    return names
