"""Source file selection for compilation."""

from typing import Iterable, List

from ..config.project import BuildAction, SourceFile


def select_source_files(files: Iterable[SourceFile]) -> List[str]:
    """
    Get the files passed to the compiler, in declaration order.

    F# resolves symbols in file order, so the declared order is kept.
    Only files built with the Compile action are included; a declared link
    path replaces the include path.

    Args:
        files: Files declared by the project

    Returns:
        Ordered list of source paths
    """
    return [
        f.link if f.link is not None else f.include
        for f in files
        if f.on_build == BuildAction.COMPILE
    ]
