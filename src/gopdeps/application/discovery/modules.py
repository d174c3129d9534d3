"""Owning module discovery from the directory structure."""

from __future__ import annotations

import logging
from pathlib import Path

from gopdeps.domain.exceptions.module import ModuleResolutionError
from gopdeps.domain.model.module import Module
from gopdeps.infrastructure.adapters.modfile import MOD_FILE_NAMES, parse_mod_file

logger = logging.getLogger(__name__)


def find_module(start: Path) -> Module:
    """Find the module owning start.

    Walks from start (a file or directory) up through its ancestors.
    The first directory holding a marker file wins; gop.mod is checked
    before go.mod.

    Args:
        start: File or directory inside the module

    Returns:
        Module read from the nearest marker file

    Raises:
        ModuleResolutionError: If start does not exist or no marker is found
        ModFileError: If the nearest marker file is malformed

    Example:
        >>> find_module(Path("app/cmd/server/main.go"))
        Module(path='example.com/app', dir=PosixPath('app'), ...)
    """
    start = Path(start)
    if not start.exists():
        raise ModuleResolutionError(start, "path does not exist")

    directory = start.absolute()
    if not directory.is_dir():
        directory = directory.parent

    for candidate_dir in (directory, *directory.parents):
        mod_file = find_mod_file(candidate_dir)
        if mod_file is not None:
            logger.debug("module marker for %s: %s", start, mod_file)
            return parse_mod_file(mod_file)

    raise ModuleResolutionError(start, f"no {' or '.join(MOD_FILE_NAMES)} found in any parent directory")


def find_mod_file(directory: Path) -> Path | None:
    """Marker file directly inside directory, or None.

    A candidate that cannot be stat'ed counts as absent.
    """
    for name in MOD_FILE_NAMES:
        candidate = directory / name
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue
    return None
