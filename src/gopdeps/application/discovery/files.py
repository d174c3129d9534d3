"""Source file discovery within a module tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gopdeps.application.discovery.modules import find_mod_file
from gopdeps.domain.model.configuration import ScanConfig

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_TEST_SUFFIX = "_test"


def iter_source_files(root: Path, config: ScanConfig | None = None) -> Iterator[Path]:
    """Yield source files under root in deterministic order.

    Files of a directory come first (sorted by name), then its
    subdirectories (sorted by name). Symlinked directories are not
    followed. A directory that cannot be listed is logged and skipped.

    Args:
        root: Directory to scan
        config: Scan configuration. Uses defaults if None.

    Yields:
        Paths of files to parse

    Raises:
        ValueError: If root is not a directory
    """
    root = Path(root)
    if not root.is_dir():
        raise ValueError(f"root must be a directory: {root}")

    yield from _walk(root, config or ScanConfig())


def is_source_file(path: Path, config: ScanConfig) -> bool:
    """Check suffix and test-file filter for one file name."""
    if path.suffix not in config.extensions:
        return False
    if not config.include_tests and path.stem.endswith(_TEST_SUFFIX):
        return False
    return True


def is_ignored_name(name: str) -> bool:
    """Names the go tool ignores: leading '.' or '_'."""
    return name.startswith((".", "_"))


def _walk(directory: Path, config: ScanConfig) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning("skipping unreadable directory %s: %s", directory, e.strerror or e)
        return

    subdirs: list[Path] = []
    for entry in entries:
        if config.skip_hidden and is_ignored_name(entry.name):
            continue

        if entry.is_dir():
            if config.recursive and not entry.is_symlink() and entry.name not in config.exclude_dirs:
                subdirs.append(entry)
        elif entry.is_file() and is_source_file(entry, config):
            yield entry

    for subdir in subdirs:
        if config.skip_nested_modules and find_mod_file(subdir) is not None:
            logger.info("skipping nested module at %s", subdir)
            continue
        yield from _walk(subdir, config)
