"""Import path canonicalization.

Relative imports ("./util", "../shared") are joined onto the owning
module's root path with slash-path semantics. Any other path is
already canonical and passes through unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gopdeps.domain.model.module import is_within_module

if TYPE_CHECKING:
    from gopdeps.domain.ports.module_context import ModuleContext

logger = logging.getLogger(__name__)


def is_relative_import(pkg_path: str) -> bool:
    """Check if an import path is relative to the importing module."""
    return pkg_path.startswith(".")


def canonicalize(pkg_path: str, module: ModuleContext) -> str:
    """Map a raw import path to its canonical dependency identifier.

    Never fails. A relative path that climbs above the module root
    still yields a well-defined path; a warning is logged.

    Args:
        pkg_path: Decoded import path
        module: Module owning the importing file

    Returns:
        Canonical import path

    Examples:
        "fmt", module "example.com/app"          → "fmt"
        "./util", module "example.com/app"       → "example.com/app/util"
        "../sibling", module "example.com/a/pkg" → "example.com/a/sibling"
    """
    if not is_relative_import(pkg_path):
        return pkg_path

    resolved = join_path(module.path, pkg_path)

    if not is_within_module(resolved, clean_path(module.path)):
        logger.warning(
            "relative import %r escapes module %s (resolved to %r)",
            pkg_path,
            module.path,
            resolved,
        )

    return resolved


def join_path(*elems: str) -> str:
    """Join slash-separated path elements and clean the result.

    Empty elements are ignored. All-empty input yields "".
    """
    non_empty = [e for e in elems if e]
    if not non_empty:
        return ""
    return clean_path("/".join(non_empty))


def clean_path(path: str) -> str:
    """Shortest slash path equivalent to path, by lexical processing only.

    Rules:
    1. Replace multiple slashes with a single slash
    2. Eliminate each . element
    3. Eliminate each inner .. element and the element before it
    4. Eliminate .. elements that begin a rooted path
    Leading .. elements of an unrooted path are kept.
    An empty result becomes ".".
    """
    if not path:
        return "."

    rooted = path.startswith("/")
    parts: list[str] = []

    for elem in path.split("/"):
        if elem in ("", "."):
            continue
        if elem == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(elem)

    cleaned = "/".join(parts)
    if rooted:
        return f"/{cleaned}"
    return cleaned or "."
