"""Dependency classification by import path.

Go convention: standard library paths have no dot in their first
element (fmt, net/http, crypto/tls). Module-hosted paths start with
a domain name (example.com/app, github.com/user/repo).
"""

from __future__ import annotations

from gopdeps.domain.model.enums import DependencyKind
from gopdeps.domain.model.module import is_within_module


def classify_import(import_path: str, module_path: str) -> DependencyKind:
    """Classify a canonical import path relative to the scanned module.

    Algorithm:
    1. Equal to module_path or below it → MODULE
    2. First path element has no dot → STANDARD
    3. Otherwise → EXTERNAL

    Module check comes first so a dotless module path (e.g. "myapp")
    still classifies its own packages as MODULE.

    Args:
        import_path: Canonical import path
        module_path: Root import path of the scanned module

    Returns:
        DependencyKind for import_path

    Raises:
        ValueError: If import_path or module_path is empty
    """
    if not import_path:
        raise ValueError("import_path must not be empty")
    if not module_path:
        raise ValueError("module_path must not be empty")

    if is_within_module(import_path, module_path):
        return DependencyKind.MODULE

    first = import_path.split("/", 1)[0]
    if "." not in first:
        return DependencyKind.STANDARD

    return DependencyKind.EXTERNAL
