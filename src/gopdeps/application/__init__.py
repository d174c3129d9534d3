"""Application layer: discovery, services and reporters."""

from gopdeps.application.discovery import find_module, iter_source_files
from gopdeps.application.services import ImportsParser, merge_imports, scan_module

__all__ = [
    "ImportsParser",
    "find_module",
    "iter_source_files",
    "merge_imports",
    "scan_module",
]
