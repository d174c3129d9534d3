"""Application services.

ImportsParser accumulates one session's dependency set;
scan_module runs it over a whole module tree.
"""

from gopdeps.application.services.imports_parser import ImportsParser, merge_imports
from gopdeps.application.services.scanner import scan_module

__all__ = [
    "ImportsParser",
    "merge_imports",
    "scan_module",
]
