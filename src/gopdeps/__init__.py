"""gopdeps - canonical import sets of Go / Go+ modules."""

__version__ = "0.1.0"

from gopdeps.application.services import ImportsParser, merge_imports, scan_module
from gopdeps.domain.model import FileSet, Module

__all__ = ["FileSet", "ImportsParser", "Module", "merge_imports", "scan_module", "__version__"]
