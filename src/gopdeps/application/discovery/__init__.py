"""Discovery of the owning module and of its source files."""

from gopdeps.application.discovery.files import is_ignored_name, is_source_file, iter_source_files
from gopdeps.application.discovery.modules import find_mod_file, find_module

__all__ = [
    "find_mod_file",
    "find_module",
    "is_ignored_name",
    "is_source_file",
    "iter_source_files",
]
