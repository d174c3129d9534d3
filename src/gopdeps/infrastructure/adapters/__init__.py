"""Infrastructure adapters: file-backed implementations of domain ports."""

from gopdeps.infrastructure.adapters.header_parser import GoHeaderParser, is_valid_import_path
from gopdeps.infrastructure.adapters.modfile import MOD_FILE_NAMES, parse_mod_file

__all__ = [
    "GoHeaderParser",
    "MOD_FILE_NAMES",
    "is_valid_import_path",
    "parse_mod_file",
]
