"""Infrastructure layer: header parsing, mod files, logging setup."""

from gopdeps.infrastructure.adapters import GoHeaderParser, parse_mod_file

__all__ = [
    "GoHeaderParser",
    "parse_mod_file",
]
