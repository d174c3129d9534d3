"""Header analysis: tokenizing, literal decoding, path canonicalization."""

from gopdeps.infrastructure.analyzers.canonical import (
    canonicalize,
    clean_path,
    is_relative_import,
    join_path,
)
from gopdeps.infrastructure.analyzers.lexer import KEYWORDS, Scanner
from gopdeps.infrastructure.analyzers.literal import decode_string_literal, unquote

__all__ = [
    "KEYWORDS",
    "Scanner",
    "canonicalize",
    "clean_path",
    "decode_string_literal",
    "is_relative_import",
    "join_path",
    "unquote",
]
