"""Domain exceptions.

Two families:
- GopDepsError: recoverable, reported to the caller
- GopDepsFault: broken invariant, never caught by library code
"""

from gopdeps.domain.exceptions.base import GopDepsError, GopDepsFault
from gopdeps.domain.exceptions.fault import LiteralDecodeFault
from gopdeps.domain.exceptions.module import ModFileError, ModuleResolutionError
from gopdeps.domain.exceptions.parsing import HeaderSyntaxError, ParsingError, SourceReadError

__all__ = [
    "GopDepsError",
    "GopDepsFault",
    "ParsingError",
    "HeaderSyntaxError",
    "SourceReadError",
    "ModuleResolutionError",
    "ModFileError",
    "LiteralDecodeFault",
]
