"""gopdeps domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, bisect, types, codecs
"""

from gopdeps.domain.exceptions import (
    GopDepsError,
    GopDepsFault,
    HeaderSyntaxError,
    LiteralDecodeFault,
    ModFileError,
    ModuleResolutionError,
    ParsingError,
    SourceReadError,
)
from gopdeps.domain.model import (
    DependencyKind,
    FileFailure,
    FileSet,
    HeaderParserConfig,
    ImportSpec,
    Location,
    Module,
    ScanConfig,
    ScanResult,
    SourceFile,
    Token,
    TokenKind,
    classify_import,
)
from gopdeps.domain.ports import (
    ModuleContext,
    ReporterProtocol,
    SourceParserPort,
)

__all__ = [
    # Exceptions
    "GopDepsError",
    "GopDepsFault",
    "ParsingError",
    "HeaderSyntaxError",
    "SourceReadError",
    "ModuleResolutionError",
    "ModFileError",
    "LiteralDecodeFault",
    # Enums
    "DependencyKind",
    "TokenKind",
    # Value objects
    "Location",
    "Token",
    "ImportSpec",
    "FileFailure",
    # Entities
    "Module",
    "FileSet",
    "SourceFile",
    "ScanResult",
    # Configuration
    "HeaderParserConfig",
    "ScanConfig",
    # Functions
    "classify_import",
    # Ports
    "ModuleContext",
    "SourceParserPort",
    "ReporterProtocol",
]
