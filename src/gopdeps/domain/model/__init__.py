"""Domain model: value objects and entities."""

from gopdeps.domain.model.classification import classify_import
from gopdeps.domain.model.configuration import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXTENSIONS,
    HeaderParserConfig,
    ScanConfig,
)
from gopdeps.domain.model.enums import DependencyKind
from gopdeps.domain.model.fileset import FileSet, SourceFile
from gopdeps.domain.model.import_spec import ImportSpec
from gopdeps.domain.model.location import Location
from gopdeps.domain.model.module import Module, is_within_module
from gopdeps.domain.model.scan_result import FileFailure, ScanResult
from gopdeps.domain.model.token import Token, TokenKind

__all__ = [
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
    "DEFAULT_EXTENSIONS",
    "DEFAULT_EXCLUDE_DIRS",
    # Functions
    "classify_import",
    "is_within_module",
]
