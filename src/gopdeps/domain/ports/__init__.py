"""Domain ports (interfaces/protocols)."""

from gopdeps.domain.ports.module_context import ModuleContext
from gopdeps.domain.ports.reporter import ReporterProtocol
from gopdeps.domain.ports.source_parser import SourceParserPort

__all__ = [
    "ModuleContext",
    "SourceParserPort",
    "ReporterProtocol",
]
