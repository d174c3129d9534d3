"""Reporters for scan results.

Every reporter returns str; the caller decides where it goes.
Users can plug in their own by satisfying ReporterProtocol.
"""

from gopdeps.application.reporters.console import ConsoleConfig, ConsoleReporter
from gopdeps.application.reporters.json_reporter import JsonReporter
from gopdeps.application.reporters.plain_text import PlainTextReporter
from gopdeps.domain.ports.reporter import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
