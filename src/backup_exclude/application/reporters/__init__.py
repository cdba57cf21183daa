"""Reporters for match results.

PlainTextReporter and JsonReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from backup_exclude.application.reporters.console import ConsoleConfig, ConsoleReporter
from backup_exclude.application.reporters.json import JsonReporter
from backup_exclude.application.reporters.plain_text import PlainTextReporter
from backup_exclude.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
]
