"""Reporters for classification results.

ConsoleReporter renders with rich, JsonReporter with stdlib json.
Users can implement custom reporters (see ReporterProtocol).
"""

from exportcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from exportcheck.application.reporters.json_reporter import JsonReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
]
