"""Reporters for CheckResult output.

- PlainTextReporter: one line per violation (stdlib)
- ConsoleReporter: grouped, colored output (rich)
- JSONReporter: machine-readable output (stdlib)
"""

from structcheck.application.reporters._base import PASSED_MESSAGE, BaseReporter, summary_line
from structcheck.application.reporters.console import ConsoleReporter
from structcheck.application.reporters.json_reporter import JSONReporter
from structcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PASSED_MESSAGE",
    "summary_line",
]
