"""Reporting adapters - Implementations of RouteReporterPort.

Available implementations:
- ConsoleRouteReporter: Plain-text output to a stream
"""

from .console_reporter import ConsoleRouteReporter

__all__ = ["ConsoleRouteReporter"]
