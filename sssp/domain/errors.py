"""Typed domain errors for the shortest-path router.

Lookups and row parsing never fall back to a default value: a missing
vertex or a malformed weight is reported with one of these errors so
the caller can tell it apart from a legitimate result (a weight of
zero, an unreachable vertex).

All errors inherit from SSSPError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SSSPError(Exception):
    """Base error for the shortest-path domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(SSSPError):
    """The row source could not be read.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class VertexNotFoundError(SSSPError):
    """A vertex name is not present in the graph.

    Attributes:
        vertex_name: The name that was looked up
    """

    vertex_name: str = ""


@dataclass
class RowParseError(SSSPError):
    """A (source, destination, weight) row could not be interpreted.

    Raised for weights that are not non-negative integers and for empty
    vertex names.

    Attributes:
        row_number: 1-based position of the row in its source, if known
        field_name: Which field failed ("source", "destination", "weight")
        raw_value: The offending value as read
    """

    row_number: Optional[int] = None
    field_name: str = ""
    raw_value: Any = None


@dataclass
class InvariantViolationError(SSSPError):
    """The predecessor links of a finished search do not form a tree.

    Signals a relaxation bug rather than bad input.

    Attributes:
        vertex_name: The vertex whose predecessor chain is broken
    """

    vertex_name: str = ""


@dataclass
class NoRouteFoundError(SSSPError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex name
        destination: Destination vertex name
    """

    source: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(SSSPError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
